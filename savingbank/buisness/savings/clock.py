"""
Clock sources

Time is supplied from outside the ledger as whole Unix seconds. Maturity
comparisons never rely on anything finer than one second.
"""

import time


class SystemClock:
    """Wall-clock seconds"""

    def __call__(self) -> int:
        return int(time.time())


class ManualClock:
    """Clock that only moves when told to; used for simulations and tests"""

    def __init__(self, start: int = 1_700_000_000):
        self.now = int(start)

    def __call__(self) -> int:
        return self.now

    def advance(self, seconds: int) -> int:
        self.now += int(seconds)
        return self.now

    def advance_days(self, days: int) -> int:
        return self.advance(days * 86_400)

    def set(self, timestamp: int) -> int:
        if timestamp < self.now:
            raise ValueError("Clock cannot move backwards")
        self.now = int(timestamp)
        return self.now
