import json
import logging
import os
import threading
from pathlib import Path


ROOT_LOGGER_NAME = "savingbank"

# LogRecord attributes written to every line, keyed by their JSON name
RECORD_FIELDS = (
    ("timestamp", "asctime"),
    ("level", "levelname"),
    ("logger", "name"),
    ("module", "module"),
    ("function", "funcName"),
    ("line", "lineno"),
    ("message", "message"),
)

# Anything else on the record came from logger.x(..., extra={...})
_STANDARD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line.

    Values passed through ``extra`` (deposit_id, caller, ...) are added as
    top-level keys next to the standard fields.
    """

    default_time_format = "%Y-%m-%dT%H:%M:%S"
    default_msec_format = "%s.%03dZ"

    def format(self, record) -> str:
        record.message = record.getMessage()
        record.asctime = self.formatTime(record)

        line = {key: getattr(record, attr) for key, attr in RECORD_FIELDS}
        for attr, value in vars(record).items():
            if attr not in _STANDARD_ATTRS and not attr.startswith("_"):
                line.setdefault(attr, value)

        if record.exc_info and not record.exc_text:
            record.exc_text = self.formatException(record.exc_info)
        if record.exc_text:
            line["exc_info"] = record.exc_text
        if record.stack_info:
            line["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(line, default=str)


class SingletonLogger:
    """
    Configures the "savingbank" logger tree once per process.

    Module loggers are children of the root ("savingbank.ledger",
    "savingbank.vault", ...) and share its handlers:

    - <SAVINGBANK_LOG_DIR>/savingbank.log  INFO and up, truncated per run
    - <SAVINGBANK_LOG_DIR>/errors.log      ERROR and up, truncated per run
    - console at SAVINGBANK_CONSOLE_LOG_LEVEL (default INFO)
    """
    _instance = None
    _lock = threading.Lock()
    _root = None

    def __new__(cls):
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
        return cls._instance

    def get_logger(self, name: str = ROOT_LOGGER_NAME) -> logging.Logger:
        with self._lock:
            if self._root is None:
                type(self)._root = self._configure()

        if name == ROOT_LOGGER_NAME:
            return self._root
        if not name.startswith(ROOT_LOGGER_NAME + "."):
            name = f"{ROOT_LOGGER_NAME}.{name}"
        return logging.getLogger(name)

    @staticmethod
    def _configure() -> logging.Logger:
        root = logging.getLogger(ROOT_LOGGER_NAME)
        root.setLevel(logging.DEBUG)
        root.propagate = False
        root.handlers.clear()

        formatter = JsonFormatter()
        logs_dir = Path(os.environ.get("SAVINGBANK_LOG_DIR", "logs"))
        logs_dir.mkdir(parents=True, exist_ok=True)
        console_level = os.environ.get("SAVINGBANK_CONSOLE_LOG_LEVEL", "INFO").upper()

        handlers = (
            (logging.FileHandler(logs_dir / "savingbank.log", mode='w', encoding='utf-8'), logging.INFO),
            (logging.FileHandler(logs_dir / "errors.log", mode='w', encoding='utf-8'), logging.ERROR),
            (logging.StreamHandler(), logging.getLevelName(console_level)),
        )
        for handler, level in handlers:
            handler.setLevel(level)
            handler.setFormatter(formatter)
            root.addHandler(handler)

        return root


def get_logger(name: str = ROOT_LOGGER_NAME) -> logging.Logger:
    """
    Get a logger from the singleton-configured tree.

    Args:
        name (str): Logger name, e.g. "savingbank.ledger"

    Returns:
        logging.Logger
    """
    return SingletonLogger().get_logger(name)
