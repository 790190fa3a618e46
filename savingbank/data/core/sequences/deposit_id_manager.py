"""
Id space shared by deposits and their ownership units
"""

from savingbank.data.core.virtual_sequence_generator import VirtualSequenceGenerator


class DepositIDManager(VirtualSequenceGenerator):
    """
    Owned by the deposit ledger. The ownership registry never generates ids of
    its own; it is handed the value returned here.
    """

    table_name = "_sequence_deposit_id"
