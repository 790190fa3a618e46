"""
Data layer for the savings bank.

Models:
- core: Account, LedgerEvent, id sequences
- assets: fungible asset balances and allowances
- savings: SavingPlan, Deposit, ownership units, component singletons
"""


def build_models():
    """
    Import every model so it is registered with SQLAlchemy before create_all()
    """
    import savingbank.data.core.account  # noqa: F401
    import savingbank.data.core.ledger_event  # noqa: F401
    import savingbank.data.assets.asset_balance  # noqa: F401
    import savingbank.data.savings.saving_plan  # noqa: F401
    import savingbank.data.savings.deposit  # noqa: F401
    import savingbank.data.savings.ownership_unit  # noqa: F401
    import savingbank.data.savings.singletons  # noqa: F401
