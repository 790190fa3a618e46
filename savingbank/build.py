#!/usr/bin/env python3
"""
Database build for the savings bank
Creates tables, id counters and the singleton component rows
"""

from savingbank import create_app, db
from savingbank.logger import get_logger

logger = get_logger("savingbank.build")


def create_sequences():
    """Create the deposit/unit and plan id counters if missing"""
    from savingbank.data.core.sequences import DepositIDManager, PlanIDManager

    DepositIDManager.ensure_table()
    PlanIDManager.ensure_table()
    logger.info("Id sequences ready")


def verify_critical_data():
    """
    Verify that the singleton rows are present

    Returns:
        bool: True if protocol config, vault and registry rows all exist
    """
    from savingbank.data.savings.singletons import ProtocolConfig, VaultState, RegistryState

    missing = [model.__name__ for model in (ProtocolConfig, VaultState, RegistryState) if model.get() is None]
    if missing:
        logger.warning(f"Singleton rows missing: {', '.join(missing)}")
        return False
    logger.info("Critical data verification passed")
    return True


def insert_critical_data(config):
    """
    Insert the singleton rows, then bind the vault caller and the registry
    minter to the ledger address through the components' one-time bind
    operations. Once bound, neither binding can change.

    Args:
        config: Flask app config
    """
    from savingbank.data.savings.singletons import ProtocolConfig, VaultState, RegistryState
    from savingbank.buisness.savings.asset_ledger import AssetLedger
    from savingbank.buisness.savings.custody_vault import CustodyVault
    from savingbank.buisness.savings.ownership_registry import OwnershipRegistry

    if verify_critical_data():
        logger.info("Critical data already present, skipping insertion")
        return

    ledger_address = config['SAVINGBANK_LEDGER_ADDRESS']
    try:
        ProtocolConfig.find_or_create_from_dict({
            'id': ProtocolConfig.SINGLETON_ID,
            'admin': config['SAVINGBANK_ADMIN_ADDRESS'],
            'ledger_address': ledger_address,
            'paused': False,
            'penalty_receiver': None,
        }, lookup_fields=['id'], commit=False)

        VaultState.find_or_create_from_dict({
            'id': VaultState.SINGLETON_ID,
            'custody_address': config['SAVINGBANK_VAULT_ADDRESS'],
            'bound_caller': None,
            'balance': 0,
        }, lookup_fields=['id'], commit=False)

        RegistryState.find_or_create_from_dict({
            'id': RegistryState.SINGLETON_ID,
            'name': config['SAVINGBANK_CERTIFICATE_NAME'],
            'symbol': config['SAVINGBANK_CERTIFICATE_SYMBOL'],
            'minter': None,
        }, lookup_fields=['id'], commit=False)

        CustodyVault(AssetLedger()).bind(ledger_address)
        OwnershipRegistry().bind_minter(ledger_address)

        db.session.commit()
        logger.info(f"Vault and registry bound to ledger {ledger_address}")

    except Exception as e:
        db.session.rollback()
        error_msg = f"Critical data insertion failed: {e}"
        logger.error(error_msg)
        raise RuntimeError(error_msg)


def insert_admin_account(config):
    """Register the admin's API key when one is configured"""
    from savingbank.data.core.account import Account

    api_key = config.get('SAVINGBANK_ADMIN_API_KEY')
    if not api_key:
        logger.info("No SAVINGBANK_ADMIN_API_KEY set, admin account not created")
        return

    address = config['SAVINGBANK_ADMIN_ADDRESS']
    if Account.query.filter_by(address=address).first():
        logger.debug(f"Admin account {address} already present")
        return

    Account.register(address, api_key=api_key)
    db.session.commit()
    logger.info(f"Admin account registered for {address}")


def build_database(app=None):
    """
    Main build orchestrator

    Args:
        app: Flask app to build against (a new one is created if omitted)

    Returns:
        Flask: The app the database was built for
    """
    app = app or create_app()

    with app.app_context():
        logger.info("Starting database build")
        db.create_all()
        create_sequences()
        insert_critical_data(app.config)
        insert_admin_account(app.config)
        logger.info("Database build completed")

    return app
