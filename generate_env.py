#!/usr/bin/env python3
"""
Writes a .env file for the savings bank: SECRET_KEY, the admin address and a
fresh admin API key, database URL and component addresses.

Usage:
    python generate_env.py                        # prompt before overwriting
    python generate_env.py --force                # overwrite existing .env
    python generate_env.py --dev                  # predictable values
    python generate_env.py --admin-address ops    # admin role holder
"""

import argparse
import os
import secrets
import sys
from pathlib import Path

DEV_SECRET_KEY = "dev-secret-key-DO-NOT-USE-IN-PRODUCTION"
DEV_ADMIN_API_KEY = "dev-admin-api-key"

TEMPLATE = """# Savings bank environment configuration
# Keep this file secret. It holds the admin API key.

SECRET_KEY={secret_key}
FLASK_DEBUG=False
USE_RELOADER=False
FLASK_HOST=127.0.0.1
FLASK_PORT=5000

DATABASE_URL={database_url}

SAVINGBANK_ADMIN_ADDRESS={admin_address}
SAVINGBANK_LEDGER_ADDRESS=savingbank:ledger
SAVINGBANK_VAULT_ADDRESS=savingbank:vault
# Registered as an account by `python app.py --build-only`
SAVINGBANK_ADMIN_API_KEY="{admin_api_key}"

RATELIMIT_ENABLED=True

SAVINGBANK_LOG_DIR=logs
SAVINGBANK_CONSOLE_LOG_LEVEL=INFO
"""


class EnvGenerator:
    """Generate environment configuration"""

    def __init__(self, dev_mode=False, admin_address='admin', env_file=None):
        self.dev_mode = dev_mode
        self.admin_address = admin_address
        self.env_file = Path(env_file) if env_file else Path(__file__).parent / '.env'

    def credentials(self):
        return {
            'secret_key': DEV_SECRET_KEY if self.dev_mode else secrets.token_hex(64),
            'admin_api_key': DEV_ADMIN_API_KEY if self.dev_mode else secrets.token_urlsafe(32),
            'database_url': "sqlite:///instance/savingbank.db",
            'admin_address': self.admin_address,
        }

    def write(self, values):
        self.env_file.write_text(TEMPLATE.format(**values))
        # Owner read/write only
        os.chmod(self.env_file, 0o600)

    def generate(self, force=False):
        if self.env_file.exists() and not force:
            answer = input(f"{self.env_file} exists. Overwrite? (yes/no): ").strip().lower()
            if answer not in ('yes', 'y'):
                print("Aborted. Existing .env file was not modified.")
                return False

        values = self.credentials()
        self.write(values)
        print(f"Created: {self.env_file}")
        print(f"Admin address: {values['admin_address']}")
        print(f"Admin API key: {values['admin_api_key']}  (send it as X-Api-Key)")
        print("Next: python app.py --build-only && python app.py")
        if self.dev_mode:
            print("DEV MODE: predictable values, do not use in production!")
        return True


def main():
    parser = argparse.ArgumentParser(description='Generate .env configuration for the savings bank')
    parser.add_argument('--force', '-f', action='store_true',
                        help='Overwrite existing .env file without prompting')
    parser.add_argument('--dev', '-d', action='store_true',
                        help='Development mode: predictable values (NOT FOR PRODUCTION!)')
    parser.add_argument('--admin-address', default='admin',
                        help='Address that holds the admin role (default: admin)')
    args = parser.parse_args()

    generator = EnvGenerator(dev_mode=args.dev, admin_address=args.admin_address)
    sys.exit(0 if generator.generate(force=args.force) else 1)


if __name__ == '__main__':
    main()
