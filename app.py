#!/usr/bin/env python3
"""
Run script for the savings bank service

Create a .env first with `python generate_env.py`.
"""

import argparse
import os
import sys
from dotenv import load_dotenv

# Before the package import: the logger reads its settings at import time
load_dotenv()

from savingbank import create_app  # noqa: E402
from savingbank.build import build_database  # noqa: E402
from savingbank.logger import get_logger  # noqa: E402

logger = get_logger("savingbank.run")


def _env_flag(name, default='False'):
    return os.environ.get(name, default).lower() in ('true', '1', 'yes', 'on')


def main():
    parser = argparse.ArgumentParser(description='Fixed-term savings bank')
    parser.add_argument('--build-only', action='store_true',
                        help='Create tables, id sequences and component rows, then exit')
    args = parser.parse_args()

    app = create_app()
    build_database(app)
    if args.build_only:
        logger.info("Build completed. Exiting without starting web server.")
        return 0

    debug_mode = _env_flag('FLASK_DEBUG')
    use_reloader = _env_flag('USE_RELOADER')
    host = os.environ.get('FLASK_HOST', '127.0.0.1')
    port = int(os.environ.get('FLASK_PORT', '5000'))
    if debug_mode:
        logger.warning("DEBUG MODE ENABLED - Do not use in production!")

    logger.info(f"Starting server on {host}:{port}")
    app.run(debug=debug_mode, host=host, port=port, use_reloader=use_reloader)
    return 0


if __name__ == '__main__':
    sys.exit(main())
