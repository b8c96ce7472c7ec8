#!/usr/bin/env python3
"""
Print a bcrypt hash for the admin password.

Put the output in ADMIN_PASSWORD_HASH so the plain password never has to
live in the environment:

    python create_admin.py
    export ADMIN_PASSWORD_HASH='$2b$12$...'
"""

import getpass
import sys
from flask_bcrypt import generate_password_hash


def main():
    password = getpass.getpass('Admin password: ')
    if len(password) < 8:
        print('❌ Password must be at least 8 characters.')
        sys.exit(1)
    if getpass.getpass('Repeat password: ') != password:
        print('❌ Passwords do not match.')
        sys.exit(1)

    print('✅ Set this in your environment:')
    print(f"ADMIN_PASSWORD_HASH='{generate_password_hash(password).decode('utf-8')}'")


if __name__ == '__main__':
    main()
