# handout_tracker/create_admin_hash.py
# Usage: create-admin-hash <password> [--username admin] [--role admin]
import argparse
import sys

from handout_tracker.core.config import ROLES
from handout_tracker.core.security import MAX_PASSWORD_BYTES, hash_password, password_too_long

MIN_PASSWORD_LENGTH = 6

INSERT_SQL = """
INSERT INTO admins (username, password_hash, role, active, created_at, updated_at)
VALUES ('{username}', '{hash}', '{role}', true, NOW(), NOW());
"""


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate a bcrypt hash and INSERT statement for an admin")
    parser.add_argument("password")
    parser.add_argument("--username", default="admin")
    parser.add_argument("--role", default="admin", choices=ROLES)
    parser.add_argument("--rounds", type=int, default=14)
    args = parser.parse_args(argv)

    if len(args.password) < MIN_PASSWORD_LENGTH:
        print(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long", file=sys.stderr)
        return 1
    if password_too_long(args.password):
        print(f"Password must be at most {MAX_PASSWORD_BYTES} bytes long", file=sys.stderr)
        return 1

    hashed = hash_password(args.password, args.rounds)
    print(f"Hash: {hashed}")
    print(INSERT_SQL.format(username=args.username.replace("'", "''"), hash=hashed, role=args.role))
    return 0


if __name__ == "__main__":
    sys.exit(main())
