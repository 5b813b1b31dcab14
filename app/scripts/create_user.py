"""
Create a user from the command line. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD FULLNAME ROLE_ID
Example:
  python -m app.scripts.create_user ann@example.com 's3cret-pass' "Ann Lee" 1
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.services.errors import UserStoreError
from app.services.users import create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a user record.")
    parser.add_argument("email", help="Email (unique, max 100 chars)")
    parser.add_argument("password", help="Password (max 100 chars; stored hashed)")
    parser.add_argument("fullname", help="Full name (max 100 chars)")
    parser.add_argument("role_id", type=int, help="Id of an existing role")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        user = create_user(
            db,
            email=args.email,
            password=args.password,
            fullname=args.fullname,
            role_id=args.role_id,
        )
        print(f"Created user {user.id} '{user.email}' with role {user.role_id}.")
        return 0
    except UserStoreError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
