"""
Create a role from the command line. Run from project root:
  python -m app.scripts.create_role NAME
"""
import argparse
import logging
import sys

from app.core.database import SessionLocal
from app.services.errors import UserStoreError
from app.services.roles import create_role

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a role users can be assigned to.")
    parser.add_argument("name", help="Role name (unique, max 50 chars)")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        role = create_role(db, args.name)
        print(f"Created role {role.id} '{role.name}'.")
        return 0
    except UserStoreError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
