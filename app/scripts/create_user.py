"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user NAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user "Ada Admin" admin@example.com your-secure-password admin
"""
import argparse
import logging
import sys

from sqlalchemy.exc import IntegrityError

from app.core.database import SessionLocal
from app.core.logging import configure_logging
from app.core.security import NAME_MAX_LEN, NAME_MIN_LEN, PASSWORD_MAX_LEN, PASSWORD_MIN_LEN
from app.schemas.user import DEFAULT_ROLE, Role
from app.services.user_store import UserStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a dashboard user without going through the API.")
    parser.add_argument("name", help=f"Display name ({NAME_MIN_LEN}-{NAME_MAX_LEN} chars)")
    parser.add_argument("email", help="Email (stored lower-cased)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=DEFAULT_ROLE.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)
    configure_logging()

    name = args.name.strip()
    if not (NAME_MIN_LEN <= len(name) <= NAME_MAX_LEN):
        print("Invalid name length.", file=sys.stderr)
        return 1
    if "@" not in args.email:
        print("Invalid email.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        users = UserStore(db)
        if users.find_by_email(args.email):
            print(f"User '{args.email}' already exists.", file=sys.stderr)
            return 1
        try:
            user = users.create(name=name, email=args.email, password=args.password, role=args.role)
        except IntegrityError:
            print(f"User '{args.email}' already exists.", file=sys.stderr)
            return 1
        logger.info("Created user id=%s role=%s", user.id, user.role.value)
        print(f"Created user '{user.email}' with role '{user.role.value}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
