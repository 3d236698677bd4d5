"""Create an Admin-role user directly in the database.

Admins cannot be created through the public API; run this out of band:

    SECRET_KEY=... DATABASE_URL=... python tools/create_admin.py alice-admin s3cret!
"""
import argparse
import sys
from pathlib import Path

# ensure project root is on sys.path
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from todo_api.config import load_settings
from todo_api.database import Base, make_engine, make_session_factory
from todo_api.errors import ServiceError
from todo_api.logging_setup import setup_logging
from todo_api.models.user import Role
from todo_api.services.accounts import create_user
from todo_api.store.sql import SqlRecordStore


def main(argv=None):
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("username")
    parser.add_argument("password")
    args = parser.parse_args(argv)

    settings = load_settings()
    setup_logging(settings.log_level)
    engine = make_engine(settings.database_url)
    Base.metadata.create_all(bind=engine)

    db = make_session_factory(engine)()
    try:
        user = create_user(SqlRecordStore(db), args.username, args.password, Role.ADMIN)
    except ServiceError as e:
        print(f"error: {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()

    print(f"created admin {user.username} (id={user.id})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
