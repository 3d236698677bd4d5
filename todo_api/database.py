from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool
from fastapi import Request

Base = declarative_base()

_IN_MEMORY_URLS = ("sqlite://", "sqlite:///:memory:")


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def make_engine(database_url: str):
    # Only apply sqlite-specific connect_args when using sqlite
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    kwargs = {}
    if database_url in _IN_MEMORY_URLS:
        # every session must see the same in-memory database
        kwargs["poolclass"] = StaticPool

    # Enable pool_pre_ping to avoid stale connections (useful for cloud DBs like Neon)
    engine = create_engine(
        database_url,
        connect_args=connect_args,
        pool_pre_ping=True,
        **kwargs,
    )
    if is_sqlite:
        # SQLite ignores FOREIGN KEY constraints unless asked per connection
        event.listen(engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def make_session_factory(engine):
    return sessionmaker(autoflush=False, bind=engine)


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
