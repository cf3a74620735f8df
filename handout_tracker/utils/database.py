# handout_tracker/utils/database.py
import logging

from fastapi import Request
from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import DBAPIError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from handout_tracker.core.config import Settings

logger = logging.getLogger(__name__)

# SQLSTATE for foreign_key_violation / unique_violation
FOREIGN_KEY_VIOLATION = "23503"
UNIQUE_VIOLATION = "23505"

Base = declarative_base()


def build_engine(settings: Settings) -> Engine:
    url = settings.database_url

    if url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection so every session sees the same in-memory db
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, echo=False, future=True, **kwargs)
        enable_sqlite_foreign_keys(engine)
        return engine

    engine = create_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # drops dead connections automatically
        pool_size=5,
        max_overflow=10,
        future=True,
    )

    if settings.statement_timeout_ms > 0:
        @event.listens_for(engine, "connect")
        def _set_statement_timeout(dbapi_conn, _record):
            cur = dbapi_conn.cursor()
            cur.execute(f"SET statement_timeout = {int(settings.statement_timeout_ms)}")
            cur.close()

    return engine


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    # SQLite ignores REFERENCES clauses unless asked per connection
    @event.listens_for(engine, "connect")
    def _fk_pragma(dbapi_conn, _record):
        cur = dbapi_conn.cursor()
        cur.execute("PRAGMA foreign_keys=ON")
        cur.close()


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


def ping(db: Session) -> bool:
    return db.execute(text("SELECT 1")).scalar() == 1


def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def _sqlstate(err: DBAPIError):
    orig = getattr(err, "orig", None)
    return getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)


def is_foreign_key_violation(err: DBAPIError) -> bool:
    code = _sqlstate(err)
    if code:
        return code == FOREIGN_KEY_VIOLATION
    return "foreign key" in str(getattr(err, "orig", err)).lower()


def is_unique_violation(err: DBAPIError) -> bool:
    code = _sqlstate(err)
    if code:
        return code == UNIQUE_VIOLATION
    message = str(getattr(err, "orig", err)).lower()
    return "duplicate" in message or "unique" in message
