from __future__ import annotations

from pathlib import Path
import logging
from typing import Generator
from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.engine.url import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session
from sqlalchemy.pool import StaticPool

from .settings import get_settings

logger = logging.getLogger(__name__)

# ---- Configuration ----
DB_URL = get_settings().DB_URL


def _is_memory(url: str) -> bool:
    u = make_url(url)
    return u.get_backend_name() == "sqlite" and (not u.database or u.database == ":memory:")


def _ensure_sqlite_dir(url: str) -> None:
    u = make_url(url)
    if u.get_backend_name() == "sqlite" and u.database and u.database != ":memory:":
        Path(u.database).parent.mkdir(parents=True, exist_ok=True)


# ---- SQLite Optimization ----
def _configure_sqlite_engine(engine: Engine) -> None:
    """Configure SQLite for concurrent readers and a background writer"""
    @event.listens_for(engine, "connect")
    def _set_sqlite_pragmas(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA synchronous=NORMAL")
            cursor.execute("PRAGMA busy_timeout=30000")
        except Exception as e:
            logger.warning(f"Failed to set SQLite pragmas: {e}")
        finally:
            cursor.close()


def make_engine(url: str) -> Engine:
    if _is_memory(url):
        # One shared connection so every session sees the same in-memory DB
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
            echo=False,
        )
    _ensure_sqlite_dir(url)
    engine = create_engine(
        url,
        connect_args={"check_same_thread": False, "timeout": 30.0},
        pool_pre_ping=True,
        echo=False,
    )
    if engine.dialect.name == "sqlite":
        _configure_sqlite_engine(engine)
    return engine


# ---- Engine & Session Setup ----
global_engine = make_engine(DB_URL)

GlobalSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=global_engine)
Base = declarative_base()


@contextmanager
def global_session() -> Generator[Session, None, None]:
    """
    Context manager for DB sessions used outside request handlers.

    Usage:
        with global_session() as db:
            entries = db.query(SignDictionaryEntry).all()
    """
    db = GlobalSessionLocal()
    try:
        yield db
    except Exception as e:
        logger.error(f"Error in global session: {e}")
        db.rollback()
        raise
    finally:
        try:
            db.close()
        except Exception as e:
            logger.warning(f"Error closing global session: {e}")


# ---- Database Initialization ----
def init_db(engine: Engine = None) -> None:
    """Create the dictionary cache tables"""
    try:
        from . import models  # noqa: F401

        Base.metadata.create_all(bind=engine or global_engine)
        logger.info("Database tables created successfully")
    except Exception as e:
        logger.error(f"Failed to initialize database: {e}")
        raise


def check_db_health() -> bool:
    """Verify database connectivity"""
    try:
        with global_engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
