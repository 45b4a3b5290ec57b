"""
Shared fixtures.

- Engine tests use a small hand-written dictionary so results do not shift
  when the built-in vocabulary grows.
- Server tests run against in-memory SQLite; the environment is set before
  anything under ``server`` is imported because settings are read at import.
"""

import os

os.environ["SIGN_DB_URL"] = "sqlite:///:memory:"
os.environ["SIGN_CACHE_SYNC"] = "false"
os.environ.setdefault("SIGN_LOG_LEVEL", "WARNING")

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from Gloss.dicts import TableProvider
from tests.utils.fake_host import ManualHost, RecordingRenderer


SMALL_WORDS = {
    "hello": {"kind": "hello", "color": "#4CAF50", "glyph": "👋"},
    "good": {"kind": "good", "color": "#4CAF50", "glyph": "👍"},
    "morning": {"kind": "good", "color": "#4CAF50"},
    "thank": {"kind": "thank", "color": "#FF9800", "glyph": "🙏"},
    "run": {"kind": "run", "color": "#E91E63"},
    "fast": {"kind": "fast", "color": "#E91E63", "glyph": "⚡"},
}

SMALL_PHRASES = {
    "good morning": {"kind": "good-morning", "color": "#4CAF50", "glyph": "🌅"},
    "how are you": {"kind": "how-are-you", "color": "#00BCD4", "glyph": "❓"},
    "thank you": {"kind": "thank-you", "color": "#FF9800", "glyph": "🙏"},
    "thank you very much": {"kind": "thank-you-much", "color": "#FF9800", "glyph": "🙏"},
    "nice to meet you": {"kind": "nice-meet", "color": "#4CAF50", "glyph": "🤝"},
}


@pytest.fixture
def small_provider():
    """Provider over SMALL_WORDS / SMALL_PHRASES."""
    return TableProvider.from_mappings(SMALL_WORDS, SMALL_PHRASES, name="small")


@pytest.fixture
def host():
    return ManualHost(tick_interval_ms=16.0)


@pytest.fixture
def renderer(host):
    return RecordingRenderer(host)


@pytest.fixture
def db_engine():
    """Fresh in-memory database with the cache table created."""
    from server.db import init_db, make_engine

    engine = make_engine("sqlite:///:memory:")
    init_db(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    """Context-manager session factory bound to the test database."""
    Session = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)

    @contextmanager
    def _session():
        db = Session()
        try:
            yield db
        finally:
            db.close()

    return _session


@pytest.fixture
def db(session_factory):
    with session_factory() as session:
        yield session


@pytest.fixture
def client(small_provider):
    """FastAPI test client with the dictionary dependency pinned to the small tables."""
    from server.main import app
    from server.services.dictionary_service import get_dictionary_provider, reset_dictionary_provider

    app.dependency_overrides[get_dictionary_provider] = lambda: small_provider
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.pop(get_dictionary_provider, None)
        reset_dictionary_provider()


@pytest.fixture
def builtin_client():
    """FastAPI test client using the process-wide provider (built-in vocabulary)."""
    from server.main import app
    from server.services.dictionary_service import reset_dictionary_provider

    reset_dictionary_provider()
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        reset_dictionary_provider()
