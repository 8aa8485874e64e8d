"""Shared fixtures backed by a throwaway SQLite database."""

from __future__ import annotations

from datetime import datetime

import pytest

from journal.infrastructure.database import (
    build_engine,
    build_session_factory,
    initialize_database,
)


@pytest.fixture()
def engine(tmp_path_factory):
    engine = build_engine(f"sqlite:///{tmp_path_factory.mktemp('db') / 'journal.db'}")
    initialize_database(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture()
def session(session_factory):
    db = session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def clock():
    """Return increasing timestamps, one minute apart."""

    ticks = iter(datetime(2024, 1, 10, 9, minute) for minute in range(60))
    return lambda: next(ticks)
