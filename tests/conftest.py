"""
Shared test stuff
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from fortune.app import app
from fortune.client_config import ClientConfig
from fortune.db import Base, SessionLocal, bind_engine, init_db, make_engine

# pylint doesn't handle fixtures well
# pylint: disable=redefined-outer-name


@pytest.fixture()
def engine():
    """
    Bind SessionLocal to a fresh in-memory SQLite database with the schema.
    """
    eng = make_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    bind_engine(eng)
    init_db(eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture()
def db(engine):
    """
    A session for inspecting and seeding the test database directly.
    """
    session = SessionLocal()
    yield session
    session.close()


@pytest.fixture()
def api(engine):
    """
    TestClient for the fortune API backed by the test database.
    """
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture()
def client_config():
    return ClientConfig.model_validate({
        "server": {"host": "fortune.test", "port": 8080},
        "user": {"name": "bobby"},
    })
