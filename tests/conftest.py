"""Shared fixtures.

Every test gets its own in-memory SQLite database (one connection shared
through ``StaticPool``) seeded with two customers.  The API client talks
to the same database through an override of ``get_db``.
"""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from order_flow_api.app.core.db import create_db_engine, get_db, init_db
from order_flow_api.app.main import app
from order_flow_api.app.models import Customer, Item, Order


@pytest.fixture
def engine():
    engine = create_db_engine("sqlite://", poolclass=StaticPool)
    init_db(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    session.add_all([
        Customer(id=1, name="John Doe", email="john@example.com"),
        Customer(id=2, name="Jane Smith", email="jane@example.com"),
    ])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def seed_orders(db):
    """One order per seeded customer; order 2 is the newer one."""
    now = datetime.now()
    db.add_all([
        Order(
            id=1,
            order_information="First order",
            order_date=now - timedelta(days=1),
            customer_id=1,
            items=[Item(name="Keyboard"), Item(name="Mouse")],
        ),
        Order(
            id=2,
            order_information="Second order",
            order_date=now,
            customer_id=2,
            items=[Item(name="Monitor")],
        ),
    ])
    db.commit()
    return db


@pytest.fixture
def client(db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
