from __future__ import annotations

from datetime import datetime
from urllib.parse import urlparse

import pytest
from sqlalchemy import func, select

from config import TestConfig
from rideshare import create_app, db
from rideshare.models import Driver, Passenger, Trip


@pytest.fixture
def app():
    """Application bound to a fresh in-memory SQLite schema."""
    app = create_app(TestConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def count():
    """Row count for a model, read through the test's session."""
    def _count(model) -> int:
        return db.session.scalar(select(func.count(model.id)))
    return _count


@pytest.fixture
def redirect_path():
    def _path(response) -> str:
        return urlparse(response.headers["Location"]).path
    return _path


@pytest.fixture
def driver(app) -> Driver:
    obj = Driver(name="sample driver", vin="ghbgdsrklp2347bC9", available=True)
    db.session.add(obj)
    db.session.commit()
    return obj


@pytest.fixture
def passenger(app) -> Passenger:
    obj = Passenger(name="sample passenger")
    db.session.add(obj)
    db.session.commit()
    return obj


@pytest.fixture
def trip(driver, passenger) -> Trip:
    obj = Trip(driver_id=driver.id, passenger_id=passenger.id, date=datetime(2020, 11, 3, 10, 30), rating=4)
    db.session.add(obj)
    db.session.commit()
    return obj
