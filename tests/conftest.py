"""
Test configuration and fixtures for the LightBnB data layer.
Replaces the PostgreSQL pool with mock connections and provides row factories.
"""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from repositories.property_repo import PROPERTY_COLUMNS

_PATCHED_MODULES = (
    "repositories.user_repo",
    "repositories.property_repo",
    "repositories.reservation_repo",
    "db.init_db",
)


@pytest.fixture
def cursor() -> MagicMock:
    """A mock cursor; set fetchone/fetchall return values per test."""
    cur = MagicMock()
    cur.fetchone.return_value = None
    cur.fetchall.return_value = []
    return cur


@pytest.fixture
def db_conn(monkeypatch, cursor) -> MagicMock:
    """Patch get_connection/release_connection in every module that uses them."""
    conn = MagicMock()
    conn.cursor.return_value.__enter__.return_value = cursor
    conn.released = False

    def release(c):
        assert c is conn
        conn.released = True

    for module in _PATCHED_MODULES:
        monkeypatch.setattr(f"{module}.get_connection", lambda: conn)
        monkeypatch.setattr(f"{module}.release_connection", release)
    return conn


class PropertyRowFactory:
    """Builds tuples shaped like property SELECT rows."""

    DEFAULTS = {
        "id": 1,
        "owner_id": 7,
        "title": "Cozy Loft",
        "description": "Close to everything",
        "thumbnail_photo_url": "https://images.example.com/thumb.jpg",
        "cover_photo_url": "https://images.example.com/cover.jpg",
        "cost_per_night": 12500,
        "street": "123 Main St",
        "city": "Vancouver",
        "province": "BC",
        "post_code": "V5K 0A1",
        "country": "Canada",
        "parking_spaces": 1,
        "number_of_bathrooms": 1,
        "number_of_bedrooms": 2,
        "active": True,
    }

    @classmethod
    def create(cls, average_rating=Decimal("4.5"), **overrides) -> tuple:
        values = {**cls.DEFAULTS, **overrides}
        return tuple(values[c] for c in PROPERTY_COLUMNS) + (average_rating,)


class ReservationRowFactory:
    """Builds tuples shaped like reservation listing rows."""

    @staticmethod
    def create(id=1, guest_id=3, property_id=1, start_date=date(2018, 9, 11),
               end_date=date(2018, 9, 26), **property_overrides) -> tuple:
        property_overrides.setdefault("id", property_id)
        return (id, guest_id, property_id, start_date, end_date) + \
            PropertyRowFactory.create(**property_overrides)


@pytest.fixture
def property_row():
    return PropertyRowFactory.create


@pytest.fixture
def reservation_row():
    return ReservationRowFactory.create


def listing_data(**overrides) -> dict:
    """Form-style data for PropertyService.create_listing."""
    data = {
        "owner_id": "7",
        "title": "Cozy Loft",
        "city": "Vancouver",
        "cost_per_night": "125.50",
        "description": "Close to everything",
        "street": "123 Main St",
        "province": "BC",
        "post_code": "V5K 0A1",
        "country": "Canada",
        "parking_spaces": "1",
        "number_of_bathrooms": "1",
        "number_of_bedrooms": "2",
    }
    data.update(overrides)
    return data
