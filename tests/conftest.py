"""Pytest configuration and fixtures"""
import asyncio
import copy
import os
import uuid
from typing import Any, Dict, List, Optional

import pytest

from qkart.config import Settings
from qkart.services.database import Database
from qkart.services.models import User

# Set test environment variables
os.environ.setdefault("SUPABASE_URL", "https://test.supabase.co")
os.environ.setdefault("SUPABASE_SERVICE_ROLE_KEY", "test_key")


class _Result:
    def __init__(self, data):
        self.data = data


class _FakeQuery:
    """Chainable stand-in for a PostgREST table query with an async execute()."""

    def __init__(self, client: "FakeSupabase", name: str):
        self.client = client
        self.name = name
        self.rows: List[Dict[str, Any]] = client.tables.setdefault(name, [])
        self._mode: Optional[str] = None
        self._payload: Optional[Dict[str, Any]] = None
        self._filters: List[tuple] = []

    def select(self, *_, **__):
        self._mode = "select"
        return self

    def insert(self, data: Dict[str, Any]):
        self._mode = "insert"
        self._payload = data
        return self

    def update(self, data: Dict[str, Any]):
        self._mode = "update"
        self._payload = data
        return self

    def delete(self):
        self._mode = "delete"
        return self

    def eq(self, field: str, value):
        self._filters.append((field, value))
        return self

    def limit(self, *_):
        return self

    def _matches(self, row: Dict[str, Any]) -> bool:
        return all(str(row.get(field)) == str(value) for field, value in self._filters)

    async def execute(self):
        if self.client.yield_on_execute:
            # Let other coroutines run between a read and the write that follows it
            await asyncio.sleep(0)

        self.client.calls.append((self.name, self._mode, list(self._filters)))

        error = self.client.failures.get(self.name)
        if error is not None:
            raise error

        if self._mode == "select":
            return _Result([copy.deepcopy(r) for r in self.rows if self._matches(r)])

        if self._mode == "insert":
            if self.name in self.client.drop_inserts:
                return _Result([])
            row = copy.deepcopy(self._payload)
            row.setdefault("id", str(uuid.uuid4()))
            self.rows.append(row)
            return _Result([copy.deepcopy(row)])

        if self._mode == "update":
            updated = []
            for row in self.rows:
                if self._matches(row):
                    row.update(copy.deepcopy(self._payload))
                    updated.append(copy.deepcopy(row))
            return _Result(updated)

        if self._mode == "delete":
            deleted = [copy.deepcopy(r) for r in self.rows if self._matches(r)]
            self.rows[:] = [r for r in self.rows if not self._matches(r)]
            return _Result(deleted)

        return _Result([])


class FakeSupabase:
    """In-memory async Supabase client: tables are lists of dict rows."""

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {}
        self.failures: Dict[str, Exception] = {}
        self.drop_inserts: set = set()
        self.calls: List[tuple] = []
        self.yield_on_execute = False

    def table(self, name: str) -> _FakeQuery:
        return _FakeQuery(self, name)

    def rows(self, name: str) -> List[Dict[str, Any]]:
        return self.tables.setdefault(name, [])


@pytest.fixture
def fake_supabase():
    """Fake client seeded with a small catalog."""
    client = FakeSupabase()
    client.rows("products").extend(
        [
            {
                "id": "prod-100",
                "name": "UNIFACTOR Mens Running Shoes",
                "category": "Fashion",
                "cost": "100",
                "rating": 5,
                "image": "https://example.com/shoes.png",
            },
            {
                "id": "prod-50",
                "name": "YONEX Smash Badminton Racquet",
                "category": "Sports",
                "cost": "50",
                "rating": 5,
                "image": "https://example.com/racquet.png",
            },
            {
                "id": "prod-free",
                "name": "Sticker Pack",
                "category": "Stationery",
                "cost": "0",
                "rating": 3,
                "image": None,
            },
            {
                "id": "prod-cents",
                "name": "Pencil",
                "category": "Stationery",
                "cost": "0.10",
                "rating": 4,
                "image": None,
            },
        ]
    )
    return client


@pytest.fixture
def settings():
    return Settings(supabase_url="https://test.supabase.co", supabase_key="test_key")


@pytest.fixture
def database(fake_supabase, settings):
    return Database(fake_supabase, settings)


@pytest.fixture
def cart_manager(database):
    return database.cart_manager


@pytest.fixture
def make_user(fake_supabase):
    """Insert a user row and return the parsed User."""

    def _make_user(
        email: str = "crio-user@gmail.com",
        wallet_money: Any = "300",
        address: str = "ITPL Main Road, Whitefield, Bengaluru 560066",
        **extra,
    ) -> User:
        row = {
            "id": str(uuid.uuid4()),
            "email": email,
            "name": email.split("@")[0],
            "wallet_money": wallet_money,
            "address": address,
            **extra,
        }
        fake_supabase.rows("users").append(row)
        return User(**copy.deepcopy(row))

    return _make_user


@pytest.fixture
def sample_user(make_user):
    return make_user()


@pytest.fixture
def user_without_address(make_user):
    return make_user(email="no-address@gmail.com", address="ADDRESS_NOT_SET")
