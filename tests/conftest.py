"""Shared fixtures: an in-memory stand-in for the Supabase client."""

import itertools
from datetime import datetime, timezone
from types import SimpleNamespace

import pytest

from wellbeing import settings as settings_module
from wellbeing.data import backend_client, repositories

_ids = itertools.count(1)


class FakeQuery:
    """Chainable query builder that records every call."""

    def __init__(self, table, rows=None, error=None):
        self.table = table
        self.rows = rows
        self.error = error
        self.calls = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))
        return self

    def insert(self, payload):
        return self._record("insert", payload)

    def update(self, payload):
        return self._record("update", payload)

    def select(self, columns="*"):
        return self._record("select", columns)

    def eq(self, column, value):
        return self._record("eq", column, value)

    def order(self, column, desc=False):
        return self._record("order", column, desc=desc)

    def limit(self, count):
        return self._record("limit", count)

    def call(self, name):
        for call_name, args, kwargs in self.calls:
            if call_name == name:
                return args, kwargs
        return None

    def execute(self):
        if self.error is not None:
            raise self.error
        if self.rows is not None:
            return SimpleNamespace(data=self.rows)
        inserted = self.call("insert")
        if inserted:
            now = datetime.now(timezone.utc).isoformat()
            rows = [dict(row, id=str(next(_ids)), created_at=now) for row in inserted[0][0]]
            return SimpleNamespace(data=rows)
        return SimpleNamespace(data=[])


class FakeAuth:
    def __init__(self, user=None):
        self.user = user
        self.calls = []
        self.failures = {}
        self.callbacks = []

    def _call(self, name, *args):
        self.calls.append((name, args))
        if name in self.failures:
            raise self.failures[name]

    def _session(self):
        if self.user is None:
            return None
        return SimpleNamespace(user=self.user, access_token="access", refresh_token="refresh")

    def get_user(self):
        self._call("get_user")
        return SimpleNamespace(user=self.user)

    def get_session(self):
        self._call("get_session")
        return self._session()

    def sign_in_with_password(self, credentials):
        self._call("sign_in_with_password", credentials)
        return SimpleNamespace(user=self.user, session=self._session())

    def sign_up(self, credentials):
        self._call("sign_up", credentials)
        return SimpleNamespace(user=self.user, session=None)

    def sign_out(self, options=None):
        self._call("sign_out", options)

    def update_user(self, attributes):
        self._call("update_user", attributes)
        return SimpleNamespace(user=self.user)

    def reset_password_for_email(self, email, options=None):
        self._call("reset_password_for_email", email, options)

    def set_session(self, access_token, refresh_token):
        self._call("set_session", access_token, refresh_token)
        return SimpleNamespace(user=self.user, session=self._session())

    def on_auth_state_change(self, callback):
        self._call("on_auth_state_change")
        self.callbacks.append(callback)
        return SimpleNamespace(id="subscription")


class FakeClient:
    def __init__(self, user=None):
        self.auth = FakeAuth(user)
        self.responses = {}
        self.errors = {}
        self.queries = []

    def table(self, name):
        query = FakeQuery(name, self.responses.get(name), self.errors.get(name))
        self.queries.append(query)
        return query

    def queries_for(self, name):
        return [query for query in self.queries if query.table == name]


@pytest.fixture
def user():
    """Authenticated backend user."""
    return SimpleNamespace(id="user-1", email="ada@example.com")


@pytest.fixture
def fake_client(user):
    """Fake Supabase client wired into the repositories module."""
    client = FakeClient(user)
    repositories.configure(lambda: client)
    yield client
    repositories.configure(None)


@pytest.fixture
def secrets():
    """Mutable secrets mapping used by the backend client's secret getter."""
    values = {}
    backend_client.configure(lambda path, default=None: values.get(tuple(path), default))
    yield values
    backend_client.configure(None)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in (
        "SUPABASE_URL",
        "SUPABASE_ANON_KEY",
        "APP_BASE_URL",
        "WELLBEING_LOG_LEVEL",
        "DEFAULT_LANGUAGE",
    ):
        monkeypatch.delenv(name, raising=False)
    settings_module.reset_settings()
    yield
    settings_module.reset_settings()


def make_mood_row(rating, tags=None, created_at="2025-03-03T14:05:00+00:00", row_id="1"):
    return {
        "id": row_id,
        "user_id": "user-1",
        "rating": rating,
        "tags": tags,
        "created_at": created_at,
    }


def make_gratitude_row(content, created_at="2025-03-03T14:05:00+00:00", row_id="1"):
    return {
        "id": row_id,
        "user_id": "user-1",
        "content": content,
        "created_at": created_at,
    }
