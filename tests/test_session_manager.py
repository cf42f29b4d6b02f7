from datetime import datetime, timedelta, timezone

from core.session_manager import AdminSession, SESSION_KEY, start_session, get_session, end_session
from models.admin import Admin


class FakeSessionStore:
    """Stand-in for flet's page.session."""

    def __init__(self):
        self.data = {}

    def set(self, key, value):
        self.data[key] = value

    def get(self, key):
        return self.data.get(key)

    def contains_key(self, key):
        return key in self.data

    def remove(self, key):
        self.data.pop(key, None)


class FakePage:
    def __init__(self):
        self.session = FakeSessionStore()


def make_session(timeout=60):
    return AdminSession("tok", Admin(id="a1", username="admin", email="admin@example.com"), timeout=timeout)


def test_new_session_is_active_with_bearer_header():
    session = make_session()
    assert session.is_active()
    assert session.auth_header() == {"Authorization": "Bearer tok"}
    assert 0 < session.remaining_seconds() <= 60


def test_session_expires_after_inactivity():
    session = make_session(timeout=60)
    session.last_activity = datetime.now(timezone.utc) - timedelta(seconds=61)

    assert not session.is_active()
    assert session.auth_header() == {}
    assert session.refresh() is False


def test_refresh_extends_session():
    session = make_session(timeout=60)
    session.last_activity = datetime.now(timezone.utc) - timedelta(seconds=50)

    assert session.refresh() is True
    assert session.remaining_seconds() > 50


def test_end_clears_token():
    session = make_session()
    session.end()
    assert not session.is_active()
    assert session.token == ""


def test_page_store_lifecycle():
    page = FakePage()
    session = make_session()

    start_session(page, session)
    assert get_session(page) is session

    end_session(page)
    assert get_session(page) is None
    assert not session.is_active()


def test_expired_session_is_removed_from_page():
    page = FakePage()
    session = make_session(timeout=1)
    start_session(page, session)
    session.last_activity = datetime.now(timezone.utc) - timedelta(seconds=5)

    assert get_session(page) is None
    assert not page.session.contains_key(SESSION_KEY)


def test_session_times_are_timezone_aware():
    session = make_session()
    assert session.created_at.tzinfo is not None
    assert session.refresh()
    assert session.last_activity.tzinfo is not None
