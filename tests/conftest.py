"""
Shared fixtures: an ApiClient wired to httpx.MockTransport, an active
admin session, and an in-memory audit database.
"""
import json
from typing import Callable, Dict, List, Tuple

import httpx
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.api_client import ApiClient
from core.db import Base
from core.session_manager import AdminSession
from models.admin import Admin
import models.audit_log  # noqa: F401

BASE_URL = "http://api.test/api"


class Recorder:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self, routes: Dict[Tuple[str, str], Callable]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": f"No route {request.method} {request.url.path}"})
        if isinstance(handler, httpx.Response):
            return handler
        return handler(request)

    def body(self, index: int = -1) -> dict:
        return json.loads(self.requests[index].content)


@pytest.fixture
def admin_session() -> AdminSession:
    return AdminSession("test-token", Admin(id="a1", username="admin", email="admin@example.com"), timeout=600)


@pytest.fixture
def make_api(admin_session):
    """Build an ApiClient whose requests are answered by `routes`."""
    clients = []

    def _make(routes, session=admin_session):
        recorder = Recorder(routes)
        api = ApiClient(session=session, base_url=BASE_URL, timeout=2, transport=httpx.MockTransport(recorder))
        clients.append(api)
        return api, recorder

    yield _make
    for api in clients:
        api.close()


@pytest.fixture
def audit_db():
    """sessionmaker bound to a fresh in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(bind=engine, expire_on_commit=False, future=True)
    yield factory
    engine.dispose()
