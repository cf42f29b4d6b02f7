from datetime import datetime, timezone
import threading
from typing import Optional

from core.config import SESSION_TIMEOUT
from models.admin import Admin

SESSION_KEY = "admin_session"


class AdminSession:
    """
    Authenticated admin session.

    Created on login, ended on logout or after `timeout` seconds without
    activity. The bearer token is read from here by the API client; nothing
    else stores it.
    """

    def __init__(self, token: str, admin: Admin, timeout: int = SESSION_TIMEOUT):
        self.token = token
        self.admin = admin
        self.timeout = timeout
        self.created_at = datetime.now(timezone.utc)
        self.last_activity = self.created_at
        self.ended = False
        self._lock = threading.Lock()

    @property
    def email(self) -> str:
        return self.admin.email if self.admin else ""

    def remaining_seconds(self) -> float:
        with self._lock:
            if self.ended:
                return 0
            elapsed = (datetime.now(timezone.utc) - self.last_activity).total_seconds()
            return max(0, self.timeout - elapsed)

    def is_active(self) -> bool:
        return self.remaining_seconds() > 0

    def refresh(self) -> bool:
        """Update the last activity timestamp; False if already expired."""
        if not self.is_active():
            return False
        with self._lock:
            self.last_activity = datetime.now(timezone.utc)
        return True

    def end(self):
        with self._lock:
            if not self.ended:
                self.ended = True
                self.token = ""
                print(f"🔴 Session ended for {self.email}")

    def auth_header(self) -> dict:
        if not self.is_active():
            return {}
        return {"Authorization": f"Bearer {self.token}"}


def start_session(page, session: AdminSession) -> AdminSession:
    """Keep a freshly created session in the page's per-browser store."""
    page.session.set(SESSION_KEY, session)
    print(f"✅ Session started for {session.email}")
    return session


def get_session(page) -> Optional[AdminSession]:
    """Return the active session for this page, clearing an expired one."""
    if not page.session.contains_key(SESSION_KEY):
        return None
    session = page.session.get(SESSION_KEY)
    if session is None:
        return None
    if not session.is_active():
        end_session(page)
        return None
    return session


def end_session(page):
    if page.session.contains_key(SESSION_KEY):
        session = page.session.get(SESSION_KEY)
        if session is not None:
            session.end()
        page.session.remove(SESSION_KEY)
