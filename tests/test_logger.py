from core.logger import log_action, get_recent_actions
from models.audit_log import AuditLog


def test_actions_are_recorded_newest_first(audit_db):
    assert log_action("admin@example.com", "Created user: a@b.co", session_factory=audit_db)
    assert log_action("admin@example.com", "Deleted product: Soda", session_factory=audit_db)

    entries = get_recent_actions(limit=10, session_factory=audit_db)

    assert [e.action for e in entries] == ["Deleted product: Soda", "Created user: a@b.co"]
    assert entries[0].admin_email == "admin@example.com"
    assert entries[0].timestamp is not None


def test_limit_is_applied(audit_db):
    for i in range(5):
        log_action("admin@example.com", f"action {i}", session_factory=audit_db)
    assert len(get_recent_actions(limit=3, session_factory=audit_db)) == 3


def test_missing_email_is_logged_as_unknown(audit_db):
    log_action(None, "Logged out", session_factory=audit_db)
    assert get_recent_actions(session_factory=audit_db)[0].admin_email == "unknown"


def test_write_failure_is_reported_not_raised(audit_db):
    class BrokenSession:
        def add(self, obj):
            raise RuntimeError("disk full")

        def rollback(self):
            self.rolled_back = True

        def close(self):
            pass

    broken = BrokenSession()
    assert log_action("admin@example.com", "x", session_factory=lambda: broken) is False
    assert broken.rolled_back


def test_model_default_timestamp_is_filled(audit_db):
    session = audit_db()
    session.add(AuditLog(admin_email="admin@example.com", action="Logged in"))
    session.commit()
    session.close()

    assert get_recent_actions(session_factory=audit_db)[0].timestamp is not None
