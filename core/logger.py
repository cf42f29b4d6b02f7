from datetime import datetime, timezone

from core.db import SessionLocal
from models.audit_log import AuditLog

def log_action(admin_email: str, action: str, session_factory=SessionLocal):
    """Record an admin action into the local audit log."""
    session = session_factory()
    try:
        log = AuditLog(admin_email=admin_email or "unknown", action=action, timestamp=datetime.now(timezone.utc))
        session.add(log)
        session.commit()
        return True
    except Exception as e:
        print("Audit log error:", e)
        session.rollback()
        return False
    finally:
        session.close()

def get_recent_actions(limit: int = 10, session_factory=SessionLocal):
    """Return the latest audit entries, newest first."""
    session = session_factory()
    try:
        return (
            session.query(AuditLog)
            .order_by(AuditLog.timestamp.desc(), AuditLog.id.desc())
            .limit(limit)
            .all()
        )
    finally:
        session.close()
