from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from core.config import DATABASE_URL

# Disable check_same_thread only for SQLite (Flet handlers run on worker threads)
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, future=True, connect_args=connect_args)

# SessionLocal factory: expire_on_commit=False avoids needing refresh() in many places
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, expire_on_commit=False, future=True)

Base = declarative_base()

def init_tables():
    """Create the local audit tables if they do not exist yet."""
    # Import models so they register on Base.metadata
    import models.audit_log  # noqa: F401
    Base.metadata.create_all(bind=engine)
