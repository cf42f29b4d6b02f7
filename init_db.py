import sys

from core.db import Base, engine
from models.audit_log import AuditLog  # noqa: F401

def init_db(reset: bool = False):
    if reset:
        print("Rebuilding audit database (drop/create)...")
        Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("Tables ready:")
    for table in Base.metadata.sorted_tables:
        print(f"   - {table.name}")
    print("\nDatabase initialization complete!")

if __name__ == "__main__":
    init_db(reset="--reset" in sys.argv)
