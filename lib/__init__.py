# =============================================================================
# lib/ - Standalone Infrastructure Modules
# =============================================================================
# - database.py: SQLAlchemy engine, session factory and table creation
# =============================================================================

from lib.database import Base, SessionLocal, engine, init_db, session_scope

__all__ = [
    "Base",
    "SessionLocal",
    "engine",
    "init_db",
    "session_scope",
]
