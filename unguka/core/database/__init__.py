"""
Database layer for Unguka.

Structure:
- entities/: SQLModel table models, one module per business domain
- repositories/: data access layer for those entities
- session.py: global engine and session factory management
- utils.py: engine, session factory and schema helpers
"""

from .base import Base, utc_now
from .session import (
    async_session_maker,
    engine,
    get_session,
    init_db,
)
from .utils import (
    create_all,
    create_engine,
    create_sessionmaker,
)

__all__ = [
    "Base",
    "async_session_maker",
    "create_all",
    "create_engine",
    "create_sessionmaker",
    "engine",
    "get_session",
    "init_db",
    "utc_now",
]
