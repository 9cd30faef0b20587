"""
Database repository layer using SQLModel.

Each module provides data access operations for the entities of the
matching module in ``entities``. Tenant-owned entities share the
``TenantRepository`` helpers that scope lookups to one cooperative.

Modules:
- base: BaseRepository, TenantRepository and QueryBuilder utilities
- bundle: SqlRepoBundle grouping every repository on one session
"""

from .base import BaseRepository, QueryBuilder, TenantRepository
from .bundle import SqlRepoBundle, build_sql_repos_from_session

__all__ = [
    "BaseRepository",
    "QueryBuilder",
    "SqlRepoBundle",
    "TenantRepository",
    "build_sql_repos_from_session",
]
