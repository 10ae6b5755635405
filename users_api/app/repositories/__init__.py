"""
Persistence layer.

Repositories hide the storage engine from the services.  Store‑level
errors (``sqlite3.Error`` for the SQLite implementation) are raised as
is; callers decide how to log and propagate them.
"""

from .user_repository import SqliteUserRepository, UserRepository

__all__ = ["SqliteUserRepository", "UserRepository"]
