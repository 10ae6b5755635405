"""
Repositories for user records.

``UserRepository`` is the contract the service layer depends on.
``SqliteUserRepository`` stores users in the ``users`` table created by
``core.db.init_db``.  All queries use parameterized statements and each
call opens and closes its own connection.
"""

import abc
import sqlite3
from typing import List, Optional
from uuid import UUID

from users_api.app.core.db import get_connection
from users_api.app.models.user import User


class UserRepository(abc.ABC):
    """Storage contract for users.  Any method may raise a store error."""

    @abc.abstractmethod
    async def get_all(self) -> List[User]:
        ...

    @abc.abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        ...

    @abc.abstractmethod
    async def create(self, user: User) -> bool:
        ...

    @abc.abstractmethod
    async def delete_by_id(self, user_id: UUID) -> bool:
        ...


class SqliteUserRepository(UserRepository):
    """SQLite implementation of ``UserRepository``."""

    def __init__(self, database_url: Optional[str] = None) -> None:
        self._database_url = database_url

    async def get_all(self) -> List[User]:
        """Return all users in insertion order."""
        conn = get_connection(self._database_url)
        try:
            rows = conn.execute(
                "SELECT id, full_name FROM users ORDER BY rowid"
            ).fetchall()
            return [self._row_to_user(row) for row in rows]
        finally:
            conn.close()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Retrieve a user by ID, or ``None`` if there is no such user."""
        conn = get_connection(self._database_url)
        try:
            row = conn.execute(
                "SELECT id, full_name FROM users WHERE id = ?",
                (str(user_id),),
            ).fetchone()
            if not row:
                return None
            return self._row_to_user(row)
        finally:
            conn.close()

    async def create(self, user: User) -> bool:
        """Insert ``user``.

        Returns ``False`` without touching the table when a user with the
        same id already exists.
        """
        conn = get_connection(self._database_url)
        try:
            cursor = conn.execute(
                "INSERT OR IGNORE INTO users (id, full_name) VALUES (?, ?)",
                (str(user.id), user.full_name),
            )
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    async def delete_by_id(self, user_id: UUID) -> bool:
        conn = get_connection(self._database_url)
        try:
            cursor = conn.execute("DELETE FROM users WHERE id = ?", (str(user_id),))
            conn.commit()
            return cursor.rowcount > 0
        except sqlite3.Error:
            conn.rollback()
            raise
        finally:
            conn.close()

    @staticmethod
    def _row_to_user(row: sqlite3.Row) -> User:
        return User(id=UUID(row["id"]), full_name=row["full_name"])
