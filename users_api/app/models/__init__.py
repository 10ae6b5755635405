"""
Domain entities.

Entities are plain dataclasses, independent of both the API payloads in
``schemas`` and the SQLite rows in ``repositories``.
"""

from .user import User

__all__ = ["User"]
