"""
Application package initializer.

The project is split into layers: ``core`` (settings, logging and the
SQLite connection), ``models`` (domain entities), ``repositories``
(persistence), ``services`` (business logic with logging and timing),
``schemas`` (API payloads) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
