"""
API Dependencies

Provides dependency injection for repositories and services.  Tests
replace ``get_user_service`` through ``app.dependency_overrides``.
"""

from fastapi import Depends

from users_api.app.core.logging_adapter import get_logger_adapter
from users_api.app.repositories.user_repository import SqliteUserRepository, UserRepository
from users_api.app.services.user_service import UserService


def get_user_repository() -> UserRepository:
    """
    Get the SQLite user repository bound to ``settings.database_url``
    """
    return SqliteUserRepository()


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """
    Get User Service instance with its repository and logger

    Returns:
        UserService: Configured user service
    """
    return UserService(user_repository, get_logger_adapter(UserService.__module__))
