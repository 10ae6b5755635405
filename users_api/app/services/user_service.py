"""
Business logic for users.

``UserService`` sits between the HTTP endpoints and the repository.  It
adds no rules of its own: every call is passed straight to the
repository, wrapped with an informational log before the call, a
timing log after it and an error log when the repository fails.  The
repository's exception is always re‑raised unchanged.

Messages are ``str.format`` templates and are part of the service's
observable behaviour; tests assert on them verbatim.
"""

import time
from typing import Any, Awaitable, Callable, List, Optional, Sequence, TypeVar
from uuid import UUID

from users_api.app.core.logging_adapter import LoggerAdapter
from users_api.app.models.user import User
from users_api.app.repositories.user_repository import UserRepository

T = TypeVar("T")


def _elapsed_ms(started: float) -> int:
    return int((time.perf_counter() - started) * 1000)


class UserService:
    """Сервис для работы с пользователями.

    Holds no state besides its collaborators, so a single instance may
    serve concurrent requests.
    """

    def __init__(self, user_repository: UserRepository, logger: LoggerAdapter) -> None:
        self._user_repository = user_repository
        self._logger = logger

    async def get_all(self) -> List[User]:
        """Return all users; an empty store yields an empty list."""
        users = await self._measure(
            self._user_repository.get_all,
            before="Retrieving all users",
            after="All users retrieved in {0}ms",
            failure="Something went wrong while retrieving all users",
        )
        return list(users)

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Retrieve a user by ID, ``None`` when it does not exist.

        Unlike the other operations, a failed lookup still logs the
        elapsed time, after the error.
        """
        return await self._measure(
            lambda: self._user_repository.get_by_id(user_id),
            before="Retrieving user with id: {0}",
            after="User with id {0} retrieved in {1}ms",
            failure="Something went wrong while retrieving user with id {0}",
            args=(user_id,),
            log_elapsed_on_failure=True,
        )

    async def create(self, user: User) -> bool:
        """Store ``user`` as given and return the repository's verdict."""
        return await self._measure(
            lambda: self._user_repository.create(user),
            before="Creating user with id {0} and name: {1}",
            before_args=(user.id, user.full_name),
            after="User with id {0} created in {1}ms",
            failure="Something went wrong while creating a user",
            args=(user.id,),
            failure_args=(),
        )

    async def delete_by_id(self, user_id: UUID) -> bool:
        return await self._measure(
            lambda: self._user_repository.delete_by_id(user_id),
            before="Deleting user with id: {0}",
            after="User with id {0} deleted in {1}ms",
            failure="Something went wrong while deleting user with id {0}",
            args=(user_id,),
        )

    async def _measure(
        self,
        call: Callable[[], Awaitable[T]],
        *,
        before: str,
        after: str,
        failure: str,
        args: Sequence[Any] = (),
        before_args: Optional[Sequence[Any]] = None,
        failure_args: Optional[Sequence[Any]] = None,
        log_elapsed_on_failure: bool = False,
    ) -> T:
        """Time ``call`` and log around it.

        ``args`` fill the placeholders of all three templates unless
        ``before_args`` or ``failure_args`` override them.  The elapsed
        milliseconds are appended as the last argument of ``after``.
        """
        if before_args is None:
            before_args = args
        if failure_args is None:
            failure_args = args

        self._logger.log_information(before, *before_args)
        started = time.perf_counter()
        try:
            result = await call()
        except Exception as exc:
            elapsed = _elapsed_ms(started)
            self._logger.log_error(exc, failure, *failure_args)
            if log_elapsed_on_failure:
                self._logger.log_information(after, *args, elapsed)
            raise
        self._logger.log_information(after, *args, _elapsed_ms(started))
        return result
