import asyncio
import sqlite3
import uuid
from unittest.mock import ANY, AsyncMock, Mock, call

import pytest

from users_api.app.core.logging_adapter import LoggerAdapter
from users_api.app.models.user import User
from users_api.app.repositories.user_repository import UserRepository
from users_api.app.services.user_service import UserService


class TestUserService:
    """Test UserService results, log messages and error propagation."""

    def setup_method(self):
        self.user_repository = AsyncMock(spec=UserRepository)
        self.logger = Mock(spec=LoggerAdapter)
        self.service = UserService(self.user_repository, self.logger)

    # get_all

    @pytest.mark.asyncio
    async def test_get_all_returns_empty_list_when_no_users_exist(self):
        self.user_repository.get_all.return_value = []

        result = await self.service.get_all()

        assert result == []

    @pytest.mark.asyncio
    async def test_get_all_returns_users_when_some_users_exist(self):
        nick = User(id=uuid.uuid4(), full_name="Nick Chapsas")
        self.user_repository.get_all.return_value = [nick]

        result = await self.service.get_all()

        assert result == [nick]
        assert result[0] is nick

    @pytest.mark.asyncio
    async def test_get_all_logs_messages(self):
        self.user_repository.get_all.return_value = []

        await self.service.get_all()

        assert self.logger.mock_calls == [
            call.log_information("Retrieving all users"),
            call.log_information("All users retrieved in {0}ms", ANY),
        ]
        self.logger.log_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_all_logs_and_reraises_store_error(self):
        error = sqlite3.OperationalError("Something went wrong")
        self.user_repository.get_all.side_effect = error

        with pytest.raises(sqlite3.OperationalError, match="Something went wrong") as exc_info:
            await self.service.get_all()

        assert exc_info.value is error
        self.logger.log_error.assert_called_once_with(
            error, "Something went wrong while retrieving all users"
        )
        # no timing message on this failure path
        self.logger.log_information.assert_called_once_with("Retrieving all users")

    @pytest.mark.asyncio
    async def test_get_all_logs_elapsed_milliseconds(self):
        async def slow_get_all():
            await asyncio.sleep(0.02)
            return []

        self.user_repository.get_all.side_effect = slow_get_all

        await self.service.get_all()

        template, elapsed = self.logger.log_information.call_args.args
        assert template == "All users retrieved in {0}ms"
        assert isinstance(elapsed, int)
        assert elapsed >= 15

    # get_by_id

    @pytest.mark.asyncio
    async def test_get_by_id_returns_user_when_user_exists(self):
        user_id = uuid.uuid4()
        expected = User(id=user_id, full_name="Michael Piarulli")
        self.user_repository.get_by_id.return_value = expected

        result = await self.service.get_by_id(user_id)

        assert result is expected
        self.user_repository.get_by_id.assert_awaited_once_with(user_id)

    @pytest.mark.asyncio
    async def test_get_by_id_returns_none_when_user_does_not_exist(self):
        self.user_repository.get_by_id.return_value = None

        result = await self.service.get_by_id(uuid.uuid4())

        assert result is None
        self.logger.log_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_get_by_id_logs_messages(self):
        user_id = uuid.uuid4()
        self.user_repository.get_by_id.return_value = User(id=user_id, full_name="Michael Piarulli")

        await self.service.get_by_id(user_id)

        assert self.logger.mock_calls == [
            call.log_information("Retrieving user with id: {0}", user_id),
            call.log_information("User with id {0} retrieved in {1}ms", user_id, ANY),
        ]

    @pytest.mark.asyncio
    async def test_get_by_id_logs_error_then_elapsed_time_on_store_error(self):
        user_id = uuid.uuid4()
        error = sqlite3.OperationalError("This is a testing error")
        self.user_repository.get_by_id.side_effect = error

        with pytest.raises(sqlite3.OperationalError, match="This is a testing error") as exc_info:
            await self.service.get_by_id(user_id)

        assert exc_info.value is error
        assert self.logger.mock_calls == [
            call.log_information("Retrieving user with id: {0}", user_id),
            call.log_error(error, "Something went wrong while retrieving user with id {0}", user_id),
            call.log_information("User with id {0} retrieved in {1}ms", user_id, ANY),
        ]

    # create

    @pytest.mark.asyncio
    async def test_create_returns_true_when_repository_creates_user(self):
        user = User(id=uuid.uuid4(), full_name="Michael Piarulli")
        self.user_repository.create.return_value = True

        result = await self.service.create(user)

        assert result is True
        passed = self.user_repository.create.await_args.args[0]
        assert passed is user

    @pytest.mark.asyncio
    async def test_create_returns_false_when_repository_rejects_user(self):
        user = User(id=uuid.uuid4(), full_name="Michael Piarulli")
        self.user_repository.create.return_value = False

        result = await self.service.create(user)

        assert result is False
        self.logger.log_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_create_logs_messages(self):
        user = User(id=uuid.uuid4(), full_name="Michael Piarulli")
        self.user_repository.create.return_value = True

        await self.service.create(user)

        assert self.logger.mock_calls == [
            call.log_information("Creating user with id {0} and name: {1}", user.id, "Michael Piarulli"),
            call.log_information("User with id {0} created in {1}ms", user.id, ANY),
        ]

    @pytest.mark.asyncio
    async def test_create_logs_and_reraises_store_error(self):
        user = User(id=uuid.uuid4(), full_name="Michael Piarulli")
        error = sqlite3.IntegrityError("This is a test error")
        self.user_repository.create.side_effect = error

        with pytest.raises(sqlite3.IntegrityError, match="This is a test error") as exc_info:
            await self.service.create(user)

        assert exc_info.value is error
        assert self.logger.mock_calls == [
            call.log_information("Creating user with id {0} and name: {1}", user.id, "Michael Piarulli"),
            call.log_error(error, "Something went wrong while creating a user"),
        ]

    # delete_by_id

    @pytest.mark.asyncio
    async def test_delete_by_id_returns_true_when_user_is_deleted(self):
        user_id = uuid.uuid4()
        self.user_repository.delete_by_id.return_value = True

        result = await self.service.delete_by_id(user_id)

        assert result is True
        self.user_repository.delete_by_id.assert_awaited_once_with(user_id)

    @pytest.mark.asyncio
    async def test_delete_by_id_returns_false_when_user_does_not_exist(self):
        self.user_repository.delete_by_id.return_value = False

        result = await self.service.delete_by_id(uuid.uuid4())

        assert result is False
        self.logger.log_error.assert_not_called()

    @pytest.mark.asyncio
    async def test_delete_by_id_logs_messages(self):
        user_id = uuid.uuid4()
        self.user_repository.delete_by_id.return_value = True

        await self.service.delete_by_id(user_id)

        assert self.logger.mock_calls == [
            call.log_information("Deleting user with id: {0}", user_id),
            call.log_information("User with id {0} deleted in {1}ms", user_id, ANY),
        ]

    @pytest.mark.asyncio
    async def test_delete_by_id_logs_and_reraises_store_error(self):
        user_id = uuid.uuid4()
        error = sqlite3.OperationalError("This is a test exception message")
        self.user_repository.delete_by_id.side_effect = error

        with pytest.raises(sqlite3.OperationalError, match="This is a test exception message") as exc_info:
            await self.service.delete_by_id(user_id)

        assert exc_info.value is error
        assert self.logger.mock_calls == [
            call.log_information("Deleting user with id: {0}", user_id),
            call.log_error(error, "Something went wrong while deleting user with id {0}", user_id),
        ]

    @pytest.mark.asyncio
    async def test_non_store_errors_propagate_unchanged(self):
        error = RuntimeError("connection pool exhausted")
        self.user_repository.get_all.side_effect = error

        with pytest.raises(RuntimeError) as exc_info:
            await self.service.get_all()

        assert exc_info.value is error
        self.logger.log_error.assert_called_once_with(
            error, "Something went wrong while retrieving all users"
        )

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_timed_independently(self):
        async def get_by_id(user_id):
            await asyncio.sleep(0.01)
            return User(id=user_id, full_name="Nick Chapsas")

        self.user_repository.get_by_id.side_effect = get_by_id
        ids = [uuid.uuid4() for _ in range(5)]

        results = await asyncio.gather(*(self.service.get_by_id(user_id) for user_id in ids))

        assert [user.id for user in results] == ids
        retrieved = [
            c.args[1]
            for c in self.logger.log_information.call_args_list
            if c.args[0] == "User with id {0} retrieved in {1}ms"
        ]
        assert sorted(retrieved, key=str) == sorted(ids, key=str)
