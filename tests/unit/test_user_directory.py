"""Unit tests for UserDirectory (in-memory store fake)."""

from unittest.mock import MagicMock

import pytest

from src.st_common.errors import (
    InvalidCredentialsError,
    PersistenceUnavailableError,
    UsernameExistsError,
)
from src.st_gateway.user.directory import UserDirectory
from src.st_gateway.user.models import User


class TestRegister:
    def test_new_user_gets_starting_balance(self, memory_store) -> None:
        directory = UserDirectory(memory_store)
        result = directory.register("alice", "s3cret")

        assert result.persisted is True
        assert result.user.username == "alice"
        assert result.user.account.balance_cents == 1_000_000
        assert result.user.portfolio.list() == {}
        assert directory.get_user("alice") is result.user

    def test_password_is_stored_hashed(self, memory_store) -> None:
        user = UserDirectory(memory_store).register("alice", "s3cret").user
        assert user.password_hash != "s3cret"
        assert user.password_hash.startswith("$2")

    def test_saves_snapshot_after_registration(self, memory_store) -> None:
        UserDirectory(memory_store).register("alice", "s3cret")
        assert memory_store.save_calls == 1
        assert set(memory_store.saved) == {"alice"}

    def test_duplicate_username_raises_and_keeps_first_user(self, memory_store) -> None:
        directory = UserDirectory(memory_store)
        first = directory.register("alice", "s3cret").user
        first.account.withdraw(1234)

        with pytest.raises(UsernameExistsError):
            directory.register("alice", "other")

        assert len(directory) == 1
        assert directory.get_user("alice") is first
        assert first.account.balance_cents == 1_000_000 - 1234
        assert memory_store.save_calls == 1

    def test_custom_initial_balance(self, memory_store) -> None:
        directory = UserDirectory(memory_store, initial_balance_cents=500)
        assert directory.register("bob", "pw").user.account.balance_cents == 500

    def test_failed_save_keeps_user_in_memory(self) -> None:
        store = MagicMock()
        store.load_all.return_value = {}
        store.save_all.side_effect = PersistenceUnavailableError("disk full")
        directory = UserDirectory(store)

        result = directory.register("alice", "s3cret")

        assert result.persisted is False
        assert directory.authenticate("alice", "s3cret") is result.user


class TestAuthenticate:
    def test_correct_password(self, memory_store) -> None:
        directory = UserDirectory(memory_store)
        user = directory.register("alice", "s3cret").user
        assert directory.authenticate("alice", "s3cret") is user

    def test_wrong_password_and_unknown_user_are_indistinguishable(self, memory_store) -> None:
        directory = UserDirectory(memory_store)
        directory.register("alice", "s3cret")

        with pytest.raises(InvalidCredentialsError) as wrong_pw:
            directory.authenticate("alice", "nope")
        with pytest.raises(InvalidCredentialsError) as unknown:
            directory.authenticate("mallory", "s3cret")

        assert wrong_pw.value.code == unknown.value.code
        assert wrong_pw.value.message == unknown.value.message

    def test_password_match_is_exact(self, memory_store) -> None:
        directory = UserDirectory(memory_store)
        directory.register("alice", "s3cret")
        with pytest.raises(InvalidCredentialsError):
            directory.authenticate("alice", "S3CRET")


class TestLoad:
    def test_loads_users_once_at_construction(self, memory_store) -> None:
        memory_store.saved = {"carol": User(username="carol", password_hash="x")}
        directory = UserDirectory(memory_store)
        assert directory.get_user("carol") is not None
        assert directory.get_user("dave") is None

    def test_loaded_username_cannot_be_registered_again(self, memory_store) -> None:
        memory_store.saved = {"carol": User(username="carol", password_hash="x")}
        with pytest.raises(UsernameExistsError):
            UserDirectory(memory_store).register("carol", "pw")
