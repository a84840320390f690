"""Unit tests for the Account entity."""

import dataclasses
import uuid
from datetime import datetime, timedelta, timezone

import pytest

from account_service.domain.errors import ValidationError
from account_service.domain.models import Account


def _account(**overrides) -> Account:
    data = {"name": "John Doe", "email": "john@example.com", "password_hash": "hashedPassword123"}
    data.update(overrides)
    return Account.create(**data)


class TestAccountConstruction:
    def test_valid_data_creates_active_account(self):
        account = _account()

        assert account.name == "John Doe"
        assert account.email == "john@example.com"
        assert account.password_hash == "hashedPassword123"
        assert account.is_active is True
        assert uuid.UUID(account.id)
        assert account.created_at == account.updated_at
        assert account.created_at.tzinfo is not None

    def test_each_account_gets_a_fresh_id(self):
        assert _account().id != _account().id

    @pytest.mark.parametrize("name", ["", "   "])
    def test_empty_name_is_rejected(self, name):
        with pytest.raises(ValidationError, match="Name is required"):
            _account(name=name)

    @pytest.mark.parametrize("name", ["J", " J "])
    def test_short_name_is_rejected_after_trimming(self, name):
        with pytest.raises(ValidationError, match="at least 2 characters"):
            _account(name=name)

    def test_name_is_stored_trimmed(self):
        assert _account(name="  Jo  ").name == "Jo"

    def test_empty_email_is_rejected(self):
        with pytest.raises(ValidationError, match="Email is required"):
            _account(email="")

    def test_email_is_normalised(self):
        assert _account(email="  John@Example.COM ").email == "john@example.com"

    def test_empty_password_hash_is_rejected(self):
        with pytest.raises(ValidationError, match="Password is required"):
            _account(password_hash="")

    def test_accounts_are_immutable(self):
        account = _account()
        with pytest.raises(dataclasses.FrozenInstanceError):
            account.name = "Other"  # type: ignore[misc]


class TestAccountMutators:
    @pytest.fixture
    def account(self) -> Account:
        past = datetime.now(timezone.utc) - timedelta(days=1)
        return _account(created_at=past)

    def test_with_name_returns_updated_copy(self, account):
        renamed = account.with_name("Jane Doe")

        assert renamed.name == "Jane Doe"
        assert account.name == "John Doe"
        assert renamed.id == account.id
        assert renamed.created_at == account.created_at
        assert renamed.updated_at > account.updated_at

    def test_with_name_revalidates(self, account):
        with pytest.raises(ValidationError):
            account.with_name("J")

    def test_with_email(self, account):
        changed = account.with_email("Jane@Example.com")

        assert changed.email == "jane@example.com"
        assert changed.updated_at > account.updated_at
        assert changed.created_at == account.created_at

    def test_with_email_rejects_empty(self, account):
        with pytest.raises(ValidationError, match="Email is required"):
            account.with_email(" ")

    def test_with_password_hash(self, account):
        changed = account.with_password_hash("newHash")

        assert changed.password_hash == "newHash"
        assert changed.updated_at > account.updated_at

    def test_with_password_hash_rejects_empty(self, account):
        with pytest.raises(ValidationError, match="Password is required"):
            account.with_password_hash("")

    def test_deactivate_and_activate(self, account):
        inactive = account.deactivate()
        assert inactive.is_active is False
        assert inactive.updated_at > account.updated_at

        active = inactive.activate()
        assert active.is_active is True
        assert active.created_at == account.created_at


def test_public_projection_never_includes_password_hash():
    view = _account().to_public()

    assert not hasattr(view, "password_hash")
    assert view.name == "John Doe"
    assert view.is_active is True
