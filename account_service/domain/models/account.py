"""Account domain model."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Optional

from ..errors import ValidationError

MIN_NAME_LENGTH = 2


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("Name is required")
    if len(cleaned) < MIN_NAME_LENGTH:
        raise ValidationError(f"Name must be at least {MIN_NAME_LENGTH} characters long")
    return cleaned


def _clean_email(email: Optional[str]) -> str:
    cleaned = (email or "").strip().lower()
    if not cleaned:
        raise ValidationError("Email is required")
    return cleaned


def _check_password_hash(password_hash: Optional[str]) -> str:
    if not password_hash:
        raise ValidationError("Password is required")
    return password_hash


@dataclass(frozen=True, slots=True)
class Account:
    """
    A registered user account.

    Instances are immutable: every mutator validates its input and returns a
    new copy with ``updated_at`` advanced. ``id`` and ``created_at`` never change
    after construction.

    Attributes:
        id: UUID4 string assigned at creation
        name: Display name, trimmed, at least two characters
        email: Lower-cased e-mail address (unique in the store)
        password_hash: bcrypt digest of the password
        is_active: Inactive accounts cannot log in
        created_at: Creation timestamp (UTC)
        updated_at: Last mutation timestamp (UTC)
    """

    id: str
    name: str
    email: str
    password_hash: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", _clean_name(self.name))
        object.__setattr__(self, "email", _clean_email(self.email))
        _check_password_hash(self.password_hash)

    @classmethod
    def create(
        cls,
        name: str,
        email: str,
        password_hash: str,
        *,
        id: Optional[str] = None,
        is_active: bool = True,
        created_at: Optional[datetime] = None,
        updated_at: Optional[datetime] = None,
    ) -> "Account":
        now = utcnow()
        created = created_at or now
        return cls(
            id=id or str(uuid.uuid4()),
            name=name,
            email=email,
            password_hash=password_hash,
            is_active=is_active,
            created_at=created,
            updated_at=updated_at or created,
        )

    # Mutators ---------------------------------------------------------------
    def with_name(self, name: str) -> "Account":
        return replace(self, name=_clean_name(name), updated_at=utcnow())

    def with_email(self, email: str) -> "Account":
        return replace(self, email=_clean_email(email), updated_at=utcnow())

    def with_password_hash(self, password_hash: str) -> "Account":
        return replace(
            self, password_hash=_check_password_hash(password_hash), updated_at=utcnow()
        )

    def activate(self) -> "Account":
        return replace(self, is_active=True, updated_at=utcnow())

    def deactivate(self) -> "Account":
        return replace(self, is_active=False, updated_at=utcnow())

    def to_public(self) -> "AccountView":
        return AccountView(
            id=self.id,
            name=self.name,
            email=self.email,
            is_active=self.is_active,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    def __repr__(self) -> str:
        return f"<Account id={self.id} email={self.email} active={self.is_active}>"


@dataclass(frozen=True, slots=True)
class AccountView:
    """Public projection of an account; never carries the password hash."""

    id: str
    name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime
