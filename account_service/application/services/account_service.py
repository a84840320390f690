from __future__ import annotations

import logging
from typing import Optional

from ...domain.errors import ConflictError, NotFoundError
from ...domain.models import Account, AccountView, ListQuery, PaginatedResult
from ...domain.ports.persistence import AccountRepository
from ...domain.ports.security import PasswordHasher

logger = logging.getLogger(__name__)


class AccountService:
    """Profile reads and updates plus the paginated account listing."""

    def __init__(self, accounts: AccountRepository, password_hasher: PasswordHasher) -> None:
        self._accounts = accounts
        self._hasher = password_hasher

    # Public query helpers -------------------------------------------------
    def get_by_id(self, account_id: str) -> AccountView:
        return self._require(account_id).to_public()

    def list_accounts(self, query: ListQuery) -> PaginatedResult[AccountView]:
        accounts, total = self._accounts.list_accounts(query)
        return PaginatedResult.build([item.to_public() for item in accounts], total, query)

    # Mutations ------------------------------------------------------------
    def update(
        self,
        account_id: str,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> AccountView:
        account = self._require(account_id)

        if email is not None:
            candidate = email.strip().lower()
            if candidate != account.email:
                existing = self._accounts.get_account_by_email(candidate)
                if existing and existing.id != account.id:
                    raise ConflictError("Email already in use")
                account = account.with_email(candidate)

        if name is not None:
            account = account.with_name(name)

        updated = self._accounts.update_account(account)
        logger.info("Updated account %s", updated.id)
        return updated.to_public()

    def change_password(self, account_id: str, new_password: str) -> AccountView:
        account = self._require(account_id)
        account = account.with_password_hash(self._hasher.hash(new_password))
        updated = self._accounts.update_account(account)
        logger.info("Changed password for account %s", updated.id)
        return updated.to_public()

    def set_active(self, account_id: str, active: bool) -> AccountView:
        account = self._require(account_id)
        account = account.activate() if active else account.deactivate()
        updated = self._accounts.update_account(account)
        logger.info("Account %s %s", updated.id, "activated" if active else "deactivated")
        return updated.to_public()

    def _require(self, account_id: str) -> Account:
        account = self._accounts.get_account_by_id(account_id)
        if not account:
            raise NotFoundError("User not found")
        return account
