from __future__ import annotations

import logging
from dataclasses import dataclass

from ...domain.errors import ConflictError, NotFoundError, UnauthorizedError
from ...domain.models import Account, AccountView
from ...domain.ports.persistence import AccountRepository
from ...domain.ports.security import PasswordHasher, TokenService

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AuthResult:
    user: AccountView
    access_token: str
    refresh_token: str


class AuthService:
    """Registration and credential login, both ending in a fresh token pair."""

    def __init__(
        self,
        accounts: AccountRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ) -> None:
        self._accounts = accounts
        self._hasher = password_hasher
        self._tokens = token_service

    # ------------------------------------------------------------------
    def register(self, name: str, email: str, password: str) -> AuthResult:
        # Best-effort pre-check; the store's unique constraint settles races.
        if self._accounts.get_account_by_email(email):
            raise ConflictError("User with this email already exists")

        password_hash = self._hasher.hash(password)
        account = Account.create(name=name, email=email, password_hash=password_hash)
        saved = self._accounts.create_account(account)
        logger.info("Registered account %s", saved.id)
        return self._issue(saved)

    def login(self, email: str, password: str) -> AuthResult:
        account = self._accounts.get_account_by_email(email)
        if not account:
            raise NotFoundError("User not found")
        if not account.is_active:
            logger.warning("Login attempt for inactive account %s", account.id)
            raise UnauthorizedError("User account is inactive")
        if not self._hasher.compare(password, account.password_hash):
            logger.warning("Invalid credentials for account %s", account.id)
            raise UnauthorizedError("Invalid credentials")
        logger.info("Account %s logged in", account.id)
        return self._issue(account)

    def _issue(self, account: Account) -> AuthResult:
        access_token = self._tokens.issue_access({"sub": account.id, "email": account.email})
        refresh_token = self._tokens.issue_refresh({"sub": account.id})
        return AuthResult(
            user=account.to_public(),
            access_token=access_token,
            refresh_token=refresh_token,
        )
