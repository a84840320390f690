from __future__ import annotations

from typing import List, Optional, Protocol, Tuple

from ..models import Account, ListQuery


class AccountRepository(Protocol):
    """Persistence functions related to user accounts."""

    def get_account_by_id(self, account_id: str) -> Optional[Account]:
        ...

    def get_account_by_email(self, email: str) -> Optional[Account]:
        ...

    def list_accounts(self, query: ListQuery) -> Tuple[List[Account], int]:
        """Return the rows of the requested page and the total matching count."""
        ...

    def create_account(self, account: Account) -> Account:
        """Insert atomically; raises ``ConflictError`` when the e-mail is taken."""
        ...

    def update_account(self, account: Account) -> Account:
        """Overwrite mutable fields atomically; raises ``NotFoundError`` or ``ConflictError``."""
        ...

    def delete_account(self, account_id: str) -> None:
        ...

    def account_exists(self, email: str) -> bool:
        ...

    def count_accounts(self) -> int:
        ...


class PersistenceGateway(AccountRepository, Protocol):
    """Composite gateway combining every persistence concern used by the app."""

    def close(self) -> None:
        ...
