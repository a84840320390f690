import logging
import sqlite3
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, List, Optional, Tuple

from ...domain.errors import ConflictError, NotFoundError
from ...domain.models import Account, ListQuery, SortField
from ...domain.ports.persistence import PersistenceGateway

logger = logging.getLogger(__name__)

_SORT_COLUMNS = {
    SortField.NAME: "name COLLATE NOCASE",
    SortField.EMAIL: "email COLLATE NOCASE",
    SortField.IS_ACTIVE: "is_active",
    SortField.CREATED_AT: "created_at",
    SortField.UPDATED_AT: "updated_at",
}


class SQLitePersistence(PersistenceGateway):
    """SQLite-backed implementation of the persistence gateway."""

    def __init__(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        self._conn = sqlite3.connect(path, check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._lock = threading.Lock()
        self._initialize()

    def _initialize(self) -> None:
        with self._conn:
            self._conn.executescript(
                """
                CREATE TABLE IF NOT EXISTS accounts (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    email TEXT NOT NULL UNIQUE,
                    password_hash TEXT NOT NULL,
                    is_active INTEGER NOT NULL DEFAULT 1,
                    created_at TEXT NOT NULL,
                    updated_at TEXT NOT NULL
                );

                CREATE INDEX IF NOT EXISTS idx_accounts_created_at
                    ON accounts(created_at DESC);
                """
            )

    def close(self) -> None:
        self._conn.close()

    # AccountRepository API -------------------------------------------------
    def get_account_by_id(self, account_id: str) -> Optional[Account]:
        with self._lock:
            cur = self._conn.execute("SELECT * FROM accounts WHERE id = ?", (account_id,))
            row = cur.fetchone()
        return self._row_to_account(row) if row else None

    def get_account_by_email(self, email: str) -> Optional[Account]:
        with self._lock:
            cur = self._conn.execute(
                "SELECT * FROM accounts WHERE email = ?", (email.strip().lower(),)
            )
            row = cur.fetchone()
        return self._row_to_account(row) if row else None

    def list_accounts(self, query: ListQuery) -> Tuple[List[Account], int]:
        clauses: List[str] = []
        params: List[Any] = []
        if query.search:
            pattern = f"%{self._escape_like(query.search)}%"
            clauses.append("(name LIKE ? ESCAPE '\\' OR email LIKE ? ESCAPE '\\')")
            params.extend([pattern, pattern])
        if query.is_active is not None:
            clauses.append("is_active = ?")
            params.append(int(query.is_active))
        where = f" WHERE {' AND '.join(clauses)}" if clauses else ""

        column = _SORT_COLUMNS[query.sort_by]
        direction = query.sort_order.value
        statement = (
            f"SELECT * FROM accounts{where} "
            f"ORDER BY {column} {direction}, id {direction} LIMIT ? OFFSET ?"
        )
        with self._lock:
            cur = self._conn.execute(f"SELECT COUNT(*) FROM accounts{where}", params)
            total = cur.fetchone()[0]
            cur = self._conn.execute(statement, [*params, query.limit, query.offset])
            rows = cur.fetchall()
        return [self._row_to_account(row) for row in rows], total

    def create_account(self, account: Account) -> Account:
        try:
            with self._lock, self._conn:
                self._conn.execute(
                    """
                    INSERT INTO accounts (
                        id, name, email, password_hash, is_active, created_at, updated_at
                    )
                    VALUES (?, ?, ?, ?, ?, ?, ?)
                    """,
                    (
                        account.id,
                        account.name,
                        account.email,
                        account.password_hash,
                        int(account.is_active),
                        self._format_datetime(account.created_at),
                        self._format_datetime(account.updated_at),
                    ),
                )
        except sqlite3.IntegrityError as exc:
            logger.info("Rejected duplicate account insert for %s", account.email)
            raise ConflictError("User with this email already exists") from exc
        stored = self.get_account_by_id(account.id)
        if not stored:
            raise RuntimeError("Failed to persist account.")
        return stored

    def update_account(self, account: Account) -> Account:
        try:
            with self._lock, self._conn:
                cur = self._conn.execute(
                    """
                    UPDATE accounts
                    SET name = ?, email = ?, password_hash = ?, is_active = ?, updated_at = ?
                    WHERE id = ?
                    """,
                    (
                        account.name,
                        account.email,
                        account.password_hash,
                        int(account.is_active),
                        self._format_datetime(account.updated_at),
                        account.id,
                    ),
                )
                updated = cur.rowcount
        except sqlite3.IntegrityError as exc:
            raise ConflictError("Email already in use") from exc
        if not updated:
            raise NotFoundError("User not found")
        stored = self.get_account_by_id(account.id)
        if not stored:
            raise NotFoundError("User not found")
        return stored

    def delete_account(self, account_id: str) -> None:
        with self._lock, self._conn:
            self._conn.execute("DELETE FROM accounts WHERE id = ?", (account_id,))

    def account_exists(self, email: str) -> bool:
        with self._lock:
            cur = self._conn.execute(
                "SELECT 1 FROM accounts WHERE email = ? LIMIT 1", (email.strip().lower(),)
            )
            return cur.fetchone() is not None

    def count_accounts(self) -> int:
        with self._lock:
            cur = self._conn.execute("SELECT COUNT(*) FROM accounts")
            return cur.fetchone()[0]

    # Helpers ----------------------------------------------------------------
    @staticmethod
    def _escape_like(term: str) -> str:
        return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")

    @staticmethod
    def _format_datetime(value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat(timespec="microseconds")

    @staticmethod
    def _parse_datetime(value: str) -> datetime:
        result = datetime.fromisoformat(value)
        if result.tzinfo is None:
            return result.replace(tzinfo=timezone.utc)
        return result.astimezone(timezone.utc)

    def _row_to_account(self, row: sqlite3.Row) -> Account:
        return Account(
            id=row["id"],
            name=row["name"],
            email=row["email"],
            password_hash=row["password_hash"],
            is_active=bool(row["is_active"]),
            created_at=self._parse_datetime(row["created_at"]),
            updated_at=self._parse_datetime(row["updated_at"]),
        )
