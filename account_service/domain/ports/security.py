from __future__ import annotations

from typing import Any, Dict, Mapping, Protocol


class PasswordHasher(Protocol):
    """One-way password hashing with constant-time verification."""

    def hash(self, plaintext: str) -> str:
        ...

    def compare(self, plaintext: str, digest: str) -> bool:
        ...


class TokenService(Protocol):
    """Issues and verifies signed, expiring bearer tokens.

    Verification raises ``InvalidTokenError`` for every kind of failure.
    """

    def issue_access(self, claims: Mapping[str, Any]) -> str:
        ...

    def issue_refresh(self, claims: Mapping[str, Any]) -> str:
        ...

    def verify_access(self, token: str) -> Dict[str, Any]:
        ...

    def verify_refresh(self, token: str) -> Dict[str, Any]:
        ...
