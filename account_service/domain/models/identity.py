from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True, slots=True)
class AuthIdentity:
    """Caller identity derived from a verified access token."""

    account_id: str
    email: Optional[str] = None
