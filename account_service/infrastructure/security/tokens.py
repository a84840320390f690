"""
JWT access/refresh token management.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Mapping

from jose import JWTError, jwt

from ...domain.errors import InvalidTokenError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTTokenService:
    """
    Issues and verifies signed bearer tokens.

    Access tokens (short-lived) and refresh tokens (long-lived) are signed with
    independent secrets and carry independent expiry windows. Every verification
    failure raises the same ``InvalidTokenError``.
    """

    def __init__(
        self,
        access_secret: str,
        refresh_secret: str,
        access_ttl: timedelta = timedelta(hours=24),
        refresh_ttl: timedelta = timedelta(days=7),
        algorithm: str = "HS256",
    ) -> None:
        if not access_secret or not refresh_secret:
            raise RuntimeError("JWT secrets must be configured.")
        if access_secret == refresh_secret:
            logger.warning(
                "Access and refresh tokens share the same secret. Configure JWT_REFRESH_SECRET separately."
            )
        self._access_secret = access_secret
        self._refresh_secret = refresh_secret
        self._access_ttl = access_ttl
        self._refresh_ttl = refresh_ttl
        self._algorithm = algorithm

    # Issuing -------------------------------------------------------------
    def issue_access(self, claims: Mapping[str, Any]) -> str:
        return self._encode(claims, ACCESS_TOKEN_TYPE, self._access_secret, self._access_ttl)

    def issue_refresh(self, claims: Mapping[str, Any]) -> str:
        return self._encode(claims, REFRESH_TOKEN_TYPE, self._refresh_secret, self._refresh_ttl)

    # Verification --------------------------------------------------------
    def verify_access(self, token: str) -> Dict[str, Any]:
        return self._decode(token, ACCESS_TOKEN_TYPE, self._access_secret)

    def verify_refresh(self, token: str) -> Dict[str, Any]:
        return self._decode(token, REFRESH_TOKEN_TYPE, self._refresh_secret)

    # Helpers -------------------------------------------------------------
    def _encode(
        self,
        claims: Mapping[str, Any],
        token_type: str,
        secret: str,
        ttl: timedelta,
    ) -> str:
        now = datetime.now(tz=timezone.utc)
        payload = dict(claims)
        payload.update({"type": token_type, "iat": now, "exp": now + ttl})
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def _decode(self, token: str, token_type: str, secret: str) -> Dict[str, Any]:
        try:
            payload = jwt.decode(token, secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidTokenError() from exc
        if payload.get("type") != token_type or not payload.get("sub"):
            raise InvalidTokenError()
        return payload
