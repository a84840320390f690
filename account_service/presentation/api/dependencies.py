import logging

from fastapi import Request

from ...core.dependencies import get_container
from ...domain.errors import DomainError, InternalError, InvalidTokenError, UnauthorizedError
from ...domain.models import AuthIdentity

logger = logging.getLogger(__name__)


class BearerTokenGate:
    """Verifies the ``Authorization: Bearer <token>`` header of protected requests.

    Resolves to the caller's :class:`AuthIdentity`. Unexpected faults surface as
    ``InternalError`` (500) instead of letting the request through.
    """

    async def __call__(self, request: Request) -> AuthIdentity:
        try:
            return self._authenticate(request)
        except DomainError:
            raise
        except Exception as exc:
            logger.exception("Authentication gate failed for %s %s", request.method, request.url.path)
            raise InternalError("Internal server error") from exc

    @staticmethod
    def _authenticate(request: Request) -> AuthIdentity:
        header = request.headers.get("Authorization")
        if not header:
            raise UnauthorizedError("No token provided")

        parts = header.split(" ")
        if len(parts) != 2:
            raise UnauthorizedError("Token error")

        scheme, token = parts
        if scheme.lower() != "bearer":
            raise UnauthorizedError("Token malformatted")

        token_service = get_container(request).token_service
        try:
            claims = token_service.verify_access(token)
        except InvalidTokenError as exc:
            raise UnauthorizedError("Invalid token") from exc

        email = claims.get("email")
        return AuthIdentity(account_id=str(claims["sub"]), email=str(email) if email else None)


require_identity = BearerTokenGate()
