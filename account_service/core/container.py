from dataclasses import dataclass

from ..application.services.account_service import AccountService
from ..application.services.auth_service import AuthService
from ..domain.ports.persistence import PersistenceGateway
from ..domain.ports.security import PasswordHasher, TokenService
from .config import Settings


@dataclass(slots=True)
class ApplicationContainer:
    """Dependency registry shared across the FastAPI application lifecycle."""

    settings: Settings
    persistence: PersistenceGateway
    password_hasher: PasswordHasher
    token_service: TokenService
    auth_service: AuthService
    account_service: AccountService
