from fastapi import APIRouter, Depends, status

from ....application.services.auth_service import AuthService
from ....core.dependencies import get_auth_service
from ...api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Register a new account and return it together with a token pair."""
    result = auth_service.register(payload.name, payload.email, payload.password)
    return AuthResponse.from_result(result)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Exchange e-mail and password for a token pair."""
    result = auth_service.login(payload.email, payload.password)
    return AuthResponse.from_result(result)
