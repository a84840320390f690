from pydantic import BaseModel, EmailStr, Field

from ....application.services.auth_service import AuthResult
from .users import ApiModel, UserResponse


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str = Field(..., min_length=1)


class LoginRequest(BaseModel):
    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class AuthResponse(ApiModel):
    user: UserResponse
    access_token: str
    refresh_token: str

    @classmethod
    def from_result(cls, result: AuthResult) -> "AuthResponse":
        return cls(
            user=UserResponse.from_view(result.user),
            access_token=result.access_token,
            refresh_token=result.refresh_token,
        )
