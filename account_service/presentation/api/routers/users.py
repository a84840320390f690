from typing import Optional

from fastapi import APIRouter, Depends, Query

from ....application.services.account_service import AccountService
from ....core.dependencies import get_account_service
from ....domain.models import AuthIdentity, ListQuery
from ...api.dependencies import require_identity
from ...api.schemas.users import UpdateProfileRequest, UserListResponse, UserResponse

router = APIRouter(prefix="/users", tags=["Users"], dependencies=[Depends(require_identity)])


@router.get("", response_model=UserListResponse)
def list_users(
    page: Optional[int] = Query(default=None),
    limit: Optional[int] = Query(default=None),
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Optional[str] = Query(default=None, alias="sortOrder"),
    search: Optional[str] = Query(default=None),
    is_active: Optional[str] = Query(default=None, alias="isActive"),
    service: AccountService = Depends(get_account_service),
) -> UserListResponse:
    query = ListQuery.from_raw(
        page=page,
        limit=limit,
        sort_by=sort_by,
        sort_order=sort_order,
        search=search,
        is_active=is_active,
    )
    return UserListResponse.from_page(service.list_accounts(query))


@router.get("/me", response_model=UserResponse)
def get_profile(
    identity: AuthIdentity = Depends(require_identity),
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    return UserResponse.from_view(service.get_by_id(identity.account_id))


@router.put("/me", response_model=UserResponse)
def update_profile(
    payload: UpdateProfileRequest,
    identity: AuthIdentity = Depends(require_identity),
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    updated = service.update(identity.account_id, name=payload.name, email=payload.email)
    return UserResponse.from_view(updated)


@router.get("/{account_id}", response_model=UserResponse)
def get_user(
    account_id: str,
    service: AccountService = Depends(get_account_service),
) -> UserResponse:
    return UserResponse.from_view(service.get_by_id(account_id))
