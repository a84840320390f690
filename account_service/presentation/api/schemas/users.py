"""Pydantic schemas for account endpoints. Responses use camelCase field names."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr
from pydantic.alias_generators import to_camel

from ....domain.models import AccountView, PageMeta, PaginatedResult


class ApiModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UpdateProfileRequest(BaseModel):
    """Partial update; omitted fields are left untouched."""

    name: Optional[str] = None
    email: Optional[EmailStr] = None


class UserResponse(ApiModel):
    id: str
    name: str
    email: str
    is_active: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_view(cls, view: AccountView) -> "UserResponse":
        return cls(
            id=view.id,
            name=view.name,
            email=view.email,
            is_active=view.is_active,
            created_at=view.created_at,
            updated_at=view.updated_at,
        )


class PageMetaResponse(ApiModel):
    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int
    has_next: bool
    has_previous: bool

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PageMetaResponse":
        return cls(
            total_items=meta.total_items,
            item_count=meta.item_count,
            items_per_page=meta.items_per_page,
            total_pages=meta.total_pages,
            current_page=meta.current_page,
            has_next=meta.has_next,
            has_previous=meta.has_previous,
        )


class UserListResponse(ApiModel):
    data: List[UserResponse]
    meta: PageMetaResponse

    @classmethod
    def from_page(cls, page: PaginatedResult[AccountView]) -> "UserListResponse":
        return cls(
            data=[UserResponse.from_view(item) for item in page.data],
            meta=PageMetaResponse.from_meta(page.meta),
        )
