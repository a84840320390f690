"""Value objects for the list/paginate/filter/sort query contract."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Generic, List, Optional, TypeVar

MIN_PAGE = 1
MAX_PAGE = 1_000_000
MIN_LIMIT = 1
MAX_LIMIT = 100
DEFAULT_LIMIT = 10

T = TypeVar("T")


class SortOrder(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortOrder":
        if value and value.strip().upper() == cls.ASC.value:
            return cls.ASC
        return cls.DESC


class SortField(str, Enum):
    """Sortable account attributes, keyed by their public (camelCase) names."""

    NAME = "name"
    EMAIL = "email"
    IS_ACTIVE = "isActive"
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortField":
        if value:
            for member in cls:
                if member.value == value.strip():
                    return member
        return cls.CREATED_AT


def _clamp(value: Optional[int], lower: int, upper: int, default: int) -> int:
    if value is None:
        return default
    return max(lower, min(upper, value))


@dataclass(frozen=True, slots=True)
class ListQuery:
    page: int = MIN_PAGE
    limit: int = DEFAULT_LIMIT
    sort_by: SortField = SortField.CREATED_AT
    sort_order: SortOrder = SortOrder.DESC
    search: Optional[str] = None
    is_active: Optional[bool] = None

    @classmethod
    def from_raw(
        cls,
        *,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        sort_by: Optional[str] = None,
        sort_order: Optional[str] = None,
        search: Optional[str] = None,
        is_active: Optional[str] = None,
    ) -> "ListQuery":
        """Build a query from untrusted request parameters, clamping where needed.

        ``is_active`` is true only for the literal string ``"true"``; any other
        value filters for inactive accounts and ``None`` disables the filter.
        ``search`` is kept verbatim; a blank term disables it.
        """
        return cls(
            page=_clamp(page, MIN_PAGE, MAX_PAGE, MIN_PAGE),
            limit=_clamp(limit, MIN_LIMIT, MAX_LIMIT, DEFAULT_LIMIT),
            sort_by=SortField.parse(sort_by),
            sort_order=SortOrder.parse(sort_order),
            search=search if search and search.strip() else None,
            is_active=None if is_active is None else is_active == "true",
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass(frozen=True, slots=True)
class PageMeta:
    total_items: int
    item_count: int
    items_per_page: int
    total_pages: int
    current_page: int
    has_next: bool
    has_previous: bool


@dataclass(frozen=True)
class PaginatedResult(Generic[T]):
    data: List[T]
    meta: PageMeta

    @classmethod
    def build(cls, items: List[T], total: int, query: ListQuery) -> "PaginatedResult[T]":
        # Flags follow the requested page, not the number of rows returned.
        total_pages = math.ceil(total / query.limit)
        return cls(
            data=items,
            meta=PageMeta(
                total_items=total,
                item_count=len(items),
                items_per_page=query.limit,
                total_pages=total_pages,
                current_page=query.page,
                has_next=query.page < total_pages,
                has_previous=query.page > 1,
            ),
        )

