"""Domain models for the account service."""

from .account import Account, AccountView
from .identity import AuthIdentity
from .listing import ListQuery, PageMeta, PaginatedResult, SortField, SortOrder

__all__ = [
    "Account",
    "AccountView",
    "AuthIdentity",
    "ListQuery",
    "PageMeta",
    "PaginatedResult",
    "SortField",
    "SortOrder",
]
