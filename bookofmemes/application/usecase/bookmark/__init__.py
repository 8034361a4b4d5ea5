"""Bookmark use cases."""

from .list_bookmark_users import (
    BookmarkUserItem,
    ListBookmarkUsersRequest,
    ListBookmarkUsersUseCase,
)
from .list_bookmarks import BookmarkItem, ListBookmarksRequest, ListBookmarksUseCase
from .save_bookmark import (
    AddBookmarkUseCase,
    BookmarkRequest,
    RemoveBookmarkResponse,
    RemoveBookmarkUseCase,
)

__all__ = [
    "AddBookmarkUseCase",
    "BookmarkItem",
    "BookmarkRequest",
    "BookmarkUserItem",
    "ListBookmarkUsersRequest",
    "ListBookmarkUsersUseCase",
    "ListBookmarksRequest",
    "ListBookmarksUseCase",
    "RemoveBookmarkResponse",
    "RemoveBookmarkUseCase",
]
