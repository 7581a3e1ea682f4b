from typing import Optional


class CategoryTreeError(Exception):
    """Base exception for all category tree errors."""


class StorageUnavailableError(CategoryTreeError):
    """The database cannot be reached or the connection was lost."""


class QueryExecutionError(CategoryTreeError):
    """A query failed, timed out, or returned an unexpected shape."""


class DataIntegrityError(CategoryTreeError):
    """Category rows do not form a valid forest."""

    def __init__(self, message: str, category_id: Optional[int] = None):
        self.category_id = category_id
        if category_id is not None:
            message = f"[category {category_id}] {message}"
        super().__init__(message)
