"""
Error types shared by the storage layer and the HTTP layer.

The repository only ever raises `StorageError`; services translate its kind
into one of the `APIError` subclasses, which `core.handlers` renders.
"""

from __future__ import annotations

import enum

from fastapi import status


class StorageErrorKind(str, enum.Enum):
    CONFLICT = "conflict"
    NOT_FOUND = "not_found"
    OTHER = "other"


class StorageError(Exception):
    def __init__(self, kind: StorageErrorKind, message: str = "") -> None:
        self.kind = kind
        self.message = message or kind.value
        super().__init__(self.message)

    @classmethod
    def conflict(cls, message: str = "") -> StorageError:
        return cls(StorageErrorKind.CONFLICT, message)

    @classmethod
    def not_found(cls, message: str = "") -> StorageError:
        return cls(StorageErrorKind.NOT_FOUND, message)

    @classmethod
    def other(cls, message: str = "") -> StorageError:
        return cls(StorageErrorKind.OTHER, message)


class APIError(Exception):
    """
    Base class for errors that map straight to an HTTP response.

    `body_key` is the single JSON field the message is returned under.
    """

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key: str = "error"

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def to_body(self) -> dict[str, str]:
        return {self.body_key: self.message}


class BadRequestError(APIError):
    status_code = status.HTTP_400_BAD_REQUEST
    body_key = "message"


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    body_key = "message"


class ConflictError(APIError):
    status_code = status.HTTP_409_CONFLICT
    body_key = "error"


class InternalError(APIError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    body_key = "error"

    def __init__(self, message: str = "Database query failed") -> None:
        super().__init__(message)
