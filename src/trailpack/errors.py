"""
Custom exceptions and error handling for TrailPack.

Defines application-specific exceptions with error codes for consistent
error handling across the engine, Lambda handlers and client communication.

Usage:
    from trailpack.errors import NotFoundError, ErrorCode

    raise NotFoundError("Trip abc not found", code=ErrorCode.TRIP_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes for client-facing error messages."""

    # Lookup errors
    TRIP_NOT_FOUND = "TRIP_NOT_FOUND"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    LIBRARY_ITEM_NOT_FOUND = "LIBRARY_ITEM_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_QUANTITY = "INVALID_QUANTITY"
    EMPTY_ITEM_NAME = "EMPTY_ITEM_NAME"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_TRANSITION = "INVALID_TRANSITION"

    # Catalog errors
    INVALID_CATALOG = "INVALID_CATALOG"

    # System errors
    PARTIAL_WRITE = "PARTIAL_WRITE"
    INTERNAL_ERROR = "INTERNAL_ERROR"


USER_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.TRIP_NOT_FOUND: "We couldn't find that trip. It may have been deleted.",
    ErrorCode.ITEM_NOT_FOUND: "That packing item no longer exists.",
    ErrorCode.LIBRARY_ITEM_NOT_FOUND: "That suggestion is no longer available.",
    ErrorCode.VALIDATION_ERROR: "Your request contains invalid information. Please check and try again.",
    ErrorCode.INVALID_QUANTITY: "Quantity must be at least 1.",
    ErrorCode.EMPTY_ITEM_NAME: "Please give the item a name.",
    ErrorCode.INVALID_REQUEST: "Invalid request format. Please try again.",
    ErrorCode.INVALID_TRANSITION: "This suggestion has already been handled.",
    ErrorCode.INVALID_CATALOG: "The packing library is unavailable. Please try again later.",
    ErrorCode.PARTIAL_WRITE: "Your packing list could not be saved. No changes were made.",
    ErrorCode.INTERNAL_ERROR: "An unexpected error occurred. Please try again.",
}


class TrailPackError(Exception):
    """Base exception for all TrailPack errors."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INTERNAL_ERROR):
        self.message = message
        self.code = code
        super().__init__(message)

    @property
    def user_message(self) -> str:
        return USER_MESSAGES.get(self.code, USER_MESSAGES[ErrorCode.INTERNAL_ERROR])


class NotFoundError(TrailPackError):
    """Referenced trip, item or library item does not exist."""

    pass


class ValidationError(TrailPackError):
    """Input rejected before any write."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.VALIDATION_ERROR):
        super().__init__(message, code=code)


class SuggestionStateError(ValidationError):
    """A suggestion record was asked to leave a terminal status."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_TRANSITION):
        super().__init__(message, code=code)


class CatalogError(TrailPackError):
    """The library catalog is internally inconsistent."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.INVALID_CATALOG):
        super().__init__(message, code=code)


class PersistenceError(TrailPackError):
    """A paired write could not be completed atomically."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.PARTIAL_WRITE):
        super().__init__(message, code=code)
