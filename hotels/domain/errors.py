"""Domain error codes for the hotels module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    FORBIDDEN = "FORBIDDEN"
    HOTEL_NOT_FOUND = "HOTEL_NOT_FOUND"
    INVALID_HOTEL_ID = "INVALID_HOTEL_ID"
    STORE_UNAVAILABLE = "STORE_UNAVAILABLE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ForbiddenError(DomainError):
    """Raised when a user's ticket does not entitle them to lodging."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.FORBIDDEN,
            message="Ticket does not grant access to hotels",
        )


class HotelNotFoundError(DomainError):
    """Raised when a hotel is not found."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.HOTEL_NOT_FOUND,
            message="Hotel not found",
        )


class InvalidHotelIdError(DomainError):
    """Raised when a hotel ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_HOTEL_ID,
            message="Invalid hotel ID format",
        )


class StoreUnavailableError(DomainError):
    """Raised when the backing store cannot complete a read."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.STORE_UNAVAILABLE,
            message="Storage is temporarily unavailable",
        )
