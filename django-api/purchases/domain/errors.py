"""Domain error codes for the purchases module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCategory(Enum):
    """Broad grouping of error codes."""

    INVALID_PURCHASE = "INVALID_PURCHASE"
    DOWNSTREAM = "DOWNSTREAM"


class ErrorCode(Enum):
    """Domain error codes."""

    INVALID_ACCOUNT = "INVALID_ACCOUNT"
    TOO_MANY_TICKETS = "TOO_MANY_TICKETS"
    NO_ADULT = "NO_ADULT"
    TOO_MANY_INFANTS = "TOO_MANY_INFANTS"
    PAYMENT_FAILED = "PAYMENT_FAILED"
    RESERVATION_FAILED = "RESERVATION_FAILED"

    @property
    def category(self) -> ErrorCategory:
        if self in (ErrorCode.PAYMENT_FAILED, ErrorCode.RESERVATION_FAILED):
            return ErrorCategory.DOWNSTREAM
        return ErrorCategory.INVALID_PURCHASE


@dataclass(eq=False)
class DomainError(Exception):
    """Domain error with code and user-safe message.

    ``cause`` holds the collaborator exception for downstream failures and is
    never shown to API clients.
    """

    code: ErrorCode
    message: str
    account_id: int | None = None
    cause: BaseException | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


def invalid_account(account_id: object) -> DomainError:
    return DomainError(
        code=ErrorCode.INVALID_ACCOUNT,
        message=f"Account id {account_id} is not valid",
    )


def too_many_tickets(account_id: int, limit: int) -> DomainError:
    return DomainError(
        code=ErrorCode.TOO_MANY_TICKETS,
        message=f"Cannot purchase more than {limit} tickets at a time",
        account_id=account_id,
    )


def no_adult(account_id: int) -> DomainError:
    return DomainError(
        code=ErrorCode.NO_ADULT,
        message="At least one adult ticket is required",
        account_id=account_id,
    )


def too_many_infants(account_id: int) -> DomainError:
    return DomainError(
        code=ErrorCode.TOO_MANY_INFANTS,
        message="Each infant must be accompanied by an adult",
        account_id=account_id,
    )


def payment_failed(account_id: int, cause: BaseException) -> DomainError:
    return DomainError(
        code=ErrorCode.PAYMENT_FAILED,
        message=f"Payment failed for account {account_id}",
        account_id=account_id,
        cause=cause,
    )


def reservation_failed(account_id: int, cause: BaseException) -> DomainError:
    return DomainError(
        code=ErrorCode.RESERVATION_FAILED,
        message=f"Seat reservation failed for account {account_id}",
        account_id=account_id,
        cause=cause,
    )
