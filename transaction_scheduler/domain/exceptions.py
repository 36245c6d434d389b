"""
Domain Exceptions

Custom exceptions for domain layer errors.

Validation errors are raised before any state is built, so a failed
construction never leaves a partially built object behind.
"""
from typing import Optional

from transaction_scheduler.exceptions import SchedulerError


class DomainError(SchedulerError):
    """Base exception for domain errors."""
    pass


# --- Validation ---

class ValidationError(DomainError, ValueError):
    """Raised when input is malformed or out of range."""
    pass


class InvalidAmountError(ValidationError):
    """Raised when a monetary amount is missing, unparsable or negative."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_AMOUNT")


class InvalidAccountNumberError(ValidationError):
    """Raised when an account number fails format validation."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_ACCOUNT_NUMBER")


class InvalidFeeConfigurationError(ValidationError):
    """Raised when a fee rule field is out of bounds."""

    def __init__(self, message: str):
        super().__init__(message, error_code="INVALID_FEE_CONFIGURATION")


class InvalidTransactionError(ValidationError):
    """Raised when a transaction violates one of its invariants."""

    def __init__(self, message: str, error_code: Optional[str] = "INVALID_TRANSACTION"):
        super().__init__(message, error_code=error_code)


class SameAccountError(InvalidTransactionError):
    """Raised when source and destination accounts are the same."""

    def __init__(self, message: str = "Source and destination accounts cannot be the same"):
        super().__init__(message, error_code="SAME_ACCOUNT")


class PastScheduledDateError(InvalidTransactionError):
    """Raised when the scheduled date is before today."""

    def __init__(self, message: str = "Scheduled date cannot be in the past"):
        super().__init__(message, error_code="PAST_SCHEDULED_DATE")


class NonPositiveAmountError(InvalidTransactionError):
    """Raised when the transfer amount is zero."""

    def __init__(self, message: str = "Transfer amount must be greater than zero"):
        super().__init__(message, error_code="NON_POSITIVE_AMOUNT")


# --- Lookup ---

class NotFoundError(DomainError):
    """Raised when a referenced resource does not exist."""
    pass


class TransactionNotFoundError(NotFoundError):
    """Raised when no transaction exists with the given id."""

    def __init__(self, transaction_id: int, message: Optional[str] = None):
        super().__init__(
            message or f"Transaction not found with ID: {transaction_id}",
            error_code="TRANSACTION_NOT_FOUND",
        )
        self.transaction_id = transaction_id


class FeeConfigurationNotFoundError(NotFoundError):
    """Raised when no active fee rule covers an amount/day-offset pair."""

    def __init__(self, amount, days_between: int):
        super().__init__(
            f"No fee configuration found for amount {amount} and {days_between} days",
            error_code="FEE_CONFIGURATION_NOT_FOUND",
        )
        self.amount = amount
        self.days_between = days_between


# --- State ---

class InactiveConfigurationError(DomainError):
    """Raised when a fee is calculated with a deactivated rule."""

    def __init__(self, fee_type: str):
        super().__init__(
            f"Cannot calculate fee with inactive configuration: {fee_type}",
            error_code="INACTIVE_CONFIGURATION",
        )
        self.fee_type = fee_type
