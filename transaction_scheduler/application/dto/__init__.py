"""Data Transfer Objects for the application layer."""
from transaction_scheduler.application.dto.transaction import (
    CreateTransactionCommand,
    UpdateTransactionCommand,
)

__all__ = [
    "CreateTransactionCommand",
    "UpdateTransactionCommand",
]
