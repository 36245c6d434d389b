"""
Application Use Cases.

This module contains the business use cases that orchestrate
domain logic through port interfaces.
"""
from transaction_scheduler.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from transaction_scheduler.application.use_cases.get_transaction import (
    GetTransactionUseCase,
)
from transaction_scheduler.application.use_cases.update_transaction import (
    UpdateTransactionUseCase,
)
from transaction_scheduler.application.use_cases.delete_transaction import (
    DeleteTransactionUseCase,
)

__all__ = [
    "CreateTransactionUseCase",
    "GetTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
]
