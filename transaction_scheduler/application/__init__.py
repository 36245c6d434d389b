"""
Application Layer - Use Cases and Ports

This module contains the application logic that orchestrates domain entities
and coordinates with external systems through ports (interfaces).

Structure:
- ports/outbound/: Interfaces that the application uses to reach storage and the clock
- services/: Application services shared by use cases (pricing)
- use_cases/: Create, get, update and delete transaction
- dto/: Commands accepted by the use cases
"""
from transaction_scheduler.application.use_cases import (
    CreateTransactionUseCase,
    GetTransactionUseCase,
    UpdateTransactionUseCase,
    DeleteTransactionUseCase,
)

__all__ = [
    "CreateTransactionUseCase",
    "GetTransactionUseCase",
    "UpdateTransactionUseCase",
    "DeleteTransactionUseCase",
]
