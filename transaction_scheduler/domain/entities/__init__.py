"""Domain entities."""
from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.entities.transaction import (
    Repricer,
    Transaction,
    TransactionChanges,
)

__all__ = [
    "FeeConfiguration",
    "Repricer",
    "Transaction",
    "TransactionChanges",
]
