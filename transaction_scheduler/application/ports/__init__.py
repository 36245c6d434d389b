"""Application ports (interfaces)."""
from transaction_scheduler.application.ports.outbound import (
    TransactionRepository,
    FeeConfigurationRepository,
    TimeProviderPort,
)

__all__ = [
    "TransactionRepository",
    "FeeConfigurationRepository",
    "TimeProviderPort",
]
