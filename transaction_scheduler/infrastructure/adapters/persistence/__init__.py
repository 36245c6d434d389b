from transaction_scheduler.infrastructure.adapters.persistence.memory_adapter import (
    InMemoryTransactionRepository,
    InMemoryFeeConfigurationRepository,
)
from transaction_scheduler.infrastructure.adapters.persistence.sqlalchemy_adapter import (
    SqlAlchemyTransactionRepository,
    SqlAlchemyFeeConfigurationRepository,
)

__all__ = [
    "InMemoryTransactionRepository",
    "InMemoryFeeConfigurationRepository",
    "SqlAlchemyTransactionRepository",
    "SqlAlchemyFeeConfigurationRepository",
]
