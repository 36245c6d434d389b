from transaction_scheduler.infrastructure.db.base import Base
from transaction_scheduler.infrastructure.db.models import (
    FeeConfigurationModel,
    TransactionModel,
)
from transaction_scheduler.infrastructure.db.session import (
    build_engine,
    build_session_factory,
)
from transaction_scheduler.infrastructure.db.init_db import (
    create_tables,
    seed_default_fee_configurations,
)

__all__ = [
    "Base",
    "FeeConfigurationModel",
    "TransactionModel",
    "build_engine",
    "build_session_factory",
    "create_tables",
    "seed_default_fee_configurations",
]
