# Outbound ports (external system interfaces)
from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
    SystemTimeAdapter,
    FixedTimeAdapter,
)

__all__ = [
    "TransactionRepository",
    "FeeConfigurationRepository",
    "TimeProviderPort",
    "SystemTimeAdapter",
    "FixedTimeAdapter",
]
