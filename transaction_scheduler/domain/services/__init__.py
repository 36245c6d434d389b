"""Domain services."""
from transaction_scheduler.domain.services.fee_calculator import FeeCalculator, FeeQuote

__all__ = [
    "FeeCalculator",
    "FeeQuote",
]
