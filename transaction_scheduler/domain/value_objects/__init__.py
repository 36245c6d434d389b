"""Domain value objects."""
from transaction_scheduler.domain.value_objects.money import Money
from transaction_scheduler.domain.value_objects.account_number import AccountNumber

__all__ = [
    "Money",
    "AccountNumber",
]
