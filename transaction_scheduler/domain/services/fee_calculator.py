"""
FeeCalculator Domain Service

Day-offset arithmetic and best-match selection over a set of fee rules.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional

from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.value_objects.money import Money


@dataclass(frozen=True)
class FeeQuote:
    """
    Result of pricing a transfer.

    Attributes:
        fee: Calculated fee
        configuration: Rule that produced the fee
        days_between: Day offset the rule was matched with
    """
    fee: Money
    configuration: FeeConfiguration
    days_between: int


class FeeCalculator:
    """Domain service for matching and applying fee rules."""

    @staticmethod
    def days_between(today: date, scheduled_date: date) -> int:
        """Calendar days from today to the scheduled date."""
        return (scheduled_date - today).days

    @staticmethod
    def rank(configurations: Iterable[FeeConfiguration]) -> List[FeeConfiguration]:
        """
        Order rules for evaluation.

        Smaller priority numbers come first; equal priorities fall back
        to fee_type so the order is deterministic.
        """
        return sorted(configurations, key=lambda c: (c.priority, c.fee_type))

    @classmethod
    def select_best_match(
        cls,
        configurations: Iterable[FeeConfiguration],
        transfer_amount: Money,
        days_between: int,
    ) -> Optional[FeeConfiguration]:
        """Return the highest ranked active rule matching, or None."""
        matching = [
            c for c in configurations if c.matches(transfer_amount, days_between)
        ]
        if not matching:
            return None
        return cls.rank(matching)[0]

    @staticmethod
    def quote(
        configuration: FeeConfiguration,
        transfer_amount: Money,
        days_between: int,
    ) -> FeeQuote:
        """Price a transfer with the given rule."""
        return FeeQuote(
            fee=configuration.calculate_fee(transfer_amount),
            configuration=configuration,
            days_between=days_between,
        )
