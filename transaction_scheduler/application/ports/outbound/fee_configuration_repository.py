"""
FeeConfigurationRepository - Interface for the fee rule table.

Implementations must resolve find_best_match the same way:
only active rules whose matches() is true, ordered by priority
ascending (smaller number first), ties broken by fee_type.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.value_objects.money import Money


class FeeConfigurationRepository(ABC):
    """Port interface for fee rule lookup and management."""

    @abstractmethod
    def find_best_match(
        self,
        transfer_amount: Money,
        days_between: int,
    ) -> Optional[FeeConfiguration]:
        """
        Find the rule that prices a transfer.

        Args:
            transfer_amount: Amount to transfer
            days_between: Days from today to the scheduled date

        Returns:
            Highest ranked matching rule, None if no rule matches
        """
        pass

    @abstractmethod
    def save(self, configuration: FeeConfiguration) -> FeeConfiguration:
        """
        Insert or update a rule.

        Returns:
            Saved rule, with its id assigned on first save
        """
        pass

    @abstractmethod
    def find_all(self) -> List[FeeConfiguration]:
        """Get every rule, active or not, in evaluation order."""
        pass

    @abstractmethod
    def find_by_fee_type(self, fee_type: str) -> Optional[FeeConfiguration]:
        """Get a rule by its unique label."""
        pass
