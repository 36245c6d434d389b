"""
In-memory repositories.

Adapters backed by plain dicts, used by tests and by
Container.create_for_testing(). All data is lost with the instance.
"""
import copy
from datetime import date
from itertools import count
from typing import Dict, List, Optional

from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.entities.transaction import Transaction
from transaction_scheduler.domain.services.fee_calculator import FeeCalculator
from transaction_scheduler.domain.value_objects.money import Money


class InMemoryTransactionRepository(TransactionRepository):
    """
    In-memory transaction store.

    Ids are assigned from a counter starting at 1.
    """

    def __init__(self):
        """Initialize empty storage."""
        self._transactions: Dict[int, Transaction] = {}
        self._ids = count(1)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._transactions.clear()
        self._ids = count(1)

    def save(self, transaction: Transaction) -> Transaction:
        if transaction.id is None:
            transaction = transaction.with_id(next(self._ids))
        self._transactions[transaction.id] = copy.deepcopy(transaction)
        return transaction

    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        transaction = self._transactions.get(transaction_id)
        return copy.deepcopy(transaction) if transaction else None

    def find_all(self) -> List[Transaction]:
        return [copy.deepcopy(t) for t in self._transactions.values()]

    def find_by_scheduled_date(self, scheduled_date: date) -> List[Transaction]:
        return [
            copy.deepcopy(t)
            for t in self._transactions.values()
            if t.scheduled_date == scheduled_date
        ]

    def find_by_source_account(self, account_number: str) -> List[Transaction]:
        return [
            copy.deepcopy(t)
            for t in self._transactions.values()
            if t.source_account.value == account_number
        ]

    def delete(self, transaction: Transaction) -> None:
        self._transactions.pop(transaction.id, None)

    def exists_by_id(self, transaction_id: int) -> bool:
        return transaction_id in self._transactions


class InMemoryFeeConfigurationRepository(FeeConfigurationRepository):
    """In-memory fee rule table."""

    def __init__(self, configurations: Optional[List[FeeConfiguration]] = None):
        """
        Args:
            configurations: Rules to store up front
        """
        self._configurations: Dict[int, FeeConfiguration] = {}
        self._ids = count(1)
        for configuration in configurations or []:
            self.save(configuration)

    def clear(self):
        """Clear all stored data. Useful for test cleanup."""
        self._configurations.clear()
        self._ids = count(1)

    def find_best_match(
        self,
        transfer_amount: Money,
        days_between: int,
    ) -> Optional[FeeConfiguration]:
        match = FeeCalculator.select_best_match(
            self._configurations.values(), transfer_amount, days_between
        )
        return copy.deepcopy(match) if match else None

    def save(self, configuration: FeeConfiguration) -> FeeConfiguration:
        if configuration.id is None:
            configuration = configuration.with_id(next(self._ids))
        self._configurations[configuration.id] = copy.deepcopy(configuration)
        return configuration

    def find_all(self) -> List[FeeConfiguration]:
        return [
            copy.deepcopy(c)
            for c in FeeCalculator.rank(self._configurations.values())
        ]

    def find_by_fee_type(self, fee_type: str) -> Optional[FeeConfiguration]:
        for configuration in self._configurations.values():
            if configuration.fee_type == fee_type:
                return copy.deepcopy(configuration)
        return None
