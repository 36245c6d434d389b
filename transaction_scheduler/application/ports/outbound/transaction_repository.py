"""
TransactionRepository - Interface for transaction persistence.

This port defines the contract for storing and retrieving scheduled
transactions. Adapters implementing this interface handle storage.
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional

from transaction_scheduler.domain.entities.transaction import Transaction


class TransactionRepository(ABC):
    """
    Port interface for transaction persistence.

    Calls are blocking; they either return a value or raise.
    """

    @abstractmethod
    def save(self, transaction: Transaction) -> Transaction:
        """
        Insert or update a transaction.

        Args:
            transaction: Transaction to save; id None means new

        Returns:
            Saved transaction, with its id assigned on first save
        """
        pass

    @abstractmethod
    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        """
        Get a transaction by ID.

        Returns:
            Transaction if found, None otherwise
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Transaction]:
        """Get every stored transaction."""
        pass

    @abstractmethod
    def find_by_scheduled_date(self, scheduled_date: date) -> List[Transaction]:
        """Get transactions scheduled for a given date."""
        pass

    @abstractmethod
    def find_by_source_account(self, account_number: str) -> List[Transaction]:
        """
        Get transactions debiting a given account.

        Args:
            account_number: Normalized account number value
        """
        pass

    @abstractmethod
    def delete(self, transaction: Transaction) -> None:
        """Delete a stored transaction."""
        pass

    @abstractmethod
    def exists_by_id(self, transaction_id: int) -> bool:
        """Check whether a transaction with the given id is stored."""
        pass
