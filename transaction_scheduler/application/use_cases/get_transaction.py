"""
GetTransactionUseCase - Read access to scheduled transfers.
"""
import logging
from datetime import date
from typing import List

from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.domain.entities.transaction import Transaction
from transaction_scheduler.domain.exceptions import TransactionNotFoundError
from transaction_scheduler.domain.value_objects.account_number import (
    normalize_account_number,
)

logger = logging.getLogger(__name__)


class GetTransactionUseCase:
    """Use case for querying transactions."""

    def __init__(self, transactions: TransactionRepository):
        self.transactions = transactions

    def get_by_id(self, transaction_id: int) -> Transaction:
        """
        Get a transaction by ID.

        Raises:
            TransactionNotFoundError: No transaction with this id
        """
        logger.debug(f"Fetching transaction by ID: {transaction_id}")

        transaction = self.transactions.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(transaction_id)
        return transaction

    def get_all(self) -> List[Transaction]:
        logger.debug("Fetching all transactions")

        transactions = self.transactions.find_all()
        logger.info(f"Found {len(transactions)} transactions")
        return transactions

    def get_by_scheduled_date(self, scheduled_date: date) -> List[Transaction]:
        logger.debug(f"Fetching transactions scheduled for: {scheduled_date}")

        transactions = self.transactions.find_by_scheduled_date(scheduled_date)
        logger.info(f"Found {len(transactions)} transactions for date {scheduled_date}")
        return transactions

    def get_by_source_account(self, account_number: str) -> List[Transaction]:
        """Get transactions by source account (spaces and case are ignored)."""
        normalized = normalize_account_number(account_number)
        logger.debug(f"Fetching transactions for source account: {normalized}")

        transactions = self.transactions.find_by_source_account(normalized)
        logger.info(f"Found {len(transactions)} transactions for account {normalized}")
        return transactions
