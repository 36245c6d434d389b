"""
DeleteTransactionUseCase - Cancels a scheduled transfer.
"""
import logging

from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.domain.exceptions import TransactionNotFoundError

logger = logging.getLogger(__name__)


class DeleteTransactionUseCase:
    """Use case for deleting a transaction."""

    def __init__(self, transactions: TransactionRepository):
        self.transactions = transactions

    def execute(self, transaction_id: int) -> None:
        """
        Delete a stored transaction.

        Raises:
            TransactionNotFoundError: No transaction with this id
        """
        logger.info(f"Deleting transaction with ID: {transaction_id}")

        transaction = self.transactions.find_by_id(transaction_id)
        if transaction is None:
            raise TransactionNotFoundError(
                transaction_id,
                f"Cannot delete. Transaction not found with ID: {transaction_id}",
            )

        logger.debug(f"Found transaction to delete: {transaction.summary}")

        self.transactions.delete(transaction)

        logger.info(f"Transaction deleted successfully: ID {transaction_id}")
