"""
DeleteTransactionUseCase Tests
"""
import pytest
from unittest.mock import MagicMock

from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.application.use_cases.delete_transaction import (
    DeleteTransactionUseCase,
)
from transaction_scheduler.domain.exceptions import TransactionNotFoundError


class TestDeleteTransactionUseCase:

    def test_deletes_loaded_transaction(self, sample_transaction):
        transactions = MagicMock(spec=TransactionRepository)
        transactions.find_by_id.return_value = sample_transaction

        DeleteTransactionUseCase(transactions).execute(1)

        transactions.delete.assert_called_once_with(sample_transaction)

    def test_missing_transaction(self):
        transactions = MagicMock(spec=TransactionRepository)
        transactions.find_by_id.return_value = None

        with pytest.raises(TransactionNotFoundError, match="Cannot delete") as exc_info:
            DeleteTransactionUseCase(transactions).execute(7)

        assert exc_info.value.transaction_id == 7
        transactions.delete.assert_not_called()
