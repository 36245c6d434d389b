"""
UpdateTransactionUseCase - Modifies a scheduled transfer.

The fee is recalculated only when the amount or the scheduled date
changes; account changes keep the existing fee and rule snapshot.
"""
import logging

from transaction_scheduler.application.dto.transaction import UpdateTransactionCommand
from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
)
from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.application.services.pricing_service import PricingService
from transaction_scheduler.domain.entities.transaction import (
    Transaction,
    TransactionChanges,
)
from transaction_scheduler.domain.exceptions import TransactionNotFoundError
from transaction_scheduler.domain.value_objects.account_number import AccountNumber
from transaction_scheduler.domain.value_objects.money import Money

logger = logging.getLogger(__name__)


class UpdateTransactionUseCase:
    """
    Use case for full and partial transaction updates.
    """

    def __init__(
        self,
        transactions: TransactionRepository,
        fee_configurations: FeeConfigurationRepository,
        time_provider: TimeProviderPort,
    ):
        """
        Initialize with required ports.

        Args:
            transactions: Transaction store
            fee_configurations: Fee rule lookup
            time_provider: Clock used for the day offset and date checks
        """
        self.transactions = transactions
        self.time_provider = time_provider
        self.pricing = PricingService(fee_configurations, time_provider)

    def execute(self, command: UpdateTransactionCommand) -> Transaction:
        """
        Apply the command to a stored transaction.

        Returns:
            Stored, updated transaction

        Raises:
            TransactionNotFoundError: No transaction with this id
            FeeConfigurationNotFoundError: Amount or date changed and no
                rule prices the new combination
            ValidationError: Malformed input or broken invariant
        """
        logger.info(f"Updating transaction ID: {command.transaction_id}")

        changes = self._to_changes(command)

        existing = self.transactions.find_by_id(command.transaction_id)
        if existing is None:
            raise TransactionNotFoundError(command.transaction_id)

        logger.debug(f"Existing transaction: {existing.summary}")

        if changes.is_empty():
            logger.info(f"No fields supplied for transaction {existing.id}. Nothing to update.")
            return existing

        now = self.time_provider.now()
        updated = existing.apply_changes(
            changes,
            reprice=self.pricing.reprice,
            today=now.date(),
            now=now,
        )

        if updated.fee_configuration is existing.fee_configuration:
            logger.debug("Amount and date unchanged. Keeping existing fee.")
        else:
            logger.info(
                f"Fee recalculated: {updated.transfer_fee} (was: {existing.transfer_fee})"
            )

        saved = self.transactions.save(updated)

        logger.info(f"Transaction updated successfully: {saved.summary}")
        return saved

    @staticmethod
    def _to_changes(command: UpdateTransactionCommand) -> TransactionChanges:
        """Build value objects for the supplied fields only."""
        return TransactionChanges(
            source_account=(
                AccountNumber(command.source_account)
                if command.source_account is not None
                else None
            ),
            destination_account=(
                AccountNumber(command.destination_account)
                if command.destination_account is not None
                else None
            ),
            transfer_amount=(
                Money.of(command.transfer_amount)
                if command.transfer_amount is not None
                else None
            ),
            scheduled_date=command.scheduled_date,
        )
