"""
CreateTransactionUseCase - Schedules a new transfer.

Parses the command into value objects, prices the transfer against the
fee rule table and stores the resulting aggregate.
"""
import logging

from transaction_scheduler.application.dto.transaction import CreateTransactionCommand
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
from transaction_scheduler.domain.entities.transaction import Transaction
from transaction_scheduler.domain.value_objects.account_number import AccountNumber
from transaction_scheduler.domain.value_objects.money import Money

logger = logging.getLogger(__name__)


class CreateTransactionUseCase:
    """
    Use case for scheduling a transfer with automatic fee calculation.
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

    def execute(self, command: CreateTransactionCommand) -> Transaction:
        """
        Create and store a transaction.

        Args:
            command: Raw transfer details

        Returns:
            Stored transaction with its id assigned

        Raises:
            ValidationError: Malformed input or broken invariant
            FeeConfigurationNotFoundError: No rule prices the transfer
        """
        source_account = AccountNumber(command.source_account)
        destination_account = AccountNumber(command.destination_account)
        transfer_amount = Money.of(command.transfer_amount)
        scheduled_date = command.scheduled_date

        logger.info(
            f"Creating transaction: {source_account} -> {destination_account} "
            f"| Amount: {transfer_amount} | Date: {scheduled_date}"
        )

        quote = self.pricing.quote(transfer_amount, scheduled_date)

        now = self.time_provider.now()
        transaction = Transaction.create(
            source_account=source_account,
            destination_account=destination_account,
            transfer_amount=transfer_amount,
            scheduled_date=scheduled_date,
            transfer_fee=quote.fee,
            fee_configuration=quote.configuration,
            today=now.date(),
            now=now,
        )

        saved = self.transactions.save(transaction)

        logger.info(f"Transaction created successfully with ID: {saved.id}")
        logger.debug(f"Transaction summary: {saved.summary}")
        return saved
