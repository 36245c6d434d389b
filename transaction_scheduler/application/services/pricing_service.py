"""
PricingService - Prices transfers against the fee rule table.

Shared by the create and update use cases so both compute the day
offset and resolve the best matching rule the same way.
"""
import logging
from datetime import date
from typing import Tuple

from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.time_provider_port import (
    TimeProviderPort,
)
from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.exceptions import FeeConfigurationNotFoundError
from transaction_scheduler.domain.services.fee_calculator import FeeCalculator, FeeQuote
from transaction_scheduler.domain.value_objects.money import Money

logger = logging.getLogger(__name__)


class PricingService:
    """Looks up the best fee rule for a transfer and applies it."""

    def __init__(
        self,
        fee_configurations: FeeConfigurationRepository,
        time_provider: TimeProviderPort,
    ):
        """
        Args:
            fee_configurations: Fee rule lookup port
            time_provider: Clock used for the day offset
        """
        self.fee_configurations = fee_configurations
        self.time_provider = time_provider

    def quote(self, transfer_amount: Money, scheduled_date: date) -> FeeQuote:
        """
        Price a transfer scheduled for the given date.

        Raises:
            FeeConfigurationNotFoundError: No active rule covers the pair
        """
        days_between = FeeCalculator.days_between(
            self.time_provider.today(), scheduled_date
        )

        configuration = self.fee_configurations.find_best_match(
            transfer_amount, days_between
        )
        if configuration is None:
            logger.warning(
                f"No fee configuration for amount {transfer_amount} and {days_between} days"
            )
            raise FeeConfigurationNotFoundError(transfer_amount, days_between)

        logger.debug(
            f"Applied fee configuration: {configuration.fee_type} "
            f"(priority: {configuration.priority})"
        )

        quote = FeeCalculator.quote(configuration, transfer_amount, days_between)
        logger.debug(f"Calculated fee: {quote.fee}")
        return quote

    def reprice(
        self,
        transfer_amount: Money,
        scheduled_date: date,
    ) -> Tuple[Money, FeeConfiguration]:
        """Price a transfer, returning the fee and the rule used."""
        quote = self.quote(transfer_amount, scheduled_date)
        return quote.fee, quote.configuration
