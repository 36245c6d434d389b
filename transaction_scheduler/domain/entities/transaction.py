"""
Transaction Domain Entity

The scheduled transfer aggregate. It keeps the fee it was priced with
together with a snapshot of the fee rule that produced it, and decides
on update whether that fee is still valid.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable, Optional, Tuple

from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.exceptions import (
    NonPositiveAmountError,
    PastScheduledDateError,
    SameAccountError,
)
from transaction_scheduler.domain.value_objects.account_number import AccountNumber
from transaction_scheduler.domain.value_objects.money import Money

# Prices an (amount, scheduled date) pair: returns the fee and the rule used.
Repricer = Callable[[Money, date], Tuple[Money, FeeConfiguration]]


def _validate_business_rules(
    source_account: AccountNumber,
    destination_account: AccountNumber,
    transfer_amount: Money,
    scheduled_date: date,
    today: date,
) -> None:
    if source_account == destination_account:
        raise SameAccountError()
    if scheduled_date < today:
        raise PastScheduledDateError(
            f"Scheduled date cannot be in the past: {scheduled_date.isoformat()}"
        )
    if transfer_amount.is_less_than_or_equal(Money.zero()):
        raise NonPositiveAmountError()


@dataclass(frozen=True)
class TransactionChanges:
    """
    Field values requested by an update.

    A None field was not supplied and keeps the transaction's current
    value. A full update supplies all four fields.
    """
    source_account: Optional[AccountNumber] = None
    destination_account: Optional[AccountNumber] = None
    transfer_amount: Optional[Money] = None
    scheduled_date: Optional[date] = None

    def is_empty(self) -> bool:
        return (
            self.source_account is None
            and self.destination_account is None
            and self.transfer_amount is None
            and self.scheduled_date is None
        )


@dataclass(frozen=True)
class Transaction:
    """
    Immutable scheduled transfer.

    Attributes:
        source_account: Account debited
        destination_account: Account credited
        transfer_amount: Amount transferred
        transfer_fee: Fee charged, derived from fee_configuration
        fee_configuration: Snapshot of the rule that priced this transfer
        scheduled_date: Execution date
        id: Store identifier, None until first saved
        created_at: Creation time
        updated_at: Last modification time
    """
    source_account: AccountNumber
    destination_account: AccountNumber
    transfer_amount: Money
    transfer_fee: Money
    fee_configuration: Optional[FeeConfiguration]
    scheduled_date: date
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # --- Factory Methods ---

    @classmethod
    def create(
        cls,
        source_account: AccountNumber,
        destination_account: AccountNumber,
        transfer_amount: Money,
        scheduled_date: date,
        transfer_fee: Money,
        fee_configuration: FeeConfiguration,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> Transaction:
        """
        Create a new transaction with an already calculated fee.

        Raises:
            SameAccountError: Source equals destination
            PastScheduledDateError: Scheduled date is before today
            NonPositiveAmountError: Amount is zero
        """
        _validate_business_rules(
            source_account,
            destination_account,
            transfer_amount,
            scheduled_date,
            today or date.today(),
        )

        now = now or datetime.now()
        return cls(
            source_account=source_account,
            destination_account=destination_account,
            transfer_amount=transfer_amount,
            transfer_fee=transfer_fee,
            fee_configuration=fee_configuration,
            scheduled_date=scheduled_date,
            created_at=now,
            updated_at=now,
        )

    def with_id(self, transaction_id: int) -> Transaction:
        """Return a copy carrying the identifier assigned by a store."""
        return Transaction(
            id=transaction_id,
            source_account=self.source_account,
            destination_account=self.destination_account,
            transfer_amount=self.transfer_amount,
            transfer_fee=self.transfer_fee,
            fee_configuration=self.fee_configuration,
            scheduled_date=self.scheduled_date,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )

    # --- Updates ---

    def update(
        self,
        source_account: AccountNumber,
        destination_account: AccountNumber,
        transfer_amount: Money,
        scheduled_date: date,
        transfer_fee: Money,
        fee_configuration: Optional[FeeConfiguration],
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> Transaction:
        """Return a new transaction with every field replaced.

        Identity and creation time are preserved.
        """
        _validate_business_rules(
            source_account,
            destination_account,
            transfer_amount,
            scheduled_date,
            today or date.today(),
        )

        return Transaction(
            id=self.id,
            source_account=source_account,
            destination_account=destination_account,
            transfer_amount=transfer_amount,
            transfer_fee=transfer_fee,
            fee_configuration=fee_configuration,
            scheduled_date=scheduled_date,
            created_at=self.created_at,
            updated_at=now or datetime.now(),
        )

    def needs_fee_recalculation(self, transfer_amount: Money, scheduled_date: date) -> bool:
        """A fee depends only on the amount and the scheduled date."""
        return (
            transfer_amount != self.transfer_amount
            or scheduled_date != self.scheduled_date
        )

    def apply_changes(
        self,
        changes: TransactionChanges,
        reprice: Repricer,
        today: Optional[date] = None,
        now: Optional[datetime] = None,
    ) -> Transaction:
        """
        Apply a full or partial update.

        Unsupplied fields keep their current value. ``reprice`` is called
        only when the resolved amount or date differs from the current
        one; otherwise the existing fee and rule snapshot are kept as is.

        Raises:
            FeeConfigurationNotFoundError: Propagated from ``reprice``
            InvalidTransactionError: Resolved fields break an invariant
        """
        source_account = changes.source_account or self.source_account
        destination_account = changes.destination_account or self.destination_account
        transfer_amount = (
            changes.transfer_amount
            if changes.transfer_amount is not None
            else self.transfer_amount
        )
        scheduled_date = changes.scheduled_date or self.scheduled_date

        if self.needs_fee_recalculation(transfer_amount, scheduled_date):
            transfer_fee, fee_configuration = reprice(transfer_amount, scheduled_date)
        else:
            transfer_fee = self.transfer_fee
            fee_configuration = self.fee_configuration

        return self.update(
            source_account=source_account,
            destination_account=destination_account,
            transfer_amount=transfer_amount,
            scheduled_date=scheduled_date,
            transfer_fee=transfer_fee,
            fee_configuration=fee_configuration,
            today=today,
            now=now,
        )

    # --- Computed Properties ---

    @property
    def total_amount(self) -> Money:
        """Transfer amount plus fee."""
        return self.transfer_amount.add(self.transfer_fee)

    @property
    def effective_fee_rate(self) -> Decimal:
        """Fee as a fraction of the amount, 4 places (0.0900 for 9%)."""
        if self.transfer_amount.is_zero():
            return Decimal("0")
        return (self.transfer_fee.amount / self.transfer_amount.amount).quantize(
            Decimal("0.0001"), rounding=ROUND_HALF_UP
        )

    @property
    def has_fee_configuration(self) -> bool:
        return self.fee_configuration is not None

    def days_until_scheduled(self, today: Optional[date] = None) -> int:
        """0 for today, negative once the date has passed."""
        return (self.scheduled_date - (today or date.today())).days

    def is_scheduled_for_today(self, today: Optional[date] = None) -> bool:
        return self.scheduled_date == (today or date.today())

    def is_overdue(self, today: Optional[date] = None) -> bool:
        return self.scheduled_date < (today or date.today())

    @property
    def summary(self) -> str:
        """One-line description for logs."""
        fee_type = self.fee_configuration.fee_type if self.fee_configuration else "N/A"
        return (
            f"Transaction[{self.id}]: {self.source_account} -> {self.destination_account} "
            f"| Amount: {self.transfer_amount} | Fee: {self.transfer_fee} ({fee_type}) "
            f"| Scheduled: {self.scheduled_date.isoformat()}"
        )
