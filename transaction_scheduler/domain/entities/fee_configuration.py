"""
FeeConfiguration Domain Entity

A configurable pricing rule keyed by transfer amount range and by the
number of days between today and the scheduled date.
"""
from __future__ import annotations
from dataclasses import dataclass, replace
from datetime import datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Optional

from transaction_scheduler.domain.exceptions import (
    InactiveConfigurationError,
    InvalidFeeConfigurationError,
)
from transaction_scheduler.domain.value_objects.money import Money


def _validate_business_rules(
    fee_type: Optional[str],
    min_amount: Optional[Money],
    percentage_fee: Optional[Decimal],
    priority: Optional[int],
) -> None:
    if fee_type is None or not fee_type.strip():
        raise InvalidFeeConfigurationError("Fee type is required")
    if min_amount is None:
        raise InvalidFeeConfigurationError("Minimum amount is required")
    if percentage_fee is None:
        raise InvalidFeeConfigurationError("Percentage fee is required")
    if percentage_fee < 0 or percentage_fee > 1:
        raise InvalidFeeConfigurationError(
            "Percentage fee must be between 0 and 1 (0% to 100%)"
        )
    if priority is None or priority < 1:
        raise InvalidFeeConfigurationError("Priority must be at least 1")


@dataclass(frozen=True)
class FeeConfiguration:
    """
    Immutable fee rule.

    Attributes:
        fee_type: Unique label of the rule (e.g. "TAXA_A")
        min_amount: Inclusive lower amount bound
        percentage_fee: Fraction of the amount charged (0.09 = 9%)
        priority: Tie-break key, a smaller number is evaluated first
        max_amount: Inclusive upper amount bound, None means unbounded
        min_days: Inclusive lower day-offset bound, None means unbounded
        max_days: Inclusive upper day-offset bound, None means unbounded
        fixed_fee: Flat amount added on top of the percentage fee
        active: Inactive rules never match and cannot price a transfer
        description: Free text
        id: Store identifier, None until saved
        created_at: Creation time
        updated_at: Last modification time
    """
    fee_type: str
    min_amount: Money
    percentage_fee: Decimal
    priority: int
    max_amount: Optional[Money] = None
    min_days: Optional[int] = None
    max_days: Optional[int] = None
    fixed_fee: Optional[Money] = None
    active: bool = True
    description: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self) -> None:
        """Normalize the percentage and enforce the business rules."""
        object.__setattr__(self, "percentage_fee", _as_decimal(self.percentage_fee))
        _validate_business_rules(
            self.fee_type, self.min_amount, self.percentage_fee, self.priority
        )

    # --- Factory Methods ---

    @classmethod
    def create(
        cls,
        fee_type: str,
        min_amount: Money,
        max_amount: Optional[Money],
        min_days: Optional[int],
        max_days: Optional[int],
        percentage_fee: Decimal,
        fixed_fee: Optional[Money],
        priority: int,
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> FeeConfiguration:
        """Create a new, active fee rule."""
        now = now or datetime.now()
        return cls(
            fee_type=fee_type,
            min_amount=min_amount,
            max_amount=max_amount,
            min_days=min_days,
            max_days=max_days,
            percentage_fee=percentage_fee,
            fixed_fee=fixed_fee,
            priority=priority,
            active=True,
            description=description,
            created_at=now,
            updated_at=now,
        )

    # --- Lifecycle ---

    def update(
        self,
        fee_type: str,
        min_amount: Money,
        max_amount: Optional[Money],
        min_days: Optional[int],
        max_days: Optional[int],
        percentage_fee: Decimal,
        fixed_fee: Optional[Money],
        priority: int,
        description: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> FeeConfiguration:
        """Return a new rule with all pricing fields replaced.

        Identity, active flag and creation time are preserved.
        """
        return FeeConfiguration(
            id=self.id,
            fee_type=fee_type,
            min_amount=min_amount,
            max_amount=max_amount,
            min_days=min_days,
            max_days=max_days,
            percentage_fee=percentage_fee,
            fixed_fee=fixed_fee,
            priority=priority,
            active=self.active,
            description=description,
            created_at=self.created_at,
            updated_at=now or datetime.now(),
        )

    def deactivate(self, now: Optional[datetime] = None) -> FeeConfiguration:
        """Return a deactivated copy of this rule."""
        return replace(self, active=False, updated_at=now or datetime.now())

    def activate(self, now: Optional[datetime] = None) -> FeeConfiguration:
        """Return an activated copy of this rule."""
        return replace(self, active=True, updated_at=now or datetime.now())

    def with_id(self, rule_id: int) -> FeeConfiguration:
        """Return a copy carrying the identifier assigned by a store."""
        return replace(self, id=rule_id)

    # --- Matching and Pricing ---

    @property
    def is_active(self) -> bool:
        return self.active is True

    def matches(self, transfer_amount: Money, days_between: int) -> bool:
        """
        Check whether this rule covers the given amount and day offset.

        Both ranges are inclusive on each side; a missing bound is open.
        """
        if not self.is_active:
            return False

        amount_above_min = transfer_amount.amount >= self.min_amount.amount
        amount_below_max = (
            self.max_amount is None
            or transfer_amount.amount <= self.max_amount.amount
        )

        days_above_min = self.min_days is None or days_between >= self.min_days
        days_below_max = self.max_days is None or days_between <= self.max_days

        return amount_above_min and amount_below_max and days_above_min and days_below_max

    def calculate_fee(self, transfer_amount: Money) -> Money:
        """
        Calculate the fee: round2(amount * percentage) + fixed fee.

        Raises:
            InactiveConfigurationError: If the rule is deactivated
        """
        if not self.is_active:
            raise InactiveConfigurationError(self.fee_type)

        fee = transfer_amount.multiply_by_factor(self.percentage_fee)
        if self.fixed_fee is not None:
            fee = fee.add(self.fixed_fee)
        return fee

    def has_higher_priority_than(self, other: FeeConfiguration) -> bool:
        """Lower priority number means higher priority."""
        return self.priority < other.priority

    # --- Display ---

    @property
    def summary(self) -> str:
        """Human-readable rule description."""
        percentage = (self.percentage_fee * 100).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
        parts = [f"{self.fee_type}: {percentage}%"]

        if self.fixed_fee is not None:
            parts.append(f" + {self.fixed_fee}")

        parts.append(f" for {self.min_amount}")
        parts.append(f" to {self.max_amount}" if self.max_amount is not None else "+")

        if self.min_days is not None or self.max_days is not None:
            if self.min_days is not None and self.min_days == self.max_days:
                days = f"{self.min_days} days"
            else:
                bounds = []
                if self.min_days is not None:
                    bounds.append(f"{self.min_days}+")
                if self.max_days is not None:
                    bounds.append(f"up to {self.max_days}")
                days = " ".join(bounds) + " days"
            parts.append(f" ({days})")

        return "".join(parts)


def _as_decimal(value) -> Optional[Decimal]:
    if value is None:
        return None
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidFeeConfigurationError(f"Invalid percentage fee: {value!r}")
    if not result.is_finite():
        raise InvalidFeeConfigurationError(f"Invalid percentage fee: {value!r}")
    return result
