"""
Money Value Object

Represents non-negative monetary amounts with a fixed precision of two
fraction digits. Every arithmetic result is rounded again, so chained
operations round at each step rather than once at the end.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Union

from transaction_scheduler.domain.exceptions import InvalidAmountError

CURRENCY = "EUR"
PRECISION = Decimal("0.01")

AmountLike = Union[int, float, str, Decimal]


def _to_decimal(value: AmountLike) -> Decimal:
    """Convert a raw value to Decimal, rejecting anything non-finite."""
    if value is None:
        raise InvalidAmountError("Amount cannot be null")

    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            raise InvalidAmountError(f"Invalid amount: {value!r}")

    if not result.is_finite():
        raise InvalidAmountError(f"Invalid amount: {value!r}")
    return result


@dataclass(frozen=True)
class Money:
    """
    Immutable value object representing a monetary amount.

    Attributes:
        amount: The numeric value, always a Decimal with exactly 2 places
    """
    amount: Decimal

    def __post_init__(self) -> None:
        """Validate and normalize the amount."""
        amount = _to_decimal(self.amount)
        if amount < 0:
            raise InvalidAmountError(f"Amount cannot be negative: {amount}")
        try:
            quantized = amount.quantize(PRECISION, rounding=ROUND_HALF_UP)
        except InvalidOperation:
            raise InvalidAmountError(f"Amount out of range: {amount}")
        object.__setattr__(self, "amount", quantized)

    # --- Factory Methods ---

    @classmethod
    def of(cls, value: AmountLike) -> Money:
        """Create Money from a decimal, number or string."""
        return cls(_to_decimal(value))

    @classmethod
    def zero(cls) -> Money:
        """Create zero Money."""
        return cls(Decimal("0"))

    # --- Arithmetic Operations ---

    def add(self, other: Money) -> Money:
        """Add two Money objects."""
        return Money(self.amount + other.amount)

    def subtract(self, other: Money) -> Money:
        """Subtract Money; fails if the result would be negative."""
        return Money(self.amount - other.amount)

    def multiply_by_factor(self, factor: AmountLike) -> Money:
        """Multiply by a scalar factor, rounding the result to 2 places."""
        return Money(self.amount * _to_decimal(factor))

    def __add__(self, other: Money) -> Money:
        return self.add(other)

    def __sub__(self, other: Money) -> Money:
        return self.subtract(other)

    def __mul__(self, factor: AmountLike) -> Money:
        return self.multiply_by_factor(factor)

    def __rmul__(self, factor: AmountLike) -> Money:
        return self.multiply_by_factor(factor)

    # --- Comparison Operations ---

    def is_greater_than(self, other: Money) -> bool:
        """Check if this amount is strictly greater than another."""
        return self.amount > other.amount

    def is_less_than_or_equal(self, other: Money) -> bool:
        """Check if this amount is less than or equal to another."""
        return self.amount <= other.amount

    def __lt__(self, other: Money) -> bool:
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        return self.amount >= other.amount

    # --- Utility Methods ---

    def is_zero(self) -> bool:
        """Check if amount is zero."""
        return self.amount == Decimal("0")

    def is_positive(self) -> bool:
        """Check if amount is positive (greater than zero)."""
        return self.amount > Decimal("0")

    # --- String Representation ---

    def __str__(self) -> str:
        return f"{self.amount} {CURRENCY}"

    def __repr__(self) -> str:
        return f"Money({self.amount})"
