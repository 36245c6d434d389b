"""
Account Number Value Object

IBAN-formatted account identifier (15-34 characters), e.g.:
- France:   FR76 3000 6000 0112 3456 7890 189
- Portugal: PT50 0002 0123 1234 5678 9015 4
- Germany:  DE89 3704 0044 0532 0130 00
"""
from __future__ import annotations
import re
from dataclasses import dataclass

from transaction_scheduler.domain.exceptions import InvalidAccountNumberError

IBAN_FORMAT = re.compile(r"^[A-Z]{2}[0-9]{2}[A-Z0-9]{11,30}$")
_WHITESPACE = re.compile(r"\s+")


def normalize_account_number(value: str) -> str:
    """Strip all whitespace and upper-case."""
    return _WHITESPACE.sub("", value).upper()


@dataclass(frozen=True)
class AccountNumber:
    """
    Immutable value object for a normalized IBAN.

    Equality and hashing use the normalized value, so
    ``AccountNumber("de89 3704 ...") == AccountNumber("DE893704...")``.
    """
    value: str

    def __post_init__(self) -> None:
        if self.value is None or not str(self.value).strip():
            raise InvalidAccountNumberError("Account number cannot be empty")

        normalized = normalize_account_number(str(self.value))
        if not IBAN_FORMAT.match(normalized):
            raise InvalidAccountNumberError(
                "Invalid IBAN format. Expected format: XX00XXXXXXXXXXX... (15-34 characters), "
                f"got {len(normalized)} characters"
            )
        object.__setattr__(self, "value", normalized)

    @property
    def formatted(self) -> str:
        """Display form with a space every 4 characters."""
        return " ".join(self.value[i:i + 4] for i in range(0, len(self.value), 4))

    def __str__(self) -> str:
        return self.value
