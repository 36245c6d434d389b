"""
Transaction DTOs for the create and update use cases.

Commands carry raw caller input; value objects are built from them by
the use cases, so format errors surface as domain validation errors.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional, Union

RawAmount = Union[Decimal, str, int, float]


@dataclass(frozen=True)
class CreateTransactionCommand:
    """
    Request to schedule a new transfer.

    Attributes:
        source_account: Account to debit (IBAN, spaces allowed)
        destination_account: Account to credit (IBAN, spaces allowed)
        transfer_amount: Amount to transfer
        scheduled_date: Execution date
    """
    source_account: str
    destination_account: str
    transfer_amount: RawAmount
    scheduled_date: date


@dataclass(frozen=True)
class UpdateTransactionCommand:
    """
    Request to modify a scheduled transfer.

    Any field left as None keeps its current value, so the same command
    serves full and partial updates.

    Attributes:
        transaction_id: Transaction to modify
        source_account: New source account
        destination_account: New destination account
        transfer_amount: New amount
        scheduled_date: New execution date
    """
    transaction_id: int
    source_account: Optional[str] = None
    destination_account: Optional[str] = None
    transfer_amount: Optional[RawAmount] = None
    scheduled_date: Optional[date] = None

    @classmethod
    def full(
        cls,
        transaction_id: int,
        source_account: str,
        destination_account: str,
        transfer_amount: RawAmount,
        scheduled_date: date,
    ) -> UpdateTransactionCommand:
        """Create a command that replaces every field."""
        for name, value in (
            ("source_account", source_account),
            ("destination_account", destination_account),
            ("transfer_amount", transfer_amount),
            ("scheduled_date", scheduled_date),
        ):
            if value is None:
                raise ValueError(f"Full update requires {name}")

        return cls(
            transaction_id=transaction_id,
            source_account=source_account,
            destination_account=destination_account,
            transfer_amount=transfer_amount,
            scheduled_date=scheduled_date,
        )

    @property
    def is_partial(self) -> bool:
        return any(
            value is None
            for value in (
                self.source_account,
                self.destination_account,
                self.transfer_amount,
                self.scheduled_date,
            )
        )
