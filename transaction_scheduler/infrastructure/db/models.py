"""
ORM models
Fee rule table and scheduled transfers.
"""
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column

from transaction_scheduler.infrastructure.db.base import Base


class FeeConfigurationModel(Base):
    """Fee rule table"""
    __tablename__ = "fee_configurations"
    __table_args__ = (
        CheckConstraint("min_amount >= 0", name="min_amount_non_negative"),
        CheckConstraint("percentage_fee >= 0", name="percentage_fee_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    fee_type: Mapped[str] = mapped_column(
        String(50), unique=True, nullable=False,
        comment="Unique rule label (e.g. TAXA_A)"
    )
    min_amount: Mapped[Decimal] = mapped_column(
        Numeric(19, 2), nullable=False,
        comment="Inclusive lower amount bound"
    )
    max_amount: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(19, 2), nullable=True,
        comment="Inclusive upper amount bound, NULL means unbounded"
    )
    min_days: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True,
        comment="Inclusive lower day-offset bound"
    )
    max_days: Mapped[Optional[int]] = mapped_column(
        Integer, nullable=True,
        comment="Inclusive upper day-offset bound"
    )
    percentage_fee: Mapped[Decimal] = mapped_column(
        Numeric(7, 5), nullable=False,
        comment="Fraction of the amount charged (0.09 = 9%)"
    )
    fixed_fee: Mapped[Optional[Decimal]] = mapped_column(
        Numeric(19, 2), nullable=True,
        comment="Flat amount added to the percentage fee"
    )
    priority: Mapped[int] = mapped_column(
        Integer, nullable=False,
        comment="Evaluation order, smaller first"
    )
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<FeeConfiguration {self.fee_type} priority={self.priority} active={self.active}>"


class TransactionModel(Base):
    """Scheduled transfer table"""
    __tablename__ = "transactions"
    __table_args__ = (
        CheckConstraint("transfer_amount >= 0", name="transfer_amount_non_negative"),
        CheckConstraint("transfer_fee >= 0", name="transfer_fee_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    source_account: Mapped[str] = mapped_column(
        String(34), nullable=False, index=True,
        comment="Normalized IBAN of the debited account"
    )
    destination_account: Mapped[str] = mapped_column(
        String(34), nullable=False,
        comment="Normalized IBAN of the credited account"
    )
    transfer_amount: Mapped[Decimal] = mapped_column(Numeric(19, 2), nullable=False)
    transfer_fee: Mapped[Decimal] = mapped_column(Numeric(19, 2), nullable=False)
    fee_configuration: Mapped[Optional[Dict[str, Any]]] = mapped_column(
        JSON, nullable=True,
        comment="Snapshot of the rule that priced the transfer"
    )
    scheduled_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    created_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    updated_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)

    def __repr__(self) -> str:
        return (
            f"<Transaction {self.id} {self.source_account} -> {self.destination_account} "
            f"{self.transfer_amount} on {self.scheduled_date}>"
        )
