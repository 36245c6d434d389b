"""
SQLAlchemy repositories.

Implements the transaction and fee rule ports on top of a relational
database. It handles the mapping between domain entities and DB models;
each port call runs in its own session and commits or rolls back.
"""
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.entities.transaction import Transaction
from transaction_scheduler.domain.value_objects.account_number import AccountNumber
from transaction_scheduler.domain.value_objects.money import Money
from transaction_scheduler.infrastructure.db.models import (
    FeeConfigurationModel,
    TransactionModel,
)

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], Session]


# --- Mapping ---

def _money_or_none(value: Optional[Decimal]) -> Optional[Money]:
    return Money.of(value) if value is not None else None


def _amount_or_none(value: Optional[Money]) -> Optional[Decimal]:
    return value.amount if value is not None else None


def _map_db_fee_configuration_to_domain(db_config: FeeConfigurationModel) -> FeeConfiguration:
    """Map DB fee rule model to Domain FeeConfiguration entity."""
    return FeeConfiguration(
        id=db_config.id,
        fee_type=db_config.fee_type,
        min_amount=Money.of(db_config.min_amount),
        max_amount=_money_or_none(db_config.max_amount),
        min_days=db_config.min_days,
        max_days=db_config.max_days,
        percentage_fee=Decimal(db_config.percentage_fee),
        fixed_fee=_money_or_none(db_config.fixed_fee),
        priority=db_config.priority,
        active=db_config.active,
        description=db_config.description,
        created_at=db_config.created_at,
        updated_at=db_config.updated_at,
    )


def _copy_fee_configuration_to_db(
    configuration: FeeConfiguration,
    db_config: FeeConfigurationModel,
) -> None:
    db_config.fee_type = configuration.fee_type
    db_config.min_amount = configuration.min_amount.amount
    db_config.max_amount = _amount_or_none(configuration.max_amount)
    db_config.min_days = configuration.min_days
    db_config.max_days = configuration.max_days
    db_config.percentage_fee = configuration.percentage_fee
    db_config.fixed_fee = _amount_or_none(configuration.fixed_fee)
    db_config.priority = configuration.priority
    db_config.active = configuration.active
    db_config.description = configuration.description
    db_config.created_at = configuration.created_at
    db_config.updated_at = configuration.updated_at


def _snapshot_from_domain(configuration: Optional[FeeConfiguration]) -> Optional[Dict[str, Any]]:
    """Serialize a fee rule into a JSON-safe snapshot."""
    if configuration is None:
        return None

    def text(value):
        return str(value) if value is not None else None

    return {
        "id": configuration.id,
        "fee_type": configuration.fee_type,
        "min_amount": text(configuration.min_amount.amount),
        "max_amount": text(_amount_or_none(configuration.max_amount)),
        "min_days": configuration.min_days,
        "max_days": configuration.max_days,
        "percentage_fee": text(configuration.percentage_fee),
        "fixed_fee": text(_amount_or_none(configuration.fixed_fee)),
        "priority": configuration.priority,
        "active": configuration.active,
        "description": configuration.description,
        "created_at": configuration.created_at.isoformat() if configuration.created_at else None,
        "updated_at": configuration.updated_at.isoformat() if configuration.updated_at else None,
    }


def _snapshot_to_domain(snapshot: Optional[Dict[str, Any]]) -> Optional[FeeConfiguration]:
    """Rebuild a fee rule from its stored snapshot."""
    if not snapshot:
        return None

    def moment(value):
        return datetime.fromisoformat(value) if value else None

    return FeeConfiguration(
        id=snapshot.get("id"),
        fee_type=snapshot["fee_type"],
        min_amount=Money.of(snapshot["min_amount"]),
        max_amount=_money_or_none(snapshot.get("max_amount")),
        min_days=snapshot.get("min_days"),
        max_days=snapshot.get("max_days"),
        percentage_fee=Decimal(snapshot["percentage_fee"]),
        fixed_fee=_money_or_none(snapshot.get("fixed_fee")),
        priority=snapshot["priority"],
        active=snapshot.get("active", True),
        description=snapshot.get("description"),
        created_at=moment(snapshot.get("created_at")),
        updated_at=moment(snapshot.get("updated_at")),
    )


def _map_db_transaction_to_domain(db_transaction: TransactionModel) -> Transaction:
    """Map DB Transaction model to Domain Transaction entity."""
    return Transaction(
        id=db_transaction.id,
        source_account=AccountNumber(db_transaction.source_account),
        destination_account=AccountNumber(db_transaction.destination_account),
        transfer_amount=Money.of(db_transaction.transfer_amount),
        transfer_fee=Money.of(db_transaction.transfer_fee),
        fee_configuration=_snapshot_to_domain(db_transaction.fee_configuration),
        scheduled_date=db_transaction.scheduled_date,
        created_at=db_transaction.created_at,
        updated_at=db_transaction.updated_at,
    )


def _copy_transaction_to_db(transaction: Transaction, db_transaction: TransactionModel) -> None:
    db_transaction.source_account = transaction.source_account.value
    db_transaction.destination_account = transaction.destination_account.value
    db_transaction.transfer_amount = transaction.transfer_amount.amount
    db_transaction.transfer_fee = transaction.transfer_fee.amount
    db_transaction.fee_configuration = _snapshot_from_domain(transaction.fee_configuration)
    db_transaction.scheduled_date = transaction.scheduled_date
    db_transaction.created_at = transaction.created_at
    db_transaction.updated_at = transaction.updated_at


# --- Repositories ---

class SqlAlchemyTransactionRepository(TransactionRepository):
    """Relational transaction store."""

    def __init__(self, session_factory: SessionFactory):
        """
        Initialize with SQLAlchemy session factory.

        Args:
            session_factory: Callable that returns a Session
        """
        self._session_factory = session_factory

    def save(self, transaction: Transaction) -> Transaction:
        with self._session_factory() as session:
            try:
                db_transaction = None
                if transaction.id is not None:
                    db_transaction = session.get(TransactionModel, transaction.id)
                if db_transaction is None:
                    db_transaction = TransactionModel(id=transaction.id)
                    session.add(db_transaction)

                _copy_transaction_to_db(transaction, db_transaction)
                session.commit()

                logger.debug(f"Transaction saved: {db_transaction.id}")
                return _map_db_transaction_to_domain(db_transaction)

            except Exception as e:
                session.rollback()
                logger.error(f"Failed to save transaction: {e}")
                raise

    def find_by_id(self, transaction_id: int) -> Optional[Transaction]:
        with self._session_factory() as session:
            try:
                db_transaction = session.get(TransactionModel, transaction_id)
                if db_transaction is None:
                    return None
                return _map_db_transaction_to_domain(db_transaction)

            except Exception as e:
                logger.error(f"Failed to get transaction: {e}")
                raise

    def find_all(self) -> List[Transaction]:
        return self._find_where()

    def find_by_scheduled_date(self, scheduled_date) -> List[Transaction]:
        return self._find_where(TransactionModel.scheduled_date == scheduled_date)

    def find_by_source_account(self, account_number: str) -> List[Transaction]:
        return self._find_where(TransactionModel.source_account == account_number)

    def _find_where(self, *criteria) -> List[Transaction]:
        with self._session_factory() as session:
            try:
                result = session.execute(
                    select(TransactionModel)
                    .where(*criteria)
                    .order_by(TransactionModel.id)
                )
                return [_map_db_transaction_to_domain(t) for t in result.scalars().all()]

            except Exception as e:
                logger.error(f"Failed to query transactions: {e}")
                raise

    def delete(self, transaction: Transaction) -> None:
        with self._session_factory() as session:
            try:
                db_transaction = session.get(TransactionModel, transaction.id)
                if db_transaction is not None:
                    session.delete(db_transaction)
                    session.commit()
                    logger.debug(f"Transaction deleted: {transaction.id}")

            except Exception as e:
                session.rollback()
                logger.error(f"Failed to delete transaction: {e}")
                raise

    def exists_by_id(self, transaction_id: int) -> bool:
        with self._session_factory() as session:
            return session.get(TransactionModel, transaction_id) is not None


class SqlAlchemyFeeConfigurationRepository(FeeConfigurationRepository):
    """Relational fee rule table."""

    def __init__(self, session_factory: SessionFactory):
        """
        Initialize with SQLAlchemy session factory.

        Args:
            session_factory: Callable that returns a Session
        """
        self._session_factory = session_factory

    def find_best_match(
        self,
        transfer_amount: Money,
        days_between: int,
    ) -> Optional[FeeConfiguration]:
        amount = transfer_amount.amount
        query = (
            select(FeeConfigurationModel)
            .where(
                FeeConfigurationModel.active.is_(True),
                FeeConfigurationModel.min_amount <= amount,
                or_(
                    FeeConfigurationModel.max_amount.is_(None),
                    FeeConfigurationModel.max_amount >= amount,
                ),
                or_(
                    FeeConfigurationModel.min_days.is_(None),
                    FeeConfigurationModel.min_days <= days_between,
                ),
                or_(
                    FeeConfigurationModel.max_days.is_(None),
                    FeeConfigurationModel.max_days >= days_between,
                ),
            )
            .order_by(FeeConfigurationModel.priority, FeeConfigurationModel.fee_type)
            .limit(1)
        )

        with self._session_factory() as session:
            try:
                db_config = session.execute(query).scalars().first()
                if db_config is None:
                    return None
                return _map_db_fee_configuration_to_domain(db_config)

            except Exception as e:
                logger.error(f"Failed to find fee configuration: {e}")
                raise

    def save(self, configuration: FeeConfiguration) -> FeeConfiguration:
        with self._session_factory() as session:
            try:
                db_config = None
                if configuration.id is not None:
                    db_config = session.get(FeeConfigurationModel, configuration.id)
                if db_config is None:
                    db_config = FeeConfigurationModel(id=configuration.id)
                    session.add(db_config)

                _copy_fee_configuration_to_db(configuration, db_config)
                session.commit()

                logger.debug(f"Fee configuration saved: {configuration.fee_type}")
                return _map_db_fee_configuration_to_domain(db_config)

            except Exception as e:
                session.rollback()
                logger.error(f"Failed to save fee configuration: {e}")
                raise

    def find_all(self) -> List[FeeConfiguration]:
        with self._session_factory() as session:
            try:
                result = session.execute(
                    select(FeeConfigurationModel).order_by(
                        FeeConfigurationModel.priority, FeeConfigurationModel.fee_type
                    )
                )
                return [_map_db_fee_configuration_to_domain(c) for c in result.scalars().all()]

            except Exception as e:
                logger.error(f"Failed to list fee configurations: {e}")
                raise

    def find_by_fee_type(self, fee_type: str) -> Optional[FeeConfiguration]:
        with self._session_factory() as session:
            try:
                db_config = session.execute(
                    select(FeeConfigurationModel).where(
                        FeeConfigurationModel.fee_type == fee_type
                    )
                ).scalar_one_or_none()
                if db_config is None:
                    return None
                return _map_db_fee_configuration_to_domain(db_config)

            except Exception as e:
                logger.error(f"Failed to get fee configuration: {e}")
                raise
