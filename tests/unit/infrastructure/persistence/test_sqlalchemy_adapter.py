"""
SQLAlchemy repository tests (SQLite in-memory)
"""
from datetime import timedelta
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from transaction_scheduler.domain.value_objects.money import Money
from transaction_scheduler.infrastructure.adapters.persistence.sqlalchemy_adapter import (
    SqlAlchemyTransactionRepository,
)
from transaction_scheduler.infrastructure.db.init_db import seed_default_fee_configurations


@pytest.fixture
def seeded_fee_configurations(sql_fee_configurations):
    seed_default_fee_configurations(sql_fee_configurations)
    return sql_fee_configurations


@pytest.fixture
def priced_transaction(sample_transaction, seeded_fee_configurations, today):
    """sample_transaction priced with the stored TAXA_B rule, not yet saved"""
    taxa_b = seeded_fee_configurations.find_by_fee_type("TAXA_B")
    return sample_transaction.update(
        source_account=sample_transaction.source_account,
        destination_account=sample_transaction.destination_account,
        transfer_amount=sample_transaction.transfer_amount,
        scheduled_date=sample_transaction.scheduled_date,
        transfer_fee=taxa_b.calculate_fee(sample_transaction.transfer_amount),
        fee_configuration=taxa_b,
        today=today,
    ).with_id(None)


class TestSqlAlchemyFeeConfigurationRepository:

    def test_seed_inserts_default_table(self, sql_fee_configurations):
        assert seed_default_fee_configurations(sql_fee_configurations) == 6
        assert seed_default_fee_configurations(sql_fee_configurations) == 0
        assert [c.fee_type for c in sql_fee_configurations.find_all()] == [
            "TAXA_A", "TAXA_B", "TAXA_C_11_20", "TAXA_C_21_30", "TAXA_C_31_40", "TAXA_C_41_PLUS",
        ]

    def test_round_trip(self, seeded_fee_configurations):
        taxa_a = seeded_fee_configurations.find_by_fee_type("TAXA_A")
        assert taxa_a.id is not None
        assert taxa_a.min_amount == Money.of("0.00")
        assert taxa_a.max_amount == Money.of("1000.00")
        assert taxa_a.fixed_fee == Money.of("3.00")
        assert taxa_a.percentage_fee == Decimal("0.03")
        assert (taxa_a.min_days, taxa_a.max_days) == (0, 0)

    def test_nullable_bounds(self, seeded_fee_configurations):
        rule = seeded_fee_configurations.find_by_fee_type("TAXA_C_41_PLUS")
        assert rule.max_amount is None
        assert rule.max_days is None
        assert rule.fixed_fee is None

    @pytest.mark.parametrize("amount, days, expected", [
        ("500.00", 0, "TAXA_A"),
        ("1000.00", 0, "TAXA_A"),
        ("1000.01", 1, "TAXA_B"),
        ("1500.00", 5, "TAXA_B"),
        ("2000.00", 10, "TAXA_B"),
        ("3500.00", 11, "TAXA_C_11_20"),
        ("3500.00", 30, "TAXA_C_21_30"),
        ("3500.00", 31, "TAXA_C_31_40"),
        ("2000.01", 400, "TAXA_C_41_PLUS"),
    ])
    def test_find_best_match(self, seeded_fee_configurations, amount, days, expected):
        rule = seeded_fee_configurations.find_best_match(Money.of(amount), days)
        assert rule.fee_type == expected

    @pytest.mark.parametrize("amount, days", [
        ("500.00", 1),
        ("1500.00", 0),
        ("1500.00", 11),
        ("3500.00", 10),
        ("500.00", -1),
    ])
    def test_find_best_match_gaps(self, seeded_fee_configurations, amount, days):
        assert seeded_fee_configurations.find_best_match(Money.of(amount), days) is None

    def test_inactive_rule_skipped(self, seeded_fee_configurations):
        taxa_b = seeded_fee_configurations.find_by_fee_type("TAXA_B")
        seeded_fee_configurations.save(taxa_b.deactivate())

        assert seeded_fee_configurations.find_best_match(Money.of("1500.00"), 5) is None
        assert not seeded_fee_configurations.find_by_fee_type("TAXA_B").is_active

    def test_priority_and_tie_break(self, seeded_fee_configurations, make_rule):
        seeded_fee_configurations.save(make_rule("Z_PROMO", min_amount="1000.00", priority=2))
        seeded_fee_configurations.save(make_rule("A_PROMO", min_amount="1000.00", priority=2))
        assert seeded_fee_configurations.find_best_match(
            Money.of("1500.00"), 5
        ).fee_type == "A_PROMO"

        seeded_fee_configurations.save(make_rule("TOP", min_amount="1000.00", priority=1))
        assert seeded_fee_configurations.find_best_match(Money.of("1500.00"), 5).fee_type == "TOP"

    def test_duplicate_fee_type_rejected(self, seeded_fee_configurations, make_rule):
        with pytest.raises(IntegrityError):
            seeded_fee_configurations.save(make_rule("TAXA_A"))


class TestSqlAlchemyTransactionRepository:

    def test_save_assigns_id(self, sql_transactions, priced_transaction):
        saved = sql_transactions.save(priced_transaction)
        assert saved.id is not None
        assert sql_transactions.exists_by_id(saved.id)

    def test_round_trip(self, sql_transactions, priced_transaction):
        saved = sql_transactions.save(priced_transaction)
        loaded = sql_transactions.find_by_id(saved.id)

        assert loaded.source_account == priced_transaction.source_account
        assert loaded.destination_account == priced_transaction.destination_account
        assert loaded.transfer_amount == Money.of("1500.00")
        assert loaded.transfer_fee == Money.of("135.00")
        assert loaded.scheduled_date == priced_transaction.scheduled_date
        assert loaded.fee_configuration.fee_type == "TAXA_B"
        assert loaded.fee_configuration.percentage_fee == Decimal("0.09")
        assert loaded.fee_configuration.min_amount == Money.of("1000.01")

    def test_fee_rule_stored_as_snapshot(
        self, sql_transactions, seeded_fee_configurations, priced_transaction
    ):
        saved = sql_transactions.save(priced_transaction)

        taxa_b = seeded_fee_configurations.find_by_fee_type("TAXA_B")
        seeded_fee_configurations.save(taxa_b.update(
            fee_type="TAXA_B", min_amount=taxa_b.min_amount, max_amount=taxa_b.max_amount,
            min_days=taxa_b.min_days, max_days=taxa_b.max_days,
            percentage_fee=Decimal("0.5"), fixed_fee=None, priority=taxa_b.priority,
        ))

        loaded = sql_transactions.find_by_id(saved.id)
        assert loaded.fee_configuration.percentage_fee == Decimal("0.09")
        assert loaded.transfer_fee == Money.of("135.00")

    def test_update_existing_row(self, sql_transactions, priced_transaction, today):
        saved = sql_transactions.save(priced_transaction)
        moved = saved.update(
            source_account=saved.destination_account,
            destination_account=saved.source_account,
            transfer_amount=saved.transfer_amount,
            scheduled_date=saved.scheduled_date,
            transfer_fee=saved.transfer_fee,
            fee_configuration=saved.fee_configuration,
            today=today,
        )

        sql_transactions.save(moved)

        assert len(sql_transactions.find_all()) == 1
        assert sql_transactions.find_by_id(saved.id).source_account == saved.destination_account

    def test_queries(self, sql_transactions, priced_transaction):
        first = sql_transactions.save(priced_transaction)
        second = sql_transactions.save(priced_transaction)

        assert [t.id for t in sql_transactions.find_all()] == [first.id, second.id]
        assert len(sql_transactions.find_by_scheduled_date(priced_transaction.scheduled_date)) == 2
        assert sql_transactions.find_by_scheduled_date(
            priced_transaction.scheduled_date + timedelta(days=1)
        ) == []
        assert len(sql_transactions.find_by_source_account("DE89370400440532013000")) == 2
        assert sql_transactions.find_by_source_account("PT50000201231234567890154") == []

    def test_delete(self, sql_transactions, priced_transaction):
        saved = sql_transactions.save(priced_transaction)
        sql_transactions.delete(saved)
        assert sql_transactions.find_by_id(saved.id) is None
        assert not sql_transactions.exists_by_id(saved.id)

    def test_find_missing(self, sql_transactions):
        assert sql_transactions.find_by_id(12345) is None

    def test_errors_are_logged_and_reraised(self, priced_transaction, caplog):
        session = MagicMock()
        session.__enter__.return_value = session
        session.__exit__.return_value = False
        session.commit.side_effect = RuntimeError("disk full")
        repository = SqlAlchemyTransactionRepository(lambda: session)

        with pytest.raises(RuntimeError, match="disk full"):
            repository.save(priced_transaction)

        session.rollback.assert_called_once()
        assert "Failed to save transaction" in caplog.text
