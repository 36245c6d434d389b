"""
Shared pytest fixtures
"""
from datetime import date, timedelta
from decimal import Decimal

import pytest

from transaction_scheduler.application.ports.outbound.time_provider_port import (
    FixedTimeAdapter,
)
from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.entities.transaction import Transaction
from transaction_scheduler.domain.value_objects.account_number import AccountNumber
from transaction_scheduler.domain.value_objects.money import Money
from transaction_scheduler.infrastructure.seed import default_fee_configurations

TODAY = date(2025, 6, 2)

SOURCE_IBAN = "DE89370400440532013000"
DESTINATION_IBAN = "FR7630006000011234567890189"
OTHER_IBAN = "PT50000201231234567890154"


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def clock():
    """Clock pinned to TODAY"""
    return FixedTimeAdapter.on(TODAY)


@pytest.fixture
def source_account():
    return AccountNumber(SOURCE_IBAN)


@pytest.fixture
def destination_account():
    return AccountNumber(DESTINATION_IBAN)


@pytest.fixture
def default_rules():
    """Default fee table with ids 1..6 assigned"""
    return [rule.with_id(i) for i, rule in enumerate(default_fee_configurations(), start=1)]


@pytest.fixture
def taxa_a(default_rules):
    return default_rules[0]


@pytest.fixture
def taxa_b(default_rules):
    return default_rules[1]


@pytest.fixture
def taxa_c_11_20(default_rules):
    return default_rules[2]


@pytest.fixture
def sample_transaction(source_account, destination_account, taxa_b):
    """1500.00 EUR in 5 days, priced with TAXA_B (9%)"""
    return Transaction.create(
        source_account=source_account,
        destination_account=destination_account,
        transfer_amount=Money.of("1500.00"),
        scheduled_date=TODAY + timedelta(days=5),
        transfer_fee=Money.of("135.00"),
        fee_configuration=taxa_b,
        today=TODAY,
    ).with_id(1)


def _make_rule(fee_type="CUSTOM", min_amount="0.00", max_amount=None, min_days=None,
               max_days=None, percentage="0.05", fixed=None, priority=1) -> FeeConfiguration:
    """Build an ad hoc fee rule"""
    return FeeConfiguration.create(
        fee_type=fee_type,
        min_amount=Money.of(min_amount),
        max_amount=Money.of(max_amount) if max_amount is not None else None,
        min_days=min_days,
        max_days=max_days,
        percentage_fee=Decimal(percentage),
        fixed_fee=Money.of(fixed) if fixed is not None else None,
        priority=priority,
    )


@pytest.fixture
def make_rule():
    """Factory for ad hoc fee rules"""
    return _make_rule
