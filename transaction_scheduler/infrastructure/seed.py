"""
Default fee rule table

TAXA_A   same-day transfers up to 1000.00: 3% + 3.00 EUR
TAXA_B   1000.01 to 2000.00, scheduled 1 to 10 days ahead: 9%
TAXA_C_* above 2000.00, the further ahead the cheaper
"""
from decimal import Decimal
from typing import List

from transaction_scheduler.domain.entities.fee_configuration import FeeConfiguration
from transaction_scheduler.domain.value_objects.money import Money


def default_fee_configurations() -> List[FeeConfiguration]:
    """Build the default rules (unsaved, no ids)."""
    return [
        FeeConfiguration.create(
            fee_type="TAXA_A",
            min_amount=Money.of("0.00"),
            max_amount=Money.of("1000.00"),
            min_days=0,
            max_days=0,
            percentage_fee=Decimal("0.03"),
            fixed_fee=Money.of("3.00"),
            priority=1,
            description="Same-day transfer up to 1000.00",
        ),
        FeeConfiguration.create(
            fee_type="TAXA_B",
            min_amount=Money.of("1000.01"),
            max_amount=Money.of("2000.00"),
            min_days=1,
            max_days=10,
            percentage_fee=Decimal("0.09"),
            fixed_fee=None,
            priority=2,
            description="1000.01 to 2000.00, 1 to 10 days ahead",
        ),
        _tier_c("TAXA_C_11_20", 11, 20, "0.082", 3),
        _tier_c("TAXA_C_21_30", 21, 30, "0.069", 4),
        _tier_c("TAXA_C_31_40", 31, 40, "0.047", 5),
        _tier_c("TAXA_C_41_PLUS", 41, None, "0.017", 6),
    ]


def _tier_c(fee_type, min_days, max_days, percentage, priority) -> FeeConfiguration:
    window = f"{min_days} to {max_days}" if max_days is not None else f"{min_days}+"
    return FeeConfiguration.create(
        fee_type=fee_type,
        min_amount=Money.of("2000.01"),
        max_amount=None,
        min_days=min_days,
        max_days=max_days,
        percentage_fee=Decimal(percentage),
        fixed_fee=None,
        priority=priority,
        description=f"Above 2000.00, {window} days ahead",
    )
