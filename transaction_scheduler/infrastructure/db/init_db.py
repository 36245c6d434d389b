"""
Database initialization
Creates tables and seeds the default fee rule table.
"""
import logging

from sqlalchemy.engine import Engine

from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.infrastructure.db.base import Base
from transaction_scheduler.infrastructure.db import models  # noqa: F401  registers tables
from transaction_scheduler.infrastructure.seed import default_fee_configurations

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    """Create every table that does not exist yet."""
    logger.info("Creating database tables...")
    Base.metadata.create_all(engine)
    logger.info("Database tables ready")


def seed_default_fee_configurations(repository: FeeConfigurationRepository) -> int:
    """
    Insert default fee rules whose fee_type is not stored yet.

    Existing rules are left untouched.

    Returns:
        Number of rules inserted
    """
    logger.info("Seeding default fee configurations...")

    inserted = 0
    for configuration in default_fee_configurations():
        if repository.find_by_fee_type(configuration.fee_type) is not None:
            logger.info(f"  Fee configuration exists: {configuration.fee_type}")
            continue
        repository.save(configuration)
        inserted += 1
        logger.info(f"  Fee configuration added: {configuration.summary}")

    logger.info(f"Default fee configurations seeded ({inserted} added)")
    return inserted
