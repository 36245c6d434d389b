"""
SQLite in-memory database fixtures
"""
import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from transaction_scheduler.infrastructure.adapters.persistence.sqlalchemy_adapter import (
    SqlAlchemyFeeConfigurationRepository,
    SqlAlchemyTransactionRepository,
)
from transaction_scheduler.infrastructure.db.init_db import create_tables
from transaction_scheduler.infrastructure.db.session import build_session_factory


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)


@pytest.fixture
def sql_transactions(session_factory):
    return SqlAlchemyTransactionRepository(session_factory)


@pytest.fixture
def sql_fee_configurations(session_factory):
    return SqlAlchemyFeeConfigurationRepository(session_factory)
