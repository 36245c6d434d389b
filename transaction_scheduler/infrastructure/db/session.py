"""
Database session management
Builds the SQLAlchemy engine and session factory from settings.
"""
from typing import Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from transaction_scheduler.config.settings import DatabaseConfig


def build_engine(url: Optional[str] = None, echo: Optional[bool] = None) -> Engine:
    """
    Create an engine.

    Args:
        url: Database URL, defaults to DatabaseConfig.URL
        echo: SQL echo flag, defaults to DatabaseConfig.ECHO
    """
    return create_engine(
        url or DatabaseConfig.URL,
        echo=DatabaseConfig.ECHO if echo is None else echo,
        pool_pre_ping=True,
        pool_recycle=DatabaseConfig.POOL_RECYCLE,
    )


def build_session_factory(engine: Engine) -> sessionmaker[Session]:
    """Session factory bound to the given engine."""
    return sessionmaker(
        engine,
        expire_on_commit=False,
        autoflush=False,
    )
