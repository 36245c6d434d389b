"""
Declarative base for the scheduler tables.

Every constraint and index gets a deterministic name derived from its
table and columns, so the SQLite and server schemas line up.
"""
from sqlalchemy import MetaData
from sqlalchemy.orm import DeclarativeBase

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "ck": "ck_%(table_name)s_%(constraint_name)s",
    "pk": "pk_%(table_name)s",
}


class Base(DeclarativeBase):
    """Shared metadata for FeeConfigurationModel and TransactionModel"""
    metadata = MetaData(naming_convention=NAMING_CONVENTION)
