"""
Dependency Injection Container.

This module provides a central container for wiring dependencies
following the Dependency Inversion Principle.

Usage:
    # Production (database from configuration)
    container = Container.create_default()
    create_transaction = container.get_create_transaction_use_case()

    # Testing
    container = Container.create_for_testing()
    # or with custom doubles
    container = Container(time_provider=FixedTimeAdapter.on(date(2025, 1, 1)))
"""
import logging
from typing import Optional

from transaction_scheduler.application.ports.outbound.fee_configuration_repository import (
    FeeConfigurationRepository,
)
from transaction_scheduler.application.ports.outbound.time_provider_port import (
    SystemTimeAdapter,
    TimeProviderPort,
)
from transaction_scheduler.application.ports.outbound.transaction_repository import (
    TransactionRepository,
)
from transaction_scheduler.application.use_cases.create_transaction import (
    CreateTransactionUseCase,
)
from transaction_scheduler.application.use_cases.delete_transaction import (
    DeleteTransactionUseCase,
)
from transaction_scheduler.application.use_cases.get_transaction import (
    GetTransactionUseCase,
)
from transaction_scheduler.application.use_cases.update_transaction import (
    UpdateTransactionUseCase,
)

logger = logging.getLogger(__name__)


class Container:
    """
    Dependency Injection Container.

    Manages the creation and wiring of application dependencies.
    Port instances and use cases are created once and reused.
    """

    def __init__(
        self,
        transaction_repository: Optional[TransactionRepository] = None,
        fee_configuration_repository: Optional[FeeConfigurationRepository] = None,
        time_provider: Optional[TimeProviderPort] = None,
    ):
        """
        Initialize container with optional port overrides.

        Args:
            transaction_repository: Transaction store (in-memory if None)
            fee_configuration_repository: Fee rule table (in-memory with
                the default rules if None)
            time_provider: Clock (system clock if None)
        """
        self._transaction_repository = transaction_repository
        self._fee_configuration_repository = fee_configuration_repository
        self._time_provider = time_provider

        # Cached use cases
        self._create_transaction_use_case: Optional[CreateTransactionUseCase] = None
        self._get_transaction_use_case: Optional[GetTransactionUseCase] = None
        self._update_transaction_use_case: Optional[UpdateTransactionUseCase] = None
        self._delete_transaction_use_case: Optional[DeleteTransactionUseCase] = None

    @classmethod
    def create_for_testing(
        cls,
        time_provider: Optional[TimeProviderPort] = None,
    ) -> "Container":
        """
        Create container with in-memory adapters for testing.

        Args:
            time_provider: Clock override, system clock if None

        Returns:
            Container with in-memory stores and the default fee table
        """
        from transaction_scheduler.infrastructure.adapters.persistence.memory_adapter import (
            InMemoryFeeConfigurationRepository,
            InMemoryTransactionRepository,
        )
        from transaction_scheduler.infrastructure.seed import default_fee_configurations

        return cls(
            transaction_repository=InMemoryTransactionRepository(),
            fee_configuration_repository=InMemoryFeeConfigurationRepository(
                default_fee_configurations()
            ),
            time_provider=time_provider or SystemTimeAdapter(),
        )

    @classmethod
    def create_default(
        cls,
        database_url: Optional[str] = None,
        seed_defaults: Optional[bool] = None,
        time_provider: Optional[TimeProviderPort] = None,
    ) -> "Container":
        """
        Create container backed by the configured database.

        Tables are created if missing and the default fee table is seeded
        when enabled.

        Args:
            database_url: Overrides DatabaseConfig.URL
            seed_defaults: Overrides FeeConfig.SEED_DEFAULTS
            time_provider: Clock override, system clock if None

        Returns:
            Container with SQLAlchemy repositories
        """
        from transaction_scheduler.config.settings import FeeConfig
        from transaction_scheduler.infrastructure.adapters.persistence.sqlalchemy_adapter import (
            SqlAlchemyFeeConfigurationRepository,
            SqlAlchemyTransactionRepository,
        )
        from transaction_scheduler.infrastructure.db.init_db import (
            create_tables,
            seed_default_fee_configurations,
        )
        from transaction_scheduler.infrastructure.db.session import (
            build_engine,
            build_session_factory,
        )

        engine = build_engine(database_url)
        create_tables(engine)
        session_factory = build_session_factory(engine)

        fee_configuration_repository = SqlAlchemyFeeConfigurationRepository(session_factory)
        if FeeConfig.SEED_DEFAULTS if seed_defaults is None else seed_defaults:
            seed_default_fee_configurations(fee_configuration_repository)

        logger.info(f"Container ready with database: {engine.url}")

        return cls(
            transaction_repository=SqlAlchemyTransactionRepository(session_factory),
            fee_configuration_repository=fee_configuration_repository,
            time_provider=time_provider or SystemTimeAdapter(),
        )

    # --- Port Getters ---

    def get_transaction_repository(self) -> TransactionRepository:
        """Get transaction repository implementation."""
        if self._transaction_repository is None:
            from transaction_scheduler.infrastructure.adapters.persistence.memory_adapter import (
                InMemoryTransactionRepository,
            )
            self._transaction_repository = InMemoryTransactionRepository()
        return self._transaction_repository

    def get_fee_configuration_repository(self) -> FeeConfigurationRepository:
        """Get fee rule repository implementation."""
        if self._fee_configuration_repository is None:
            from transaction_scheduler.infrastructure.adapters.persistence.memory_adapter import (
                InMemoryFeeConfigurationRepository,
            )
            from transaction_scheduler.infrastructure.seed import default_fee_configurations
            self._fee_configuration_repository = InMemoryFeeConfigurationRepository(
                default_fee_configurations()
            )
        return self._fee_configuration_repository

    def get_time_provider(self) -> TimeProviderPort:
        """Get clock implementation."""
        if self._time_provider is None:
            self._time_provider = SystemTimeAdapter()
        return self._time_provider

    # --- Use Case Getters ---

    def get_create_transaction_use_case(self) -> CreateTransactionUseCase:
        """Get CreateTransactionUseCase with wired dependencies."""
        if self._create_transaction_use_case is None:
            self._create_transaction_use_case = CreateTransactionUseCase(
                transactions=self.get_transaction_repository(),
                fee_configurations=self.get_fee_configuration_repository(),
                time_provider=self.get_time_provider(),
            )
        return self._create_transaction_use_case

    def get_get_transaction_use_case(self) -> GetTransactionUseCase:
        """Get GetTransactionUseCase with wired dependencies."""
        if self._get_transaction_use_case is None:
            self._get_transaction_use_case = GetTransactionUseCase(
                transactions=self.get_transaction_repository(),
            )
        return self._get_transaction_use_case

    def get_update_transaction_use_case(self) -> UpdateTransactionUseCase:
        """Get UpdateTransactionUseCase with wired dependencies."""
        if self._update_transaction_use_case is None:
            self._update_transaction_use_case = UpdateTransactionUseCase(
                transactions=self.get_transaction_repository(),
                fee_configurations=self.get_fee_configuration_repository(),
                time_provider=self.get_time_provider(),
            )
        return self._update_transaction_use_case

    def get_delete_transaction_use_case(self) -> DeleteTransactionUseCase:
        """Get DeleteTransactionUseCase with wired dependencies."""
        if self._delete_transaction_use_case is None:
            self._delete_transaction_use_case = DeleteTransactionUseCase(
                transactions=self.get_transaction_repository(),
            )
        return self._delete_transaction_use_case
