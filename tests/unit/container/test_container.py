"""
Container wiring tests
"""
from datetime import date

from transaction_scheduler.application.ports.outbound.time_provider_port import (
    FixedTimeAdapter,
    SystemTimeAdapter,
)
from transaction_scheduler.application.use_cases import (
    CreateTransactionUseCase,
    DeleteTransactionUseCase,
    GetTransactionUseCase,
    UpdateTransactionUseCase,
)
from transaction_scheduler.container import Container
from transaction_scheduler.infrastructure.adapters.persistence.memory_adapter import (
    InMemoryFeeConfigurationRepository,
    InMemoryTransactionRepository,
)
from transaction_scheduler.infrastructure.adapters.persistence.sqlalchemy_adapter import (
    SqlAlchemyFeeConfigurationRepository,
    SqlAlchemyTransactionRepository,
)


class TestContainerDefaults:

    def test_default_ports(self):
        container = Container()
        assert isinstance(container.get_transaction_repository(), InMemoryTransactionRepository)
        assert isinstance(
            container.get_fee_configuration_repository(), InMemoryFeeConfigurationRepository
        )
        assert isinstance(container.get_time_provider(), SystemTimeAdapter)
        assert len(container.get_fee_configuration_repository().find_all()) == 6

    def test_port_override(self):
        clock = FixedTimeAdapter.on(date(2025, 6, 2))
        container = Container(time_provider=clock)
        assert container.get_time_provider() is clock

    def test_use_cases_are_cached_and_share_ports(self):
        container = Container.create_for_testing()

        create = container.get_create_transaction_use_case()
        assert create is container.get_create_transaction_use_case()
        assert isinstance(create, CreateTransactionUseCase)
        assert isinstance(container.get_get_transaction_use_case(), GetTransactionUseCase)
        assert isinstance(container.get_update_transaction_use_case(), UpdateTransactionUseCase)
        assert isinstance(container.get_delete_transaction_use_case(), DeleteTransactionUseCase)

        repository = container.get_transaction_repository()
        assert create.transactions is repository
        assert container.get_get_transaction_use_case().transactions is repository
        assert container.get_delete_transaction_use_case().transactions is repository


class TestContainerCreateDefault:

    def test_sqlalchemy_ports_with_seed(self, tmp_path):
        container = Container.create_default(
            database_url=f"sqlite:///{tmp_path / 'scheduler.db'}",
            seed_defaults=True,
        )

        assert isinstance(container.get_transaction_repository(), SqlAlchemyTransactionRepository)
        fee_configurations = container.get_fee_configuration_repository()
        assert isinstance(fee_configurations, SqlAlchemyFeeConfigurationRepository)
        assert len(fee_configurations.find_all()) == 6

    def test_without_seed(self, tmp_path):
        container = Container.create_default(
            database_url=f"sqlite:///{tmp_path / 'empty.db'}",
            seed_defaults=False,
        )
        assert container.get_fee_configuration_repository().find_all() == []

    def test_reopen_does_not_duplicate_rules(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'scheduler.db'}"
        Container.create_default(database_url=url, seed_defaults=True)
        container = Container.create_default(database_url=url, seed_defaults=True)
        assert len(container.get_fee_configuration_repository().find_all()) == 6
