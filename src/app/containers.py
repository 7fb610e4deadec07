"""Dependency injection container using dependency-injector library."""
from dependency_injector import containers, providers

from src.app.config import Settings
from src.shared.database.database import Database, DatabaseSettings

from src.app.infrastructure.mappers.client_mapper import ClientMapper
from src.app.infrastructure.mappers.sale_mapper import SaleMapper

from src.app.infrastructure.client_repository import ClientRepository
from src.app.infrastructure.sale_repository import SaleRepository
from src.app.infrastructure.stats_repository import StatsRepository

from src.app.core.services.client_service import ClientService
from src.app.core.services.stats_service import StatsService


class Container(containers.DeclarativeContainer):
    """Main application dependency injection container."""

    wiring_config = containers.WiringConfiguration(
        modules=[
            "src.app.api.v1.clients",
            "src.app.api.v1.stats",
        ]
    )

    # =========================================================================
    # CONFIGURATION - Singleton (loaded once, cached)
    # =========================================================================
    config = providers.Singleton(Settings)

    # =========================================================================
    # SINGLETONS - Stateless Mappers (reusable across all requests)
    # =========================================================================
    client_mapper = providers.Singleton(ClientMapper)
    sale_mapper = providers.Singleton(SaleMapper)

    # =========================================================================
    # SINGLETON - Database (one engine per process, disposed on shutdown)
    # =========================================================================
    database_settings = providers.Singleton(
        DatabaseSettings,
        db_url=config.provided.database_url,
        echo=config.provided.database_echo,
    )

    database = providers.Singleton(
        Database,
        db_settings=database_settings,
    )

    # =========================================================================
    # FACTORIES - Repositories (per-request, share database singleton)
    # =========================================================================
    client_repository = providers.Factory(
        ClientRepository,
        db=database,
        mapper=client_mapper,
    )

    sale_repository = providers.Factory(
        SaleRepository,
        db=database,
        mapper=sale_mapper,
    )

    stats_repository = providers.Factory(
        StatsRepository,
        db=database,
        mapper=sale_mapper,
    )

    # =========================================================================
    # FACTORIES - Services
    # =========================================================================
    client_service = providers.Factory(
        ClientService,
        repository=client_repository,
        default_page=config.provided.pagination.default_page,
        default_limit=config.provided.pagination.default_limit,
        max_limit=config.provided.pagination.max_limit,
    )

    stats_service = providers.Factory(
        StatsService,
        repository=stats_repository,
    )
