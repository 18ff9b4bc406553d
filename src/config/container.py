"""
Dependency Injection Container.

Configura y administra las dependencias de la aplicación con
dependency-injector.

Patrones:
- Selector: Elige la implementación de repositorios (django | memory)
- Singleton: Una instancia por container (repositorios, generador de IDs)
- Factory: Nueva instancia por llamada (services)
- Object: Valores fijos (reloj)
"""

from datetime import datetime
from typing import Optional

from dependency_injector import containers, providers
from django.conf import settings
from django.utils import timezone

from src.core.companies.ports import (
    InMemoryAdhesionRepository,
    InMemoryCompanyRepository,
    InMemoryTransferRepository,
)
from src.core.companies.use_cases import (
    GetCompaniesAdheredLastMonthService,
    GetCompaniesWithTransfersLastMonthService,
    RegisterCompanyAdhesionService,
    UpdateAdhesionStatusService,
)
from src.core.shared.interfaces import UuidIdGenerator


def local_now() -> datetime:
    """Reloj de la aplicación: hora local de TIME_ZONE (aware si USE_TZ)."""
    now = timezone.now()
    return timezone.localtime(now) if timezone.is_aware(now) else now


def _django_repository(class_name: str):
    # Import diferido: los models solo se pueden importar con las apps cargadas
    return getattr(
        __import__(
            'src.adapters.django_app.companies.repositories',
            fromlist=[class_name]
        ),
        class_name,
    )()


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organización:
    - Configuration: repository_backend
    - Infrastructure: reloj, generador de IDs
    - Repositories: seleccionados por config.repository_backend
    - Services: Use Cases

    Example:
        container = Container()
        container.config.from_dict({'repository_backend': 'memory'})

        service = container.register_company_adhesion_service()
        adhesion = service.execute(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Infrastructure
    # =========================================================================

    clock = providers.Object(local_now)

    id_generator = providers.Singleton(UuidIdGenerator)

    # =========================================================================
    # Repositories
    # =========================================================================

    company_repository = providers.Selector(
        config.repository_backend,
        django=providers.Singleton(_django_repository, 'DjangoCompanyRepository'),
        memory=providers.Singleton(InMemoryCompanyRepository),
    )

    transfer_repository = providers.Selector(
        config.repository_backend,
        django=providers.Singleton(_django_repository, 'DjangoTransferRepository'),
        memory=providers.Singleton(InMemoryTransferRepository),
    )

    adhesion_repository = providers.Selector(
        config.repository_backend,
        django=providers.Singleton(_django_repository, 'DjangoAdhesionRepository'),
        memory=providers.Singleton(InMemoryAdhesionRepository),
    )

    # =========================================================================
    # Services / Use Cases (Factory - nueva instancia por llamada)
    # =========================================================================

    get_companies_with_transfers_last_month_service = providers.Factory(
        GetCompaniesWithTransfersLastMonthService,
        transfer_repo=transfer_repository,
        company_repo=company_repository,
        clock=clock,
    )

    get_companies_adhered_last_month_service = providers.Factory(
        GetCompaniesAdheredLastMonthService,
        adhesion_repo=adhesion_repository,
        clock=clock,
    )

    register_company_adhesion_service = providers.Factory(
        RegisterCompanyAdhesionService,
        company_repo=company_repository,
        adhesion_repo=adhesion_repository,
        id_generator=id_generator,
        clock=clock,
    )

    update_adhesion_status_service = providers.Factory(
        UpdateAdhesionStatusService,
        adhesion_repo=adhesion_repository,
    )


# =============================================================================
# Container Global
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Devuelve la instancia global del container.

    La crea si no existe, tomando REPOSITORY_BACKEND de settings.
    """
    global _container

    if _container is None:
        _container = Container()
        _container.config.from_dict({
            'repository_backend': getattr(settings, 'REPOSITORY_BACKEND', 'django'),
        })

    return _container


def reset_container() -> None:
    """Descarta el container global (para tests)."""
    global _container
    _container = None
