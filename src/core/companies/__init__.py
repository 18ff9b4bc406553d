"""
Dominio de Empresas - Adhesiones y Transferencias.

Este módulo contiene toda la lógica de negocio de empresas adheridas:
- Entidades (Company, CompanyPyme, CompanyCorporativa, Transfer, Adhesion)
- Use Cases (reportes del último mes, registro de adhesión, cambio de estado)
- DTOs (Input Data Transfer Objects)
- Ports (Interfaces para repositorios)

Características del Dominio:
- Validación completa en la construcción de cada entidad
- Topes de empleados y facturación para PYME
- Unicidad de CUIT y email controlada en el registro
- Reportes sobre el mes calendario anterior
"""

from .entities import (
    Company,
    CompanyType,
    CompanyPyme,
    CompanyCorporativa,
    Transfer,
    Adhesion,
    AdhesionStatus,
)
from .dtos import RegisterCompanyAdhesionInputDTO, UpdateAdhesionStatusInputDTO
from .ports import CompanyRepository, TransferRepository, AdhesionRepository
from .reporting import DateRange, last_month_date_range
from .use_cases import (
    GetCompaniesWithTransfersLastMonthService,
    GetCompaniesAdheredLastMonthService,
    RegisterCompanyAdhesionService,
    UpdateAdhesionStatusService,
)

__all__ = [
    # Entities
    "Company",
    "CompanyType",
    "CompanyPyme",
    "CompanyCorporativa",
    "Transfer",
    "Adhesion",
    "AdhesionStatus",
    # DTOs
    "RegisterCompanyAdhesionInputDTO",
    "UpdateAdhesionStatusInputDTO",
    # Ports
    "CompanyRepository",
    "TransferRepository",
    "AdhesionRepository",
    # Reporting
    "DateRange",
    "last_month_date_range",
    # Use Cases
    "GetCompaniesWithTransfersLastMonthService",
    "GetCompaniesAdheredLastMonthService",
    "RegisterCompanyAdhesionService",
    "UpdateAdhesionStatusService",
]
