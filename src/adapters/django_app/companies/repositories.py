"""
Repositorios Django para persistencia de Empresas, Transferencias y Adhesiones.

Implementan las interfaces (Ports) definidas en src/core/companies/ports.py.
Son DRIVEN ADAPTERS: el Core los invoca en respuesta a operaciones.

Responsabilidades:
- Implementar los Protocols de repositorio
- Mapear entities ↔ models vía Mappers
- Ejecutar las consultas con el ORM (select_related donde corresponde)

Principios:
- El repositorio no contiene lógica de negocio
- Las búsquedas individuales devuelven None, nunca lanzan DoesNotExist
- Los rangos de fechas son inclusivos (__range) y ordenados del más reciente
"""

from datetime import datetime
from typing import Any, List, Mapping, Optional
import logging

from src.core.companies.entities import Adhesion, AdhesionStatus, Company, Transfer
from src.core.companies.ports import (
    AdhesionRepository as AdhesionRepositoryPort,
    CompanyRepository as CompanyRepositoryPort,
    TransferRepository as TransferRepositoryPort,
)

from .mappers import AdhesionMapper, CompanyMapper, TransferMapper, to_db_datetime
from .models import AdhesionModel, AdhesionStatusChoices, CompanyModel, TransferModel

logger = logging.getLogger(__name__)


class DjangoCompanyRepository(CompanyRepositoryPort):
    """
    Implementación Django de CompanyRepository.

    Example:
        repo = DjangoCompanyRepository()
        repo.save(company)
        existing = repo.find_by_cuit("20-12345678-5")
    """

    def __init__(self):
        self._mapper = CompanyMapper()

    def find_all(self) -> List[Company]:
        return self._mapper.to_entity_list(CompanyModel.objects.all())

    def find_by_id(self, company_id: str) -> Optional[Company]:
        try:
            model = CompanyModel.objects.get(id=company_id)
            return self._mapper.to_entity(model)
        except CompanyModel.DoesNotExist:
            logger.debug(f"Company not found: {company_id}")
            return None

    def find_by_cuit(self, cuit: str) -> Optional[Company]:
        model = CompanyModel.objects.filter(cuit=cuit).first()
        return self._mapper.to_entity(model) if model else None

    def find_by_email(self, email: str) -> Optional[Company]:
        model = CompanyModel.objects.filter(email=email).first()
        return self._mapper.to_entity(model) if model else None

    def save(self, company: Company) -> Company:
        """
        Persiste la empresa (create o update).

        Note:
            Usa update_or_create; la unicidad de cuit/email la garantiza
            además el índice único de la tabla
        """
        logger.debug(f"Saving company: {company.id}")

        CompanyModel.objects.update_or_create(
            id=company.id,
            defaults=self._mapper.to_model_data(company),
        )

        logger.info(f"Company saved: {company.id}")
        return company

    def update(self, company_id: str, changes: Mapping[str, Any]) -> Optional[Company]:
        """
        Reemplaza campos y vuelve a validar la empresa.

        Returns:
            Empresa actualizada o None si no existe
        """
        company = self.find_by_id(company_id)
        if company is None:
            return None

        return self.save(company.with_updates(changes))

    def delete(self, company_id: str) -> bool:
        deleted_count, _ = CompanyModel.objects.filter(id=company_id).delete()

        if deleted_count:
            logger.info(f"Company deleted: {company_id}")
        return deleted_count > 0


class DjangoTransferRepository(TransferRepositoryPort):
    """Implementación Django de TransferRepository."""

    def __init__(self):
        self._mapper = TransferMapper()

    def find_all(self) -> List[Transfer]:
        return self._mapper.to_entity_list(TransferModel.objects.all())

    def find_by_id(self, transfer_id: str) -> Optional[Transfer]:
        try:
            model = TransferModel.objects.get(id=transfer_id)
            return self._mapper.to_entity(model)
        except TransferModel.DoesNotExist:
            logger.debug(f"Transfer not found: {transfer_id}")
            return None

    def find_by_company_id(self, company_id: str) -> List[Transfer]:
        queryset = TransferModel.objects.filter(company_id=company_id)
        return self._mapper.to_entity_list(queryset)

    def _in_range(self, start: datetime, end: datetime):
        return TransferModel.objects.filter(
            transfer_date__range=(to_db_datetime(start), to_db_datetime(end))
        ).order_by('-transfer_date')

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Transfer]:
        return self._mapper.to_entity_list(self._in_range(start, end))

    def find_companies_by_transfer_date_range(
        self, start: datetime, end: datetime
    ) -> List[str]:
        """
        IDs distintos de empresas con transferencias en [start, end].

        Se deduplica en Python para conservar el orden de aparición
        (DISTINCT junto con ORDER BY no lo garantiza).
        """
        company_ids = self._in_range(start, end).values_list('company_id', flat=True)
        return list(dict.fromkeys(company_ids))

    def save(self, transfer: Transfer) -> Transfer:
        logger.debug(f"Saving transfer: {transfer.id}")

        TransferModel.objects.update_or_create(
            id=transfer.id,
            defaults=self._mapper.to_model_data(transfer),
        )

        logger.info(f"Transfer saved: {transfer.id}")
        return transfer

    def delete(self, transfer_id: str) -> bool:
        deleted_count, _ = TransferModel.objects.filter(id=transfer_id).delete()
        return deleted_count > 0


class DjangoAdhesionRepository(AdhesionRepositoryPort):
    """
    Implementación Django de AdhesionRepository.

    Todas las consultas cargan la empresa con select_related('company').
    """

    def __init__(self):
        self._mapper = AdhesionMapper()

    def _queryset(self):
        return AdhesionModel.objects.select_related('company')

    def find_all(self) -> List[Adhesion]:
        return self._mapper.to_entity_list(self._queryset())

    def find_by_id(self, adhesion_id: str) -> Optional[Adhesion]:
        try:
            model = self._queryset().get(id=adhesion_id)
            return self._mapper.to_entity(model)
        except AdhesionModel.DoesNotExist:
            logger.debug(f"Adhesion not found: {adhesion_id}")
            return None

    def find_by_company_id(self, company_id: str) -> List[Adhesion]:
        queryset = self._queryset().filter(company_id=company_id)
        return self._mapper.to_entity_list(queryset)

    def _in_range(self, start: datetime, end: datetime):
        return self._queryset().filter(
            adhesion_date__range=(to_db_datetime(start), to_db_datetime(end))
        ).order_by('-adhesion_date')

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Adhesion]:
        return self._mapper.to_entity_list(self._in_range(start, end))

    def find_companies_by_adhesion_date_range(
        self, start: datetime, end: datetime
    ) -> List[Company]:
        """Empresas de adhesiones APPROVED en [start, end]."""
        queryset = self._in_range(start, end).filter(
            status=AdhesionStatusChoices.APPROVED
        )
        return [CompanyMapper.to_entity(model.company) for model in queryset]

    def save(self, adhesion: Adhesion) -> Adhesion:
        logger.debug(f"Saving adhesion: {adhesion.id}")

        AdhesionModel.objects.update_or_create(
            id=adhesion.id,
            defaults=self._mapper.to_model_data(adhesion),
        )

        logger.info(f"Adhesion saved: {adhesion.id} ({adhesion.status.value})")
        return adhesion

    def update(self, adhesion_id: str, status: AdhesionStatus) -> Optional[Adhesion]:
        adhesion = self.find_by_id(adhesion_id)
        if adhesion is None:
            return None

        return self.save(adhesion.transition_to(status))

    def delete(self, adhesion_id: str) -> bool:
        deleted_count, _ = AdhesionModel.objects.filter(id=adhesion_id).delete()
        return deleted_count > 0
