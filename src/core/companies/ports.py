"""
Ports (Interfaces) del Dominio de Empresas.

Define los contratos que los Adapters de infraestructura deben
implementar para persistir y consultar empresas, transferencias y
adhesiones. Los casos de uso solo dependen de estos Protocols.

Ports:
- CompanyRepository
- TransferRepository
- AdhesionRepository

Implementaciones:
- Django*Repository (ORM, src/adapters/django_app/companies/repositories.py)
- InMemory*Repository (este módulo; tests, prototipos y backend "memory")

Convenciones comunes:
- Las búsquedas individuales devuelven None ante la ausencia
- Los rangos de fechas son cerrados en ambos extremos
- save() es un upsert por id y devuelve la entidad almacenada
- delete() devuelve True si eliminó algo
"""

from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Protocol, runtime_checkable

from src.core.shared.interfaces import Repository

from .entities import Adhesion, AdhesionStatus, Company, Transfer
from .reporting import DateRange


@runtime_checkable
class CompanyRepository(Repository[Company], Protocol):
    """
    Interface para persistencia de Empresas.

    La unicidad de cuit y email se consulta con find_by_cuit y
    find_by_email antes de registrar una empresa nueva.

    Example:
        class DjangoCompanyRepository:
            def save(self, company: Company) -> Company:
                model = CompanyMapper.to_model(company)
                model.save()
                return company
    """

    def find_by_cuit(self, cuit: str) -> Optional[Company]:
        ...

    def find_by_email(self, email: str) -> Optional[Company]:
        ...

    def update(self, company_id: str, changes: Mapping[str, Any]) -> Optional[Company]:
        """
        Reemplaza campos de una empresa existente.

        Args:
            company_id: ID de la empresa
            changes: Campos a reemplazar

        Returns:
            La empresa reconstruida y revalidada, o None si no existe

        Raises:
            ValidationError: Campo desconocido o resultado inválido
            BusinessRuleViolationError: Intento de cambiar el id
        """
        ...


@runtime_checkable
class TransferRepository(Repository[Transfer], Protocol):
    """
    Interface para persistencia de Transferencias.
    """

    def find_by_company_id(self, company_id: str) -> List[Transfer]:
        ...

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Transfer]:
        """
        Transferencias con transfer_date dentro de [start, end].

        Returns:
            Lista ordenada por transfer_date descendente
        """
        ...

    def find_companies_by_transfer_date_range(
        self, start: datetime, end: datetime
    ) -> List[str]:
        """
        IDs de empresas con al menos una transferencia en [start, end].

        Devuelve IDs (no empresas) y no filtra por estado de adhesión:
        una transferencia es evidencia de actividad por sí misma.

        Returns:
            IDs distintos, en el orden en que aparecen por primera vez
        """
        ...


@runtime_checkable
class AdhesionRepository(Repository[Adhesion], Protocol):
    """
    Interface para persistencia de Adhesiones.
    """

    def find_by_company_id(self, company_id: str) -> List[Adhesion]:
        ...

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Adhesion]:
        """
        Adhesiones con adhesion_date dentro de [start, end], de cualquier estado.

        Returns:
            Lista ordenada por adhesion_date descendente
        """
        ...

    def find_companies_by_adhesion_date_range(
        self, start: datetime, end: datetime
    ) -> List[Company]:
        """
        Empresas adheridas en [start, end].

        Solo cuentan las adhesiones en estado APPROVED; PENDING y
        REJECTED quedan afuera. Devuelve empresas completas, no IDs.
        """
        ...

    def update(self, adhesion_id: str, status: AdhesionStatus) -> Optional[Adhesion]:
        """
        Cambia el estado de una adhesión.

        Returns:
            La adhesión resultante o None si no existe
        """
        ...


class InMemoryCompanyRepository:
    """
    Implementación en memoria de CompanyRepository.

    Útil para:
    - Tests unitarios
    - Prototipado
    - Desarrollo local (REPOSITORY_BACKEND=memory)

    ¡No usar en producción!

    Example:
        repo = InMemoryCompanyRepository()
        repo.save(company)
        found = repo.find_by_cuit("20-12345678-5")
    """

    def __init__(self):
        self._companies: Dict[str, Company] = {}

    def find_all(self) -> List[Company]:
        return list(self._companies.values())

    def find_by_id(self, company_id: str) -> Optional[Company]:
        return self._companies.get(company_id)

    def find_by_cuit(self, cuit: str) -> Optional[Company]:
        return next((c for c in self._companies.values() if c.cuit == cuit), None)

    def find_by_email(self, email: str) -> Optional[Company]:
        return next((c for c in self._companies.values() if c.email == email), None)

    def save(self, company: Company) -> Company:
        self._companies[company.id] = company
        return company

    def update(self, company_id: str, changes: Mapping[str, Any]) -> Optional[Company]:
        company = self._companies.get(company_id)
        if company is None:
            return None

        updated = company.with_updates(changes)
        self._companies[company_id] = updated
        return updated

    def delete(self, company_id: str) -> bool:
        return self._companies.pop(company_id, None) is not None

    def clear(self) -> None:
        """Limpia todos los datos (útil para tests)."""
        self._companies.clear()


class InMemoryTransferRepository:
    """Implementación en memoria de TransferRepository."""

    def __init__(self):
        self._transfers: Dict[str, Transfer] = {}

    def find_all(self) -> List[Transfer]:
        return list(self._transfers.values())

    def find_by_id(self, transfer_id: str) -> Optional[Transfer]:
        return self._transfers.get(transfer_id)

    def find_by_company_id(self, company_id: str) -> List[Transfer]:
        return [t for t in self._transfers.values() if t.company_id == company_id]

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Transfer]:
        window = DateRange(start=start, end=end)
        matches = [t for t in self._transfers.values() if window.contains(t.transfer_date)]
        return sorted(matches, key=lambda t: t.transfer_date, reverse=True)

    def find_companies_by_transfer_date_range(
        self, start: datetime, end: datetime
    ) -> List[str]:
        company_ids = (t.company_id for t in self.find_by_date_range(start, end))
        return list(dict.fromkeys(company_ids))

    def save(self, transfer: Transfer) -> Transfer:
        self._transfers[transfer.id] = transfer
        return transfer

    def delete(self, transfer_id: str) -> bool:
        return self._transfers.pop(transfer_id, None) is not None

    def clear(self) -> None:
        self._transfers.clear()


class InMemoryAdhesionRepository:
    """Implementación en memoria de AdhesionRepository."""

    def __init__(self):
        self._adhesions: Dict[str, Adhesion] = {}

    def find_all(self) -> List[Adhesion]:
        return list(self._adhesions.values())

    def find_by_id(self, adhesion_id: str) -> Optional[Adhesion]:
        return self._adhesions.get(adhesion_id)

    def find_by_company_id(self, company_id: str) -> List[Adhesion]:
        return [a for a in self._adhesions.values() if a.company.id == company_id]

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Adhesion]:
        window = DateRange(start=start, end=end)
        matches = [a for a in self._adhesions.values() if window.contains(a.adhesion_date)]
        return sorted(matches, key=lambda a: a.adhesion_date, reverse=True)

    def find_companies_by_adhesion_date_range(
        self, start: datetime, end: datetime
    ) -> List[Company]:
        return [
            a.company for a in self.find_by_date_range(start, end)
            if a.is_approved
        ]

    def save(self, adhesion: Adhesion) -> Adhesion:
        self._adhesions[adhesion.id] = adhesion
        return adhesion

    def update(self, adhesion_id: str, status: AdhesionStatus) -> Optional[Adhesion]:
        adhesion = self._adhesions.get(adhesion_id)
        if adhesion is None:
            return None

        updated = adhesion.transition_to(status)
        self._adhesions[adhesion_id] = updated
        return updated

    def delete(self, adhesion_id: str) -> bool:
        return self._adhesions.pop(adhesion_id, None) is not None

    def clear(self) -> None:
        self._adhesions.clear()
