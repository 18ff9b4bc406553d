"""
Mappers para conversión entre Entities (Core) y Models (Django).

Responsabilidades:
- Convertir Company/Transfer/Adhesion → Model (para persistencia)
- Convertir Model → Entity, reconstruyendo la variante de Company
  a partir del discriminador `type`
- Normalizar fechas según USE_TZ y montos Decimal ↔ float

Principios:
- Los mappers no tienen estado
- No contienen lógica de negocio (la validación la hace la Entity)
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Optional

from django.conf import settings
from django.utils import timezone

from src.core.companies.entities import (
    Adhesion,
    AdhesionStatus,
    Company,
    CompanyCorporativa,
    CompanyPyme,
    CompanyType,
    Transfer,
)

from .models import AdhesionModel, CompanyModel, TransferModel


def to_db_datetime(value: datetime) -> datetime:
    """Hace aware una fecha naive cuando USE_TZ está activo."""
    if settings.USE_TZ and timezone.is_naive(value):
        return timezone.make_aware(value)
    return value


def from_db_datetime(value: datetime) -> datetime:
    if timezone.is_aware(value):
        return timezone.localtime(value)
    return value


def _to_decimal(value: Optional[float]) -> Optional[Decimal]:
    if value is None:
        return None
    return Decimal(str(value))


def _to_float(value: Optional[Decimal]) -> Optional[float]:
    if value is None:
        return None
    return float(value)


class CompanyMapper:
    """
    Mapper entre Company (PYME/CORPORATIVA) y CompanyModel.

    Las columnas de la otra variante quedan en NULL.
    """

    @staticmethod
    def to_model_data(entity: Company) -> Dict[str, Any]:
        """
        Datos del model sin el id (para update_or_create).

        Args:
            entity: Empresa de dominio

        Returns:
            Dict campo → valor
        """
        data = {
            'name': entity.name,
            'cuit': entity.cuit,
            'email': entity.email,
            'type': entity.type.value,
            'created_at': to_db_datetime(entity.created_at),
            'employee_count': None,
            'annual_revenue': None,
            'sector': None,
            'is_multinational': None,
            'stock_symbol': None,
        }

        if isinstance(entity, CompanyPyme):
            data['employee_count'] = entity.employee_count
            data['annual_revenue'] = _to_decimal(entity.annual_revenue)
        elif isinstance(entity, CompanyCorporativa):
            data['sector'] = entity.sector
            data['is_multinational'] = entity.is_multinational
            data['stock_symbol'] = entity.stock_symbol

        return data

    @staticmethod
    def to_model(entity: Company) -> CompanyModel:
        """
        Convierte Company a CompanyModel.

        Note:
            No llama a .save(); eso queda para el Repository
        """
        return CompanyModel(id=entity.id, **CompanyMapper.to_model_data(entity))

    @staticmethod
    def to_entity(model: CompanyModel) -> Company:
        """
        Convierte CompanyModel a la variante de Company que indica `type`.

        La Entity vuelve a validar sus invariantes al construirse.
        """
        common = {
            'id': model.id,
            'name': model.name,
            'cuit': model.cuit,
            'email': model.email,
            'created_at': from_db_datetime(model.created_at),
        }

        company_type = CompanyType.from_string(model.type)

        if company_type == CompanyType.PYME:
            return CompanyPyme(
                **common,
                employee_count=model.employee_count,
                annual_revenue=_to_float(model.annual_revenue),
            )

        return CompanyCorporativa(
            **common,
            sector=model.sector,
            is_multinational=bool(model.is_multinational),
            stock_symbol=model.stock_symbol or None,
        )

    @staticmethod
    def to_entity_list(models: List[CompanyModel]) -> List[Company]:
        return [CompanyMapper.to_entity(model) for model in models]


class TransferMapper:
    """Mapper entre Transfer y TransferModel."""

    @staticmethod
    def to_model_data(entity: Transfer) -> Dict[str, Any]:
        return {
            'company_id': entity.company_id,
            'amount': _to_decimal(entity.amount),
            'currency': entity.currency,
            'destination_account': entity.destination_account,
            'description': entity.description,
            'transfer_date': to_db_datetime(entity.transfer_date),
        }

    @staticmethod
    def to_model(entity: Transfer) -> TransferModel:
        return TransferModel(id=entity.id, **TransferMapper.to_model_data(entity))

    @staticmethod
    def to_entity(model: TransferModel) -> Transfer:
        return Transfer(
            id=model.id,
            company_id=model.company_id,
            amount=_to_float(model.amount),
            currency=model.currency,
            destination_account=model.destination_account,
            description=model.description,
            transfer_date=from_db_datetime(model.transfer_date),
        )

    @staticmethod
    def to_entity_list(models: List[TransferModel]) -> List[Transfer]:
        return [TransferMapper.to_entity(model) for model in models]


class AdhesionMapper:
    """
    Mapper entre Adhesion y AdhesionModel.

    to_entity() usa model.company; las consultas deben hacer
    select_related('company') para evitar N+1.
    """

    @staticmethod
    def to_model_data(entity: Adhesion) -> Dict[str, Any]:
        return {
            'company_id': entity.company.id,
            'adhesion_date': to_db_datetime(entity.adhesion_date),
            'status': entity.status.value,
        }

    @staticmethod
    def to_model(entity: Adhesion) -> AdhesionModel:
        return AdhesionModel(id=entity.id, **AdhesionMapper.to_model_data(entity))

    @staticmethod
    def to_entity(model: AdhesionModel) -> Adhesion:
        return Adhesion(
            id=model.id,
            company=CompanyMapper.to_entity(model.company),
            adhesion_date=from_db_datetime(model.adhesion_date),
            status=AdhesionStatus(model.status),
        )

    @staticmethod
    def to_entity_list(models: List[AdhesionModel]) -> List[Adhesion]:
        return [AdhesionMapper.to_entity(model) for model in models]
