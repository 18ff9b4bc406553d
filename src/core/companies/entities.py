"""
Entidades del Dominio de Empresas.

Este módulo define las entidades de dominio que encapsulan las reglas
de negocio de empresas, transferencias y adhesiones.

Entidades:
- Company: Base abstracta (variantes CompanyPyme y CompanyCorporativa)
- Transfer: Transferencia bancaria de una empresa
- Adhesion: Registro de alta de una empresa con su estado de aprobación

Reglas de Negocio Encapsuladas:
- Validación completa en la construcción (nunca existe una instancia inválida)
- Inmutabilidad: ninguna entidad se modifica después de creada
- Topes de empleados y facturación para PYME
- Transiciones de adhesión que devuelven una nueva instancia
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields, replace
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple
import re

from src.core.shared.exceptions import BusinessRuleViolationError, ValidationError


CUIT_PATTERN = re.compile(r"[0-9]{2}-[0-9]{8}-[0-9]")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ACCOUNT_PATTERN = re.compile(r"[0-9]{4}-[0-9]{4}-[0-9]{4}-[0-9]{8}")


def _is_blank(value: Any) -> bool:
    """True si el valor no es un string con contenido."""
    return not isinstance(value, str) or not value.strip()


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


class CompanyType(Enum):
    """
    Discriminador de variantes de empresa.

    Cada variante de Company fija su tipo a nivel de clase; el valor
    se persiste como columna discriminadora.
    """

    PYME = "PYME"
    CORPORATIVA = "CORPORATIVA"

    @classmethod
    def from_string(cls, value: Any) -> "CompanyType":
        """
        Convierte string a enum.

        Raises:
            ValueError: Si el valor no es un tipo conocido
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid company type: {value}")


class AdhesionStatus(Enum):
    """
    Estados posibles de una adhesión.

    Flujo:
        PENDING → APPROVED
        PENDING → REJECTED

    No hay estados terminales: approve() y reject() se aceptan desde
    cualquier estado, incluso para volver a aprobar una adhesión rechazada.
    """

    PENDING = "PENDING"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"

    @classmethod
    def from_string(cls, value: Any) -> "AdhesionStatus":
        """
        Convierte string a enum.

        Raises:
            ValueError: Si el estado no es uno de los tres legales
        """
        try:
            return cls(value)
        except ValueError:
            raise ValueError(f"Invalid adhesion status: {value}")


@dataclass(frozen=True, kw_only=True)
class Company(ABC):
    """
    Entidad de Dominio: Empresa (base abstracta).

    Variantes cerradas: CompanyPyme y CompanyCorporativa. Cada una
    agrega solo sus propios campos e implementa
    get_company_type_specific_info().

    Invariantes (en este orden de validación):
    - id presente
    - name presente
    - cuit presente y con formato DD-DDDDDDDD-D
    - email presente y con formato local@dominio.tld

    La unicidad de cuit y email NO la valida la entidad; la garantiza
    el caso de uso de registro consultando el repositorio.

    Attributes:
        id: Identificador único asignado externamente
        name: Razón social
        cuit: Clave tributaria argentina
        email: Email de contacto
        created_at: Fecha/hora de alta (por defecto, el momento de construcción)
        type: Discriminador fijo de la variante (nivel de clase)
    """

    id: str
    name: str
    cuit: str
    email: str
    created_at: datetime = field(default_factory=datetime.now)

    type: ClassVar[CompanyType]

    def __post_init__(self) -> None:
        self._validate_company()
        self._validate_type_specific()

    def _validate_company(self) -> None:
        if _is_blank(self.id):
            raise ValidationError("Company ID is required", field="id")

        if _is_blank(self.name):
            raise ValidationError("Company name is required", field="name")

        if _is_blank(self.cuit):
            raise ValidationError("CUIT is required", field="cuit")

        if not self.is_valid_cuit(self.cuit):
            raise ValidationError("Invalid CUIT format", field="cuit")

        if _is_blank(self.email):
            raise ValidationError("Company email is required", field="email")

        if not self.is_valid_email(self.email):
            raise ValidationError("Invalid email format", field="email")

    @staticmethod
    def is_valid_cuit(cuit: str) -> bool:
        """CUIT con formato XX-XXXXXXXX-X (11 dígitos)."""
        return CUIT_PATTERN.fullmatch(cuit) is not None

    @staticmethod
    def is_valid_email(email: str) -> bool:
        return EMAIL_PATTERN.fullmatch(email) is not None

    @abstractmethod
    def _validate_type_specific(self) -> None:
        """Valida los campos propios de la variante."""
        raise NotImplementedError

    @abstractmethod
    def get_company_type_specific_info(self) -> Dict[str, Any]:
        """Devuelve solo los campos propios de la variante."""
        raise NotImplementedError

    def to_dict(self) -> Dict[str, Any]:
        """
        Vista de serialización.

        Une los campos comunes con la información específica del tipo.
        """
        return {
            "id": self.id,
            "name": self.name,
            "cuit": self.cuit,
            "email": self.email,
            "type": self.type.value,
            "created_at": self.created_at.isoformat(),
            **self.get_company_type_specific_info(),
        }

    def with_updates(self, changes: Mapping[str, Any]) -> "Company":
        """
        Devuelve una nueva empresa con los campos indicados reemplazados.

        La nueva instancia se valida completa otra vez; la variante
        (type) no se puede cambiar.

        Args:
            changes: Campos a reemplazar (nombres de atributo)

        Returns:
            Nueva instancia de la misma variante

        Raises:
            BusinessRuleViolationError: Si se intenta cambiar el id
            ValidationError: Si un campo no existe en la variante o el
                resultado no cumple las invariantes
        """
        if "id" in changes and changes["id"] != self.id:
            raise BusinessRuleViolationError(
                "Company ID cannot be changed",
                rule="immutable_company_id",
            )

        known = {f.name for f in fields(self)}
        for name in changes:
            if name not in known:
                raise ValidationError(f"Invalid company field: {name}", field=name)

        return replace(self, **{k: v for k, v in changes.items() if k != "id"})


@dataclass(frozen=True, kw_only=True)
class CompanyPyme(Company):
    """
    Empresa PYME (pequeña/mediana empresa).

    Invariantes adicionales:
    - employee_count entre 1 y 250 inclusive
    - annual_revenue positiva y como máximo $50M ARS
    """

    employee_count: int
    annual_revenue: float

    type: ClassVar[CompanyType] = CompanyType.PYME

    MIN_EMPLOYEES: ClassVar[int] = 1
    MAX_EMPLOYEES: ClassVar[int] = 250
    MAX_ANNUAL_REVENUE: ClassVar[int] = 50_000_000

    def _validate_type_specific(self) -> None:
        if (
            isinstance(self.employee_count, bool)
            or not isinstance(self.employee_count, int)
            or not self.MIN_EMPLOYEES <= self.employee_count <= self.MAX_EMPLOYEES
        ):
            raise ValidationError(
                f"PYME must have between {self.MIN_EMPLOYEES} and "
                f"{self.MAX_EMPLOYEES} employees",
                field="employee_count",
            )

        if not _is_number(self.annual_revenue) or self.annual_revenue <= 0:
            raise ValidationError(
                "Annual revenue must be positive",
                field="annual_revenue",
            )

        # Tope de facturación PYME según regulación argentina
        if self.annual_revenue > self.MAX_ANNUAL_REVENUE:
            raise ValidationError(
                "PYME annual revenue cannot exceed $50M ARS",
                field="annual_revenue",
            )

    def get_company_type_specific_info(self) -> Dict[str, Any]:
        return {
            "employee_count": self.employee_count,
            "annual_revenue": self.annual_revenue,
        }


@dataclass(frozen=True, kw_only=True)
class CompanyCorporativa(Company):
    """
    Empresa Corporativa.

    Invariantes adicionales:
    - sector presente
    - stock_symbol, si se informa, no vacío y de 3 a 5 caracteres
      (un string vacío equivale a no informarlo)
    """

    sector: str
    is_multinational: bool
    stock_symbol: Optional[str] = None

    type: ClassVar[CompanyType] = CompanyType.CORPORATIVA

    MIN_STOCK_SYMBOL_LENGTH: ClassVar[int] = 3
    MAX_STOCK_SYMBOL_LENGTH: ClassVar[int] = 5

    def _validate_type_specific(self) -> None:
        if _is_blank(self.sector):
            raise ValidationError("Corporate sector is required", field="sector")

        if self.stock_symbol and not self.stock_symbol.strip():
            raise ValidationError(
                "Stock symbol cannot be empty if provided",
                field="stock_symbol",
            )

        if self.stock_symbol and not (
            self.MIN_STOCK_SYMBOL_LENGTH
            <= len(self.stock_symbol)
            <= self.MAX_STOCK_SYMBOL_LENGTH
        ):
            raise ValidationError(
                "Stock symbol must be between 3 and 5 characters",
                field="stock_symbol",
            )

    def get_company_type_specific_info(self) -> Dict[str, Any]:
        return {
            "sector": self.sector,
            "is_multinational": self.is_multinational,
            "stock_symbol": self.stock_symbol,
        }


@dataclass(frozen=True)
class Transfer:
    """
    Entidad de Dominio: Transferencia bancaria.

    La existencia de la empresa referida por company_id no se valida
    aquí; se asume válida por quien construye la transferencia.

    Invariantes (en este orden de validación):
    - id y company_id presentes
    - amount estrictamente positivo
    - currency presente y en ARS, USD o EUR
    - destination_account presente y con formato XXXX-XXXX-XXXX-XXXXXXXX
    - description presente
    """

    id: str
    company_id: str
    amount: float
    currency: str
    destination_account: str
    description: str
    transfer_date: datetime = field(default_factory=datetime.now)

    SUPPORTED_CURRENCIES: ClassVar[Tuple[str, ...]] = ("ARS", "USD", "EUR")

    def __post_init__(self) -> None:
        if _is_blank(self.id):
            raise ValidationError("Transfer ID is required", field="id")

        if _is_blank(self.company_id):
            raise ValidationError("Company ID is required", field="company_id")

        if not _is_number(self.amount) or self.amount <= 0:
            raise ValidationError("Transfer amount must be positive", field="amount")

        if _is_blank(self.currency):
            raise ValidationError("Currency is required", field="currency")

        if self.currency not in self.SUPPORTED_CURRENCIES:
            raise ValidationError(
                "Currency must be ARS, USD, or EUR",
                field="currency",
            )

        if _is_blank(self.destination_account):
            raise ValidationError(
                "Destination account is required",
                field="destination_account",
            )

        if not self.is_valid_account_number(self.destination_account):
            raise ValidationError(
                "Invalid destination account format",
                field="destination_account",
            )

        if _is_blank(self.description):
            raise ValidationError(
                "Transfer description is required",
                field="description",
            )

    @staticmethod
    def is_valid_account_number(account: str) -> bool:
        """Formato de cuenta bancaria argentina: XXXX-XXXX-XXXX-XXXXXXXX."""
        return ACCOUNT_PATTERN.fullmatch(account) is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "company_id": self.company_id,
            "amount": self.amount,
            "currency": self.currency,
            "destination_account": self.destination_account,
            "description": self.description,
            "transfer_date": self.transfer_date.isoformat(),
        }


@dataclass(frozen=True)
class Adhesion:
    """
    Entidad de Dominio: Adhesión de una empresa.

    Vincula exactamente una Company (asignada en la construcción y nunca
    reasignada) con una decisión de alta.

    Las transiciones approve()/reject() devuelven una NUEVA instancia con
    el mismo id, la misma referencia a la empresa y la misma fecha; la
    instancia original no cambia.

    Example:
        adhesion = Adhesion(id="a-1", company=company)
        approved = adhesion.approve()

        adhesion.status   # AdhesionStatus.PENDING
        approved.status   # AdhesionStatus.APPROVED
    """

    id: str
    company: Company
    adhesion_date: datetime = field(default_factory=datetime.now)
    status: AdhesionStatus = AdhesionStatus.PENDING

    def __post_init__(self) -> None:
        if _is_blank(self.id):
            raise ValidationError("Adhesion ID is required", field="id")

        if not isinstance(self.company, Company):
            raise ValidationError("Company is required for adhesion", field="company")

        try:
            status = AdhesionStatus.from_string(self.status)
        except ValueError:
            raise ValidationError("Invalid adhesion status", field="status")

        # Acepta el valor en texto ("APPROVED") y lo normaliza al enum
        object.__setattr__(self, "status", status)

    def approve(self) -> "Adhesion":
        return replace(self, status=AdhesionStatus.APPROVED)

    def reject(self) -> "Adhesion":
        return replace(self, status=AdhesionStatus.REJECTED)

    def transition_to(self, status: Any) -> "Adhesion":
        """
        Aplica la transición correspondiente al estado pedido.

        APPROVED usa approve(), REJECTED usa reject() y PENDING devuelve
        una copia en estado pendiente.

        Raises:
            ValidationError: Si el estado no es uno de los tres legales
        """
        try:
            target = AdhesionStatus.from_string(status)
        except ValueError:
            raise ValidationError("Invalid adhesion status", field="status")

        if target == AdhesionStatus.APPROVED:
            return self.approve()
        if target == AdhesionStatus.REJECTED:
            return self.reject()
        return replace(self, status=AdhesionStatus.PENDING)

    @property
    def is_approved(self) -> bool:
        return self.status == AdhesionStatus.APPROVED

    def to_dict(self) -> Dict[str, Any]:
        """Vista de serialización; anida la serialización de la empresa."""
        return {
            "id": self.id,
            "company": self.company.to_dict(),
            "adhesion_date": self.adhesion_date.isoformat(),
            "status": self.status.value,
        }
