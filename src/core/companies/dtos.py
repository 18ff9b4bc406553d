"""
Data Transfer Objects (DTOs) del Dominio de Empresas.

DTOs de entrada para los casos de uso de escritura. Los casos de uso
devuelven entidades; la serialización de salida es la vista to_dict()
de cada entidad.
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Optional


@dataclass(frozen=True)
class RegisterCompanyAdhesionInputDTO:
    """
    DTO de entrada para registrar la adhesión de una empresa.

    Pedido plano: los campos condicionales se completan según el tipo.

    Attributes:
        name: Razón social
        cuit: CUIT con formato XX-XXXXXXXX-X
        email: Email de contacto
        type: "PYME" o "CORPORATIVA"
        employee_count: Cantidad de empleados (solo PYME)
        annual_revenue: Facturación anual (solo PYME)
        sector: Sector de actividad (solo CORPORATIVA)
        is_multinational: Si opera en varios países (solo CORPORATIVA)
        stock_symbol: Símbolo bursátil opcional (solo CORPORATIVA)
    """

    name: str
    cuit: str
    email: str
    type: str
    employee_count: Optional[int] = None
    annual_revenue: Optional[float] = None
    sector: Optional[str] = None
    is_multinational: Optional[bool] = None
    stock_symbol: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "RegisterCompanyAdhesionInputDTO":
        """Construye el DTO ignorando claves desconocidas."""
        known = {f.name for f in fields(cls)}
        values = {key: value for key, value in data.items() if key in known}
        for required in ("name", "cuit", "email", "type"):
            values.setdefault(required, None)
        return cls(**values)


@dataclass(frozen=True)
class UpdateAdhesionStatusInputDTO:
    """
    DTO de entrada para cambiar el estado de una adhesión.

    Attributes:
        adhesion_id: ID de la adhesión
        status: "PENDING", "APPROVED" o "REJECTED"
    """

    adhesion_id: str
    status: str
