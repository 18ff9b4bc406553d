"""
Componentes de Dominio Compartidos.

Contiene componentes compartidos entre todos los dominios:
- Excepciones de dominio
- Interfaces (Ports) genéricas
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityAlreadyExistsError,
    EntityNotFoundError,
    BusinessRuleViolationError,
)
from .interfaces import Repository, IdGenerator, UuidIdGenerator

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityAlreadyExistsError",
    "EntityNotFoundError",
    "BusinessRuleViolationError",
    "Repository",
    "IdGenerator",
    "UuidIdGenerator",
]
