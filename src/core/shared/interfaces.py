"""
Interfaces (Ports) - Contratos entre Core y Adapters.

Este módulo define las interfaces genéricas que los Adapters implementan.
Son los "Ports" de la Arquitectura Hexagonal.

Tipos de Ports:
- Driven Ports: Repository, IdGenerator
- Driving Ports: definidos por los Use Cases (método execute)

Principio: el Core define interfaces; los Adapters las implementan.
El flujo de dependencia siempre apunta hacia el Core.
"""

from typing import List, Optional, TypeVar, Generic, Protocol, runtime_checkable
import uuid


# Type variable para entidades genéricas
T = TypeVar("T")


@runtime_checkable
class Repository(Protocol, Generic[T]):
    """
    Interfaz genérica para repositorios.

    Define la forma de lectura/escritura común a los tres repositorios
    del dominio (CompanyRepository, TransferRepository y
    AdhesionRepository la extienden con sus consultas propias). Las búsquedas individuales devuelven None ante la
    ausencia, nunca lanzan excepción.

    Type Parameters:
        T: Tipo de la entidad gestionada

    Note:
        Se usa Protocol para permitir duck typing: los adapters
        no necesitan heredar explícitamente.
    """

    def find_all(self) -> List[T]:
        """
        Lista todas las entidades.

        Returns:
            Lista de todas las entidades del repositorio
        """
        ...

    def find_by_id(self, entity_id: str) -> Optional[T]:
        """
        Busca una entidad por ID.

        Args:
            entity_id: Identificador único de la entidad

        Returns:
            Entidad encontrada o None
        """
        ...

    def save(self, entity: T) -> T:
        """
        Persiste la entidad (alta o reemplazo por id).

        Args:
            entity: Entidad a persistir

        Returns:
            La entidad almacenada
        """
        ...

    def delete(self, entity_id: str) -> bool:
        """
        Elimina una entidad.

        Args:
            entity_id: Identificador de la entidad a eliminar

        Returns:
            True si se eliminó algo, False si no existía
        """
        ...


@runtime_checkable
class IdGenerator(Protocol):
    """
    Capacidad de generación de identificadores.

    Los casos de uso reciben un IdGenerator inyectado en lugar de
    generar ids por su cuenta, de modo que el algoritmo se puede
    reemplazar sin tocar la lógica de negocio.
    """

    def next_id(self) -> str:
        """Devuelve un identificador nuevo, no vacío."""
        ...


class UuidIdGenerator:
    """IdGenerator por defecto: UUID4 en formato canónico (36 caracteres)."""

    def next_id(self) -> str:
        return str(uuid.uuid4())
