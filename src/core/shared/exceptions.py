"""
Excepciones de Dominio del sistema de Adhesiones de Empresas.

Este módulo define excepciones específicas del dominio que permiten
comunicar errores de forma clara y tipada entre las capas.

Jerarquía:
    DomainException (base)
    ├── ValidationError (invariante de entidad o dato obligatorio)
    ├── EntityAlreadyExistsError (conflicto de unicidad: CUIT, email)
    ├── EntityNotFoundError (la entidad no existe)
    └── BusinessRuleViolationError (regla de negocio violada)

Nota:
    El texto de cada mensaje es parte del contrato con la capa HTTP,
    que clasifica los errores buscando "already exists", "required"
    o "Invalid" dentro del mensaje. str(exc) devuelve el mensaje tal cual.
"""


class DomainException(Exception):
    """
    Excepción base para todos los errores de dominio.

    Todas las excepciones específicas del dominio heredan de esta clase,
    lo que permite capturar cualquier error de dominio de forma genérica.

    Example:
        try:
            company = CompanyPyme(...)
        except DomainException as e:
            logger.error(f"Error de dominio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class ValidationError(DomainException):
    """
    Error de validación de datos.

    Se lanza cuando una entidad no cumple sus invariantes al construirse
    o cuando falta un campo obligatorio según el tipo de empresa.

    Example:
        if not self.cuit:
            raise ValidationError("CUIT is required", field="cuit")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)


class EntityAlreadyExistsError(DomainException):
    """
    Conflicto de unicidad.

    Se lanza cuando se intenta registrar una entidad cuyo atributo
    único (CUIT, email) ya pertenece a otra.

    Example:
        if company_repo.find_by_cuit(cuit):
            raise EntityAlreadyExistsError(
                f"Company with CUIT {cuit} already exists",
                entity_type="Company",
                field="cuit",
            )
    """

    def __init__(self, message: str, entity_type: str = None, field: str = None):
        self.entity_type = entity_type
        self.field = field
        super().__init__(message, "ENTITY_ALREADY_EXISTS")


class EntityNotFoundError(DomainException):
    """
    Entidad no encontrada en el repositorio.

    Las búsquedas de los repositorios devuelven None ante la ausencia;
    esta excepción la lanzan los casos de uso que necesitan la entidad.

    Example:
        adhesion = adhesion_repo.find_by_id(adhesion_id)
        if not adhesion:
            raise EntityNotFoundError(f"Adhesion {adhesion_id} not found")
    """

    def __init__(self, message: str, entity_type: str = None, entity_id: str = None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")


class BusinessRuleViolationError(DomainException):
    """
    Violación de una regla de negocio.

    Example:
        raise BusinessRuleViolationError(
            "Adhesion and company ids must differ",
            rule="ids_distintos",
        )
    """

    def __init__(self, message: str, rule: str = None):
        self.rule = rule
        super().__init__(message, "BUSINESS_RULE_VIOLATION")
