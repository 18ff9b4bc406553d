"""
Use Cases (Application Services) del Dominio de Empresas.

Este módulo contiene los casos de uso de la aplicación, que orquestan
la lógica de negocio coordinando entidades y repositorios.

Use Cases implementados:
- GetCompaniesWithTransfersLastMonthService: Empresas con transferencias el mes pasado
- GetCompaniesAdheredLastMonthService: Empresas adheridas (aprobadas) el mes pasado
- RegisterCompanyAdhesionService: Registra empresa + adhesión pendiente
- UpdateAdhesionStatusService: Aprueba, rechaza o vuelve a pendiente una adhesión

Principios:
- Un Use Case = Una operación de negocio
- Dependencias inyectadas (repositorios, generador de IDs, reloj)
- Sin lógica de infraestructura
- Los errores de repositorio se propagan sin reintentos
"""

from datetime import datetime
from typing import Callable, List, Optional
import logging

from src.core.shared.exceptions import (
    EntityAlreadyExistsError,
    EntityNotFoundError,
    ValidationError,
)
from src.core.shared.interfaces import IdGenerator, UuidIdGenerator

from .dtos import RegisterCompanyAdhesionInputDTO, UpdateAdhesionStatusInputDTO
from .entities import (
    Adhesion,
    Company,
    CompanyCorporativa,
    CompanyPyme,
    CompanyType,
)
from .ports import AdhesionRepository, CompanyRepository, TransferRepository
from .reporting import last_month_date_range


logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class GetCompaniesWithTransfersLastMonthService:
    """
    Use Case: Empresas que hicieron transferencias el mes pasado.

    Flujo:
    1. Calcular la ventana del mes anterior
    2. Obtener los IDs de empresas con transferencias en la ventana
    3. Resolver cada ID con find_by_id, uno por vez y en orden
    4. Omitir (sin error) los IDs que no correspondan a ninguna empresa

    No deduplica: si el repositorio devuelve un ID dos veces, la
    empresa aparece dos veces en el resultado.

    Example:
        service = GetCompaniesWithTransfersLastMonthService(transfer_repo, company_repo)
        companies = service.execute()
    """

    def __init__(
        self,
        transfer_repo: TransferRepository,
        company_repo: CompanyRepository,
        clock: Clock = datetime.now,
    ):
        self.transfer_repo = transfer_repo
        self.company_repo = company_repo
        self.clock = clock

    def execute(self) -> List[Company]:
        window = last_month_date_range(self.clock())
        company_ids = self.transfer_repo.find_companies_by_transfer_date_range(
            window.start, window.end
        )

        companies = []
        for company_id in company_ids:
            company = self.company_repo.find_by_id(company_id)
            if company is None:
                logger.warning(
                    f"Empresa {company_id} con transferencias no encontrada; se omite"
                )
                continue
            companies.append(company)

        logger.debug(
            f"{len(companies)} empresas con transferencias entre "
            f"{window.start.isoformat()} y {window.end.isoformat()}"
        )
        return companies


class GetCompaniesAdheredLastMonthService:
    """
    Use Case: Empresas cuya adhesión fue aprobada el mes pasado.

    Delega por completo en el repositorio; el resultado se devuelve
    sin modificar.
    """

    def __init__(self, adhesion_repo: AdhesionRepository, clock: Clock = datetime.now):
        self.adhesion_repo = adhesion_repo
        self.clock = clock

    def execute(self) -> List[Company]:
        window = last_month_date_range(self.clock())
        return self.adhesion_repo.find_companies_by_adhesion_date_range(
            window.start, window.end
        )


class RegisterCompanyAdhesionService:
    """
    Use Case: Registrar una empresa nueva con su adhesión pendiente.

    Flujo:
    1. Verificar que el CUIT no exista (antes que el email)
    2. Verificar que el email no exista
    3. Generar el ID de la empresa
    4. Validar campos obligatorios según el tipo y construir la variante
    5. Persistir la empresa
    6. Generar el ID de la adhesión (distinto del de la empresa)
    7. Construir la adhesión en PENDING y persistirla
    8. Devolver la adhesión guardada

    Los pasos 5 y 7 son independientes: si falla el guardado de la
    adhesión, la empresa queda persistida (no hay rollback).

    Attributes:
        company_repo: Repositorio de empresas
        adhesion_repo: Repositorio de adhesiones
        id_generator: Generador de IDs (UUID4 por defecto)
        clock: Fuente de created_at y adhesion_date

    Example:
        service = RegisterCompanyAdhesionService(company_repo, adhesion_repo)
        adhesion = service.execute(RegisterCompanyAdhesionInputDTO(
            name="Nueva Pyme",
            cuit="20-98765432-1",
            email="nueva@pyme.com",
            type="PYME",
            employee_count=25,
            annual_revenue=45_000_000,
        ))
        adhesion.status  # AdhesionStatus.PENDING
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        adhesion_repo: AdhesionRepository,
        id_generator: Optional[IdGenerator] = None,
        clock: Clock = datetime.now,
    ):
        self.company_repo = company_repo
        self.adhesion_repo = adhesion_repo
        self.id_generator = id_generator or UuidIdGenerator()
        self.clock = clock

    def execute(self, input_dto: RegisterCompanyAdhesionInputDTO) -> Adhesion:
        """
        Ejecuta el registro.

        Args:
            input_dto: Pedido plano de registro

        Returns:
            Adhesión guardada, en estado PENDING

        Raises:
            EntityAlreadyExistsError: Si el CUIT o el email ya existen
            ValidationError: Si falta un campo del tipo, el tipo es
                desconocido o la entidad no cumple sus invariantes
        """
        if self.company_repo.find_by_cuit(input_dto.cuit):
            logger.info(f"Registro rechazado: CUIT {input_dto.cuit} duplicado")
            raise EntityAlreadyExistsError(
                f"Company with CUIT {input_dto.cuit} already exists",
                entity_type="Company",
                field="cuit",
            )

        if self.company_repo.find_by_email(input_dto.email):
            logger.info(f"Registro rechazado: email {input_dto.email} duplicado")
            raise EntityAlreadyExistsError(
                f"Company with email {input_dto.email} already exists",
                entity_type="Company",
                field="email",
            )

        company_id = self.id_generator.next_id()
        company = self._build_company(company_id, input_dto)

        saved_company = self.company_repo.save(company)

        adhesion_id = self.id_generator.next_id()
        while adhesion_id == company_id:
            adhesion_id = self.id_generator.next_id()

        adhesion = Adhesion(
            id=adhesion_id,
            company=saved_company,
            adhesion_date=self.clock(),
        )
        saved_adhesion = self.adhesion_repo.save(adhesion)

        logger.info(
            f"Adhesión {saved_adhesion.id} registrada para empresa "
            f"{saved_company.id} ({saved_company.type.value})"
        )
        return saved_adhesion

    def _build_company(
        self, company_id: str, input_dto: RegisterCompanyAdhesionInputDTO
    ) -> Company:
        try:
            company_type = CompanyType.from_string(input_dto.type)
        except ValueError as e:
            raise ValidationError(str(e), field="type")

        if company_type == CompanyType.PYME:
            if not input_dto.employee_count or not input_dto.annual_revenue:
                raise ValidationError(
                    "Employee count and annual revenue are required for PYME companies"
                )

            return CompanyPyme(
                id=company_id,
                name=input_dto.name,
                cuit=input_dto.cuit,
                email=input_dto.email,
                created_at=self.clock(),
                employee_count=input_dto.employee_count,
                annual_revenue=input_dto.annual_revenue,
            )

        # False es un valor válido para is_multinational; solo falta si es None
        if not input_dto.sector or input_dto.is_multinational is None:
            raise ValidationError(
                "Sector and multinational status are required for Corporate companies"
            )

        return CompanyCorporativa(
            id=company_id,
            name=input_dto.name,
            cuit=input_dto.cuit,
            email=input_dto.email,
            created_at=self.clock(),
            sector=input_dto.sector,
            is_multinational=input_dto.is_multinational,
            stock_symbol=input_dto.stock_symbol or None,
        )


class UpdateAdhesionStatusService:
    """
    Use Case: Cambiar el estado de una adhesión.

    Flujo:
    1. Buscar la adhesión
    2. Aplicar la transición (approve, reject o volver a PENDING)
    3. Persistir la nueva instancia

    No hay estados terminales: se puede volver a aprobar una adhesión
    rechazada.
    """

    def __init__(self, adhesion_repo: AdhesionRepository):
        self.adhesion_repo = adhesion_repo

    def execute(self, input_dto: UpdateAdhesionStatusInputDTO) -> Adhesion:
        """
        Raises:
            EntityNotFoundError: Si la adhesión no existe
            ValidationError: Si el estado no es válido
        """
        adhesion = self.adhesion_repo.find_by_id(input_dto.adhesion_id)

        if not adhesion:
            raise EntityNotFoundError(
                f"Adhesion {input_dto.adhesion_id} not found",
                entity_type="Adhesion",
                entity_id=input_dto.adhesion_id,
            )

        updated = adhesion.transition_to(input_dto.status)
        saved = self.adhesion_repo.save(updated)

        logger.info(
            f"Adhesión {saved.id}: {adhesion.status.value} -> {saved.status.value}"
        )
        return saved
