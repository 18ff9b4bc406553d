"""
Tests de Integración End-to-End.

Validan el flujo completo de la aplicación:
- Use Case → Repository en memoria
- Request HTTP → View → Use Case → Repository Django → Database

Los datos de ejemplo son los mismos que carga scripts/quick_setup.py.
"""

from datetime import datetime

import pytest
from dependency_injector import providers
from django.test import Client
from django.utils import timezone

from scripts.quick_setup import create_sample_data
from src.adapters.django_app.companies.models import AdhesionModel, CompanyModel
from src.config.container import get_container
from src.core.companies.dtos import (
    RegisterCompanyAdhesionInputDTO,
    UpdateAdhesionStatusInputDTO,
)
from src.core.companies.entities import AdhesionStatus, CompanyPyme
from src.core.companies.ports import (
    InMemoryAdhesionRepository,
    InMemoryCompanyRepository,
)
from src.core.companies.use_cases import (
    GetCompaniesAdheredLastMonthService,
    RegisterCompanyAdhesionService,
    UpdateAdhesionStatusService,
)
from src.core.shared.exceptions import EntityAlreadyExistsError


NUEVA_PYME = {
    "name": "Nueva Pyme",
    "cuit": "20-98765432-1",
    "email": "nueva@pyme.com",
    "type": "PYME",
    "employee_count": 25,
    "annual_revenue": 45_000_000,
}


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def company_repo():
    return InMemoryCompanyRepository()


@pytest.fixture
def adhesion_repo():
    return InMemoryAdhesionRepository()


@pytest.fixture
def register_service(company_repo, adhesion_repo, fixed_now):
    return RegisterCompanyAdhesionService(
        company_repo=company_repo,
        adhesion_repo=adhesion_repo,
        clock=lambda: fixed_now,
    )


@pytest.fixture
def client():
    return Client()


# =============================================================================
# Use Cases con repositorios en memoria
# =============================================================================

@pytest.mark.integration
class TestAdhesionLifecycleIntegration:

    def test_registrar_nueva_pyme(self, register_service, company_repo, adhesion_repo, fixed_now):
        adhesion = register_service.execute(
            RegisterCompanyAdhesionInputDTO.from_dict(NUEVA_PYME)
        )

        assert adhesion.status == AdhesionStatus.PENDING
        assert adhesion.adhesion_date == fixed_now
        assert isinstance(adhesion.company, CompanyPyme)
        assert adhesion.company.employee_count == 25
        assert adhesion.id != adhesion.company.id

        assert company_repo.find_by_cuit("20-98765432-1") == adhesion.company
        assert adhesion_repo.find_by_id(adhesion.id) == adhesion

    def test_segundo_registro_con_el_mismo_cuit(self, register_service, company_repo):
        register_service.execute(RegisterCompanyAdhesionInputDTO.from_dict(NUEVA_PYME))

        with pytest.raises(EntityAlreadyExistsError) as exc_info:
            register_service.execute(
                RegisterCompanyAdhesionInputDTO.from_dict(
                    {**NUEVA_PYME, "email": "otra@pyme.com"}
                )
            )

        assert str(exc_info.value) == "Company with CUIT 20-98765432-1 already exists"
        assert len(company_repo.find_all()) == 1

    def test_aprobada_aparece_en_el_reporte_del_mes_siguiente(
        self, register_service, adhesion_repo
    ):
        adhesion = register_service.execute(
            RegisterCompanyAdhesionInputDTO.from_dict(NUEVA_PYME)
        )

        UpdateAdhesionStatusService(adhesion_repo).execute(
            UpdateAdhesionStatusInputDTO(adhesion_id=adhesion.id, status="APPROVED")
        )

        # Registrada el 15/10; el reporte de noviembre mira octubre
        report = GetCompaniesAdheredLastMonthService(
            adhesion_repo, clock=lambda: datetime(2025, 11, 3, 9, 0)
        )
        assert [c.cuit for c in report.execute()] == ["20-98765432-1"]

        same_month = GetCompaniesAdheredLastMonthService(
            adhesion_repo, clock=lambda: datetime(2025, 10, 20)
        )
        assert same_month.execute() == []


# =============================================================================
# HTTP + Django ORM
# =============================================================================

@pytest.mark.integration
@pytest.mark.django_db
class TestHttpDatabaseIntegration:

    def test_registro_y_conflicto(self, client):
        response = client.post(
            '/companies/adhesions/', data=NUEVA_PYME, content_type='application/json'
        )

        assert response.status_code == 201
        adhesion_id = response.json()['data']['id']
        assert AdhesionModel.objects.get(id=adhesion_id).status == 'PENDING'

        response = client.post(
            '/companies/adhesions/',
            data={**NUEVA_PYME, "email": "otra@pyme.com"},
            content_type='application/json',
        )

        assert response.status_code == 409
        assert response.json()['error'] == "Company with CUIT 20-98765432-1 already exists"
        assert CompanyModel.objects.count() == 1

    def test_aprobar_y_reportar(self, client):
        fixed = timezone.make_aware(datetime(2025, 10, 15, 10, 30))
        container = get_container()
        container.clock.override(providers.Object(lambda: fixed))

        try:
            adhesion_id = client.post(
                '/companies/adhesions/', data=NUEVA_PYME, content_type='application/json'
            ).json()['data']['id']

            response = client.patch(
                f'/companies/adhesions/{adhesion_id}/',
                data={"status": "APPROVED"},
                content_type='application/json',
            )
            assert response.status_code == 200

            container.clock.override(
                providers.Object(lambda: timezone.make_aware(datetime(2025, 11, 2)))
            )
            response = client.get('/companies/adhesions/last-month/')
        finally:
            container.clock.reset_override()

        data = response.json()
        assert data['meta']['total_count'] == 1
        assert data['data'][0]['name'] == "Nueva Pyme"

    def test_reportes_con_datos_de_ejemplo(self, client):
        create_sample_data()

        transfers = client.get('/companies/transfers/last-month/').json()
        adhered = client.get('/companies/adhesions/last-month/').json()

        assert [c['id'] for c in transfers['data']] == ['1', '4', '2', '3']
        assert transfers['meta']['total_count'] == 4
        assert [c['id'] for c in adhered['data']] == ['4', '2', '1']
        assert adhered['message'] == "Found 3 companies that adhered in the last month"
