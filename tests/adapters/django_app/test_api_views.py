"""
Tests de la API JSON del dominio de Empresas.

Testa:
- Reportes del último mes (forma de la respuesta, meta.total_count)
- Registro de adhesión (201, validaciones 400, conflictos 409, 500)
- Cambio de estado de adhesión (200, 400, 404)
- Integración con el Container DI (backend en memoria y reloj fijo)
"""

import json
from datetime import datetime
from unittest.mock import Mock

import pytest
from dependency_injector import providers
from django.test import Client

from src.config.container import get_container
from src.core.companies.entities import Adhesion, AdhesionStatus, Transfer


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def client():
    """Django test client."""
    return Client()


@pytest.fixture
def container(fixed_now):
    """Container con repositorios en memoria y reloj fijo al 15/10/2025."""
    container = get_container()
    container.config.repository_backend.from_value('memory')
    container.clock.override(providers.Object(lambda: fixed_now))
    yield container
    container.clock.reset_override()


@pytest.fixture
def repos(container):
    return {
        'company': container.company_repository(),
        'transfer': container.transfer_repository(),
        'adhesion': container.adhesion_repository(),
    }


def post_json(client, url, data):
    return client.post(url, data=json.dumps(data), content_type='application/json')


def patch_json(client, url, data):
    return client.patch(url, data=json.dumps(data), content_type='application/json')


def make_transfer(transfer_id, company_id, when):
    return Transfer(
        id=transfer_id,
        company_id=company_id,
        amount=50_000,
        currency="USD",
        destination_account="0001-0001-0001-87654321",
        description="Pago de servicios",
        transfer_date=when,
    )


@pytest.fixture
def pyme_payload():
    return {
        "name": "Nueva Pyme",
        "cuit": "20-98765432-1",
        "email": "info@nuevapyme.com",
        "type": "PYME",
        "employee_count": 20,
        "annual_revenue": 3_000_000,
    }


@pytest.fixture
def corporativa_payload():
    return {
        "name": "Grupo Industrial SA",
        "cuit": "30-55555555-5",
        "email": "contacto@grupoindustrial.com",
        "type": "CORPORATIVA",
        "sector": "Industria",
        "is_multinational": True,
        "stock_symbol": "GISA",
    }


# =============================================================================
# Reportes
# =============================================================================

class TestCompaniesWithTransfersLastMonthAPI:

    URL = '/companies/transfers/last-month/'

    def test_lista_empresas_con_transferencias(self, client, repos, pyme, corporativa):
        repos['company'].save(pyme)
        repos['company'].save(corporativa)
        repos['transfer'].save(make_transfer("t1", pyme.id, datetime(2025, 9, 10)))
        repos['transfer'].save(make_transfer("t2", corporativa.id, datetime(2025, 9, 5)))
        repos['transfer'].save(make_transfer("t3", pyme.id, datetime(2025, 10, 2)))

        response = client.get(self.URL)

        assert response.status_code == 200
        data = response.json()
        assert data['success'] is True
        assert data['meta'] == {'total_count': 2}
        assert data['message'] == "Found 2 companies that made transfers in the last month"
        assert [c['id'] for c in data['data']] == [pyme.id, corporativa.id]
        assert data['data'][0]['employee_count'] == 15
        assert data['data'][1]['stock_symbol'] == "BNA"

    def test_sin_resultados(self, client, repos):
        response = client.get(self.URL)

        assert response.status_code == 200
        assert response.json() == {
            'success': True,
            'data': [],
            'message': "Found 0 companies that made transfers in the last month",
            'meta': {'total_count': 0},
        }

    def test_error_de_repositorio_devuelve_500(self, client, container):
        broken = Mock()
        broken.find_companies_by_transfer_date_range.side_effect = RuntimeError("db down")
        container.transfer_repository.override(providers.Object(broken))

        try:
            response = client.get(self.URL)
        finally:
            container.transfer_repository.reset_override()

        assert response.status_code == 500
        data = response.json()
        assert data['success'] is False
        assert data['message'] == 'Error retrieving companies with transfers from last month'
        assert data['error'] == "db down"


class TestCompaniesAdheredLastMonthAPI:

    URL = '/companies/adhesions/last-month/'

    def test_solo_adhesiones_aprobadas(self, client, repos, pyme, corporativa):
        repos['adhesion'].save(
            Adhesion("a1", pyme, datetime(2025, 9, 12), AdhesionStatus.APPROVED)
        )
        repos['adhesion'].save(
            Adhesion("a2", corporativa, datetime(2025, 9, 20), AdhesionStatus.PENDING)
        )

        response = client.get(self.URL)

        assert response.status_code == 200
        data = response.json()
        assert data['meta']['total_count'] == 1
        assert data['data'][0]['cuit'] == pyme.cuit
        assert data['message'] == "Found 1 companies that adhered in the last month"

    def test_no_es_capturado_por_la_ruta_de_detalle(self, client, repos):
        response = client.get(self.URL)

        assert response.status_code == 200


# =============================================================================
# Registro de adhesión
# =============================================================================

class TestAdhesionRegisterAPI:

    URL = '/companies/adhesions/'

    def test_registro_pyme(self, client, repos, pyme_payload, fixed_now):
        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 201
        data = response.json()
        assert data['success'] is True
        assert data['message'] == 'Company adhesion registered successfully'
        assert data['data']['status'] == 'PENDING'
        assert data['data']['adhesion_date'] == fixed_now.isoformat()
        assert data['data']['company']['name'] == "Nueva Pyme"
        assert data['data']['company']['type'] == "PYME"

        assert repos['company'].find_by_cuit("20-98765432-1") is not None
        assert len(repos['adhesion'].find_all()) == 1

    def test_registro_corporativa(self, client, repos, corporativa_payload):
        response = post_json(client, self.URL, corporativa_payload)

        assert response.status_code == 201
        company = response.json()['data']['company']
        assert company['sector'] == "Industria"
        assert company['is_multinational'] is True
        assert company['stock_symbol'] == "GISA"

    def test_cuit_duplicado_devuelve_409(self, client, repos, pyme_payload):
        post_json(client, self.URL, pyme_payload)

        pyme_payload['email'] = "otro@nuevapyme.com"
        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 409
        data = response.json()
        assert data['success'] is False
        assert data['message'] == 'Company registration failed'
        assert data['error'] == "Company with CUIT 20-98765432-1 already exists"
        assert len(repos['company'].find_all()) == 1

    def test_email_duplicado_devuelve_409(self, client, repos, pyme_payload):
        post_json(client, self.URL, pyme_payload)

        pyme_payload['cuit'] = "20-11111111-1"
        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 409
        assert response.json()['error'] == (
            "Company with email info@nuevapyme.com already exists"
        )

    @pytest.mark.parametrize("field,message", [
        ("name", "Company name is required"),
        ("cuit", "CUIT is required"),
        ("email", "Email is required"),
        ("employee_count", "Employee count is required and must be positive for PYME companies"),
        ("annual_revenue", "Annual revenue is required and must be positive for PYME companies"),
    ])
    def test_campo_faltante_devuelve_400(self, client, repos, pyme_payload, field, message):
        del pyme_payload[field]

        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 400
        data = response.json()
        assert data['message'] == 'Invalid company data'
        assert data['error'] == message
        assert repos['company'].find_all() == []

    @pytest.mark.parametrize("company_type", ["ONG", None])
    def test_tipo_invalido_no_tiene_palabra_clave_y_devuelve_500(
        self, client, repos, pyme_payload, company_type
    ):
        pyme_payload['type'] = company_type

        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 500
        data = response.json()
        assert data['message'] == 'Error registering company adhesion'
        assert data['error'] == "Company type must be PYME or CORPORATIVA"
        assert repos['company'].find_all() == []

    @pytest.mark.parametrize("field,message", [
        ("sector", "Sector is required for Corporate companies"),
        ("is_multinational", "Multinational status is required for Corporate companies"),
    ])
    def test_corporativa_incompleta(self, client, repos, corporativa_payload, field, message):
        del corporativa_payload[field]

        response = post_json(client, self.URL, corporativa_payload)

        assert response.status_code == 400
        assert response.json()['error'] == message

    def test_is_multinational_false_es_valido(self, client, repos, corporativa_payload):
        corporativa_payload['is_multinational'] = False

        response = post_json(client, self.URL, corporativa_payload)

        assert response.status_code == 201
        assert response.json()['data']['company']['is_multinational'] is False

    def test_cuit_invalido_devuelve_400(self, client, repos, pyme_payload):
        pyme_payload['cuit'] = "20123456785"

        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 400
        assert response.json()['error'] == "Invalid CUIT format"

    def test_regla_de_negocio_sin_palabra_clave_devuelve_500(self, client, repos, pyme_payload):
        pyme_payload['annual_revenue'] = 60_000_000

        response = post_json(client, self.URL, pyme_payload)

        assert response.status_code == 500
        assert response.json()['message'] == 'Error registering company adhesion'
        assert response.json()['error'] == "PYME annual revenue cannot exceed $50M ARS"

    def test_json_malformado(self, client, repos):
        response = client.post(self.URL, data="{no es json", content_type='application/json')

        assert response.status_code == 400
        assert response.json()['error'].startswith("Invalid JSON body")

    def test_get_no_permitido(self, client, repos):
        response = client.get(self.URL)

        assert response.status_code == 405


# =============================================================================
# Cambio de estado
# =============================================================================

class TestAdhesionStatusAPI:

    @pytest.fixture
    def adhesion(self, repos, pyme):
        adhesion = Adhesion("adh-1", pyme, datetime(2025, 10, 1))
        repos['adhesion'].save(adhesion)
        return adhesion

    def test_aprobar(self, client, repos, adhesion):
        response = patch_json(client, f'/companies/adhesions/{adhesion.id}/', {"status": "APPROVED"})

        assert response.status_code == 200
        data = response.json()
        assert data['message'] == 'Adhesion status updated successfully'
        assert data['data']['status'] == 'APPROVED'
        assert data['data']['adhesion_date'] == adhesion.adhesion_date.isoformat()
        assert repos['adhesion'].find_by_id(adhesion.id).is_approved

    def test_rechazada_puede_volver_a_aprobarse(self, client, repos, adhesion):
        patch_json(client, f'/companies/adhesions/{adhesion.id}/', {"status": "REJECTED"})
        response = patch_json(client, f'/companies/adhesions/{adhesion.id}/', {"status": "APPROVED"})

        assert response.status_code == 200
        assert response.json()['data']['status'] == 'APPROVED'

    def test_estado_invalido(self, client, adhesion):
        response = patch_json(client, f'/companies/adhesions/{adhesion.id}/', {"status": "ARCHIVED"})

        assert response.status_code == 400
        assert response.json()['error'] == 'Invalid adhesion status'

    def test_estado_faltante(self, client, adhesion):
        response = patch_json(client, f'/companies/adhesions/{adhesion.id}/', {})

        assert response.status_code == 400
        assert response.json()['error'] == 'Status is required'

    def test_adhesion_inexistente(self, client, repos):
        response = patch_json(client, '/companies/adhesions/no-existe/', {"status": "APPROVED"})

        assert response.status_code == 404
        assert response.json()['error'] == "Adhesion no-existe not found"


class TestHealthCheck:

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert response.json() == {'status': 'ok'}
