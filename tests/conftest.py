"""
Configuración global de Pytest para Company Adhesion Manager.

Este archivo es cargado automáticamente por pytest y provee la
configuración de Django (settings.configure) y fixtures compartidas.
"""

from datetime import datetime

import pytest
from pathlib import Path


def pytest_configure(config):
    """Configura Django antes de los tests."""
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            DATABASES={
                'default': {
                    'ENGINE': 'django.db.backends.sqlite3',
                    'NAME': ':memory:',
                }
            },
            INSTALLED_APPS=[
                'django.contrib.admin',
                'django.contrib.auth',
                'django.contrib.contenttypes',
                'django.contrib.sessions',
                'django.contrib.messages',
                'src.adapters.django_app.companies',
            ],
            ROOT_URLCONF='src.config.urls',
            DEFAULT_AUTO_FIELD='django.db.models.BigAutoField',
            USE_TZ=True,
            TIME_ZONE='America/Argentina/Buenos_Aires',
            REPOSITORY_BACKEND='django',
        )
        django.setup()

    config.addinivalue_line(
        "markers", "integration: marks tests as end-to-end integration tests"
    )


@pytest.fixture(scope="session")
def project_root():
    """Devuelve la ruta raíz del proyecto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset del container DI entre tests.

    Garantiza que cada test arranca con repositorios limpios.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


@pytest.fixture
def fixed_now():
    """Momento fijo de referencia: 15 de octubre de 2025."""
    return datetime(2025, 10, 15, 10, 30)


@pytest.fixture
def pyme_data():
    """Campos válidos de una empresa PYME."""
    return {
        "id": "company-pyme-1",
        "name": "TechStart Solutions",
        "cuit": "20-12345678-5",
        "email": "contact@techstart.com",
        "employee_count": 15,
        "annual_revenue": 2_500_000,
    }


@pytest.fixture
def corporativa_data():
    """Campos válidos de una empresa CORPORATIVA."""
    return {
        "id": "company-corp-1",
        "name": "Banco Nacional SA",
        "cuit": "30-11111111-9",
        "email": "corporate@banconacional.com",
        "sector": "Financiero",
        "is_multinational": False,
        "stock_symbol": "BNA",
    }


@pytest.fixture
def pyme(pyme_data):
    from src.core.companies.entities import CompanyPyme

    return CompanyPyme(**pyme_data, created_at=datetime(2025, 1, 1))


@pytest.fixture
def corporativa(corporativa_data):
    from src.core.companies.entities import CompanyCorporativa

    return CompanyCorporativa(**corporativa_data, created_at=datetime(2025, 1, 1))
