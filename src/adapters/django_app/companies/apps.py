"""
Configuración del Django App de Empresas.
"""

from django.apps import AppConfig


class CompaniesConfig(AppConfig):
    """Configuración del app Companies."""

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'src.adapters.django_app.companies'
    label = 'companies'
    verbose_name = 'Adhesión de Empresas'
