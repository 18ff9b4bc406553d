"""
URL patterns para el dominio de Empresas.

Endpoints API JSON (montados bajo /companies/):
- GET   transfers/last-month/ - Empresas con transferencias el mes pasado
- GET   adhesions/last-month/ - Empresas adheridas el mes pasado
- POST  adhesions/            - Registrar adhesión
- PATCH adhesions/<id>/       - Cambiar estado de adhesión
"""

from django.urls import path
from . import api_views

app_name = 'companies'

urlpatterns = [
    # Reportes
    path(
        'transfers/last-month/',
        api_views.CompaniesWithTransfersLastMonthAPIView.as_view(),
        name='transfers_last_month',
    ),
    # Antes de <pk> para no confundir "last-month" con un ID
    path(
        'adhesions/last-month/',
        api_views.CompaniesAdheredLastMonthAPIView.as_view(),
        name='adhesions_last_month',
    ),

    # Adhesiones
    path('adhesions/', api_views.AdhesionRegisterAPIView.as_view(), name='adhesion_register'),
    path('adhesions/<str:pk>/', api_views.AdhesionStatusAPIView.as_view(), name='adhesion_status'),
]
