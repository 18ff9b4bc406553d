"""
API Views JSON para el dominio de Empresas.

Endpoints:
- GET   /companies/transfers/last-month/ - Empresas con transferencias el mes pasado
- GET   /companies/adhesions/last-month/ - Empresas adheridas el mes pasado
- POST  /companies/adhesions/            - Registrar adhesión de empresa
- PATCH /companies/adhesions/<id>/       - Cambiar estado de una adhesión

Formato:
- Entrada: JSON (claves snake_case)
- Salida: JSON con estructura {success, data, message, meta} o
  {success, message, error} ante un error

Clasificación de errores de escritura (por texto del mensaje):
- "already exists"        → 409
- "required" o "Invalid"  → 400
- cualquier otro          → 500
"""

import json
import logging
from typing import Any, Dict, List

from django.views import View
from django.http import JsonResponse, HttpRequest
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.companies.dtos import (
    RegisterCompanyAdhesionInputDTO,
    UpdateAdhesionStatusInputDTO,
)
from src.core.companies.entities import Company
from src.core.shared.exceptions import (
    DomainException,
    EntityNotFoundError,
    ValidationError,
)
from src.config.container import get_container

from .forms import AdhesionStatusForm, CompanyAdhesionForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, message: str = None,
                  error: str = None, status: int = 200,
                  meta: Dict = None) -> JsonResponse:
    """
    Crea una respuesta JSON estandarizada.

    Args:
        success: Si la operación fue exitosa
        data: Datos de la respuesta
        message: Mensaje legible
        error: Detalle del error (si aplica)
        status: HTTP status code
        meta: Metadatos adicionales

    Returns:
        JsonResponse formateada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if message is not None:
        response['message'] = message

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parsea el body JSON del request.

    Raises:
        ValueError: Si el JSON es inválido o no es un objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON body: {e}")

    if not isinstance(data, dict):
        raise ValueError("Invalid JSON body: expected an object")
    return data


def status_for_error(error: Exception) -> int:
    """HTTP status según el texto del mensaje de error."""
    if isinstance(error, EntityNotFoundError):
        return 404

    message = str(error)
    if 'already exists' in message:
        return 409
    if 'required' in message or 'Invalid' in message:
        return 400
    return 500


def companies_response(companies: List[Company], message: str) -> JsonResponse:
    return json_response(
        success=True,
        data=[company.to_dict() for company in companies],
        message=message,
        meta={'total_count': len(companies)},
    )


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Provee:
    - Parsing de JSON
    - Acceso al container DI
    - Tratamiento de errores estandarizado
    """

    error_message = 'Request failed'

    # Mensaje de la respuesta según el status; por defecto error_message
    status_messages: Dict[int, str] = {}

    def get_container(self):
        """Devuelve el container de DI."""
        return get_container()

    def parse_body(self, request: HttpRequest) -> Dict:
        return parse_json_body(request)

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Traduce la excepción a una respuesta de error.

        Los errores de dominio se clasifican por el texto del mensaje;
        los inesperados se registran con traceback y devuelven 500.
        """
        if isinstance(e, DomainException) or isinstance(e, ValueError):
            status = status_for_error(e)
            if status == 500:
                logger.error(f"{self.error_message}: {e}")
            return json_response(
                success=False,
                message=self.status_messages.get(status, self.error_message),
                error=str(e),
                status=status,
            )

        logger.exception(f"Error inesperado en la API: {e}")
        return json_response(
            success=False,
            message=self.error_message,
            error='Internal server error',
            status=500,
        )

    def internal_error(self, e: Exception) -> JsonResponse:
        """Respuesta 500 para los reportes, que no clasifican errores."""
        logger.exception(f"{self.error_message}: {e}")
        return json_response(
            success=False,
            message=self.error_message,
            error=str(e),
            status=500,
        )


# =============================================================================
# Reportes
# =============================================================================

class CompaniesWithTransfersLastMonthAPIView(BaseAPIView):
    """GET /companies/transfers/last-month/"""

    error_message = 'Error retrieving companies with transfers from last month'

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            service = self.get_container().get_companies_with_transfers_last_month_service()
            companies = service.execute()
        except Exception as e:
            return self.internal_error(e)

        return companies_response(
            companies,
            f"Found {len(companies)} companies that made transfers in the last month",
        )


class CompaniesAdheredLastMonthAPIView(BaseAPIView):
    """GET /companies/adhesions/last-month/"""

    error_message = 'Error retrieving companies that adhered in the last month'

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            service = self.get_container().get_companies_adhered_last_month_service()
            companies = service.execute()
        except Exception as e:
            return self.internal_error(e)

        return companies_response(
            companies,
            f"Found {len(companies)} companies that adhered in the last month",
        )


# =============================================================================
# Adhesiones
# =============================================================================

class AdhesionRegisterAPIView(BaseAPIView):
    """
    POST /companies/adhesions/

    Body JSON:
    {
        "name": "string",
        "cuit": "XX-XXXXXXXX-X",
        "email": "string",
        "type": "PYME|CORPORATIVA",
        "employee_count": int (PYME),
        "annual_revenue": number (PYME),
        "sector": "string" (CORPORATIVA),
        "is_multinational": bool (CORPORATIVA),
        "stock_symbol": "string" (CORPORATIVA, opcional)
    }
    """

    error_message = 'Error registering company adhesion'
    status_messages = {
        400: 'Invalid company data',
        409: 'Company registration failed',
    }

    def post(self, request: HttpRequest) -> JsonResponse:
        try:
            # Los errores del form pasan por la misma clasificación por texto
            form = CompanyAdhesionForm(data=self.parse_body(request))
            if not form.is_valid():
                raise ValidationError(form.first_error())

            input_dto = RegisterCompanyAdhesionInputDTO.from_dict(form.cleaned_data)
            service = self.get_container().register_company_adhesion_service()
            adhesion = service.execute(input_dto)

            logger.info(f"API: adhesión registrada {adhesion.id}")

            return json_response(
                success=True,
                data=adhesion.to_dict(),
                message='Company adhesion registered successfully',
                status=201,
            )

        except Exception as e:
            return self.handle_exception(e)


class AdhesionStatusAPIView(BaseAPIView):
    """
    PATCH /companies/adhesions/<id>/

    Body JSON:
    {
        "status": "PENDING|APPROVED|REJECTED"
    }
    """

    error_message = 'Adhesion status update failed'

    def patch(self, request: HttpRequest, pk: str) -> JsonResponse:
        try:
            form = AdhesionStatusForm(data=self.parse_body(request))
            if not form.is_valid():
                return json_response(
                    success=False,
                    message=self.error_message,
                    error=form.errors['status'][0],
                    status=400,
                )

            service = self.get_container().update_adhesion_status_service()
            adhesion = service.execute(
                UpdateAdhesionStatusInputDTO(
                    adhesion_id=pk,
                    status=form.cleaned_data['status'],
                )
            )

            return json_response(
                success=True,
                data=adhesion.to_dict(),
                message='Adhesion status updated successfully',
            )

        except Exception as e:
            return self.handle_exception(e)
