"""
Django Forms para validación de entrada de la API de Empresas.

Los forms son DRIVING ADAPTERS que validan la forma del pedido
antes de pasarlo a los Use Cases.

Responsabilidades:
- Presencia de campos (name, cuit, email, type)
- Campos condicionales según el tipo de empresa
- Conversión de tipos (int, float, bool)

Los formatos (CUIT, email) y los topes de negocio los valida la Entity.
"""

from django import forms

from .models import AdhesionStatusChoices, CompanyTypeChoices


TYPE_MESSAGE = 'Company type must be PYME or CORPORATIVA'
EMPLOYEE_COUNT_MESSAGE = 'Employee count is required and must be positive for PYME companies'
ANNUAL_REVENUE_MESSAGE = 'Annual revenue is required and must be positive for PYME companies'


class CompanyAdhesionForm(forms.Form):
    """
    Form para el registro de adhesión (POST /companies/adhesions/).

    Example:
        form = CompanyAdhesionForm(data={"name": "ACME", ...})
        if not form.is_valid():
            error = form.first_error()
    """

    name = forms.CharField(
        error_messages={'required': 'Company name is required'},
    )

    cuit = forms.CharField(
        error_messages={'required': 'CUIT is required'},
    )

    email = forms.CharField(
        error_messages={'required': 'Email is required'},
    )

    type = forms.ChoiceField(
        choices=CompanyTypeChoices.choices,
        error_messages={
            'required': TYPE_MESSAGE,
            'invalid_choice': TYPE_MESSAGE,
        },
    )

    employee_count = forms.IntegerField(
        required=False,
        error_messages={'invalid': EMPLOYEE_COUNT_MESSAGE},
    )

    annual_revenue = forms.FloatField(
        required=False,
        error_messages={'invalid': ANNUAL_REVENUE_MESSAGE},
    )

    sector = forms.CharField(required=False)

    # NullBooleanField distingue "false" de "no informado"
    is_multinational = forms.NullBooleanField(required=False)

    stock_symbol = forms.CharField(required=False)

    def clean(self):
        cleaned_data = super().clean()
        company_type = cleaned_data.get('type')

        if company_type == CompanyTypeChoices.PYME:
            employee_count = cleaned_data.get('employee_count')
            annual_revenue = cleaned_data.get('annual_revenue')

            if employee_count is None and 'employee_count' not in self.errors:
                self.add_error('employee_count', EMPLOYEE_COUNT_MESSAGE)
            elif employee_count is not None and employee_count <= 0:
                self.add_error('employee_count', EMPLOYEE_COUNT_MESSAGE)

            if annual_revenue is None and 'annual_revenue' not in self.errors:
                self.add_error('annual_revenue', ANNUAL_REVENUE_MESSAGE)
            elif annual_revenue is not None and annual_revenue <= 0:
                self.add_error('annual_revenue', ANNUAL_REVENUE_MESSAGE)

        elif company_type == CompanyTypeChoices.CORPORATIVA:
            if not cleaned_data.get('sector'):
                self.add_error('sector', 'Sector is required for Corporate companies')

            if cleaned_data.get('is_multinational') is None:
                self.add_error(
                    'is_multinational',
                    'Multinational status is required for Corporate companies',
                )

        return cleaned_data

    def first_error(self) -> str:
        """Primer mensaje de error, en el orden de declaración de los campos."""
        for name in self.fields:
            if name in self.errors:
                return self.errors[name][0]
        return self.non_field_errors()[0]


class AdhesionStatusForm(forms.Form):
    """Form para el cambio de estado (PATCH /companies/adhesions/<id>/)."""

    status = forms.ChoiceField(
        choices=AdhesionStatusChoices.choices,
        error_messages={
            'required': 'Status is required',
            'invalid_choice': 'Invalid adhesion status',
        },
    )
