"""
Django Models para el dominio de Empresas.

Estos models son ADAPTERS: implementan la persistencia de las entidades
de dominio definidas en src/core/companies/entities.py.

IMPORTANTE:
- Los models NO contienen lógica de negocio
- La lógica de negocio vive en las Entities del Core
- Los models se mapean desde/hacia Entities vía Mappers

Tablas:
- companies: Tabla única para ambas variantes (discriminador `type`)
- transfers: Transferencias, con FK a companies
- adhesions: Adhesiones, con FK a companies
"""

from django.db import models
from django.utils import timezone


class CompanyTypeChoices(models.TextChoices):
    """Choices para tipo de empresa (espeja CompanyType del Core)."""
    PYME = 'PYME', 'PYME'
    CORPORATIVA = 'CORPORATIVA', 'Corporativa'


class CurrencyChoices(models.TextChoices):
    ARS = 'ARS', 'Peso argentino'
    USD = 'USD', 'Dólar estadounidense'
    EUR = 'EUR', 'Euro'


class AdhesionStatusChoices(models.TextChoices):
    """Choices para estado de adhesión (espeja AdhesionStatus del Core)."""
    PENDING = 'PENDING', 'Pendiente'
    APPROVED = 'APPROVED', 'Aprobada'
    REJECTED = 'REJECTED', 'Rechazada'


class CompanyModel(models.Model):
    """
    Model Django para persistencia de Empresas.

    Una sola tabla para PYME y CORPORATIVA; las columnas propias de
    cada variante admiten NULL y el mapper reconstruye la variante
    correcta a partir de `type`.

    CUIT y email son únicos a nivel de base de datos, lo que cierra la
    carrera entre la verificación y el alta del caso de uso de registro.
    """

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="ID único de la empresa"
    )

    name = models.CharField(
        max_length=255,
        help_text="Razón social"
    )

    cuit = models.CharField(
        max_length=13,
        unique=True,
        help_text="CUIT con formato XX-XXXXXXXX-X"
    )

    email = models.EmailField(
        max_length=255,
        unique=True,
        help_text="Email de contacto"
    )

    type = models.CharField(
        max_length=20,
        choices=CompanyTypeChoices.choices,
        db_index=True,
        help_text="Discriminador de variante"
    )

    created_at = models.DateTimeField(
        default=timezone.now,
        help_text="Fecha de alta"
    )

    # Columnas PYME
    employee_count = models.PositiveIntegerField(
        null=True,
        blank=True,
        help_text="Cantidad de empleados (solo PYME)"
    )

    annual_revenue = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        null=True,
        blank=True,
        help_text="Facturación anual en ARS (solo PYME)"
    )

    # Columnas CORPORATIVA
    sector = models.CharField(
        max_length=100,
        null=True,
        blank=True,
        help_text="Sector de actividad (solo CORPORATIVA)"
    )

    is_multinational = models.BooleanField(
        null=True,
        blank=True,
        help_text="Opera en varios países (solo CORPORATIVA)"
    )

    stock_symbol = models.CharField(
        max_length=5,
        null=True,
        blank=True,
        help_text="Símbolo bursátil (solo CORPORATIVA)"
    )

    class Meta:
        db_table = 'companies'
        verbose_name = 'Empresa'
        verbose_name_plural = 'Empresas'
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.name} ({self.cuit})"


class TransferModel(models.Model):
    """Model Django para persistencia de Transferencias."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="ID único de la transferencia"
    )

    company = models.ForeignKey(
        CompanyModel,
        on_delete=models.CASCADE,
        related_name='transfers',
        help_text="Empresa que realizó la transferencia"
    )

    amount = models.DecimalField(
        max_digits=15,
        decimal_places=2,
        help_text="Monto transferido"
    )

    currency = models.CharField(
        max_length=3,
        choices=CurrencyChoices.choices,
        help_text="Moneda"
    )

    destination_account = models.CharField(
        max_length=23,
        help_text="Cuenta destino XXXX-XXXX-XXXX-XXXXXXXX"
    )

    description = models.CharField(
        max_length=255,
        help_text="Concepto de la transferencia"
    )

    transfer_date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Fecha de la transferencia"
    )

    class Meta:
        db_table = 'transfers'
        verbose_name = 'Transferencia'
        verbose_name_plural = 'Transferencias'
        ordering = ['-transfer_date']
        indexes = [
            models.Index(fields=['company', 'transfer_date'], name='transfers_company_date_idx'),
        ]

    def __str__(self):
        return f"{self.amount} {self.currency} → {self.destination_account}"


class AdhesionModel(models.Model):
    """Model Django para persistencia de Adhesiones."""

    id = models.CharField(
        max_length=36,
        primary_key=True,
        editable=False,
        help_text="ID único de la adhesión"
    )

    company = models.ForeignKey(
        CompanyModel,
        on_delete=models.CASCADE,
        related_name='adhesions',
        help_text="Empresa adherida"
    )

    adhesion_date = models.DateTimeField(
        default=timezone.now,
        db_index=True,
        help_text="Fecha de la adhesión"
    )

    status = models.CharField(
        max_length=10,
        choices=AdhesionStatusChoices.choices,
        default=AdhesionStatusChoices.PENDING,
        db_index=True,
        help_text="Estado de la adhesión"
    )

    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Última modificación"
    )

    class Meta:
        db_table = 'adhesions'
        verbose_name = 'Adhesión'
        verbose_name_plural = 'Adhesiones'
        ordering = ['-adhesion_date']
        indexes = [
            models.Index(fields=['status', 'adhesion_date'], name='adhesions_status_date_idx'),
        ]

    def __str__(self):
        return f"{self.company_id} - {self.status}"
