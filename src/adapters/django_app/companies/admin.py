"""
Django Admin para el dominio de Empresas.

Permite consultar empresas, transferencias y adhesiones desde la
interfaz web. Los cambios de estado de adhesión se hacen vía API.
"""

from django.contrib import admin
from django.utils.html import format_html

from .models import AdhesionModel, CompanyModel, TransferModel


@admin.register(CompanyModel)
class CompanyAdmin(admin.ModelAdmin):
    """Admin para CompanyModel."""

    list_display = ['name', 'cuit', 'email', 'type', 'created_at']
    list_filter = ['type', 'is_multinational', 'created_at']
    search_fields = ['id', 'name', 'cuit', 'email']
    readonly_fields = ['id', 'created_at']

    fieldsets = [
        ('Identificación', {
            'fields': ['id', 'name', 'cuit', 'email', 'type'],
        }),
        ('PYME', {
            'fields': ['employee_count', 'annual_revenue'],
        }),
        ('Corporativa', {
            'fields': ['sector', 'is_multinational', 'stock_symbol'],
        }),
        ('Timestamps', {
            'fields': ['created_at'],
            'classes': ['collapse'],
        }),
    ]


@admin.register(TransferModel)
class TransferAdmin(admin.ModelAdmin):
    """Admin para TransferModel."""

    list_display = ['id', 'company', 'amount', 'currency', 'destination_account', 'transfer_date']
    list_filter = ['currency', 'transfer_date']
    search_fields = ['id', 'company__name', 'company__cuit', 'destination_account']
    list_select_related = ['company']
    date_hierarchy = 'transfer_date'


@admin.register(AdhesionModel)
class AdhesionAdmin(admin.ModelAdmin):
    """Admin para AdhesionModel."""

    list_display = ['id', 'company', 'adhesion_date', 'status_badge', 'updated_at']
    list_filter = ['status', 'adhesion_date']
    search_fields = ['id', 'company__name', 'company__cuit']
    list_select_related = ['company']
    readonly_fields = ['updated_at']
    date_hierarchy = 'adhesion_date'

    def status_badge(self, obj):
        """Muestra el estado con un badge de color."""
        colors = {
            'PENDING': '#ffc107',
            'APPROVED': '#28a745',
            'REJECTED': '#dc3545',
        }
        color = colors.get(obj.status, '#6c757d')
        return format_html(
            '<span style="background-color: {}; color: white; padding: 3px 8px; '
            'border-radius: 3px; font-size: 11px;">{}</span>',
            color,
            obj.get_status_display()
        )
    status_badge.short_description = 'Estado'
