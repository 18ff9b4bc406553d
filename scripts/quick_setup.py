#!/usr/bin/env python
"""
Setup rápido para desarrollo local.

Este script:
1. Configura Django settings
2. Crea la base SQLite
3. Ejecuta migraciones
4. Carga datos de ejemplo (opcional)

Los datos de ejemplo se fechan relativos al mes anterior, de modo que
los reportes "last-month" devuelvan resultados apenas se cargan.

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Agregar la raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    # Forzar SQLite para desarrollo rápido
    os.environ['DATABASE_URL'] = 'sqlite:///db.sqlite3'

    import django
    django.setup()


def run_migrations():
    """Ejecuta migraciones."""
    from django.core.management import call_command

    print("📦 Ejecutando migraciones...")
    call_command('migrate', verbosity=1)
    print("✅ ¡Migraciones completas!")


def _day_of_month(month_start, months_back, day):
    """Fecha `day` del mes que está `months_back` meses antes de month_start."""
    from datetime import timedelta

    first = month_start
    for _ in range(months_back):
        first = (first - timedelta(days=1)).replace(day=1)

    last_day = ((first + timedelta(days=32)).replace(day=1) - timedelta(days=1)).day
    return first.replace(day=min(day, last_day), hour=12)


def create_sample_data():
    """Carga empresas, transferencias y adhesiones de ejemplo."""
    from src.config.container import local_now
    from src.core.companies.entities import (
        Adhesion,
        AdhesionStatus,
        CompanyCorporativa,
        CompanyPyme,
        Transfer,
    )
    from src.core.companies.reporting import last_month_date_range
    from src.adapters.django_app.companies.repositories import (
        DjangoAdhesionRepository,
        DjangoCompanyRepository,
        DjangoTransferRepository,
    )

    company_repo = DjangoCompanyRepository()
    transfer_repo = DjangoTransferRepository()
    adhesion_repo = DjangoAdhesionRepository()

    last_month = last_month_date_range(local_now()).start

    def when(day, months_back=0):
        return _day_of_month(last_month, months_back, day)

    companies = [
        CompanyPyme(
            id='1', name='TechStart Solutions', cuit='20-12345678-5',
            email='contact@techstart.com', created_at=when(1, 2),
            employee_count=15, annual_revenue=2_500_000,
        ),
        CompanyPyme(
            id='2', name='Innovación Digital SRL', cuit='20-87654321-3',
            email='info@innovacion.com', created_at=when(1, 2),
            employee_count=8, annual_revenue=1_800_000,
        ),
        CompanyCorporativa(
            id='3', name='Banco Nacional SA', cuit='30-11111111-9',
            email='corporate@banconacional.com', created_at=when(1, 2),
            sector='Financiero', is_multinational=False, stock_symbol='BNA',
        ),
        CompanyCorporativa(
            id='4', name='Petróleo Argentino Corp', cuit='30-22222222-7',
            email='contact@petroarg.com', created_at=when(1, 2),
            sector='Energía', is_multinational=True, stock_symbol='PAC',
        ),
        CompanyPyme(
            id='5', name='Desarrollo Web Buenos Aires', cuit='20-33333333-1',
            email='hello@devweb.com', created_at=when(1, 2),
            employee_count=12, annual_revenue=3_200_000,
        ),
    ]

    transfers = [
        Transfer('1', '1', 150_000, 'ARS', '0001-0001-0001-12345678',
                 'Pago a proveedores', when(15)),
        Transfer('2', '3', 500_000, 'USD', '0002-0002-0002-87654321',
                 'Transferencia internacional', when(20)),
        Transfer('3', '2', 75_000, 'ARS', '0003-0003-0003-11111111',
                 'Pago de servicios', when(25)),
        Transfer('4', '4', 1_000_000, 'USD', '0004-0004-0004-22222222',
                 'Inversión en infraestructura', when(28)),
        Transfer('5', '1', 200_000, 'ARS', '0005-0005-0005-33333333',
                 'Pago de sueldos', when(30)),
        Transfer('6', '3', 300_000, 'ARS', '0006-0006-0006-44444444',
                 'Transferencia del mes anterior', when(15, 1)),
        Transfer('7', '2', 50_000, 'ARS', '0007-0007-0007-55555555',
                 'Transferencia antigua', when(10, 2)),
    ]

    adhesions = [
        Adhesion('1', companies[0], when(10), AdhesionStatus.APPROVED),
        Adhesion('2', companies[1], when(15), AdhesionStatus.APPROVED),
        Adhesion('3', companies[3], when(25), AdhesionStatus.APPROVED),
        Adhesion('4', companies[4], when(30), AdhesionStatus.PENDING),
        Adhesion('5', companies[2], when(20, 1), AdhesionStatus.APPROVED),
    ]

    print("📝 Cargando empresas de ejemplo...")
    for company in companies:
        company_repo.save(company)
        print(f"   ✓ {company.name} ({company.type.value})")

    print("📝 Cargando transferencias de ejemplo...")
    for transfer in transfers:
        transfer_repo.save(transfer)

    print("📝 Cargando adhesiones de ejemplo...")
    for adhesion in adhesions:
        adhesion_repo.save(adhesion)

    print(
        f"✅ {len(companies)} empresas, {len(transfers)} transferencias y "
        f"{len(adhesions)} adhesiones cargadas!"
    )


def check_connection():
    """Verifica la conexión con la base."""
    from django.db import connection

    print("🔍 Verificando conexión con la base...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ ¡Conexión OK!")
        return True
    except Exception as e:
        print(f"❌ Error de conexión: {e}")
        return False


def show_info():
    """Muestra información del setup."""
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Información del Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Time Zone: {settings.TIME_ZONE}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos pasos:")
    print("   1. python manage.py runserver")
    print("   2. Acceder: http://localhost:8000/companies/transfers/last-month/")
    print("   3. Acceder: http://localhost:8000/companies/adhesions/last-month/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desarrollo')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Cargar datos de ejemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Solo verificar la conexión'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Company Adhesion Manager - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Asegurate de que la base de datos esté corriendo.")
        print("   Para usar SQLite, definí: DATABASE_URL=sqlite:///db.sqlite3")
        return

    run_migrations()

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
