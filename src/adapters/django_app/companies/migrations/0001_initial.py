"""
Migración inicial del dominio de Empresas.

Crea las tablas:
- companies: Empresas (PYME y CORPORATIVA en una sola tabla)
- transfers: Transferencias
- adhesions: Adhesiones
"""

from django.db import migrations, models
import django.db.models.deletion
import django.utils.timezone


class Migration(migrations.Migration):
    """Migración inicial."""

    initial = True

    dependencies = [
    ]

    operations = [
        # =================================================================
        # Tabla: companies
        # =================================================================
        migrations.CreateModel(
            name='CompanyModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='ID único de la empresa'
                )),
                ('name', models.CharField(
                    max_length=255,
                    help_text='Razón social'
                )),
                ('cuit', models.CharField(
                    max_length=13,
                    unique=True,
                    help_text='CUIT con formato XX-XXXXXXXX-X'
                )),
                ('email', models.EmailField(
                    max_length=255,
                    unique=True,
                    help_text='Email de contacto'
                )),
                ('type', models.CharField(
                    max_length=20,
                    choices=[('PYME', 'PYME'), ('CORPORATIVA', 'Corporativa')],
                    db_index=True,
                    help_text='Discriminador de variante'
                )),
                ('created_at', models.DateTimeField(
                    default=django.utils.timezone.now,
                    help_text='Fecha de alta'
                )),
                ('employee_count', models.PositiveIntegerField(
                    null=True,
                    blank=True,
                    help_text='Cantidad de empleados (solo PYME)'
                )),
                ('annual_revenue', models.DecimalField(
                    max_digits=15,
                    decimal_places=2,
                    null=True,
                    blank=True,
                    help_text='Facturación anual en ARS (solo PYME)'
                )),
                ('sector', models.CharField(
                    max_length=100,
                    null=True,
                    blank=True,
                    help_text='Sector de actividad (solo CORPORATIVA)'
                )),
                ('is_multinational', models.BooleanField(
                    null=True,
                    blank=True,
                    help_text='Opera en varios países (solo CORPORATIVA)'
                )),
                ('stock_symbol', models.CharField(
                    max_length=5,
                    null=True,
                    blank=True,
                    help_text='Símbolo bursátil (solo CORPORATIVA)'
                )),
            ],
            options={
                'verbose_name': 'Empresa',
                'verbose_name_plural': 'Empresas',
                'db_table': 'companies',
                'ordering': ['-created_at'],
            },
        ),

        # =================================================================
        # Tabla: transfers
        # =================================================================
        migrations.CreateModel(
            name='TransferModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='ID único de la transferencia'
                )),
                ('amount', models.DecimalField(
                    max_digits=15,
                    decimal_places=2,
                    help_text='Monto transferido'
                )),
                ('currency', models.CharField(
                    max_length=3,
                    choices=[
                        ('ARS', 'Peso argentino'),
                        ('USD', 'Dólar estadounidense'),
                        ('EUR', 'Euro'),
                    ],
                    help_text='Moneda'
                )),
                ('destination_account', models.CharField(
                    max_length=23,
                    help_text='Cuenta destino XXXX-XXXX-XXXX-XXXXXXXX'
                )),
                ('description', models.CharField(
                    max_length=255,
                    help_text='Concepto de la transferencia'
                )),
                ('transfer_date', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Fecha de la transferencia'
                )),
                ('company', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='transfers',
                    to='companies.companymodel',
                    help_text='Empresa que realizó la transferencia'
                )),
            ],
            options={
                'verbose_name': 'Transferencia',
                'verbose_name_plural': 'Transferencias',
                'db_table': 'transfers',
                'ordering': ['-transfer_date'],
                'indexes': [
                    models.Index(
                        fields=['company', 'transfer_date'],
                        name='transfers_company_date_idx'
                    ),
                ],
            },
        ),

        # =================================================================
        # Tabla: adhesions
        # =================================================================
        migrations.CreateModel(
            name='AdhesionModel',
            fields=[
                ('id', models.CharField(
                    max_length=36,
                    primary_key=True,
                    serialize=False,
                    editable=False,
                    help_text='ID único de la adhesión'
                )),
                ('adhesion_date', models.DateTimeField(
                    default=django.utils.timezone.now,
                    db_index=True,
                    help_text='Fecha de la adhesión'
                )),
                ('status', models.CharField(
                    max_length=10,
                    choices=[
                        ('PENDING', 'Pendiente'),
                        ('APPROVED', 'Aprobada'),
                        ('REJECTED', 'Rechazada'),
                    ],
                    default='PENDING',
                    db_index=True,
                    help_text='Estado de la adhesión'
                )),
                ('updated_at', models.DateTimeField(
                    auto_now=True,
                    help_text='Última modificación'
                )),
                ('company', models.ForeignKey(
                    on_delete=django.db.models.deletion.CASCADE,
                    related_name='adhesions',
                    to='companies.companymodel',
                    help_text='Empresa adherida'
                )),
            ],
            options={
                'verbose_name': 'Adhesión',
                'verbose_name_plural': 'Adhesiones',
                'db_table': 'adhesions',
                'ordering': ['-adhesion_date'],
                'indexes': [
                    models.Index(
                        fields=['status', 'adhesion_date'],
                        name='adhesions_status_date_idx'
                    ),
                ],
            },
        ),
    ]
