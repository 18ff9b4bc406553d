"""
URL Configuration para Company Adhesion Manager.

Estructura:
- /admin/ - Django Admin
- /companies/ - API JSON de Empresas
- /health/ - Health check
"""

from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    # Django Admin
    path('admin/', admin.site.urls),

    # Companies App
    path('companies/', include('src.adapters.django_app.companies.urls')),

    # Health check
    path('health/', lambda r: __import__('django.http', fromlist=['JsonResponse']).JsonResponse({'status': 'ok'})),
]
