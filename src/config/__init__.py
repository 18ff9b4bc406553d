"""
Configuración del proyecto Company Adhesion Manager.

Módulos:
- settings: Configuración Django
- urls: Rutas principales
- wsgi: WSGI application
- container: Dependency Injection Container
"""
