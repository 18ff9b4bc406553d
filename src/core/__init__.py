"""
Core Domain Layer - El Hexágono.

Este paquete contiene la lógica de negocio pura, sin dependencias de frameworks.
Características:
- Cero dependencias externas (Django, dependency-injector, etc.)
- 100% testeable sin base de datos
- Agnóstico a la infraestructura
"""
