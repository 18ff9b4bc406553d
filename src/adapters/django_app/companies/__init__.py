"""
Django App de Empresas.

Adapters de persistencia (ORM) y de entrada (API JSON) para el
dominio definido en src/core/companies.
"""
