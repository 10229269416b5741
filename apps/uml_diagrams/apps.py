"""
UML Diagrams app configuration.
"""

from django.apps import AppConfig


class UmlDiagramsConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.uml_diagrams'
    verbose_name = 'UML Diagrams'
