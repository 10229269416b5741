from django.apps import AppConfig


class CodeGenerationConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'apps.code_generation'
    verbose_name = 'Code Generation'
