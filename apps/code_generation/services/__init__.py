from .code_generator_service import CodeGeneratorService
from .springboot_code_generator import SpringBootCodeGenerator
from .springboot_entity_generator import SpringBootEntityGenerator
from .springboot_repository_generator import SpringBootRepositoryGenerator
from .springboot_service_generator import SpringBootServiceGenerator
from .springboot_controller_generator import SpringBootControllerGenerator
from .sql_schema_generator import SQLSchemaGenerator
from .template_rendering_service import TemplateRenderingService
from .project_packaging_service import ProjectPackagingService

__all__ = [
    'CodeGeneratorService',
    'SpringBootCodeGenerator',
    'SpringBootEntityGenerator',
    'SpringBootRepositoryGenerator',
    'SpringBootServiceGenerator',
    'SpringBootControllerGenerator',
    'SQLSchemaGenerator',
    'TemplateRenderingService',
    'ProjectPackagingService',
]
