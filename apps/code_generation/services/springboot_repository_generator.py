"""
SpringBoot Repository Generator for creating JPA repository interfaces.
"""

from typing import Dict

from apps.uml_diagrams.schemas import ClassDefinition

from ..schemas import CodeLayer, GeneratedFile
from .springboot_entity_generator import ID_TYPE
from .template_rendering_service import TemplateRenderingService


class SpringBootRepositoryGenerator:
    """
    Generator for Spring Data JPA repository interfaces.

    Repositories carry no custom query methods; they only bind the entity to
    its surrogate id type.
    """

    def __init__(self, template_renderer: TemplateRenderingService = None):
        self.template_renderer = template_renderer or TemplateRenderingService()

    def generate_repository(self, uml_class: ClassDefinition, package_name: str) -> GeneratedFile:
        context = self._build_repository_context(uml_class, package_name)
        content = self.template_renderer.render_repository_template(context)
        repository_name = context['repository_name']
        package_path = package_name.replace('.', '/')

        return GeneratedFile(
            file_name=f"{repository_name}.java",
            content=content,
            layer=CodeLayer.REPOSITORY,
            relative_path=f"src/main/java/{package_path}/repository/{repository_name}.java",
        )

    def _build_repository_context(self, uml_class: ClassDefinition, package_name: str) -> Dict:
        return {
            'package_name': package_name,
            'entity_name': uml_class.name,
            'repository_name': f"{uml_class.name}Repository",
            'id_type': ID_TYPE,
        }
