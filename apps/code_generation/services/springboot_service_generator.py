"""
SpringBoot Service Generator for creating service classes from UML entities.
"""

from typing import Dict, List

from apps.uml_diagrams.schemas import ClassDefinition

from ..schemas import CodeLayer, GeneratedFile
from .naming import to_camel_case
from .springboot_entity_generator import ID_TYPE
from .template_rendering_service import TemplateRenderingService

NOT_FOUND_EXCEPTION = 'EntityNotFoundException'


class SpringBootServiceGenerator:
    """
    Generator for SpringBoot Service classes wrapping a repository with CRUD.
    """

    def __init__(self, template_renderer: TemplateRenderingService = None):
        self.template_renderer = template_renderer or TemplateRenderingService()

    def generate_service(self, uml_class: ClassDefinition, package_name: str) -> GeneratedFile:
        context = self._build_service_context(uml_class, package_name)
        content = self.template_renderer.render_service_template(context)
        service_name = context['service_name']
        package_path = package_name.replace('.', '/')

        return GeneratedFile(
            file_name=f"{service_name}.java",
            content=content,
            layer=CodeLayer.SERVICE,
            relative_path=f"src/main/java/{package_path}/service/{service_name}.java",
        )

    def _build_service_context(self, uml_class: ClassDefinition, package_name: str) -> Dict:
        """Build template context for service generation."""
        entity_name = uml_class.name
        repository_name = f"{entity_name}Repository"

        return {
            'package_name': package_name,
            'service_name': f"{entity_name}Service",
            'repository_name': repository_name,
            'imports': self._generate_imports(entity_name, repository_name, package_name),
            'crud_methods': self._generate_crud_methods(entity_name, repository_name),
        }

    def _generate_imports(self, entity_name: str, repository_name: str, package_name: str) -> List[str]:
        return [
            'org.springframework.beans.factory.annotation.Autowired',
            'org.springframework.stereotype.Service',
            f'jakarta.persistence.{NOT_FOUND_EXCEPTION}',
            f'{package_name}.entity.{entity_name}',
            f'{package_name}.repository.{repository_name}',
            'java.util.List',
            'java.util.Optional',
        ]

    def _generate_crud_methods(self, entity_name: str, repository_name: str) -> List[Dict]:
        """
        Generate findAll, findById, save, deleteById and update.

        ``update`` refuses unknown ids with EntityNotFoundException and
        otherwise forces the path id onto the entity before saving it.
        """
        repository = to_camel_case(repository_name)
        entity_var = to_camel_case(entity_name)

        return [
            {
                'name': 'findAll',
                'return_type': f'List<{entity_name}>',
                'parameters': [],
                'body': [f'return {repository}.findAll();'],
            },
            {
                'name': 'findById',
                'return_type': f'Optional<{entity_name}>',
                'parameters': [f'{ID_TYPE} id'],
                'body': [f'return {repository}.findById(id);'],
            },
            {
                'name': 'save',
                'return_type': entity_name,
                'parameters': [f'{entity_name} {entity_var}'],
                'body': [f'return {repository}.save({entity_var});'],
            },
            {
                'name': 'deleteById',
                'return_type': 'void',
                'parameters': [f'{ID_TYPE} id'],
                'body': [f'{repository}.deleteById(id);'],
            },
            {
                'name': 'update',
                'return_type': entity_name,
                'parameters': [f'{ID_TYPE} id', f'{entity_name} {entity_var}'],
                'body': [
                    f'if (!{repository}.existsById(id)) {{',
                    f'    throw new {NOT_FOUND_EXCEPTION}("{entity_name} not found with id: " + id);',
                    '}',
                    f'{entity_var}.setId(id);',
                    f'return {repository}.save({entity_var});',
                ],
            },
        ]
