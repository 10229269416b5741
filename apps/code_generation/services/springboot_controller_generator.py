"""
SpringBoot Controller Generator for creating REST controllers from UML entities.
"""

from typing import Dict, List

from apps.uml_diagrams.schemas import ClassDefinition

from ..schemas import CodeLayer, GeneratedFile
from .naming import to_camel_case
from .springboot_entity_generator import ID_TYPE
from .springboot_service_generator import NOT_FOUND_EXCEPTION
from .template_rendering_service import TemplateRenderingService


def resource_path(class_name: str) -> str:
    """Naive plural resource path: ``Order`` -> ``/api/orders``."""
    return f"/api/{to_camel_case(class_name)}s"


class SpringBootControllerGenerator:
    """
    Generator for SpringBoot REST controllers exposing CRUD endpoints.
    """

    def __init__(self, template_renderer: TemplateRenderingService = None):
        self.template_renderer = template_renderer or TemplateRenderingService()

    def generate_controller(self, uml_class: ClassDefinition, package_name: str) -> GeneratedFile:
        context = self._build_controller_context(uml_class, package_name)
        content = self.template_renderer.render_controller_template(context)
        controller_name = context['controller_name']
        package_path = package_name.replace('.', '/')

        return GeneratedFile(
            file_name=f"{controller_name}.java",
            content=content,
            layer=CodeLayer.CONTROLLER,
            relative_path=f"src/main/java/{package_path}/controller/{controller_name}.java",
        )

    def _build_controller_context(self, uml_class: ClassDefinition, package_name: str) -> Dict:
        """Build template context for controller generation."""
        entity_name = uml_class.name
        service_name = f"{entity_name}Service"

        return {
            'package_name': package_name,
            'controller_name': f"{entity_name}Controller",
            'service_name': service_name,
            'imports': self._generate_imports(entity_name, service_name, package_name),
            'class_annotations': [
                '@RestController',
                f'@RequestMapping("{resource_path(entity_name)}")',
                '@CrossOrigin(origins = "*")',
            ],
            'crud_endpoints': self._generate_crud_endpoints(entity_name, service_name),
        }

    def _generate_imports(self, entity_name: str, service_name: str, package_name: str) -> List[str]:
        return [
            'org.springframework.beans.factory.annotation.Autowired',
            'org.springframework.http.ResponseEntity',
            'org.springframework.web.bind.annotation.*',
            f'jakarta.persistence.{NOT_FOUND_EXCEPTION}',
            f'{package_name}.entity.{entity_name}',
            f'{package_name}.service.{service_name}',
            'java.util.List',
            'java.util.Optional',
        ]

    def _generate_crud_endpoints(self, entity_name: str, service_name: str) -> List[Dict]:
        """GET list, GET by id, POST, PUT by id and DELETE by id."""
        service = to_camel_case(service_name)
        entity_var = to_camel_case(entity_name)

        return [
            {
                'annotation': '@GetMapping',
                'name': f'getAll{entity_name}s',
                'return_type': f'ResponseEntity<List<{entity_name}>>',
                'parameters': [],
                'body': [
                    f'List<{entity_name}> {entity_var}s = {service}.findAll();',
                    f'return ResponseEntity.ok({entity_var}s);',
                ],
            },
            {
                'annotation': '@GetMapping("/{id}")',
                'name': f'get{entity_name}ById',
                'return_type': f'ResponseEntity<{entity_name}>',
                'parameters': [f'@PathVariable {ID_TYPE} id'],
                'body': [
                    f'Optional<{entity_name}> {entity_var} = {service}.findById(id);',
                    f'return {entity_var}.map(ResponseEntity::ok)',
                    '        .orElse(ResponseEntity.notFound().build());',
                ],
            },
            {
                'annotation': '@PostMapping',
                'name': f'create{entity_name}',
                'return_type': f'ResponseEntity<{entity_name}>',
                'parameters': [f'@RequestBody {entity_name} {entity_var}'],
                'body': [
                    f'{entity_name} saved{entity_name} = {service}.save({entity_var});',
                    f'return ResponseEntity.ok(saved{entity_name});',
                ],
            },
            {
                'annotation': '@PutMapping("/{id}")',
                'name': f'update{entity_name}',
                'return_type': f'ResponseEntity<{entity_name}>',
                'parameters': [f'@PathVariable {ID_TYPE} id', f'@RequestBody {entity_name} {entity_var}'],
                'body': [
                    'try {',
                    f'    {entity_name} updated{entity_name} = {service}.update(id, {entity_var});',
                    f'    return ResponseEntity.ok(updated{entity_name});',
                    f'}} catch ({NOT_FOUND_EXCEPTION} e) {{',
                    '    return ResponseEntity.notFound().build();',
                    '}',
                ],
            },
            {
                'annotation': '@DeleteMapping("/{id}")',
                'name': f'delete{entity_name}',
                'return_type': 'ResponseEntity<Void>',
                'parameters': [f'@PathVariable {ID_TYPE} id'],
                'body': [
                    f'{service}.deleteById(id);',
                    'return ResponseEntity.noContent().build();',
                ],
            },
        ]
