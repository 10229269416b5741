"""
SpringBoot project generator producing the four layers for every UML class.
"""

import logging
from typing import Iterable, List

from apps.uml_diagrams.schemas import Diagram

from ..schemas import GeneratedFile
from .springboot_controller_generator import SpringBootControllerGenerator
from .springboot_entity_generator import SpringBootEntityGenerator
from .springboot_repository_generator import SpringBootRepositoryGenerator
from .springboot_service_generator import SpringBootServiceGenerator
from .template_rendering_service import TemplateRenderingService

logger = logging.getLogger(__name__)

DEFAULT_PACKAGE_NAME = 'com.example.demo'


class SpringBootCodeGenerator:
    """
    Generates entity, repository, service and controller sources.

    The generator works on a private, immutable snapshot of the classes and
    relationships it was built with, so repeated calls to ``generate_all``
    return identical output.
    """

    def __init__(self, classes: Iterable, relationships: Iterable,
                 package_name: str = DEFAULT_PACKAGE_NAME):
        self.diagram = Diagram(classes=tuple(classes), relationships=tuple(relationships))
        self.package_name = package_name or DEFAULT_PACKAGE_NAME

        template_renderer = TemplateRenderingService()
        self.entity_generator = SpringBootEntityGenerator(template_renderer)
        self.repository_generator = SpringBootRepositoryGenerator(template_renderer)
        self.service_generator = SpringBootServiceGenerator(template_renderer)
        self.controller_generator = SpringBootControllerGenerator(template_renderer)

    def generate_all(self) -> List[GeneratedFile]:
        """
        Generate every artifact, class by class in input order.

        Interfaces are skipped entirely.
        """
        generated_files = []

        for uml_class in self.diagram.concrete_classes():
            generated_files.extend([
                self.entity_generator.generate_entity(uml_class, self.diagram, self.package_name),
                self.repository_generator.generate_repository(uml_class, self.package_name),
                self.service_generator.generate_service(uml_class, self.package_name),
                self.controller_generator.generate_controller(uml_class, self.package_name),
            ])

        logger.debug(
            "Generated %d SpringBoot files for package %s", len(generated_files), self.package_name
        )
        return generated_files
