"""
Main orchestration service for SpringBoot and SQL generation from UML diagrams.
"""

import logging
from typing import Dict, List

from apps.uml_diagrams.schemas import Diagram

from ..schemas import GeneratedFile
from .naming import find_snake_case_collisions
from .project_packaging_service import ProjectPackagingService
from .springboot_code_generator import SpringBootCodeGenerator
from .sql_schema_generator import SQLSchemaGenerator

logger = logging.getLogger(__name__)


class CodeGeneratorService:
    """
    Coordinates the generators for the API layer.

    Each call builds fresh generators over the given diagram; no state is
    kept between requests.
    """

    def __init__(self):
        self.project_packager = ProjectPackagingService()

    def generate_springboot_files(self, diagram: Diagram, package_name: str) -> List[GeneratedFile]:
        generator = SpringBootCodeGenerator(diagram.classes, diagram.relationships, package_name)
        generated_files = generator.generate_all()

        logger.info("SpringBoot generation completed", extra={
            'package_name': package_name,
            'classes_count': len(diagram.classes),
            'files_generated': len(generated_files),
        })
        return generated_files

    def generate_sql_schema(self, diagram: Diagram) -> str:
        sql = SQLSchemaGenerator(diagram.classes, diagram.relationships).generate_create_tables()

        logger.info("SQL schema generation completed", extra={
            'classes_count': len(diagram.classes),
            'relationships_count': len(diagram.relationships),
        })
        return sql

    def generate_project_archive(self, diagram: Diagram, package_name: str) -> bytes:
        """SpringBoot sources plus ``schema.sql`` as a ZIP archive."""
        generated_files = self.generate_springboot_files(diagram, package_name)
        schema_sql = self.generate_sql_schema(diagram)
        return self.project_packager.create_project_archive(generated_files, schema_sql)

    def get_generation_statistics(self, generated_files: List[GeneratedFile]) -> Dict:
        return self.project_packager.get_project_statistics(generated_files)

    def collect_warnings(self, diagram: Diagram) -> List[str]:
        """
        Human-readable warnings for naming collisions and dangling edges.

        Warnings never change the generated output.
        """
        warnings = []
        concrete_names = [uml_class.name for uml_class in diagram.concrete_classes()]

        for table_name, class_names in find_snake_case_collisions(concrete_names).items():
            warnings.append(
                f"Classes {', '.join(class_names)} share the table name '{table_name}'"
            )

        for uml_class in diagram.concrete_classes():
            attribute_names = [attr.name for attr in uml_class.attributes if not attr.is_identifier]
            for column_name, names in find_snake_case_collisions(attribute_names).items():
                warnings.append(
                    f"Attributes {', '.join(names)} of {uml_class.name} share the column name '{column_name}'"
                )

        for rel in diagram.relationships:
            missing = [
                class_id for class_id in (rel.source_class_id, rel.target_class_id)
                if diagram.find_class(class_id) is None
            ]
            if missing:
                warnings.append(
                    f"Relationship {rel.id} references unknown class {', '.join(missing)} and was skipped"
                )

        for warning in warnings:
            logger.warning(warning)

        return warnings
