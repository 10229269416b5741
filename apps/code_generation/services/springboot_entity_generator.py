"""
SpringBoot JPA Entity Generator for converting UML classes to Java entity classes.
"""

import logging
from typing import Dict, List

from apps.uml_diagrams.schemas import ClassDefinition, Diagram, RelationshipType, is_many

from ..schemas import CodeLayer, GeneratedFile
from .naming import to_camel_case, to_snake_case
from .template_rendering_service import TemplateRenderingService
from .type_mapping import map_uml_type_to_java

logger = logging.getLogger(__name__)

ID_TYPE = 'Long'

OWNERSHIP_TYPES = (RelationshipType.COMPOSITION, RelationshipType.AGGREGATION)


class SpringBootEntityGenerator:
    """
    Generator for SpringBoot JPA Entity classes from UML class definitions.

    Inheritance, dependency and realization relationships never become fields.
    """

    def __init__(self, template_renderer: TemplateRenderingService = None):
        self.template_renderer = template_renderer or TemplateRenderingService()

    def generate_entity(self, uml_class: ClassDefinition, diagram: Diagram,
                        package_name: str) -> GeneratedFile:
        """Generate the JPA entity for a single UML class."""
        context = self._build_entity_context(uml_class, diagram, package_name)
        content = self.template_renderer.render_entity_template(context)
        package_path = package_name.replace('.', '/')

        return GeneratedFile(
            file_name=f"{uml_class.name}.java",
            content=content,
            layer=CodeLayer.ENTITY,
            relative_path=f"src/main/java/{package_path}/entity/{uml_class.name}.java",
        )

    def _build_entity_context(self, uml_class: ClassDefinition, diagram: Diagram,
                              package_name: str) -> Dict:
        """Build template context for entity generation."""
        relationship_fields = self._process_relationships(uml_class, diagram)
        has_collections = any(field['is_collection'] for field in relationship_fields)

        return {
            'package_name': package_name,
            'class_name': uml_class.name,
            'id_type': ID_TYPE,
            'imports': self._generate_imports(has_collections),
            'class_annotations': self._generate_class_annotations(uml_class),
            'fields': self._process_attributes(uml_class) + relationship_fields,
        }

    def _generate_imports(self, has_collections: bool) -> List[str]:
        """Generate required imports for entity class."""
        imports = [
            'jakarta.persistence.*',
            'lombok.Data',
            'lombok.NoArgsConstructor',
            'lombok.AllArgsConstructor',
        ]

        if has_collections:
            imports.extend(['java.util.List', 'java.util.ArrayList'])

        return imports

    def _generate_class_annotations(self, uml_class: ClassDefinition) -> List[str]:
        """Generate JPA and Lombok class-level annotations."""
        return [
            '@Entity',
            f'@Table(name = "{to_snake_case(uml_class.name)}")',
            '@Data',
            '@NoArgsConstructor',
            '@AllArgsConstructor',
        ]

    def _process_attributes(self, uml_class: ClassDefinition) -> List[Dict]:
        """Map declared attributes to columns, skipping the user-declared id."""
        fields = []

        for attr in uml_class.attributes:
            if attr.is_identifier:
                continue

            fields.append({
                'annotations': [f'@Column(name = "{to_snake_case(attr.name)}")'],
                'declaration': f'{map_uml_type_to_java(attr.type)} {attr.name}',
                'is_collection': False,
            })

        return fields

    def _process_relationships(self, uml_class: ClassDefinition, diagram: Diagram) -> List[Dict]:
        """Process relationships in which the class takes part at either end."""
        fields = []

        for rel in diagram.relationships_of(uml_class.id):
            if rel.relationship_type not in OWNERSHIP_TYPES + (RelationshipType.ASSOCIATION,):
                continue

            related_class = diagram.find_class(rel.other_class_id(uml_class.id))
            if related_class is None:
                logger.debug("Skipping relationship %s: unresolved endpoint", rel.id)
                continue

            if rel.relationship_type in OWNERSHIP_TYPES:
                # Ownership is read from the target end for both participants.
                if is_many(rel.target_multiplicity):
                    fields.append(self._one_to_many_field(uml_class, related_class))
                else:
                    fields.append(self._one_to_one_field(related_class))
            elif is_many(rel.far_side_multiplicity(uml_class.id)):
                fields.append(self._many_to_many_field(uml_class, related_class))
            else:
                fields.append(self._many_to_one_field(related_class))

        return fields

    def _one_to_many_field(self, uml_class: ClassDefinition, related_class: ClassDefinition) -> Dict:
        related_name = related_class.name
        return {
            'annotations': [
                f'@OneToMany(mappedBy = "{to_camel_case(uml_class.name)}", '
                f'cascade = CascadeType.ALL, fetch = FetchType.LAZY)'
            ],
            'declaration': f'List<{related_name}> {to_camel_case(related_name)}List = new ArrayList<>()',
            'is_collection': True,
        }

    def _one_to_one_field(self, related_class: ClassDefinition) -> Dict:
        related_name = related_class.name
        return {
            'annotations': [
                '@OneToOne(cascade = CascadeType.ALL)',
                f'@JoinColumn(name = "{to_snake_case(related_name)}_id")',
            ],
            'declaration': f'{related_name} {to_camel_case(related_name)}',
            'is_collection': False,
        }

    def _many_to_many_field(self, uml_class: ClassDefinition, related_class: ClassDefinition) -> Dict:
        owner_table = to_snake_case(uml_class.name)
        related_table = to_snake_case(related_class.name)
        join_table = (
            '@JoinTable(\n'
            f'        name = "{owner_table}_{related_table}",\n'
            f'        joinColumns = @JoinColumn(name = "{owner_table}_id"),\n'
            f'        inverseJoinColumns = @JoinColumn(name = "{related_table}_id")\n'
            '    )'
        )
        return {
            'annotations': ['@ManyToMany', join_table],
            'declaration': (
                f'List<{related_class.name}> {to_camel_case(related_class.name)}List = new ArrayList<>()'
            ),
            'is_collection': True,
        }

    def _many_to_one_field(self, related_class: ClassDefinition) -> Dict:
        related_name = related_class.name
        return {
            'annotations': [
                '@ManyToOne',
                f'@JoinColumn(name = "{to_snake_case(related_name)}_id")',
            ],
            'declaration': f'{related_name} {to_camel_case(related_name)}',
            'is_collection': False,
        }
