"""
SQL Schema Generator for converting UML class diagrams to relational DDL.
"""

import logging
from typing import Dict, Iterable, List

from apps.uml_diagrams.schemas import (
    ClassDefinition,
    Diagram,
    RelationshipDefinition,
    RelationshipType,
    Visibility,
    is_many,
)

from .naming import find_snake_case_collisions, to_snake_case
from .type_mapping import map_uml_type_to_sql

logger = logging.getLogger(__name__)

HEADER = '-- Generated SQL DDL from UML Class Diagram\n\n'
TABLES_HEADER = '-- Tables\n\n'
JOIN_TABLES_HEADER = '-- Many-to-many relationship tables\n\n'
CONSTRAINTS_HEADER = '-- Foreign key constraints\n\n'

NO_INLINE_COLUMN_TYPES = (RelationshipType.INHERITANCE, RelationshipType.ASSOCIATION)


def creates_join_table(rel: RelationshipDefinition) -> bool:
    """Associations with a literal ``*`` at either end get a join table."""
    return (rel.relationship_type == RelationshipType.ASSOCIATION and
            (rel.source_multiplicity == '*' or rel.target_multiplicity == '*'))


class SQLSchemaGenerator:
    """
    Generates CREATE TABLE statements, join tables and named foreign-key
    constraints for every concrete class of a diagram.

    Output is organised in three phases:

    1. one table per non-interface class, with a surrogate ``id`` key, one
       column per attribute and inline ``<target>_id`` columns;
    2. join tables for many-to-many associations;
    3. ``ALTER TABLE`` constraints for ownership and dependency edges.
    """

    def __init__(self, classes: Iterable, relationships: Iterable):
        self.diagram = Diagram(classes=tuple(classes), relationships=tuple(relationships))

    def generate_create_tables(self) -> str:
        for table_name, class_names in self.collisions().items():
            logger.debug(
                "Classes %s all map to table '%s'; generated DDL will contain duplicates",
                ', '.join(class_names), table_name
            )

        sql = HEADER
        sql += TABLES_HEADER
        for uml_class in self.diagram.concrete_classes():
            sql += self._generate_create_table(uml_class)
            sql += '\n'

        sql += self._generate_relationship_tables()
        sql += self._generate_foreign_key_constraints()

        return sql

    def collisions(self) -> Dict[str, List[str]]:
        """Table names produced by more than one concrete class."""
        return find_snake_case_collisions(
            uml_class.name for uml_class in self.diagram.concrete_classes()
        )

    def _generate_create_table(self, uml_class: ClassDefinition) -> str:
        table_name = to_snake_case(uml_class.name)
        columns = ['id BIGINT PRIMARY KEY AUTO_INCREMENT']

        for attr in uml_class.attributes:
            if attr.is_identifier:
                continue
            nullable = 'NOT NULL' if attr.visibility == Visibility.PRIVATE else 'NULL'
            columns.append(f'{to_snake_case(attr.name)} {map_uml_type_to_sql(attr.type)} {nullable}')

        columns.extend(self._foreign_key_columns(uml_class))

        body = ',\n'.join(f'    {column}' for column in columns)
        return f'CREATE TABLE {table_name} (\n{body}\n);\n'

    def _foreign_key_columns(self, uml_class: ClassDefinition) -> List[str]:
        """
        Inline ``<other>_id BIGINT`` columns, in relationship order.

        Non-association edges add the column on the source table. An
        association without a join table adds it on every end whose opposite
        end is singular, matching the entity's ``@ManyToOne`` join column.
        """
        columns = []

        for rel in self.diagram.relationships:
            if rel.source_class_id == uml_class.id and rel.relationship_type not in NO_INLINE_COLUMN_TYPES:
                related_class = self.diagram.find_class(rel.target_class_id)
            elif (rel.relationship_type == RelationshipType.ASSOCIATION and rel.involves(uml_class.id)
                  and not creates_join_table(rel)
                  and not is_many(rel.far_side_multiplicity(uml_class.id))):
                related_class = self.diagram.find_class(rel.other_class_id(uml_class.id))
            else:
                continue

            if related_class is None:
                logger.debug("Skipping relationship %s: unresolved endpoint", rel.id)
                continue

            columns.append(f'{to_snake_case(related_class.name)}_id BIGINT')

        return columns

    def _generate_relationship_tables(self) -> str:
        sql = JOIN_TABLES_HEADER

        for rel in self.diagram.relationships:
            if not creates_join_table(rel):
                continue

            source_class = self.diagram.find_class(rel.source_class_id)
            target_class = self.diagram.find_class(rel.target_class_id)
            if source_class is None or target_class is None:
                continue

            source_table = to_snake_case(source_class.name)
            target_table = to_snake_case(target_class.name)
            source_fk = f'{source_table}_id'
            target_fk = f'{target_table}_id'

            sql += f'CREATE TABLE {source_table}_{target_table} (\n'
            sql += f'    {source_fk} BIGINT NOT NULL,\n'
            sql += f'    {target_fk} BIGINT NOT NULL,\n'
            sql += f'    PRIMARY KEY ({source_fk}, {target_fk}),\n'
            sql += f'    FOREIGN KEY ({source_fk}) REFERENCES {source_table}(id) ON DELETE CASCADE,\n'
            sql += f'    FOREIGN KEY ({target_fk}) REFERENCES {target_table}(id) ON DELETE CASCADE\n'
            sql += ');\n\n'

        return sql

    def _generate_foreign_key_constraints(self) -> str:
        sql = CONSTRAINTS_HEADER

        for rel in self.diagram.relationships:
            if rel.relationship_type in NO_INLINE_COLUMN_TYPES:
                continue

            source_class = self.diagram.find_class(rel.source_class_id)
            target_class = self.diagram.find_class(rel.target_class_id)
            if source_class is None or target_class is None:
                continue

            source_table = to_snake_case(source_class.name)
            target_table = to_snake_case(target_class.name)

            sql += f'ALTER TABLE {source_table} ADD CONSTRAINT fk_{source_table}_{target_table} '
            sql += f'FOREIGN KEY ({target_table}_id) REFERENCES {target_table}(id);\n'

        return sql
