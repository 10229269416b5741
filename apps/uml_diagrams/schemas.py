"""
UML class diagram data model shared by the code generators.

Instances are immutable snapshots of the editor state. Field aliases follow
the camelCase JSON produced by the diagram editor, so payloads round-trip
unchanged through ``model_validate`` / ``model_dump(by_alias=True)``.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator


MANY_MULTIPLICITIES = ('*', '1..*')


def is_many(multiplicity: Optional[str]) -> bool:
    """Only ``*`` and ``1..*`` are treated as collection-valued ends."""
    return multiplicity in MANY_MULTIPLICITIES


class RelationshipType(str, Enum):
    INHERITANCE = 'inheritance'
    COMPOSITION = 'composition'
    AGGREGATION = 'aggregation'
    ASSOCIATION = 'association'
    DEPENDENCY = 'dependency'
    REALIZATION = 'realization'


class Visibility(str, Enum):
    PUBLIC = 'public'
    PRIVATE = 'private'
    PROTECTED = 'protected'
    PACKAGE = 'package'


class Stereotype(str, Enum):
    CLASS = 'class'
    INTERFACE = 'interface'
    ABSTRACT = 'abstract'


class DiagramModel(BaseModel):
    """Base for all diagram elements: frozen, camelCase aliases accepted."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)


class Position(DiagramModel):
    x: float = 0
    y: float = 0


class ParameterDefinition(DiagramModel):
    name: str
    type: str


class AttributeDefinition(DiagramModel):
    name: str
    type: str = 'String'
    visibility: Visibility = Visibility.PRIVATE
    is_static: bool = Field(default=False, alias='isStatic')

    @property
    def is_identifier(self) -> bool:
        """An attribute literally named ``id`` is replaced by the surrogate key."""
        return self.name == 'id'


class MethodDefinition(DiagramModel):
    name: str
    return_type: str = Field(default='void', alias='returnType')
    parameters: Tuple[ParameterDefinition, ...] = ()
    visibility: Visibility = Visibility.PUBLIC
    is_static: bool = Field(default=False, alias='isStatic')
    is_abstract: bool = Field(default=False, alias='isAbstract')


class ClassDefinition(DiagramModel):
    id: str
    name: str
    stereotype: Stereotype = Stereotype.CLASS
    attributes: Tuple[AttributeDefinition, ...] = ()
    methods: Tuple[MethodDefinition, ...] = ()
    position: Position = Position()

    @field_validator('stereotype', mode='before')
    @classmethod
    def default_stereotype(cls, value):
        if value is None or value == '':
            return Stereotype.CLASS
        return value

    @property
    def is_interface(self) -> bool:
        return self.stereotype == Stereotype.INTERFACE.value


class RelationshipDefinition(DiagramModel):
    id: str
    source_class_id: str = Field(alias='sourceClassId')
    target_class_id: str = Field(alias='targetClassId')
    relationship_type: RelationshipType = Field(alias='relationshipType')
    source_multiplicity: str = Field(default='1..1', alias='sourceMultiplicity')
    target_multiplicity: str = Field(default='1..1', alias='targetMultiplicity')
    label: str = ''

    @field_validator('source_multiplicity', 'target_multiplicity', mode='before')
    @classmethod
    def default_multiplicity(cls, value):
        if value is None or value == '':
            return '1..1'
        return value

    @field_validator('label', mode='before')
    @classmethod
    def default_label(cls, value):
        return value or ''

    def involves(self, class_id: str) -> bool:
        return class_id in (self.source_class_id, self.target_class_id)

    def far_side_multiplicity(self, class_id: str) -> str:
        """
        Multiplicity at the opposite end as seen from ``class_id``.

        Self relationships are read from the source side.
        """
        if self.source_class_id == class_id:
            return self.target_multiplicity
        return self.source_multiplicity

    def other_class_id(self, class_id: str) -> str:
        if self.source_class_id == class_id:
            return self.target_class_id
        return self.source_class_id


class Diagram(DiagramModel):
    """Snapshot of a class diagram: classes are nodes, relationships edges."""

    classes: Tuple[ClassDefinition, ...] = ()
    relationships: Tuple[RelationshipDefinition, ...] = ()

    def find_class(self, class_id: str) -> Optional[ClassDefinition]:
        for uml_class in self.classes:
            if uml_class.id == class_id:
                return uml_class
        return None

    def concrete_classes(self) -> Tuple[ClassDefinition, ...]:
        return tuple(uml_class for uml_class in self.classes if not uml_class.is_interface)

    def relationships_of(self, class_id: str) -> Tuple[RelationshipDefinition, ...]:
        return tuple(rel for rel in self.relationships if rel.involves(class_id))
