"""
Test data factories for UML diagram elements.

Uses FactoryBoy over the immutable diagram schemas, so no database is
involved. Override any field per call, e.g.
``ClassFactory(name='Order', attributes=[AttributeFactory(name='total', type='Double')])``.
"""

import factory

from apps.uml_diagrams.schemas import (
    AttributeDefinition,
    ClassDefinition,
    Diagram,
    MethodDefinition,
    RelationshipDefinition,
    RelationshipType,
    Stereotype,
    Visibility,
)


class AttributeFactory(factory.Factory):
    """Factory for private String attributes."""

    class Meta:
        model = AttributeDefinition

    name = factory.Sequence(lambda n: f'field{n}')
    type = 'String'
    visibility = Visibility.PRIVATE.value
    is_static = False


class MethodFactory(factory.Factory):

    class Meta:
        model = MethodDefinition

    name = factory.Sequence(lambda n: f'operation{n}')
    return_type = 'void'
    visibility = Visibility.PUBLIC.value


class ClassFactory(factory.Factory):
    """Factory for concrete classes without members."""

    class Meta:
        model = ClassDefinition

    id = factory.Sequence(lambda n: f'class-{n}')
    name = factory.Sequence(lambda n: f'Entity{n}')
    stereotype = Stereotype.CLASS.value
    attributes = ()
    methods = ()


class InterfaceFactory(ClassFactory):
    stereotype = Stereotype.INTERFACE.value


class RelationshipFactory(factory.Factory):
    """Factory for one-to-one associations; set the class ids per call."""

    class Meta:
        model = RelationshipDefinition

    id = factory.Sequence(lambda n: f'rel-{n}')
    source_class_id = 'class-source'
    target_class_id = 'class-target'
    relationship_type = RelationshipType.ASSOCIATION.value
    source_multiplicity = '1..1'
    target_multiplicity = '1..1'
    label = ''


def relate(source, target, relationship_type, source_multiplicity='1..1',
           target_multiplicity='1..1', **kwargs):
    """Relationship between two class definitions."""
    return RelationshipFactory(
        source_class_id=source.id,
        target_class_id=target.id,
        relationship_type=relationship_type,
        source_multiplicity=source_multiplicity,
        target_multiplicity=target_multiplicity,
        **kwargs
    )


def diagram_payload(classes, relationships=(), **extra):
    """camelCase JSON body as posted by the diagram editor."""
    payload = Diagram(classes=tuple(classes), relationships=tuple(relationships)).model_dump(
        by_alias=True, mode='json'
    )
    payload.update(extra)
    return payload


def user_order_diagram():
    """``User`` one-to-many ``Order`` association."""
    user = ClassFactory(id='user', name='User', attributes=[AttributeFactory(name='id', type='Long')])
    order = ClassFactory(
        id='order',
        name='Order',
        attributes=[
            AttributeFactory(name='id', type='Long'),
            AttributeFactory(name='total', type='Double'),
        ]
    )
    association = relate(user, order, RelationshipType.ASSOCIATION.value,
                         target_multiplicity='1..*', id='user-orders')
    return [user, order], [association]


def student_course_diagram():
    """``Student`` many-to-many ``Course`` association."""
    student = ClassFactory(id='student', name='Student', attributes=[AttributeFactory(name='name')])
    course = ClassFactory(id='course', name='Course', attributes=[AttributeFactory(name='title')])
    enrolment = relate(student, course, RelationshipType.ASSOCIATION.value,
                       source_multiplicity='*', target_multiplicity='*', id='enrolment')
    return [student, course], [enrolment]
