"""
Request serializers for UML class diagrams posted by the diagram editor.

Field names follow the editor's camelCase JSON. ``UMLDiagramSerializer``
converts the validated payload into an immutable ``Diagram`` snapshot.
"""

from pydantic import ValidationError as PydanticValidationError
from rest_framework import serializers

from base.exceptions.enterprise_exceptions import DiagramValidationException

from ..schemas import Diagram, RelationshipType, Stereotype, Visibility


VISIBILITY_CHOICES = [visibility.value for visibility in Visibility]
STEREOTYPE_CHOICES = [stereotype.value for stereotype in Stereotype]
RELATIONSHIP_TYPE_CHOICES = [relationship_type.value for relationship_type in RelationshipType]


class UMLParameterSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    type = serializers.CharField(max_length=255)


class UMLAttributeSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    type = serializers.CharField(max_length=255, default='String')
    visibility = serializers.ChoiceField(choices=VISIBILITY_CHOICES, default=Visibility.PRIVATE.value)
    isStatic = serializers.BooleanField(default=False)


class UMLMethodSerializer(serializers.Serializer):
    name = serializers.CharField(max_length=255)
    returnType = serializers.CharField(max_length=255, default='void')
    parameters = UMLParameterSerializer(many=True, default=list)
    visibility = serializers.ChoiceField(choices=VISIBILITY_CHOICES, default=Visibility.PUBLIC.value)
    isStatic = serializers.BooleanField(default=False)
    isAbstract = serializers.BooleanField(default=False)


class PositionSerializer(serializers.Serializer):
    x = serializers.FloatField(default=0)
    y = serializers.FloatField(default=0)


class UMLClassSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=255)
    name = serializers.CharField(max_length=255)
    stereotype = serializers.ChoiceField(
        choices=STEREOTYPE_CHOICES,
        allow_null=True,
        allow_blank=True,
        default=Stereotype.CLASS.value,
        help_text="Interfaces are excluded from code and schema generation"
    )
    attributes = UMLAttributeSerializer(many=True, default=list)
    methods = UMLMethodSerializer(many=True, default=list)
    position = PositionSerializer(required=False)


class UMLRelationshipSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=255)
    sourceClassId = serializers.CharField(max_length=255)
    targetClassId = serializers.CharField(max_length=255)
    relationshipType = serializers.ChoiceField(choices=RELATIONSHIP_TYPE_CHOICES)
    sourceMultiplicity = serializers.CharField(
        max_length=20, allow_blank=True, allow_null=True, default='1..1'
    )
    targetMultiplicity = serializers.CharField(
        max_length=20, allow_blank=True, allow_null=True, default='1..1',
        help_text="'*' or '1..*' make this end collection-valued"
    )
    label = serializers.CharField(max_length=255, allow_blank=True, allow_null=True, default='')


class UMLDiagramSerializer(serializers.Serializer):
    """
    Complete class diagram: classes are nodes, relationships are edges.

    Relationships pointing at unknown classes are accepted here; the
    generators skip them.
    """

    classes = UMLClassSerializer(many=True)
    relationships = UMLRelationshipSerializer(many=True, default=list)

    def to_diagram(self) -> Diagram:
        """Immutable snapshot of the validated payload."""
        try:
            return Diagram.model_validate({
                'classes': self.validated_data['classes'],
                'relationships': self.validated_data['relationships'],
            })
        except PydanticValidationError as e:
            raise DiagramValidationException(
                detail='; '.join(error['msg'] for error in e.errors())
            ) from e
