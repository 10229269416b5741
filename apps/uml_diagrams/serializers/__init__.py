from .uml_diagram_serializer import (
    PositionSerializer,
    UMLAttributeSerializer,
    UMLClassSerializer,
    UMLDiagramSerializer,
    UMLMethodSerializer,
    UMLParameterSerializer,
    UMLRelationshipSerializer,
)

__all__ = [
    'PositionSerializer',
    'UMLAttributeSerializer',
    'UMLClassSerializer',
    'UMLDiagramSerializer',
    'UMLMethodSerializer',
    'UMLParameterSerializer',
    'UMLRelationshipSerializer',
]
