import logging

from django.conf import settings
from drf_spectacular.utils import OpenApiResponse, extend_schema
from rest_framework import status
from rest_framework.decorators import api_view, permission_classes, throttle_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.throttling import AnonRateThrottle

from apps.uml_diagrams.serializers import UMLDiagramSerializer

from .serializers import UMLGenerationRequestSerializer
from .services import DiagramGenerationService


logger = logging.getLogger(__name__)


class AIAssistantRateThrottle(AnonRateThrottle):
    """Rate limit for calls that reach the AI provider."""
    scope = 'ai_assistant'

    def get_rate(self):
        return settings.AI_ASSISTANT_RATE_LIMIT


@extend_schema(
    tags=['AI Assistant'],
    summary='Generate UML Diagram from Text',
    description='Generate UML classes and relationships from a natural language description. '
                'The result can be posted unchanged to the code generation endpoints.',
    request=UMLGenerationRequestSerializer,
    responses={
        200: UMLDiagramSerializer,
        400: OpenApiResponse(description='Prompt is required'),
        429: OpenApiResponse(description='Rate limit exceeded'),
        502: OpenApiResponse(description='The AI reply could not be parsed into a diagram'),
        503: OpenApiResponse(description='AI diagram generation is disabled or unreachable'),
    }
)
@api_view(['POST'])
@permission_classes([AllowAny])
@throttle_classes([AIAssistantRateThrottle])
def generate_uml(request):
    """
    Generate a class diagram with the configured chat model.

    Provider and parsing failures are raised as API exceptions and
    formatted by the project exception handler.
    """
    serializer = UMLGenerationRequestSerializer(data=request.data)
    serializer.is_valid(raise_exception=True)

    diagram = DiagramGenerationService().generate_diagram(serializer.validated_data['prompt'])

    return Response(diagram.model_dump(by_alias=True, mode='json'), status=status.HTTP_200_OK)
