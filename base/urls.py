from django.conf import settings
from django.http import JsonResponse
from django.urls import path, include
from django.utils import timezone
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from drf_spectacular.utils import extend_schema
from drf_spectacular.views import SpectacularAPIView, SpectacularSwaggerView, SpectacularRedocView


def get_spectacular_urls():
    """Get URLs for API documentation."""
    return [
        path('api/schema/', SpectacularAPIView.as_view(), name='schema'),
        path(
            'docs/',
            SpectacularSwaggerView.as_view(url_name='schema'),
            name='swagger-ui'
        ),
        path(
            'api/docs/redoc/',
            SpectacularRedocView.as_view(url_name='schema'),
            name='redoc'
        ),
    ]


@extend_schema(
    tags=['System'],
    summary='API Health Check',
    description='Check API service health status',
    responses={
        200: {
            'type': 'object',
            'properties': {
                'status': {'type': 'string'},
                'timestamp': {'type': 'string', 'format': 'date-time'},
                'version': {'type': 'string'}
            }
        }
    }
)
@api_view(['GET'])
@permission_classes([AllowAny])
def api_health_check(request):
    """API health check endpoint."""
    return Response({
        'status': 'healthy',
        'timestamp': timezone.now().isoformat(),
        'version': settings.API_VERSION
    })


urlpatterns = [
    *get_spectacular_urls(),
    path('api/health/', api_health_check, name='api_health_check'),
    path('api/code-generation/', include('apps.code_generation.urls', namespace='code_generation')),
    path('api/ai-assistant/', include('apps.ai_assistant.urls', namespace='ai_assistant')),
]


def custom_404(request, exception):
    return JsonResponse({
        'error': True,
        'error_code': 'not_found',
        'status_code': 404,
        'message': 'The requested resource was not found.'
    }, status=404)


def custom_500(request):
    return JsonResponse({
        'error': True,
        'error_code': 'server_error',
        'status_code': 500,
        'message': 'An internal server error occurred.'
    }, status=500)


def custom_400(request, exception):
    return JsonResponse({
        'error': True,
        'error_code': 'bad_request',
        'status_code': 400,
        'message': 'The request was malformed or invalid.'
    }, status=400)


handler404 = custom_404
handler500 = custom_500
handler400 = custom_400
