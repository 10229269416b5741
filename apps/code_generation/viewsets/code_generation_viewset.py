"""
Code Generation ViewSet exposing SpringBoot, SQL and ZIP generation over HTTP.

Every action accepts the complete diagram in the request body; nothing is
persisted between requests.
"""

import logging

from django.http import HttpResponse
from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiResponse, extend_schema, extend_schema_view
from rest_framework import permissions, status, viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from ..serializers import (
    CodeGenerationRequestSerializer,
    GeneratedFileSerializer,
    SpringBootGenerationResponseSerializer,
    SQLGenerationRequestSerializer,
    SQLGenerationResponseSerializer,
)
from ..services import CodeGeneratorService

logger = logging.getLogger(__name__)


def archive_file_name(package_name: str) -> str:
    """``com.example.demo`` -> ``demo.zip``."""
    return f"{package_name.rsplit('.', 1)[-1]}.zip"


@extend_schema_view(
    springboot=extend_schema(
        tags=["Code Generation"],
        summary="Generate SpringBoot Sources",
        description="Generate JPA entity, repository, service and REST controller sources "
                    "for every non-interface class of the posted diagram.",
        request=CodeGenerationRequestSerializer,
        responses={
            200: SpringBootGenerationResponseSerializer,
            400: OpenApiResponse(description="Invalid diagram payload"),
        }
    ),
    sql=extend_schema(
        tags=["Code Generation"],
        summary="Generate SQL Schema",
        description="Generate CREATE TABLE statements, many-to-many join tables and "
                    "foreign key constraints for the posted diagram.",
        request=SQLGenerationRequestSerializer,
        responses={
            200: SQLGenerationResponseSerializer,
            400: OpenApiResponse(description="Invalid diagram payload"),
        }
    ),
    download=extend_schema(
        tags=["Code Generation"],
        summary="Download SpringBoot Project",
        description="Download the generated sources and schema.sql as a ZIP archive "
                    "in Maven directory layout.",
        request=CodeGenerationRequestSerializer,
        responses={
            (200, 'application/zip'): OpenApiTypes.BINARY,
            400: OpenApiResponse(description="Invalid diagram payload"),
        }
    ),
)
class CodeGenerationViewSet(viewsets.ViewSet):
    """
    Stateless generation endpoints for the diagram editor.
    """

    permission_classes = [permissions.AllowAny]

    def get_generator_service(self) -> CodeGeneratorService:
        return CodeGeneratorService()

    @action(detail=False, methods=['post'])
    def springboot(self, request):
        serializer = CodeGenerationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        diagram = serializer.to_diagram()
        package_name = serializer.validated_data['packageName']
        service = self.get_generator_service()

        generated_files = service.generate_springboot_files(diagram, package_name)

        return Response({
            'packageName': package_name,
            'files': GeneratedFileSerializer(generated_files, many=True).data,
            'statistics': service.get_generation_statistics(generated_files),
            'warnings': service.collect_warnings(diagram),
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['post'])
    def sql(self, request):
        serializer = SQLGenerationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        diagram = serializer.to_diagram()
        service = self.get_generator_service()

        return Response({
            'sql': service.generate_sql_schema(diagram),
            'warnings': service.collect_warnings(diagram),
        }, status=status.HTTP_200_OK)

    @action(detail=False, methods=['post'])
    def download(self, request):
        serializer = CodeGenerationRequestSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        diagram = serializer.to_diagram()
        package_name = serializer.validated_data['packageName']

        archive = self.get_generator_service().generate_project_archive(diagram, package_name)
        file_name = archive_file_name(package_name)

        logger.info("Serving project archive %s (%d bytes)", file_name, len(archive))

        response = HttpResponse(archive, content_type='application/zip')
        response['Content-Disposition'] = f'attachment; filename="{file_name}"'
        response['Content-Length'] = len(archive)
        return response
