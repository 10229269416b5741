"""
Code Generation Serializers package initialization.
"""

from .generation_request_serializer import (
    CodeGenerationRequestSerializer,
    SQLGenerationRequestSerializer,
)
from .generated_file_serializer import (
    GeneratedFileSerializer,
    GenerationStatisticsSerializer,
    SpringBootGenerationResponseSerializer,
    SQLGenerationResponseSerializer,
)

__all__ = [
    'CodeGenerationRequestSerializer',
    'SQLGenerationRequestSerializer',
    'GeneratedFileSerializer',
    'GenerationStatisticsSerializer',
    'SpringBootGenerationResponseSerializer',
    'SQLGenerationResponseSerializer',
]
