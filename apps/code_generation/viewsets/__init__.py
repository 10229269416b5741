"""
Code Generation ViewSets package initialization.
"""

from .code_generation_viewset import CodeGenerationViewSet

__all__ = [
    'CodeGenerationViewSet',
]
