"""
URL configuration for Code Generation app.
"""

from django.urls import path, include
from rest_framework.routers import DefaultRouter

from .viewsets import CodeGenerationViewSet

app_name = 'code_generation'

router = DefaultRouter()
router.register(r'', CodeGenerationViewSet, basename='code-generation')

urlpatterns = [
    path('', include(router.urls)),
]
