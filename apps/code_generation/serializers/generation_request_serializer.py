"""
Request serializers for SpringBoot and SQL generation.
"""

from django.conf import settings
from rest_framework import serializers

from apps.uml_diagrams.serializers import UMLDiagramSerializer

from ..services.springboot_code_generator import DEFAULT_PACKAGE_NAME

JAVA_PACKAGE_REGEX = r'^[A-Za-z_][A-Za-z0-9_]*(\.[A-Za-z_][A-Za-z0-9_]*)*$'

JAVA_RESERVED_WORDS = frozenset((
    'abstract', 'assert', 'boolean', 'break', 'byte', 'case', 'catch', 'char', 'class', 'const',
    'continue', 'default', 'do', 'double', 'else', 'enum', 'extends', 'final', 'finally', 'float',
    'for', 'goto', 'if', 'implements', 'import', 'instanceof', 'int', 'interface', 'long', 'native',
    'new', 'package', 'private', 'protected', 'public', 'return', 'short', 'static', 'strictfp',
    'super', 'switch', 'synchronized', 'this', 'throw', 'throws', 'transient', 'try', 'void',
    'volatile', 'while', '_', 'true', 'false', 'null',
))


def default_package_name():
    return getattr(settings, 'CODE_GENERATION_DEFAULT_PACKAGE', DEFAULT_PACKAGE_NAME)


class CodeGenerationRequestSerializer(UMLDiagramSerializer):
    """
    Diagram plus the base Java package for the generated sources.
    """

    packageName = serializers.RegexField(
        regex=JAVA_PACKAGE_REGEX,
        max_length=255,
        default=default_package_name,
        error_messages={'invalid': 'Enter a dotted Java package name such as com.example.demo.'},
        help_text="Base Java package, e.g. com.example.demo"
    )

    def validate_packageName(self, value):
        reserved = [segment for segment in value.split('.') if segment in JAVA_RESERVED_WORDS]
        if reserved:
            raise serializers.ValidationError(
                f"Package segments must not be Java reserved words: {', '.join(reserved)}",
                code='invalid'
            )
        return value


class SQLGenerationRequestSerializer(UMLDiagramSerializer):
    """Diagram only; the schema does not depend on a package name."""
