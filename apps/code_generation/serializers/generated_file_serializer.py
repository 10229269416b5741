"""
Response serializers for generated artifacts.
"""

from rest_framework import serializers


class GeneratedFileSerializer(serializers.Serializer):
    fileName = serializers.CharField(source='file_name')
    content = serializers.CharField()
    layer = serializers.CharField()
    relativePath = serializers.CharField(source='relative_path')


class GenerationStatisticsSerializer(serializers.Serializer):
    files_generated = serializers.IntegerField()
    total_lines = serializers.IntegerField()
    file_breakdown = serializers.DictField(child=serializers.IntegerField())


class SpringBootGenerationResponseSerializer(serializers.Serializer):
    packageName = serializers.CharField()
    files = GeneratedFileSerializer(many=True)
    statistics = GenerationStatisticsSerializer()
    warnings = serializers.ListField(child=serializers.CharField())


class SQLGenerationResponseSerializer(serializers.Serializer):
    sql = serializers.CharField()
    warnings = serializers.ListField(child=serializers.CharField())
