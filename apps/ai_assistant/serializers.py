from rest_framework import serializers


class UMLGenerationRequestSerializer(serializers.Serializer):
    """Serializer for natural language diagram generation requests."""

    prompt = serializers.CharField(
        max_length=4000,
        trim_whitespace=True,
        error_messages={
            'required': 'Prompt is required',
            'blank': 'Prompt is required',
            'null': 'Prompt is required',
        },
        help_text="Description of the system to model, e.g. 'a library with books and members'"
    )
