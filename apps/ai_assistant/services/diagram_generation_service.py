"""
Natural language to UML class diagram generation.

Sends the user's description to an OpenAI-compatible chat model (Azure
OpenAI when configured) and parses the JSON reply into a ``Diagram``.
"""

import json
import logging
import re
import time
from functools import wraps
from typing import Dict, List

import openai
from django.conf import settings
from openai import AzureOpenAI, OpenAI
from pydantic import ValidationError as PydanticValidationError

from apps.uml_diagrams.schemas import Diagram
from base.exceptions.enterprise_exceptions import (
    AIServiceUnavailableException,
    DiagramGenerationError,
)

logger = logging.getLogger(__name__)

GENERATION_TEMPERATURE = 0.3
REQUEST_TIMEOUT = 60.0  # seconds
RETRYABLE_ERRORS = (openai.APIConnectionError, openai.RateLimitError, openai.InternalServerError)

JSON_OBJECT_PATTERN = re.compile(r'\{[\s\S]*\}')

SYSTEM_PROMPT = """You are a UML class diagram generator. Based on the user's description, generate a JSON structure representing UML classes and their relationships.

Return ONLY a valid JSON object with this exact structure:
{
  "classes": [
    {
      "id": "unique-id",
      "name": "ClassName",
      "stereotype": "class" | "interface" | "abstract",
      "attributes": [
        {
          "name": "attributeName",
          "type": "String",
          "visibility": "private" | "public" | "protected",
          "isStatic": false
        }
      ],
      "methods": [
        {
          "name": "methodName",
          "returnType": "void",
          "parameters": [
            {
              "name": "paramName",
              "type": "String"
            }
          ],
          "visibility": "public" | "private" | "protected",
          "isStatic": false,
          "isAbstract": false
        }
      ]
    }
  ],
  "relationships": [
    {
      "id": "rel-id",
      "sourceClassId": "source-class-id",
      "targetClassId": "target-class-id",
      "relationshipType": "inheritance" | "composition" | "aggregation" | "association",
      "sourceMultiplicity": "1..1" | "*" | "0..1" | "1..*",
      "targetMultiplicity": "1..1" | "*" | "0..1" | "1..*",
      "label": "relationship label"
    }
  ]
}

Guidelines:
- Use proper UML naming conventions
- Include appropriate attributes and methods for each class
- Set correct visibility modifiers (private, public, protected)
- Use proper Java/OOP data types (String, Integer, Boolean, etc.)
- Create meaningful relationships between classes
- For inheritance, use "inheritance" relationship type
- For composition (strong ownership), use "composition"
- For aggregation (weak ownership), use "aggregation"
- For simple associations, use "association"
- Set appropriate multiplicities (1, *, 0..1, 1..*)
"""


def retry_with_exponential_backoff(
    max_retries: int = 3, base_delay: float = 1.0, max_delay: float = 30.0
):
    """
    Retry transient provider errors with exponential backoff.

    Only connection, rate limit and server errors are retried; everything
    else propagates on the first attempt.
    """

    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            for attempt in range(max_retries):
                try:
                    return func(*args, **kwargs)
                except RETRYABLE_ERRORS as e:
                    if attempt == max_retries - 1:
                        logger.error(f"Max retries ({max_retries}) exceeded: {e}")
                        raise

                    delay = min(base_delay * (2 ** attempt), max_delay)
                    logger.warning(
                        f"Retry {attempt + 1}/{max_retries} after {delay}s. Error: {e}"
                    )
                    time.sleep(delay)

        return wrapper

    return decorator


def build_user_prompt(prompt: str) -> str:
    return f"Generate UML classes for: {prompt}"


def parse_diagram_response(text: str) -> Diagram:
    """
    Extract the diagram JSON from a model reply.

    The reply may wrap the object in prose or code fences; the outermost
    ``{...}`` block is used, falling back to the whole text.

    Raises:
        DiagramGenerationError: If no valid diagram can be parsed
    """
    if not text or not text.strip():
        raise DiagramGenerationError("AI response was empty")

    match = JSON_OBJECT_PATTERN.search(text)
    json_text = match.group(0) if match else text

    try:
        payload = json.loads(json_text)
    except json.JSONDecodeError as e:
        logger.warning(f"AI response is not valid JSON: {e}")
        raise DiagramGenerationError("Failed to parse AI response") from e

    if not isinstance(payload, dict):
        raise DiagramGenerationError("AI response is not a JSON object")

    try:
        return Diagram.model_validate({
            'classes': payload.get('classes') or [],
            'relationships': payload.get('relationships') or [],
        })
    except PydanticValidationError as e:
        logger.warning(f"AI response does not describe a valid diagram: {e.error_count()} errors")
        raise DiagramGenerationError("AI response does not describe a valid diagram") from e


class DiagramGenerationService:
    """
    Generates UML class diagrams from natural language descriptions.

    Configuration comes from Django settings:

    - ``AI_ASSISTANT_ENABLED``: master switch
    - ``AI_ASSISTANT_DEFAULT_MODEL``: chat model or Azure deployment name
    - ``OPENAI_AZURE_API_KEY``, ``OPENAI_AZURE_API_BASE``, ``OPENAI_AZURE_API_VERSION``:
      Azure OpenAI endpoint, preferred when set
    - ``OPENAI_API_KEY``: plain OpenAI endpoint otherwise
    """

    def __init__(self, client=None, model: str = None):
        if not getattr(settings, 'AI_ASSISTANT_ENABLED', False):
            raise AIServiceUnavailableException("AI diagram generation is disabled")

        self.model = model or settings.AI_ASSISTANT_DEFAULT_MODEL
        self.client = client or self._build_client()

    def _build_client(self):
        azure_api_key = getattr(settings, 'OPENAI_AZURE_API_KEY', '')
        azure_endpoint = getattr(settings, 'OPENAI_AZURE_API_BASE', '')

        if azure_api_key and azure_endpoint:
            logger.info(f"Using Azure OpenAI endpoint for model {self.model}")
            return AzureOpenAI(
                api_key=azure_api_key,
                api_version=settings.OPENAI_AZURE_API_VERSION,
                azure_endpoint=azure_endpoint,
            )

        api_key = getattr(settings, 'OPENAI_API_KEY', '')
        if api_key:
            return OpenAI(api_key=api_key)

        raise AIServiceUnavailableException("AI diagram generation is not configured")

    def generate_diagram(self, prompt: str) -> Diagram:
        """
        Ask the model for a diagram describing ``prompt``.

        Raises:
            AIServiceUnavailableException: If the provider cannot be reached
            DiagramGenerationError: If the reply is not a valid diagram
        """
        messages = [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_user_prompt(prompt)},
        ]

        try:
            response = self._call_chat_completion(messages)
        except openai.APIError as e:
            logger.error(f"AI provider request failed: {e}")
            raise AIServiceUnavailableException("AI provider request failed") from e

        diagram = parse_diagram_response(self._extract_response_content(response))

        logger.info(
            "Generated diagram from prompt",
            extra={
                'model': self.model,
                'classes_count': len(diagram.classes),
                'relationships_count': len(diagram.relationships),
            }
        )
        return diagram

    @retry_with_exponential_backoff(max_retries=3, base_delay=1.0, max_delay=30.0)
    def _call_chat_completion(self, messages: List[Dict[str, str]]):
        logger.info(f"Calling chat model: model={self.model}, messages={len(messages)}")

        return self.client.chat.completions.create(
            model=self.model,
            messages=messages,
            temperature=GENERATION_TEMPERATURE,
            timeout=REQUEST_TIMEOUT,
        )

    def _extract_response_content(self, response) -> str:
        try:
            content = response.choices[0].message.content
        except (AttributeError, IndexError) as e:
            raise DiagramGenerationError("AI response contained no message") from e

        if not content:
            raise DiagramGenerationError("AI response was empty")
        return content
