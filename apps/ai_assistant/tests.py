import json
from django.core.cache import cache
from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from rest_framework.test import APIClient, APISimpleTestCase
from rest_framework import status
from unittest.mock import patch, MagicMock

import httpx
import openai

from base.exceptions.enterprise_exceptions import AIServiceUnavailableException, DiagramGenerationError
from .services import DiagramGenerationService, SYSTEM_PROMPT, build_user_prompt, parse_diagram_response


DIAGRAM_JSON = {
    "classes": [
        {
            "id": "library",
            "name": "Library",
            "stereotype": "class",
            "attributes": [
                {"name": "name", "type": "String", "visibility": "private", "isStatic": False, "isAbstract": False}
            ],
            "methods": [
                {"name": "addBook", "returnType": "void", "parameters": [{"name": "book", "type": "Book"}],
                 "visibility": "public", "isStatic": False, "isAbstract": False}
            ]
        },
        {
            "id": "book",
            "name": "Book",
            "stereotype": "class",
            "attributes": [{"name": "title", "type": "String", "visibility": "private"}],
            "methods": []
        }
    ],
    "relationships": [
        {
            "id": "rel-1",
            "sourceClassId": "library",
            "targetClassId": "book",
            "relationshipType": "aggregation",
            "sourceMultiplicity": "1..1",
            "targetMultiplicity": "*",
            "label": "holds"
        }
    ]
}


def completion(content):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


def fake_client(content):
    client = MagicMock()
    client.chat.completions.create.return_value = completion(content)
    return client


class ParseDiagramResponseTests(SimpleTestCase):
    """Test cases for extracting diagrams from model replies."""

    def test_plain_json(self):
        diagram = parse_diagram_response(json.dumps(DIAGRAM_JSON))

        self.assertEqual([c.name for c in diagram.classes], ["Library", "Book"])
        self.assertEqual(diagram.relationships[0].target_multiplicity, "*")
        self.assertEqual(diagram.classes[0].methods[0].parameters[0].type, "Book")

    def test_json_wrapped_in_prose_and_fences(self):
        text = "Here is your diagram:\n```json\n" + json.dumps(DIAGRAM_JSON, indent=2) + "\n```\nEnjoy!"

        diagram = parse_diagram_response(text)

        self.assertEqual(len(diagram.classes), 2)
        self.assertEqual(diagram.relationships[0].label, "holds")

    def test_missing_relationships_default_to_empty(self):
        diagram = parse_diagram_response('{"classes": [{"id": "a", "name": "A"}]}')

        self.assertEqual(diagram.relationships, ())

    def test_malformed_json(self):
        with self.assertRaises(DiagramGenerationError):
            parse_diagram_response('Sure! {"classes": [ {"id": "a", }')

    def test_no_json(self):
        with self.assertRaises(DiagramGenerationError):
            parse_diagram_response("I cannot help with that.")

    def test_empty_reply(self):
        with self.assertRaises(DiagramGenerationError):
            parse_diagram_response("   ")

    def test_invalid_diagram(self):
        with self.assertRaises(DiagramGenerationError):
            parse_diagram_response('{"classes": [{"name": "MissingId"}]}')

    def test_json_array_is_rejected(self):
        with self.assertRaises(DiagramGenerationError):
            parse_diagram_response('[1, 2, 3]')


@override_settings(AI_ASSISTANT_ENABLED=True, AI_ASSISTANT_DEFAULT_MODEL='test-model',
                   OPENAI_API_KEY='', OPENAI_AZURE_API_KEY='', OPENAI_AZURE_API_BASE='')
class DiagramGenerationServiceTests(SimpleTestCase):
    """Test cases for DiagramGenerationService."""

    def test_generate_diagram_request(self):
        client = fake_client(json.dumps(DIAGRAM_JSON))

        diagram = DiagramGenerationService(client=client).generate_diagram("a small library")

        self.assertEqual(len(diagram.classes), 2)
        kwargs = client.chat.completions.create.call_args.kwargs
        self.assertEqual(kwargs['model'], 'test-model')
        self.assertEqual(kwargs['temperature'], 0.3)
        self.assertEqual(kwargs['messages'], [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": "Generate UML classes for: a small library"},
        ])

    def test_build_user_prompt(self):
        self.assertEqual(build_user_prompt("a shop"), "Generate UML classes for: a shop")

    def test_empty_reply_content(self):
        with self.assertRaises(DiagramGenerationError):
            DiagramGenerationService(client=fake_client(None)).generate_diagram("a shop")

    @override_settings(AI_ASSISTANT_ENABLED=False)
    def test_disabled(self):
        with self.assertRaises(AIServiceUnavailableException):
            DiagramGenerationService(client=fake_client("{}"))

    def test_unconfigured(self):
        with self.assertRaises(AIServiceUnavailableException):
            DiagramGenerationService()

    @override_settings(OPENAI_API_KEY='sk-test')
    @patch('apps.ai_assistant.services.diagram_generation_service.OpenAI')
    def test_openai_client(self, mock_openai):
        DiagramGenerationService()

        mock_openai.assert_called_once_with(api_key='sk-test')

    @override_settings(OPENAI_API_KEY='sk-test', OPENAI_AZURE_API_KEY='azure-key',
                       OPENAI_AZURE_API_BASE='https://example.openai.azure.com/',
                       OPENAI_AZURE_API_VERSION='2024-02-15-preview')
    @patch('apps.ai_assistant.services.diagram_generation_service.OpenAI')
    @patch('apps.ai_assistant.services.diagram_generation_service.AzureOpenAI')
    def test_azure_client_is_preferred(self, mock_azure, mock_openai):
        DiagramGenerationService()

        mock_azure.assert_called_once_with(
            api_key='azure-key',
            api_version='2024-02-15-preview',
            azure_endpoint='https://example.openai.azure.com/',
        )
        mock_openai.assert_not_called()

    def test_provider_error(self):
        client = MagicMock()
        client.chat.completions.create.side_effect = openai.APIStatusError(
            "bad request",
            response=httpx.Response(400, request=httpx.Request("POST", "https://api.example.com")),
            body=None,
        )

        with self.assertRaises(AIServiceUnavailableException):
            DiagramGenerationService(client=client).generate_diagram("a shop")

        self.assertEqual(client.chat.completions.create.call_count, 1)

    @patch('apps.ai_assistant.services.diagram_generation_service.time.sleep')
    def test_transient_errors_are_retried(self, mock_sleep):
        client = MagicMock()
        client.chat.completions.create.side_effect = [
            openai.APIConnectionError(request=httpx.Request("POST", "https://api.example.com")),
            completion(json.dumps(DIAGRAM_JSON)),
        ]

        diagram = DiagramGenerationService(client=client).generate_diagram("a shop")

        self.assertEqual(len(diagram.classes), 2)
        self.assertEqual(client.chat.completions.create.call_count, 2)
        mock_sleep.assert_called_once_with(1.0)


@override_settings(AI_ASSISTANT_ENABLED=True, AI_ASSISTANT_DEFAULT_MODEL='test-model',
                   OPENAI_API_KEY='sk-test', OPENAI_AZURE_API_KEY='', OPENAI_AZURE_API_BASE='',
                   AI_ASSISTANT_RATE_LIMIT='1000/hour')
class GenerateUMLViewTests(APISimpleTestCase):
    """Test cases for the generate-uml endpoint."""

    def setUp(self):
        cache.clear()
        self.client = APIClient()
        self.url = reverse('ai_assistant:generate_uml')

    @patch('apps.ai_assistant.services.diagram_generation_service.OpenAI')
    def test_generate_uml_success(self, mock_openai):
        mock_openai.return_value = fake_client("```json\n" + json.dumps(DIAGRAM_JSON) + "\n```")

        response = self.client.post(self.url, {"prompt": "a small library"}, format='json')

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([c['name'] for c in response.data['classes']], ["Library", "Book"])
        self.assertEqual(response.data['relationships'][0]['sourceClassId'], "library")
        self.assertEqual(response.data['relationships'][0]['relationshipType'], "aggregation")
        self.assertEqual(response.data['classes'][0]['methods'][0]['returnType'], "void")

    def test_generated_diagram_can_be_posted_to_code_generation(self):
        with patch('apps.ai_assistant.services.diagram_generation_service.OpenAI') as mock_openai:
            mock_openai.return_value = fake_client(json.dumps(DIAGRAM_JSON))
            diagram = self.client.post(self.url, {"prompt": "a small library"}, format='json').data

        response = self.client.post(
            reverse('code_generation:code-generation-springboot'), diagram, format='json'
        )

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['files'][0]['fileName'], 'Library.java')

    def test_prompt_is_required(self):
        for payload in ({}, {"prompt": ""}, {"prompt": "   "}):
            with self.subTest(payload=payload):
                response = self.client.post(self.url, payload, format='json')

                self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
                self.assertIn('Prompt is required', response.data['message'])

    @patch('apps.ai_assistant.services.diagram_generation_service.OpenAI')
    def test_unparseable_reply(self, mock_openai):
        mock_openai.return_value = fake_client("Sorry, I can only draw sequence diagrams.")

        response = self.client.post(self.url, {"prompt": "a small library"}, format='json')

        self.assertEqual(response.status_code, status.HTTP_502_BAD_GATEWAY)
        self.assertEqual(response.data['error_code'], 'diagram_generation_error')

    @override_settings(AI_ASSISTANT_ENABLED=False)
    def test_disabled(self):
        response = self.client.post(self.url, {"prompt": "a small library"}, format='json')

        self.assertEqual(response.status_code, status.HTTP_503_SERVICE_UNAVAILABLE)
        self.assertEqual(response.data['error_code'], 'ai_service_unavailable')

    @override_settings(AI_ASSISTANT_RATE_LIMIT='1/hour')
    def test_rate_limit(self):
        self.client.post(self.url, {"prompt": ""}, format='json')
        response = self.client.post(self.url, {"prompt": ""}, format='json')

        self.assertEqual(response.status_code, status.HTTP_429_TOO_MANY_REQUESTS)
