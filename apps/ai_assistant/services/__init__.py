from .diagram_generation_service import (
    DiagramGenerationService,
    SYSTEM_PROMPT,
    build_user_prompt,
    parse_diagram_response,
)

__all__ = [
    'DiagramGenerationService',
    'SYSTEM_PROMPT',
    'build_user_prompt',
    'parse_diagram_response',
]
