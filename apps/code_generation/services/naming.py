"""
Identifier case conversions shared by the Spring Boot and SQL generators.
"""

import re
from typing import Dict, Iterable, List


_UPPERCASE = re.compile('[A-Z]')


def to_snake_case(text: str) -> str:
    """Convert ``OrderItem`` to ``order_item``."""
    converted = _UPPERCASE.sub(lambda match: '_' + match.group(0).lower(), text)
    if text[:1].isupper() and converted.startswith('_'):
        converted = converted[1:]
    return converted


def to_camel_case(text: str) -> str:
    """Lower the first character only: ``OrderItem`` -> ``orderItem``."""
    return text[:1].lower() + text[1:]


def find_snake_case_collisions(names: Iterable[str]) -> Dict[str, List[str]]:
    """
    Group distinct names that normalise to the same snake_case identifier.

    Only groups with more than one distinct original name are returned.
    """
    groups: Dict[str, List[str]] = {}
    for name in names:
        originals = groups.setdefault(to_snake_case(name), [])
        if name not in originals:
            originals.append(name)

    return {snake: originals for snake, originals in groups.items() if len(originals) > 1}
