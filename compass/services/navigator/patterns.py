"""
Idiom and architecture tagging for heuristic code analysis.

Each tag is an independent regex test over the file content; a file can
carry any number of tags. Tags come out in the order they are declared in
the indicator tables.
"""

import re

from compass.services.navigator.constants import ARCHITECTURE_INDICATORS, IDIOM_INDICATORS


def _compile(indicators: dict[str, list[str]]) -> list[tuple[str, list[re.Pattern[str]]]]:
    return [(tag, [re.compile(p) for p in patterns]) for tag, patterns in indicators.items()]


_IDIOM_RULES = _compile(IDIOM_INDICATORS)
_ARCHITECTURE_RULES = _compile(ARCHITECTURE_INDICATORS)


def _match_tags(content: str, rules: list[tuple[str, list[re.Pattern[str]]]]) -> list[str]:
    tags: list[str] = []
    for tag, patterns in rules:
        for pattern in patterns:
            if pattern.search(content):
                tags.append(tag)
                break
    return tags


def detect_idioms(content: str) -> list[str]:
    """
    Tag the programming idioms and frameworks visible in a file.

    Args:
        content: Full file content

    Returns:
        Idiom tags such as "OOP/Classes", "Async/Promises" or "Express.js"
    """
    return _match_tags(content, _IDIOM_RULES)


def detect_architecture(content: str) -> list[str]:
    """
    Tag the structural roles a file plays (server bootstrap, routing, ...).

    Args:
        content: Full file content

    Returns:
        Architecture tags such as "Server Architecture" or "Repository Pattern"
    """
    return _match_tags(content, _ARCHITECTURE_RULES)
