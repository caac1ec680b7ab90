"""
Code element extraction for heuristic code analysis.

Carves classes, functions, arrow functions and (TypeScript only) interfaces
and type aliases out of a file with the language registry's element rules.
Every match yields one CodeElement; nothing is de-duplicated.
"""

import posixpath

from compass.services.navigator.languages import LanguageRules, rules_for
from compass.services.navigator.types import CodeElement


def extract_code_elements(content: str, file_path: str) -> list[CodeElement]:
    """
    Extract declared code elements from a source file.

    Args:
        content: Full file content
        file_path: Path relative to the repository root

    Returns:
        Elements in rule order, then match order. Empty for languages
        without element rules.
    """
    rules = rules_for(posixpath.splitext(file_path)[1])
    if rules is None:
        return []

    elements: list[CodeElement] = []
    for rule in rules.element_rules:
        for match in rule.pattern.finditer(content):
            groups = match.groupdict()
            methods: list[str] = []
            if rule.kind == "class" and groups.get("body"):
                methods = _extract_methods(groups["body"], rules)

            elements.append(
                CodeElement(
                    kind=rule.kind,
                    name=groups["name"],
                    file=file_path,
                    methods=methods,
                    is_async=bool(groups.get("async")),
                    is_exported=bool(groups.get("export")),
                )
            )

    return elements


def _extract_methods(body: str, rules: LanguageRules) -> list[str]:
    """Method names declared in a class body, first occurrence order."""
    if rules.method_pattern is None:
        return []

    names: list[str] = []
    for match in rules.method_pattern.finditer(body):
        name = match.group("name")
        if name in rules.method_exclusions or name in names:
            continue
        names.append(name)
    return names
