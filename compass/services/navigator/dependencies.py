"""
Dependency extraction for heuristic code analysis.

Pulls imported module names out of source text with the per-language rules
from the language registry.
"""

from compass.services.navigator.languages import rules_for


def extract_dependencies(content: str, extension: str) -> list[str]:
    """
    Extract imported module names from a source file.

    Args:
        content: Full file content
        extension: File extension including the dot (e.g. ".ts")

    Returns:
        Module names in order of appearance in the file. Relative imports
        (leading ".") are dropped, as are files in languages without rules.
    """
    rules = rules_for(extension)
    if rules is None:
        return []

    # (offset, module) pairs so several rules interleave in file order
    found: list[tuple[int, str]] = []
    for rule in rules.dependency_rules:
        for match in rule.pattern.finditer(content):
            module_text = match.group("module")
            if rule.split is not None:
                found.extend((match.start(), m.strip()) for m in rule.split.findall(module_text))
            else:
                found.append((match.start(), module_text.strip()))

    found.sort(key=lambda item: item[0])
    return [module for _, module in found if module and not module.startswith(".")]
