"""
Entry point detection for heuristic code analysis.

A file is an entry point when its path looks like one OR its content
contains a start-up signature for its language. Either signal alone is
enough, so names like "app_config.json" are flagged too.
"""

import posixpath

from compass.services.navigator.constants import ENTRY_POINT_NAMES
from compass.services.navigator.languages import rules_for


def has_entry_point_name(file_path: str) -> bool:
    """Check whether the lower-cased path contains a conventional entry point name."""
    lowered = file_path.lower()
    return any(name in lowered for name in ENTRY_POINT_NAMES)


def has_entry_point_signature(content: str, file_path: str) -> bool:
    """Check the file content against its language's start-up signatures."""
    rules = rules_for(posixpath.splitext(file_path)[1])
    if rules is None:
        return False
    return any(pattern.search(content) for pattern in rules.entry_signatures)


def is_entry_point(content: str, file_path: str) -> bool:
    """
    Decide whether a file is a probable program entry point.

    Args:
        content: Full file content
        file_path: Path relative to the repository root

    Returns:
        True if either the path or the content signals an entry point
    """
    return has_entry_point_name(file_path) or has_entry_point_signature(content, file_path)
