"""
Structure aggregation over analyzed files.

Pure functions: totals, per-extension breakdown, the largest files and a
coarse complexity tier.
"""

from compass.services.navigator.constants import (
    COMPLEXITY_HIGH_THRESHOLD,
    COMPLEXITY_MEDIUM_THRESHOLD,
    LARGEST_FILES_LIMIT,
)
from compass.services.navigator.types import (
    CodeStructureSummary,
    Complexity,
    ExtensionStats,
    FileRecord,
    LargestFile,
)

NO_EXTENSION = "no-extension"


def classify_complexity(total_lines: int) -> Complexity:
    """Low below 1000 lines, High above 5000, Medium in between (inclusive)."""
    if total_lines < COMPLEXITY_MEDIUM_THRESHOLD:
        return Complexity.LOW
    if total_lines > COMPLEXITY_HIGH_THRESHOLD:
        return Complexity.HIGH
    return Complexity.MEDIUM


def build_code_structure(files: list[FileRecord]) -> CodeStructureSummary:
    """
    Aggregate statistics over a list of file records.

    Args:
        files: Records in traversal order (not modified)

    Returns:
        CodeStructureSummary. Largest files are ranked by line count; ties
        keep traversal order.
    """
    by_extension: dict[str, ExtensionStats] = {}
    for record in files:
        stats = by_extension.setdefault(record.extension or NO_EXTENSION, ExtensionStats())
        stats.count += 1
        stats.total_lines += record.lines

    total_lines = sum(f.lines for f in files)
    ranked = sorted(files, key=lambda f: f.lines, reverse=True)[:LARGEST_FILES_LIMIT]

    return CodeStructureSummary(
        total_files=len(files),
        total_lines=total_lines,
        total_size=sum(f.size for f in files),
        files_by_extension=by_extension,
        largest_files=[LargestFile(path=f.path, lines=f.lines, size=f.size) for f in ranked],
        complexity=classify_complexity(total_lines),
    )
