"""
CodeAnalyzer - Heuristic, regex-based analysis of a local repository.

Reads every source file under a root and runs five independent passes over
each one: dependencies, entry point, idioms, architecture and code
elements. A failing pass is logged and recorded; it never stops the other
passes or files.
"""

import logging
from collections.abc import Callable

from compass.services.navigator.aggregator import build_code_structure
from compass.services.navigator.constants import MAX_SCAN_DEPTH
from compass.services.navigator.dependencies import extract_dependencies
from compass.services.navigator.discovery import find_source_files, read_file_record
from compass.services.navigator.elements import extract_code_elements
from compass.services.navigator.entry_points import is_entry_point
from compass.services.navigator.patterns import detect_architecture, detect_idioms
from compass.services.navigator.types import CodeAnalysisResult, FileRecord

logger = logging.getLogger(__name__)


def _dedupe(items: list[str]) -> list[str]:
    """Drop repeats, keeping first-occurrence order."""
    return list(dict.fromkeys(items))


# ─────────────────────────────────────────────────────────────
# Per-file passes
# ─────────────────────────────────────────────────────────────


def _dependency_pass(record: FileRecord, result: CodeAnalysisResult) -> None:
    result.dependencies.extend(extract_dependencies(record.content, record.extension))


def _entry_point_pass(record: FileRecord, result: CodeAnalysisResult) -> None:
    if is_entry_point(record.content, record.path):
        result.entry_points.append(record.path)


def _idiom_pass(record: FileRecord, result: CodeAnalysisResult) -> None:
    result.patterns.extend(detect_idioms(record.content))


def _architecture_pass(record: FileRecord, result: CodeAnalysisResult) -> None:
    result.architecture.extend(detect_architecture(record.content))


def _element_pass(record: FileRecord, result: CodeAnalysisResult) -> None:
    result.code_elements.extend(extract_code_elements(record.content, record.path))


FILE_PASSES: list[tuple[str, Callable[[FileRecord, CodeAnalysisResult], None]]] = [
    ("dependencies", _dependency_pass),
    ("entry point", _entry_point_pass),
    ("idioms", _idiom_pass),
    ("architecture", _architecture_pass),
    ("code elements", _element_pass),
]


class CodeAnalyzer:
    """
    Runs the heuristic passes over every source file of a repository.

    Files are processed one at a time in traversal order.
    """

    def __init__(self, max_depth: int = MAX_SCAN_DEPTH, max_file_bytes: int | None = None) -> None:
        self.max_depth = max_depth
        self.max_file_bytes = max_file_bytes

    def analyze(self, root: str) -> CodeAnalysisResult:
        """
        Analyze all source files under a repository root.

        Args:
            root: Repository root directory

        Returns:
            CodeAnalysisResult with de-duplicated dependency, entry point,
            idiom and architecture lists, every code element, and the
            structure summary
        """
        result = CodeAnalysisResult()

        for path in find_source_files(root, self.max_depth):
            record = read_file_record(root, path, self.max_file_bytes)
            if record is None:
                continue

            logger.debug(f"Analyzing {record.path} ({record.lines} lines)")
            result.files.append(record)
            self._run_passes(record, result)

        result.dependencies = _dedupe(result.dependencies)
        result.entry_points = _dedupe(result.entry_points)
        result.patterns = _dedupe(result.patterns)
        result.architecture = _dedupe(result.architecture)
        result.structure = build_code_structure(result.files)

        logger.info(
            f"Analyzed {len(result.files)} files under {root}: "
            f"{len(result.dependencies)} dependencies, {len(result.entry_points)} entry points, "
            f"{len(result.code_elements)} code elements"
        )
        return result

    def _run_passes(self, record: FileRecord, result: CodeAnalysisResult) -> None:
        for pass_name, run in FILE_PASSES:
            try:
                run(record, result)
            except Exception as e:
                error_msg = f"{pass_name} pass failed for {record.path}: {e}"
                logger.warning(error_msg)
                result.errors.append(error_msg)
