"""
Shared data types for the codebase navigator.

These dataclasses flow between the locators, the heuristic analyzer, the
report renderers and the orchestrator.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class AnalysisPhase(str, Enum):
    """The four analysis phases, declared in canonical order."""

    CONCEPTUAL = "conceptual"
    STRUCTURAL = "structural"
    ANALYSIS = "analysis"
    SYNTHESIS = "synthesis"

    @classmethod
    def ordered(cls) -> list["AnalysisPhase"]:
        """Return the phases in canonical order."""
        return list(cls)

    def suggested_next(self) -> str:
        """Name of the phase that usually follows this one, or "complete"."""
        phases = self.ordered()
        index = phases.index(self)
        if index < len(phases) - 1:
            return phases[index + 1].value
        return "complete"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class Complexity(str, Enum):
    """Coarse size tier of a codebase, by total line count."""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


# ─────────────────────────────────────────────────────────────
# Discovery Types
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class KeyDocument:
    """A markdown file matching one of the onboarding document patterns."""

    path: str  # Absolute path
    name: str  # Bare file name, e.g. "README.md"
    relative_path: str  # Path relative to the repository root


@dataclass
class FileRecord:
    """A source file read during one analysis run."""

    path: str  # Relative to the repository root, POSIX separators
    content: str
    size: int  # Characters
    lines: int
    extension: str  # Including the dot, "" when the file has none


# ─────────────────────────────────────────────────────────────
# Analysis Types
# ─────────────────────────────────────────────────────────────


@dataclass
class CodeElement:
    """A class/function/type declaration carved out of a source file."""

    kind: str  # "class", "function", "arrow_function", "interface", "type"
    name: str
    file: str
    methods: list[str] = field(default_factory=list)  # Classes only
    is_async: bool = False
    is_exported: bool = False


@dataclass
class ExtensionStats:
    """File count and line total for one extension."""

    count: int = 0
    total_lines: int = 0


@dataclass(frozen=True)
class LargestFile:
    """Entry in the largest-files ranking."""

    path: str
    lines: int
    size: int


@dataclass
class CodeStructureSummary:
    """Aggregate statistics over every analyzed file."""

    total_files: int
    total_lines: int
    total_size: int
    files_by_extension: dict[str, ExtensionStats]
    largest_files: list[LargestFile]
    complexity: Complexity


@dataclass
class CodeAnalysisResult:
    """Combined output of the heuristic analyzer for one repository."""

    dependencies: list[str] = field(default_factory=list)  # De-duplicated
    entry_points: list[str] = field(default_factory=list)  # De-duplicated
    patterns: list[str] = field(default_factory=list)  # Idiom tags, de-duplicated
    architecture: list[str] = field(default_factory=list)  # De-duplicated
    code_elements: list[CodeElement] = field(default_factory=list)  # Never de-duplicated
    files: list[FileRecord] = field(default_factory=list)
    structure: CodeStructureSummary | None = None
    errors: list[str] = field(default_factory=list)


# ─────────────────────────────────────────────────────────────
# Report Types
# ─────────────────────────────────────────────────────────────


@dataclass
class PhaseSummary:
    """
    Structured facts produced alongside a phase report.

    The comprehensive report and the synthesis phase read these instead of
    searching the rendered markdown. Fields a phase does not know about stay
    at their defaults.
    """

    key_document_count: int | None = None
    project_types: list[str] = field(default_factory=list)
    has_src_directory: bool = False
    has_tests: bool = False
    has_docs_directory: bool = False
    has_entry_points: bool = False
    entry_point_count: int = 0
    external_dependency_count: int = 0
    complexity: Complexity | None = None
    total_files: int = 0
    total_lines: int = 0
    idioms: list[str] = field(default_factory=list)
    architecture: list[str] = field(default_factory=list)


@dataclass
class PhaseReport:
    """Rendered findings of one phase plus its structured summary."""

    findings: str
    summary: PhaseSummary = field(default_factory=PhaseSummary)


@dataclass(frozen=True)
class PhaseRecord:
    """One executed phase, as kept in the analysis history."""

    project_path: str
    phase: AnalysisPhase
    findings: str
    next_phase_needed: bool
    timestamp: datetime
    summary: PhaseSummary = field(default_factory=PhaseSummary)
