"""
Phase report rendering for the codebase navigator.

Each phase renderer returns a PhaseReport: the markdown findings shown to
the developer plus a PhaseSummary with the structured facts later stages
need. The synthesis phase and the comprehensive report read those
summaries, never the rendered text.
"""

import os
import re
from collections.abc import Mapping
from datetime import datetime, timezone

from compass.services.navigator.constants import (
    DOC_SUMMARY_MAX_CHARS,
    DOC_SUMMARY_MIN_CHARS,
    MAX_DOC_SUMMARIES,
    MAX_LISTED_DEPENDENCIES,
    MAX_LISTED_ELEMENTS,
    MAX_METHOD_PREVIEW,
    MAX_PREVIEW_FILES,
    PREVIEW_LINES,
    PREVIEW_MIN_LINES,
    SYNTHESIS_RECENT_RECORDS,
)
from compass.services.navigator.session import AnalysisSession
from compass.services.navigator.types import (
    AnalysisPhase,
    CodeAnalysisResult,
    CodeElement,
    KeyDocument,
    PhaseRecord,
    PhaseReport,
    PhaseSummary,
)

PHASE_ICONS = {
    AnalysisPhase.CONCEPTUAL: "📚",
    AnalysisPhase.STRUCTURAL: "🏗️",
    AnalysisPhase.ANALYSIS: "🔍",
    AnalysisPhase.SYNTHESIS: "📊",
}

# Element kinds in display order, with their section titles
ELEMENT_SECTIONS = [
    ("class", "Classes"),
    ("function", "Functions"),
    ("arrow_function", "Arrow Functions"),
    ("interface", "Interfaces"),
    ("type", "Type Aliases"),
]

COMMENT_PREFIXES = ("//", "#", "/*", "*", "--", "<!--")

# (pattern over the listing, observation line, project type or None)
STRUCTURE_OBSERVATIONS = [
    (re.compile(r"(?<![\w.-])src/"), "- ✅ Source code organized in `src/` directory", None),
    (re.compile(r"package\.json"), "- 📦 Node.js/JavaScript project detected", "Node.js/JavaScript"),
    (re.compile(r"requirements\.txt|\.py\b"), "- 🐍 Python project detected", "Python"),
    (re.compile(r"Cargo\.toml"), "- 🦀 Rust project detected", "Rust"),
    (re.compile(r"pom\.xml|build\.gradle"), "- ☕ Java project with build system detected", "Java"),
    (re.compile(r"go\.mod"), "- 🐹 Go project detected", "Go"),
    (re.compile(r"(?<![\w.-])tests?/"), "- 🧪 Testing directories found", None),
    (re.compile(r"(?<![\w.-])(?:docs|documentation)/"), "- 📖 Documentation directory present", None),
]

_SRC_OBSERVATION = STRUCTURE_OBSERVATIONS[0][1]
_TESTS_OBSERVATION = STRUCTURE_OBSERVATIONS[6][1]
_DOCS_OBSERVATION = STRUCTURE_OBSERVATIONS[7][1]


def _project_name(root: str) -> str:
    return os.path.basename(os.path.normpath(root)) or root


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


# ─────────────────────────────────────────────────────────────
# Phase 1: Conceptual
# ─────────────────────────────────────────────────────────────


def summarize_document(content: str) -> str:
    """
    One-line summary of a document.

    Takes the first line with more than 20 non-blank characters (else the
    first line), trimmed and cut to 150 characters with a trailing "...".
    """
    lines = content.split("\n")
    chosen = next(
        (line for line in lines if len(line.strip()) > DOC_SUMMARY_MIN_CHARS),
        lines[0] if lines else "",
    ).strip()

    if len(chosen) > DOC_SUMMARY_MAX_CHARS:
        return chosen[:DOC_SUMMARY_MAX_CHARS] + "..."
    return chosen


def render_conceptual(root: str, key_docs: list[KeyDocument]) -> PhaseReport:
    """Render the conceptual phase: which key documents exist and what they say."""
    out = ["# Phase 1: Conceptual Understanding\n"]
    out.append("Identifying key conceptual and planning documents for project context.\n")
    out.append(f"**Key Documents Found:** {len(key_docs)}\n")

    if key_docs:
        out.append("**Document Summaries:**")
        for doc in key_docs[:MAX_DOC_SUMMARIES]:
            try:
                with open(doc.path, encoding="utf-8", errors="replace") as f:
                    summary = summarize_document(f.read())
            except OSError:
                summary = "Could not read file"
            out.append(f"- **{doc.name}** ({doc.relative_path}): {summary}")
        out.append("")

        remaining = key_docs[MAX_DOC_SUMMARIES:]
        if remaining:
            out.append("**Other Documentation Files:**")
            out.extend(f"- **{doc.name}** ({doc.relative_path})" for doc in remaining)
            out.append("")
    else:
        out.append("**Note:** No key documentation files found in standard locations.\n")

    return PhaseReport(
        findings="\n".join(out),
        summary=PhaseSummary(key_document_count=len(key_docs)),
    )


# ─────────────────────────────────────────────────────────────
# Phase 2: Structural
# ─────────────────────────────────────────────────────────────


def render_structural(root: str, listing: str) -> PhaseReport:
    """Render the structural phase around a directory listing."""
    out = ["# Phase 2: Structural Scaffolding\n"]
    out.append(
        "High-level overview of the codebase's physical layout (like running `tree` command).\n"
    )
    out.append("## Project Structure:\n")
    out.append(f"```\n{listing}\n```\n")
    out.append("## Key Observations:\n")

    observations: list[str] = []
    project_types: list[str] = []
    for pattern, observation, project_type in STRUCTURE_OBSERVATIONS:
        if pattern.search(listing):
            observations.append(observation)
            if project_type:
                project_types.append(project_type)

    out.extend(observations or ["- No conventional project layout markers detected"])
    out.append("")

    return PhaseReport(
        findings="\n".join(out),
        summary=PhaseSummary(
            project_types=project_types,
            has_src_directory=_SRC_OBSERVATION in observations,
            has_tests=_TESTS_OBSERVATION in observations,
            has_docs_directory=_DOCS_OBSERVATION in observations,
        ),
    )


# ─────────────────────────────────────────────────────────────
# Phase 3: Analysis
# ─────────────────────────────────────────────────────────────


def _bounded_list(items: list[str], limit: int, noun: str = "") -> list[str]:
    lines = [f"- {item}" for item in items[:limit]]
    if len(items) > limit:
        suffix = f" {noun}" if noun else ""
        lines.append(f"- ... and {len(items) - limit} more{suffix}")
    return lines


def _format_element(element: CodeElement) -> str:
    line = f"- **{element.name}** ({element.file})"
    if element.is_async:
        line += " [async]"
    if element.is_exported:
        line += " [exported]"
    if element.methods:
        preview = ", ".join(element.methods[:MAX_METHOD_PREVIEW])
        if len(element.methods) > MAX_METHOD_PREVIEW:
            preview += f", +{len(element.methods) - MAX_METHOD_PREVIEW} more"
        line += f": methods {preview}"
    return line


def _preview_lines(content: str) -> list[str]:
    """First few non-blank, non-comment lines of a file."""
    preview: list[str] = []
    for line in content.split("\n"):
        stripped = line.strip()
        if not stripped or stripped.startswith(COMMENT_PREFIXES):
            continue
        preview.append(line.rstrip())
        if len(preview) == PREVIEW_LINES:
            break
    return preview


def render_analysis(root: str, result: CodeAnalysisResult) -> PhaseReport:
    """Render the in-depth analysis phase from the analyzer's result."""
    out = ["# Phase 3: In-Depth Code Analysis\n"]
    out.append(
        "Focusing on file dependencies, relationships, data flow, and component interactions.\n"
    )

    # Statistics
    structure = result.structure
    out.append("## 📊 Code Statistics\n")
    if structure is not None:
        out.append(f"- **Total Files:** {structure.total_files:,}")
        out.append(f"- **Total Lines:** {structure.total_lines:,}")
        out.append(f"- **Total Size:** {structure.total_size:,} characters")
        out.append(f"- **Complexity:** {structure.complexity.value}\n")

        if structure.files_by_extension:
            out.append("**Files by Extension:**\n")
            out.append("| Extension | Files | Lines |")
            out.append("| --- | --- | --- |")
            for extension, stats in structure.files_by_extension.items():
                out.append(f"| {extension} | {stats.count} | {stats.total_lines:,} |")
            out.append("")

        if structure.largest_files:
            out.append("**Largest Files:**")
            for largest in structure.largest_files:
                out.append(f"- `{largest.path}` ({largest.lines:,} lines)")
            out.append("")
    else:
        out.append("- No source files analyzed\n")

    # Dependencies
    out.append("## 🔗 Dependencies & Module Relationships\n")
    external = [d for d in result.dependencies if not d.startswith(".")]
    internal = [d for d in result.dependencies if d.startswith(".")]
    if external:
        out.append("**External Dependencies:**")
        out.extend(_bounded_list(external, MAX_LISTED_DEPENDENCIES))
        out.append("")
    if internal:
        out.append("**Internal Module Imports:**")
        out.extend(_bounded_list(internal, MAX_LISTED_DEPENDENCIES))
        out.append("")
    if not result.dependencies:
        out.append("- No dependencies detected\n")

    # Entry points
    out.append("## 🚪 Entry Points\n")
    if result.entry_points:
        out.extend(f"- **{entry}**" for entry in result.entry_points)
    else:
        out.append("- No clear entry points identified")
    out.append("")

    # Code elements
    out.append("## ⚙️ Key Code Elements\n")
    if result.code_elements:
        for kind, title in ELEMENT_SECTIONS:
            elements = [e for e in result.code_elements if e.kind == kind]
            if not elements:
                continue
            out.append(f"**{title} ({len(elements)}):**")
            out.extend(_format_element(e) for e in elements[:MAX_LISTED_ELEMENTS])
            if len(elements) > MAX_LISTED_ELEMENTS:
                out.append(f"- ... and {len(elements) - MAX_LISTED_ELEMENTS} more {title.lower()}")
            out.append("")
    else:
        out.append("- No code elements detected\n")

    # Idioms and architecture
    idioms = _dedupe(result.patterns)
    architecture = _dedupe(result.architecture)

    out.append("## 🧩 Programming Idioms\n")
    out.extend([f"- {tag}" for tag in idioms] or ["- No specific idioms detected"])
    out.append("")

    out.append("## 🏗️ Architectural Patterns\n")
    out.extend([f"- {tag}" for tag in architecture] or ["- No specific patterns detected"])
    out.append("")

    # Previews of the bigger files
    long_files = [f for f in result.files if f.lines > PREVIEW_MIN_LINES][:MAX_PREVIEW_FILES]
    if long_files:
        out.append("## 👀 Content Previews\n")
        for record in long_files:
            out.append(f"**{record.path}** ({record.lines:,} lines)")
            out.append("```")
            out.extend(_preview_lines(record.content))
            out.append("```\n")

    return PhaseReport(
        findings="\n".join(out),
        summary=PhaseSummary(
            has_tests="Testing" in idioms,
            has_entry_points=bool(result.entry_points),
            entry_point_count=len(result.entry_points),
            external_dependency_count=len(external),
            complexity=structure.complexity if structure is not None else None,
            total_files=structure.total_files if structure is not None else 0,
            total_lines=structure.total_lines if structure is not None else 0,
            idioms=idioms,
            architecture=architecture,
        ),
    )


# ─────────────────────────────────────────────────────────────
# Phase 4: Synthesis
# ─────────────────────────────────────────────────────────────


def _insight_lines(
    conceptual: PhaseSummary | None,
    structural: PhaseSummary | None,
    analysis: PhaseSummary | None,
) -> list[str]:
    has_docs = conceptual is not None and bool(conceptual.key_document_count)
    has_src = structural is not None and structural.has_src_directory
    has_entries = analysis is not None and analysis.has_entry_points

    return [
        "- **Documentation:** "
        + ("Key documents available for context" if has_docs else "Limited documentation found"),
        "- **Organization:** "
        + ("Well-structured with src/ directory" if has_src else "Custom or flat structure"),
        "- **Entry Points:** "
        + ("Clear entry points identified" if has_entries else "Entry points need investigation"),
    ]


def render_synthesis(root: str, history: AnalysisSession) -> PhaseReport:
    """
    Render the synthesis phase from the session history.

    Works with an empty history; insights then fall back to their
    "needs investigation" wording.
    """
    out = ["# Phase 4: Synthesis and Reporting\n"]
    out.append(
        "Presenting insights for developers new to the project who need to quickly grasp "
        "the overall structure and file-to-file connectivity.\n"
    )

    out.append("## 📝 Summary for New Developers\n")
    out.append(f"**Project:** {_project_name(root)}")
    out.append(f"**Analysis completed:** {len(history)} phases\n")

    recent = history.recent(SYNTHESIS_RECENT_RECORDS)
    out.append("**Recent Phases:**")
    if recent:
        for record in recent:
            out.append(
                f"- **{record.phase.label} Phase** ({_project_name(record.project_path)}): "
                f"completed at {record.timestamp.isoformat()}"
            )
    else:
        out.append("- No phases recorded yet")
    out.append("")

    def latest_summary(phase: AnalysisPhase) -> PhaseSummary | None:
        record = history.latest(phase, project_path=root)
        return record.summary if record is not None else None

    out.append("## 🎯 Key Insights\n")
    out.extend(
        _insight_lines(
            latest_summary(AnalysisPhase.CONCEPTUAL),
            latest_summary(AnalysisPhase.STRUCTURAL),
            latest_summary(AnalysisPhase.ANALYSIS),
        )
    )

    out.append("\n## 🚀 Quick Start Recommendations\n")
    out.append("1. **Start with documentation** - Review any README or key docs found")
    out.append("2. **Understand the structure** - Navigate the directory layout")
    out.append("3. **Find entry points** - Look for main files or startup scripts")
    out.append("4. **Trace dependencies** - Follow import/require statements between files")
    out.append("5. **Identify patterns** - Look for consistent architectural approaches")

    out.append("\n## ➡️ Next Steps\n")
    out.append("- Set up development environment according to project requirements")
    out.append("- Run the application and explore its functionality")
    out.append("- Identify areas for contribution or improvement")
    out.append("")

    return PhaseReport(findings="\n".join(out), summary=PhaseSummary())


# ─────────────────────────────────────────────────────────────
# Comprehensive Report
# ─────────────────────────────────────────────────────────────


def render_comprehensive(
    root: str,
    phase_reports: Mapping[AnalysisPhase, PhaseReport],
    key_docs: list[KeyDocument],
    generated_at: datetime | None = None,
) -> str:
    """
    Combine the four phase reports into one onboarding document.

    The executive summary and health indicators are computed from the phase
    summaries. Phases missing from `phase_reports` are reported as unknown.

    Args:
        root: Repository root
        phase_reports: Reports of the phases that ran, keyed by phase
        key_docs: Key documents found during the conceptual phase
        generated_at: Report date (defaults to now, UTC)

    Returns:
        The report markdown
    """
    date = (generated_at or datetime.now(timezone.utc)).date().isoformat()

    def summary_of(phase: AnalysisPhase) -> PhaseSummary | None:
        report = phase_reports.get(phase)
        return report.summary if report is not None else None

    conceptual = summary_of(AnalysisPhase.CONCEPTUAL)
    structural = summary_of(AnalysisPhase.STRUCTURAL)
    analysis = summary_of(AnalysisPhase.ANALYSIS)

    out = ["# 📊 CODEBASE OVERVIEW AND CONTEXT\n"]
    out.append(f"**Project:** {_project_name(root)}")
    out.append(f"**Analysis Date:** {date}\n")

    # Executive summary
    project_types = structural.project_types if structural is not None else []
    out.append("## 📋 Executive Summary\n")
    out.append(f"- **Project Type:** {', '.join(project_types) or 'Not identified'}")
    if analysis is not None and analysis.complexity is not None:
        out.append(f"- **Complexity:** {analysis.complexity.value}")
        out.append(f"- **Size:** {analysis.total_files:,} files, {analysis.total_lines:,} lines")
    else:
        out.append("- **Complexity:** Unknown")
        out.append("- **Size:** Unknown")
    out.append("")

    # Health indicators
    out.append("## 🩺 Project Health Indicators\n")

    if conceptual is None or conceptual.key_document_count is None:
        out.append("- **Documentation:** ❔ Not analyzed")
    elif conceptual.key_document_count > 0:
        out.append(f"- **Documentation:** ✅ {conceptual.key_document_count} key documents found")
    else:
        out.append("- **Documentation:** ⚠️ No key documentation found")

    if structural is None:
        out.append("- **Organization:** ❔ Not analyzed")
    elif structural.has_src_directory:
        out.append("- **Organization:** ✅ Source code organized in `src/`")
    else:
        out.append("- **Organization:** ℹ️ Custom or flat structure")

    has_tests = (structural is not None and structural.has_tests) or (
        analysis is not None and analysis.has_tests
    )
    if structural is None and analysis is None:
        out.append("- **Testing:** ❔ Not analyzed")
    elif has_tests:
        out.append("- **Testing:** ✅ Tests detected")
    else:
        out.append("- **Testing:** ⚠️ No tests detected")

    if analysis is None:
        out.append("- **Entry Points:** ❔ Not analyzed")
        out.append("- **Dependencies:** ❔ Not analyzed")
    else:
        if analysis.has_entry_points:
            out.append(f"- **Entry Points:** ✅ {analysis.entry_point_count} identified")
        else:
            out.append("- **Entry Points:** ⚠️ Entry points need investigation")
        out.append(
            f"- **Dependencies:** {analysis.external_dependency_count} external dependencies"
        )
    out.append("\n---\n")

    # Phase findings, canonical order
    for phase in AnalysisPhase.ordered():
        report = phase_reports.get(phase)
        if report is not None:
            out.append(report.findings)
            out.append("")

    out.append("---\n")

    out.append("## 🧭 Developer Onboarding Checklist\n")
    out.append("1. Read the key documentation files listed below")
    out.append("2. Walk the directory layout from the structural phase")
    out.append("3. Open each entry point and trace the start-up flow")
    out.append("4. Follow imports between modules to map dependencies")
    out.append("5. Note the idioms and architectural patterns in use")
    out.append("6. Set up the development environment and run the project")
    out.append("")

    if key_docs:
        out.append("## 📖 Next Steps for Complete Understanding\n")
        out.append(
            "For comprehensive project context, please read the following key "
            "documentation files:\n"
        )
        out.extend(f"- **{doc.name}** - `{doc.relative_path}`" for doc in key_docs)
        out.append(
            "\nThese files contain important project goals, requirements, architecture "
            "decisions, and implementation details that complement this structural analysis.\n"
        )

    out.append("*Analysis completed by Repo Compass*")
    return "\n".join(out) + "\n"


# ─────────────────────────────────────────────────────────────
# Diagnostics
# ─────────────────────────────────────────────────────────────


def format_phase_record(record: PhaseRecord) -> str:
    """Boxed banner (phase, project, time) followed by the phase findings."""
    header = f"{PHASE_ICONS[record.phase]} Phase {record.phase.label}"
    border = "═" * max(len(header), 50)
    width = len(border)
    project = _project_name(record.project_path)
    timestamp = record.timestamp.isoformat()

    return (
        f"╔{border}╗\n"
        f"║ {header.ljust(width - 2)} ║\n"
        f"╠{border}╣\n"
        f"║ Project: {project.ljust(width - 11)} ║\n"
        f"║ Time: {timestamp.ljust(width - 8)} ║\n"
        f"╚{border}╝\n\n"
        f"{record.findings}\n"
    )
