"""
CodebaseNavigator - Runs the phased codebase analysis.

Resolves the repository that owns a path, then executes one phase or all
four in canonical order, recording each in the session history. For phase
"all" the phase reports are combined into a comprehensive report.
"""

import asyncio
import logging
import os
from datetime import datetime, timezone

from compass.config import settings
from compass.schemas.analysis import AnalysisFailure, AnalysisResponse
from compass.services.navigator.analyzer import CodeAnalyzer
from compass.services.navigator.discovery import find_key_docs, find_repository_root
from compass.services.navigator.exceptions import InvalidInputError, UnsupportedPhaseError
from compass.services.navigator.reports import (
    format_phase_record,
    render_analysis,
    render_comprehensive,
    render_conceptual,
    render_structural,
    render_synthesis,
)
from compass.services.navigator.session import AnalysisSession
from compass.services.navigator.structure import render_project_structure
from compass.services.navigator.types import (
    AnalysisPhase,
    KeyDocument,
    PhaseRecord,
    PhaseReport,
)

logger = logging.getLogger(__name__)

ALL_PHASES = "all"


class CodebaseNavigator:
    """
    Entry point of the analysis pipeline.

    One navigator owns one AnalysisSession; every executed phase is
    appended to it and the synthesis phase reads it back.
    """

    def __init__(
        self,
        session: AnalysisSession | None = None,
        analyzer: CodeAnalyzer | None = None,
        scan_depth: int | None = None,
    ) -> None:
        self.session = session if session is not None else AnalysisSession()
        self.scan_depth = scan_depth if scan_depth is not None else settings.scan_depth
        self.analyzer = analyzer if analyzer is not None else CodeAnalyzer(max_depth=self.scan_depth)

    async def analyze(
        self, project_path: str, phase: str = ALL_PHASES
    ) -> AnalysisResponse | AnalysisFailure:
        """
        Analyze a project.

        Args:
            project_path: Path inside the project; its repository root is used
            phase: One of conceptual, structural, analysis, synthesis, or "all"

        Returns:
            AnalysisResponse on success. Any failure, including invalid
            input, comes back as an AnalysisFailure instead of raising.
        """
        try:
            return await self._analyze(project_path, phase)
        except Exception as e:
            logger.error(f"Analysis of {project_path!r} ({phase}) failed: {e}")
            return AnalysisFailure(error=str(e))

    async def _analyze(self, project_path: str, phase: str) -> AnalysisResponse:
        if not project_path or not os.path.exists(project_path):
            raise InvalidInputError()

        requested = self._parse_phase(phase)

        root = find_repository_root(project_path)
        moved = os.path.abspath(root) != os.path.abspath(project_path)
        if moved:
            logger.info(f"Using repository root {root} for {project_path}")

        location = {
            "project_path": root,
            "repository_root": root if moved else None,
            "provided_path": project_path if moved else None,
        }

        if requested is None:
            return await self._analyze_all(root, location)

        record = await self.run_phase(root, requested)
        return AnalysisResponse(
            phase=requested.value,
            findings=record.findings,
            next_phase_needed=record.next_phase_needed,
            analysis_history_length=len(self.session),
            suggested_next_phase=requested.suggested_next(),
            **location,
        )

    async def _analyze_all(self, root: str, location: dict) -> AnalysisResponse:
        logger.info(f"Starting comprehensive codebase analysis of {root}")

        key_docs = await asyncio.to_thread(find_key_docs, root, self.scan_depth)
        reports: dict[AnalysisPhase, PhaseReport] = {}
        for phase in AnalysisPhase.ordered():
            record = await self.run_phase(root, phase, key_docs=key_docs)
            reports[phase] = PhaseReport(findings=record.findings, summary=record.summary)

        findings = render_comprehensive(root, reports, key_docs)
        logger.info(f"Comprehensive analysis of {root} complete")

        return AnalysisResponse(
            phase="comprehensive",
            findings=findings,
            next_phase_needed=False,
            analysis_history_length=len(self.session),
            completed_phases=[p.value for p in reports],
            **location,
        )

    async def run_phase(
        self,
        root: str,
        phase: AnalysisPhase,
        key_docs: list[KeyDocument] | None = None,
    ) -> PhaseRecord:
        """
        Execute one phase against a repository root and record it.

        Args:
            root: Repository root (already resolved)
            phase: Phase to run
            key_docs: Key documents, when the caller already located them

        Returns:
            The PhaseRecord appended to the session
        """
        logger.info(f"Running {phase.value} phase for {root}")
        report = await self._render_phase(root, phase, key_docs)

        record = PhaseRecord(
            project_path=root,
            phase=phase,
            findings=report.findings,
            next_phase_needed=phase != AnalysisPhase.SYNTHESIS,
            timestamp=self._next_timestamp(),
            summary=report.summary,
        )
        self.session.append(record)

        if not settings.disable_analysis_logging:
            logger.info("\n" + format_phase_record(record))

        return record

    async def _render_phase(
        self,
        root: str,
        phase: AnalysisPhase,
        key_docs: list[KeyDocument] | None,
    ) -> PhaseReport:
        if phase == AnalysisPhase.CONCEPTUAL:
            if key_docs is None:
                key_docs = await asyncio.to_thread(find_key_docs, root, self.scan_depth)
            return await asyncio.to_thread(render_conceptual, root, key_docs)

        if phase == AnalysisPhase.STRUCTURAL:
            listing = await render_project_structure(root)
            return render_structural(root, listing)

        if phase == AnalysisPhase.ANALYSIS:
            result = await asyncio.to_thread(self.analyzer.analyze, root)
            return render_analysis(root, result)

        return render_synthesis(root, self.session)

    def _next_timestamp(self) -> datetime:
        """Current UTC time, never earlier than the latest recorded phase."""
        now = datetime.now(timezone.utc)
        if len(self.session):
            latest = self.session.records[-1].timestamp
            if now < latest:
                return latest
        return now

    @staticmethod
    def _parse_phase(phase: str) -> AnalysisPhase | None:
        """Map a phase name to AnalysisPhase; None means all phases."""
        if phase == ALL_PHASES:
            return None
        try:
            return AnalysisPhase(phase)
        except ValueError:
            raise UnsupportedPhaseError(phase) from None
