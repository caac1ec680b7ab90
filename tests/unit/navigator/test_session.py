"""
Tests for AnalysisSession.

Tests cover:
- Append-only ordering and the timestamp guard
- recent() windowing
- latest() lookup by phase and project
"""

from datetime import datetime, timedelta, timezone

import pytest

from compass.services.navigator.session import AnalysisSession
from compass.services.navigator.types import AnalysisPhase, PhaseRecord

T0 = datetime(2026, 5, 1, 12, 0, tzinfo=timezone.utc)


def _record(phase: AnalysisPhase, minutes: int = 0, project: str = "/p/one") -> PhaseRecord:
    return PhaseRecord(
        project_path=project,
        phase=phase,
        findings=f"{phase.value}@{minutes}",
        next_phase_needed=True,
        timestamp=T0 + timedelta(minutes=minutes),
    )


class TestAppend:
    """Tests for the append-only log."""

    def setup_method(self) -> None:
        self.session = AnalysisSession()

    def test_starts_empty(self) -> None:
        """A new session holds no records."""
        assert len(self.session) == 0
        assert self.session.records == ()

    def test_preserves_order(self) -> None:
        """Records come back in append order."""
        self.session.append(_record(AnalysisPhase.CONCEPTUAL, 0))
        self.session.append(_record(AnalysisPhase.STRUCTURAL, 1))
        assert [r.phase for r in self.session.records] == [
            AnalysisPhase.CONCEPTUAL,
            AnalysisPhase.STRUCTURAL,
        ]

    def test_equal_timestamps_allowed(self) -> None:
        """Non-decreasing, not strictly increasing."""
        self.session.append(_record(AnalysisPhase.CONCEPTUAL, 5))
        self.session.append(_record(AnalysisPhase.STRUCTURAL, 5))
        assert len(self.session) == 2

    def test_rejects_older_record(self) -> None:
        """A record older than the latest one is refused."""
        self.session.append(_record(AnalysisPhase.CONCEPTUAL, 5))
        with pytest.raises(ValueError, match="older than"):
            self.session.append(_record(AnalysisPhase.STRUCTURAL, 4))
        assert len(self.session) == 1

    def test_records_is_a_snapshot(self) -> None:
        """The records view cannot mutate the history."""
        self.session.append(_record(AnalysisPhase.CONCEPTUAL))
        snapshot = self.session.records
        self.session.append(_record(AnalysisPhase.STRUCTURAL, 1))
        assert len(snapshot) == 1


class TestRecent:
    """Tests for recent()."""

    def setup_method(self) -> None:
        self.session = AnalysisSession()
        for minutes, phase in enumerate(AnalysisPhase.ordered()):
            self.session.append(_record(phase, minutes))

    def test_last_n_oldest_first(self) -> None:
        """recent(2) returns the last two in append order."""
        assert [r.phase for r in self.session.recent(2)] == [
            AnalysisPhase.ANALYSIS,
            AnalysisPhase.SYNTHESIS,
        ]

    def test_more_than_available(self) -> None:
        """Asking for more than exist returns everything."""
        assert len(self.session.recent(10)) == 4

    @pytest.mark.parametrize("count", [0, -1])
    def test_non_positive_count(self, count: int) -> None:
        """Zero or negative counts return nothing."""
        assert self.session.recent(count) == []


class TestLatest:
    """Tests for latest()."""

    def test_most_recent_of_phase(self) -> None:
        """The newest record of the phase wins."""
        session = AnalysisSession()
        session.append(_record(AnalysisPhase.CONCEPTUAL, 0))
        session.append(_record(AnalysisPhase.CONCEPTUAL, 1))

        assert session.latest(AnalysisPhase.CONCEPTUAL).findings == "conceptual@1"

    def test_filters_by_project(self) -> None:
        """project_path restricts the lookup."""
        session = AnalysisSession()
        session.append(_record(AnalysisPhase.ANALYSIS, 0, project="/p/one"))
        session.append(_record(AnalysisPhase.ANALYSIS, 1, project="/p/two"))

        assert session.latest(AnalysisPhase.ANALYSIS, project_path="/p/one").findings == "analysis@0"
        assert session.latest(AnalysisPhase.ANALYSIS).findings == "analysis@1"

    def test_missing_phase(self) -> None:
        """None when nothing matches."""
        session = AnalysisSession()
        session.append(_record(AnalysisPhase.CONCEPTUAL))
        assert session.latest(AnalysisPhase.SYNTHESIS) is None
        assert session.latest(AnalysisPhase.CONCEPTUAL, project_path="/elsewhere") is None
