"""
Analysis history for one navigator session.
"""

from compass.services.navigator.types import AnalysisPhase, PhaseRecord


class AnalysisSession:
    """
    Ordered, append-only log of executed phases.

    Records are never removed and their timestamps never go backwards.
    """

    def __init__(self) -> None:
        self._records: list[PhaseRecord] = []

    def append(self, record: PhaseRecord) -> None:
        if self._records and record.timestamp < self._records[-1].timestamp:
            raise ValueError(
                f"Phase record at {record.timestamp.isoformat()} is older than "
                f"the latest record at {self._records[-1].timestamp.isoformat()}"
            )
        self._records.append(record)

    @property
    def records(self) -> tuple[PhaseRecord, ...]:
        return tuple(self._records)

    def recent(self, count: int) -> list[PhaseRecord]:
        """The last `count` records, oldest first."""
        if count <= 0:
            return []
        return self._records[-count:]

    def latest(self, phase: AnalysisPhase, project_path: str | None = None) -> PhaseRecord | None:
        """Most recent record of a phase, optionally restricted to one project."""
        for record in reversed(self._records):
            if record.phase != phase:
                continue
            if project_path is None or record.project_path == project_path:
                return record
        return None

    def __len__(self) -> int:
        return len(self._records)
