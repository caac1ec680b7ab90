"""
Tests for structure aggregation.

Tests cover:
- Totals and per-extension grouping
- Largest file ranking with stable ties
- Complexity thresholds
- Input is left untouched
"""

import copy

from compass.services.navigator.aggregator import build_code_structure, classify_complexity
from compass.services.navigator.types import Complexity, FileRecord


def _record(path: str, lines: int, extension: str | None = None) -> FileRecord:
    content = "\n".join(["x"] * lines)
    if extension is None:
        extension = "." + path.rsplit(".", 1)[1] if "." in path else ""
    return FileRecord(path=path, content=content, size=len(content), lines=lines, extension=extension)


class TestClassifyComplexity:
    """Tests for the complexity tiers."""

    def test_boundaries(self) -> None:
        """Low below 1000, Medium from 1000 to 5000 inclusive, High above."""
        assert classify_complexity(0) == Complexity.LOW
        assert classify_complexity(999) == Complexity.LOW
        assert classify_complexity(1000) == Complexity.MEDIUM
        assert classify_complexity(5000) == Complexity.MEDIUM
        assert classify_complexity(5001) == Complexity.HIGH


class TestBuildCodeStructure:
    """Tests for build_code_structure."""

    def setup_method(self) -> None:
        """Four files, two tied for the most lines."""
        self.files = [
            _record("src/a.js", 10),
            _record("src/b.py", 30),
            _record("Makefile", 5),
            _record("src/d.js", 30),
        ]

    def test_totals(self) -> None:
        """Files, lines and size are summed."""
        summary = build_code_structure(self.files)
        assert summary.total_files == 4
        assert summary.total_lines == 75
        assert summary.total_size == sum(f.size for f in self.files)
        assert summary.complexity == Complexity.LOW

    def test_groups_by_extension(self) -> None:
        """Files without an extension are grouped under no-extension."""
        summary = build_code_structure(self.files)
        grouped = {ext: (s.count, s.total_lines) for ext, s in summary.files_by_extension.items()}
        assert grouped == {".js": (2, 40), ".py": (1, 30), "no-extension": (1, 5)}

    def test_largest_files_keep_encounter_order_on_ties(self) -> None:
        """b.py comes before d.js because it was seen first."""
        summary = build_code_structure(self.files)
        assert [f.path for f in summary.largest_files] == [
            "src/b.py",
            "src/d.js",
            "src/a.js",
            "Makefile",
        ]

    def test_largest_files_capped_at_five(self) -> None:
        """Only the top five are kept."""
        files = [_record(f"f{i}.py", i + 1) for i in range(8)]
        summary = build_code_structure(files)
        assert [f.lines for f in summary.largest_files] == [8, 7, 6, 5, 4]

    def test_deterministic_and_does_not_mutate_input(self) -> None:
        """Same input, same output; the list and records are unchanged."""
        before = copy.deepcopy(self.files)
        first = build_code_structure(self.files)
        second = build_code_structure(self.files)
        assert first == second
        assert self.files == before

    def test_empty_input(self) -> None:
        """No files: zero totals and Low complexity."""
        summary = build_code_structure([])
        assert summary.total_files == 0
        assert summary.total_lines == 0
        assert summary.files_by_extension == {}
        assert summary.largest_files == []
        assert summary.complexity == Complexity.LOW

    def test_high_complexity(self) -> None:
        """Line totals above 5000 are High."""
        summary = build_code_structure([_record("big.c", 6000)])
        assert summary.complexity == Complexity.HIGH
