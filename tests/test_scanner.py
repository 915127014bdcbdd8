"""Tests for the filesystem scanner."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from namesim.index.scanner import ScanResult, Scanner
from namesim.models import ConfigurationError


MATCH_ALL = re.compile(".*")


class TestScanner:
    """Test Scanner class."""

    def test_scan_builds_records(self, tmp_path: Path) -> None:
        """Should create a record with size and tokens per file."""
        (tmp_path / "report_final.txt").write_text("abcd")

        result = Scanner(MATCH_ALL, trie_len=1).scan([tmp_path])

        assert len(result.records) == 1
        record = result.records[0]
        assert record.path == tmp_path / "report_final.txt"
        assert record.size == 4
        assert record.tokens == {"report", "final", "txt"}

    def test_scan_uses_trie_len(self, tmp_path: Path) -> None:
        """Tokens follow the configured width."""
        (tmp_path / "a-b_c.txt").write_text("")

        result = Scanner(MATCH_ALL, trie_len=2).scan([tmp_path])

        assert result.records[0].tokens == {"a.b", "b.c", "c.txt"}

    def test_pattern_filters_base_name(self, tmp_path: Path) -> None:
        """Only base names are matched against the pattern."""
        pdf_dir = tmp_path / "pdf"
        pdf_dir.mkdir()
        (pdf_dir / "notes.txt").write_text("")
        (tmp_path / "invoice.pdf").write_text("")

        result = Scanner(re.compile(r"^.*\.pdf$"), trie_len=1).scan([tmp_path])

        assert [r.path.name for r in result.records] == ["invoice.pdf"]

    def test_multiple_roots_in_order(self, tmp_path: Path) -> None:
        """Records from each root are appended in root order."""
        first = tmp_path / "z_first"
        second = tmp_path / "a_second"
        first.mkdir()
        second.mkdir()
        (first / "one.txt").write_text("")
        (second / "two.txt").write_text("")

        result = Scanner(MATCH_ALL).scan([first, second])

        assert [r.path.name for r in result.records] == ["one.txt", "two.txt"]

    def test_missing_root(self, tmp_path: Path) -> None:
        """A missing root yields no records and a warning."""
        result = Scanner(MATCH_ALL).scan([tmp_path / "missing"])

        assert result.records == []
        assert len(result.warnings) == 1
        assert result.warnings[0].path == tmp_path / "missing"

    def test_missing_root_does_not_stop_others(self, tmp_path: Path) -> None:
        """Other roots are still scanned."""
        (tmp_path / "kept.txt").write_text("")

        result = Scanner(MATCH_ALL).scan([tmp_path / "missing", tmp_path])

        assert [r.path.name for r in result.records] == ["kept.txt"]

    def test_punctuation_name_has_empty_tokens(self, tmp_path: Path) -> None:
        """A name without words is still recorded."""
        (tmp_path / "---").write_text("")

        result = Scanner(MATCH_ALL, trie_len=1).scan([tmp_path])

        assert len(result.records) == 1
        assert result.records[0].tokens == frozenset()

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert Scanner(MATCH_ALL).scan([tmp_path]) == ScanResult()

    def test_invalid_trie_len(self) -> None:
        """The scanner refuses unsupported widths up front."""
        with pytest.raises(ConfigurationError):
            Scanner(MATCH_ALL, trie_len=5)
