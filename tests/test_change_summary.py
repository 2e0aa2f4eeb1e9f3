"""
Tests for change summary reporting.
"""

import logging

from medio_diff.change_summary import (
    DiffSummary,
    build_summary,
    format_summary_dict,
    format_summary_text,
    log_summary,
)
from medio_diff.diff_engine import compute_differences
from medio_diff.models import TextMode
from medio_diff.panes import as_target_view


class TestBuildSummary:
    """Tests for build_summary."""

    def test_prose_documents(self, prose_source, prose_target):
        summary = build_summary(compute_differences(prose_source, prose_target), TextMode.PROSE)

        assert summary.total_lines == 4
        assert summary.different_lines == 3
        assert summary.modified_lines == 2
        assert summary.deleted_lines == 1
        assert summary.added_lines == 0
        assert summary.modification_count == 2
        assert summary.deletion_count == 1
        assert summary.change_ratio == 75.0

    def test_identical(self):
        summary = build_summary(compute_differences("same\ntext", "same\ntext"))

        assert summary.is_identical
        assert summary.change_ratio == 0.0

    def test_added_lines_from_target_view(self):
        target_view = as_target_view(compute_differences("alpha\nzebra crossing", "alpha"))
        summary = build_summary(target_view)

        assert summary.added_lines == 1
        assert summary.addition_count == 1
        assert summary.deleted_lines == 0

    def test_empty_result(self):
        summary = build_summary([])

        assert summary.total_lines == 0
        assert summary.change_ratio == 0.0


class TestFormatting:
    """Tests for summary formatting."""

    def test_text_report(self):
        summary = DiffSummary(total_lines=4, different_lines=1, modified_lines=1, mode=TextMode.CODE)
        text = format_summary_text(summary)

        assert "DIFF SUMMARY" in text
        assert "Mode: code" in text
        assert "Total lines: 4" in text
        assert "Change ratio: 25.0%" in text
        assert "Added" not in text

    def test_dict_report(self):
        summary = DiffSummary(
            total_lines=3,
            different_lines=2,
            deleted_lines=1,
            modified_lines=1,
            modification_count=2,
            deletion_count=1,
            mode=TextMode.PROSE,
        )

        assert format_summary_dict(summary) == {
            "mode": "prose",
            "lines": {"total": 3, "different": 2, "modified": 1, "deleted": 1, "added": 0},
            "word_diffs": {"modifications": 2, "additions": 0, "deletions": 1},
            "change_ratio": 66.67,
        }

    def test_dict_without_mode(self):
        assert format_summary_dict(DiffSummary())["mode"] is None

    def test_log_summary(self, caplog):
        summary = DiffSummary(total_lines=2, different_lines=1, modified_lines=1)

        with caplog.at_level(logging.INFO, logger="medio_diff.change_summary"):
            log_summary(summary)

        assert "1/2 lines differ" in caplog.text
