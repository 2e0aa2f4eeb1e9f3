"""
Change summary reporting for diff results.

This module turns a list of LineDiff into a compact report:
- Line-level counts (different, deleted/added, modified)
- Word-diff counts by kind
- Overall change ratio

The report is used by the CLI and the HTTP API, and can be logged.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional

from .models import DiffKind, LineDiff, TextMode

logger = logging.getLogger(__name__)


@dataclass
class DiffSummary:
    """Summary of one diff result."""
    total_lines: int = 0
    different_lines: int = 0
    deleted_lines: int = 0  # Whole-line deletions
    added_lines: int = 0  # Whole-line additions (target view)
    modified_lines: int = 0  # Lines with at least one modification
    modification_count: int = 0
    addition_count: int = 0
    deletion_count: int = 0
    mode: Optional[TextMode] = None

    @property
    def change_ratio(self) -> float:
        """Percentage of lines that differ."""
        if self.total_lines == 0:
            return 0.0
        return self.different_lines / self.total_lines * 100

    @property
    def is_identical(self) -> bool:
        return self.different_lines == 0


def build_summary(line_diffs: list[LineDiff], mode: Optional[TextMode] = None) -> DiffSummary:
    """
    Build a summary from a diff result.

    Args:
        line_diffs: Result of compute_differences().
        mode: Optional mode the result was computed in.

    Returns:
        DiffSummary with counts filled in.
    """
    summary = DiffSummary(total_lines=len(line_diffs), mode=mode)

    for line_diff in line_diffs:
        if not line_diff.is_different:
            continue
        summary.different_lines += 1

        kinds = [wd.kind for wd in line_diff.word_diffs]
        summary.modification_count += kinds.count(DiffKind.MODIFICATION)
        summary.addition_count += kinds.count(DiffKind.ADDITION)
        summary.deletion_count += kinds.count(DiffKind.DELETION)

        if DiffKind.MODIFICATION in kinds:
            summary.modified_lines += 1
        elif DiffKind.DELETION in kinds:
            summary.deleted_lines += 1
        elif DiffKind.ADDITION in kinds:
            summary.added_lines += 1

    return summary


def format_summary_text(summary: DiffSummary) -> str:
    """
    Format summary as human-readable text.

    Args:
        summary: DiffSummary to format.

    Returns:
        Formatted text report.
    """
    lines = []
    lines.append("=" * 40)
    lines.append("DIFF SUMMARY")
    lines.append("=" * 40)
    if summary.mode:
        lines.append(f"Mode: {summary.mode.value}")
    lines.append(f"Total lines: {summary.total_lines}")
    lines.append(f"Different: {summary.different_lines}")
    lines.append(f"  Modified: {summary.modified_lines}")
    lines.append(f"  Deleted: {summary.deleted_lines}")
    if summary.added_lines:
        lines.append(f"  Added: {summary.added_lines}")
    lines.append(f"Changed tokens: {summary.modification_count}")
    lines.append(f"Change ratio: {summary.change_ratio:.1f}%")
    lines.append("=" * 40)
    return "\n".join(lines)


def format_summary_dict(summary: DiffSummary) -> dict[str, Any]:
    """
    Format summary as dictionary for JSON export.

    Args:
        summary: DiffSummary to format.

    Returns:
        Dictionary representation.
    """
    return {
        "mode": summary.mode.value if summary.mode else None,
        "lines": {
            "total": summary.total_lines,
            "different": summary.different_lines,
            "modified": summary.modified_lines,
            "deleted": summary.deleted_lines,
            "added": summary.added_lines,
        },
        "word_diffs": {
            "modifications": summary.modification_count,
            "additions": summary.addition_count,
            "deletions": summary.deletion_count,
        },
        "change_ratio": round(summary.change_ratio, 2),
    }


def log_summary(summary: DiffSummary) -> None:
    """
    Log diff summary.

    Args:
        summary: Summary to log.
    """
    logger.info(f"Diff complete: {summary.different_lines}/{summary.total_lines} lines differ")
    logger.info(f"  Modified: {summary.modified_lines}, deleted: {summary.deleted_lines}")
    logger.info(f"  Change ratio: {summary.change_ratio:.1f}%")
