"""
Tests for the two-pane diff session.
"""

import pytest

from medio_diff.config import DiffConfig
from medio_diff.diff_engine import compute_differences
from medio_diff.models import DiffKind, LineDiff, TextRange, WordDiff
from medio_diff.panes import DiffPanes, as_target_view, clip_to_text, other_side


class TestOtherSide:
    """Tests for side helpers."""

    def test_other_side(self):
        assert other_side("left") == "right"
        assert other_side("right") == "left"

    def test_invalid_side(self):
        with pytest.raises(ValueError):
            other_side("middle")


class TestTargetView:
    """Tests for as_target_view."""

    def test_whole_line_deletion_becomes_addition(self):
        line_diffs = [
            LineDiff(
                range=TextRange(0, 5),
                line_number=0,
                word_diffs=(WordDiff(TextRange(0, 5), DiffKind.DELETION),),
            )
        ]

        view = as_target_view(line_diffs)

        assert view[0].word_diffs[0].kind == DiffKind.ADDITION
        assert view[0].word_diffs[0].range == TextRange(0, 5)

    def test_modifications_unchanged(self):
        line_diffs = compute_differences("let total = 0;", "let sum = 0;")

        assert as_target_view(line_diffs) == line_diffs


class TestClipToText:
    """Tests for clip_to_text."""

    def test_drops_lines_past_end(self):
        """Stale ranges from a longer text are not applied to a shorter one."""
        line_diffs = compute_differences("ab\nthe quick fox", "ab\nthe slow fox")

        clipped = clip_to_text(line_diffs, "ab")

        assert len(clipped) == 1
        assert clipped[0].line_number == 0

    def test_drops_word_diffs_past_end(self):
        line_diffs = [
            LineDiff(
                range=TextRange(0, 3),
                line_number=0,
                word_diffs=(
                    WordDiff(TextRange(0, 1), DiffKind.MODIFICATION),
                    WordDiff(TextRange(2, 5), DiffKind.MODIFICATION),
                ),
            )
        ]

        clipped = clip_to_text(line_diffs, "abc")

        assert clipped[0].word_diffs == (WordDiff(TextRange(0, 1), DiffKind.MODIFICATION),)

    def test_valid_result_unchanged(self, prose_source, prose_target):
        line_diffs = compute_differences(prose_source, prose_target)

        assert clip_to_text(line_diffs, prose_source) == line_diffs


class TestDiffPanes:
    """Tests for DiffPanes."""

    def test_initial_views(self):
        panes = DiffPanes("let total = 0;", "let sum = 0;")

        left = panes.diffs_for("left")
        right = panes.diffs_for("right")

        assert left[0].word_diffs == (WordDiff(TextRange(4, 5), DiffKind.MODIFICATION),)
        assert right[0].word_diffs == (WordDiff(TextRange(4, 3), DiffKind.MODIFICATION),)

    def test_added_line_on_right(self):
        """A right-pane line with no left counterpart shows as an addition."""
        panes = DiffPanes("alpha", "alpha\nzebra crossing")

        right = panes.diffs_for("right")

        assert not right[0].is_different
        assert right[1].word_diffs == (WordDiff(TextRange(6, 14), DiffKind.ADDITION),)
        assert not any(ld.is_different for ld in panes.diffs_for("left"))

    def test_empty_panes(self):
        panes = DiffPanes()

        assert panes.text("left") == ""
        assert len(panes.diffs_for("left")) == 1
        assert not panes.diffs_for("right")[0].is_different

    def test_set_text_recomputes_both_sides(self):
        """Editing one pane refreshes the edited view first, then the other."""
        panes = DiffPanes("the quick fox", "the quick fox")
        calls = []
        panes.on_update("left", lambda side, diffs: calls.append((side, diffs)))
        panes.on_update("right", lambda side, diffs: calls.append((side, diffs)))

        panes.set_text("right", "the slow fox")

        assert [side for side, _ in calls] == ["right", "left"]
        assert calls[1][1][0].word_diffs == (WordDiff(TextRange(4, 5), DiffKind.MODIFICATION),)
        assert panes.text("right") == "the slow fox"

    def test_edit_left_order(self):
        panes = DiffPanes("a", "a")
        sides = []
        panes.on_update("left", lambda side, diffs: sides.append(side))
        panes.on_update("right", lambda side, diffs: sides.append(side))

        panes.set_text("left", "b")

        assert sides == ["left", "right"]

    def test_listeners_not_called_on_construction(self):
        """Initial computation happens before any listener can register."""
        panes = DiffPanes("a", "b")
        calls = []
        panes.on_update("left", lambda side, diffs: calls.append(side))

        assert calls == []

    def test_refresh(self):
        panes = DiffPanes("a", "b")
        sides = []
        panes.on_update("right", lambda side, diffs: sides.append(side))
        panes.on_update("left", lambda side, diffs: sides.append(side))

        panes.refresh()

        assert sides == ["left", "right"]

    def test_config_shared(self):
        config = DiffConfig.for_python_strings()
        panes = DiffPanes("😀 quick fox", "😀 slow fox", config)

        assert panes.config is config
        assert panes.diffs_for("left")[0].word_diffs[0].range == TextRange(2, 5)

    def test_invalid_side_rejected(self):
        panes = DiffPanes()

        with pytest.raises(ValueError):
            panes.set_text("top", "x")
        with pytest.raises(ValueError):
            panes.diffs_for("bottom")

    def test_returned_views_are_copies(self):
        panes = DiffPanes("a b", "a c")

        panes.diffs_for("left").clear()

        assert len(panes.diffs_for("left")) == 1
