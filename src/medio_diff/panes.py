# -*- coding: utf-8 -*-
"""
Two-pane diff session for an editor host.

Holds the text of the left (source) and right (target) panes and keeps
both highlight views current. When one pane's text changes, its own view is
recomputed and then the other pane is explicitly recomputed too, since its
comparison text just changed. Listeners are registered per side and called
directly; there is no broadcast channel.

The right view reports whole-line deletions as additions: a right-pane line
with no left-pane counterpart is a line that was added.
"""

import logging
from dataclasses import replace
from typing import Callable, Literal, Optional

from .config import DiffConfig
from .diff_engine import DiffEngine
from .models import DiffKind, LineDiff
from .offsets import OffsetUnit, unit_length

logger = logging.getLogger(__name__)

PaneSide = Literal["left", "right"]
PaneListener = Callable[[str, list[LineDiff]], None]

SIDES = ("left", "right")


def _check_side(side: str) -> None:
    if side not in SIDES:
        raise ValueError(f"side must be 'left' or 'right', got '{side}'")


def other_side(side: PaneSide) -> PaneSide:
    """The opposite pane."""
    _check_side(side)
    return "right" if side == "left" else "left"


def clip_to_text(
    line_diffs: list[LineDiff],
    text: str,
    offset_unit: OffsetUnit = "utf16",
) -> list[LineDiff]:
    """
    Drop ranges that no longer fit the current text.

    Editors apply highlights asynchronously, so the text may have changed
    since the diff was computed. Lines whose range ends past the text are
    dropped; word-diffs past the text are removed from their line.

    Args:
        line_diffs: Diff result computed for an earlier version of text.
        text: Current text of the pane.
        offset_unit: Unit the ranges are expressed in.

    Returns:
        Line diffs whose every range is safe to apply to text.
    """
    length = unit_length(text, offset_unit)
    clipped = []
    for line_diff in line_diffs:
        if line_diff.range.end > length:
            continue
        word_diffs = tuple(wd for wd in line_diff.word_diffs if wd.range.end <= length)
        if word_diffs != line_diff.word_diffs:
            line_diff = replace(line_diff, word_diffs=word_diffs)
        clipped.append(line_diff)
    return clipped


def as_target_view(line_diffs: list[LineDiff]) -> list[LineDiff]:
    """Re-label whole-line deletions as additions for the target pane."""
    relabelled = []
    for line_diff in line_diffs:
        word_diffs = tuple(
            replace(wd, kind=DiffKind.ADDITION)
            if wd.kind == DiffKind.DELETION and wd.range == line_diff.range
            else wd
            for wd in line_diff.word_diffs
        )
        relabelled.append(replace(line_diff, word_diffs=word_diffs))
    return relabelled


class DiffPanes:
    """
    Left/right text panes with explicit cross-pane recomputation.

    Not thread-safe: intended to be driven from a single UI thread, which is
    also responsible for debouncing rapid edits.
    """

    def __init__(
        self,
        left_text: str = "",
        right_text: str = "",
        config: Optional[DiffConfig] = None,
    ):
        """
        Initialize the two panes.

        Args:
            left_text: Initial source text.
            right_text: Initial target text.
            config: Engine configuration shared by both views.
        """
        self.engine = DiffEngine(config)
        self._texts = {"left": left_text, "right": right_text}
        self._diffs: dict[str, list[LineDiff]] = {"left": [], "right": []}
        self._listeners: dict[str, list[PaneListener]] = {"left": [], "right": []}
        self._recompute("left")
        self._recompute("right")

    @property
    def config(self) -> DiffConfig:
        return self.engine.config

    def text(self, side: PaneSide) -> str:
        _check_side(side)
        return self._texts[side]

    def diffs_for(self, side: PaneSide) -> list[LineDiff]:
        """Current highlight view of a pane."""
        _check_side(side)
        return list(self._diffs[side])

    def on_update(self, side: PaneSide, listener: PaneListener) -> None:
        """
        Register a listener called with (side, line_diffs) whenever that
        pane's view is recomputed.
        """
        _check_side(side)
        self._listeners[side].append(listener)

    def set_text(self, side: PaneSide, text: str) -> None:
        """
        Replace a pane's text and refresh both views.

        The edited pane is recomputed first, then the other pane.
        """
        _check_side(side)
        self._texts[side] = text
        self._recompute(side)
        self._recompute(other_side(side))

    def refresh(self) -> None:
        """Recompute both views, e.g. after a config change."""
        self._recompute("left")
        self._recompute("right")

    def _recompute(self, side: str) -> None:
        if side == "left":
            diffs = self.engine.compute(self._texts["left"], self._texts["right"])
        else:
            diffs = as_target_view(self.engine.compute(self._texts["right"], self._texts["left"]))

        self._diffs[side] = diffs
        logger.debug(
            f"Recomputed {side} pane: {sum(1 for d in diffs if d.is_different)} of "
            f"{len(diffs)} lines differ"
        )
        for listener in self._listeners[side]:
            listener(side, list(diffs))
