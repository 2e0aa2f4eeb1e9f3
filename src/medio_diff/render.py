# -*- coding: utf-8 -*-
"""
Highlight rendering for diff results.

Turns a pane's text plus its LineDiff list into something a terminal or a
browser can show: a rich Text with background/foreground styles, or HTML
with span wrappers. Ranges are clipped against the text first.
"""

import html

from rich.text import Text

from .models import LineDiff
from .offsets import OffsetUnit, to_codepoint_index
from .panes import clip_to_text

LINE_STYLES = {
    "left": "on #3d1f1f",
    "right": "on #1f3d24",
}

WORD_STYLES = {
    "left": "bold red on #3d1f1f",
    "right": "bold green on #1f3d24",
}


def render_rich(
    text: str,
    line_diffs: list[LineDiff],
    side: str = "left",
    offset_unit: OffsetUnit = "utf16",
) -> Text:
    """
    Render a pane as a rich Text with highlighted differences.

    Args:
        text: Pane text the diffs were computed for.
        line_diffs: Diff result for that text.
        side: "left" (red tint) or "right" (green tint).
        offset_unit: Unit the ranges are expressed in.

    Returns:
        Styled rich Text.
    """
    rendered = Text(text)
    line_style = LINE_STYLES.get(side, LINE_STYLES["left"])
    word_style = WORD_STYLES.get(side, WORD_STYLES["left"])

    for line_diff in clip_to_text(line_diffs, text, offset_unit):
        if not line_diff.is_different:
            continue
        start = to_codepoint_index(text, line_diff.range.location, offset_unit)
        end = to_codepoint_index(text, line_diff.range.end, offset_unit)
        rendered.stylize(line_style, start, end)

        for word_diff in line_diff.word_diffs:
            word_start = to_codepoint_index(text, word_diff.range.location, offset_unit)
            word_end = to_codepoint_index(text, word_diff.range.end, offset_unit)
            rendered.stylize(word_style, word_start, word_end)

    return rendered


def render_html(
    text: str,
    line_diffs: list[LineDiff],
    side: str = "left",
    offset_unit: OffsetUnit = "utf16",
) -> str:
    """
    Generate HTML with highlighted differences.

    Differing lines are wrapped in <span class="diff-line diff-{side}">, and
    each word-diff in <span class="diff-word diff-{kind}">. All text is
    escaped.

    Args:
        text: Pane text the diffs were computed for.
        line_diffs: Diff result for that text.
        side: "left" or "right", added as a CSS class.
        offset_unit: Unit the ranges are expressed in.

    Returns:
        HTML string.
    """
    parts = []
    cursor = 0

    for line_diff in clip_to_text(line_diffs, text, offset_unit):
        if not line_diff.is_different:
            continue
        line_start = to_codepoint_index(text, line_diff.range.location, offset_unit)
        line_end = to_codepoint_index(text, line_diff.range.end, offset_unit)
        if line_start < cursor:
            continue

        parts.append(html.escape(text[cursor:line_start]))
        parts.append(f'<span class="diff-line diff-{side}">')

        position = line_start
        for word_diff in line_diff.word_diffs:
            word_start = to_codepoint_index(text, word_diff.range.location, offset_unit)
            word_end = to_codepoint_index(text, word_diff.range.end, offset_unit)
            if word_start < position:
                continue
            parts.append(html.escape(text[position:word_start]))
            parts.append(
                f'<span class="diff-word diff-{word_diff.kind.value}">'
                f'{html.escape(text[word_start:word_end])}</span>'
            )
            position = word_end

        parts.append(html.escape(text[position:line_end]))
        parts.append("</span>")
        cursor = line_end

    parts.append(html.escape(text[cursor:]))
    return "".join(parts)
