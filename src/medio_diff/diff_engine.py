# -*- coding: utf-8 -*-
"""
Two-sided diff engine.

Produces one LineDiff per source line:
- Classifies the source once (code vs. prose) and reuses it for both sides
- Splits both texts into lines with absolute offset ranges
- Matches source lines to target lines (exact pass, then fuzzy pass)
- For matched lines, marks each source token missing from the target line
- For unmatched lines, marks the whole line as a deletion

Every call recomputes from the two input strings and keeps no state, so it
is safe to run on every keystroke and from several threads at once.
"""

import logging
from typing import Optional

from .classifier import detect_language, detect_text_mode, keywords_for
from .config import DiffConfig
from .line_matcher import match_lines
from .models import (
    CodeLanguage,
    DiffKind,
    Line,
    LineDiff,
    TextMode,
    TextRange,
    Token,
    TokenType,
    WordDiff,
)
from .offsets import OffsetUnit, unit_length
from .tokenizer import tokenize

logger = logging.getLogger(__name__)


def split_lines(text: str, offset_unit: OffsetUnit = "utf16") -> list[Line]:
    """
    Split text into lines with absolute ranges.

    Splits on "\\n" only; a "\\r" before it stays part of the line. Each line
    starts one unit after the previous line ends, so joining the line texts
    with "\\n" reconstructs the input. Empty text yields one empty line.

    Args:
        text: Whole document.
        offset_unit: Unit for line ranges.

    Returns:
        Lines in document order.
    """
    lines = []
    location = 0
    for index, line_text in enumerate(text.split("\n")):
        length = unit_length(line_text, offset_unit)
        lines.append(Line(text=line_text, range=TextRange(location, length), index=index))
        location += length + 1
    return lines


def merge_adjacent_diffs(word_diffs: list[WordDiff], tokens: list[Token]) -> list[WordDiff]:
    """
    Fuse consecutive modifications separated only by whitespace.

    Args:
        word_diffs: Per-token modifications, ordered by location.
        tokens: All tokens of the line (used to find the gaps between diffs).

    Returns:
        Merged, ordered diffs.
    """
    if len(word_diffs) < 2:
        return list(word_diffs)

    whitespace_ranges = {
        t.range.location: t.range.end for t in tokens if t.type == TokenType.WHITESPACE
    }

    merged = [word_diffs[0]]
    for current in word_diffs[1:]:
        previous = merged[-1]
        gap_start = previous.range.end
        # Skip over whitespace tokens that sit between the two diffs
        while gap_start in whitespace_ranges and gap_start < current.range.location:
            gap_start = whitespace_ranges[gap_start]
        if previous.kind == current.kind and gap_start == current.range.location:
            merged[-1] = WordDiff(
                range=TextRange(previous.range.location, current.range.end - previous.range.location),
                kind=previous.kind,
            )
        else:
            merged.append(current)
    return merged


class DiffEngine:
    """
    Computes line and word differences between a source and a target text.

    The engine holds only its configuration; all per-call bookkeeping
    (classification, lines, claimed targets) is created inside compute().
    """

    def __init__(self, config: Optional[DiffConfig] = None):
        """
        Initialize diff engine.

        Args:
            config: Engine configuration; defaults to DiffConfig().
        """
        self.config = config or DiffConfig()

    def classify(self, source_text: str) -> TextMode:
        """Mode for a call: forced by config, else detected from the source."""
        return self.config.forced_mode or detect_text_mode(source_text)

    def compute(self, source_text: str, target_text: str) -> list[LineDiff]:
        """
        Compute differences of source_text relative to target_text.

        Args:
            source_text: Text whose lines are reported.
            target_text: Text compared against.

        Returns:
            One LineDiff per source line, in source line order.

        Raises:
            TypeError: If either input is not a string.
        """
        if not isinstance(source_text, str) or not isinstance(target_text, str):
            raise TypeError("source_text and target_text must both be str")

        unit = self.config.offset_unit
        is_code = self.classify(source_text) == TextMode.CODE
        language = detect_language(source_text) if is_code else CodeLanguage.UNKNOWN
        keywords = keywords_for(language)

        source_lines = split_lines(source_text, unit)
        target_lines = split_lines(target_text, unit)
        document_length = unit_length(source_text, unit)

        logger.debug(
            f"Computing differences: mode={'code' if is_code else 'prose'}, "
            f"language={language.value}, {len(source_lines)} source lines, "
            f"{len(target_lines)} target lines"
        )

        matches = match_lines(
            source_lines,
            target_lines,
            is_code,
            config=self.config,
            keywords=keywords,
            language=language,
        )

        line_diffs = []
        for line in source_lines:
            if line.range.end > document_length:
                logger.debug(f"Skipping line {line.index}: range exceeds document length")
                continue

            if line.is_blank:
                word_diffs = []
            elif line.index in matches:
                target_line = target_lines[matches[line.index]]
                word_diffs = self._compare_tokens(line, target_line, is_code, keywords)
            else:
                word_diffs = [WordDiff(range=line.range, kind=DiffKind.DELETION)]

            line_diffs.append(LineDiff(
                range=line.range,
                line_number=line.index,
                word_diffs=tuple(self._validate(word_diffs, line, document_length)),
            ))

        return line_diffs

    def _compare_tokens(
        self,
        source_line: Line,
        target_line: Line,
        is_code: bool,
        keywords: frozenset[str],
    ) -> list[WordDiff]:
        """Mark each source token that has no counterpart on the target line."""
        unit = self.config.offset_unit
        source_tokens = tokenize(
            source_line.text, is_code,
            keywords=keywords, base_offset=source_line.range.location, offset_unit=unit,
        )
        target_tokens = tokenize(target_line.text, is_code, keywords=keywords, offset_unit=unit)

        # Code compares type too, so a quoted "x" never equals a bare x
        if is_code:
            target_keys = {(t.normalized, t.type) for t in target_tokens if not t.is_whitespace}
        else:
            target_keys = {t.normalized for t in target_tokens if not t.is_whitespace}

        word_diffs = []
        for token in source_tokens:
            if token.is_whitespace:
                continue
            key = (token.normalized, token.type) if is_code else token.normalized
            if key not in target_keys:
                word_diffs.append(WordDiff(range=token.range, kind=DiffKind.MODIFICATION))

        if self.config.merge_adjacent:
            word_diffs = merge_adjacent_diffs(word_diffs, source_tokens)

        return word_diffs

    def _validate(
        self,
        word_diffs: list[WordDiff],
        line: Line,
        document_length: int,
    ) -> list[WordDiff]:
        """Drop ranges that fall outside their line or the document."""
        valid = []
        for word_diff in word_diffs:
            span = word_diff.range
            if (
                span.location < 0
                or span.length < 0
                or not line.range.contains(span)
                or span.end > document_length
            ):
                logger.debug(f"Dropping out-of-bounds word diff {span} on line {line.index}")
                continue
            valid.append(word_diff)
        return sorted(valid, key=lambda wd: wd.range.location)


def compute_differences(
    source_text: str,
    target_text: str,
    config: Optional[DiffConfig] = None,
) -> list[LineDiff]:
    """
    Convenience function for computing differences.

    Args:
        source_text: Text whose lines are reported.
        target_text: Text compared against.
        config: Optional engine configuration.

    Returns:
        One LineDiff per source line, in order.
    """
    return DiffEngine(config).compute(source_text, target_text)
