# -*- coding: utf-8 -*-
"""
Source-to-target line matching.

Pairs each source line with at most one target line:
1. Exact pass: lines whose normalized form survives verbatim claim the first
   unclaimed target line with the same form, in target order.
2. Fuzzy pass: remaining source lines take the highest-scoring unclaimed,
   non-blank target line, if they share a token and the score clears the
   mode threshold.

Matching is greedy and never backtracks; it is deterministic for a given
input order but not globally optimal. The claimed-target set lives only
inside one match_lines call.
"""

import logging
import re
from collections import defaultdict, deque
from typing import Optional, Sequence

from .classifier import DEFAULT_KEYWORDS
from .config import DiffConfig
from .models import CodeLanguage, Line, Token
from .similarity import is_acceptable, score
from .tokenizer import tokenize

logger = logging.getLogger(__name__)

_WHITESPACE_RUN_RE = re.compile(r"\s+")

# String literals are skipped so comment markers inside them are ignored
_COMMENT_SCAN_RE = re.compile(
    r""""(?:\\.|[^"\\])*"?|'(?:\\.|[^'\\])*'?|`(?:\\.|[^`\\])*`?|(?P<comment>//|\#)"""
)


def comment_markers_for(language: CodeLanguage) -> tuple[str, ...]:
    """Line comment markers used by a language."""
    if language == CodeLanguage.PYTHON:
        return ("#",)
    return ("//",)


def strip_line_comment(text: str, markers: Sequence[str] = ("//",)) -> str:
    """
    Remove a trailing line comment that is not inside a string literal.

    Args:
        text: One line of code.
        markers: Comment markers to honour.

    Returns:
        Text up to (not including) the first real comment marker.
    """
    for match in _COMMENT_SCAN_RE.finditer(text):
        marker = match.group("comment")
        if marker and marker in markers:
            return text[:match.start()]
    return text


def normalize_line_for_match(
    text: str,
    is_code: bool,
    comment_markers: Optional[Sequence[str]] = None,
) -> str:
    """
    Normalize a line for exact matching.

    Trims, collapses internal whitespace runs to one space and, for code,
    strips a trailing line comment when comment_markers is given.
    """
    if is_code and comment_markers:
        text = strip_line_comment(text, comment_markers)
    return _WHITESPACE_RUN_RE.sub(" ", text.strip())


def match_lines(
    source_lines: Sequence[Line],
    target_lines: Sequence[Line],
    is_code: bool,
    *,
    config: Optional[DiffConfig] = None,
    keywords: Optional[frozenset[str]] = None,
    language: CodeLanguage = CodeLanguage.UNKNOWN,
) -> dict[int, int]:
    """
    Match source lines to target lines.

    Args:
        source_lines: Lines of the source document.
        target_lines: Lines of the target document.
        is_code: Use code tokenization, comment stripping and LCS scoring.
        config: Thresholds and comment policy; defaults to DiffConfig().
        keywords: Keyword set for code tokenization.
        language: Detected language, used for comment markers.

    Returns:
        Partial injection {source_index: target_index}. Blank source lines
        are never matched.
    """
    config = config or DiffConfig()
    keywords = keywords if keywords is not None else DEFAULT_KEYWORDS
    markers = comment_markers_for(language) if config.strip_line_comments else None
    threshold = config.threshold_for(is_code)

    matches: dict[int, int] = {}
    claimed: set[int] = set()

    # Exact pass: index targets by normalized form, first occurrence first
    targets_by_form: dict[str, deque[int]] = defaultdict(deque)
    for target in target_lines:
        targets_by_form[normalize_line_for_match(target.text, is_code, markers)].append(target.index)

    pending: list[Line] = []
    for source in source_lines:
        if source.is_blank:
            continue
        form = normalize_line_for_match(source.text, is_code, markers)
        # A comment-only line normalizes to "" and must not claim a blank target
        candidates = targets_by_form.get(form) if form else None
        if candidates:
            target_index = candidates.popleft()
            matches[source.index] = target_index
            claimed.add(target_index)
        else:
            pending.append(source)

    exact_count = len(matches)

    # Fuzzy pass
    if pending:
        target_tokens: dict[int, list[Token]] = {}

        def tokens_of(line: Line) -> list[Token]:
            if line.index not in target_tokens:
                target_tokens[line.index] = tokenize(
                    line.text, is_code, keywords=keywords, offset_unit="codepoint",
                )
            return target_tokens[line.index]

        for source in pending:
            source_tokens = tokenize(
                source.text, is_code, keywords=keywords, offset_unit="codepoint",
            )
            best_index = None
            best_score = -1.0
            for target in target_lines:
                if target.index in claimed or target.is_blank:
                    continue
                similarity = score(source_tokens, tokens_of(target), is_code)
                # Strictly greater keeps the first maximum
                if similarity > best_score:
                    best_score = similarity
                    best_index = target.index

            # A zero score means no shared token, whatever the threshold
            if best_index is not None and best_score > 0.0 and is_acceptable(best_score, is_code, threshold):
                matches[source.index] = best_index
                claimed.add(best_index)

    logger.debug(
        f"Line matching: {exact_count} exact, {len(matches) - exact_count} fuzzy, "
        f"{len(source_lines) - len(matches)} unmatched of {len(source_lines)} source lines"
    )
    return matches
