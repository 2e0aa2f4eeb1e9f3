# -*- coding: utf-8 -*-
"""
Line similarity scoring.

Scores how likely two token sequences are "the same line, possibly edited":
- Code: order-sensitive. Longest common subsequence of normalized tokens
  divided by the longer sequence length, so shuffled tokens score lower
  than aligned ones.
- Prose: order-insensitive. Jaccard ratio over the sets of normalized words.

Whitespace tokens are ignored on both paths. Scores are in [0, 1].
"""

from typing import Optional, Sequence

from .config import CODE_SIMILARITY_THRESHOLD, PROSE_SIMILARITY_THRESHOLD
from .models import Token
from .tokenizer import significant_tokens

__all__ = [
    "CODE_SIMILARITY_THRESHOLD",
    "PROSE_SIMILARITY_THRESHOLD",
    "lcs_length",
    "lcs_ratio",
    "jaccard_similarity",
    "score",
    "is_acceptable",
]


def lcs_length(source: Sequence[str], target: Sequence[str]) -> int:
    """
    Length of the longest common subsequence of two sequences.

    Classic O(n*m) dynamic programming; only two table rows are kept.
    """
    if not source or not target:
        return 0

    previous = [0] * (len(target) + 1)
    for s_item in source:
        current = [0] * (len(target) + 1)
        for j, t_item in enumerate(target):
            if s_item == t_item:
                current[j + 1] = previous[j] + 1
            else:
                current[j + 1] = max(current[j], previous[j + 1])
        previous = current

    return previous[-1]


def lcs_ratio(source: Sequence[str], target: Sequence[str]) -> float:
    """LCS length divided by the longer sequence length."""
    if not source and not target:
        return 1.0
    if not source or not target:
        return 0.0
    return lcs_length(source, target) / max(len(source), len(target))


def jaccard_similarity(source: set[str], target: set[str]) -> float:
    """|A & B| / |A | B|, with two empty sets counting as identical."""
    if not source and not target:
        return 1.0
    if not source or not target:
        return 0.0
    return len(source & target) / len(source | target)


def score(
    source_tokens: Sequence[Token],
    target_tokens: Sequence[Token],
    is_code: bool,
) -> float:
    """
    Similarity of two tokenized lines.

    Args:
        source_tokens: Tokens of the source line.
        target_tokens: Tokens of the candidate target line.
        is_code: Use LCS (code) instead of Jaccard (prose).

    Returns:
        Score in [0, 1]. Both empty -> 1.0; exactly one empty -> 0.0.
    """
    source = [t.normalized for t in significant_tokens(source_tokens)]
    target = [t.normalized for t in significant_tokens(target_tokens)]

    if is_code:
        return lcs_ratio(source, target)
    return jaccard_similarity(set(source), set(target))


def is_acceptable(similarity: float, is_code: bool, threshold: Optional[float] = None) -> bool:
    """Check if a similarity clears the acceptance threshold for its mode."""
    if threshold is None:
        threshold = CODE_SIMILARITY_THRESHOLD if is_code else PROSE_SIMILARITY_THRESHOLD
    return similarity >= threshold
