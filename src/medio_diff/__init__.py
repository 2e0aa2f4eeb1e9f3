"""
medio-diff

A live, two-sided text comparison engine that:
- Classifies text as code or prose
- Pairs source lines with target lines, including moved and rewritten lines
- Reports the exact token ranges that changed, ready for editor highlighting
"""

__version__ = "1.0.0"

from .config import DiffConfig, DiffMode

from .models import (
    TextMode,
    CodeLanguage,
    TokenType,
    DiffKind,
    TextRange,
    Token,
    Line,
    WordDiff,
    LineDiff,
)

from .classifier import (
    detect_text_mode,
    detect_language,
    keywords_for,
)

from .tokenizer import tokenize

from .similarity import (
    score,
    lcs_length,
    jaccard_similarity,
    CODE_SIMILARITY_THRESHOLD,
    PROSE_SIMILARITY_THRESHOLD,
)

from .line_matcher import (
    match_lines,
    normalize_line_for_match,
)

from .diff_engine import (
    DiffEngine,
    compute_differences,
    split_lines,
)

# Editor-facing helpers
from .panes import (
    DiffPanes,
    clip_to_text,
)

from .change_summary import (
    DiffSummary,
    build_summary,
    format_summary_text,
    format_summary_dict,
)

__all__ = [
    # Configuration
    "DiffConfig",
    "DiffMode",
    # Models
    "TextMode",
    "CodeLanguage",
    "TokenType",
    "DiffKind",
    "TextRange",
    "Token",
    "Line",
    "WordDiff",
    "LineDiff",
    # Classifier
    "detect_text_mode",
    "detect_language",
    "keywords_for",
    # Tokenizer
    "tokenize",
    # Similarity
    "score",
    "lcs_length",
    "jaccard_similarity",
    "CODE_SIMILARITY_THRESHOLD",
    "PROSE_SIMILARITY_THRESHOLD",
    # Line matching
    "match_lines",
    "normalize_line_for_match",
    # Engine
    "DiffEngine",
    "compute_differences",
    "split_lines",
    # Panes
    "DiffPanes",
    "clip_to_text",
    # Summary
    "DiffSummary",
    "build_summary",
    "format_summary_text",
    "format_summary_dict",
]
