# -*- coding: utf-8 -*-
"""
Centralized configuration for the medio-diff engine.

This module provides a single configuration dataclass that controls
classification override, similarity acceptance thresholds, the offset unit
ranges are reported in, and the optional word-diff merge policy.
"""

from dataclasses import dataclass
from typing import Literal, Optional

from .models import TextMode
from .offsets import OFFSET_UNITS, OffsetUnit


# Type alias for classification override
# - "auto": Classify the source text (default).
# - "code": Always tokenize and score as code.
# - "prose": Always tokenize and score as prose.
DiffMode = Literal["auto", "code", "prose"]

CODE_SIMILARITY_THRESHOLD = 0.5
PROSE_SIMILARITY_THRESHOLD = 0.3


@dataclass
class DiffConfig:
    """
    Configuration for a diff computation.

    Attributes:
        mode: Classification override. "auto" runs the classifier on the
            source text; "code"/"prose" force a mode for both sides.

        offset_unit: Unit every reported range is expressed in:
            - "utf16": UTF-16 code units (default). Matches editor text
              buffers such as NSString, JavaScript strings and Qt.
            - "codepoint": Unicode code points. Matches Python str slicing.

        code_threshold: Minimum code similarity (LCS ratio) for the line
            matcher to accept a fuzzy pairing.
        prose_threshold: Minimum prose similarity (Jaccard) for the line
            matcher to accept a fuzzy pairing.

        strip_line_comments: In code mode, ignore trailing line comments
            when looking for verbatim-surviving lines.

        merge_adjacent: Fuse consecutive modifications separated only by
            whitespace into one span. Off by default: each token keeps its
            own minimal range.
    """

    mode: DiffMode = "auto"
    offset_unit: OffsetUnit = "utf16"

    # Fuzzy match acceptance (score >= threshold)
    code_threshold: float = CODE_SIMILARITY_THRESHOLD
    prose_threshold: float = PROSE_SIMILARITY_THRESHOLD

    strip_line_comments: bool = True
    merge_adjacent: bool = False

    @property
    def forced_mode(self) -> Optional[TextMode]:
        """TextMode forced by configuration, or None when auto-detecting."""
        if self.mode == "code":
            return TextMode.CODE
        if self.mode == "prose":
            return TextMode.PROSE
        return None

    def threshold_for(self, is_code: bool) -> float:
        """Acceptance threshold for the given mode."""
        return self.code_threshold if is_code else self.prose_threshold

    def __post_init__(self):
        """Validate configuration values."""
        if self.mode not in ("auto", "code", "prose"):
            raise ValueError(
                f"mode must be 'auto', 'code', or 'prose', got '{self.mode}'"
            )
        if self.offset_unit not in OFFSET_UNITS:
            raise ValueError(
                f"offset_unit must be 'utf16' or 'codepoint', got '{self.offset_unit}'"
            )
        if not 0.0 <= self.code_threshold <= 1.0:
            raise ValueError(
                f"code_threshold must be between 0 and 1, got {self.code_threshold}"
            )
        if not 0.0 <= self.prose_threshold <= 1.0:
            raise ValueError(
                f"prose_threshold must be between 0 and 1, got {self.prose_threshold}"
            )

    @classmethod
    def code(cls, **overrides) -> "DiffConfig":
        """Create config that treats both texts as source code.

        Args:
            **overrides: Override any config values.

        Returns:
            DiffConfig with mode forced to "code".
        """
        defaults = {"mode": "code"}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def prose(cls, **overrides) -> "DiffConfig":
        """Create config that treats both texts as prose.

        Args:
            **overrides: Override any config values.

        Returns:
            DiffConfig with mode forced to "prose".
        """
        defaults = {"mode": "prose"}
        defaults.update(overrides)
        return cls(**defaults)

    @classmethod
    def for_python_strings(cls, **overrides) -> "DiffConfig":
        """Create config whose ranges slice Python strings directly.

        Args:
            **overrides: Override any config values.

        Returns:
            DiffConfig with offset_unit="codepoint".
        """
        defaults = {"offset_unit": "codepoint"}
        defaults.update(overrides)
        return cls(**defaults)
