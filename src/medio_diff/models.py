"""
Data models for the medio-diff engine.

This module defines the core data structures shared by the classifier,
tokenizer, line matcher and diff engine. All of them are immutable once
created and live only for a single compute_differences call.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class TextMode(Enum):
    """How a document is treated for tokenization and similarity."""
    CODE = "code"
    PROSE = "prose"


class CodeLanguage(Enum):
    """Sub-language of a code document, used to pick a keyword set."""
    JAVASCRIPT = "javascript"
    PYTHON = "python"
    SWIFT = "swift"
    UNKNOWN = "unknown"


class TokenType(Enum):
    """Lexical category of a token.

    Code emits identifier/keyword/operator/bracket/string; prose emits
    word/punctuation/other. Both emit whitespace.
    """
    WORD = "word"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    OPERATOR = "operator"
    BRACKET = "bracket"
    STRING = "string"
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    OTHER = "other"


class DiffKind(Enum):
    """Kind of a word-level difference."""
    ADDITION = "addition"
    DELETION = "deletion"
    MODIFICATION = "modification"


@dataclass(frozen=True)
class TextRange:
    """An offset span (location, length) in the configured offset unit."""
    location: int
    length: int

    @property
    def end(self) -> int:
        return self.location + self.length

    def contains(self, other: "TextRange") -> bool:
        """Check if other lies fully inside this range."""
        return self.location <= other.location and other.end <= self.end

    def to_dict(self) -> dict[str, int]:
        return {"location": self.location, "length": self.length}


@dataclass(frozen=True)
class Token:
    """A minimal lexical unit of one line."""
    text: str
    normalized: str  # Comparison form (lowercased words, " " for whitespace)
    type: TokenType
    range: TextRange

    @property
    def is_whitespace(self) -> bool:
        return self.type == TokenType.WHITESPACE


@dataclass(frozen=True)
class Line:
    """A single line of a document with its absolute range."""
    text: str
    range: TextRange
    index: int  # Zero-based line number

    @property
    def is_blank(self) -> bool:
        return not self.text.strip()


@dataclass(frozen=True)
class WordDiff:
    """A highlighted sub-range of a source line."""
    range: TextRange
    kind: DiffKind

    def to_dict(self) -> dict[str, Any]:
        return {"range": self.range.to_dict(), "kind": self.kind.value}


@dataclass(frozen=True)
class LineDiff:
    """Per-source-line comparison result."""
    range: TextRange
    line_number: int
    word_diffs: tuple[WordDiff, ...] = field(default_factory=tuple)

    @property
    def is_different(self) -> bool:
        """A line differs exactly when it carries word-diffs."""
        return bool(self.word_diffs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "range": self.range.to_dict(),
            "line_number": self.line_number,
            "is_different": self.is_different,
            "word_diffs": [wd.to_dict() for wd in self.word_diffs],
        }
