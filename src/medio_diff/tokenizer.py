# -*- coding: utf-8 -*-
"""
Line tokenizer for code and prose.

Splits one line into an ordered, contiguous sequence of typed tokens:
- Code: string literals, identifiers/keywords, operators (longest match
  first), brackets, whitespace runs, everything else.
- Prose: Unicode words (letters, digits and combining marks, with internal
  apostrophes/hyphens), whitespace runs, punctuation by Unicode category,
  everything else (symbols, emoji).

Token texts concatenate back to the input line, so each token's range is
the running sum of the lengths before it.
"""

import re
import unicodedata
from typing import Iterable, Optional

from .classifier import DEFAULT_KEYWORDS
from .models import TextRange, Token, TokenType
from .offsets import OffsetUnit, unit_length

_CODE_TOKEN_RE = re.compile(
    r"""
    (?P<string>"(?:\\.|[^"\\])*"?|'(?:\\.|[^'\\])*'?|`(?:\\.|[^`\\])*`?)
    | (?P<identifier>[A-Za-z_][A-Za-z0-9_]*)
    | (?P<operator>===|!==|=>|==|!=|>=|<=|\+=|-=|\*=|/=|%=|&=|\|=|\^=|&&|\|\||\+\+|--)
    | (?P<bracket>[(){}\[\]])
    | (?P<single>[=+\-*/%!~^.,:;<>&|?])
    | (?P<whitespace>\s+)
    | (?P<number>\d+(?:\.\d+)?)
    | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

_PROSE_TOKEN_RE = re.compile(
    r"(?P<word>[^\W_]+(?:['’\-][^\W_]+)*)|(?P<whitespace>\s+)|(?P<char>.)",
    re.DOTALL,
)

_CODE_GROUP_TYPES = {
    "string": TokenType.STRING,
    "operator": TokenType.OPERATOR,
    "bracket": TokenType.BRACKET,
    "single": TokenType.OPERATOR,
    "whitespace": TokenType.WHITESPACE,
    "number": TokenType.OTHER,
    "other": TokenType.OTHER,
}


def normalize_token(text: str, token_type: TokenType) -> str:
    """
    Canonical comparison form of a token.

    Words are NFC-composed and lowercased, whitespace collapses to a single
    space, and every other type keeps its exact text.
    """
    if token_type == TokenType.WORD:
        return unicodedata.normalize("NFC", text).lower()
    if token_type == TokenType.WHITESPACE:
        return " "
    return text


def _classify_prose_char(ch: str) -> TokenType:
    if unicodedata.category(ch).startswith("P"):
        return TokenType.PUNCTUATION
    return TokenType.OTHER


def _iter_code_types(
    line_text: str,
    keywords: frozenset[str],
) -> Iterable[tuple[str, TokenType]]:
    for match in _CODE_TOKEN_RE.finditer(line_text):
        group = match.lastgroup
        text = match.group()
        if group == "identifier":
            yield text, TokenType.KEYWORD if text in keywords else TokenType.IDENTIFIER
        else:
            yield text, _CODE_GROUP_TYPES[group]


def _is_mark(ch: str) -> bool:
    return unicodedata.category(ch).startswith("M")


def _iter_prose_types(line_text: str) -> Iterable[tuple[str, TokenType]]:
    word = ""
    for match in _PROSE_TOKEN_RE.finditer(line_text):
        group = match.lastgroup
        text = match.group()
        # Combining marks are not \w; they and the letters after them stay in the word
        if word and (_is_mark(text[0]) or (group == "word" and _is_mark(word[-1]))):
            word += text
            continue
        if word:
            yield word, TokenType.WORD
            word = ""
        if group == "word":
            word = text
        elif group == "whitespace":
            yield text, TokenType.WHITESPACE
        else:
            yield text, _classify_prose_char(text)
    if word:
        yield word, TokenType.WORD


def tokenize(
    line_text: str,
    is_code: bool,
    *,
    keywords: Optional[frozenset[str]] = None,
    base_offset: int = 0,
    offset_unit: OffsetUnit = "utf16",
) -> list[Token]:
    """
    Tokenize a single line.

    Args:
        line_text: Text of one line (no newline).
        is_code: Use code rules instead of prose rules.
        keywords: Keyword set for code mode; defaults to DEFAULT_KEYWORDS.
        base_offset: Added to every token location (the line's document
            offset), so ranges come out absolute.
        offset_unit: Unit for token ranges.

    Returns:
        Ordered list of tokens covering the whole line. Empty input yields
        an empty list.
    """
    if not line_text:
        return []

    if is_code:
        typed = _iter_code_types(line_text, keywords if keywords is not None else DEFAULT_KEYWORDS)
    else:
        typed = _iter_prose_types(line_text)

    tokens = []
    position = base_offset
    for text, token_type in typed:
        length = unit_length(text, offset_unit)
        tokens.append(Token(
            text=text,
            normalized=normalize_token(text, token_type),
            type=token_type,
            range=TextRange(position, length),
        ))
        position += length

    return tokens


def significant_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Drop whitespace tokens."""
    return [t for t in tokens if not t.is_whitespace]
