# -*- coding: utf-8 -*-
"""
Code vs. prose classification.

A document is code when any of its lines starts like a statement in a
common programming language; otherwise it is prose. The decision is made
once per document and drives both tokenization and similarity weighting.
"""

import re

from .models import CodeLanguage, TextMode

# Line-start indicators, anchored per line
CODE_INDICATOR_PATTERNS = [
    r"^\s*import\s+[\w.]+\s*;?$",
    r"^\s*export\s+",
    r"^\s*function\s+\w+\s*\(",
    r"^\s*class\s+\w+",
    r"^\s*const\s+\w+\s*=",
    r"^\s*let\s+\w+\s*=",
    r"^\s*var\s+\w+\s*=",
    r"^\s*return\s+",
    r"^\s*if\s*\(",
    r"^\s*for\s*\(",
    r"^\s*while\s*\(",
    r"^\s*def\s+\w+\s*\(",
    r"^\s*func\s+\w+\s*\(",
]

_CODE_INDICATOR_RE = re.compile("|".join(CODE_INDICATOR_PATTERNS), re.MULTILINE)

DEFAULT_KEYWORDS = frozenset([
    "import", "export", "default", "function", "class", "const", "let", "var",
    "return", "if", "else", "for", "while", "do", "switch", "case", "break",
    "continue", "try", "catch", "throw", "new", "delete", "typeof", "instanceof",
    "void", "this", "super", "extends", "static", "get", "set", "async", "await",
])

LANGUAGE_KEYWORDS = {
    CodeLanguage.JAVASCRIPT: frozenset([
        "const", "let", "var", "function", "return", "import", "export", "default",
        "class", "extends", "static", "if", "else", "for", "while", "do", "switch",
        "case", "break", "continue", "try", "catch", "finally", "throw", "new",
        "this", "super", "instanceof", "typeof", "void", "delete", "null",
        "undefined",
    ]),
    CodeLanguage.PYTHON: frozenset([
        "def", "class", "if", "else", "elif", "for", "while", "try", "except",
        "finally", "with", "as", "import", "from", "return", "yield", "break",
        "continue", "pass", "raise", "True", "False", "None", "and", "or", "not",
        "is", "in", "lambda",
    ]),
    CodeLanguage.SWIFT: frozenset([
        "class", "struct", "enum", "protocol", "extension", "func", "var", "let",
        "if", "else", "guard", "switch", "case", "break", "continue", "return",
        "throw", "try", "catch", "for", "while", "repeat", "import", "public",
        "private", "fileprivate", "internal", "static", "final", "override",
        "mutating", "nonmutating", "convenience", "weak", "unowned", "required",
        "optional", "nil",
    ]),
}


def detect_text_mode(text: str) -> TextMode:
    """
    Classify a document as code or prose.

    Args:
        text: Whole document text.

    Returns:
        TextMode.CODE if any line matches a code indicator, else
        TextMode.PROSE. Ambiguous input defaults to prose.
    """
    if text and _CODE_INDICATOR_RE.search(text):
        return TextMode.CODE
    return TextMode.PROSE


def is_code(text: str) -> bool:
    """Check if text classifies as code."""
    return detect_text_mode(text) == TextMode.CODE


def detect_language(text: str) -> CodeLanguage:
    """
    Guess the programming language of a code document.

    Checks are ordered; the first hit wins.
    """
    if "import React" in text or "const " in text or "function " in text:
        return CodeLanguage.JAVASCRIPT
    if "def " in text or ("import " in text and ":" in text):
        return CodeLanguage.PYTHON
    if "import SwiftUI" in text or ("struct " in text and "View" in text):
        return CodeLanguage.SWIFT
    return CodeLanguage.UNKNOWN


def keywords_for(language: CodeLanguage) -> frozenset[str]:
    """Keyword set for a language, falling back to the default set."""
    return LANGUAGE_KEYWORDS.get(language, DEFAULT_KEYWORDS)
