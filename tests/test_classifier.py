"""
Tests for code vs. prose classification and language detection.
"""

import pytest

from medio_diff.classifier import (
    DEFAULT_KEYWORDS,
    detect_language,
    detect_text_mode,
    is_code,
    keywords_for,
)
from medio_diff.models import CodeLanguage, TextMode


class TestDetectTextMode:
    """Tests for detect_text_mode."""

    @pytest.mark.parametrize("text", [
        "let total = 0;",
        "const x = require('x');",
        "var count=1",
        "import os",
        "export default App;",
        "function add(a, b) {",
        "class Parser:",
        "    if (ready) {",
        "for (let i = 0; i < n; i++) {",
        "while (true) {",
        "return value;",
        "def handler(event):",
        "func main() {",
    ])
    def test_code_lines(self, text):
        """Statement-like line starts classify as code."""
        assert detect_text_mode(text) == TextMode.CODE

    @pytest.mark.parametrize("text", [
        "The quick brown fox",
        "if you like it, for real",
        "Return to sender.",
        "Let me know = tomorrow",
        "",
    ])
    def test_prose_lines(self, text):
        """Everything else, including empty text, is prose."""
        assert detect_text_mode(text) == TextMode.PROSE

    def test_any_line_makes_code(self):
        """One matching line anywhere classifies the whole text as code."""
        text = "Some notes about the change.\nMore notes.\nfunction foo() {\n}"
        assert detect_text_mode(text) == TextMode.CODE

    def test_is_code_helper(self):
        assert is_code("let a = 1;")
        assert not is_code("hello world")


class TestDetectLanguage:
    """Tests for detect_language."""

    def test_javascript(self):
        assert detect_language("const x = 1;") == CodeLanguage.JAVASCRIPT
        assert detect_language("import React from 'react';") == CodeLanguage.JAVASCRIPT

    def test_python(self):
        assert detect_language("def foo():\n    pass") == CodeLanguage.PYTHON
        assert detect_language("import os\nif x: pass") == CodeLanguage.PYTHON

    def test_swift(self):
        assert detect_language("import SwiftUI\nstruct ContentView { }") == CodeLanguage.SWIFT

    def test_unknown(self):
        assert detect_language("x = 1") == CodeLanguage.UNKNOWN


class TestKeywords:
    """Tests for keyword sets."""

    def test_unknown_uses_default(self):
        assert keywords_for(CodeLanguage.UNKNOWN) == DEFAULT_KEYWORDS

    def test_language_specific(self):
        assert "def" in keywords_for(CodeLanguage.PYTHON)
        assert "guard" in keywords_for(CodeLanguage.SWIFT)
        assert "undefined" in keywords_for(CodeLanguage.JAVASCRIPT)
        assert "def" not in DEFAULT_KEYWORDS
