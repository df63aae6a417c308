"""
Syntax highlighting tests - hljs scope mapping, lexer lookup and the highlighter postprocessor
"""

import pytest
from pygments.token import Comment, Keyword, Name, Number, String, Text, Token

from notes.markdown.highlighting import detect_lexer, hljs_scope, resolve_lexer, tokenize
from notes.markdown.postprocessors.syntax_highlighter import syntax_highlighter


class TestHljsScope:
    """Pygments token types map onto highlight.js scopes"""

    @pytest.mark.parametrize(
        "token_type, scope",
        [
            (Keyword, "hljs-keyword"),
            (Keyword.Constant, "hljs-literal"),
            (String.Double, "hljs-string"),
            (String.Doc, "hljs-string"),
            (Number.Integer, "hljs-number"),
            (Comment.Single, "hljs-comment"),
            (Name.Builtin, "hljs-built_in"),
            (Name.Function, "hljs-title"),
        ],
    )
    def test_mapped_types(self, token_type, scope):
        assert hljs_scope(token_type) == scope

    def test_unmapped_types_have_no_scope(self):
        assert hljs_scope(Text) is None
        assert hljs_scope(Name) is None
        assert hljs_scope(Token) is None


class TestLexerLookup:
    def test_known_language(self):
        assert resolve_lexer("python") is not None

    def test_alias_is_case_insensitive(self):
        assert resolve_lexer("JavaScript") is not None

    def test_unknown_language(self):
        assert resolve_lexer("definitely-not-a-language") is None

    def test_empty_language(self):
        assert resolve_lexer("") is None

    def test_detect_from_shebang(self):
        lexer = detect_lexer("#!/usr/bin/env python3\nprint(1)\n")
        assert lexer is not None
        assert "python" in lexer.aliases

    def test_detect_blank_code(self):
        assert detect_lexer("   \n") is None


class TestTokenize:
    def test_round_trips_text(self):
        code = 'def greet(name):\n    return f"hi {name}"  # say hi\n\n'
        runs = tokenize(code, resolve_lexer("python"))
        assert "".join(text for _, text in runs) == code

    def test_string_literal_is_one_run(self):
        runs = tokenize('print("hi")', resolve_lexer("python"))
        assert ("hljs-string", '"hi"') in runs
        assert ("hljs-built_in", "print") in runs

    def test_adjacent_scopes_never_repeat(self):
        runs = tokenize("x = 1 + 2\ny = 'a' 'b'\n", resolve_lexer("python"))
        scopes = [scope for scope, _ in runs]
        assert all(a != b for a, b in zip(scopes, scopes[1:]))


class TestSyntaxHighlighter:
    """Postprocessor contract: children replaced by spans, hljs class added"""

    def test_highlights_declared_language(self, parse):
        html = '<pre><code class="language-python">print("hi")</code></pre>'
        soup = parse(syntax_highlighter(html, {}))

        assert soup.code["class"] == ["language-python", "hljs"]
        assert soup.code.find("span", class_="hljs-string").get_text() == '"hi"'
        assert soup.code.get_text() == 'print("hi")'

    def test_escapes_code_text(self, parse):
        html = '<pre><code class="language-html">&lt;script&gt;alert(1)&lt;/script&gt;</code></pre>'
        result = syntax_highlighter(html, {})

        assert "<script>" not in result
        assert parse(result).code.get_text() == "<script>alert(1)</script>"

    def test_unknown_language_left_alone(self):
        html = '<pre><code class="language-nosuchlang">x = 1</code></pre>'
        assert syntax_highlighter(html, {}) == html

    def test_no_language_without_detection_left_alone(self):
        html = "<pre><code>#!/usr/bin/env python3\nprint(1)</code></pre>"
        assert syntax_highlighter(html, {}, detect=False) == html

    def test_detected_language_adds_no_language_class(self, parse):
        html = "<pre><code>#!/usr/bin/env python3\nprint(1)</code></pre>"
        soup = parse(syntax_highlighter(html, {}, detect=True))

        assert soup.code["class"] == ["hljs"]
        assert soup.code.find("span") is not None

    def test_already_highlighted_block_skipped(self):
        html = '<pre><code class="language-python hljs"><span class="hljs-keyword">pass</span></code></pre>'
        assert syntax_highlighter(html, {}) == html

    def test_inline_code_untouched(self):
        html = '<p><code class="language-python">print("hi")</code></p>'
        assert syntax_highlighter(html, {}) == html
