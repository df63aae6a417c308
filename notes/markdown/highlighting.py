"""
Pygments-backed syntax highlighting with highlight.js class names.

Note stylesheets target highlight.js scopes (``hljs-keyword``, ``hljs-string``,
...), so Pygments token types are mapped onto those scopes instead of using
Pygments' own short class names.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from pygments.lexer import Lexer
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.lexers.special import TextLexer
from pygments.token import (
    Comment,
    Generic,
    Keyword,
    Literal,
    Name,
    Number,
    Operator,
    String,
    Token,
    _TokenType,
)
from pygments.util import ClassNotFound

logger = logging.getLogger(__name__)

# Keep code text byte-identical: no stripping, no trailing newline added
LEXER_OPTIONS = {"stripnl": False, "ensurenl": False}

HLJS_SCOPES = {
    Keyword: "hljs-keyword",
    Keyword.Constant: "hljs-literal",
    Keyword.Type: "hljs-type",
    Name.Builtin: "hljs-built_in",
    Name.Builtin.Pseudo: "hljs-variable",
    Name.Function: "hljs-title",
    Name.Function.Magic: "hljs-built_in",
    Name.Class: "hljs-title",
    Name.Exception: "hljs-title",
    Name.Decorator: "hljs-meta",
    Name.Tag: "hljs-name",
    Name.Attribute: "hljs-attr",
    Name.Variable: "hljs-variable",
    Name.Constant: "hljs-variable",
    Name.Label: "hljs-symbol",
    Name.Entity: "hljs-symbol",
    Literal: "hljs-literal",
    Literal.Date: "hljs-number",
    String: "hljs-string",
    String.Escape: "hljs-char",
    String.Interpol: "hljs-subst",
    String.Regex: "hljs-regexp",
    String.Symbol: "hljs-symbol",
    Number: "hljs-number",
    Operator: "hljs-operator",
    Operator.Word: "hljs-keyword",
    Comment: "hljs-comment",
    Comment.Preproc: "hljs-meta",
    Comment.PreprocFile: "hljs-string",
    Comment.Special: "hljs-doctag",
    Generic.Deleted: "hljs-deletion",
    Generic.Inserted: "hljs-addition",
    Generic.Heading: "hljs-section",
    Generic.Subheading: "hljs-section",
    Generic.Emph: "hljs-emphasis",
    Generic.Strong: "hljs-strong",
    Generic.Prompt: "hljs-meta",
}


def hljs_scope(token_type: _TokenType) -> Optional[str]:
    """Return the hljs class for a token type, using its nearest mapped ancestor."""
    while token_type is not Token:
        scope = HLJS_SCOPES.get(token_type)
        if scope:
            return scope
        token_type = token_type.parent
    return None


def resolve_lexer(language: str) -> Optional[Lexer]:
    """Look up a lexer by fence language name or alias; None if Pygments has none."""
    if not language:
        return None
    try:
        return get_lexer_by_name(language, **LEXER_OPTIONS)
    except ClassNotFound:
        logger.debug("No lexer for language %r", language)
        return None


def detect_lexer(code: str) -> Optional[Lexer]:
    """Guess a lexer from the code itself; None when only plain text fits."""
    if not code.strip():
        return None
    try:
        lexer = guess_lexer(code, **LEXER_OPTIONS)
    except ClassNotFound:
        return None
    if isinstance(lexer, TextLexer):
        return None
    logger.debug("Detected language %r", lexer.name)
    return lexer


def tokenize(code: str, lexer: Lexer) -> List[Tuple[Optional[str], str]]:
    """
    Split code into ``(scope, text)`` runs.

    Adjacent tokens that map to the same scope are merged, so ``"hi"`` comes
    back as one string run rather than three. Joining the texts gives back
    the input exactly.
    """
    runs: List[Tuple[Optional[str], str]] = []
    for token_type, value in lexer.get_tokens(code):
        if not value:
            continue
        scope = hljs_scope(token_type)
        if runs and runs[-1][0] == scope:
            runs[-1] = (scope, runs[-1][1] + value)
        else:
            runs.append((scope, value))
    return runs
