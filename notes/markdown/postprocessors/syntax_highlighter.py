# notes/markdown/postprocessors/syntax_highlighter.py
"""
Postprocessor that syntax-highlights fenced code blocks.

Input:
    <pre><code class="language-python">print("hi")</code></pre>

Output:
    <pre><code class="language-python hljs"><span class="hljs-built_in">print</span>(<span class="hljs-string">"hi"</span>)</code></pre>

- A ``language-*`` class selects the lexer; unknown languages are left as-is
- Blocks without a language class are auto-detected when DETECT_LANGUAGE is on
- Detected languages do not add a ``language-*`` class
- Inline <code> outside <pre> is never touched
"""

import logging

from bs4 import BeautifulSoup, Tag

from ..config import get_markdown_settings
from ..highlighting import detect_lexer, resolve_lexer, tokenize
from .utils import find_language_class, get_classes, iter_code_blocks, parse_fragment

logger = logging.getLogger(__name__)

HLJS_CLASS = "hljs"


def _fill_highlighted(soup: BeautifulSoup, code: Tag, runs) -> None:
    code.clear()
    for scope, text in runs:
        if scope is None:
            code.append(text)
            continue
        span = soup.new_tag("span")
        span["class"] = [scope]
        span.string = text
        code.append(span)


def syntax_highlighter(html: str, context: dict, detect: bool = True) -> str:
    """
    Replace code block contents with hljs-classed token spans.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)
        detect: Guess the language of blocks that declare none

    Returns:
        HTML with highlighted code blocks
    """
    soup = parse_fragment(html)

    for _pre, code in iter_code_blocks(soup):
        classes = get_classes(code)
        if HLJS_CLASS in classes:
            continue

        source = code.get_text()
        found = find_language_class(classes)
        if found is not None:
            lexer = resolve_lexer(found[1])
        elif detect:
            lexer = detect_lexer(source)
        else:
            lexer = None

        if lexer is None:
            continue

        _fill_highlighted(soup, code, tokenize(source, lexer))
        code["class"] = classes + [HLJS_CLASS]
        logger.debug("Highlighted %d chars as %s", len(source), lexer.name)

    return str(soup)


def syntax_highlighter_default(html: str, context: dict) -> str:
    """
    Default configuration for syntax_highlighter.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return syntax_highlighter(html, context, detect=get_markdown_settings().detect_language)
