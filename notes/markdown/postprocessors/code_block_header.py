# notes/markdown/postprocessors/code_block_header.py
"""
Postprocessor that wraps annotated code blocks in a container with a header.

Runs after syntax highlighting and consumes the data-filename/data-lang
attributes left by code_filename_annotator.

Input:
    <pre><code class="language-python hljs" data-filename="app.py" data-lang="python">...</code></pre>

Output:
    <div class="code-block-container">
        <div class="code-block-header">
            <span class="code-block-filename">app.py</span>
            <span class="code-block-lang">python</span>
        </div>
        <pre><code class="language-python hljs">...</code></pre>
    </div>

- The filename span is only emitted for a non-empty filename, the language span
  only for a non-empty language
- Blocks with neither stay unwrapped
- Without annotation the language is read from the ``language-*`` class
"""

import logging

from bs4 import BeautifulSoup, Tag

from .code_filename_annotator import FILENAME_ATTR, LANG_ATTR
from .utils import find_language_class, get_classes, iter_code_blocks, parse_fragment

logger = logging.getLogger(__name__)

CONTAINER_CLASS = "code-block-container"
HEADER_CLASS = "code-block-header"
FILENAME_CLASS = "code-block-filename"
LANG_CLASS = "code-block-lang"


def _pop_attr(tag: Tag, name: str) -> str:
    value = tag.attrs.pop(name, None)
    if isinstance(value, list):
        value = " ".join(value)
    return value or ""


def _header_span(soup: BeautifulSoup, css_class: str, text: str) -> Tag:
    span = soup.new_tag("span")
    span["class"] = [css_class]
    span.string = text
    return span


def _build_container(soup: BeautifulSoup, pre: Tag, filename: str, lang: str) -> Tag:
    container = soup.new_tag("div")
    container["class"] = [CONTAINER_CLASS]

    header = soup.new_tag("div")
    header["class"] = [HEADER_CLASS]
    if filename:
        header.append(_header_span(soup, FILENAME_CLASS, filename))
    if lang:
        header.append(_header_span(soup, LANG_CLASS, lang))

    pre.replace_with(container)
    container.append(header)
    container.append(pre)
    return container


def code_block_header(html: str, context: dict) -> str:
    """
    Wrap code blocks that have a language or filename in a labelled container.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        HTML with wrapped code blocks and no transient data attributes
    """
    soup = parse_fragment(html)

    for pre, code in iter_code_blocks(soup):
        filename = _pop_attr(code, FILENAME_ATTR)
        lang = _pop_attr(code, LANG_ATTR)

        if not lang:
            found = find_language_class(get_classes(code))
            if found is not None:
                # Unlike the annotator, an empty language here still yields a filename
                lang, colon, class_filename = found[1].partition(":")
                if colon:
                    filename = filename or class_filename

        if not lang and not filename:
            continue

        _build_container(soup, pre, filename, lang)
        logger.debug("Wrapped code block: lang=%r filename=%r", lang, filename)

    return str(soup)


def code_block_header_default(html: str, context: dict) -> str:
    """
    Default configuration for code_block_header.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_block_header(html, context)
