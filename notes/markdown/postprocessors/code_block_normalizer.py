# notes/markdown/postprocessors/code_block_normalizer.py
"""
Postprocessor that maps pandoc's code block markup onto the canonical
``pre > code.language-<lang>`` shape the rest of the pipeline works with.

Pandoc (highlighting off) puts the fence info string on the <pre>:
    <pre class="python:app.py"><code>print(&quot;hi&quot;)</code></pre>

Output:
    <pre><code class="language-python:app.py">print(&quot;hi&quot;)</code></pre>

If pandoc's own highlighter ran anyway, its wrapper div and token spans are
removed so that only the plain code text remains:
    <div class="sourceCode" id="cb1"><pre class="sourceCode python">
        <code class="sourceCode python"><span id="cb1-1">...</span></code></pre></div>
"""

import logging

from bs4 import Tag

from .utils import LANGUAGE_PREFIX, get_classes, iter_code_blocks, parse_fragment, set_classes

logger = logging.getLogger(__name__)

# Classes pandoc adds to highlighted blocks that are not languages
PANDOC_CODE_CLASSES = {"sourceCode", "numberSource", "numberLines"}


def _unwrap_source_code_div(pre: Tag) -> bool:
    parent = pre.parent
    if isinstance(parent, Tag) and parent.name == "div" and "sourceCode" in get_classes(parent):
        parent.unwrap()
        return True
    return False


def code_block_normalizer(html: str, context: dict) -> str:
    """
    Move fence languages from <pre> onto <code> as ``language-*`` classes.

    Args:
        html: HTML string produced by pandoc
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        HTML with canonical code block markup
    """
    soup = parse_fragment(html)

    for pre, code in iter_code_blocks(soup):
        pandoc_highlighted = _unwrap_source_code_div(pre)

        pre_classes = get_classes(pre)
        if "sourceCode" in pre_classes:
            pandoc_highlighted = True
        languages = [cls for cls in pre_classes if cls not in PANDOC_CODE_CLASSES]
        set_classes(pre, [])

        code_classes = [cls for cls in get_classes(code) if cls not in PANDOC_CODE_CLASSES]
        has_language = any(cls.startswith(LANGUAGE_PREFIX) for cls in code_classes)
        # pandoc repeats the language on highlighted <code> elements
        code_classes = [cls for cls in code_classes if cls not in languages]
        if languages and not has_language:
            code_classes.insert(0, f"{LANGUAGE_PREFIX}{languages[0]}")
        set_classes(code, code_classes)

        if pandoc_highlighted:
            code.string = code.get_text()

        logger.debug("Normalized code block, classes=%s", code_classes)

    return str(soup)


def code_block_normalizer_default(html: str, context: dict) -> str:
    """
    Default configuration for code_block_normalizer.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_block_normalizer(html, context)
