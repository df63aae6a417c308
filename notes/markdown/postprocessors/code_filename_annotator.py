# notes/markdown/postprocessors/code_filename_annotator.py
"""
Postprocessor that splits filename annotations off fenced code languages.

Runs before syntax highlighting so the highlighter only sees a language it can
recognise.

Markdown:
    ```python:src/app.py
    print("hi")
    ```

Input:
    <pre><code class="language-python:src/app.py">print("hi")</code></pre>

Output:
    <pre><code class="language-python" data-filename="src/app.py" data-lang="python">print("hi")</code></pre>

The split happens on the first colon only, so ``python:C:/tmp/x.py`` yields the
filename ``C:/tmp/x.py``. The data-* attributes are consumed and removed by
code_block_header after highlighting.
"""

import logging

from .utils import LANGUAGE_PREFIX, find_language_class, get_classes, iter_code_blocks, parse_fragment

logger = logging.getLogger(__name__)

FILENAME_ATTR = "data-filename"
LANG_ATTR = "data-lang"


def split_language_annotation(annotation: str) -> tuple[str, str] | None:
    """
    Split ``lang:filename`` on its first colon.

    Returns:
        ``(lang, filename)``, or None if there is no colon or the language is empty
    """
    lang, sep, filename = annotation.partition(":")
    if not sep or not lang:
        return None
    return lang, filename


def code_filename_annotator(html: str, context: dict) -> str:
    """
    Record fence filenames on code elements and strip them from the class.

    Args:
        html: HTML string to process
        context: Context dictionary (unused but required for postprocessor signature)

    Returns:
        HTML with annotated code elements
    """
    soup = parse_fragment(html)

    for _pre, code in iter_code_blocks(soup):
        classes = get_classes(code)
        found = find_language_class(classes)
        if found is None:
            continue

        index, annotation = found
        split = split_language_annotation(annotation)
        if split is None:
            continue

        lang, filename = split
        classes[index] = f"{LANGUAGE_PREFIX}{lang}"
        code["class"] = classes
        code[FILENAME_ATTR] = filename
        code[LANG_ATTR] = lang
        logger.debug("Annotated code block: lang=%r filename=%r", lang, filename)

    return str(soup)


def code_filename_annotator_default(html: str, context: dict) -> str:
    """
    Default configuration for code_filename_annotator.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return code_filename_annotator(html, context)
