r"""
Preprocessor that normalizes raw Markdown source before conversion.

Converts:
    "a\r\nb\rc"      → "a\nb\nc"
    "a\x00b"         → "a\ufffdb"

CommonMark requires U+0000 to be replaced by the replacement character for
security reasons; pandoc is also fed a single line-ending convention so that
code block contents come back byte-identical across platforms.
"""

import re

_LINE_ENDING_RE = re.compile(r"\r\n?")

REPLACEMENT_CHARACTER = "\ufffd"


def normalize_source(text: str, context: dict) -> str:
    """
    Normalize line endings to LF and replace NUL characters.

    Args:
        text: Raw markdown text
        context: Context dictionary (unused but required for preprocessor signature)

    Returns:
        Normalized markdown text
    """
    text = _LINE_ENDING_RE.sub("\n", text)
    return text.replace("\x00", REPLACEMENT_CHARACTER)


def normalize_source_default(text: str, context: dict) -> str:
    """
    Default configuration for normalize_source.

    Register this in PREPROCESSORS.
    """
    return normalize_source(text, context)
