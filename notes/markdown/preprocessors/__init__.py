# notes/markdown/preprocessors/__init__.py

from .normalize_source import normalize_source_default

PREPROCESSORS = [
    normalize_source_default,  # Line endings and NUL characters, before pandoc sees the text
    # Order matters - they run sequentially
]


def apply_preprocessors(text, context):
    """Apply all preprocessors in order"""
    for processor in PREPROCESSORS:
        text = processor(text, context)
    return text
