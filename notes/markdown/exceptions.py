# notes/markdown/exceptions.py


class MarkdownRenderError(Exception):
    """Raised when the Markdown converter itself fails (missing or crashing pandoc).

    Malformed Markdown never raises; it degrades to literal text.
    """
