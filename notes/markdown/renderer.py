# notes/markdown/renderer.py

import logging

import pypandoc

from .config import get_markdown_settings, get_pandoc_config
from .exceptions import MarkdownRenderError
from .postprocessors import apply_postprocessors
from .preprocessors import apply_preprocessors

logger = logging.getLogger(__name__)


def convert_markdown(text, markdown_settings=None):
    """
    Convert GitHub-flavored Markdown to an HTML fragment using pypandoc.

    Raises:
        MarkdownRenderError: pandoc is missing or exited with an error
    """
    pandoc_config = get_pandoc_config(markdown_settings)

    try:
        return pypandoc.convert_text(
            text,
            to=pandoc_config["to"],
            format=pandoc_config["format"],
            extra_args=pandoc_config["extra_args"],
            filters=pandoc_config["filters"],
        )
    except (RuntimeError, OSError) as e:
        logger.error(f"Pandoc conversion failed: {e}", exc_info=True)
        raise MarkdownRenderError(str(e)) from e


def render_markdown(text, context=None):
    """
    Main rendering function with pre/post processing pipeline using pypandoc

    The result is sanitized HTML that is safe to inject into a page.

    Args:
        text: Raw markdown text
        context: Optional dict for processors that need additional data
    """
    if not text:
        return ""

    context = context or {}
    markdown_settings = get_markdown_settings()

    # Pre-processing: Before markdown conversion
    text = apply_preprocessors(text, context)

    # Markdown conversion using pypandoc
    html = convert_markdown(text, markdown_settings)
    logger.debug("Pandoc produced %d chars from %d chars of markdown", len(html), len(text))

    # Post-processing: After markdown conversion
    html = apply_postprocessors(html, context)

    return html
