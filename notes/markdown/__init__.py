from .exceptions import MarkdownRenderError
from .renderer import render_markdown

__all__ = ("MarkdownRenderError", "render_markdown")
