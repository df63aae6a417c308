# notes/templatetags/markdown_tags.py

from django import template
from django.utils.safestring import mark_safe

from notes.markdown.renderer import render_markdown

register = template.Library()


@register.filter(name="markdown")
def markdown_filter(value):
    """Render a note body; the pipeline sanitizes, so the result is marked safe."""
    return mark_safe(render_markdown(value))
