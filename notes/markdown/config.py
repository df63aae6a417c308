from dataclasses import dataclass, field
from pathlib import Path

from django.conf import settings

DEFAULT_MARKDOWN_SETTINGS = {
    "ALLOW_RAW_HTML": False,
    "DETECT_LANGUAGE": True,
    "PANDOC_EXTRA_ARGS": [],
}

FILTERS_DIR = Path(__file__).resolve().parent / "filters"
RAW_HTML_AS_TEXT_FILTER = FILTERS_DIR / "raw_html_as_text.lua"


@dataclass(frozen=True)
class MarkdownSettings:
    allow_raw_html: bool = False
    detect_language: bool = True
    pandoc_extra_args: tuple = field(default_factory=tuple)


def get_markdown_settings() -> MarkdownSettings:
    """
    Read the MARKDOWN_RENDERER dict from Django settings, filling in defaults.

    Settings are read on every call so that per-test or per-request
    overrides take effect without a restart.
    """
    configured = {**DEFAULT_MARKDOWN_SETTINGS, **getattr(settings, "MARKDOWN_RENDERER", {})}
    return MarkdownSettings(
        allow_raw_html=bool(configured["ALLOW_RAW_HTML"]),
        detect_language=bool(configured["DETECT_LANGUAGE"]),
        pandoc_extra_args=tuple(configured["PANDOC_EXTRA_ARGS"]),
    )


def get_pandoc_config(markdown_settings=None):
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    Pandoc's gfm reader is CommonMark plus the GitHub extensions (pipe tables,
    strikeout, bare URI autolinks, task lists, footnotes). Pandoc's own
    highlighter is switched off: code blocks are highlighted by a
    postprocessor so that the output uses hljs class names.

    The gfm reader always parses raw HTML, so turning it into literal text
    is done by a Lua filter rather than a reader extension.
    """
    markdown_settings = markdown_settings or get_markdown_settings()

    filters = []
    if not markdown_settings.allow_raw_html:
        filters.append(str(RAW_HTML_AS_TEXT_FILTER))

    return {
        "format": "gfm",
        "to": "html5",
        "extra_args": [
            "--syntax-highlighting=none",
            # Keep paragraphs on one line; wrapping would inject newlines into text nodes
            "--wrap=none",
            *markdown_settings.pandoc_extra_args,
        ],
        "filters": filters,
    }
