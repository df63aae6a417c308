# notes/markdown/postprocessors/__init__.py

from .code_block_header import code_block_header_default
from .code_block_normalizer import code_block_normalizer_default
from .code_filename_annotator import code_filename_annotator_default
from .sanitizer import sanitize_html
from .syntax_highlighter import syntax_highlighter_default
from .table_alignment import table_alignment_default

POSTPROCESSORS = [
    code_block_normalizer_default,  # pandoc <pre class="lang"> -> <code class="language-lang">
    code_filename_annotator_default,  # Split "lang:filename" before the highlighter sees it
    syntax_highlighter_default,  # hljs-classed token spans
    code_block_header_default,  # Wrap annotated blocks with a filename/language header
    table_alignment_default,  # style="text-align: x" -> align="x"
    sanitize_html,  # Allow-list sanitization, must stay last
    # Order matters - they run sequentially
]


def apply_postprocessors(html, context):
    """Apply all postprocessors in order"""
    for processor in POSTPROCESSORS:
        html = processor(html, context)
    return html
