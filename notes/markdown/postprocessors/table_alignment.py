# notes/markdown/postprocessors/table_alignment.py
"""
Postprocessor that turns pandoc's inline alignment styles into align attributes.

Pandoc writes GFM column alignment as ``style="text-align: center;"`` on each
header and body cell. Inline styles never pass the sanitizer, so the alignment
is moved to the ``align`` attribute, which the allow-list accepts for
left/center/right.

Input:
    <th style="text-align: center;">Qty</th>

Output:
    <th align="center">Qty</th>
"""

import re

from .utils import parse_fragment

ALIGN_STYLE = re.compile(r"\s*text-align:\s*(left|center|right)\s*;?\s*", re.IGNORECASE)


def table_alignment(html: str, context: dict) -> str:
    """
    Replace text-align styles on table cells with an align attribute.

    Styles other than a lone text-align are left for the sanitizer to drop.
    """
    if "text-align" not in html:
        return html

    soup = parse_fragment(html)

    for cell in soup.find_all(["th", "td"], style=True):
        match = ALIGN_STYLE.fullmatch(cell["style"])
        if match is None:
            continue
        cell["align"] = match.group(1).lower()
        del cell["style"]

    return str(soup)


def table_alignment_default(html: str, context: dict) -> str:
    """
    Default configuration for table_alignment.

    This is the function that should be registered in POSTPROCESSORS.
    """
    return table_alignment(html, context)
