# notes/markdown/postprocessors/sanitizer.py

import logging

import bleach

from ..schema import ALLOWED_PROTOCOLS, ALLOWED_TAGS, is_allowed_attribute

logger = logging.getLogger(__name__)


def sanitize_html(html, context):
    """
    Sanitize HTML output using bleach.

    This is the LAST postprocessor: nothing may modify the HTML after it, and it
    trusts nothing produced before it. Disallowed elements are removed while
    their text content is kept; disallowed attributes, comments and URL schemes
    are dropped. The result is re-serialized by html5lib, so tags are balanced
    and text and attribute values are entity-escaped.
    """
    sanitized = bleach.clean(
        html,
        tags=ALLOWED_TAGS,
        attributes=is_allowed_attribute,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,  # Drop disallowed tags, keep their text
        strip_comments=True,
    )

    if len(sanitized) != len(html):
        logger.debug("Sanitizer changed output: %d -> %d chars", len(html), len(sanitized))

    return sanitized
