"""
Allow-list schema for rendered note HTML.

The schema is a capability set: every permitted ``(tag, attribute)`` pair maps
to a validator that decides whether a given value may stay. ``"*"`` as the tag
applies to every allowed tag. Anything not listed is dropped by the sanitizer.

The base is a conservative GitHub-style set (prose, headings, lists, tables,
links, images, code, blockquotes, task list checkboxes, footnotes), extended
with the classes emitted by the code block postprocessors.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, FrozenSet, Tuple

Validator = Callable[[str], bool]


def any_value(value: str) -> bool:
    return True


def exact(*allowed: str) -> Validator:
    allowed_set = frozenset(allowed)

    def validate(value: str) -> bool:
        return value in allowed_set

    return validate


def prefix(start: str) -> Validator:
    def validate(value: str) -> bool:
        return value.startswith(start) and len(value) > len(start)

    return validate


def pattern(regex: str) -> Validator:
    compiled = re.compile(regex)

    def validate(value: str) -> bool:
        return compiled.fullmatch(value) is not None

    return validate


def one_of(*validators: Validator) -> Validator:
    def validate(value: str) -> bool:
        return any(check(value) for check in validators)

    return validate


def class_tokens(validator: Validator) -> Validator:
    """Accept a class attribute only if every space-separated token passes."""

    def validate(value: str) -> bool:
        tokens = value.split()
        return bool(tokens) and all(validator(token) for token in tokens)

    return validate


ALLOWED_TAGS: FrozenSet[str] = frozenset(
    {
        # text
        "p",
        "br",
        "wbr",
        "div",
        "span",
        "b",
        "i",
        "strong",
        "em",
        "s",
        "strike",
        "del",
        "ins",
        "mark",
        "small",
        "sup",
        "sub",
        "q",
        "cite",
        "dfn",
        "abbr",
        "time",
        "ruby",
        "rt",
        "rp",
        "bdo",
        # headings
        "h1",
        "h2",
        "h3",
        "h4",
        "h5",
        "h6",
        # lists
        "ul",
        "ol",
        "li",
        "dl",
        "dt",
        "dd",
        "hr",
        "blockquote",
        # code
        "pre",
        "code",
        "kbd",
        "samp",
        "var",
        "tt",
        # tables
        "table",
        "caption",
        "thead",
        "tbody",
        "tfoot",
        "tr",
        "th",
        "td",
        # media
        "img",
        "figure",
        "figcaption",
        # links
        "a",
        # task lists
        "input",
        "label",
        # disclosure
        "details",
        "summary",
        # footnotes
        "section",
    }
)

ALLOWED_PROTOCOLS: FrozenSet[str] = frozenset({"http", "https", "mailto"})

HLJS_CLASS = one_of(exact("hljs"), prefix("hljs-"))
FOOTNOTE_ID = pattern(r"fn(ref)?\d+(-\d+)?")

ATTRIBUTE_RULES: Dict[Tuple[str, str], Validator] = {
    ("*", "title"): any_value,
    ("*", "lang"): pattern(r"[A-Za-z]{1,8}(-[A-Za-z0-9]{1,8})*"),
    ("*", "dir"): exact("ltr", "rtl", "auto"),
    ("a", "href"): any_value,
    ("a", "class"): class_tokens(exact("footnote-ref", "footnote-back")),
    ("a", "id"): FOOTNOTE_ID,
    ("a", "role"): exact("doc-noteref", "doc-backlink"),
    ("img", "src"): any_value,
    ("img", "alt"): any_value,
    ("img", "width"): pattern(r"\d+%?"),
    ("img", "height"): pattern(r"\d+%?"),
    ("li", "id"): FOOTNOTE_ID,
    ("li", "class"): class_tokens(exact("task-list-item")),
    ("ul", "class"): class_tokens(exact("task-list", "contains-task-list")),
    ("ol", "start"): pattern(r"-?\d+"),
    ("ol", "type"): exact("1", "a", "A", "i", "I"),
    ("ol", "class"): class_tokens(exact("example")),
    ("section", "id"): exact("footnotes"),
    ("section", "class"): class_tokens(exact("footnotes", "footnotes-end-of-document")),
    ("section", "role"): exact("doc-endnotes"),
    ("input", "type"): exact("checkbox"),
    ("input", "checked"): any_value,
    ("input", "disabled"): any_value,
    ("th", "align"): exact("left", "center", "right"),
    ("td", "align"): exact("left", "center", "right"),
    ("th", "colspan"): pattern(r"\d+"),
    ("th", "rowspan"): pattern(r"\d+"),
    ("td", "colspan"): pattern(r"\d+"),
    ("td", "rowspan"): pattern(r"\d+"),
    ("th", "scope"): exact("col", "row", "colgroup", "rowgroup"),
    ("blockquote", "cite"): any_value,
    ("q", "cite"): any_value,
    ("del", "cite"): any_value,
    ("ins", "cite"): any_value,
    ("time", "datetime"): any_value,
    ("details", "open"): any_value,
    # code blocks
    ("code", "class"): class_tokens(one_of(prefix("language-"), HLJS_CLASS)),
    ("span", "class"): class_tokens(
        one_of(prefix("hljs-"), exact("code-block-filename", "code-block-lang"))
    ),
    ("div", "class"): class_tokens(
        exact(
            "code-block-container",
            "code-block-header",
            "code-block-filename",
            "code-block-lang",
        )
    ),
    ("div", "data-filename"): any_value,
    ("div", "data-lang"): any_value,
}


def is_allowed_attribute(tag: str, name: str, value: str) -> bool:
    """
    Decide whether ``name="value"`` may stay on ``<tag>``.

    This is the attribute filter handed to bleach. URL-valued attributes are
    additionally checked against ALLOWED_PROTOCOLS by bleach itself.
    """
    if tag not in ALLOWED_TAGS:
        return False
    validator = ATTRIBUTE_RULES.get((tag, name)) or ATTRIBUTE_RULES.get(("*", name))
    if validator is None:
        return False
    return validator(value)
