"""Helpers shared by the code block postprocessors."""

from __future__ import annotations

from bs4 import BeautifulSoup, Tag

LANGUAGE_PREFIX = "language-"


def parse_fragment(html: str) -> BeautifulSoup:
    """Parse an HTML fragment into a fresh, stage-local tree."""
    return BeautifulSoup(html, "html.parser")


def get_classes(tag: Tag) -> list[str]:
    """Return the class list of a tag, whatever form the attribute is stored in."""
    classes = tag.get("class", [])
    if isinstance(classes, str):
        classes = classes.split()
    return list(classes)


def set_classes(tag: Tag, classes: list[str]) -> None:
    if classes:
        tag["class"] = classes
    elif "class" in tag.attrs:
        del tag["class"]


def code_child(pre: Tag) -> Tag | None:
    """Return the code element of a ``pre > code`` pair, or None."""
    first = pre.find(True, recursive=False)
    if first is not None and first.name == "code":
        return first
    return None


def iter_code_blocks(soup: BeautifulSoup):
    """Yield ``(pre, code)`` for every pre whose first element child is a code."""
    # Materialise first: callers replace pre elements while iterating
    for pre in list(soup.find_all("pre")):
        code = code_child(pre)
        if code is not None:
            yield pre, code


def find_language_class(classes: list[str]) -> tuple[int, str] | None:
    """Return ``(index, remainder)`` for the first ``language-*`` class, if any."""
    for index, cls in enumerate(classes):
        if cls.startswith(LANGUAGE_PREFIX):
            return index, cls[len(LANGUAGE_PREFIX):]
    return None
