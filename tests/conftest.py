"""Shared fixtures for the Markdown pipeline tests."""

import pytest
from bs4 import BeautifulSoup


@pytest.fixture
def parse():
    """Parse rendered HTML for structural assertions."""

    def _parse(html):
        return BeautifulSoup(html, "html.parser")

    return _parse


@pytest.fixture
def assert_not_executable(parse):
    """Fail if rendered HTML contains script tags, event handlers or javascript: URLs."""

    def _check(html):
        soup = parse(html)
        assert soup.find("script") is None
        for tag in soup.find_all(True):
            for name, value in tag.attrs.items():
                assert not name.lower().startswith("on"), f"{tag.name} kept {name}"
                if name in ("href", "src", "cite", "action", "formaction"):
                    assert not str(value).strip().lower().startswith(("javascript:", "vbscript:", "data:"))

    return _check


@pytest.fixture
def raw_html_enabled(settings):
    settings.MARKDOWN_RENDERER = {**settings.MARKDOWN_RENDERER, "ALLOW_RAW_HTML": True}
    return settings
