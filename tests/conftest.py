import os
import sys

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

ENV_VARS = ("HTMLTREE_MAX_DEPTH", "HTMLTREE_TIMEOUT", "HTMLTREE_USER_AGENT", "HTMLTREE_LOG_LEVEL")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep a developer's .env or shell settings out of the tests."""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def sample_html():
    return (
        "<!DOCTYPE html>\n"
        "<html>\n"
        "  <head>\n"
        "    <!-- page metadata -->\n"
        '    <meta charset="utf-8">\n'
        "    <title>{{title}}</title>\n"
        "  </head>\n"
        '  <BODY class="main page">\n'
        "    <h1>Hello {{name}}</h1>\n"
        '    <p>Some <b>bold</b> text<br/>and a <a href="/next?x=1">link</a></p>\n'
        '    <img src="logo.png" alt="">\n'
        "  </BODY>\n"
        "</html>\n"
    )


@pytest.fixture
def html_file(tmp_path, sample_html):
    path = tmp_path / "page.html"
    path.write_text(sample_html, encoding="utf-8")
    return path
