import logging
import re

import requests

from .config import get_settings
from .errors import LoadError

logger = logging.getLogger(__name__)

_SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.DOTALL | re.IGNORECASE)
_STYLE_RE = re.compile(r"<style[^>]*>.*?</style>", re.DOTALL | re.IGNORECASE)


def is_url(source):
    return source.lower().startswith(("http://", "https://"))


def clean_html(html):
    """Strip <script> and <style> elements, body included."""
    html = _SCRIPT_RE.sub("", html)
    html = _STYLE_RE.sub("", html)
    return html


def fetch_url(url, settings=None):
    settings = settings or get_settings()
    headers = {
        "User-Agent": settings.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    }
    try:
        response = requests.get(url, headers=headers, timeout=settings.timeout, allow_redirects=True)
    except requests.RequestException as e:
        raise LoadError(url, e) from e

    if not (200 <= response.status_code < 300):
        raise LoadError(url, f"HTTP {response.status_code}")

    logger.info("[Loader] %s -> %d chars", url, len(response.text))
    return response.text


def read_file(path):
    try:
        with open(path, encoding="utf-8") as f:
            return f.read()
    except OSError as e:
        raise LoadError(path, e) from e


def load_source(source, settings=None, strip_scripts=True):
    """Return the HTML text behind a URL or a file path."""
    html = fetch_url(source, settings) if is_url(source) else read_file(source)
    if strip_scripts:
        html = clean_html(html)
    return html
