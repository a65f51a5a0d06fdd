import logging
import re

from .errors import MalformedComment
from .tags import WHITESPACE

logger = logging.getLogger(__name__)

COMMENT_OPEN = "<!--"
COMMENT_CLOSE = "-->"
DOCTYPE_MARKER = "<!doctype"

_DOCTYPE_RE = re.compile(r"<!doctype(?=[\s>])", re.IGNORECASE)


def remove_comments(html):
    """Erase every `<!-- ... -->` span. Raises MalformedComment if one never closes."""
    parts = []
    pos = 0
    while True:
        start = html.find(COMMENT_OPEN, pos)
        if start == -1:
            parts.append(html[pos:])
            break
        end = html.find(COMMENT_CLOSE, start + len(COMMENT_OPEN))
        if end == -1:
            raise MalformedComment(start)
        parts.append(html[pos:start])
        pos = end + len(COMMENT_CLOSE)
    return "".join(parts)


def lowercase_tag_names(html):
    """Lowercase the name part of every `<...>`; attributes and text are left alone."""
    parts = []
    pos = 0
    while True:
        start = html.find("<", pos)
        if start == -1:
            break
        end = html.find(">", start)
        if end == -1:
            break

        name_end = end
        for i in range(start + 1, end):
            if html[i] in WHITESPACE:
                name_end = i
                break

        parts.append(html[pos:start + 1])
        parts.append(html[start + 1:name_end].lower())
        parts.append(html[name_end:end + 1])
        pos = end + 1
    parts.append(html[pos:])
    return "".join(parts)


def remove_line_breaks(html):
    return html.replace("\r\n", "\n").replace("\n", "")


def extract_doctype(html):
    """Cut the first `<!doctype ...>` out of html.

    Returns (html_without_doctype, payload) where payload is the text
    between `<!doctype ` and `>`, or None when there is no doctype.
    """
    match = _DOCTYPE_RE.search(html)
    if not match:
        return html, None
    start = match.start()
    end = html.find(">", start)
    if end == -1:
        return html, None
    payload = html[start + len(DOCTYPE_MARKER):end].strip(WHITESPACE)
    return html[:start] + html[end + 1:], payload


def normalize(html):
    """Run the preprocessing steps in order. Returns (text, doctype_or_None)."""
    html = remove_comments(html)
    html = lowercase_tag_names(html)
    html = remove_line_breaks(html)
    html, doctype = extract_doctype(html)
    logger.debug("[Normalize] %d chars after preprocessing, doctype=%r", len(html), doctype)
    return html, doctype
