import logging

from .attributes import parse_attributes
from .config import get_settings
from .errors import MalformedTag, NestingTooDeep, UnmatchedClosingTag
from .node import Node
from .normalize import normalize
from .tags import (
    WHITESPACE,
    closing_tag_name,
    is_closing_tag,
    is_self_closing_tag,
    split_tag,
    strip_self_closing_marker,
)

logger = logging.getLogger(__name__)


def _is_blank(text):
    return not text.strip(WHITESPACE)


class TreeBuilder:
    """Builds nodes from normalized HTML in one left-to-right pass.

    Each call to build() handles one nesting level: it collects siblings
    until it meets a closing tag, and hands the offset of that tag's `<`
    back to the caller, which checks the name and carries on after it.
    Recursion only happens when an element is opened, never per character.
    """

    def __init__(self, html, max_depth=None):
        self.html = html
        self.max_depth = max_depth if max_depth is not None else get_settings().max_depth

    def build(self, start=0, end=None, depth=0):
        """Parse html[start:end]. Returns (nodes, stop) where stop is the
        offset of the closing tag that ended this level, or end."""
        html = self.html
        if end is None:
            end = len(html)
        if depth > self.max_depth:
            raise NestingTooDeep(self.max_depth)

        result = []
        pos = start

        while pos < end:
            tag_start = html.find("<", pos, end)

            if tag_start == -1:
                text = html[pos:end]
                if not _is_blank(text):
                    result.append(Node.text(text))
                break

            if tag_start > pos:
                text = html[pos:tag_start]
                if not _is_blank(text):
                    result.append(Node.text(text))

            tag_end = html.find(">", tag_start, end)
            if tag_end == -1:
                raise MalformedTag(tag_start)

            tag_content = html[tag_start + 1:tag_end]
            pos = tag_end + 1

            if is_closing_tag(tag_content):
                return result, tag_start

            stripped = tag_content.strip(WHITESPACE)
            # `<>`, `<//x>` and stray `<!...>` carry nothing
            if not stripped or stripped[0] in "/!":
                continue

            stripped, self_closed = strip_self_closing_marker(stripped)

            tag_name, attr_string = split_tag(stripped)
            tag_name = tag_name.lower()
            attributes = parse_attributes(attr_string)

            if is_self_closing_tag(tag_name):
                result.append(Node.void(tag_name, attributes))
                continue

            if self_closed:
                # `<div/>` or `<div />`: an empty element, nothing to look for
                result.append(Node(tag_name, attributes))
                continue

            children, closing_pos = self.build(pos, end, depth + 1)
            result.append(Node(tag_name, attributes, children=children))

            if closing_pos >= end:
                # ran out of input: treat the element as closed here
                logger.debug("[Parser] <%s> never closed, closing at end of input", tag_name)
                break

            closing_end = html.find(">", closing_pos, end)
            if closing_end == -1:
                raise MalformedTag(closing_pos)
            found = closing_tag_name(html[closing_pos + 1:closing_end])
            # a bare `</>` closes whatever is open
            if found and found != tag_name:
                raise UnmatchedClosingTag(tag_name, found)
            pos = closing_end + 1

        return result, end


def parse(html, max_depth=None):
    """Parse an HTML string into a list of root nodes.

    A doctype, if present, comes first as a DOCTYPE node. Raises a
    subclass of HTMLParseError on input it cannot make sense of.
    """
    text, doctype = normalize(html)
    roots, stop = TreeBuilder(text, max_depth=max_depth).build()
    if stop < len(text):
        # a closing tag with nothing open at the top level
        closing_end = text.find(">", stop)
        raise UnmatchedClosingTag(None, closing_tag_name(text[stop + 1:closing_end]))
    if doctype is not None:
        roots.insert(0, Node.doctype(doctype))
    logger.debug("[Parser] %d root node(s), doctype=%s", len(roots), doctype is not None)
    return roots


def parse_fragment(html, max_depth=None):
    """Parse html and wrap the roots in a single tagless container."""
    return Node(children=parse(html, max_depth=max_depth))
