# Void elements: no children, no text, no closing tag.
SELF_CLOSING_TAGS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

WHITESPACE = " \t\n\r"


def is_self_closing_tag(tag):
    return tag.lower() in SELF_CLOSING_TAGS


def is_closing_tag(tag_content):
    """`/div` and a bare `/` are closing tags, `//x` is not."""
    return tag_content[:1] == "/" and tag_content[1:2] != "/"


def split_tag(tag_content):
    """Split `div class="x"` into ("div", 'class="x"'), both trimmed."""
    for i, c in enumerate(tag_content):
        if c in WHITESPACE:
            return tag_content[:i].strip(WHITESPACE), tag_content[i + 1:].strip(WHITESPACE)
    return tag_content.strip(WHITESPACE), ""


def closing_tag_name(tag_content):
    """Name of a closing tag body: `/ Div ` -> `div`."""
    return tag_content[1:].strip(WHITESPACE).lower()


def strip_self_closing_marker(tag_content):
    """Split a trailing `/` off `br/`, `img src="a" /` or `p title="x"/`.

    Returns (content, marked). A slash that ends an unquoted value, as in
    `a href=/`, belongs to the value and is left alone.
    """
    if not tag_content.endswith("/"):
        return tag_content, False
    body = tag_content[:-1]
    if not any(c in WHITESPACE for c in body):
        # nothing but a tag name before the slash
        return body, True
    if body[-1] in WHITESPACE:
        return body, True
    if body[-1] == '"' and body.count('"') % 2 == 0:
        return body, True
    return tag_content, False
