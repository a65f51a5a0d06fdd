from .tags import WHITESPACE

# Fragments left behind by `<br />` or stray spacing inside a tag.
DISCARDED_KEYS = ("", "/", " ")


def parse_attributes(attr_string):
    """Parse the text between a tag name and its `>` into a dict.

    Handles `key="value with spaces"`, `key=value` and bare boolean
    attributes in a single scan. The only state is whether we are inside a
    double-quoted value, so `=` and whitespace inside quotes are kept
    verbatim. Boolean attributes map to "".
    """
    attributes = {}
    attr_string = attr_string.strip(WHITESPACE)
    if not attr_string:
        return attributes

    buffer = ""
    key = ""
    in_quotes = False

    for c in attr_string:
        if c == "=" and not in_quotes:
            key = buffer.strip(WHITESPACE)
            buffer = ""
            continue

        if c == '"':
            if in_quotes:
                in_quotes = False
                attributes[key] = buffer
                buffer = ""
                key = ""
            else:
                in_quotes = True
            continue

        if c in WHITESPACE and not in_quotes:
            if key and buffer:
                # unquoted value: key=value
                attributes[key] = buffer
            elif key:
                # `key= ` with nothing after it yet
                continue
            elif buffer.strip(WHITESPACE):
                attributes[buffer.strip(WHITESPACE)] = ""
            buffer = ""
            key = ""
            continue

        buffer += c

    if key:
        attributes[key] = buffer
    elif buffer.strip(WHITESPACE):
        attributes[buffer.strip(WHITESPACE)] = ""

    for junk in DISCARDED_KEYS:
        attributes.pop(junk, None)
    return attributes
