class HTMLParseError(ValueError):
    """Base class for everything the parser refuses to read."""


class MalformedComment(HTMLParseError):
    def __init__(self, position):
        super().__init__(f"Malformed comment: no closing '-->' for '<!--' at {position}")
        self.position = position


class MalformedTag(HTMLParseError):
    def __init__(self, position):
        super().__init__(f"Malformed HTML: no closing '>' found for '<' at {position}")
        self.position = position


class UnmatchedClosingTag(HTMLParseError):
    def __init__(self, expected, found):
        if expected is None:
            message = f"Unmatched closing tag: found </{found}> with no open element"
        else:
            message = f"Unmatched closing tag: expected </{expected}> but found </{found}>"
        super().__init__(message)
        self.expected = expected
        self.found = found


class NestingTooDeep(HTMLParseError):
    def __init__(self, limit):
        super().__init__(f"Elements nested deeper than {limit} levels")
        self.limit = limit


class LoadError(Exception):
    """Raised when a source (file or URL) cannot be read."""

    def __init__(self, source, reason):
        super().__init__(f"Could not load {source}: {reason}")
        self.source = source
        self.reason = reason
