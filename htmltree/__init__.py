__version__ = "0.1.0"

from .errors import (
    HTMLParseError,
    LoadError,
    MalformedComment,
    MalformedTag,
    NestingTooDeep,
    UnmatchedClosingTag,
)
from .node import Kind, Node
from .parser import parse, parse_fragment
from .serializer import render, to_html
from .template import render_template, substitute
from .document import Document, create_document
