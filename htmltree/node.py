import logging
from enum import Enum

from .template import substitute

logger = logging.getLogger(__name__)

DOCTYPE_TAG = "!DOCTYPE"
TEXT_TAG = ""


class Kind(Enum):
    CONTAINER = "container"
    VOID = "void"
    DOCTYPE = "doctype"


class Node:
    """One node of the parsed tree.

    A CONTAINER node with an empty tag is a bare text (or fragment) node.
    VOID nodes silently ignore children and text, DOCTYPE nodes keep the
    doctype string as their text content. A node owns its children: the
    same node cannot be attached to two parents.
    """

    def __init__(self, tag="", attributes=None, text_content="", children=None, kind=Kind.CONTAINER):
        self.kind = kind
        self.tag = tag
        self.attributes = dict(attributes or {})
        self.text_content = text_content or ""
        self._children = []
        self._attached = False

        if kind is Kind.DOCTYPE:
            self.tag = DOCTYPE_TAG
            self.attributes = {}
            return
        if kind is Kind.VOID:
            self.text_content = ""
            return

        for child in children or ():
            self._adopt(child)

    # ------------------- Constructors -------------------
    @classmethod
    def text(cls, value):
        return cls(TEXT_TAG, text_content=value)

    @classmethod
    def void(cls, tag, attributes=None):
        return cls(tag, attributes, kind=Kind.VOID)

    @classmethod
    def doctype(cls, value="html"):
        return cls(text_content=value, kind=Kind.DOCTYPE)

    # ------------------- Accessors -------------------
    @property
    def children(self):
        return list(self._children)

    @property
    def is_void(self):
        return self.kind is Kind.VOID

    @property
    def is_doctype(self):
        return self.kind is Kind.DOCTYPE

    @property
    def is_text(self):
        return self.kind is Kind.CONTAINER and self.tag == TEXT_TAG

    def get_attribute(self, name):
        return self.attributes.get(name, "")

    def iter(self):
        """Depth-first, document order, starting with this node."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node._children))

    def find_all(self, tag):
        return [node for node in self.iter() if node.tag == tag]

    # ------------------- Mutators -------------------
    def add_child(self, child):
        if self.kind is not Kind.CONTAINER:
            logger.debug("[Node] ignoring child added to <%s>", self.tag)
            return
        if child is self or any(node is self for node in child.iter()):
            raise ValueError("a node cannot be its own descendant")
        self._adopt(child)

    def remove_child(self, child):
        for i, node in enumerate(self._children):
            if node is child:
                del self._children[i]
                child._attached = False
                return
        raise ValueError("not a child of this node")

    def set_text_content(self, text_content, params=None):
        if self.kind is Kind.VOID:
            logger.debug("[Node] ignoring text set on <%s />", self.tag)
            return
        if params:
            text_content = substitute(text_content, params)
        self.text_content = text_content

    def set_attribute(self, name, value=""):
        if self.kind is Kind.DOCTYPE:
            return
        self.attributes[name] = value

    def apply_params(self, params):
        """Substitute `{{name}}` placeholders in this node's text and attribute values."""
        if self.kind is not Kind.VOID:
            self.text_content = substitute(self.text_content, params)
        for key, value in self.attributes.items():
            self.attributes[key] = substitute(value, params)

    def apply_params_recursive(self, params):
        for node in self.iter():
            node.apply_params(params)

    def copy(self):
        """Deep copy; the result shares nothing with this node."""
        return Node(
            self.tag,
            self.attributes,
            self.text_content,
            [child.copy() for child in self._children],
            kind=self.kind,
        )

    def _adopt(self, child):
        if child._attached:
            raise ValueError(f"<{child.tag}> already belongs to another node")
        child._attached = True
        self._children.append(child)

    # ------------------- Dunder -------------------
    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.tag == other.tag
            and self.text_content == other.text_content
            and self.attributes == other.attributes
            and self._children == other._children
        )

    __hash__ = None

    def __repr__(self):
        if self.kind is Kind.DOCTYPE:
            return f"<!DOCTYPE {self.text_content}>"
        if self.is_text:
            return repr(self.text_content)
        if self.attributes:
            attr_str = " ".join(f'{k}="{v}"' for k, v in self.attributes.items())
            return f"<{self.tag} {attr_str}>"
        return f"<{self.tag}>"
