from .node import Node
from .serializer import render


class Document:
    """A doctype plus a single `html` root."""

    def __init__(self, doctype="html"):
        self.doctype = doctype
        self.root = Node("html")

    def add_child(self, node):
        if node is not None:
            self.root.add_child(node)

    def forest(self):
        return [Node.doctype(self.doctype), self.root]

    def to_html(self):
        return render(self.forest())

    def apply_params(self, params):
        self.root.apply_params_recursive(params)


def create_document(title="", heading="", paragraph=""):
    """html > head > title, body > h1 + p."""
    doc = Document()

    head = Node("head")
    head.add_child(Node("title", text_content=title))
    doc.add_child(head)

    body = Node("body")
    body.add_child(Node("h1", text_content=heading))
    body.add_child(Node("p", text_content=paragraph))
    doc.add_child(body)

    return doc
