from .node import Kind


def format_attributes(attributes):
    parts = []
    for key, value in attributes.items():
        if value == "":
            parts.append(f" {key}")
        else:
            parts.append(f' {key}="{value}"')
    return "".join(parts)


def to_html(node):
    """Serialize one node and everything below it."""
    out = []
    _write(node, out)
    return "".join(out)


def render(forest):
    """Serialize a list of root nodes, in order."""
    out = []
    for node in forest:
        _write(node, out)
    return "".join(out)


def _write(node, out):
    if node.kind is Kind.DOCTYPE:
        out.append(f"<!DOCTYPE {node.text_content}>")
        return

    if node.kind is Kind.VOID:
        out.append(f"<{node.tag}{format_attributes(node.attributes)} />")
        return

    if not node.tag:
        out.append(node.text_content)
        for child in node.children:
            _write(child, out)
        return

    out.append(f"<{node.tag}{format_attributes(node.attributes)}>")
    out.append(node.text_content)
    for child in node.children:
        _write(child, out)
    out.append(f"</{node.tag}>")


def print_tree(node, indent=0, file=None):
    print(" " * indent + repr(node), file=file)
    for child in node.children:
        print_tree(child, indent + 2, file=file)
