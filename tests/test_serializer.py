from htmltree import Node, parse, render, to_html
from htmltree.serializer import format_attributes, print_tree

PAGE = '<div id="main"><img src="a.png" alt=""><p>Hi <b>there</b></p></div>'


def test_to_html():
    (div,) = parse(PAGE)
    assert to_html(div) == '<div id="main"><img src="a.png" alt /><p>Hi <b>there</b></p></div>'


def test_doctype_serialization():
    forest = parse("<!doctype html><p>hi</p>")
    assert to_html(forest[0]) == "<!DOCTYPE html>"
    assert render(forest) == "<!DOCTYPE html><p>hi</p>"


def test_text_and_fragment_nodes():
    assert to_html(Node.text("a < b")) == "a < b"
    fragment = Node(children=[Node("i"), Node.text("x")])
    assert to_html(fragment) == "<i></i>x"


def test_element_text_content_before_children():
    node = Node("p", text_content="lead ", children=[Node("b", text_content="bold")])
    assert to_html(node) == "<p>lead <b>bold</b></p>"


def test_format_attributes():
    assert format_attributes({}) == ""
    assert format_attributes({"checked": "", "type": "checkbox"}) == ' checked type="checkbox"'


def test_round_trip_is_stable(sample_html):
    forest = parse(sample_html)
    once = render(forest)
    assert parse(once) == forest
    assert render(parse(once)) == once


def test_print_tree(capsys):
    (div,) = parse('<div class="a"><p>hi</p></div>')
    print_tree(div)
    out = capsys.readouterr().out
    assert out == "<div class=\"a\">\n  <p>\n    'hi'\n"
