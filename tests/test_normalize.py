import pytest

from htmltree.errors import MalformedComment
from htmltree.normalize import extract_doctype, lowercase_tag_names, normalize, remove_comments, remove_line_breaks


def test_remove_comments():
    assert remove_comments("a<!-- one -->b<!-- <p>two</p> -->c") == "abc"
    assert remove_comments("<!---->x") == "x"
    assert remove_comments("no comments") == "no comments"


def test_unterminated_comment():
    with pytest.raises(MalformedComment) as exc:
        remove_comments("<p>ok</p><!-- never closed")
    assert exc.value.position == 9


def test_lowercase_only_tag_names():
    html = '<DIV CLASS="Big">Hello WORLD</DIV>'
    assert lowercase_tag_names(html) == '<div CLASS="Big">Hello WORLD</div>'


def test_lowercase_leaves_angle_brackets_in_values():
    assert lowercase_tag_names('<A title="x<Y">Go</A>') == '<a title="x<Y">Go</a>'


def test_lowercase_stops_at_unterminated_tag():
    assert lowercase_tag_names("<B>x</B><DIV") == "<b>x</b><DIV"


def test_remove_line_breaks():
    assert remove_line_breaks("a\nb\r\nc") == "abc"


def test_extract_doctype():
    assert extract_doctype("<p>x</p>") == ("<p>x</p>", None)
    assert extract_doctype("<!doctype html><p>x</p>") == ("<p>x</p>", "html")


def test_normalize_order():
    html = "<!-- lead -->\n<!DOCTYPE HTML>\n<P>Hi\nthere</P>"
    text, doctype = normalize(html)
    assert doctype == "HTML"
    assert text == "<p>Hithere</p>"
