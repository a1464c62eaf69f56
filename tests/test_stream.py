"""Tests for the TextStream sink."""

from fdfgen.core import TextStream


def test_write_and_write_line_accumulate():
    """write appends as-is, write_line adds a newline."""
    stream = TextStream()
    stream.write("a").write("b").write_line("c").write_line()
    assert stream.getvalue() == "abc\n\n"
    assert str(stream) == "abc\n\n"


def test_indentation_follows_depth():
    """write_indentation emits one indent unit per pushed level."""
    stream = TextStream(indent="  ")
    stream.write_indentation().write_line("top")
    stream.push_indent().push_indent()
    stream.write_indentation().write_line("deep")
    stream.pop_indent()
    stream.write_indentation().write_line("middle")
    stream.pop_indent()

    assert stream.getvalue() == "top\n    deep\n  middle\n"
    assert stream.depth == 0


def test_tab_indentation():
    stream = TextStream(indent="\t")
    stream.push_indent().write_indentation().write_line("x")
    assert stream.getvalue() == "\tx\n"
