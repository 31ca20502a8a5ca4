"""Tests for LineStream."""

from orgtree.stream import LineStream


class TestLineStream:
    """Cursor behavior over physical lines."""

    def test_peek_does_not_advance(self) -> None:
        stream = LineStream("a\nb")
        assert stream.peek_line() == "a"
        assert stream.peek_line() == "a"
        assert stream.lineno == 0

    def test_next_advances(self) -> None:
        stream = LineStream("a\nb")
        assert stream.next_line() == "a"
        assert stream.lineno == 1
        assert stream.next_line() == "b"
        assert stream.next_line() is None
        assert not stream.has_next()

    def test_splits_crlf(self) -> None:
        stream = LineStream("a\r\nb")
        assert [stream.next_line(), stream.next_line()] == ["a", "b"]

    def test_trailing_newline_yields_empty_line(self) -> None:
        assert len(LineStream("a\n")) == 2

    def test_empty_source_is_one_line(self) -> None:
        stream = LineStream("")
        assert stream.has_next()
        assert stream.next_line() == ""
