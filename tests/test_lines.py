import io

import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.lines import LineReader


def test_reads_lines_keeping_newlines():
    reader = LineReader(io.StringIO("ab\ncd"))
    assert reader.read_line() == "ab\n"
    assert reader.read_line() == "cd"
    assert reader.read_line() is None


def test_empty_stream_gives_none():
    assert LineReader(io.StringIO("")).read_line() is None


def test_stays_exhausted():
    reader = LineReader(io.StringIO("x\n"), buffer_size=4)
    assert list(reader) == ["x\n"]
    assert reader.read_line() is None
    assert reader.read_line() is None


def test_blank_lines_are_returned():
    assert list(LineReader(io.StringIO("\n\na\n"), buffer_size=3)) == ["\n", "\n", "a\n"]


def test_binary_stream():
    assert list(LineReader(io.BytesIO(b"one\ntwo\n"), buffer_size=5)) == [b"one\n", b"two\n"]


def test_pending_data_survives_between_calls():
    reader = LineReader(io.StringIO("first\nsecond\nthird"), buffer_size=100)
    assert reader.read_line() == "first\n"
    assert list(reader) == ["second\n", "third"]


@pytest.mark.parametrize("size", [0, -1])
def test_rejects_non_positive_buffer(size):
    with pytest.raises(ValueError):
        LineReader(io.StringIO("a"), buffer_size=size)


@given(st.text(alphabet="ab\n", max_size=60), st.integers(min_value=1, max_value=16))
def test_lines_reassemble_input(text, size):
    lines = list(LineReader(io.StringIO(text), buffer_size=size))
    assert "".join(lines) == text
    for line in lines[:-1]:
        assert line.endswith("\n")
    for line in lines:
        assert line
        assert line.count("\n") <= 1
        assert "\n" not in line[:-1]


@given(st.binary(max_size=60), st.integers(min_value=1, max_value=16))
def test_binary_lines_independent_of_buffer_size(data, size):
    small = list(LineReader(io.BytesIO(data), buffer_size=size))
    large = list(LineReader(io.BytesIO(data), buffer_size=1024))
    assert small == large
    assert b"".join(small) == data