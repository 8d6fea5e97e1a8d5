"""
Tests for pipe().
"""

import pytest

from pond import ArityMismatch, MalformedResult, pipe
from pond.acc import as_list, into, value


def test_pipe_calls_function_with_arguments():
    f = lambda x: lambda y, z: x + y + z
    assert pipe(pipe(f, 10), 200, 3) == 213


def test_pipe_nullary():
    assert pipe(lambda: "ok") == "ok"


def test_pipe_drives_stateful_closure(hello):
    state, nxt = pipe(hello)
    assert state == "hello"
    assert pipe(nxt)[0] == "world"


def test_pipe_over_composite(hello):
    assert value(pipe(pipe(into(hello, as_list())))) == ["hello", "world"]


def test_pipe_wrong_count():
    with pytest.raises(ArityMismatch):
        pipe(lambda x: x)


def test_pipe_composite_bad_result():
    with pytest.raises(MalformedResult):
        pipe(into(lambda: None, as_list()))
