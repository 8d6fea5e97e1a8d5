"""
Tests for the POND_TRACE feature flag and debug logging.
"""

import logging

from pond import config, pond
from pond.rec import rec, stop


def upto2():
    def step(rebuild, acc, value):
        if acc:
            return acc + [value]
        return rebuild(acc + [value])

    return pond([], step)


def record(r, *items):
    for item in items:
        r = r(item)
    return stop(r)


def test_trace_enabled_reads_flag(monkeypatch):
    monkeypatch.setattr(config, "POND_TRACE_ENABLED", False)
    assert config.trace_enabled() is False
    monkeypatch.setattr(config, "POND_TRACE_ENABLED", True)
    assert config.trace_enabled() is True


def test_no_records_when_disabled(monkeypatch, caplog):
    monkeypatch.setattr(config, "POND_TRACE_ENABLED", False)
    caplog.set_level(logging.DEBUG, logger="pond")
    record(rec(upto2()), 1, 2, 3)
    assert [r for r in caplog.records if r.name.startswith("pond")] == []


def test_transitions_logged_when_enabled(monkeypatch, caplog):
    monkeypatch.setattr(config, "POND_TRACE_ENABLED", True)
    caplog.set_level(logging.DEBUG, logger="pond")
    tape = record(rec(upto2()), 1, 2, 3)

    assert tape.value == [1, 2]
    messages = [r.getMessage() for r in caplog.records if r.name == "pond.rec"]
    assert any(m.startswith("forward") for m in messages)
    assert any(m.startswith("diverge") for m in messages)
    assert any(m.startswith("queue") for m in messages)
    assert any(m.startswith("stopped") for m in messages)


def test_construction_logged_when_enabled(monkeypatch, caplog):
    monkeypatch.setattr(config, "POND_TRACE_ENABLED", True)
    caplog.set_level(logging.DEBUG, logger="pond")
    pond("s", lambda rebuild, state: state)
    assert any(r.name == "pond.core" for r in caplog.records)


def test_arity_bounds():
    assert config.MAX_ARITY == 10
    assert config.MAX_HANDLER_ARITY == 12
