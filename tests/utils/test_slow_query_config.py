import logging

from oradialect.utils.performance import SLOW_QUERY_ENV, resolve_slow_query_ms


def test_default_when_unset(monkeypatch):
    monkeypatch.delenv(SLOW_QUERY_ENV, raising=False)
    assert resolve_slow_query_ms(default=100) == 100


def test_override_wins_over_environment(monkeypatch):
    monkeypatch.setenv(SLOW_QUERY_ENV, "500")
    assert resolve_slow_query_ms(default=100, override=20) == 20
    assert resolve_slow_query_ms(default=100) == 500


def test_invalid_environment_value_falls_back(monkeypatch, caplog):
    caplog.set_level(logging.WARNING, logger="oradialect.performance")
    monkeypatch.setenv(SLOW_QUERY_ENV, "fast")
    assert resolve_slow_query_ms(default=100) == 100
    monkeypatch.setenv(SLOW_QUERY_ENV, "-3")
    assert resolve_slow_query_ms(default=100) == 100
    assert len([r for r in caplog.records if SLOW_QUERY_ENV in r.message]) == 2
