from __future__ import annotations

import pytest

from wareki.core.config import AppConfig, load_config


def test_defaults(monkeypatch):
    monkeypatch.delenv("WAREKI_NORTH_COURT", raising=False)
    monkeypatch.delenv("WAREKI_LIMIT_DAYS", raising=False)
    cfg = load_config()
    assert cfg == AppConfig()
    assert cfg.wareki.north_court is False
    assert cfg.api.limit_days == 370


@pytest.mark.parametrize("value, expected", [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("", False), ("no", False)])
def test_north_court_env(monkeypatch, value, expected):
    monkeypatch.setenv("WAREKI_NORTH_COURT", value)
    assert load_config().wareki.north_court is expected


def test_limit_days_env(monkeypatch):
    monkeypatch.setenv("WAREKI_LIMIT_DAYS", "31")
    assert load_config().api.limit_days == 31


@pytest.mark.parametrize("value", ["abc", "0", "2001"])
def test_limit_days_env_invalid(monkeypatch, value):
    monkeypatch.setenv("WAREKI_LIMIT_DAYS", value)
    with pytest.raises(ValueError):
        load_config()
