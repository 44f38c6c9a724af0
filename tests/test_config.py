"""Tests for environment-driven defaults."""

from bill_reminders.config import _int_env


def test_int_env_reads_value(monkeypatch):
    monkeypatch.setenv("BILL_REMINDERS_DUE_HOUR", "14")
    assert _int_env("BILL_REMINDERS_DUE_HOUR", 9) == 14


def test_int_env_unset_or_blank_uses_default(monkeypatch):
    monkeypatch.delenv("BILL_REMINDERS_DUE_HOUR", raising=False)
    assert _int_env("BILL_REMINDERS_DUE_HOUR", 9) == 9
    monkeypatch.setenv("BILL_REMINDERS_DUE_HOUR", "  ")
    assert _int_env("BILL_REMINDERS_DUE_HOUR", 9) == 9


def test_int_env_malformed_falls_back_and_warns(monkeypatch, caplog):
    monkeypatch.setenv("BILL_REMINDERS_PRIORITY", "high")
    with caplog.at_level("WARNING", logger="bill_reminders.config"):
        assert _int_env("BILL_REMINDERS_PRIORITY", 1) == 1
    assert "BILL_REMINDERS_PRIORITY" in caplog.text
