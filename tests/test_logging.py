"""Tests for structured request logging."""

from __future__ import annotations

from todo_api.config import settings


def test_log_level_suppresses_info_events(client, capsys):
    """With LOG_LEVEL=warning the request timing events are dropped."""
    assert settings.log_level == "warning"

    response = client.get("/health")

    assert response.status_code == 200
    out = capsys.readouterr().out
    assert "request_started" not in out
    assert "request_completed" not in out


def test_log_level_keeps_warning_events(client, capsys):
    """Warnings such as a missing todo still reach the log."""
    response = client.get("/todos/does-not-exist")

    assert response.status_code == 404
    out = capsys.readouterr().out
    assert "todo_api_error" in out
    assert "request_started" not in out
