"""Unit tests for prompt_expander.api.logging_setup."""

import logging

from prompt_expander.api.logging_setup import configure_logging


def test_explicit_level_is_applied():
    configure_logging("warning")
    assert logging.getLogger().level == logging.WARNING
    configure_logging("INFO")


def test_unknown_env_level_falls_back_to_info(monkeypatch, caplog):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with caplog.at_level(logging.WARNING):
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    assert "Unknown log level 'CHATTY'" in caplog.text
