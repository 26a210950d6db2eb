"""Testes para settings base e de agenda."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from config.settings import AgendaSettings, get_agenda_settings, get_base_settings


def test_agenda_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "AGENDA_TIMEZONE",
        "DATE_DISPLAY_FORMAT",
        "RECURRENCE_MAX_ITERATIONS",
        "AGENDA_DEFAULT_START_TIME",
    ):
        monkeypatch.delenv(key, raising=False)
    settings = get_agenda_settings()
    assert settings.agenda_timezone == "America/Sao_Paulo"
    assert settings.date_display_format == "%d/%m/%Y"
    assert settings.recurrence_max_iterations == 1000
    assert settings.default_start_time == "09:00"
    assert settings.validation_errors() == []


def test_agenda_reads_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGENDA_TIMEZONE", "UTC")
    monkeypatch.setenv("RECURRENCE_MAX_ITERATIONS", "24")
    settings = get_agenda_settings()
    assert settings.agenda_timezone == "UTC"
    assert settings.recurrence_max_iterations == 24


def test_agenda_settings_are_cached() -> None:
    assert get_agenda_settings() is get_agenda_settings()


def test_max_iterations_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        AgendaSettings(recurrence_max_iterations=0)


def test_validation_errors_reported() -> None:
    settings = AgendaSettings(
        agenda_timezone="Marte/Olympus",
        date_display_format="dd/mm",
        default_start_time="9h",
    )
    errors = settings.validation_errors()
    assert len(errors) == 3
    assert any("AGENDA_TIMEZONE" in error for error in errors)


def test_base_settings_environment_aliases(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "prod")
    monkeypatch.setenv("DEBUG", "yes")
    settings = get_base_settings()
    assert settings.is_production is True
    assert settings.debug is True
    assert settings.validate() == []


def test_base_settings_default_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "qualquer")
    assert get_base_settings().is_development is True
