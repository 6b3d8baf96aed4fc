from __future__ import annotations

import importlib
from datetime import time
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.timepay.timepay.core.exceptions import ValidationError
from src.timepay.timepay.main import create_container
from src.timepay.timepay.shifts.model import Shift


@pytest.mark.parametrize(
    "env,module",
    [("production", "config.production"), ("prod", "config.production"), ("TEST", "config.testing"), ("anything", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == module


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_explicit_env_wins_over_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module("testing") == "config.testing"


def test_shift_from_settings():
    settings = SimpleNamespace(
        OFFICE_START_TIME="08:30", OFFICE_END_TIME="18:00", WORKING_HOURS_PER_DAY=9, DAYS_PER_MONTH=26
    )
    shift = Shift.from_settings(settings)

    assert shift.start_time == time(8, 30)
    assert shift.end_time == time(18, 0)
    assert shift.start_minutes == 510
    assert shift.working_hours_per_day == 9
    assert shift.days_per_month == 26


def test_shift_from_env_style_string_counts():
    shift = Shift.from_settings(SimpleNamespace(WORKING_HOURS_PER_DAY="8", DAYS_PER_MONTH="26"))

    assert (shift.working_hours_per_day, shift.days_per_month) == (8, 26)


def test_shift_from_empty_settings_uses_defaults():
    shift = Shift.from_settings(SimpleNamespace())

    assert shift == Shift()
    assert shift.end_minutes == 20 * 60


@pytest.mark.parametrize(
    "overrides",
    [
        {"OFFICE_START_TIME": "9am"},
        {"OFFICE_END_TIME": "25:00"},
        {"WORKING_HOURS_PER_DAY": 0},
        {"DAYS_PER_MONTH": -1},
        {"WORKING_HOURS_PER_DAY": "10.5"},
        {"DAYS_PER_MONTH": "thirty"},
    ],
)
def test_invalid_settings_are_rejected(overrides):
    with pytest.raises(ValidationError):
        Shift.from_settings(SimpleNamespace(**overrides))


def test_create_container_wires_services_with_settings_shift():
    settings = importlib.import_module("config.testing")
    repos = SimpleNamespace(
        employees=None,
        attendance=None,
        salary_structures=None,
        salary_advances=None,
        commissions=None,
        month_closings=None,
    )

    container = create_container(repos, settings=settings)

    assert container.shift.start_time == time(9, 0)
    assert container.attendance_service.calculator is container.time_and_pay
    assert container.time_and_pay.compute_overtime("21:30", 33000).overtime_reward == 150
