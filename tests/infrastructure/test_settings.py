"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from networth_report.infrastructure import settings as settings_module
from networth_report.infrastructure.settings import ReportSettings

_ENV_NAMES = (
    "NET_WORTH_TREND_MONTHS",
    "NET_WORTH_LATEST_PER_ACCOUNT",
    "REPORT_OUTPUT_DIR",
    "SCENARIO_FILE",
)


@pytest.fixture
def logger(monkeypatch, tmp_path) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return fake_logger


def test_from_env_uses_defaults(logger, tmp_path: Path) -> None:
    settings = ReportSettings.from_env()

    assert settings.trend_months == 6
    assert settings.use_latest_per_account is False
    assert settings.output_dir == (tmp_path / "reports").resolve()
    assert settings.scenario_file is None
    logger.warning.assert_not_called()


def test_from_env_reads_values(logger, monkeypatch, tmp_path: Path) -> None:
    """Relative paths should resolve against the project root."""
    scenario = tmp_path / "plan.json"
    scenario.write_text("{}", encoding="utf-8")
    monkeypatch.setenv("NET_WORTH_TREND_MONTHS", "12")
    monkeypatch.setenv("NET_WORTH_LATEST_PER_ACCOUNT", "yes")
    monkeypatch.setenv("REPORT_OUTPUT_DIR", "exports")
    monkeypatch.setenv("SCENARIO_FILE", str(scenario))

    settings = ReportSettings.from_env()

    assert settings.trend_months == 12
    assert settings.use_latest_per_account is True
    assert settings.output_dir == (tmp_path / "exports").resolve()
    assert settings.scenario_file == scenario.resolve()
    logger.warning.assert_not_called()


@pytest.mark.parametrize("raw_value", ["abc", "0", "-3"])
def test_from_env_falls_back_on_invalid_months(
    logger,
    monkeypatch,
    raw_value: str,
) -> None:
    monkeypatch.setenv("NET_WORTH_TREND_MONTHS", raw_value)

    settings = ReportSettings.from_env()

    assert settings.trend_months == 6
    logger.warning.assert_called_once()


def test_from_env_falls_back_on_invalid_bool(logger, monkeypatch) -> None:
    monkeypatch.setenv("NET_WORTH_LATEST_PER_ACCOUNT", "maybe")

    settings = ReportSettings.from_env()

    assert settings.use_latest_per_account is False
    logger.warning.assert_called_once()


def test_from_env_warns_on_missing_scenario_file(logger, monkeypatch) -> None:
    monkeypatch.setenv("SCENARIO_FILE", "missing.json")

    settings = ReportSettings.from_env()

    assert settings.scenario_file is not None
    assert settings.scenario_file.name == "missing.json"
    assert "does not exist" in logger.warning.call_args.args[0]
