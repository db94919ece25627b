"""Tests for the export_scenario_cli adapter."""

from pathlib import Path
from unittest.mock import MagicMock

from networth_report.adapters import export_scenario_cli
from networth_report.infrastructure.scenario_file import ScenarioFileError
from networth_report.infrastructure.settings import ReportSettings


def _patch_settings(monkeypatch, settings: ReportSettings) -> MagicMock:
    fake_logger = MagicMock()
    monkeypatch.setattr(export_scenario_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        export_scenario_cli.ReportSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    return fake_logger


def test_main_exports_configured_scenario(monkeypatch, capsys):
    _patch_settings(
        monkeypatch,
        ReportSettings(
            output_dir=Path("/tmp/reports"),
            scenario_file=Path("/tmp/plan.json"),
        ),
    )
    report = MagicMock()
    report.name = "Plan"
    monkeypatch.setattr(
        export_scenario_cli,
        "load_scenario_report",
        lambda path: report,
    )
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = Path("/tmp/reports/Plan.pdf")
    monkeypatch.setattr(
        export_scenario_cli,
        "build_export_scenario_report_use_case",
        lambda: fake_use_case,
    )

    export_scenario_cli.main()

    fake_use_case.execute.assert_called_once_with(report, Path("/tmp/reports"))
    assert "Exported 'Plan' to /tmp/reports/Plan.pdf" in capsys.readouterr().out


def test_main_warns_without_scenario_file(monkeypatch):
    fake_logger = _patch_settings(monkeypatch, ReportSettings())
    builder = MagicMock()
    monkeypatch.setattr(
        export_scenario_cli,
        "build_export_scenario_report_use_case",
        builder,
    )

    export_scenario_cli.main()

    fake_logger.warning.assert_called_once()
    builder.assert_not_called()


def test_main_logs_unreadable_scenario(monkeypatch):
    fake_logger = _patch_settings(
        monkeypatch,
        ReportSettings(scenario_file=Path("/tmp/broken.json")),
    )

    def _raise(path):
        raise ScenarioFileError("Invalid JSON in /tmp/broken.json")

    monkeypatch.setattr(export_scenario_cli, "load_scenario_report", _raise)

    export_scenario_cli.main()

    fake_logger.error.assert_called_once_with("Invalid JSON in /tmp/broken.json")
