"""Tests for the composition root."""

from unittest.mock import MagicMock

from networth_report.application.use_cases import (
    ExportScenarioReportUseCase,
    GetNetWorthSummaryUseCase,
)
from networth_report.infrastructure import container
from networth_report.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from networth_report.infrastructure.pdf_renderer import ReportLabPdfRenderer
from networth_report.infrastructure.settings import ReportSettings


def test_build_finance_repository_uses_given_port() -> None:
    db_port = MagicMock()

    repository = container.build_finance_repository(db_port)

    assert isinstance(repository, SqlAlchemyFinanceRepository)
    assert repository._db_port is db_port


def test_build_net_worth_summary_use_case_applies_settings(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)
    settings = ReportSettings(trend_months=3, use_latest_per_account=True)

    use_case = container.build_net_worth_summary_use_case(
        db_port=MagicMock(),
        settings=settings,
    )

    assert isinstance(use_case, GetNetWorthSummaryUseCase)
    assert use_case._trend_months == 3
    assert use_case._use_latest_per_account is True


def test_build_export_use_case_wires_pdf_renderer(monkeypatch) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    use_case = container.build_export_scenario_report_use_case()

    assert isinstance(use_case, ExportScenarioReportUseCase)
    assert isinstance(use_case._renderer, ReportLabPdfRenderer)
