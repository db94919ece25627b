"""Composition root for wiring infrastructure adapters."""

from networth_report.application.ports.database import DatabaseEnginePort
from networth_report.application.ports.finance_repository import (
    FinanceRepositoryPort,
)
from networth_report.application.ports.report_renderer import (
    ReportRendererPort,
)
from networth_report.application.use_cases.export_scenario_report import (
    ExportScenarioReportUseCase,
)
from networth_report.application.use_cases.get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
)
from networth_report.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from networth_report.infrastructure.finance_repository import (
    SqlAlchemyFinanceRepository,
)
from networth_report.infrastructure.logging.logger import get_app_logger
from networth_report.infrastructure.pdf_renderer import ReportLabPdfRenderer
from networth_report.infrastructure.settings import ReportSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
) -> FinanceRepositoryPort:
    """Return the finance store repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db)


def build_report_renderer() -> ReportRendererPort:
    """Return the PDF rendering backend."""
    return ReportLabPdfRenderer(logger=get_app_logger())


def build_net_worth_summary_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: ReportSettings | None = None,
) -> GetNetWorthSummaryUseCase:
    """Return the net worth use case configured from the environment."""
    resolved_settings = settings or ReportSettings.from_env()
    return GetNetWorthSummaryUseCase(
        repository=build_finance_repository(db_port),
        logger=get_app_logger(),
        trend_months=resolved_settings.trend_months,
        use_latest_per_account=resolved_settings.use_latest_per_account,
    )


def build_export_scenario_report_use_case() -> ExportScenarioReportUseCase:
    """Return the report export use case wired to the PDF backend."""
    return ExportScenarioReportUseCase(
        renderer=build_report_renderer(),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_finance_repository",
    "build_report_renderer",
    "build_net_worth_summary_use_case",
    "build_export_scenario_report_use_case",
]
