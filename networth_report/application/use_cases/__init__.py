"""Application use cases package."""

from .export_scenario_report import ExportScenarioReportUseCase
from .get_net_worth_summary import GetNetWorthSummaryUseCase, NetWorthSummary

__all__ = [
    "ExportScenarioReportUseCase",
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
]
