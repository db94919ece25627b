"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import FinanceRepositoryPort
from .report_renderer import ReportRendererPort

__all__ = [
    "DatabaseEnginePort",
    "FinanceRepositoryPort",
    "ReportRendererPort",
]
