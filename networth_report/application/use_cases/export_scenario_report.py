"""Use case to export a scenario projection report."""

from datetime import datetime
from pathlib import Path
from typing import Callable

from networth_report.application.ports.report_renderer import (
    ReportRendererPort,
)
from networth_report.domain.models import ScenarioReport
from networth_report.domain.services.report_layout import (
    layout_scenario_report,
)
from networth_report.infrastructure.logging.logger import get_app_logger


class ExportScenarioReportUseCase:
    """Lay out a scenario report and hand it to a rendering backend."""

    def __init__(
        self,
        renderer: ReportRendererPort,
        logger=None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize the use case.

        Args:
            renderer: Backend writing the laid-out document.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Optional callable returning the current time.
        """
        self._renderer = renderer
        self._logger = logger or get_app_logger()
        self._clock = clock or datetime.now

    def execute(self, report: ScenarioReport, output_dir: Path) -> Path:
        """Render the report into ``output_dir``.

        Args:
            report: Scenario data to export.
            output_dir: Directory receiving the document.

        Returns:
            Path: Path of the written document.
        """
        document = layout_scenario_report(
            report,
            generated_on=self._clock().date(),
        )
        self._logger.info(
            f"Report '{report.name}' laid out on {len(document.pages)} pages"
        )
        path = self._renderer.render(document, Path(output_dir))
        self._logger.info(f"Report written to {path}")
        return path


__all__ = ["ExportScenarioReportUseCase"]
