"""Application port for report rendering backends."""

from pathlib import Path
from typing import Protocol

from networth_report.domain.models.drawing import ReportDocument


class ReportRendererPort(Protocol):
    """Port drawing a laid-out report into a file."""

    def render(self, document: ReportDocument, output_dir: Path) -> Path:
        """Write the document into ``output_dir`` and return its path."""


__all__ = ["ReportRendererPort"]
