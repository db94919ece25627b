"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from networth_report.domain.constants import (
    DEFAULT_TREND_MONTHS,
    USE_LATEST_PER_ACCOUNT_PER_MONTH,
)
from networth_report.infrastructure.logging.logger import get_app_logger
from networth_report.utils.utils import get_project_root

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ReportSettings:
    """Settings for the net worth summary and report export.

    Attributes:
        trend_months: Length of the trend window in calendar months.
        use_latest_per_account: Keep only the latest monthly snapshot per
            account when bucketing history.
        output_dir: Directory receiving exported reports.
        scenario_file: Optional scenario JSON used by the export CLI.
    """

    trend_months: int = DEFAULT_TREND_MONTHS
    use_latest_per_account: bool = USE_LATEST_PER_ACCOUNT_PER_MONTH
    output_dir: Path = Path("reports")
    scenario_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ReportSettings":
        """Build settings from environment variables.

        Returns:
            ReportSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        trend_months = cls._parse_positive_int(
            os.getenv("NET_WORTH_TREND_MONTHS"),
            DEFAULT_TREND_MONTHS,
            name="NET_WORTH_TREND_MONTHS",
            logger=logger,
        )
        use_latest = cls._parse_bool(
            os.getenv("NET_WORTH_LATEST_PER_ACCOUNT"),
            USE_LATEST_PER_ACCOUNT_PER_MONTH,
            name="NET_WORTH_LATEST_PER_ACCOUNT",
            logger=logger,
        )
        output_dir = cls._resolve_path(os.getenv("REPORT_OUTPUT_DIR") or "reports")
        raw_scenario = os.getenv("SCENARIO_FILE")
        scenario_file = cls._resolve_path(raw_scenario) if raw_scenario else None
        if scenario_file is not None and not scenario_file.exists():
            logger.warning(f"Scenario file does not exist at {scenario_file}")
        return cls(
            trend_months=trend_months,
            use_latest_per_account=use_latest,
            output_dir=output_dir,
            scenario_file=scenario_file,
        )

    @staticmethod
    def _resolve_path(raw_path: str) -> Path:
        """Resolve a path, relative paths being taken from the project root."""
        path = Path(raw_path).expanduser()
        if not path.is_absolute():
            path = get_project_root() / path
        return path.resolve()

    @staticmethod
    def _parse_positive_int(
        raw_value: str | None,
        default: int,
        name: str,
        logger,
    ) -> int:
        if raw_value is None or not raw_value.strip():
            return default
        try:
            value = int(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid integer for {name}: '{raw_value}'. Using {default}."
            )
            return default
        if value <= 0:
            logger.warning(f"{name} must be positive. Using {default}.")
            return default
        return value

    @staticmethod
    def _parse_bool(
        raw_value: str | None,
        default: bool,
        name: str,
        logger,
    ) -> bool:
        if raw_value is None or not raw_value.strip():
            return default
        normalized = raw_value.strip().lower()
        if normalized in _TRUE_VALUES:
            return True
        if normalized in _FALSE_VALUES:
            return False
        logger.warning(
            f"Invalid boolean for {name}: '{raw_value}'. Using {default}."
        )
        return default


__all__ = ["ReportSettings"]
