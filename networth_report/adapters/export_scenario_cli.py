"""CLI adapter exporting a scenario projection report to PDF.

The scenario JSON is read from ``SCENARIO_FILE`` and the PDF is written to
``REPORT_OUTPUT_DIR`` (``reports/`` by default).
"""

from networth_report.infrastructure.container import (
    build_export_scenario_report_use_case,
)
from networth_report.infrastructure.logging.logger import get_app_logger
from networth_report.infrastructure.scenario_file import (
    ScenarioFileError,
    load_scenario_report,
)
from networth_report.infrastructure.settings import ReportSettings


def main() -> None:
    """Export the configured scenario and print the written path."""
    logger = get_app_logger()
    settings = ReportSettings.from_env()
    if settings.scenario_file is None:
        logger.warning("SCENARIO_FILE is required to export a report.")
        return

    try:
        report = load_scenario_report(settings.scenario_file)
    except ScenarioFileError as exc:
        logger.error(str(exc))
        return

    use_case = build_export_scenario_report_use_case()
    path = use_case.execute(report, settings.output_dir)

    print(f"Exported '{report.name}' to {path}")


if __name__ == "__main__":  # pragma: no cover
    main()
