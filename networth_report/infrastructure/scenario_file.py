"""Loading scenario reports from JSON exports.

The expected document matches the scenario planner export::

    {
      "name": "Early Retirement",
      "currentAge": 35,
      "retirementAge": 55,
      "initialNetWorth": 120000,
      "events": [{"year": 40, "event": {"icon": "H", "label": "House",
                  "impact": -60000, "description": "Down payment"}}],
      "timeline": [{"year": 35, "netWorth": 120000}, ...],
      "monteCarloData": [{"year": 35, "age": 35, "median": 1,
                          "p10": 0, "p90": 2}, ...],
      "comparison": {"pathA": {"name": "A", "timeline": [...]},
                     "pathB": {"name": "B", "timeline": [...]}}
    }

Snake case keys (``current_age``, ``net_worth``...) are accepted as well,
and events may be flat instead of nesting their details under ``event``.
"""

import json
from pathlib import Path
from typing import Any

from networth_report.domain.models import (
    ComparisonPath,
    LifeEvent,
    MonteCarloPoint,
    ProjectionPoint,
    ScenarioComparison,
    ScenarioReport,
)


class ScenarioFileError(ValueError):
    """Raised when a scenario document cannot be parsed."""


_MISSING = object()


def load_scenario_report(path: Path | str) -> ScenarioReport:
    """Read and parse a scenario JSON file.

    Args:
        path: Path of the JSON document.

    Returns:
        ScenarioReport: Parsed scenario.

    Raises:
        ScenarioFileError: If the file is unreadable or malformed.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ScenarioFileError(f"Cannot read scenario file {path}: {exc}") from exc
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ScenarioFileError(f"Invalid JSON in {path}: {exc}") from exc
    return parse_scenario_report(payload)


def parse_scenario_report(payload: Any) -> ScenarioReport:
    """Build a ScenarioReport from a decoded JSON document.

    Args:
        payload: Decoded JSON object.

    Returns:
        ScenarioReport: Parsed scenario.

    Raises:
        ScenarioFileError: If required keys are missing or mistyped.
    """
    if not isinstance(payload, dict):
        raise ScenarioFileError("Scenario document must be a JSON object")
    try:
        comparison_raw = _get(payload, "comparison", default=None)
        return ScenarioReport(
            name=str(_get(payload, "name")),
            current_age=int(_get(payload, "currentAge", "current_age")),
            target_age=int(
                _get(
                    payload,
                    "retirementAge",
                    "retirement_age",
                    "targetAge",
                    "target_age",
                )
            ),
            initial_net_worth=float(
                _get(payload, "initialNetWorth", "initial_net_worth")
            ),
            events=[
                _parse_event(item)
                for item in _get(payload, "events", default=[]) or []
            ],
            timeline=_parse_timeline(_get(payload, "timeline", default=[])),
            monte_carlo=[
                _parse_monte_carlo_point(item)
                for item in _get(
                    payload,
                    "monteCarloData",
                    "monte_carlo",
                    default=[],
                )
                or []
            ],
            comparison=(
                _parse_comparison(comparison_raw) if comparison_raw else None
            ),
        )
    except (AttributeError, KeyError, TypeError, ValueError) as exc:
        raise ScenarioFileError(f"Malformed scenario document: {exc}") from exc


def _get(mapping: dict, *keys: str, default: Any = _MISSING) -> Any:
    for key in keys:
        if key in mapping:
            return mapping[key]
    if default is _MISSING:
        raise KeyError(keys[0])
    return default


def _parse_event(item: dict) -> LifeEvent:
    details = item.get("event", item)
    return LifeEvent(
        year=int(item["year"]),
        impact=float(details.get("impact") or 0),
        icon=str(details.get("icon") or ""),
        label=str(details.get("label") or ""),
        description=str(details.get("description") or ""),
    )


def _parse_timeline(items: Any) -> list[ProjectionPoint]:
    return [
        ProjectionPoint(
            year=int(item["year"]),
            net_worth=float(_get(item, "netWorth", "net_worth")),
        )
        for item in items or []
    ]


def _parse_monte_carlo_point(item: dict) -> MonteCarloPoint:
    return MonteCarloPoint(
        year=int(item["year"]),
        age=int(item.get("age", item["year"])),
        median=float(item["median"]),
        p10=float(item["p10"]),
        p90=float(item["p90"]),
    )


def _parse_comparison(raw: dict) -> ScenarioComparison:
    def _path(value: dict) -> ComparisonPath:
        return ComparisonPath(
            name=str(value["name"]),
            timeline=_parse_timeline(value.get("timeline")),
        )

    return ScenarioComparison(
        path_a=_path(_get(raw, "pathA", "path_a")),
        path_b=_path(_get(raw, "pathB", "path_b")),
    )


__all__ = [
    "ScenarioFileError",
    "load_scenario_report",
    "parse_scenario_report",
]
