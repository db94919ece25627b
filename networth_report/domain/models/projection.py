"""Domain models for scenario projections and their report."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class LifeEvent:
    """Discrete event shifting the projected net worth in a given year."""

    year: int
    impact: float
    icon: str = ""
    label: str = ""
    description: str = ""


@dataclass(frozen=True)
class ProjectionPoint:
    """Projected net worth for a year (or age) of the timeline."""

    year: int
    net_worth: float


@dataclass(frozen=True)
class MonteCarloPoint:
    """Percentile outcomes of a Monte Carlo run for one year."""

    year: int
    age: int
    median: float
    p10: float
    p90: float


@dataclass(frozen=True)
class ComparisonPath:
    """Named alternative timeline."""

    name: str
    timeline: list[ProjectionPoint] = field(default_factory=list)


@dataclass(frozen=True)
class ScenarioComparison:
    """Two timelines compared side by side."""

    path_a: ComparisonPath
    path_b: ComparisonPath


@dataclass(frozen=True)
class ScenarioReport:
    """Everything needed to export a scenario report.

    Attributes:
        name: Scenario name, also used for the file name.
        current_age: Age of the user today.
        target_age: Age at which the projection ends (e.g. retirement).
        initial_net_worth: Net worth at the start of the projection.
        events: Life events placed on the timeline.
        timeline: Projected net worth per year.
        monte_carlo: Optional percentile cone.
        comparison: Optional two-path comparison.
    """

    name: str
    current_age: int
    target_age: int
    initial_net_worth: float
    events: list[LifeEvent] = field(default_factory=list)
    timeline: list[ProjectionPoint] = field(default_factory=list)
    monte_carlo: list[MonteCarloPoint] = field(default_factory=list)
    comparison: ScenarioComparison | None = None

    @property
    def projected_net_worth(self) -> float:
        """Return the last timeline value, or 0 without a timeline."""
        if not self.timeline:
            return 0.0
        return self.timeline[-1].net_worth

    @property
    def years_to_target(self) -> int:
        return self.target_age - self.current_age

    @property
    def total_event_impact(self) -> float:
        return sum((event.impact for event in self.events), 0.0)


__all__ = [
    "LifeEvent",
    "ProjectionPoint",
    "MonteCarloPoint",
    "ComparisonPath",
    "ScenarioComparison",
    "ScenarioReport",
]
