"""Declarative drawing primitives produced by the report layout.

Coordinates are millimetres on a page whose origin is the top-left corner,
with ``y`` growing downwards. Backends translate them to their own space.
"""

from dataclasses import dataclass, field
from typing import Literal, Union

RGB = tuple[int, int, int]
Point = tuple[float, float]
TextAlign = Literal["left", "center", "right"]


@dataclass(frozen=True)
class Region:
    """Rectangular drawable area."""

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class Line:
    start: Point
    end: Point
    color: RGB
    width: float = 0.5


@dataclass(frozen=True)
class Polyline:
    """Connected line segments through ``points``."""

    points: tuple[Point, ...]
    color: RGB
    width: float = 1.0


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float
    fill: RGB


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float
    stroke: RGB | None = None
    fill: RGB | None = None


@dataclass(frozen=True)
class Polygon:
    """Closed filled shape, optionally translucent."""

    points: tuple[Point, ...]
    fill: RGB
    alpha: float = 1.0


@dataclass(frozen=True)
class Text:
    """Single line of text anchored on its baseline."""

    x: float
    y: float
    text: str
    size: float = 10
    color: RGB = (0, 0, 0)
    align: TextAlign = "left"


@dataclass(frozen=True)
class Table:
    """Grid table with a highlighted header row."""

    x: float
    y: float
    width: float
    header: tuple[str, ...]
    rows: tuple[tuple[str, ...], ...]
    header_fill: RGB
    header_color: RGB = (255, 255, 255)
    font_size: float = 9
    right_aligned_columns: tuple[int, ...] = ()


Primitive = Union[Line, Polyline, Circle, Rect, Polygon, Text, Table]


@dataclass(frozen=True)
class Page:
    """One page of the report and the primitives drawn on it."""

    number: int
    primitives: list[Primitive] = field(default_factory=list)


@dataclass(frozen=True)
class ReportDocument:
    """Fully laid-out report ready for a rendering backend."""

    filename: str
    page_width: float
    page_height: float
    pages: list[Page] = field(default_factory=list)


__all__ = [
    "RGB",
    "Point",
    "TextAlign",
    "Region",
    "Line",
    "Polyline",
    "Circle",
    "Rect",
    "Polygon",
    "Text",
    "Table",
    "Primitive",
    "Page",
    "ReportDocument",
]
