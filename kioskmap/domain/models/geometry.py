from dataclasses import dataclass
from math import sqrt
from typing import Dict


@dataclass(frozen=True)
class Point:
    """
    Point on a floor plan.

    Attributes:
        x: x coordinate in floor-plan units
        y: y coordinate in floor-plan units
    """

    x: float
    y: float

    def distance_to(self, other: "Point") -> float:
        """
        Calculates the euclidean distance between the point and another provided point

        Arguments:
            other: See [`Point`][kioskmap.domain.models.geometry.Point]
        """
        return sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2)


@dataclass(frozen=True)
class ViewSize:
    """Size of the visible viewport.

    Attributes:
        width: Width in the same units as the transform offsets.
        height: Height in the same units as the transform offsets.
    """

    width: float
    height: float


@dataclass(frozen=True)
class Insets:
    """Part of the viewport covered by UI elements (sidebars, headers, ...).

    Attributes:
        top: Covered space along the top edge.
        right: Covered space along the right edge.
        bottom: Covered space along the bottom edge.
        left: Covered space along the left edge.
    """

    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0
    left: float = 0.0

    @classmethod
    def none(cls) -> "Insets":
        return cls()


@dataclass(frozen=True)
class Bounds:
    """Axis-aligned rectangle spanning a set of points."""

    min_x: float
    max_x: float
    min_y: float
    max_y: float

    @classmethod
    def from_points(cls, *points: Point) -> "Bounds":
        if not points:
            raise ValueError("At least one point is required to build bounds")

        xs = [point.x for point in points]
        ys = [point.y for point in points]
        return cls(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point:
        return Point(
            x=self.min_x + self.width / 2, y=self.min_y + self.height / 2
        )


@dataclass(frozen=True)
class Transform:
    """Pan-and-zoom to apply to the floor-plan coordinate space.

    A world point `p` ends up at `(p.x * scale + x, p.y * scale + y)` in the
    viewport.

    Attributes:
        x: Horizontal pan offset.
        y: Vertical pan offset.
        scale: Zoom factor.
    """

    x: float
    y: float
    scale: float

    @classmethod
    def identity(cls) -> "Transform":
        return cls(x=0.0, y=0.0, scale=1.0)

    def apply(self, point: Point) -> Point:
        """Map a floor-plan point to viewport coordinates."""
        return Point(
            x=point.x * self.scale + self.x, y=point.y * self.scale + self.y
        )

    def invert(self, point: Point) -> Point:
        """Map a viewport point back to floor-plan coordinates."""
        return Point(
            x=(point.x - self.x) / self.scale,
            y=(point.y - self.y) / self.scale,
        )

    def to_dict(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y, "scale": self.scale}
