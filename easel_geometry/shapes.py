"""
Geometric Shapes Module
=======================

Pure geometric representations - NO collection state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Closed-form containment per variant (no generic polygon clipping)
- One level of inheritance: variant -> Shape
- Creation stamp from a logical counter, never from the wall clock
"""

import itertools
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import ClassVar, Dict, Tuple

from easel_geometry.errors import InvalidArgumentError, Violation


# Process-wide creation counter. Strictly increasing, so two shapes built in
# sequence never share a stamp.
_stamps = itertools.count(1)


class ShapeKind(str, Enum):
    """Shape type tags. TRIANGLE and POLYGON are reserved for future variants."""

    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    POLYGON = "polygon"

    @classmethod
    def parse(cls, token: str) -> "ShapeKind":
        """
        Map a user token (case-insensitive) to a kind.

        Raises:
            InvalidArgumentError: If the token names no known kind
        """
        normalized = str(token).strip().lower()
        for kind in cls:
            if kind.value == normalized:
                return kind
        names = ", ".join(kind.name for kind in cls)
        raise InvalidArgumentError(
            Violation.UNSUPPORTED_KIND,
            f"Unknown shape kind: {token!r}. Must be one of {names}"
        )


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D coordinate.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: float
    y: float

    ORIGIN: ClassVar["Point"]

    def distance_to(self, other: "Point") -> float:
        """Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)

    def is_close(self, other: "Point", tolerance: float = 0.0) -> bool:
        """
        Compare coordinates within an absolute tolerance.

        A tolerance of 0 is exact floating-point equality.
        """
        if tolerance == 0.0:
            return self.x == other.x and self.y == other.y
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


Point.ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Shape(ABC):
    """
    Abstract base for all shape variants.

    Subclasses declare their dimensions as dataclass fields after `origin`;
    every dimension must be a finite number greater than zero.

    Attributes:
        origin: Anchor point (circle centre, lower-left corner of boxes)
        created_at: Logical creation stamp, assigned at construction
    """

    KIND: ClassVar[ShapeKind]

    origin: Point
    created_at: int = field(init=False, compare=False)

    def __post_init__(self):
        """Validate geometry and assign the creation stamp."""
        if not isinstance(self.origin, Point):
            raise TypeError(f"origin must be Point, got {type(self.origin).__name__}")

        for name, value in self.dimensions().items():
            if not math.isfinite(value) or value <= 0:
                raise InvalidArgumentError(
                    Violation.NON_POSITIVE,
                    f"{self.KIND.name} {name} must be a finite number > 0, got {value}"
                )

        # Frozen dataclass: bypass __setattr__ once, at construction
        object.__setattr__(self, "created_at", next(_stamps))

    @classmethod
    def dimension_names(cls) -> Tuple[str, ...]:
        """Names of the shape-specific parameters, in declaration order."""
        return tuple(
            f.name for f in fields(cls)
            if f.name not in ("origin", "created_at")
        )

    def dimensions(self) -> Dict[str, float]:
        return {name: getattr(self, name) for name in self.dimension_names()}

    @property
    def kind(self) -> ShapeKind:
        return self.KIND

    def distance_from_origin(self) -> float:
        """Distance from the anchor point to (0, 0)."""
        return self.origin.distance_to(Point.ORIGIN)

    @abstractmethod
    def area(self) -> float:
        ...

    @abstractmethod
    def perimeter(self) -> float:
        ...

    @abstractmethod
    def contains_point(self, point: Point) -> bool:
        """
        Check if a point lies inside the shape (boundary inclusive).

        Args:
            point: Point to test

        Returns:
            True if the point is inside or on the edge
        """
        ...


def _box_contains(origin: Point, width: float, height: float, point: Point) -> bool:
    """Axis-aligned box test, origin at the lower-left, all edges inclusive."""
    return (
        origin.x <= point.x <= origin.x + width
        and origin.y <= point.y <= origin.y + height
    )


@dataclass(frozen=True)
class Circle(Shape):
    """Circle centred on its origin."""

    KIND: ClassVar[ShapeKind] = ShapeKind.CIRCLE

    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    def contains_point(self, point: Point) -> bool:
        return self.origin.distance_to(point) <= self.radius


@dataclass(frozen=True)
class Square(Shape):
    """Square extending `side` along +x and +y from its origin."""

    KIND: ClassVar[ShapeKind] = ShapeKind.SQUARE

    side: float

    def area(self) -> float:
        return self.side * self.side

    def perimeter(self) -> float:
        return 4 * self.side

    def contains_point(self, point: Point) -> bool:
        return _box_contains(self.origin, self.side, self.side, point)


@dataclass(frozen=True)
class Rectangle(Shape):
    """
    Axis-aligned rectangle.

    `length` runs along +x and `breadth` along +y from the origin.
    """

    KIND: ClassVar[ShapeKind] = ShapeKind.RECTANGLE

    length: float
    breadth: float

    def area(self) -> float:
        return self.length * self.breadth

    def perimeter(self) -> float:
        return 2 * (self.length + self.breadth)

    def contains_point(self, point: Point) -> bool:
        return _box_contains(self.origin, self.length, self.breadth, point)
