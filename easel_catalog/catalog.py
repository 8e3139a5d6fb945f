"""
Shape Catalog - ordered, lock-guarded shape collection.

This module provides the Catalog class which owns the shapes of one session
and answers queries over them (sorting, point containment, "on top of").

Ownership:
- The catalog never constructs shapes; callers insert what ShapeFactory built
- Insertion order is the iteration order and the tie-break for sorting
- Duplicates are allowed and stay distinct entries

Thread Safety:
- One threading.Lock held for the duration of each operation
- Queries work on a snapshot taken under the lock
- Shapes are immutable (frozen dataclass), so snapshots are safe to share
"""

import math
import threading
from enum import Enum
from typing import Callable, Dict, Iterator, List, Optional

import numpy as np

from easel_geometry import Point, Shape, ShapeKind


class SortCriterion(str, Enum):
    """Metrics the catalog can be sorted by (ascending)."""

    AREA = "area"
    PERIMETER = "perimeter"
    CREATED_AT = "created_at"
    DISTANCE_FROM_ORIGIN = "distance_from_origin"

    @classmethod
    def parse(cls, token: str) -> "SortCriterion":
        """
        Accept a criterion value ("area") or its 1-based menu number ("1").

        Raises:
            ValueError: If the token matches no criterion
        """
        normalized = str(token).strip().lower()
        members = list(cls)
        if normalized.isdigit() and 1 <= int(normalized) <= len(members):
            return members[int(normalized) - 1]
        for criterion in members:
            if criterion.value == normalized:
                return criterion
        raise ValueError(
            f"Invalid sort criterion: {token!r}. "
            f"Must be 1-{len(members)} or one of {', '.join(c.value for c in members)}"
        )

    def metric(self, shape: Shape) -> float:
        """Value of this criterion for one shape."""
        return _METRICS[self](shape)


_METRICS: Dict[SortCriterion, Callable[[Shape], float]] = {
    SortCriterion.AREA: lambda shape: shape.area(),
    SortCriterion.PERIMETER: lambda shape: shape.perimeter(),
    SortCriterion.CREATED_AT: lambda shape: shape.created_at,
    SortCriterion.DISTANCE_FROM_ORIGIN: lambda shape: shape.distance_from_origin(),
}


class Catalog:
    """
    Ordered collection of shapes with query operations.

    Removal never fails: "not found" is reported through the return value
    (False, 0 or None), not an exception.

    Usage:
        catalog = Catalog()
        factory = ShapeFactory()

        circle = factory.create_shape(ShapeKind.CIRCLE, Point(0, 0), [5])
        rect = factory.create_shape(ShapeKind.RECTANGLE, Point(1, 1), [2, 2])
        catalog.add(circle)
        catalog.add(rect)

        catalog.shapes_on_top_of(circle)          # [rect]
        catalog.shapes_enclosing(Point(1, 1))     # [circle, rect]
        catalog.sorted_by(SortCriterion.AREA)     # [rect, circle]
    """

    def __init__(self, origin_tolerance: float = 0.0):
        """
        Args:
            origin_tolerance: Absolute tolerance for origin matching in
                remove_by_origin()/find_by_origin(). 0 = exact equality.
        """
        if not math.isfinite(origin_tolerance) or origin_tolerance < 0:
            raise ValueError(
                f"origin_tolerance must be a finite number >= 0, got {origin_tolerance}"
            )

        self.origin_tolerance = origin_tolerance
        self._shapes: List[Shape] = []
        self._lock = threading.Lock()

    # ========== Mutation ==========

    def add(self, shape: Shape) -> None:
        """Append a shape. No duplicate check."""
        if not isinstance(shape, Shape):
            raise TypeError(f"Catalog only holds Shape instances, got {type(shape).__name__}")

        with self._lock:
            self._shapes.append(shape)

    def remove(self, shape: Shape) -> bool:
        """
        Remove the first entry that is `shape` (identity, not equality).

        Returns:
            True if an entry was removed, False if the shape was not present.
        """
        with self._lock:
            for index, candidate in enumerate(self._shapes):
                if candidate is shape:
                    del self._shapes[index]
                    return True
            return False

    def remove_by_type(self, kind: ShapeKind) -> int:
        """
        Remove every shape of `kind`, keeping the order of the rest.

        Returns:
            Number of shapes removed.
        """
        with self._lock:
            kept = [shape for shape in self._shapes if shape.kind != kind]
            removed = len(self._shapes) - len(kept)
            self._shapes = kept
            return removed

    def remove_by_origin(self, point: Point) -> Optional[Shape]:
        """
        Remove the first shape whose origin matches `point`.

        Returns:
            The removed shape, or None if nothing matched.
        """
        with self._lock:
            index = self._index_of_origin(point)
            if index is None:
                return None
            return self._shapes.pop(index)

    # ========== Queries ==========

    def find_by_origin(self, point: Point) -> Optional[Shape]:
        """First shape whose origin matches `point`, or None."""
        with self._lock:
            index = self._index_of_origin(point)
            return None if index is None else self._shapes[index]

    def sorted_by(self, criterion: SortCriterion) -> List[Shape]:
        """
        Shapes sorted ascending by `criterion`, as a new list.

        Ties keep insertion order (stable sort). The catalog's own order is
        not changed.
        """
        snapshot = self.shapes
        if not snapshot:
            return []

        metrics = np.array([criterion.metric(shape) for shape in snapshot])
        order = np.argsort(metrics, kind="stable")
        return [snapshot[i] for i in order]

    def shapes_enclosing(self, point: Point) -> List[Shape]:
        """All shapes containing `point`, in catalog order."""
        return self._select(lambda shape: shape.contains_point(point))

    def shapes_on_top_of(self, base: Shape) -> List[Shape]:
        """
        Shapes created strictly after `base` whose origin lies inside it.

        `base` itself never qualifies (equal stamps are not "after").
        """
        return self._select(
            lambda shape: shape.created_at > base.created_at
            and base.contains_point(shape.origin)
        )

    @property
    def shapes(self) -> List[Shape]:
        """Snapshot of the catalog in insertion order."""
        with self._lock:
            return list(self._shapes)

    def count(self) -> int:
        with self._lock:
            return len(self._shapes)

    def __len__(self) -> int:
        return self.count()

    def __iter__(self) -> Iterator[Shape]:
        return iter(self.shapes)

    def __contains__(self, shape: object) -> bool:
        with self._lock:
            return any(candidate is shape for candidate in self._shapes)

    # ========== Internals ==========

    def _select(self, predicate: Callable[[Shape], bool]) -> List[Shape]:
        return [shape for shape in self.shapes if predicate(shape)]

    def _index_of_origin(self, point: Point) -> Optional[int]:
        # Caller holds the lock
        for index, shape in enumerate(self._shapes):
            if shape.origin.is_close(point, self.origin_tolerance):
                return index
        return None
