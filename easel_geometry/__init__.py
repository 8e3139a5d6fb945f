"""
Geometry Layer
==============

Bounded Context: Shapes and their closed-form geometry.

Responsibilities:
- Point and shape representation (immutable)
- Area, perimeter and point containment per variant
- Shape construction with validation (ShapeFactory)
- NO collection state, NO logging

Design Philosophy:
- Immutable data structures
- Fail-fast validation
- Zero side effects (beyond the creation stamp counter)
"""

from easel_geometry.errors import InvalidArgumentError, Violation
from easel_geometry.shapes import Point, ShapeKind, Shape, Circle, Square, Rectangle
from easel_geometry.factory import ShapeFactory

__all__ = [
    "InvalidArgumentError",
    "Violation",
    "Point",
    "ShapeKind",
    "Shape",
    "Circle",
    "Square",
    "Rectangle",
    "ShapeFactory",
]
