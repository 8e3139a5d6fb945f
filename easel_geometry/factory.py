"""
Shape Factory Module
====================

Builds shape variants from a kind tag, an origin and a parameter list.

Design:
- Explicit registration (kind -> shape class), fail-fast on unknown kinds
- Parameter names derived from the variant's dataclass fields
- Validation happens before construction, so no degenerate shape escapes
"""

import math
from typing import Dict, Sequence, Set, Tuple, Type

from easel_geometry.errors import InvalidArgumentError, Violation
from easel_geometry.shapes import Circle, Point, Rectangle, Shape, ShapeKind, Square


DEFAULT_VARIANTS: Dict[ShapeKind, Type[Shape]] = {
    ShapeKind.CIRCLE: Circle,
    ShapeKind.SQUARE: Square,
    ShapeKind.RECTANGLE: Rectangle,
}


class ShapeFactory:
    """
    Registry-backed shape constructor.

    Example:
        factory = ShapeFactory()
        circle = factory.create_shape(ShapeKind.CIRCLE, Point(0, 0), [2.0])

        # Extension point for future variants
        factory.register(ShapeKind.TRIANGLE, Triangle)
    """

    def __init__(self):
        self._variants: Dict[ShapeKind, Type[Shape]] = dict(DEFAULT_VARIANTS)

    def register(self, kind: ShapeKind, shape_cls: Type[Shape]) -> None:
        """
        Register a shape class for a kind.

        Raises:
            ValueError: If the kind is already registered or the class is
                tagged with a different kind
        """
        if kind in self._variants:
            raise ValueError(f"Shape kind '{kind.name}' already registered")
        if shape_cls.KIND != kind:
            raise ValueError(
                f"{shape_cls.__name__} is tagged {shape_cls.KIND.name}, "
                f"cannot register it as {kind.name}"
            )
        self._variants[kind] = shape_cls

    @property
    def supported_kinds(self) -> Set[ShapeKind]:
        return set(self._variants)

    def _variant(self, kind: ShapeKind) -> Type[Shape]:
        try:
            return self._variants[kind]
        except KeyError:
            supported = ", ".join(sorted(k.name for k in self._variants))
            raise InvalidArgumentError(
                Violation.UNSUPPORTED_KIND,
                f"Shape kind '{getattr(kind, 'name', kind)}' not supported. "
                f"Supported kinds: {supported}"
            ) from None

    def parameter_names(self, kind: ShapeKind) -> Tuple[str, ...]:
        return self._variant(kind).dimension_names()

    def arity(self, kind: ShapeKind) -> int:
        """Number of parameters `kind` requires."""
        return len(self.parameter_names(kind))

    def create_shape(
        self,
        kind: ShapeKind,
        origin: Point,
        parameters: Sequence[float]
    ) -> Shape:
        """
        Create a new shape.

        Args:
            kind: Registered shape kind
            origin: Anchor point
            parameters: Dimensions in the order given by parameter_names(kind)

        Returns:
            Newly constructed shape (stamped at this moment)

        Raises:
            InvalidArgumentError: Unsupported kind, wrong parameter count or
                non-positive parameter
        """
        shape_cls = self._variant(kind)
        label = shape_cls.KIND.name
        names = shape_cls.dimension_names()

        if len(parameters) != len(names):
            raise InvalidArgumentError(
                Violation.PARAMETER_COUNT,
                f"{label} requires {len(names)} parameter(s) "
                f"({', '.join(names)}), got {len(parameters)}"
            )

        for name, value in zip(names, parameters):
            if not math.isfinite(value) or value <= 0:
                raise InvalidArgumentError(
                    Violation.NON_POSITIVE,
                    f"{label} {name} must be a finite number > 0, got {value}"
                )

        return shape_cls(origin, *parameters)
