"""
Configuration schema for a catalog session.

This module defines the session configuration: origin-match tolerance,
logging level and the shapes the catalog is seeded with at startup.
"""

import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple

import yaml

from easel_catalog.catalog import Catalog
from easel_geometry import Point, ShapeFactory, ShapeKind


VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class ShapeConfig:
    """Seed shape definition (kind token, origin, parameters)."""

    kind: str
    origin: Tuple[float, float]
    parameters: List[float] = field(default_factory=list)

    def __post_init__(self):
        """Validate shape configuration."""
        # Raises InvalidArgumentError (a ValueError) for unknown tokens
        ShapeKind.parse(self.kind)

        if len(self.origin) != 2:
            raise ValueError(
                f"Shape origin must have exactly 2 coordinates, "
                f"got {len(self.origin)}"
            )

    @property
    def shape_kind(self) -> ShapeKind:
        return ShapeKind.parse(self.kind)

    @property
    def origin_point(self) -> Point:
        return Point(*self.origin)


@dataclass(frozen=True)
class CatalogConfig:
    """
    Main configuration for a catalog session.

    Loaded from YAML and validated at startup.
    Immutable after construction (frozen dataclass).
    """

    session_name: str = "default"
    origin_tolerance: float = 0.0  # 0 = exact coordinate equality
    log_level: str = "WARNING"
    shapes: List[ShapeConfig] = field(default_factory=list)

    def __post_init__(self):
        """Validate catalog configuration."""
        if not self.session_name:
            raise ValueError("session_name cannot be empty")

        if not math.isfinite(self.origin_tolerance) or self.origin_tolerance < 0:
            raise ValueError(
                f"origin_tolerance must be a finite number >= 0, "
                f"got {self.origin_tolerance}"
            )

        object.__setattr__(self, "log_level", self.log_level.upper())
        if self.log_level not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Invalid log_level: {self.log_level}. "
                f"Must be one of {sorted(VALID_LOG_LEVELS)}"
            )

    def build_catalog(self, factory: Optional[ShapeFactory] = None) -> Catalog:
        """
        Create a catalog and insert the seed shapes in file order.

        Raises:
            InvalidArgumentError: If a seed shape fails factory validation
        """
        factory = factory or ShapeFactory()
        catalog = Catalog(origin_tolerance=self.origin_tolerance)

        for shape_config in self.shapes:
            shape = factory.create_shape(
                shape_config.shape_kind,
                shape_config.origin_point,
                list(shape_config.parameters),
            )
            catalog.add(shape)

        return catalog

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "CatalogConfig":
        """
        Load configuration from YAML file.

        Example YAML:
            session_name: "demo"
            origin_tolerance: 0.0
            log_level: "INFO"

            shapes:
              - kind: circle
                origin: [0, 0]
                parameters: [5]
              - kind: rectangle
                origin: [1, 1]
                parameters: [2, 2]

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the YAML is invalid or a value fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {yaml_path}: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config root must be a mapping, got {type(data).__name__}")

        shapes_data = data.get("shapes") or []
        try:
            entries = [
                (
                    s["kind"],
                    tuple(float(c) for c in s["origin"]),
                    [float(p) for p in s.get("parameters") or []],
                )
                for s in shapes_data
            ]
            origin_tolerance = float(data.get("origin_tolerance", 0.0))
        except (KeyError, TypeError, ValueError) as e:
            raise ValueError(f"Invalid value in {yaml_path}: {e!r}")

        return cls(
            session_name=data.get("session_name", "default"),
            origin_tolerance=origin_tolerance,
            log_level=str(data.get("log_level", "WARNING")),
            shapes=[ShapeConfig(kind, origin, parameters) for kind, origin, parameters in entries],
        )
