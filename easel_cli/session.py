"""
Interactive Catalog Session
===========================

Menu-driven command loop over one Catalog.

Design:
- Catalog and factory injected (no module-level session state)
- Input/output streams injected (stdin/stdout by default)
- Invalid input is reported as "Error: ..." and the loop keeps running
- After an error only the rest of the current line is dropped; later lines
  of an abandoned command are read as menu choices ("Invalid choice.")
- Every mutation and query is logged as a structured event
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from easel_catalog import Catalog, SortCriterion
from easel_geometry import Shape, ShapeFactory, ShapeKind
from easel_logging import LogEvent, StructuredLogger, create_logger

from .reader import TokenReader
from .menu import InvalidChoiceError, Menu


SORT_PROMPT = (
    "Choose sorting criteria: 1. Area 2. Perimeter 3. Timestamp 4. Distance from Origin"
)


class CatalogSession:
    """
    Interactive session over a catalog.

    Usage:
        session = CatalogSession(Catalog(), ShapeFactory())
        session.run()  # reads stdin until "7" or end of input
    """

    def __init__(
        self,
        catalog: Catalog,
        factory: Optional[ShapeFactory] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        logger: Optional[StructuredLogger] = None
    ):
        self.catalog = catalog
        self.factory = factory or ShapeFactory()
        self.logger = logger or create_logger("session", level=logging.WARNING)

        self._reader = TokenReader(stdin or sys.stdin)
        self._out = stdout or sys.stdout
        self._running = False

        self.menu = Menu()
        self.menu.add("1", "Add Shape", self.add_shape)
        self.menu.add("2", "Delete Shape", self.delete_shape)
        self.menu.add("3", "Delete Shapes by Type", self.delete_shapes_by_type)
        self.menu.add("4", "Get Sorted Shapes", self.show_sorted)
        self.menu.add("5", "Get Shapes Enclosing Point", self.show_enclosing)
        self.menu.add("6", "Get Shapes On Top Of Another", self.show_on_top)
        self.menu.add("7", "Exit", self.stop)

    # ========== Loop ==========

    def run(self) -> None:
        """Run the menu loop until Exit or end of input."""
        self._running = True
        self.logger.info(
            event=LogEvent.SESSION_STARTED,
            message="Session started",
            metadata={'shape_count': len(self.catalog)}
        )

        while self._running:
            self._print_menu()
            try:
                choice = self._reader.next_token()
                self.menu.dispatch(choice)
            except EOFError:
                break
            except InvalidChoiceError:
                self._emit("Invalid choice.")
                self._reader.discard_line()
            except ValueError as e:
                # InputError, InvalidArgumentError and bad sort choices
                self._emit(f"Error: {e}")
                self._reader.discard_line()
                self.logger.warning(
                    event=LogEvent.INPUT_REJECTED,
                    message="Rejected input",
                    exc_info=e
                )

        self._running = False
        self.logger.info(
            event=LogEvent.SESSION_ENDED,
            message="Session ended",
            metadata={'shape_count': len(self.catalog)}
        )

    def stop(self) -> None:
        self._running = False

    # ========== Commands ==========

    def add_shape(self) -> None:
        self._emit(self._kind_prompt())
        kind = ShapeKind.parse(self._reader.next_token())
        names = self.factory.parameter_names(kind)

        self._emit("Enter origin x and y:")
        origin = self._reader.next_point()

        self._emit(f"Enter parameters ({', '.join(names)}):")
        parameters = [self._reader.next_float() for _ in names]

        shape = self.factory.create_shape(kind, origin, parameters)
        self.catalog.add(shape)
        self._emit("Shape added.")
        self.logger.info(
            event=LogEvent.SHAPE_ADDED,
            message=f"Added {kind.name}",
            metadata={
                'kind': kind.value,
                'origin': [origin.x, origin.y],
                'dimensions': shape.dimensions(),
                'created_at': shape.created_at,
            }
        )

    def delete_shape(self) -> None:
        self._emit("Enter shape origin x and y:")
        origin = self._reader.next_point()

        removed = self.catalog.remove_by_origin(origin)
        if removed is None:
            self._emit(f"No shape found at {origin}.")
            self.logger.info(
                event=LogEvent.SHAPE_NOT_FOUND,
                message="No shape matched origin",
                metadata={'origin': [origin.x, origin.y]}
            )
            return

        self._emit("Shape deleted.")
        self.logger.info(
            event=LogEvent.SHAPE_REMOVED,
            message=f"Removed {removed.kind.name}",
            metadata={'origin': [origin.x, origin.y], 'created_at': removed.created_at}
        )

    def delete_shapes_by_type(self) -> None:
        self._emit(self._kind_prompt())
        kind = ShapeKind.parse(self._reader.next_token())

        removed = self.catalog.remove_by_type(kind)
        self._emit(f"Deleted {removed} shape(s).")
        self.logger.info(
            event=LogEvent.SHAPES_REMOVED_BY_TYPE,
            message=f"Removed {removed} {kind.name} shape(s)",
            metadata={'kind': kind.value, 'removed': removed}
        )

    def show_sorted(self) -> None:
        self._emit(SORT_PROMPT)
        criterion = SortCriterion.parse(self._reader.next_token())

        shapes = self.catalog.sorted_by(criterion)
        for shape in shapes:
            self._emit(f"{shape.kind.name} - {_format_metric(criterion.metric(shape))}")
        self.logger.debug(
            event=LogEvent.QUERY_SORTED,
            message=f"Sorted by {criterion.value}",
            metadata={'criterion': criterion.value, 'count': len(shapes)}
        )

    def show_enclosing(self) -> None:
        self._emit("Enter point x and y:")
        point = self._reader.next_point()

        shapes = self.catalog.shapes_enclosing(point)
        self._emit_shapes(shapes, "encloses the point.", "No shape encloses the point.")
        self.logger.debug(
            event=LogEvent.QUERY_ENCLOSING,
            message="Point containment query",
            metadata={'point': [point.x, point.y], 'count': len(shapes)}
        )

    def show_on_top(self) -> None:
        self._emit("Enter base shape origin x and y:")
        origin = self._reader.next_point()

        base = self.catalog.find_by_origin(origin)
        if base is None:
            self._emit("Base shape not found.")
            return

        shapes = self.catalog.shapes_on_top_of(base)
        self._emit_shapes(shapes, "is on top.", "No shape is on top.")
        self.logger.debug(
            event=LogEvent.QUERY_ON_TOP,
            message=f"On-top-of query for {base.kind.name}",
            metadata={'origin': [origin.x, origin.y], 'count': len(shapes)}
        )

    # ========== Output ==========

    def _kind_prompt(self) -> str:
        kinds = ", ".join(
            kind.name for kind in ShapeKind if kind in self.factory.supported_kinds
        )
        return f"Enter shape type ({kinds}):"

    def _print_menu(self) -> None:
        for line in self.menu.lines():
            self._emit(line)

    def _emit_shapes(self, shapes: Iterable[Shape], suffix: str, empty: str) -> None:
        shapes = list(shapes)
        if not shapes:
            self._emit(empty)
        for shape in shapes:
            self._emit(f"{shape.kind.name} {suffix}")

    def _emit(self, line: str) -> None:
        print(line, file=self._out)


def _format_metric(value: float) -> str:
    if isinstance(value, int):
        return str(value)
    return f"{value:.4f}"
