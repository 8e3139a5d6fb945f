"""
Test Interactive Session
========================

Scripted sessions over StringIO streams: menu dispatch, output lines,
error recovery, structured log events and the CLI entry point.

Usage:
    pytest test_session.py
"""

import io
import json
import logging
import sys

import pytest

from easel_catalog import Catalog
from easel_cli import CatalogSession, InputError, InvalidChoiceError, Menu, TokenReader
from easel_cli.cli import main as cli_main
from easel_geometry import ShapeFactory, ShapeKind
from easel_logging import LogEvent, StructuredLogger


LOGGER_NAME = "easel.test.session"


def run_session(script, catalog=None, level=logging.WARNING):
    """Run a session over `script`; return (catalog, output lines)."""
    catalog = catalog if catalog is not None else Catalog()
    stdout = io.StringIO()
    session = CatalogSession(
        catalog,
        ShapeFactory(),
        stdin=io.StringIO(script),
        stdout=stdout,
        logger=StructuredLogger("session", level=level, logger_name=LOGGER_NAME),
    )
    session.run()
    return catalog, stdout.getvalue().splitlines()


def test_token_reader():
    reader = TokenReader(io.StringIO("1 circle\n\n  0   0\nabc\n"))
    assert reader.next_token() == "1"
    assert reader.next_token() == "circle"
    point = reader.next_point()
    assert (point.x, point.y) == (0.0, 0.0)
    with pytest.raises(InputError):
        reader.next_float()
    with pytest.raises(EOFError):
        reader.next_token()

    with pytest.raises(InputError):
        TokenReader(io.StringIO("inf\n")).next_float()


def test_menu():
    calls = []
    menu = Menu()
    menu.add("1", "First", lambda: calls.append("one"))
    menu.add("2", "Second", lambda: calls.append("two"))

    menu.dispatch("2")
    assert calls == ["two"]
    assert list(menu.lines()) == ["1. First", "2. Second"]
    assert "1" in menu and "3" not in menu

    with pytest.raises(InvalidChoiceError):
        menu.dispatch("3")
    with pytest.raises(ValueError):
        menu.add("1", "Again", lambda: None)


def test_end_to_end_session():
    """Circle, rectangle inside it, then containment and on-top queries."""
    print("\n" + "=" * 60)
    print("TEST: Scripted session")
    print("=" * 60)

    script = (
        "1\ncircle\n0 0\n5\n"
        "1\nrectangle\n1 1\n2 2\n"
        "5\n1 1\n"
        "6\n0 0\n"
        "4\n1\n"
        "7\n"
    )
    catalog, lines = run_session(script)

    assert len(catalog) == 2
    assert lines.count("Shape added.") == 2
    print("✓ Two shapes added")

    assert "CIRCLE encloses the point." in lines
    assert "RECTANGLE encloses the point." in lines
    assert "RECTANGLE is on top." in lines
    assert "CIRCLE is on top." not in lines
    print("✓ Containment and on-top-of output")

    sorted_lines = [line for line in lines if " - " in line]
    assert sorted_lines == ["RECTANGLE - 4.0000", "CIRCLE - 78.5398"]
    print("✓ Sorted by area")

    assert lines[:7] == [
        "1. Add Shape",
        "2. Delete Shape",
        "3. Delete Shapes by Type",
        "4. Get Sorted Shapes",
        "5. Get Shapes Enclosing Point",
        "6. Get Shapes On Top Of Another",
        "7. Exit",
    ]


def test_deletions():
    script = (
        "1\nsquare\n2 2\n1\n"
        "1\ncircle\n0 0\n1\n"
        "1\ncircle 5 5 1\n"
        "2\n2 2\n"
        "2\n9 9\n"
        "3\nCIRCLE\n"
        "6\n0 0\n"
        "7\n"
    )
    catalog, lines = run_session(script)

    assert "Shape deleted." in lines
    assert "No shape found at (9, 9)." in lines
    assert "Deleted 2 shape(s)." in lines
    assert "Base shape not found." in lines
    assert len(catalog) == 0


def test_invalid_input_keeps_session_running():
    print("\n" + "=" * 60)
    print("TEST: Error recovery")
    print("=" * 60)

    script = (
        "9\n"                        # unknown choice
        "1\ncircle\n0 0\n-1\n"       # non-positive radius
        "1\ncircle\nabc 0\n"         # non-numeric coordinate
        "1\nhexagon\n"               # unknown kind token
        "1\ntriangle\n"              # reserved, unsupported kind
        "4\n9\n"                     # bad sort choice
        "1\nsquare\n0 0\n2\n"        # valid
        "7\n"
    )
    catalog, lines = run_session(script)

    errors = [line for line in lines if line.startswith("Error: ")]
    assert "Invalid choice." in lines
    assert len(errors) == 5
    assert any("radius" in line for line in errors)
    assert any("'abc'" in line for line in errors)
    assert any("hexagon" in line for line in errors)
    assert any("not supported" in line for line in errors)
    print(f"✓ {len(errors)} errors reported without crashing")

    assert lines.count("Shape added.") == 1
    assert [shape.kind for shape in catalog] == [ShapeKind.SQUARE]
    print("✓ Session continued and accepted the valid shape")


def test_abandoned_command_lines_read_as_choices():
    """After an error, leftover lines of the failed command are menu input."""
    catalog, lines = run_session("1\nhexagon\n0 0\n5\n7\n")

    assert len(catalog) == 0
    assert sum(line.startswith("Error: ") for line in lines) == 1
    assert lines.count("Invalid choice.") == 2


def test_end_of_input_ends_session():
    catalog, lines = run_session("1\ncircle\n0 0\n")
    assert len(catalog) == 0
    assert "Shape added." not in lines

    catalog, lines = run_session("")
    assert lines[-1] == "7. Exit"


def test_session_logs_structured_events(caplog):
    script = "1\ncircle\n0 0\n5\n3\ncircle\n1\nblob\n7\n"
    with caplog.at_level(logging.INFO, logger=LOGGER_NAME):
        run_session(script, level=logging.INFO)

    entries = [json.loads(record.getMessage()) for record in caplog.records
               if record.name == LOGGER_NAME]
    events = [entry["event"] for entry in entries]

    assert events[0] == LogEvent.SESSION_STARTED.value
    assert events[-1] == LogEvent.SESSION_ENDED.value
    assert LogEvent.SHAPE_ADDED.value in events
    assert LogEvent.SHAPES_REMOVED_BY_TYPE.value in events

    rejected = [e for e in entries if e["event"] == LogEvent.INPUT_REJECTED.value]
    assert len(rejected) == 1
    assert rejected[0]["level"] == "WARNING"
    assert rejected[0]["exception"]["type"] == "InvalidArgumentError"

    added = next(e for e in entries if e["event"] == LogEvent.SHAPE_ADDED.value)
    assert added["metadata"]["dimensions"] == {"radius": 5.0}
    assert added["component"] == "session"


def test_cli_main_with_config(tmp_path, monkeypatch, capsys):
    print("\n" + "=" * 60)
    print("TEST: CLI entry point")
    print("=" * 60)

    config = tmp_path / "session.yaml"
    config.write_text(
        "session_name: cli\n"
        "shapes:\n"
        "  - {kind: circle, origin: [0, 0], parameters: [5]}\n"
        "  - {kind: rectangle, origin: [1, 1], parameters: [2, 2]}\n"
        "  - {kind: square, origin: [10, 10], parameters: [3]}\n"
    )
    monkeypatch.setattr(sys, "stdin", io.StringIO("4\n3\n6\n0 0\n7\n"))

    cli_main(["--config", str(config), "--log-level", "critical"])
    lines = capsys.readouterr().out.splitlines()

    by_stamp = [line.split(" - ")[0] for line in lines if " - " in line]
    assert by_stamp == ["CIRCLE", "RECTANGLE", "SQUARE"]
    assert "RECTANGLE is on top." in lines
    print("✓ Seeded session sorted by timestamp and answered on-top-of")


def test_cli_main_config_error(tmp_path, capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli_main(["--config", str(tmp_path / "missing.yaml")])
    assert excinfo.value.code == 1
    assert "Error: Config file not found" in capsys.readouterr().err


def test_cli_main_null_config_value(tmp_path, capsys):
    config = tmp_path / "session.yaml"
    config.write_text("shapes:\n  - {kind: circle, origin: [null, 0], parameters: [1]}\n")

    with pytest.raises(SystemExit) as excinfo:
        cli_main(["--config", str(config)])
    assert excinfo.value.code == 1
    assert "Error: Invalid value" in capsys.readouterr().err


def main():
    """Run the tests that need no pytest fixtures."""
    print("\n💬 easel_cli - Session Tests")
    print("=" * 60)

    test_token_reader()
    test_menu()
    test_end_to_end_session()
    test_deletions()
    test_invalid_input_keeps_session_running()
    test_abandoned_command_lines_read_as_choices()
    test_end_of_input_ends_session()

    print("\n" + "=" * 60)
    print("✅ ALL SESSION TESTS PASSED!")
    print("(run with pytest for the logging and CLI tests)")
    print("=" * 60)


if __name__ == "__main__":
    main()
