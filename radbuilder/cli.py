"""Command line entry point: turns a saved project into generated source."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence

from radbuilder.codegen import generate_code
from radbuilder.project import Project
from radbuilder.widget import Vec2

_INSPECTOR_WIDTH = 260.0
_PALETTE_WIDTH = 220.0
_MENUBAR_HEIGHT = 40.0
_SIDE_PADDING = 16.0


def initial_inner_size() -> Vec2:
    """Window size that fits the default canvas, palette and inspector."""
    canvas = Project().canvas_size
    width = canvas.x + _INSPECTOR_WIDTH + _PALETTE_WIDTH + _SIDE_PADDING
    height = canvas.y + _MENUBAR_HEIGHT
    return Vec2(width, height)


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="radbuilder",
        description="Generate UI source code from a builder project.",
    )
    parser.add_argument(
        "project",
        nargs="?",
        help="project JSON file ('-' for standard input); an empty project if omitted",
    )
    parser.add_argument(
        "-o", "--output", help="write the result to this file instead of standard output"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--export-json",
        action="store_true",
        help="print the project as JSON instead of generating code",
    )
    mode.add_argument(
        "--window-size",
        action="store_true",
        help="print the initial designer window size as WIDTHxHEIGHT",
    )
    return parser


def _load(source: str | None) -> Project:
    if source is None:
        return Project()
    if source == "-":
        return Project.from_json(sys.stdin.read())
    return Project.from_json(Path(source).read_text(encoding="utf-8"))


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; returns the process exit status."""
    args = _parser().parse_args(argv)

    if args.window_size:
        size = initial_inner_size()
        result = f"{size.x:g}x{size.y:g}\n"
    else:
        try:
            project = _load(args.project)
        except (OSError, ValueError) as exc:
            print(f"radbuilder: cannot load project: {exc}", file=sys.stderr)
            return 1
        result = project.to_json() + "\n" if args.export_json else generate_code(project)

    if args.output:
        try:
            Path(args.output).write_text(result, encoding="utf-8")
        except OSError as exc:
            print(f"radbuilder: cannot write output: {exc}", file=sys.stderr)
            return 1
    else:
        sys.stdout.write(result)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())