"""CLI argument parsing and main entry point."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

from simple_masonry.config import ConfigLoader, LayoutOptions, validate_options
from simple_masonry.errors import LayoutError
from simple_masonry.image_io import read_dimensions
from simple_masonry.layout import generate_rectangles, layout_height
from simple_masonry.logging_utils import logger, set_verbosity
from simple_masonry.version import resolve_project_version

if TYPE_CHECKING:  # pragma: no cover
    from collections.abc import Sequence

# Option names that command-line flags may override
_OVERRIDE_KEYS = (
    "columns",
    "width",
    "gutter",
    "gutter_x",
    "gutter_y",
    "max_height",
    "collapsing",
    "centering",
)


def build_arg_parser() -> argparse.ArgumentParser:
    """Construct the argument parser for the command-line interface."""
    p = argparse.ArgumentParser(
        prog="simple-masonry",
        description=(
            "Compute a multi-column masonry layout for images or for "
            "dimensions listed in a TOML file."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "simple-masonry --columns 3 --width 900 --gutter 10 "
            "--image a.jpg --image b.png\n"
            "simple-masonry --config layout.toml --centering "
            "--out layout.json\n"
        ),
    )
    p.add_argument(
        "--version", action="version",
        version=f"%(prog)s {resolve_project_version()}")

    inputs = p.add_argument_group("inputs")
    inputs.add_argument(
        "--config", type=Path, default=None,
        help="TOML file with layout options and [[dimensions]] entries")
    inputs.add_argument(
        "--image", dest="images", type=Path, action="append", default=[],
        help="Image to lay out; may be repeated. Sizes are read from file.")

    layout = p.add_argument_group("layout")
    layout.add_argument(
        "--columns", type=int, help="Number of columns",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--width", type=float, help="Container width",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--gutter", type=float,
        help="Spacing between items on both axes",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--gutter-x", type=float, help="Horizontal spacing between items",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--gutter-y", type=float, help="Vertical spacing between items",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--max-height", type=float, help="Maximum item height",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--no-collapsing", dest="collapsing", action="store_false",
        help="Use a strict row-major grid instead of masonry packing",
        default=argparse.SUPPRESS)
    layout.add_argument(
        "--centering", action="store_true",
        help="Center a final row that has fewer items than columns",
        default=argparse.SUPPRESS)

    output = p.add_argument_group("output")
    output.add_argument(
        "--out", type=Path, default=None,
        help="Write the layout JSON here instead of stdout")
    output.add_argument(
        "--verbose", action="store_true", help="Enable debug logging")
    return p


def _collect_overrides(args: argparse.Namespace) -> dict[str, Any]:
    """Return only the layout options given explicitly on the command line."""
    return {key: getattr(args, key) for key in _OVERRIDE_KEYS
            if hasattr(args, key)}


def build_options(args: argparse.Namespace) -> LayoutOptions:
    """Merge the config file, command-line flags, and image sizes."""
    overrides = _collect_overrides(args)
    if args.config is not None:
        options = ConfigLoader.load(args.config, **overrides)
    else:
        options = validate_options(overrides)

    if args.images:
        dimensions = [*options.dimensions, *read_dimensions(args.images)]
        options = validate_options(options, dimensions=dimensions)
    return options


def run_from_args(args: argparse.Namespace) -> dict[str, Any]:
    """Compute the layout described by ``args`` and return it as JSON data."""
    options = build_options(args)
    logger.info(
        "Laying out %d item(s) in %d column(s)",
        len(options.dimensions), options.columns,
    )
    rectangles = generate_rectangles(options)
    return {
        "height": layout_height(rectangles),
        "rectangles": [rectangle.to_dict() for rectangle in rectangles],
    }


def main(argv: Sequence[str] | None = None) -> int:
    """Parse command-line arguments and print or save the layout."""
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    set_verbosity(verbose=args.verbose)
    if args.config is None and not args.images:
        parser.error("provide --config and/or at least one --image")

    try:
        payload = run_from_args(args)
    except (LayoutError, OSError) as exc:
        parser.error(str(exc))

    text = json.dumps(payload, indent=2)
    if args.out is None:
        sys.stdout.write(text + "\n")
        return 0

    try:
        args.out.write_text(text + "\n", encoding="utf-8")
    except OSError as exc:
        parser.error(f"cannot write layout to {args.out}: {exc}")
    logger.info("Layout written to %s", args.out)
    return 0


__all__ = ["build_arg_parser", "build_options", "main", "run_from_args"]
