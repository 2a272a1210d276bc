# Copyright (c) 2026 Hueblend
# SPDX-License-Identifier: MIT

"""
Command-line interface.

    hueblend "#ff0000" "#00ff00" -m 5
    hueblend "#ff0000" "#00ff00" -m 5 -f css -w -o palette.css
    hueblend "#ff0000" "#00ff00" --distance

``main`` is the only place that turns errors into exit codes; everything
below it raises.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

import pydantic as pc

from hueblend import __version__
from hueblend.blend import blend, blend_unique
from hueblend.config import BlendSettings
from hueblend.runtime.serializers import (
    OutputFormat,
    to_distance_report,
    to_palette_text,
    write_palette,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_BAD_INPUT = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hueblend",
        description="Blend two colors into a sequence of intermediate colors.",
    )
    parser.add_argument("first_color", nargs="?", help="The first color in hex format")
    parser.add_argument("second_color", nargs="?", help="Second color in hex format")
    parser.add_argument(
        "-m", "--midpoints", type=int, help="Number of midpoints (default: 10)"
    )
    parser.add_argument(
        "-u",
        "--unique",
        action="store_true",
        default=None,
        help="Collapse adjacent duplicate colors",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in OutputFormat],
        help="Output format (default: lines)",
    )
    parser.add_argument(
        "-o", "--output", help="Output file path (default: output.txt)"
    )
    parser.add_argument(
        "-w",
        "--write",
        action="store_true",
        default=None,
        help="Write the result to the output file instead of printing it",
    )
    parser.add_argument(
        "-j", "--workers", type=int, help="Evaluate blend steps on N threads"
    )
    parser.add_argument(
        "-d",
        "--distance",
        action="store_true",
        help="Report the distance between the two colors instead of blending",
    )
    parser.add_argument("--config", help="TOML configuration file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"hueblend {__version__}"
    )
    return parser


def _configure_logging(level: str) -> None:
    # basicConfig is a no-op once the root logger has handlers
    logging.basicConfig(
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger().setLevel(level)


def _describe_validation_error(exc: pc.ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


def _fail(message: str) -> None:
    print(f"hueblend: error: {message}", file=sys.stderr)


def _run(args: argparse.Namespace) -> int:
    settings = BlendSettings.load(
        args.config,
        start=args.first_color,
        end=args.second_color,
        midpoints=args.midpoints,
        unique=args.unique,
        format=args.format,
        output=args.output,
        write=args.write,
        workers=args.workers,
        log_level="DEBUG" if args.verbose else None,
    )
    _configure_logging(settings.log_level)
    logger.debug("Settings: %s", settings.model_dump())

    start, end = settings.start_color, settings.end_color
    if args.distance:
        text = to_distance_report(start, end, format=settings.format)
    else:
        fn = blend_unique if settings.unique else blend
        colors = fn(start, end, settings.midpoints, workers=settings.workers)
        logger.debug(
            "Blended %s -> %s into %d colors", start, end, len(colors)
        )
        text = to_palette_text(
            colors,
            format=settings.format,
            midpoints=settings.midpoints,
            unique=settings.unique,
        )

    if settings.write:
        path = write_palette(settings.output, text)
        print(f"Data written successfully to {path}.")
    else:
        print(text)
    return EXIT_OK


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)
    _configure_logging("DEBUG" if args.verbose else "WARNING")
    try:
        return _run(args)
    except pc.ValidationError as exc:
        logger.debug("Invalid settings", exc_info=True)
        _fail(_describe_validation_error(exc))
        return EXIT_BAD_INPUT
    except ValueError as exc:
        # ColorError and unsupported format combinations
        logger.debug("Invalid input", exc_info=True)
        _fail(str(exc))
        return EXIT_BAD_INPUT
    except OSError as exc:
        logger.debug("Output failed", exc_info=True)
        _fail(str(exc))
        return EXIT_IO_ERROR


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
