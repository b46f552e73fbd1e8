"""Command line front end: copy kernel modules and their dependencies."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from copyko import __version__
from copyko.load_config import load_config
from copyko.run_copy import run_copy

if TYPE_CHECKING:
    from collections.abc import Sequence

LOG_FORMAT = "copyko: %(levelname)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for ``copyko [OPTION] <module>... <dest>``."""
    ap = argparse.ArgumentParser(
        prog="copyko",
        description=(
            "Copy kernel modules (ko-files) and their dependencies to <dest> "
            "directory. Useful when creating a Live CD or a minimal initramfs."
        ),
    )
    ap.add_argument(
        "modules",
        nargs="+",
        metavar="module",
        help="Name of a module to copy, e.g. e1000e",
    )
    ap.add_argument("dest", type=Path, help="Directory to store modules")
    ap.add_argument(
        "-f",
        "--from",
        dest="srcdir",
        type=Path,
        metavar="FROM",
        help="Directory to search kernel modules (default: /lib/modules/<release>)",
    )
    ap.add_argument(
        "--fwsrc",
        type=Path,
        metavar="FROM",
        help="Directory to search firmware (default: <from>/../../firmware)",
    )
    ap.add_argument(
        "--fwdst",
        type=Path,
        metavar="TO",
        help="Directory to store firmware (default: <dest>/../../firmware)",
    )
    ap.add_argument(
        "-l",
        "--link",
        action="store_true",
        help="Try to make hard links instead of copying files",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Explain what is being done",
    )
    ap.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Resolve and print what would be copied without touching files",
    )
    ap.add_argument("-c", "--config", help="Path to YAML configuration file")
    ap.add_argument("--report", help="Write a JSON resolution report to this path")
    ap.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return ap


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse arguments; options may appear between module names."""
    return build_parser().parse_intermixed_args(argv)


def configure_logging(level: str, *, verbose: bool = False) -> None:
    """Send diagnostics to stderr at the configured level."""
    resolved = logging.INFO if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING
    logging.basicConfig(level=resolved, format=LOG_FORMAT)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the copy process."""
    args = parse_args(argv)
    config = load_config(args.config)
    configure_logging(config["logging"]["level"], verbose=args.verbose)
    return run_copy(args, config)
