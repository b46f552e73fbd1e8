"""Orchestration logic for resolving and copying kernel modules."""

import argparse
import logging
from pathlib import Path
from typing import Any

from copyko.attribution_tracker import attribute
from copyko.build_index import build_index, module_name_for
from copyko.default_dirs import default_source_dir, firmware_dir_for
from copyko.dependency_resolver import DependencyResolver
from copyko.materializer import Materializer
from copyko.metadata_provider import ModinfoProvider
from copyko.resolution_report import ResolutionReport, format_attribution
from copyko.resolution_result import ResolutionResult

logger = logging.getLogger(__name__)


def normalize_requested(names: list[str], suffixes: list[str]) -> list[str]:
    """Deduplicate and sort requested names, dropping a typed module suffix."""
    return sorted({module_name_for(n, suffixes) or n for n in names})


def run_copy(args: argparse.Namespace, config: dict[str, Any]) -> int:
    """Execute the full resolve-and-copy pipeline."""
    module_cfg = config["modules"]
    srcdir: Path = args.srcdir or default_source_dir()
    dstdir: Path = args.dest
    fwsrc: Path = args.fwsrc or firmware_dir_for(srcdir)
    fwdst: Path = args.fwdst or firmware_dir_for(dstdir)

    if not srcdir.is_dir():
        msg = f"Source directory {srcdir} does not exist"
        raise SystemExit(msg)

    if args.verbose:
        print(f"Source directory is {srcdir}")
        print(f"Source firmware directory is {fwsrc}")
        print(f"Destination directory is {dstdir}")
        print(f"Destination firmware directory is {fwdst}")

    requested = normalize_requested(args.modules, module_cfg["suffixes"])
    index = build_index(srcdir, module_cfg["suffixes"])

    provider = ModinfoProvider(module_cfg["modinfo"], module_cfg["query_timeout"])
    result = DependencyResolver(index, provider).resolve(requested)

    materializer = Materializer(
        link=args.link, dry_run=args.dry_run, verbose=args.verbose
    )
    copied = materializer.copy_modules(result, srcdir, dstdir)
    fw_copied = materializer.copy_firmware(result, fwsrc, fwdst)
    logger.info(
        "Placed %d of %d modules and %d of %d firmware files",
        copied,
        len(result.modules),
        fw_copied,
        len(result.firmware),
    )

    if args.verbose or args.report:
        attribute(requested, result, config["attribution"]["max_depth"])
    if args.verbose:
        for line in format_attribution(result):
            print(line)
    if args.report:
        _write_report(args.report, config, result)
    return 0


def _write_report(path: str, config: dict[str, Any], result: ResolutionResult) -> None:
    report = ResolutionReport(config)
    report.set_result(result)
    report.generate_report(path)
    print(f"Resolution report written to {path}")
