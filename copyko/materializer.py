"""Placing resolved module and firmware files into destination trees."""

import logging
import os
import shutil
from pathlib import Path, PurePosixPath

from copyko.resolution_result import ResolutionResult

logger = logging.getLogger(__name__)


class Materializer:
    """Copies (or hard links) files, creating destination directories as needed.

    Failures are logged per file and never stop the caller from placing the
    remaining files.
    """

    def __init__(
        self, *, link: bool = False, dry_run: bool = False, verbose: bool = False
    ) -> None:
        self.link = link
        self.dry_run = dry_run
        self.verbose = verbose
        self.link_failed = False

    def place(self, src: Path, dst: Path) -> bool:
        """Place src at dst. Returns True if dst holds the file afterwards."""
        if self.verbose or self.dry_run:
            print(f"{src} => {dst}")
        if self.dry_run:
            return True

        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.error("Can't create directory %s: %s", dst.parent, e)
            return False

        if self.link and self._try_link(src, dst):
            return True

        if dst.exists():
            return True
        try:
            shutil.copy(src, dst)
        except OSError as e:
            logger.error("Can't copy %s to %s: %s", src, dst, e)
            return False
        return True

    def _try_link(self, src: Path, dst: Path) -> bool:
        try:
            os.link(src, dst)
        except FileExistsError:
            return True
        except OSError as e:
            if not self.link_failed:
                logger.warning(
                    "Can't make hard link for file %s: %s. Copying files instead.",
                    src,
                    e,
                )
                self.link_failed = True
            return False
        return True

    def copy_modules(
        self, result: ResolutionResult, source_root: Path, dest_root: Path
    ) -> int:
        """Place every resolved module under dest_root, keeping relative paths."""
        placed = 0
        for module in result.sorted_modules():
            if self.place(source_root / module.path, dest_root / module.path):
                placed += 1
        return placed

    def copy_firmware(
        self, result: ResolutionResult, firmware_source: Path, firmware_dest: Path
    ) -> int:
        """Place every referenced firmware file under firmware_dest."""
        placed = 0
        for name in sorted(result.firmware):
            if not is_safe_relative(name):
                logger.warning(
                    "Ignoring firmware reference outside firmware root: %s", name
                )
                continue
            if self.place(firmware_source / name, firmware_dest / name):
                placed += 1
        return placed


def is_safe_relative(name: str) -> bool:
    """Check that a firmware reference stays inside the directory it is joined to."""
    path = PurePosixPath(name)
    return bool(name) and not path.is_absolute() and ".." not in path.parts
