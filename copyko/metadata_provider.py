"""Module metadata sources: the provider protocol and the modinfo backend."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol

from copyko.metadata_error import MetadataError
from copyko.module_info import ModuleInfo
from copyko.parse_modinfo import parse_modinfo

logger = logging.getLogger(__name__)


class MetadataProvider(Protocol):
    """Anything that can report the dependencies and firmware of a module file."""

    def query(self, path: Path) -> ModuleInfo: ...


class ModinfoProvider:
    """Reads module metadata by running the modinfo tool once per module."""

    def __init__(self, command: str = "modinfo", timeout: float | None = None) -> None:
        self.command = command
        self.timeout = timeout

    def query(self, path: Path) -> ModuleInfo:
        """Run ``<command> <path>`` and parse its output.

        Free text fields such as author may hold bytes that are not UTF-8;
        they are carried through as surrogate escapes instead of failing.

        A command that cannot be started at all makes every further query
        pointless, so that case exits the program instead of raising
        MetadataError.
        """
        cmd = [self.command, str(path)]
        logger.debug("Running: %s", " ".join(cmd))
        try:
            proc = subprocess.run(
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                encoding="utf-8",
                errors="surrogateescape",
                check=True,
                timeout=self.timeout,
            )
        except (FileNotFoundError, PermissionError) as e:
            msg = f"Can't run {self.command}: {e}"
            raise SystemExit(msg) from e
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            raise MetadataError(
                path, f"{self.command} exited with status {e.returncode}: {stderr}"
            ) from e
        except subprocess.TimeoutExpired as e:
            raise MetadataError(
                path, f"{self.command} timed out after {self.timeout}s"
            ) from e
        return parse_modinfo(proc.stdout.splitlines(), source=path)
