"""Logic for building an index of kernel modules from a source tree."""

import logging
import os
from collections.abc import Sequence
from pathlib import Path

from copyko.module_index import ModuleIndex

logger = logging.getLogger(__name__)

DEFAULT_SUFFIXES = (".ko",)


def module_name_for(filename: str, suffixes: Sequence[str]) -> str | None:
    """Strip the longest matching module suffix from a file name."""
    for suffix in sorted(suffixes, key=len, reverse=True):
        if filename.endswith(suffix) and len(filename) > len(suffix):
            return filename[: -len(suffix)]
    return None


def _skip_unreadable(err: OSError) -> None:
    # Partial indexes are fine, missing modules get reported one by one later.
    logger.debug("Skipping unreadable directory %s: %s", err.filename, err)


def build_index(
    source_root: Path,
    suffixes: Sequence[str] = DEFAULT_SUFFIXES,
) -> ModuleIndex:
    """Index every module file under source_root by module name.

    Directories and files are visited in sorted order, so when two files share
    a module name the first one found is kept deterministically.
    """
    source_root = Path(source_root)
    name_to_path: dict[str, str] = {}
    for dirpath, dirnames, filenames in os.walk(source_root, onerror=_skip_unreadable):
        dirnames.sort()
        for filename in sorted(filenames):
            name = module_name_for(filename, suffixes)
            if name is None:
                continue
            full_path = Path(dirpath) / filename
            if not full_path.is_file():
                continue
            rel_path = full_path.relative_to(source_root).as_posix()
            existing = name_to_path.get(name)
            if existing is not None:
                logger.warning(
                    "There is more than one module named %s: keeping %s, ignoring %s",
                    name,
                    existing,
                    rel_path,
                )
                continue
            name_to_path[name] = rel_path
    logger.info("Indexed %d modules under %s", len(name_to_path), source_root)
    return ModuleIndex(source_root, name_to_path)
