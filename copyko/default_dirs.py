"""Default locations of module and firmware trees."""

import platform
from pathlib import Path

MODULES_ROOT = Path("/lib/modules")


def default_source_dir() -> Path:
    """Return the module tree of the running kernel, /lib/modules/<release>."""
    release = platform.release()
    if not release:
        msg = "Can't determine the running kernel release, use --from"
        raise SystemExit(msg)
    return MODULES_ROOT / release


def firmware_dir_for(modules_dir: Path) -> Path:
    """Firmware lives next to the modules tree: /lib/modules/x -> /lib/firmware."""
    return modules_dir.parent.parent / "firmware"
