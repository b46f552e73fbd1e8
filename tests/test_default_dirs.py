"""Tests for the default module and firmware locations."""

from pathlib import Path
from unittest.mock import patch

import pytest

from copyko.default_dirs import default_source_dir, firmware_dir_for


def test_default_source_dir_uses_kernel_release() -> None:
    """Verify that the running kernel's module tree is the default."""
    with patch("copyko.default_dirs.platform.release", return_value="6.1.0-18-amd64"):
        assert default_source_dir() == Path("/lib/modules/6.1.0-18-amd64")


def test_unknown_release_is_fatal() -> None:
    """Verify that an undeterminable release ends the run."""
    with (
        patch("copyko.default_dirs.platform.release", return_value=""),
        pytest.raises(SystemExit, match="--from"),
    ):
        default_source_dir()


def test_firmware_dir_for() -> None:
    """Verify that firmware sits two levels above the modules tree."""
    assert firmware_dir_for(Path("/lib/modules/6.1.0")) == Path("/lib/firmware")
    assert firmware_dir_for(Path("/tmp/iso/lib/modules/6.1.0")) == Path(
        "/tmp/iso/lib/firmware"
    )
    assert firmware_dir_for(Path("dest")) == Path("firmware")
