"""Tests for indexing a module source tree."""

import errno
import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from copyko.build_index import build_index, module_name_for


def _touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"\x7fELF")


def test_indexes_modules_by_stem(tmp_path: Path) -> None:
    """Verify that only module files are indexed, keyed by file stem."""
    _touch(tmp_path / "kernel/net/e1000e.ko")
    _touch(tmp_path / "kernel/fs/ext4.ko")
    _touch(tmp_path / "modules.dep")
    _touch(tmp_path / "kernel/fs/readme.txt")

    index = build_index(tmp_path)

    assert index.names() == ["e1000e", "ext4"]
    assert index.lookup("e1000e") == "kernel/net/e1000e.ko"
    assert index.path_for("ext4") == tmp_path / "kernel/fs/ext4.ko"
    assert index.lookup("modules") is None


def test_directories_named_like_modules_are_skipped(tmp_path: Path) -> None:
    """Verify that only regular files count as modules."""
    (tmp_path / "weird.ko").mkdir()
    _touch(tmp_path / "weird.ko/inner.ko")

    index = build_index(tmp_path)

    assert "weird" not in index
    assert index.lookup("inner") == "weird.ko/inner.ko"


def test_duplicate_names_keep_first(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a second module named 'net' is ignored with a warning."""
    _touch(tmp_path / "a/net.ko")
    _touch(tmp_path / "b/net.ko")

    with caplog.at_level(logging.WARNING):
        index = build_index(tmp_path)

    assert len(index) == 1
    assert index.lookup("net") == "a/net.ko"
    assert "more than one module named net" in caplog.text


def test_compressed_suffixes(tmp_path: Path) -> None:
    """Verify that the longest configured suffix is stripped."""
    _touch(tmp_path / "kernel/btrfs.ko.xz")
    _touch(tmp_path / "kernel/xor.ko")

    index = build_index(tmp_path, [".ko", ".ko.xz"])

    assert index.names() == ["btrfs", "xor"]


def test_module_name_for() -> None:
    """Verify suffix stripping on bare file names."""
    assert module_name_for("ext4.ko", [".ko"]) == "ext4"
    assert module_name_for("ext4.ko.zst", [".ko", ".ko.zst"]) == "ext4"
    assert module_name_for("ext4.ko.zst", [".ko"]) is None
    assert module_name_for(".ko", [".ko"]) is None


def test_missing_root_gives_empty_index(tmp_path: Path) -> None:
    """Verify that an unreadable tree is not an error."""
    index = build_index(tmp_path / "absent")
    assert len(index) == 0


def test_unreadable_directory_is_skipped(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that a directory denied to us only hides its own modules."""
    _touch(tmp_path / "kernel/crypto/xor.ko")
    _touch(tmp_path / "kernel/locked/secret.ko")
    _touch(tmp_path / "kernel/net/e1000e.ko")
    real_scandir = os.scandir

    def scandir_denying_locked(path: str = ".") -> object:
        if Path(path).name == "locked":
            raise PermissionError(errno.EACCES, "Permission denied", str(path))
        return real_scandir(path)

    with (
        patch("os.scandir", side_effect=scandir_denying_locked),
        caplog.at_level(logging.DEBUG, logger="copyko.build_index"),
    ):
        index = build_index(tmp_path)

    assert index.names() == ["e1000e", "xor"]
    assert "Skipping unreadable directory" in caplog.text
    assert "locked" in caplog.text
