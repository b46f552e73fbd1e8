"""Parsing of the line-oriented text printed by modinfo."""

from collections.abc import Iterable

from copyko.metadata_error import MetadataError
from copyko.module_info import ModuleInfo

DEPENDS_KEY = "depends:"
FIRMWARE_KEY = "firmware:"


def split_names(value: str) -> list[str]:
    """Split a comma separated list, dropping empty items."""
    return [name for name in value.split(",") if name]


def parse_modinfo(lines: Iterable[str], source: object = "<modinfo>") -> ModuleInfo:
    """Extract dependencies and firmware references from modinfo output.

    Only the first two whitespace separated tokens of each line matter: the key
    and its value. ``depends:`` must be present even when empty, ``firmware:``
    may repeat and is optional.
    """
    depends: list[str] = []
    firmware: list[str] = []
    depends_found = False
    for line in lines:
        tokens = line.split()
        if not tokens:
            continue
        key = tokens[0]
        value = tokens[1] if len(tokens) > 1 else ""
        if key == DEPENDS_KEY:
            depends.extend(split_names(value))
            depends_found = True
        elif key == FIRMWARE_KEY:
            firmware.extend(split_names(value))
    if not depends_found:
        raise MetadataError(source, f"no '{DEPENDS_KEY}' line in module information")
    return ModuleInfo(depends=depends, firmware=firmware)
