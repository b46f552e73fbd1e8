"""Read-only index of module names to their files under a source root."""

from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType


class ModuleIndex:
    """Maps module names to paths relative to the module source root."""

    def __init__(self, root: Path, name_to_path: Mapping[str, str]) -> None:
        self.root = Path(root)
        self._entries = MappingProxyType(dict(name_to_path))

    def lookup(self, name: str) -> str | None:
        """Return the relative path of a module, or None if it is not indexed."""
        return self._entries.get(name)

    def path_for(self, name: str) -> Path:
        """Return the full path of an indexed module."""
        return self.root / self._entries[name]

    def names(self) -> list[str]:
        return sorted(self._entries)

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)
