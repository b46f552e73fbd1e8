"""Data model for the metadata a module declares about itself."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ModuleInfo:
    """Dependencies and firmware references read from a module."""

    depends: list[str] = field(default_factory=list)
    firmware: list[str] = field(default_factory=list)
