"""Data model for a module selected for staging."""

from dataclasses import dataclass, field


@dataclass
class ResolvedModule:
    """A module in the resolved set and what is known about it."""

    name: str
    path: str  # relative path, as stored in the ModuleIndex
    dependencies: list[str] = field(default_factory=list)
    requested_directly: bool = False
    required_by: set[str] = field(default_factory=set)  # set by the attribution pass
