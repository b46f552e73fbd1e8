"""Data model for the outcome of resolving a set of requested modules."""

from dataclasses import dataclass, field

from copyko.resolved_module import ResolvedModule


@dataclass
class ResolutionResult:
    """Resolved modules keyed by name plus every firmware file they reference."""

    modules: dict[str, ResolvedModule] = field(default_factory=dict)
    firmware: set[str] = field(default_factory=set)
    missing: set[str] = field(default_factory=set)  # not present in the index
    failed: set[str] = field(default_factory=set)  # metadata query failed

    def names(self) -> set[str]:
        return set(self.modules)

    def sorted_modules(self) -> list[ResolvedModule]:
        """Return the resolved modules ordered by name."""
        return [self.modules[name] for name in sorted(self.modules)]

    def __contains__(self, name: object) -> bool:
        return name in self.modules
