"""Logic for computing the dependency closure of requested kernel modules."""

import logging
from collections.abc import Iterable
from enum import Enum

from copyko.metadata_error import MetadataError
from copyko.metadata_provider import MetadataProvider
from copyko.module_index import ModuleIndex
from copyko.resolution_result import ResolutionResult
from copyko.resolved_module import ResolvedModule

logger = logging.getLogger(__name__)


class ModuleState(Enum):
    """Resolution state of a module name within one resolve() call."""

    IN_PROGRESS = "in_progress"
    RESOLVED = "resolved"
    MISSING = "missing"
    FAILED = "failed"


class DependencyResolver:
    """Walks module dependencies depth-first, querying each module only once."""

    def __init__(self, index: ModuleIndex, provider: MetadataProvider) -> None:
        """Initialize the resolver with the module index and a metadata source."""
        self.index = index
        self.provider = provider

    def resolve(self, requested_names: Iterable[str]) -> ResolutionResult:
        """Resolve the requested modules and everything they depend on.

        Names missing from the index, and modules whose metadata cannot be
        read, are reported and left out; they never stop the rest of the run.
        """
        requested = sorted(set(requested_names))
        result = ResolutionResult()
        states: dict[str, ModuleState] = {}

        for name in requested:
            self._walk(name, states, result)

        for name in requested:
            module = result.modules.get(name)
            if module is not None:
                module.requested_directly = True
        return result

    def _walk(
        self,
        root: str,
        states: dict[str, ModuleState],
        result: ResolutionResult,
    ) -> None:
        # Each stack entry is (name, module that required it).
        stack: list[tuple[str, str | None]] = [(root, None)]
        while stack:
            name, required_by = stack.pop()
            if name in states:
                continue
            rel_path = self.index.lookup(name)
            if rel_path is None:
                states[name] = ModuleState.MISSING
                result.missing.add(name)
                if required_by is None:
                    logger.warning("%s not found", name)
                else:
                    logger.warning("%s not found (required by %s)", name, required_by)
                continue

            states[name] = ModuleState.IN_PROGRESS
            try:
                info = self.provider.query(self.index.path_for(name))
            except MetadataError as e:
                states[name] = ModuleState.FAILED
                result.failed.add(name)
                logger.error("Can't read module information for %s: %s", name, e)
                continue

            result.modules[name] = ResolvedModule(
                name=name,
                path=rel_path,
                dependencies=list(info.depends),
            )
            result.firmware.update(info.firmware)
            states[name] = ModuleState.RESOLVED

            # Reversed so dependencies are visited in declaration order.
            stack.extend(
                (dep, name) for dep in reversed(info.depends) if dep not in states
            )


def resolve(
    requested_names: Iterable[str],
    index: ModuleIndex,
    provider: MetadataProvider,
) -> ResolutionResult:
    """Resolve requested_names against index using provider for metadata."""
    return DependencyResolver(index, provider).resolve(requested_names)
