"""Attribution of resolved modules to the requested modules that pull them in."""

import logging
from collections import deque
from collections.abc import Iterable

from copyko.resolution_result import ResolutionResult
from copyko.resolved_module import ResolvedModule

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 1024


def attribute(
    requested_names: Iterable[str],
    result: ResolutionResult,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> dict[str, set[str]]:
    """Record in each module's required_by which requested modules need it.

    Works only on already resolved data. Each requested module's closure is
    walked breadth-first with its own visited set, so cyclic dependency
    metadata is handled and every module is reached at its shortest depth.
    Modules deeper than max_depth are reported and left unmarked.
    """
    for root in sorted(set(requested_names)):
        module = result.modules.get(root)
        if module is None:
            continue
        _mark_closure(root, module, result, max_depth)
    return {name: set(m.required_by) for name, m in result.modules.items()}


def _mark_closure(
    root: str,
    module: ResolvedModule,
    result: ResolutionResult,
    max_depth: int,
) -> None:
    visited = {root}
    queue = deque((dep, 1) for dep in module.dependencies)
    while queue:
        name, depth = queue.popleft()
        if name in visited:
            continue
        if depth > max_depth:
            # Breadth-first order: everything still queued is at least this deep.
            logger.warning("Dependency tree is too deep (%s, pulled by %s)", name, root)
            return
        visited.add(name)
        dep_module = result.modules.get(name)
        if dep_module is None:
            continue
        dep_module.required_by.add(root)
        queue.extend(
            (dep, depth + 1) for dep in dep_module.dependencies if dep not in visited
        )


def autoinstalled(result: ResolutionResult) -> list[ResolvedModule]:
    """Modules the user did not ask for that are pulled in as dependencies."""
    return [
        m for m in result.sorted_modules() if not m.requested_directly and m.required_by
    ]


def redundant_requests(result: ResolutionResult) -> list[ResolvedModule]:
    """Requested modules that another requested module already pulls in."""
    return [
        m for m in result.sorted_modules() if m.requested_directly and m.required_by
    ]
