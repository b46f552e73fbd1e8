"""Reporting on resolved modules: verbose attribution text and a JSON summary."""

import hashlib
import json
import time
from pathlib import Path
from typing import Any

from copyko.attribution_tracker import autoinstalled, redundant_requests
from copyko.resolution_result import ResolutionResult

OMIT_HINT = (
    "You can omit dependency modules because they are autocopied by other modules."
)


def format_attribution(result: ResolutionResult) -> list[str]:
    """Render the attribution pass as human readable lines."""
    lines = [
        f"Module {m.name} is pulled in as a dependency of {_names(m.required_by)}"
        for m in autoinstalled(result)
    ]
    redundant = redundant_requests(result)
    lines.extend(
        f"Module {m.name} is dependency for {_names(m.required_by)}" for m in redundant
    )
    if redundant:
        lines.append(OMIT_HINT)
    return lines


def _names(names: set[str]) -> str:
    return " ".join(sorted(names))


def resolution_settings(config: dict[str, Any]) -> dict[str, Any]:
    """Pick the settings that change which modules and firmware get selected."""
    return {
        "suffixes": sorted(config["modules"]["suffixes"]),
        "modinfo": config["modules"]["modinfo"],
        "max_depth": config["attribution"]["max_depth"],
    }


def settings_hash(settings: dict[str, Any]) -> str:
    """Stable SHA-256 of the resolution settings."""
    canonical = json.dumps(settings, sort_keys=True)
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class ResolutionReport:
    """Collects a resolution result and writes it as a JSON document."""

    def __init__(self, config: dict[str, Any]) -> None:
        """Initialize the report with the configuration the run used."""
        self.settings = resolution_settings(config)
        self.result: ResolutionResult | None = None
        self.start_time = time.time()

    def set_result(self, result: ResolutionResult) -> None:
        self.result = result

    def to_dict(self) -> dict[str, Any]:
        """Build the report structure; lists are sorted for stable output."""
        result = self.result or ResolutionResult()
        return {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "settings": self.settings,
                "settings_hash": settings_hash(self.settings),
                "total_modules": len(result.modules),
                "total_firmware": len(result.firmware),
            },
            "modules": [
                {
                    "name": m.name,
                    "path": m.path,
                    "dependencies": m.dependencies,
                    "requested_directly": m.requested_directly,
                    "required_by": sorted(m.required_by),
                }
                for m in result.sorted_modules()
            ],
            "firmware": sorted(result.firmware),
            "missing": sorted(result.missing),
            "failed": sorted(result.failed),
        }

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        Path(path).write_text(json.dumps(self.to_dict(), indent=2), encoding="utf-8")
