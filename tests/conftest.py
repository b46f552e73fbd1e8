"""Shared fixtures for the resolver and attribution tests."""

from pathlib import Path

import pytest
from fakes import FakeProvider, make_index

from copyko.module_index import ModuleIndex
from copyko.module_info import ModuleInfo


@pytest.fixture
def diamond() -> tuple[ModuleIndex, FakeProvider]:
    """A and B both depend on C; C depends on D."""
    metadata: dict[str, ModuleInfo | None] = {
        "A": ModuleInfo(depends=["C"], firmware=["a.fw"]),
        "B": ModuleInfo(depends=["C"]),
        "C": ModuleInfo(depends=["D"], firmware=["c.fw"]),
        "D": ModuleInfo(depends=[], firmware=["c.fw", "sub/d.fw"]),
    }
    return make_index(Path("/mods"), list(metadata)), FakeProvider(metadata)
