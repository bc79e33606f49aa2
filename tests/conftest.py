"""Pytest configuration for hooks-cli tests."""

from pathlib import Path

import pytest
from hooks_cli.context import StaticContextResolver
from hooks_cli.events import EventBus
from hooks_cli.store import SlotStore


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "data"


@pytest.fixture
def bus() -> EventBus:
    return EventBus()


@pytest.fixture
def store(data_dir: Path, bus: EventBus) -> SlotStore:
    """Store bound to a fixed context so no git calls are made."""
    return SlotStore(base_dir=data_dir, resolver=StaticContextResolver("/work/repo"), event_bus=bus)


@pytest.fixture
def files(tmp_path: Path) -> list[str]:
    """Three real, readable files."""
    root = tmp_path / "src"
    root.mkdir()
    paths = []
    for name in ("a.py", "b.py", "c.py"):
        path = root / name
        path.write_text(f"# {name}\n")
        paths.append(str(path))
    return paths
