"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field

from objectmeta import GameObject, ObjectMetadata, get_build_mode


@pytest.fixture(autouse=True)
def authoring_build(monkeypatch):
    """Every test starts from a fresh authoring build."""
    monkeypatch.delenv("OBJECTMETA_BUILD_MODE", raising=False)
    get_build_mode.cache_clear()
    yield
    get_build_mode.cache_clear()


@pytest.fixture
def runtime_build(monkeypatch):
    """Simulate a stripped runtime build for the duration of a test."""
    monkeypatch.setenv("OBJECTMETA_BUILD_MODE", "runtime")
    get_build_mode.cache_clear()


@dataclass
class FixtureEnemy(GameObject):
    health: int = 100
    inventory: list[str] = field(default_factory=list)


@pytest.fixture
def enemy_cls():
    return FixtureEnemy


@pytest.fixture
def blueprint():
    """Enemy blueprint with some mutable state."""
    return FixtureEnemy(
        name="Blueprint",
        type_name="Test::Enemy",
        variables={"speed": 200, "path": [1, 2, 3]},
        inventory=["sword"],
    )


@pytest.fixture
def metadata(blueprint):
    """Enemy metadata in the "Test::" namespace."""
    return ObjectMetadata(
        "Test::",
        "Test::Enemy",
        "Enemy",
        "A hostile object",
        "res/enemy24.png",
        blueprint=blueprint,
    )


@pytest.fixture
def global_metadata(blueprint):
    """Metadata declared without namespace."""
    return ObjectMetadata("", "Enemy", "Enemy", "A hostile object", "res/enemy24.png", blueprint)
