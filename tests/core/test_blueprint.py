"""Tests for blueprint cloning.

Critical Invariants:
- Created objects carry the requested name
- Created objects share no mutable state with the blueprint or each other
- A missing blueprint yields no object and exactly one diagnostic
"""

import logging
from dataclasses import dataclass

from objectmeta import Blueprint, GameObject, ObjectMetadata, blueprint_factory

LOGGER = "objectmeta.core.object.core"


def test_created_object_is_renamed_copy(metadata, blueprint):
    enemy = metadata.create_object("Enemy1")

    assert enemy is not None
    assert enemy is not blueprint
    assert enemy.name == "Enemy1"
    assert enemy.type_name == blueprint.type_name
    assert enemy.variables == blueprint.variables
    assert enemy.inventory == blueprint.inventory
    assert enemy.health == blueprint.health


def test_mutating_created_object_leaves_blueprint_intact(metadata, blueprint):
    """CRITICAL: Clones are deep copies.

    Why: Every instance in a scene starts from the same blueprint; aliasing
    would leak state from one instance into all others.
    """
    enemy = metadata.create_object("Enemy1")

    enemy.variables["speed"] = 0
    enemy.variables["path"].append(4)
    enemy.inventory.append("shield")
    enemy.health = 1

    assert blueprint.name == "Blueprint"
    assert blueprint.variables == {"speed": 200, "path": [1, 2, 3]}
    assert blueprint.inventory == ["sword"]
    assert blueprint.health == 100


def test_repeated_creation_independent(metadata):
    first = metadata.create_object("Enemy1")
    second = metadata.create_object("Enemy2")

    first.variables["path"].clear()

    assert second.name == "Enemy2"
    assert second.variables["path"] == [1, 2, 3]


def test_blueprint_shared_between_metadata(blueprint):
    a = ObjectMetadata("A::", "A::Enemy", "Enemy", "", "", blueprint)
    b = ObjectMetadata("B::", "B::Enemy", "Enemy", "", "", blueprint)

    assert a.create_object("One").name == "One"
    assert b.create_object("Two").name == "Two"
    assert blueprint.name == "Blueprint"


def test_missing_blueprint_logs_once(caplog):
    meta = ObjectMetadata("Test::", "Test::Ghost", "Ghost", "", "", blueprint=None)

    with caplog.at_level(logging.ERROR, logger=LOGGER):
        result = meta.create_object("Ghost1")

    assert result is None
    records = [r for r in caplog.records if r.name == LOGGER]
    assert len(records) == 1
    assert "without specifying an object as blueprint" in records[0].getMessage()
    assert "Ghost1" in records[0].getMessage()


def test_missing_blueprint_does_not_raise_on_repeat(caplog):
    create = blueprint_factory(None)

    with caplog.at_level(logging.ERROR, logger=LOGGER):
        assert create("A") is None
        assert create("B") is None

    assert len([r for r in caplog.records if r.name == LOGGER]) == 2


def test_custom_blueprint_without_game_object_base():
    """Any class with clone() and set_name() works as a blueprint."""

    class Counter:
        def __init__(self, name: str, values: list[int]) -> None:
            self.name = name
            self.values = values

        def clone(self) -> "Counter":
            return Counter(self.name, list(self.values))

        def set_name(self, name: str) -> None:
            self.name = name

    prototype = Counter("", [1])
    assert isinstance(prototype, Blueprint)

    created = blueprint_factory(prototype)("Score")

    assert created.name == "Score"
    created.values.append(2)
    assert prototype.values == [1]


def test_subclass_clone_keeps_type():
    @dataclass
    class Text(GameObject):
        text: str = ""

    created = blueprint_factory(Text(text="hello"))("Title")

    assert isinstance(created, Text)
    assert created.text == "hello"
    assert created.get_name() == "Title"
