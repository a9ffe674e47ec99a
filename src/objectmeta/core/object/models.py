"""Object models: the blueprint capability and a clonable base object.

Any class with ``clone()`` and ``set_name()`` can serve as a blueprint:

    @dataclass
    class Sprite(GameObject):
        animations: list[str] = field(default_factory=list)

    blueprint = Sprite(name="", type_name="Sprite")
    enemy = blueprint.clone()
    enemy.set_name("Enemy1")
"""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol, Self, runtime_checkable

from objectmeta.core.types import Owned


@runtime_checkable
class Blueprint(Protocol):
    """Object that can produce independent copies of itself."""

    def clone(self) -> Self: ...

    def set_name(self, name: str) -> None: ...


type ObjectFactory = Callable[[str], Owned[Blueprint] | None]
"""Creates a new object with the given name, or None on failure."""


@dataclass
class GameObject:
    """Base object with a name and per-object state.

    ``clone()`` is a deep copy, so variables and tags of a clone are never
    aliased with the original.
    """

    name: str = ""
    type_name: str = ""
    variables: dict[str, Any] = field(default_factory=dict)
    tags: list[str] = field(default_factory=list)

    def clone(self) -> Self:
        """Return an independent deep copy of this object."""
        return copy.deepcopy(self)

    def set_name(self, name: str) -> None:
        self.name = name

    def get_name(self) -> str:
        return self.name
