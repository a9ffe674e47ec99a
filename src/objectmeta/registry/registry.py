"""Process-local catalog of object types.

Usage:
    registry = get_registry()
    registry.register(enemy_metadata)

    enemy = registry.create_object("MyExtension::Enemy", "Enemy1")
    is_angry = registry.find_condition("MyExtension::Enemy", "IsAngry")
"""

from __future__ import annotations

import logging
import warnings

from objectmeta.core.metadata import ExpressionMetadata, InstructionMetadata
from objectmeta.core.object import Blueprint, ObjectMetadata
from objectmeta.core.types import Owned

logger = logging.getLogger(__name__)


class ObjectTypeRegistry:
    """Maps object type names to their metadata.

    Filled while extensions load, then read by whatever needs to look up
    instructions or create objects by type name.
    """

    def __init__(self) -> None:
        """Initialize empty object type registry."""
        self._by_name: dict[str, ObjectMetadata] = {}

    def register(self, metadata: ObjectMetadata) -> ObjectMetadata:
        """Register an object type and return its metadata.

        Registering a type name again replaces the earlier metadata.

        Args:
            metadata: Metadata of the object type.

        Returns:
            The registered metadata, for chaining builder calls.
        """
        existing = self._by_name.get(metadata.name)
        if existing is not None and existing is not metadata:
            warnings.warn(
                f"Object type {metadata.name!r} registered more than once. "
                f"Only the last one will be kept.",
                stacklevel=2,
            )
        self._by_name[metadata.name] = metadata
        return metadata

    def get(self, type_name: str) -> ObjectMetadata | None:
        """Get metadata for a registered object type.

        Args:
            type_name: Object type name to look up.

        Returns:
            Object type metadata if registered, None otherwise.
        """
        return self._by_name.get(type_name)

    def is_registered(self, type_name: str) -> bool:
        return type_name in self._by_name

    def type_names(self) -> list[str]:
        """Names of all registered object types, in registration order."""
        return list(self._by_name)

    def create_object(self, type_name: str, name: str) -> Owned[Blueprint] | None:
        """Create an object of a registered type.

        Args:
            type_name: Object type to instantiate.
            name: Name given to the new object.

        Returns:
            The new object, or None if the type is unknown or its factory failed.
        """
        metadata = self._by_name.get(type_name)
        if metadata is None:
            logger.error("Unable to create object %r: unknown object type %r", name, type_name)
            return None
        return metadata.create_object(name)

    def find_condition(self, type_name: str, name: str) -> InstructionMetadata | None:
        metadata = self._by_name.get(type_name)
        return metadata.get_condition(name) if metadata is not None else None

    def find_action(self, type_name: str, name: str) -> InstructionMetadata | None:
        metadata = self._by_name.get(type_name)
        return metadata.get_action(name) if metadata is not None else None

    def find_expression(self, type_name: str, name: str) -> ExpressionMetadata | None:
        metadata = self._by_name.get(type_name)
        return metadata.get_expression(name) if metadata is not None else None

    def find_str_expression(self, type_name: str, name: str) -> ExpressionMetadata | None:
        metadata = self._by_name.get(type_name)
        return metadata.get_str_expression(name) if metadata is not None else None

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)


# Module-level registry instance
_registry = ObjectTypeRegistry()


def get_registry() -> ObjectTypeRegistry:
    """Access the global object type registry.

    Returns:
        The process-local ObjectTypeRegistry instance.
    """
    return _registry
