"""Object type registry: lookup and instantiation by type name."""

from objectmeta.registry.registry import ObjectTypeRegistry, get_registry

__all__ = [
    "ObjectTypeRegistry",
    "get_registry",
]
