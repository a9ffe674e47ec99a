"""Object functionality: blueprint capability, base object and object type metadata."""

from objectmeta.core.object.core import ObjectMetadata, blueprint_factory, namespaced_name
from objectmeta.core.object.models import Blueprint, GameObject, ObjectFactory

__all__ = [
    # Models
    "Blueprint",
    "GameObject",
    "ObjectFactory",
    # Core
    "ObjectMetadata",
    "blueprint_factory",
    "namespaced_name",
]
