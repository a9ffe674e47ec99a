"""Core functionalities: descriptor models and object type metadata.

Architecture Note:
    core/ holds the metadata value types and the per-object-type builder.
    The process-local catalog of object types lives in registry/.
"""

from objectmeta.core.metadata import (
    ExpressionKind,
    ExpressionMetadata,
    InstructionMetadata,
    ParameterMetadata,
)
from objectmeta.core.object import (
    Blueprint,
    GameObject,
    ObjectFactory,
    ObjectMetadata,
    blueprint_factory,
    namespaced_name,
)
from objectmeta.core.types import Owned

__all__ = [
    # Types
    "Owned",
    # Metadata
    "ExpressionKind",
    "ExpressionMetadata",
    "InstructionMetadata",
    "ParameterMetadata",
    # Object
    "Blueprint",
    "GameObject",
    "ObjectFactory",
    "ObjectMetadata",
    "blueprint_factory",
    "namespaced_name",
]
