"""objectmeta: Object type metadata for extensible game-object models.

Usage:
    from dataclasses import dataclass
    from objectmeta import GameObject, ObjectMetadata, get_registry

    @dataclass
    class Enemy(GameObject):
        health: int = 100

    meta = get_registry().register(
        ObjectMetadata(
            "MyExtension::",
            "MyExtension::Enemy",
            "Enemy",
            "A hostile object",
            "res/enemy24.png",
            blueprint=Enemy(type_name="MyExtension::Enemy"),
        )
    )
    meta.add_action(
        "Hurt", "Hurt", "Remove health", "Hurt _PARAM0_ by _PARAM1_",
        "Health", "res/hurt24.png", "res/hurt.png",
    ).add_parameter("object", "Enemy", "MyExtension::Enemy").add_parameter("expression", "Damage")
    meta.add_expression("Health", "Health", "Current health", "Health", "res/health.png")

    enemy = meta.create_object("Enemy1")
"""

__version__ = "0.1.0"

# Configuration
from objectmeta.config import (
    BuildMode,
    BuildSettings,
    get_build_mode,
    is_authoring,
)

# Core primitives
from objectmeta.core import (
    Blueprint,
    ExpressionKind,
    ExpressionMetadata,
    GameObject,
    InstructionMetadata,
    ObjectFactory,
    ObjectMetadata,
    Owned,
    ParameterMetadata,
    blueprint_factory,
    namespaced_name,
)

# Registry
from objectmeta.registry import ObjectTypeRegistry, get_registry

__all__ = [
    # Version
    "__version__",
    # Config
    "BuildMode",
    "BuildSettings",
    "get_build_mode",
    "is_authoring",
    # Core
    "Owned",
    "Blueprint",
    "GameObject",
    "ObjectFactory",
    "ObjectMetadata",
    "blueprint_factory",
    "namespaced_name",
    "ExpressionKind",
    "ExpressionMetadata",
    "InstructionMetadata",
    "ParameterMetadata",
    # Registry
    "ObjectTypeRegistry",
    "get_registry",
]
