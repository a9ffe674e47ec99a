"""Object type metadata and blueprint factories.

Usage:
    meta = ObjectMetadata(
        "MyExtension::",
        "MyExtension::Enemy",
        "Enemy",
        "A hostile object",
        "res/enemy24.png",
        blueprint=Enemy(type_name="MyExtension::Enemy"),
    ).set_help_url("/objects/enemy")

    meta.add_condition(
        "IsAngry", "Angry", "Check if the enemy is angry", "_PARAM0_ is angry",
        "Mood", "res/angry24.png", "res/angry.png",
    ).add_parameter("object", "Enemy", "MyExtension::Enemy")

    enemy = meta.create_object("Enemy1")

The two ``add_*`` families differ on purpose: conditions and actions are
stored under ``namespace + name`` while expressions keep their plain name.
Registering the same name twice replaces the earlier descriptor.
"""

from __future__ import annotations

import logging
from typing import Self

from objectmeta.config import is_authoring
from objectmeta.core.metadata import ExpressionKind, ExpressionMetadata, InstructionMetadata
from objectmeta.core.object.models import Blueprint, ObjectFactory
from objectmeta.core.types import Owned

logger = logging.getLogger(__name__)


def blueprint_factory(blueprint: Blueprint | None) -> ObjectFactory:
    """Build a factory that clones a shared blueprint.

    The blueprint is only ever read: each call clones it and renames the
    clone, so repeated calls produce unrelated objects.

    Args:
        blueprint: Object to copy, or None if the extension declared none.

    Returns:
        Factory returning a renamed clone, or None (with an error logged)
        when no blueprint is available.
    """

    def create(name: str) -> Owned[Blueprint] | None:
        if blueprint is None:
            logger.error(
                "Unable to create object %r. Have you declared an extension "
                "(or ObjectMetadata) without specifying an object as blueprint?",
                name,
            )
            return None

        new_object = blueprint.clone()
        new_object.set_name(name)
        return new_object

    return create


def namespaced_name(extension_namespace: str, name: str) -> str:
    """Prefix an instruction name with its extension namespace, if any."""
    return extension_namespace + name if extension_namespace else name


class ObjectMetadata:
    """Describes an object type: identity, factory and supported instructions.

    Built once while an extension registers, then only read. Outside an
    authoring build every ``add_*``/``set_*`` call leaves the metadata
    untouched; the maps exist but stay empty.

    Attributes:
        extension_namespace: Prefix applied to condition and action names.
        name: Object type name, unique across extensions.
        full_name: Display name.
        description: Display description.
        icon_filename: Path of the type icon.
        help_url: Documentation URL of the object type.
        help_path: Documentation path inherited by instructions and expressions.
        include_files: Files needed by code using this type, in declaration order.
        conditions: Conditions keyed by namespaced name.
        actions: Actions keyed by namespaced name.
        expressions: Numeric expressions keyed by plain name.
        str_expressions: String expressions keyed by plain name.
    """

    def __init__(
        self,
        extension_namespace: str,
        name: str,
        full_name: str,
        description: str,
        icon_filename: str,
        blueprint: Blueprint | None = None,
        *,
        create_fn: ObjectFactory | None = None,
    ) -> None:
        """Create metadata from a blueprint or from an explicit factory.

        Args:
            extension_namespace: Namespace of the declaring extension ("" for none).
            name: Object type name.
            full_name: Display name.
            description: Display description.
            icon_filename: Path of the type icon.
            blueprint: Object cloned to create new instances.
            create_fn: Factory used as is instead of cloning a blueprint.

        Raises:
            TypeError: If both a blueprint and a factory are given.
        """
        if blueprint is not None and create_fn is not None:
            raise TypeError("ObjectMetadata takes either a blueprint or a create_fn, not both")

        self.extension_namespace = extension_namespace
        self.name = name
        self.full_name = ""
        self.description = ""
        self.icon_filename = ""
        self.help_url = ""
        self.help_path = ""
        self.include_files: list[str] = []
        self.conditions: dict[str, InstructionMetadata] = {}
        self.actions: dict[str, InstructionMetadata] = {}
        self.expressions: dict[str, ExpressionMetadata] = {}
        self.str_expressions: dict[str, ExpressionMetadata] = {}

        if is_authoring():
            self.set_full_name(full_name)
            self.set_description(description)
            self.icon_filename = icon_filename

        self._create_fn = create_fn if create_fn is not None else blueprint_factory(blueprint)

    @classmethod
    def from_blueprint(
        cls,
        extension_namespace: str,
        name: str,
        full_name: str,
        description: str,
        icon_filename: str,
        blueprint: Blueprint | None,
    ) -> ObjectMetadata:
        """Create metadata whose instances are clones of ``blueprint``."""
        return cls(extension_namespace, name, full_name, description, icon_filename, blueprint)

    @classmethod
    def from_factory(
        cls,
        extension_namespace: str,
        name: str,
        full_name: str,
        description: str,
        icon_filename: str,
        create_fn: ObjectFactory,
    ) -> ObjectMetadata:
        """Create metadata whose instances come from ``create_fn``."""
        return cls(
            extension_namespace, name, full_name, description, icon_filename, create_fn=create_fn
        )

    @property
    def create_fn(self) -> ObjectFactory:
        """Factory creating instances of this type. Fixed at construction."""
        return self._create_fn

    def create_object(self, name: str) -> Owned[Blueprint] | None:
        """Create a new instance of this type.

        Args:
            name: Name given to the new object.

        Returns:
            The new object, or None if the factory could not create one.
        """
        return self._create_fn(name)

    def namespaced(self, name: str) -> str:
        """Key under which a condition or action called ``name`` is stored."""
        return namespaced_name(self.extension_namespace, name)

    # Instructions

    def add_condition(
        self,
        name: str,
        full_name: str,
        description: str,
        sentence: str,
        group: str,
        icon: str,
        small_icon: str,
    ) -> InstructionMetadata:
        """Declare a condition on objects of this type.

        Args:
            name: Condition name, without namespace.
            full_name: Display name.
            description: Display description.
            sentence: Sentence template shown in the events sheet.
            group: Group the condition is listed under.
            icon: Path of the 24x24 icon.
            small_icon: Path of the 16x16 icon.

        Returns:
            The stored condition, for further configuration.
        """
        return self._add_instruction(
            self.conditions, name, full_name, description, sentence, group, icon, small_icon
        )

    def add_action(
        self,
        name: str,
        full_name: str,
        description: str,
        sentence: str,
        group: str,
        icon: str,
        small_icon: str,
    ) -> InstructionMetadata:
        """Declare an action on objects of this type.

        Same arguments as ``add_condition``.

        Returns:
            The stored action, for further configuration.
        """
        return self._add_instruction(
            self.actions, name, full_name, description, sentence, group, icon, small_icon
        )

    def _add_instruction(
        self,
        instructions: dict[str, InstructionMetadata],
        name: str,
        full_name: str,
        description: str,
        sentence: str,
        group: str,
        icon: str,
        small_icon: str,
    ) -> InstructionMetadata:
        key = self.namespaced(name)
        instruction = (
            InstructionMetadata(
                self.extension_namespace,
                key,
                full_name,
                description,
                sentence,
                group,
                icon,
                small_icon,
            )
            .set_help_path(self.help_path)
            .set_is_object_instruction()
        )
        if is_authoring():
            instructions[key] = instruction
        return instruction

    # Expressions

    def add_expression(
        self,
        name: str,
        full_name: str,
        description: str,
        group: str,
        small_icon: str,
    ) -> ExpressionMetadata:
        """Declare a numeric expression on objects of this type.

        Args:
            name: Expression name. Not namespaced: an object type has a single
                implementation, so names only need to be unique per type.
            full_name: Display name.
            description: Display description.
            group: Group the expression is listed under.
            small_icon: Path of the 16x16 icon.

        Returns:
            The stored expression, for further configuration.
        """
        return self._add_expression(
            self.expressions, ExpressionKind.NUMBER, name, full_name, description, group, small_icon
        )

    def add_str_expression(
        self,
        name: str,
        full_name: str,
        description: str,
        group: str,
        small_icon: str,
    ) -> ExpressionMetadata:
        """Declare a string expression on objects of this type.

        Same arguments as ``add_expression``.
        """
        return self._add_expression(
            self.str_expressions,
            ExpressionKind.STRING,
            name,
            full_name,
            description,
            group,
            small_icon,
        )

    def _add_expression(
        self,
        expressions: dict[str, ExpressionMetadata],
        kind: ExpressionKind,
        name: str,
        full_name: str,
        description: str,
        group: str,
        small_icon: str,
    ) -> ExpressionMetadata:
        expression = ExpressionMetadata(
            self.extension_namespace,
            name,
            full_name,
            description,
            group,
            small_icon,
            kind=kind,
        ).set_help_path(self.help_path)
        if is_authoring():
            expressions[name] = expression
        return expression

    # Lookups

    def get_condition(self, name: str) -> InstructionMetadata | None:
        """Find a condition by plain or namespaced name."""
        return self.conditions.get(self.namespaced(name)) or self.conditions.get(name)

    def get_action(self, name: str) -> InstructionMetadata | None:
        """Find an action by plain or namespaced name."""
        return self.actions.get(self.namespaced(name)) or self.actions.get(name)

    def get_expression(self, name: str) -> ExpressionMetadata | None:
        return self.expressions.get(name)

    def get_str_expression(self, name: str) -> ExpressionMetadata | None:
        return self.str_expressions.get(name)

    def has_condition(self, name: str) -> bool:
        return self.get_condition(name) is not None

    def has_action(self, name: str) -> bool:
        return self.get_action(name) is not None

    def has_expression(self, name: str) -> bool:
        return name in self.expressions

    def has_str_expression(self, name: str) -> bool:
        return name in self.str_expressions

    # Documentation

    def set_full_name(self, full_name: str) -> Self:
        if is_authoring():
            self.full_name = full_name
        return self

    def set_description(self, description: str) -> Self:
        if is_authoring():
            self.description = description
        return self

    def set_help_url(self, help_url: str) -> Self:
        if is_authoring():
            self.help_url = help_url
        return self

    def set_help_path(self, help_path: str) -> Self:
        """Set the help path given to instructions and expressions added afterwards."""
        if is_authoring():
            self.help_path = help_path
        return self

    def set_include_file(self, include_file: str) -> Self:
        """Replace all include files with ``include_file``."""
        if is_authoring():
            self.include_files = [include_file]
        return self

    def add_include_file(self, include_file: str) -> Self:
        """Append ``include_file`` unless it is already listed."""
        if is_authoring() and include_file not in self.include_files:
            self.include_files.append(include_file)
        return self

    def __repr__(self) -> str:
        return (
            f"ObjectMetadata(name={self.name!r}, conditions={len(self.conditions)}, "
            f"actions={len(self.actions)}, expressions={len(self.expressions)}, "
            f"str_expressions={len(self.str_expressions)})"
        )
