"""Instruction and expression descriptors.

These are the values an object type hands out from its ``add_*`` builder
methods. Every setter returns the descriptor itself so registration code can
keep chaining:

    meta.add_action("SetSpeed", "Speed", "Change the speed", "Set speed of _PARAM0_ to _PARAM1_",
                    "Movement", "res/speed24.png", "res/speed.png") \\
        .add_parameter("object", "Object", "Enemy") \\
        .add_parameter("expression", "Speed") \\
        .set_default_value("100")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Self


class ExpressionKind(Enum):
    """Value type an expression evaluates to."""

    NUMBER = auto()
    STRING = auto()


@dataclass(slots=True)
class ParameterMetadata:
    """One parameter of an instruction or expression."""

    type: str
    description: str = ""
    supplementary_information: str = ""
    optional: bool = False
    long_description: str = ""
    default_value: str = ""
    code_only: bool = False  # Filled in by generated code, never shown to users


class _Parameterized:
    """Parameter-building methods shared by instructions and expressions."""

    __slots__ = ()

    parameters: list[ParameterMetadata]

    def add_parameter(
        self,
        type: str,
        description: str = "",
        supplementary_information: str = "",
        optional: bool = False,
    ) -> Self:
        """Append a user-visible parameter.

        Args:
            type: Parameter type identifier (e.g. "object", "expression", "string").
            description: Label shown to the user.
            supplementary_information: Extra type information, such as an object type name.
            optional: Whether the user may leave the parameter empty.

        Returns:
            Self, for chaining.
        """
        self.parameters.append(
            ParameterMetadata(
                type=type,
                description=description,
                supplementary_information=supplementary_information,
                optional=optional,
            )
        )
        return self

    def add_code_only_parameter(self, type: str, supplementary_information: str = "") -> Self:
        """Append a parameter filled in automatically and hidden from the user."""
        self.parameters.append(
            ParameterMetadata(
                type=type,
                supplementary_information=supplementary_information,
                code_only=True,
            )
        )
        return self

    def set_default_value(self, value: str) -> Self:
        """Set the default value of the last added parameter.

        Raises:
            ValueError: If no parameter was added yet.
        """
        self._last_parameter().default_value = value
        return self

    def set_parameter_long_description(self, text: str) -> Self:
        """Set the long description of the last added parameter.

        Raises:
            ValueError: If no parameter was added yet.
        """
        self._last_parameter().long_description = text
        return self

    def _last_parameter(self) -> ParameterMetadata:
        if not self.parameters:
            raise ValueError(f"{type(self).__name__} has no parameter to configure")
        return self.parameters[-1]


@dataclass(slots=True)
class InstructionMetadata(_Parameterized):
    """Describes a condition or an action.

    ``name`` is the fully namespaced name under which the instruction is
    registered. Object-scoped instructions take the target object as their
    first parameter, which is what ``is_object_instruction`` tells tooling.
    """

    extension_namespace: str
    name: str
    full_name: str = ""
    description: str = ""
    sentence: str = ""
    group: str = ""
    icon_filename: str = ""
    small_icon_filename: str = ""
    help_path: str = ""
    is_object_instruction: bool = False
    hidden: bool = False
    private: bool = False
    parameters: list[ParameterMetadata] = field(default_factory=list)

    def set_help_path(self, path: str) -> Self:
        """Set the documentation path, relative to the help root."""
        self.help_path = path
        return self

    def set_is_object_instruction(self, is_object_instruction: bool = True) -> Self:
        """Mark the instruction as bound to an object instance."""
        self.is_object_instruction = is_object_instruction
        return self

    def set_hidden(self) -> Self:
        """Keep the instruction usable but hide it from lists shown to users."""
        self.hidden = True
        return self

    def set_private(self) -> Self:
        """Restrict the instruction to its own extension."""
        self.private = True
        return self


@dataclass(slots=True)
class ExpressionMetadata(_Parameterized):
    """Describes a numeric or string expression."""

    extension_namespace: str
    name: str
    full_name: str = ""
    description: str = ""
    group: str = ""
    small_icon_filename: str = ""
    kind: ExpressionKind = ExpressionKind.NUMBER
    help_path: str = ""
    hidden: bool = False
    parameters: list[ParameterMetadata] = field(default_factory=list)

    def set_help_path(self, path: str) -> Self:
        """Set the documentation path, relative to the help root."""
        self.help_path = path
        return self

    def set_hidden(self) -> Self:
        self.hidden = True
        return self

    def is_string(self) -> bool:
        """Check if the expression evaluates to a string."""
        return self.kind is ExpressionKind.STRING
