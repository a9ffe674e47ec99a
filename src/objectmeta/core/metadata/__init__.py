"""Instruction and expression descriptor models."""

from objectmeta.core.metadata.models import (
    ExpressionKind,
    ExpressionMetadata,
    InstructionMetadata,
    ParameterMetadata,
)

__all__ = [
    "ExpressionKind",
    "ExpressionMetadata",
    "InstructionMetadata",
    "ParameterMetadata",
]
