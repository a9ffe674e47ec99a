"""Build configuration using Pydantic Settings.

The build mode decides whether object-type metadata (display strings,
instructions, expressions) is recorded at all. It is resolved once per
process and never changes afterwards.

Usage:
    from objectmeta.config import BuildMode, get_build_mode

    # Load from environment variables (OBJECTMETA_*)
    if get_build_mode() is BuildMode.AUTHORING:
        ...

    # Or inspect explicit values
    settings = BuildSettings(build_mode=BuildMode.RUNTIME)
"""

from __future__ import annotations

from enum import Enum
from functools import cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildMode(Enum):
    """Which flavor of metadata the running build carries."""

    AUTHORING = "authoring"  # Editor/tooling build, full metadata
    RUNTIME = "runtime"  # Stripped build, metadata operations are no-ops


class BuildSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the metadata build.

    Attributes:
        build_mode: Authoring (full metadata) or runtime (metadata omitted).

    Environment Variables:
        OBJECTMETA_BUILD_MODE
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJECTMETA_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    build_mode: BuildMode = BuildMode.AUTHORING


@cache
def get_build_mode() -> BuildMode:
    """Resolve the process-wide build mode.

    Settings are read on first call only; later changes to the environment
    have no effect for the lifetime of the process.

    Returns:
        The active build mode.
    """
    return BuildSettings().build_mode


def is_authoring() -> bool:
    """Check if metadata registration is enabled in this build."""
    return get_build_mode() is BuildMode.AUTHORING
