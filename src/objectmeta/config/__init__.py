"""Configuration module using Pydantic Settings.

Provides the process-wide build mode gating metadata registration.

Usage:
    from objectmeta.config import BuildMode, get_build_mode

    if get_build_mode() is BuildMode.RUNTIME:
        ...
"""

from objectmeta.config.settings import BuildMode, BuildSettings, get_build_mode, is_authoring

__all__ = [
    "BuildMode",
    "BuildSettings",
    "get_build_mode",
    "is_authoring",
]
