"""Tests for build mode configuration."""

from objectmeta.config import BuildMode, BuildSettings, get_build_mode, is_authoring


def test_authoring_is_default():
    assert BuildSettings().build_mode is BuildMode.AUTHORING
    assert get_build_mode() is BuildMode.AUTHORING
    assert is_authoring()


def test_runtime_from_environment(runtime_build):
    assert get_build_mode() is BuildMode.RUNTIME
    assert not is_authoring()


def test_build_mode_fixed_after_first_read(monkeypatch):
    """Build mode is read once; later environment changes are ignored.

    Why: Metadata gating must not flip halfway through registration.
    """
    assert get_build_mode() is BuildMode.AUTHORING

    monkeypatch.setenv("OBJECTMETA_BUILD_MODE", "runtime")

    assert get_build_mode() is BuildMode.AUTHORING


def test_explicit_value_overrides_environment(monkeypatch):
    monkeypatch.setenv("OBJECTMETA_BUILD_MODE", "runtime")

    settings = BuildSettings(build_mode=BuildMode.AUTHORING)

    assert settings.build_mode is BuildMode.AUTHORING
