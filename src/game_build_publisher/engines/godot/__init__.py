"""Godot engine profile.

Expected build structure::

    build/
      windows/   (.exe)
      linux/     (extension-less executable)
      macos/     (.app or a mac/osx .zip)
      android/   (.apk or .aab)
      web/       (index.html)

Godot is the default engine; its table encodes the general platform
priority order.
"""

from ...registry import EngineRegistry
from ..base import EngineProfile
from .inspection import check_cors_fix, inspect_godot_build
from .signatures import GODOT_NAME_HINTS, GODOT_PLATFORMS, is_macos_export

GODOT_PROFILE = EngineProfile(
    name="godot",
    platforms=GODOT_PLATFORMS,
    name_hints=GODOT_NAME_HINTS,
    inspect=inspect_godot_build,
)

# Auto-register at module import
EngineRegistry.register_profile(GODOT_PROFILE)

__all__ = [
    "GODOT_PROFILE",
    "GODOT_PLATFORMS",
    "check_cors_fix",
    "inspect_godot_build",
    "is_macos_export",
]
