"""Ren'Py engine profile.

Build from Ren'Py Launcher -> Build Distributions. Expected structure::

    build/
      my-game-1.0-pc/      (Windows)
      my-game-1.0-mac/     (macOS)
      my-game-1.0-linux/   (Linux)
      my-game-1.0-web/     (HTML5)
"""

from ...registry import EngineRegistry
from ..base import EngineProfile
from .inspection import describe_desktop_build, describe_web_build, inspect_renpy_build
from .signatures import RENPY_NAME_HINTS, RENPY_PLATFORMS

RENPY_PROFILE = EngineProfile(
    name="renpy",
    platforms=RENPY_PLATFORMS,
    name_hints=RENPY_NAME_HINTS,
    inspect=inspect_renpy_build,
)

# Auto-register at module import
EngineRegistry.register_profile(RENPY_PROFILE)

__all__ = [
    "RENPY_PROFILE",
    "RENPY_PLATFORMS",
    "describe_desktop_build",
    "describe_web_build",
    "inspect_renpy_build",
]
