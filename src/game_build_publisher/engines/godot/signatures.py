"""Godot export signatures.

This is also the general-purpose table: web markers first, then desktop
executables, then archives and packages, and the extension-less Linux
binary last because it is the weakest signal.
"""

from ...core.types import DirectoryListing, PlatformSpec
from ..base import has_extensionless_file, has_name, has_suffix

MAC_ARCHIVE_MARKERS = ("mac", "osx")


def is_macos_export(listing: DirectoryListing) -> bool:
    """Match an .app bundle, or a zip whose name marks it as a Mac export.

    A plain zip is not enough on its own; Godot names Mac archives after
    the preset (e.g. 'game-mac.zip', 'game_osx.zip').
    """
    if any(entry.endswith(".app") for entry in listing):
        return True

    return any(
        entry.endswith(".zip") and any(marker in entry for marker in MAC_ARCHIVE_MARKERS)
        for entry in listing
    )


GODOT_PLATFORMS: tuple[PlatformSpec, ...] = (
    PlatformSpec(
        tag="web",
        channel_name="html5",
        display_name="Web (HTML5)",
        predicate=has_name("index.html"),
    ),
    PlatformSpec(
        tag="windows",
        channel_name="windows",
        display_name="Windows Desktop",
        predicate=has_suffix(".exe"),
    ),
    PlatformSpec(
        tag="macos",
        channel_name="osx",
        display_name="macOS",
        predicate=is_macos_export,
    ),
    PlatformSpec(
        tag="android",
        channel_name="android",
        display_name="Android",
        predicate=has_suffix(".apk", ".aab"),
    ),
    PlatformSpec(
        tag="linux",
        channel_name="linux",
        display_name="Linux/X11",
        predicate=has_extensionless_file,
    ),
)

GODOT_NAME_HINTS: tuple[tuple[str, str], ...] = (
    ("web", "web"),
    ("html", "web"),
    ("win", "windows"),
    ("mac", "macos"),
    ("osx", "macos"),
    ("android", "android"),
    ("linux", "linux"),
)
