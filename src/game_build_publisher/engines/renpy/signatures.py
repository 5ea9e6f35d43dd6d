"""Ren'Py distribution signatures.

Ren'Py's "Build Distributions" output names its launchers and archives
after the target (game-1.0-pc, game-1.0-mac, ...), so the table leans on
name fragments. Desktop platforms come first; the web check comes last
because a web build only differs by its index.html.
"""

from ...core.types import DirectoryListing, PlatformSpec
from ..base import any_of, has_name, has_suffix


def has_windows_launcher(listing: DirectoryListing) -> bool:
    return any(entry.endswith(".exe") and "mac" not in entry for entry in listing)


def has_mac_marker(listing: DirectoryListing) -> bool:
    return any(entry.endswith(".app") or "mac" in entry for entry in listing)


def has_linux_marker(listing: DirectoryListing) -> bool:
    return any("linux" in entry.lower() and ".exe" not in entry for entry in listing)


RENPY_PLATFORMS: tuple[PlatformSpec, ...] = (
    PlatformSpec(
        tag="windows",
        channel_name="windows",
        display_name="Windows",
        predicate=has_windows_launcher,
    ),
    PlatformSpec(
        tag="macos",
        channel_name="osx",
        display_name="macOS",
        predicate=has_mac_marker,
    ),
    PlatformSpec(
        tag="linux",
        channel_name="linux",
        display_name="Linux",
        predicate=has_linux_marker,
    ),
    PlatformSpec(
        tag="web",
        channel_name="html5",
        display_name="Web",
        predicate=any_of(has_name("index.html"), has_suffix("web.zip")),
    ),
)

RENPY_NAME_HINTS: tuple[tuple[str, str], ...] = (
    ("win", "windows"),
    ("mac", "macos"),
    ("linux", "linux"),
    ("web", "web"),
)
