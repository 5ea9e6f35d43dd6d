"""Platform signature matching.

Classification is a pure function of a directory listing and the
directory's name: file signatures are tried in the engine's priority
order, then directory-name hints, and otherwise the directory is left
unclassified.
"""

import os
from pathlib import Path

from .core.types import DirectoryListing
from .engines.base import EngineProfile
from .registry import EngineRegistry


def classify(
    listing: DirectoryListing,
    dir_name_lower: str,
    profile: EngineProfile | None = None,
) -> str | None:
    """Return the platform tag a build directory belongs to.

    Args:
        listing: Immediate (non-recursive) entries of the directory
        dir_name_lower: Lower-cased basename of the directory
        profile: Engine profile to match against; defaults to the
            registry's default engine

    Returns:
        The first matching platform tag, or None when nothing matched

    Example:
        >>> classify(DirectoryListing.from_names(["index.html"]), "build")
        'web'
    """
    profile = profile or EngineRegistry.get_profile()

    for spec in profile.platforms:
        if spec.predicate(listing):
            return spec.tag

    # Name hints are only a fallback when no file signature matched
    for keyword, tag in profile.name_hints:
        if keyword in dir_name_lower:
            return tag

    return None


def list_directory(path: Path) -> DirectoryListing:
    """Read the immediate entries of a directory.

    Args:
        path: Directory to list

    Returns:
        DirectoryListing with every entry name and the regular-file subset
    """
    names: set[str] = set()
    regular_files: set[str] = set()

    with os.scandir(path) as entries:
        for entry in entries:
            names.add(entry.name)
            if entry.is_file():
                regular_files.add(entry.name)

    return DirectoryListing(names=frozenset(names), regular_files=frozenset(regular_files))


def classify_directory(path: Path, profile: EngineProfile | None = None) -> str | None:
    """List a directory and classify it in one step."""
    return classify(list_directory(path), path.name.lower(), profile)
