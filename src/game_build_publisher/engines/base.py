"""Base abstractions for engine profiles.

An engine profile is an ordered table of PlatformSpec rows plus the
directory-name hints used when no file signature matches. Order in both
tables is priority order: the first row that matches wins.

This module also provides the small predicate builders the engine
tables are written with.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from ..core.types import DirectoryListing, PlatformSpec, Predicate

# Inspection hook: (platform tag, build directory) -> human-readable notes
Inspector = Callable[[str, Path], list[str]]


@dataclass(frozen=True)
class EngineProfile:
    """Signature table and name hints for one game engine's exports.

    Attributes:
        name: Registry name (e.g. 'godot')
        platforms: PlatformSpec rows in priority order
        name_hints: (keyword, tag) pairs checked against the lower-cased
            directory name, in priority order
        inspect: Optional hook run on matched directories to report
            export problems; never affects classification
    """

    name: str
    platforms: tuple[PlatformSpec, ...]
    name_hints: tuple[tuple[str, str], ...] = ()
    inspect: Inspector | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        tags = [spec.tag for spec in self.platforms]
        if len(tags) != len(set(tags)):
            raise ValueError(f"Duplicate platform tags in engine '{self.name}': {tags}")

        for _, tag in self.name_hints:
            if tag not in tags:
                raise ValueError(f"Name hint refers to unknown tag '{tag}' in engine '{self.name}'")

    @property
    def tags(self) -> list[str]:
        return [spec.tag for spec in self.platforms]

    def spec_for(self, tag: str) -> PlatformSpec:
        """Return the PlatformSpec registered for a tag.

        Raises:
            KeyError: If the tag is not part of this profile
        """
        for spec in self.platforms:
            if spec.tag == tag:
                return spec
        raise KeyError(f"Engine '{self.name}' has no platform '{tag}'")

    def inspect_build(self, tag: str, path: Path) -> list[str]:
        if self.inspect is None:
            return []
        return self.inspect(tag, path)


def has_name(name: str) -> Predicate:
    """Match when an entry with exactly this name is present."""

    def predicate(listing: DirectoryListing) -> bool:
        return name in listing

    return predicate


def has_suffix(*suffixes: str) -> Predicate:
    """Match when any entry name ends with one of the suffixes."""

    def predicate(listing: DirectoryListing) -> bool:
        return any(entry.endswith(suffixes) for entry in listing)

    return predicate


def any_of(*predicates: Predicate) -> Predicate:
    def predicate(listing: DirectoryListing) -> bool:
        return any(check(listing) for check in predicates)

    return predicate


def has_extensionless_file(listing: DirectoryListing) -> bool:
    """Weak Linux signal: a regular file whose name has no dot.

    Directories (such as a bundled lib/) never count, and dot-files
    contain a dot so they are excluded as well.
    """
    return any("." not in entry and listing.is_file(entry) for entry in listing)
