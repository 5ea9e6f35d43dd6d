"""Type definitions for build classification and channel publishing.

These records flow from the scanner (DirectoryListing, BuildEntry,
ScanResult) through the publisher (ChannelTarget, PublishOptions) into the
report (PublishOutcome).
"""

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable

from .errors import ClassificationUnmatched


@dataclass(frozen=True)
class DirectoryListing:
    """Immediate contents of a candidate build directory.

    Predicates read a listing like a set of names: ``"index.html" in listing``
    and ``any(n.endswith(".exe") for n in listing)`` both work.

    Attributes:
        names: Every immediate entry name (files and directories)
        regular_files: The subset of names that are regular files
    """

    names: frozenset[str]
    regular_files: frozenset[str] = frozenset()

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "DirectoryListing":
        """Build a listing where every name is treated as a regular file."""
        frozen = frozenset(names)
        return cls(names=frozen, regular_files=frozen)

    def __contains__(self, name: object) -> bool:
        return name in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self.names))

    def __len__(self) -> int:
        return len(self.names)

    def is_file(self, name: str) -> bool:
        return name in self.regular_files


Predicate = Callable[[DirectoryListing], bool]


@dataclass(frozen=True)
class PlatformSpec:
    """One row of an engine's ordered signature table.

    Attributes:
        tag: Internal platform tag (e.g. 'windows', 'web')
        channel_name: Destination channel on the remote (e.g. 'html5')
        display_name: Human-readable platform name
        predicate: File-signature test against a directory listing
    """

    tag: str
    channel_name: str
    display_name: str
    predicate: Predicate = field(compare=False)


@dataclass(frozen=True)
class BuildEntry:
    """A scanned subdirectory and the platform it was classified as."""

    path: Path
    platform_tag: str | None = None


@dataclass(frozen=True)
class ChannelTarget:
    """A detected build linked to the channel it will be pushed to."""

    platform_tag: str
    channel_name: str
    source_path: Path


@dataclass(frozen=True)
class PublishOptions:
    """Options shared by every channel push in a run."""

    version: str | None = None
    dry_run: bool = False
    ignore_patterns: tuple[str, ...] = ()


@dataclass(frozen=True)
class PublishOutcome:
    """Result of one channel push attempt."""

    channel_name: str
    succeeded: bool
    error_message: str | None = None
    error_kind: str | None = None

    @classmethod
    def success(cls, channel_name: str) -> "PublishOutcome":
        return cls(channel_name=channel_name, succeeded=True)

    @classmethod
    def failure(cls, channel_name: str, error: Exception) -> "PublishOutcome":
        return cls(
            channel_name=channel_name,
            succeeded=False,
            error_message=str(error),
            error_kind=type(error).__name__,
        )


@dataclass
class ScanResult:
    """Everything a single scan of a build root produced.

    Attributes:
        matched: Platform tag -> entry, ordered by the engine's signature table
        unmatched: Directories no signature or name hint matched
        duplicates: Directories whose tag was already claimed by an earlier one
        notes: Inspection notes per matched directory
        warnings: One ClassificationUnmatched per unmatched directory, in scan order
    """

    matched: dict[str, BuildEntry] = field(default_factory=dict)
    unmatched: list[BuildEntry] = field(default_factory=list)
    duplicates: list[BuildEntry] = field(default_factory=list)
    notes: dict[Path, list[str]] = field(default_factory=dict)
    warnings: list[ClassificationUnmatched] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.matched) + len(self.unmatched) + len(self.duplicates)
