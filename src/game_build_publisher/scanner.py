"""Build root scanning.

This module walks the immediate subdirectories of a build root,
classifies each one, and collects the results into a ScanResult.
Builds are expected to be flat per-platform folders; nothing below the
first level is visited.
"""

import sys
from pathlib import Path

from .core.errors import ClassificationUnmatched, DirectoryNotFound
from .core.types import BuildEntry, ChannelTarget, ScanResult
from .engines.base import EngineProfile
from .matcher import classify_directory
from .registry import EngineRegistry


def list_build_dirs(build_root: Path) -> list[Path]:
    """Return the immediate subdirectories of a build root in name order.

    Raises:
        DirectoryNotFound: If build_root is missing or not a directory
    """
    if not build_root.exists():
        raise DirectoryNotFound(f"Directory not found: {build_root}")

    if not build_root.is_dir():
        raise DirectoryNotFound(f"Path is not a directory: {build_root}")

    return sorted(
        (child for child in build_root.iterdir() if child.is_dir()),
        key=lambda child: child.name,
    )


def scan_build_root(build_root: Path, profile: EngineProfile | None = None) -> ScanResult:
    """Classify every immediate subdirectory of a build root.

    Prints one line per directory to stderr. Non-directory entries at
    the root are ignored.

    Args:
        build_root: Directory holding one folder per platform build
        profile: Engine profile; defaults to the registry's default engine

    Returns:
        ScanResult whose matched mapping follows the profile's platform order

    Raises:
        DirectoryNotFound: If build_root is missing or not a directory
    """
    profile = profile or EngineRegistry.get_profile()
    found: dict[str, BuildEntry] = {}
    result = ScanResult()

    for build_dir in list_build_dirs(build_root):
        tag = classify_directory(build_dir, profile)
        entry = BuildEntry(path=build_dir, platform_tag=tag)

        if tag is None:
            warning = ClassificationUnmatched(f"Unknown platform: {build_dir.name}/")
            print(warning, file=sys.stderr)
            result.warnings.append(warning)
            result.unmatched.append(entry)
            continue

        spec = profile.spec_for(tag)
        if tag in found:
            print(
                f"Warning: {build_dir.name}/ is also {spec.display_name}, "
                f"keeping {found[tag].path.name}/",
                file=sys.stderr,
            )
            result.duplicates.append(entry)
            continue

        print(f"{spec.display_name}: {build_dir.name}/", file=sys.stderr)
        found[tag] = entry

        notes = profile.inspect_build(tag, build_dir)
        for note in notes:
            print(f"   {note}", file=sys.stderr)
        if notes:
            result.notes[build_dir] = notes

    # Matched entries follow signature-table order, not directory names
    result.matched = {tag: found[tag] for tag in profile.tags if tag in found}
    return result


def targets_from_scan(result: ScanResult, profile: EngineProfile | None = None) -> list[ChannelTarget]:
    """Turn matched build entries into channel targets, in profile order."""
    profile = profile or EngineRegistry.get_profile()

    return [
        ChannelTarget(
            platform_tag=tag,
            channel_name=profile.spec_for(tag).channel_name,
            source_path=entry.path,
        )
        for tag, entry in result.matched.items()
    ]
