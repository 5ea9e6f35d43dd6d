"""Template for registering a custom engine profile.

This example demonstrates the complete pattern for a new engine:
- Platform signatures written with the predicate builders
- Directory-name hints for exports with no recognizable files
- An optional inspection hook
- Registration with EngineRegistry
"""

from pathlib import Path

from game_build_publisher import EngineRegistry, classify_directory
from game_build_publisher.core.types import PlatformSpec
from game_build_publisher.engines.base import EngineProfile, has_name, has_suffix


# Step 1: Describe each export, in priority order
PICO8_PLATFORMS = (
    PlatformSpec("web", "html5", "PICO-8 Web", has_suffix(".html")),
    PlatformSpec("windows", "windows", "PICO-8 Windows", has_suffix(".exe")),
    PlatformSpec("macos", "osx", "PICO-8 macOS", has_suffix(".app")),
    PlatformSpec("linux", "linux", "PICO-8 Linux", has_name("data.pod")),
)

# Step 2: Fallback keywords matched against the lower-cased directory name
PICO8_NAME_HINTS = (
    ("web", "web"),
    ("win", "windows"),
    ("osx", "macos"),
    ("linux", "linux"),
)


# Step 3: Optional hook that reports problems without affecting classification
def inspect_pico8_build(tag: str, path: Path) -> list[str]:
    if tag == "web" and not (path / "index.html").exists():
        return ["Web export should be renamed to index.html for itch.io"]
    return []


# Step 4: Register
PICO8_PROFILE = EngineProfile(
    name="pico8",
    platforms=PICO8_PLATFORMS,
    name_hints=PICO8_NAME_HINTS,
    inspect=inspect_pico8_build,
)
EngineRegistry.register_profile(PICO8_PROFILE)


if __name__ == '__main__':
    print(EngineRegistry.list_engines())
    for build_dir in sorted(Path("build").glob("*/")):
        print(build_dir.name, classify_directory(build_dir, PICO8_PROFILE))
