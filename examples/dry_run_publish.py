"""Dry-run publishing example.

This example demonstrates how to:
- Scan a Godot build root
- Print the butler commands a real publish would run
- Display the summary and exit code
"""

import sys
from pathlib import Path

from game_build_publisher import EngineRegistry, PublishPipeline
from game_build_publisher.core import PublishError, PublishOptions


def main():
    # Change these to your own export folder and itch.io project
    build_root = Path("build")
    destination = "alice/mygame"

    if not build_root.exists():
        print(f"Directory not found: {build_root}", file=sys.stderr)
        print("Please update the build_root variable in this script", file=sys.stderr)
        return 1

    pipeline = PublishPipeline(EngineRegistry.get_profile("godot"))

    try:
        result = pipeline.run(build_root, destination, PublishOptions(version="1.0.0", dry_run=True))
    except PublishError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"\nChannels: {', '.join(target.channel_name for target in result.targets)}", file=sys.stderr)
    return result.exit_code()


if __name__ == '__main__':
    sys.exit(main())
