"""Engine profiles for build classification.

Each subpackage describes how one game engine lays out its exports
and registers an EngineProfile with the EngineRegistry when imported.
"""

# Engine packages are imported by EngineRegistry.discover_engines()
