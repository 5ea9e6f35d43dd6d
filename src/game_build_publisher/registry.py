"""Engine profile registry.

This module provides a central registry for engine profiles, the
ordered signature tables used to classify build directories. Engine
packages register themselves when imported, and the registry can
discover every engine shipped under engines/.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .engines.base import EngineProfile

DEFAULT_ENGINE = "godot"


class EngineRegistry:
    """Central registry for engine profiles.

    Each engine package under engines/ builds an EngineProfile and
    registers it at import time. The scanner and CLI look profiles up
    by name, so adding an engine never touches the core modules.
    """

    _profiles: dict[str, "EngineProfile"] = {}

    @classmethod
    def register_profile(cls, profile: "EngineProfile") -> None:
        """Register an engine profile under its name.

        Args:
            profile: Profile to register; replaces any profile with the same name

        Example:
            >>> EngineRegistry.register_profile(EngineProfile(name='pico8', platforms=(...)))
        """
        cls._profiles[profile.name] = profile

    @classmethod
    def get_profile(cls, name: str | None = None) -> "EngineProfile":
        """Look up a registered profile.

        Args:
            name: Engine name; defaults to DEFAULT_ENGINE

        Returns:
            The registered EngineProfile

        Raises:
            ValueError: If no profile is registered under that name
        """
        name = name or DEFAULT_ENGINE

        if name not in cls._profiles:
            cls.discover_engines()

        if name not in cls._profiles:
            available = ", ".join(cls.list_engines()) or "none"
            raise ValueError(f"Unknown engine: '{name}'. Available engines: {available}")

        return cls._profiles[name]

    @classmethod
    def list_engines(cls) -> list[str]:
        """List registered engine names in sorted order.

        Example:
            >>> EngineRegistry.list_engines()
            ['godot', 'renpy']
        """
        return sorted(cls._profiles.keys())

    @classmethod
    def discover_engines(cls) -> None:
        """Import every engine package so it registers itself.

        Engine packages are subdirectories of engines/ that contain an
        __init__.py. Importing one triggers its registration call.
        """
        engines_dir = Path(__file__).parent / "engines"

        if not engines_dir.exists():
            return

        for engine_path in sorted(engines_dir.iterdir()):
            if not engine_path.is_dir():
                continue

            if not (engine_path / "__init__.py").exists():
                continue

            importlib.import_module(
                f".engines.{engine_path.name}",
                package="game_build_publisher",
            )
