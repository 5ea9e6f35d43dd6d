"""Publish configuration files.

A publish config names the destination and maps channels to source
directories explicitly, for builds that don't follow a per-platform
folder layout::

    {
      "user": "your-itch-username",
      "game": "game-name",
      "channels": {"html5": "./dist", "windows": "./build/windows"},
      "version": "1.0.0",
      "ignore": ["*.map", "node_modules/**"]
    }
"""

import json
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema.protocols import Validator
from jsonschema.validators import validator_for

from .core.errors import ConfigurationInvalid
from .core.types import ChannelTarget, PublishOptions

CONFIG_SCHEMA_PATH = Path(__file__).parent / "schemas" / "publish_config.schema.json"

EXAMPLE_CONFIG: dict[str, Any] = {
    "user": "your-username",
    "game": "my-game",
    "channels": {"html5": "./dist"},
    "version": "1.0.0",
}


@lru_cache(maxsize=None)
def _config_validator() -> Validator:
    with CONFIG_SCHEMA_PATH.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    return validator_for(schema)(schema)


def config_problems(data: Any) -> list[str]:
    """List every way a parsed config breaks the publish config schema.

    Each problem reads "<field path>: <message>", with nested fields
    joined by dots and "config" standing for the top level.

    Example:
        >>> config_problems({"user": "alice", "game": "g", "channels": {"html5": 3}})
        ["channels.html5: 3 is not of type 'string'"]
    """
    errors = _config_validator().iter_errors(data)
    problems = []
    for error in sorted(errors, key=lambda e: [str(part) for part in e.absolute_path]):
        location = ".".join(str(part) for part in error.absolute_path) or "config"
        problems.append(f"{location}: {error.message}")
    return problems


@dataclass(frozen=True)
class PublishConfig:
    """Validated publish configuration."""

    user: str
    game: str
    channels: dict[str, str]
    version: str | None = None
    ignore: tuple[str, ...] = field(default_factory=tuple)

    @property
    def destination_id(self) -> str:
        return f"{self.user}/{self.game}"

    def targets(self) -> list[ChannelTarget]:
        """Channel targets in the order the config lists them."""
        return [
            ChannelTarget(platform_tag=channel, channel_name=channel, source_path=Path(source))
            for channel, source in self.channels.items()
        ]

    def options(self, dry_run: bool = False) -> PublishOptions:
        return PublishOptions(version=self.version, dry_run=dry_run, ignore_patterns=self.ignore)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PublishConfig":
        """Validate a parsed config and build a PublishConfig.

        Raises:
            ConfigurationInvalid: If the config does not match the schema
        """
        problems = config_problems(data)
        if problems:
            raise ConfigurationInvalid(f"Invalid publish config: {'; '.join(problems)}")

        return cls(
            user=data["user"],
            game=data["game"],
            channels=dict(data["channels"]),
            version=data.get("version") or None,
            ignore=tuple(data.get("ignore", ())),
        )


def load_publish_config(path: Path) -> PublishConfig:
    """Read and validate a JSON publish config.

    Args:
        path: Path to the config file

    Returns:
        The validated PublishConfig

    Raises:
        ConfigurationInvalid: If the file is missing, not JSON, or invalid
    """
    if not path.is_file():
        raise ConfigurationInvalid(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigurationInvalid(f"Config file is not valid JSON: {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationInvalid(f"Config file must contain a JSON object: {path}")

    return PublishConfig.from_dict(data)
