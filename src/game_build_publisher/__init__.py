"""Game Build Publisher.

This package detects which platform each folder of a game's build
output targets, and pushes every detected build to its itch.io channel
through the butler CLI, one channel at a time, with a summary at the end.
"""

# Core library interface
from .matcher import classify, classify_directory, list_directory
from .pipeline import PipelineResult, PublishPipeline
from .publisher import ChannelPublisher, format_command
from .registry import EngineRegistry
from .report import PublishSummary, render_summary, summarize
from .scanner import scan_build_root, targets_from_scan

# Core types and errors
from .core import (
    BuildEntry,
    ChannelTarget,
    ClassificationUnmatched,
    ConfigurationInvalid,
    DirectoryListing,
    DirectoryNotFound,
    NoPlatformsDetected,
    PlatformSpec,
    PublishError,
    PublishOptions,
    PublishOutcome,
    ScanResult,
    SourceMissing,
    TransferToolFailure,
)
from .config import PublishConfig, load_publish_config
from .engines.base import EngineProfile
from .transfer import TransferResult, run_subprocess

__version__ = "0.1.0"

# Auto-discover and register all engines
EngineRegistry.discover_engines()

__all__ = [
    # Primary library interface
    "PublishPipeline",
    "PipelineResult",
    "ChannelPublisher",
    "EngineRegistry",
    "EngineProfile",
    "classify",
    "classify_directory",
    "list_directory",
    "scan_build_root",
    "targets_from_scan",
    "summarize",
    "render_summary",
    "format_command",
    "PublishConfig",
    "load_publish_config",
    "TransferResult",
    "run_subprocess",
    # Types
    "BuildEntry",
    "ChannelTarget",
    "DirectoryListing",
    "PlatformSpec",
    "PublishOptions",
    "PublishOutcome",
    "PublishSummary",
    "ScanResult",
    # Errors
    "PublishError",
    "ClassificationUnmatched",
    "ConfigurationInvalid",
    "DirectoryNotFound",
    "NoPlatformsDetected",
    "SourceMissing",
    "TransferToolFailure",
]
