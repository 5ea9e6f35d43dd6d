"""Core types and errors.

This package holds the records passed between the scanner, publisher
and report, and the exception hierarchy.
"""

from .errors import (
    ClassificationUnmatched,
    ConfigurationInvalid,
    DirectoryNotFound,
    NoPlatformsDetected,
    PublishError,
    SourceMissing,
    TransferToolFailure,
)
from .types import (
    BuildEntry,
    ChannelTarget,
    DirectoryListing,
    PlatformSpec,
    PublishOptions,
    PublishOutcome,
    ScanResult,
)

__all__ = [
    "BuildEntry",
    "ChannelTarget",
    "ClassificationUnmatched",
    "ConfigurationInvalid",
    "DirectoryListing",
    "DirectoryNotFound",
    "NoPlatformsDetected",
    "PlatformSpec",
    "PublishError",
    "PublishOptions",
    "PublishOutcome",
    "ScanResult",
    "SourceMissing",
    "TransferToolFailure",
]
