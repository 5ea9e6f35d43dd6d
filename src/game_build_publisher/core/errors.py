"""Exception hierarchy for scanning and publishing.

Structural failures (missing build root, bad config, nothing detected) are
raised to the caller. Per-channel failures are raised inside the publisher
and converted into PublishOutcome records there.
"""


class PublishError(Exception):
    """Base class for every error this package raises."""


class DirectoryNotFound(PublishError):
    """The build root (or another required directory) does not exist."""


class ClassificationUnmatched(PublishError):
    """A directory matched no platform signature or name hint."""


class SourceMissing(PublishError):
    """A matched source path vanished between scan and publish."""


class TransferToolFailure(PublishError):
    """The transfer tool exited non-zero or could not be started."""


class ConfigurationInvalid(PublishError):
    """The publish configuration is missing or malformed."""


class NoPlatformsDetected(PublishError):
    """A scan finished without classifying a single directory."""
