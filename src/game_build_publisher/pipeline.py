"""Publish pipeline.

This module provides the main interface for publishing a build root:
scan, derive channel targets, push each channel, summarize, and run the
post-upload status check.
"""

import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

from .core.errors import NoPlatformsDetected
from .core.types import ChannelTarget, PublishOptions, PublishOutcome, ScanResult
from .engines.base import EngineProfile
from .publisher import ChannelPublisher
from .registry import EngineRegistry
from .report import PublishSummary, render_summary, summarize
from .scanner import scan_build_root, targets_from_scan


@dataclass
class PipelineResult:
    """Everything one pipeline run produced."""

    outcomes: list[PublishOutcome]
    summary: PublishSummary
    scan: ScanResult | None = None
    status_ok: bool = True
    targets: list[ChannelTarget] = field(default_factory=list)

    def exit_code(self, allow_partial: bool = False) -> int:
        """Process exit status for this run.

        Any failed channel makes the run exit 1 unless allow_partial is
        set, in which case partial failure exits 0 as long as at least
        one channel went through. A failed status check never changes it.
        """
        if self.summary.failed_count == 0:
            return 0
        if allow_partial and self.summary.succeeded_count > 0:
            return 0
        return 1


class PublishPipeline:
    """Scan a build root and publish every detected platform.

    Example:
        >>> pipeline = PublishPipeline(EngineRegistry.get_profile('godot'))
        >>> result = pipeline.run(Path('./build'), 'alice/mygame', PublishOptions(dry_run=True))
        >>> result.summary.succeeded_count
        2
    """

    def __init__(
        self,
        profile: EngineProfile | None = None,
        publisher: ChannelPublisher | None = None,
    ):
        """Initialize the pipeline.

        Args:
            profile: Engine profile used to classify builds
            publisher: Channel publisher; defaults to one running butler
        """
        self.profile = profile or EngineRegistry.get_profile()
        self.publisher = publisher or ChannelPublisher()

    def scan(self, build_root: Path) -> tuple[ScanResult, list[ChannelTarget]]:
        """Scan a build root and derive its channel targets.

        Raises:
            DirectoryNotFound: If build_root does not exist
            NoPlatformsDetected: If no directory was classified
        """
        print(f"Scanning: {build_root}", file=sys.stderr)
        scan = scan_build_root(build_root, self.profile)

        if not scan.matched:
            raise NoPlatformsDetected(f"No {self.profile.name} exports detected in {build_root}")

        print(f"Found {len(scan.matched)} platform(s)", file=sys.stderr)
        return scan, targets_from_scan(scan, self.profile)

    def run(self, build_root: Path, destination_id: str, options: PublishOptions) -> PipelineResult:
        """Scan build_root and publish every matched platform to destination_id."""
        scan, targets = self.scan(build_root)
        result = self.run_targets(targets, destination_id, options)
        result.scan = scan
        return result

    def run_targets(
        self,
        targets: Sequence[ChannelTarget],
        destination_id: str,
        options: PublishOptions,
    ) -> PipelineResult:
        """Publish explicit targets, print the summary and check status.

        Raises:
            TransferToolFailure: If a real (non dry-run) run finds no transfer tool
        """
        if not options.dry_run:
            version = self.publisher.check_tool()
            print(f"{self.publisher.tool} version: {version}", file=sys.stderr)

        outcomes = self.publisher.publish(targets, destination_id, options)
        summary = summarize(outcomes)

        print("", file=sys.stderr)
        print(render_summary(summary), file=sys.stderr)

        status_ok = self.publisher.check_status(destination_id, dry_run=options.dry_run)

        return PipelineResult(
            outcomes=outcomes,
            summary=summary,
            status_ok=status_ok,
            targets=list(targets),
        )
