"""Publish summary rendering."""

from collections.abc import Sequence
from dataclasses import dataclass, field

from .core.types import PublishOutcome


@dataclass(frozen=True)
class PublishSummary:
    """Counts plus one printable line per attempted channel."""

    succeeded_count: int
    failed_count: int
    lines: list[str] = field(default_factory=list)

    @property
    def all_succeeded(self) -> bool:
        return self.failed_count == 0


def describe_outcome(outcome: PublishOutcome) -> str:
    if outcome.succeeded:
        return f"{outcome.channel_name}: OK"
    return f"{outcome.channel_name}: FAILED ({outcome.error_kind}: {outcome.error_message})"


def summarize(outcomes: Sequence[PublishOutcome]) -> PublishSummary:
    """Project outcomes into a summary, keeping their order.

    Args:
        outcomes: One outcome per attempted channel

    Returns:
        PublishSummary with success/failure counts and report lines
    """
    succeeded = sum(1 for outcome in outcomes if outcome.succeeded)
    return PublishSummary(
        succeeded_count=succeeded,
        failed_count=len(outcomes) - succeeded,
        lines=[describe_outcome(outcome) for outcome in outcomes],
    )


def render_summary(summary: PublishSummary) -> str:
    """Format a summary as the block printed at the end of a run."""
    total = summary.succeeded_count + summary.failed_count
    return "\n".join(
        [
            "=== SUMMARY ===",
            *summary.lines,
            f"{summary.succeeded_count}/{total} channel(s) published",
        ]
    )
