"""Per-channel publishing.

This module builds one butler push invocation per channel target and
runs it through an injected TransferRunner. Every target is attempted:
a failure is recorded as a PublishOutcome and the loop moves on.
"""

import sys
from collections.abc import Sequence

from .core.errors import PublishError, SourceMissing, TransferToolFailure
from .core.types import ChannelTarget, PublishOptions, PublishOutcome
from .transfer import DEFAULT_TOOL, TransferResult, TransferRunner, check_tool, run_subprocess


def format_command(args: Sequence[str]) -> str:
    """Render an invocation as a copy-pasteable shell line.

    The tool name, subcommand and --flags stay bare; every operand is
    double-quoted.

    Example:
        >>> format_command(["butler", "push", "build/web", "alice/game:html5"])
        'butler push "build/web" "alice/game:html5"'
    """
    rendered = list(args[:2])
    for arg in args[2:]:
        rendered.append(arg if arg.startswith("--") else f'"{arg}"')
    return " ".join(rendered)


class ChannelPublisher:
    """Pushes channel targets to a destination, one at a time.

    Example:
        >>> publisher = ChannelPublisher()
        >>> outcomes = publisher.publish(targets, "alice/mygame", PublishOptions(dry_run=True))
    """

    def __init__(self, runner: TransferRunner | None = None, tool: str = DEFAULT_TOOL):
        """Initialize the publisher.

        Args:
            runner: Callable that executes an argument list; defaults to
                running the tool as a subprocess
            tool: Transfer tool executable name
        """
        self.runner = runner or run_subprocess
        self.tool = tool

    def build_push_args(
        self,
        target: ChannelTarget,
        destination_id: str,
        options: PublishOptions,
    ) -> list[str]:
        """Build the argument list for pushing one target."""
        args = [
            self.tool,
            "push",
            str(target.source_path),
            f"{destination_id}:{target.channel_name}",
        ]

        if options.version:
            args += ["--userversion", options.version]

        for pattern in options.ignore_patterns:
            args += ["--ignore", pattern]

        return args

    def _run(self, args: list[str]) -> TransferResult:
        """Call the runner, folding any runner exception into TransferToolFailure."""
        try:
            return self.runner(args)
        except TransferToolFailure:
            raise
        except Exception as e:
            raise TransferToolFailure(f"{args[0]} {args[1]} failed: {e}") from e

    def build_status_args(self, destination_id: str) -> list[str]:
        return [self.tool, "status", destination_id]

    def command_lines(
        self,
        targets: Sequence[ChannelTarget],
        destination_id: str,
        options: PublishOptions,
    ) -> list[str]:
        """Every push line for targets followed by the status line, without running anything."""
        lines = [
            format_command(self.build_push_args(target, destination_id, options))
            for target in targets
        ]
        lines.append(format_command(self.build_status_args(destination_id)))
        return lines

    def check_tool(self) -> str:
        """Return the transfer tool's version, raising if it is unavailable."""
        return check_tool(self.runner, self.tool)

    def publish(
        self,
        targets: Sequence[ChannelTarget],
        destination_id: str,
        options: PublishOptions,
    ) -> list[PublishOutcome]:
        """Push every target and collect one outcome per target.

        Args:
            targets: Channel targets, already in publish order
            destination_id: Remote project, e.g. 'user/game'
            options: Version, dry-run flag and ignore patterns

        Returns:
            Outcomes in the same order as targets
        """
        if options.dry_run:
            print("DRY RUN MODE - no actual uploads", file=sys.stderr)

        outcomes: list[PublishOutcome] = []
        for target in targets:
            try:
                self.push_channel(target, destination_id, options)
            except PublishError as e:
                print(f"Failed to push {target.channel_name}: {e}", file=sys.stderr)
                outcomes.append(PublishOutcome.failure(target.channel_name, e))
                continue

            outcomes.append(PublishOutcome.success(target.channel_name))

        return outcomes

    def push_channel(
        self,
        target: ChannelTarget,
        destination_id: str,
        options: PublishOptions,
    ) -> None:
        """Push a single target.

        Raises:
            SourceMissing: If the source directory no longer exists
            TransferToolFailure: If the tool fails or cannot be started
        """
        if not target.source_path.exists():
            raise SourceMissing(f"Source path not found: {target.source_path}")

        args = self.build_push_args(target, destination_id, options)

        if options.dry_run:
            print(format_command(args))
            return

        print(f"Pushing {target.channel_name} from {target.source_path}...", file=sys.stderr)
        result = self._run(args)
        if not result.ok:
            raise TransferToolFailure(result.error_text())

        print(f"{target.channel_name} uploaded successfully", file=sys.stderr)

    def check_status(self, destination_id: str, dry_run: bool = False) -> bool:
        """Show or run the post-upload status query.

        Failures are reported on stderr and never raised.

        Returns:
            True if the status query ran cleanly (always True in dry-run)
        """
        args = self.build_status_args(destination_id)

        if dry_run:
            print(format_command(args))
            return True

        print(f"Checking status for {destination_id}...", file=sys.stderr)
        try:
            result = self._run(args)
        except TransferToolFailure as e:
            print(f"Warning: Status check failed: {e}", file=sys.stderr)
            return False

        if not result.ok:
            print(f"Warning: Status check failed: {result.error_text()}", file=sys.stderr)
            return False

        if result.stdout.strip():
            print(result.stdout.rstrip(), file=sys.stderr)
        return True
