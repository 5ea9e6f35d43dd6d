"""Transfer tool invocation.

The publisher never starts processes itself; it is handed a runner, a
callable taking an argument list and returning a TransferResult. The
default runner executes the butler CLI as a subprocess. Tests pass a
fake runner instead.
"""

import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable

from .core.errors import TransferToolFailure

DEFAULT_TOOL = "butler"
BUTLER_INSTALL_URL = "https://itch.io/docs/butler/"


@dataclass(frozen=True)
class TransferResult:
    """Exit status and captured output of one transfer tool run."""

    returncode: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    def error_text(self) -> str:
        """Best available explanation for a failed run."""
        return self.stderr.strip() or self.stdout.strip() or f"exit code {self.returncode}"


TransferRunner = Callable[[Sequence[str]], TransferResult]


def run_subprocess(args: Sequence[str]) -> TransferResult:
    """Run the transfer tool and wait for it to finish.

    No timeout is applied; a hung tool blocks the caller.

    Raises:
        TransferToolFailure: If the executable cannot be started
    """
    try:
        completed = subprocess.run(list(args), capture_output=True, text=True)
    except OSError as e:
        raise TransferToolFailure(f"Could not start {args[0]}: {e}") from e

    return TransferResult(
        returncode=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def check_tool(runner: TransferRunner = run_subprocess, tool: str = DEFAULT_TOOL) -> str:
    """Confirm the transfer tool is installed and return its version string.

    Raises:
        TransferToolFailure: If the tool is missing or its version check fails
    """
    try:
        result = runner([tool, "-v"])
    except TransferToolFailure as e:
        raise TransferToolFailure(f"{tool} not found. Install from {BUTLER_INSTALL_URL}") from e

    if not result.ok:
        raise TransferToolFailure(f"{tool} -v failed: {result.error_text()}")

    # butler prints its version on stderr in some releases
    output = result.stdout.strip() or result.stderr.strip()
    return output.splitlines()[0] if output else ""
