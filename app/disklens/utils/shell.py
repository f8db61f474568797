"""Helpers for the external tools disklens launches.

The only tools launched are host folder dialogs, which block until the
user answers and report the answer on stdout.
"""

import logging
import shlex
import shutil
import subprocess
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of an external tool.

    Attributes:
        stdout: Standard output from the tool.
        stderr: Standard error from the tool.
        returncode: Exit code of the tool.
    """

    stdout: str
    stderr: str
    returncode: int

    @property
    def success(self) -> bool:
        """Check if the tool exited with code 0."""
        return self.returncode == 0

    @property
    def answer(self) -> str | None:
        """The tool's reply with surrounding whitespace removed, or None if empty."""
        return self.stdout.strip() or None


def run_command(args: list[str], *, timeout: float | None = None) -> CommandResult:
    """Launch a tool and wait for it to exit.

    Dialogs wait on the user, so there is no timeout unless one is given.

    Args:
        args: Command and arguments to execute.
        timeout: Seconds to wait, or None to wait until the tool exits.

    Returns:
        CommandResult with stdout, stderr and returncode.

    Raises:
        subprocess.TimeoutExpired: If a timeout was given and exceeded.
        FileNotFoundError: If the executable is not found.
    """
    logger.debug("Running %s", shlex.join(args))
    result = subprocess.run(
        args,
        capture_output=True,
        text=True,
        check=False,
        timeout=timeout,
    )
    if result.returncode != 0 and result.stderr:
        logger.debug("%s exited with %d: %s", args[0], result.returncode, result.stderr.strip())
    return CommandResult(
        stdout=result.stdout,
        stderr=result.stderr,
        returncode=result.returncode,
    )


def command_exists(name: str) -> bool:
    """Check if a tool is on PATH."""
    return shutil.which(name) is not None
