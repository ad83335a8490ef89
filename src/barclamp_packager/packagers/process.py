"""External process adapter for the native build tools."""

import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.errors import BuildError


@runtime_checkable
class ProcessRunner(Protocol):
    """Runs a command in a working directory and returns its exit status."""

    def run(self, command: Sequence[str], working_dir: Path) -> int:
        ...


class SubprocessRunner:
    """ProcessRunner backed by subprocess.

    The child inherits stdout and stderr, so build tool output goes
    straight to the terminal. The parent's working directory is left
    unchanged.
    """

    def run(self, command: Sequence[str], working_dir: Path) -> int:
        """Run command in working_dir.

        Returns:
            The command's exit status. A command killed by signal N is
            reported as 128 + N, like a shell does.

        Raises:
            BuildError: If the command cannot be started
        """
        try:
            result = subprocess.run(list(command), cwd=working_dir, check=False)
        except OSError as e:
            raise BuildError(f"Unable to run {command[0]}: {e}") from e

        if result.returncode < 0:
            return 128 - result.returncode
        return result.returncode
