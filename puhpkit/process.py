"""Run external programs and capture their exit code and output."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass
from typing import Sequence

# Exit code reported when a program could not be started at all.
EXIT_NOT_EXECUTABLE = 127


@dataclass
class ExecutionResult:
    """Exit code and captured output of a finished program."""

    code: int = -1
    stdout: str = ""
    stderr: str = ""


class Process:
    """Starts programs with piped standard streams."""

    def execute(self, args: Sequence[str], stdin: str = "") -> ExecutionResult:
        """Run ``args`` (program name first), feed it ``stdin`` and wait for it.

        A program that cannot be started yields a non-zero exit code and an
        explanation on ``stderr`` rather than an exception.
        """
        argv = list(args)
        if not argv:
            raise ValueError("Process.execute() - Cannot execute an empty argument list")
        try:
            completed = subprocess.run(
                argv,
                input=stdin,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            return ExecutionResult(
                code=EXIT_NOT_EXECUTABLE,
                stdout="",
                stderr=f"Process.execute() - Failed to execute {argv[0]!r}: {exc}",
            )
        return ExecutionResult(
            code=completed.returncode,
            stdout=completed.stdout or "",
            stderr=completed.stderr or "",
        )

    def program_exists(self, name: str) -> bool:
        """True if ``name`` can be found as an executable program."""
        return shutil.which(name) is not None