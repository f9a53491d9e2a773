"""Bounded subprocess invocation.

Provides:
- CommandResult: outcome of one external program invocation
- CommandRunner: the callable shape providers depend on
- run_external_program(): spawn a program with a capped stdout buffer
- git_runner(): CommandRunner bound to a git executable
"""

from __future__ import annotations

import logging
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from coverage_uploader.constants import DEFAULT_GIT_EXECUTABLE, SPAWN_PROCESS_BUFFER_SIZE

logger = logging.getLogger(__name__)

MAX_BUFFER_EXCEEDED = "stdout maxBuffer length exceeded"

# Only the tail of stderr is kept for error messages.
_STDERR_TAIL = 4096


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a single external program invocation.

    Attributes:
        stdout: Decoded standard output (possibly truncated on overflow).
        error: Set when the program could not start, exited non-zero,
            or overflowed the output buffer.
        returncode: Exit status, or ``None`` if the program never started.
    """

    stdout: str = ""
    error: str | None = None
    returncode: int | None = None

    @property
    def started(self) -> bool:
        """True if the executable was found and launched."""
        return self.returncode is not None


CommandRunner = Callable[[Sequence[str]], CommandResult]


def run_external_program(
    program: str,
    args: Sequence[str],
    *,
    max_buffer: int = SPAWN_PROCESS_BUFFER_SIZE,
    cwd: Path | None = None,
) -> CommandResult:
    """Run ``program`` with ``args`` and capture at most ``max_buffer`` bytes of stdout.

    Args:
        program: Executable name or path
        args: Arguments passed after the program name
        max_buffer: Maximum number of stdout bytes to accept
        cwd: Working directory for the child process

    Returns:
        CommandResult describing the invocation; never raises for
        spawn or exit failures.
    """
    cmd = [program, *args]
    logger.debug("Running %s", cmd)

    with tempfile.TemporaryFile() as stderr_file:
        try:
            proc = subprocess.Popen(
                cmd,
                cwd=cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=stderr_file,
            )
        except OSError as e:
            logger.debug("Unable to start %s: %s", program, e)
            return CommandResult(error=str(e))

        with proc:
            assert proc.stdout is not None
            raw = proc.stdout.read(max_buffer + 1)
            if len(raw) > max_buffer:
                proc.kill()
                proc.wait()
                logger.debug("%s exceeded %d bytes of output", cmd, max_buffer)
                return CommandResult(
                    stdout=_decode(raw[:max_buffer]),
                    error=MAX_BUFFER_EXCEEDED,
                    returncode=proc.returncode,
                )
            returncode = proc.wait()

        stdout = _decode(raw)
        if returncode != 0:
            size = stderr_file.seek(0, 2)
            stderr_file.seek(max(0, size - _STDERR_TAIL))
            stderr = _decode(stderr_file.read()).strip()
            error = stderr or f"exited with status {returncode}"
            logger.debug("%s failed (%d): %s", cmd, returncode, error)
            return CommandResult(stdout=stdout, error=error, returncode=returncode)

    return CommandResult(stdout=stdout, returncode=returncode)


def git_runner(
    executable: str = DEFAULT_GIT_EXECUTABLE,
    max_buffer: int = SPAWN_PROCESS_BUFFER_SIZE,
    cwd: Path | None = None,
) -> CommandRunner:
    """Return a CommandRunner that invokes ``executable`` with the given arguments."""

    def run(args: Sequence[str]) -> CommandResult:
        return run_external_program(executable, args, max_buffer=max_buffer, cwd=cwd)

    return run


def _decode(raw: bytes) -> str:
    return raw.decode("utf-8", errors="replace")
