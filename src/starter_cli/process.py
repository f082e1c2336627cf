"""Execution of external processes."""

from __future__ import annotations

import logging
import shlex
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

__all__ = ["ProcessOutcome", "ProcessRunner", "SubprocessRunner", "format_command"]


LOGGER = logging.getLogger(__name__)

# Exit status reported by shells when an executable cannot be found.
COMMAND_NOT_FOUND = 127


def format_command(args: Sequence[str]) -> str:
    """Render ``args`` as a single shell-style command line."""

    return shlex.join(str(arg) for arg in args)


@dataclass(frozen=True, slots=True)
class ProcessOutcome:
    """Exit status and captured output of a finished process."""

    args: tuple[str, ...]
    exit_code: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_code == 0

    @property
    def command(self) -> str:
        return format_command(self.args)


class ProcessRunner(ABC):
    """Run external commands on behalf of the workflow steps."""

    @abstractmethod
    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> ProcessOutcome:
        """Run ``args`` to completion and capture its output."""

    @abstractmethod
    def spawn(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        """Run ``args`` with inherited standard streams and return its exit code."""


class SubprocessRunner(ProcessRunner):
    """:class:`ProcessRunner` backed by :func:`subprocess.run`."""

    def run(self, args: Sequence[str], *, cwd: Path | None = None) -> ProcessOutcome:
        argv = tuple(str(arg) for arg in args)
        LOGGER.debug("running %s (cwd=%s)", format_command(argv), cwd)
        try:
            result = subprocess.run(
                argv,
                cwd=cwd,
                capture_output=True,
                check=False,
                text=True,
            )
        except FileNotFoundError as exc:
            return ProcessOutcome(argv, COMMAND_NOT_FOUND, "", str(exc))
        return ProcessOutcome(argv, result.returncode, result.stdout, result.stderr)

    def spawn(self, args: Sequence[str], *, cwd: Path | None = None) -> int:
        argv = tuple(str(arg) for arg in args)
        LOGGER.debug("spawning %s (cwd=%s)", format_command(argv), cwd)
        try:
            completed = subprocess.run(argv, cwd=cwd, check=False)
        except FileNotFoundError:
            LOGGER.debug("%s is not installed", argv[0])
            return COMMAND_NOT_FOUND
        return completed.returncode
