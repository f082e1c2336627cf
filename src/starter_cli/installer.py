"""Dependency installation for freshly cloned projects."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .errors import InstallError
from .process import ProcessRunner, SubprocessRunner, format_command

__all__ = ["DependencyInstaller", "NodeCheck", "check_node_version"]


LOGGER = logging.getLogger(__name__)

INSTALL_ARGS = ("install", "--save", "--loglevel", "error")

_NODE_VERSION = re.compile(r"v?(\d+)\.(\d+)\.(\d+)")


class DependencyInstaller:
    """Run ``npm install`` inside a project directory.

    The installer shares the terminal with the user; its output is never
    captured, so a failure only reports the command that was attempted.
    """

    def __init__(self, runner: ProcessRunner | None = None, *, executable: str = "npm") -> None:
        self._runner = runner or SubprocessRunner()
        self._executable = executable

    def command(self, dependencies: Iterable[str] = ()) -> list[str]:
        return [self._executable, *INSTALL_ARGS, *dependencies]

    def install(self, project_path: str | Path, dependencies: Iterable[str] = ()) -> None:
        """Install the dependencies declared by the project at ``project_path``.

        Raises
        ------
        InstallError
            The installer exited with a non-zero status.
        """

        args = self.command(dependencies)
        LOGGER.info("Install dependencies....")
        exit_code = self._runner.spawn(args, cwd=Path(project_path))
        if exit_code != 0:
            raise InstallError(format_command(args))


@dataclass(frozen=True, slots=True)
class NodeCheck:
    """Parsed ``node --version`` output."""

    raw: str
    major: int | None

    def satisfies(self, min_major: int) -> bool:
        return self.major is not None and self.major >= min_major


def check_node_version(
    runner: ProcessRunner | None = None,
    *,
    executable: str = "node",
    min_major: int = 10,
) -> NodeCheck:
    """Warn when the local node runtime is older than ``min_major``.

    The check never fails the caller; an unknown or missing runtime only
    produces a warning.
    """

    outcome = (runner or SubprocessRunner()).run([executable, "--version"])
    raw = outcome.stdout.strip()
    match = _NODE_VERSION.search(raw) if outcome.ok else None
    check = NodeCheck(raw, int(match.group(1)) if match else None)

    if not check.satisfies(min_major):
        LOGGER.warning(
            "You are using Node %s so the project will be bootstrapped with an old "
            "unsupported version of tools. Please update to Node %d or higher for a "
            "better, fully supported experience.",
            raw or "(not found)",
            min_major,
        )
    return check
