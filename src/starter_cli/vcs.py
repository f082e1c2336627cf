"""Git operations: availability probe, clone and history reset."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from .errors import CloneError, HistoryResetError, LayoutMismatchError
from .process import ProcessOutcome, ProcessRunner, SubprocessRunner

__all__ = ["GitClient", "ToolAvailability", "VERSION_MARKER"]


LOGGER = logging.getLogger(__name__)

VERSION_MARKER = "git version"


@dataclass(frozen=True, slots=True)
class ToolAvailability:
    """Result of probing for the git client.

    ``warning`` holds anything the client wrote on its diagnostic stream,
    which does not by itself make the tool unavailable.
    """

    available: bool
    version: str = ""
    warning: str = ""

    @classmethod
    def from_outcome(cls, outcome: ProcessOutcome) -> "ToolAvailability":
        warning = outcome.stderr.strip()
        stdout = outcome.stdout.strip()
        if VERSION_MARKER in stdout:
            return cls(available=True, version=stdout, warning=warning)
        return cls(available=False, warning=warning)


def _describe_failure(outcome: ProcessOutcome) -> str:
    detail = outcome.stderr.strip() or outcome.stdout.strip()
    message = f"`{outcome.command}` exited with status {outcome.exit_code}"
    return f"{message}: {detail}" if detail else message


class GitClient:
    """Thin wrapper running git through a :class:`ProcessRunner`."""

    def __init__(self, runner: ProcessRunner | None = None, *, executable: str = "git") -> None:
        self._runner = runner or SubprocessRunner()
        self._executable = executable

    @property
    def executable(self) -> str:
        return self._executable

    def probe(self) -> ToolAvailability:
        """Query ``git --version`` and report whether git can be used."""

        availability = ToolAvailability.from_outcome(self._runner.run([self._executable, "--version"]))
        if availability.warning:
            LOGGER.warning("%s", availability.warning)
        return availability

    def clone(self, source_location: str, destination: Path) -> Path:
        """Clone ``source_location`` into ``destination``.

        ``destination`` must not exist yet or be empty; its parent is used as
        the working directory of the clone.
        """

        outcome = self._runner.run(
            [self._executable, "clone", source_location, destination.name],
            cwd=destination.parent,
        )
        if not outcome.ok:
            raise CloneError(_describe_failure(outcome))
        if not destination.is_dir():
            raise LayoutMismatchError(f"expected the cloned template at {destination}")
        return destination

    def reset_history(self, project_path: Path, message: str) -> None:
        """Replace the history of ``project_path`` with a single commit."""

        if not project_path.is_dir():
            raise LayoutMismatchError(f"{project_path} is not a directory")

        metadata = project_path / ".git"
        try:
            if metadata.is_dir():
                shutil.rmtree(metadata)
            elif metadata.exists():
                metadata.unlink()
        except OSError as exc:
            raise HistoryResetError(f"cannot remove {metadata}: {exc}") from exc

        for args in (
            [self._executable, "init"],
            [self._executable, "add", "."],
            [self._executable, "commit", "-m", message],
        ):
            outcome = self._runner.run(args, cwd=project_path)
            if not outcome.ok:
                raise HistoryResetError(_describe_failure(outcome))
