"""Configuration shared by the project initializer and the CLI."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

__all__ = ["ProjectTarget", "Settings", "load_settings"]


DEFAULT_COMMIT_MESSAGE = "create front-end app"


@dataclass(frozen=True, slots=True)
class ProjectTarget:
    """Where a new project is created.

    Attributes
    ----------
    requested_name:
        The directory name exactly as the user typed it.
    resolved_path:
        ``requested_name`` resolved to an absolute path against the working
        directory at the time the target was built.
    base_name:
        Final segment of :attr:`resolved_path`. This is the name checked
        against the package naming rules.
    """

    requested_name: str
    resolved_path: Path
    base_name: str

    @classmethod
    def from_name(cls, name: str, *, cwd: str | Path | None = None) -> "ProjectTarget":
        """Build a :class:`ProjectTarget` for ``name``.

        Parameters
        ----------
        name:
            Relative or absolute directory requested by the user.
        cwd:
            Directory relative names are resolved against. Defaults to the
            process working directory.
        """

        if not name:
            raise ValueError("project directory must not be empty")

        base = Path(cwd) if cwd is not None else Path.cwd()
        resolved = (base / name).resolve()
        return cls(requested_name=name, resolved_path=resolved, base_name=resolved.name)


@dataclass(frozen=True, slots=True)
class Settings:
    """External tools and fixed values used while initializing a project."""

    git: str = "git"
    npm: str = "npm"
    node: str = "node"
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    min_node_major: int = 10
    log_level: str = "INFO"


def _log_level(value: str | None, default: str) -> str:
    level = (value or "").strip().upper()
    if level in logging.getLevelNamesMapping():
        return level
    return default


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Read :class:`Settings` overrides from ``STARTER_CLI_*`` variables."""

    env = os.environ if environ is None else environ
    defaults = Settings()
    return Settings(
        git=env.get("STARTER_CLI_GIT") or defaults.git,
        npm=env.get("STARTER_CLI_NPM") or defaults.npm,
        node=env.get("STARTER_CLI_NODE") or defaults.node,
        commit_message=env.get("STARTER_CLI_COMMIT_MESSAGE") or defaults.commit_message,
        log_level=_log_level(env.get("STARTER_CLI_LOG_LEVEL"), defaults.log_level),
    )
