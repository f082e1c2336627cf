"""Project initialization workflow."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from rich.console import Console

from .catalog import TemplateSelection
from .config import ProjectTarget, Settings
from .errors import WorkflowError
from .installer import DependencyInstaller, check_node_version
from .naming import check_app_name
from .process import ProcessRunner, SubprocessRunner
from .vcs import GitClient

__all__ = ["InitResult", "ProjectInitializer", "WorkflowState", "empty_directory"]


LOGGER = logging.getLogger(__name__)


class WorkflowState(str, Enum):
    """Steps of :meth:`ProjectInitializer.run` in execution order."""

    START = "start"
    NAME_VALIDATED = "name_validated"
    DIRECTORY_CREATED = "directory_created"
    VCS_PROBED = "vcs_probed"
    CLONED = "cloned"
    HISTORY_RESET = "history_reset"
    DEPENDENCIES_INSTALLING = "dependencies_installing"
    DONE = "done"
    VCS_UNAVAILABLE = "vcs_unavailable"
    ABORTED = "aborted"


@dataclass(frozen=True, slots=True)
class InitResult:
    """Terminal state of a workflow run.

    ``reached`` is the last state the run entered before stopping; for
    aborted runs ``error`` holds the failure raised from that point.
    """

    state: WorkflowState
    reached: WorkflowState
    target: ProjectTarget
    selection: TemplateSelection
    project_path: Path | None = None
    error: WorkflowError | None = None

    @property
    def ok(self) -> bool:
        return self.state is WorkflowState.DONE


def empty_directory(path: Path) -> None:
    """Remove every entry inside ``path`` while keeping ``path`` itself."""

    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            shutil.rmtree(child)
        else:
            child.unlink()


class ProjectInitializer:
    """Create a project directory from a template repository."""

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        runner: ProcessRunner | None = None,
        git: GitClient | None = None,
        installer: DependencyInstaller | None = None,
        console: Console | None = None,
        check_node: bool = True,
    ) -> None:
        self.settings = settings or Settings()
        self.runner = runner or SubprocessRunner()
        self.git = git or GitClient(self.runner, executable=self.settings.git)
        self.installer = installer or DependencyInstaller(self.runner, executable=self.settings.npm)
        self.console = console
        self.check_node = check_node

    def run(self, target: ProjectTarget, selection: TemplateSelection) -> InitResult:
        """Run every step for ``target`` using the ``selection`` template.

        An invalid project name terminates the process. A missing git client
        stops the run quietly in :attr:`WorkflowState.VCS_UNAVAILABLE`. Clone,
        history reset and install failures are logged and returned in the
        result rather than raised.
        """

        if self.check_node:
            check_node_version(
                self.runner,
                executable=self.settings.node,
                min_major=self.settings.min_node_major,
            )

        check_app_name(target.base_name, console=self.console)
        reached = WorkflowState.NAME_VALIDATED

        root = target.resolved_path
        root.mkdir(parents=True, exist_ok=True)
        reached = WorkflowState.DIRECTORY_CREATED
        LOGGER.info("Creating a new app in %s.", root)

        availability = self.git.probe()
        if not availability.available:
            LOGGER.debug("%s is unavailable, nothing cloned", self.git.executable)
            return InitResult(WorkflowState.VCS_UNAVAILABLE, reached, target, selection)
        reached = WorkflowState.VCS_PROBED
        LOGGER.info("%s", availability.version)
        LOGGER.info("now clone the template in %s....", target.requested_name)

        # Prior contents are discarded so the clone lands in an empty tree.
        empty_directory(root)
        project_path = root / selection.identifier
        LOGGER.info("cloning %s from %s", selection.identifier, selection.source_location)

        try:
            self.git.clone(selection.source_location, project_path)
            reached = WorkflowState.CLONED
            LOGGER.info("Downloading success!!!")

            self.git.reset_history(project_path, self.settings.commit_message)
            reached = WorkflowState.HISTORY_RESET
            LOGGER.info("Delete the origin git and add new git commit first time!!!")

            reached = WorkflowState.DEPENDENCIES_INSTALLING
            self.installer.install(project_path)
        except WorkflowError as exc:
            LOGGER.error("%s", exc)
            return InitResult(WorkflowState.ABORTED, reached, target, selection, project_path, exc)

        LOGGER.info("Project created at %s", project_path)
        return InitResult(WorkflowState.DONE, WorkflowState.DONE, target, selection, project_path)
