"""Bootstrap new front-end projects from template repositories.

The package validates the requested project name, clones a template
repository into the new project directory, replaces the template's history
with a single fresh commit and installs its dependencies. Everything is
usable programmatically and through the ``starter-cli`` command.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .catalog import DEFAULT_CATALOG, TemplateCatalog, TemplateSelection
from .config import ProjectTarget, Settings, load_settings
from .errors import (
    CloneError,
    ConfigError,
    HistoryResetError,
    InstallError,
    InvalidTemplateNameError,
    LayoutMismatchError,
    MissingCustomTemplateError,
    StarterError,
    UnknownTemplateError,
    WorkflowError,
)
from .initializer import InitResult, ProjectInitializer, WorkflowState
from .installer import DependencyInstaller, check_node_version
from .naming import NameValidation, check_app_name, validate_package_name
from .vcs import GitClient, ToolAvailability

__all__ = [
    "CloneError",
    "ConfigError",
    "DEFAULT_CATALOG",
    "DependencyInstaller",
    "GitClient",
    "HistoryResetError",
    "InitResult",
    "InstallError",
    "InvalidTemplateNameError",
    "LayoutMismatchError",
    "MissingCustomTemplateError",
    "NameValidation",
    "ProjectInitializer",
    "ProjectTarget",
    "Settings",
    "StarterError",
    "TemplateCatalog",
    "TemplateSelection",
    "ToolAvailability",
    "UnknownTemplateError",
    "WorkflowError",
    "WorkflowState",
    "check_app_name",
    "check_node_version",
    "load_settings",
    "validate_package_name",
]
