"""Exception types raised by the starter-cli workflow."""

from __future__ import annotations


class StarterError(RuntimeError):
    """Base class for every error raised by starter-cli."""


class ConfigError(StarterError):
    """Raised when the requested template cannot be resolved."""


class MissingCustomTemplateError(ConfigError):
    """Raised when a custom template lacks its name or its url."""

    def __init__(self, message: str = "template name and template url are both required") -> None:
        super().__init__(message)


class UnknownTemplateError(ConfigError):
    """Raised when a template identifier is not part of the catalog."""

    def __init__(self, identifier: str) -> None:
        super().__init__(f"unknown template '{identifier}'")
        self.identifier = identifier


class InvalidTemplateNameError(ConfigError):
    """Raised when a custom template name is not a single folder name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"template name '{name}' must be a single folder name")
        self.name = name


class WorkflowError(StarterError):
    """Raised when a step of the project initialization fails."""


class CloneError(WorkflowError):
    """Raised when the template repository cannot be cloned."""


class LayoutMismatchError(WorkflowError):
    """Raised when the cloned template is not found where it was expected."""


class HistoryResetError(WorkflowError):
    """Raised when the cloned history cannot be replaced by a fresh commit."""


class InstallError(WorkflowError):
    """Raised when the dependency installer exits with a non-zero status."""

    def __init__(self, command: str) -> None:
        super().__init__(f"`{command}` failed")
        self.command = command


__all__ = [
    "CloneError",
    "ConfigError",
    "HistoryResetError",
    "InstallError",
    "InvalidTemplateNameError",
    "LayoutMismatchError",
    "MissingCustomTemplateError",
    "StarterError",
    "UnknownTemplateError",
    "WorkflowError",
]
