"""Built-in template catalog and resolution of a user's template choice."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from pathlib import PurePosixPath, PureWindowsPath
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidTemplateNameError, MissingCustomTemplateError, UnknownTemplateError

__all__ = [
    "CUSTOM_CHOICE",
    "DEFAULT_CATALOG",
    "DEFAULT_TEMPLATE",
    "TemplateCatalog",
    "TemplateSelection",
]


CUSTOM_CHOICE = "custom"
DEFAULT_TEMPLATE = "react-starter"


def _is_single_segment(name: str) -> bool:
    if name in (".", "..") or "/" in name or "\\" in name:
        return False
    return not (PurePosixPath(name).is_absolute() or PureWindowsPath(name).drive)


class TemplateSelection(BaseModel):
    """A template identifier paired with the repository it is cloned from."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    identifier: str = Field(..., min_length=1, description="Name of the template and of its cloned folder.")
    source_location: str = Field(..., min_length=1, description="Repository location handed to git clone.")


class TemplateCatalog(Mapping[str, str]):
    """Ordered, read-only mapping of template identifiers to repositories.

    Iteration order is the order in which templates are offered to the user.
    """

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: Mapping[str, str] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, identifier: str) -> str:
        return self._entries[identifier]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"TemplateCatalog({dict(self._entries)!r})"

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def choices(self) -> list[str]:
        """Return the menu entries: every catalog key followed by ``custom``."""

        return [*self._entries, CUSTOM_CHOICE]

    def resolve(
        self,
        choice: str,
        custom_name: str | None = None,
        custom_url: str | None = None,
    ) -> TemplateSelection:
        """Turn a menu choice into a :class:`TemplateSelection`.

        Raises
        ------
        MissingCustomTemplateError
            ``choice`` is ``custom`` and either custom value is blank.
        InvalidTemplateNameError
            The custom name would not name a folder directly inside the
            project directory.
        UnknownTemplateError
            ``choice`` is neither a catalog key nor ``custom``.
        """

        if choice in self._entries:
            return TemplateSelection(identifier=choice, source_location=self._entries[choice])

        if choice == CUSTOM_CHOICE:
            name = (custom_name or "").strip()
            url = (custom_url or "").strip()
            if not name or not url:
                raise MissingCustomTemplateError()
            if not _is_single_segment(name):
                raise InvalidTemplateNameError(name)
            return TemplateSelection(identifier=name, source_location=url)

        raise UnknownTemplateError(choice)


DEFAULT_CATALOG = TemplateCatalog(
    {
        DEFAULT_TEMPLATE: "https://github.com/webpack/react-starter.git",
    }
)
