"""Interactive template selection."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console
from rich.prompt import Prompt

from .catalog import CUSTOM_CHOICE, TemplateCatalog

__all__ = ["InteractivePrompter", "TemplateAnswers"]


@dataclass(frozen=True, slots=True)
class TemplateAnswers:
    """Raw answers collected by :class:`InteractivePrompter`."""

    choice: str
    custom_name: str = ""
    custom_url: str = ""


class InteractivePrompter:
    """Ask the user which template to start from."""

    def __init__(self, console: Console | None = None, *, prompt: type[Prompt] = Prompt) -> None:
        self.console = console or Console()
        self._prompt = prompt

    def ask(
        self,
        question: str,
        *,
        choices: list[str] | None = None,
        default: str | None = None,
        show_default: bool = True,
    ) -> str:
        answer = self._prompt.ask(
            question,
            console=self.console,
            choices=choices,
            default=default,
            show_default=show_default,
        )
        return str(answer or "").strip()

    def select_template(self, catalog: TemplateCatalog) -> TemplateAnswers:
        """Present the catalog plus ``custom`` and collect the answers.

        Blank custom answers are returned as empty strings; deciding what to
        do about them is left to the caller.
        """

        choices = catalog.choices()
        choice = self.ask("Which template do you want to use?", choices=choices, default=choices[0])
        if choice != CUSTOM_CHOICE:
            return TemplateAnswers(choice=choice)

        name = self.ask("Template name", default="", show_default=False)
        url = self.ask("Template url", default="", show_default=False)
        return TemplateAnswers(choice=choice, custom_name=name, custom_url=url)
