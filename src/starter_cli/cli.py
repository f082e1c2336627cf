"""Command line interface for starter-cli."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Sequence

from rich.console import Console
from rich.table import Table

from . import __version__
from .catalog import CUSTOM_CHOICE, DEFAULT_CATALOG, DEFAULT_TEMPLATE, TemplateCatalog, TemplateSelection
from .config import ProjectTarget, Settings, load_settings
from .errors import ConfigError, MissingCustomTemplateError
from .initializer import ProjectInitializer, WorkflowState
from .prompt import InteractivePrompter

PROG = "starter-cli"

_LOG_FORMAT = "%(levelname)s %(message)s"


@dataclass(frozen=True, slots=True)
class CliArguments:
    """Parsed command line, passed explicitly through the workflow."""

    project_directory: str | None
    template: str
    template_name: str | None = None
    template_url: str | None = None
    interactive: bool = False
    list_templates: bool = False
    verbose: bool = False


def build_parser(catalog: TemplateCatalog = DEFAULT_CATALOG) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        usage="%(prog)s [project-directory] [options]",
        description="Create a new front-end project from a template repository",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Only [project-directory] is required.\n\n"
            f"And default option template is: <{DEFAULT_TEMPLATE}>"
        ),
    )
    parser.add_argument(
        "project_directory",
        metavar="project-directory",
        nargs="?",
        help="You set the root of your project directory",
    )
    parser.add_argument(
        "-t",
        "--template",
        default=DEFAULT_TEMPLATE,
        help=f"choose the template you have options: [{', '.join(catalog.choices())}]",
    )
    parser.add_argument("--template-name", help="Name of a custom template (implies --template custom)")
    parser.add_argument("--template-url", help="Repository url of a custom template")
    parser.add_argument(
        "-i",
        "--interactive",
        action="store_true",
        help="Always ask which template to use",
    )
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="Print the built-in templates and exit",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every external command")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def parse_arguments(parser: argparse.ArgumentParser, argv: Sequence[str] | None = None) -> CliArguments:
    args = parser.parse_args(argv)
    return CliArguments(
        project_directory=args.project_directory,
        template=args.template,
        template_name=args.template_name,
        template_url=args.template_url,
        interactive=args.interactive,
        list_templates=args.list_templates,
        verbose=args.verbose,
    )


def configure_logging(level: str | int) -> None:
    """Attach a stderr handler to the package logger once and set ``level``."""

    logger = logging.getLogger("starter_cli")
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)


def _print_missing_directory(console: Console) -> None:
    console.print("Please specify the project directory:")
    console.print(f"  [cyan]{PROG}[/cyan] [green]<project-directory>[/green]")
    console.print()
    console.print("For example:")
    console.print(f"  [cyan]{PROG}[/cyan] [green]my-project[/green]")
    console.print()
    console.print(f"Run [cyan]{PROG} --help[/cyan] to see all options.")


def _print_templates(console: Console, catalog: TemplateCatalog) -> None:
    table = Table(title="Templates")
    table.add_column("Name", style="green", no_wrap=True)
    table.add_column("Repository")
    for identifier, location in catalog.items():
        table.add_row(identifier, location)
    table.add_row(CUSTOM_CHOICE, "--template-name NAME --template-url URL")
    console.print(table)


def resolve_selection(
    args: CliArguments,
    catalog: TemplateCatalog,
    prompter: InteractivePrompter | None = None,
) -> TemplateSelection:
    """Resolve the template from the flags or, in interactive mode, the prompts."""

    if args.interactive:
        answers = (prompter or InteractivePrompter()).select_template(catalog)
        return catalog.resolve(answers.choice, answers.custom_name, answers.custom_url)

    choice = args.template
    if args.template_name or args.template_url:
        choice = CUSTOM_CHOICE
    return catalog.resolve(choice, args.template_name, args.template_url)


def main(
    argv: Sequence[str] | None = None,
    *,
    catalog: TemplateCatalog | None = None,
    settings: Settings | None = None,
    initializer: ProjectInitializer | None = None,
    prompter: InteractivePrompter | None = None,
) -> int:
    catalog = catalog or DEFAULT_CATALOG
    settings = settings or load_settings()
    parser = build_parser(catalog)
    args = parse_arguments(parser, argv)
    configure_logging(logging.DEBUG if args.verbose else settings.log_level)
    console = Console()

    if args.list_templates:
        _print_templates(console, catalog)
        return 0

    if args.project_directory is None or not args.project_directory.strip():
        _print_missing_directory(console)
        return 0

    try:
        selection = resolve_selection(args, catalog, prompter)
    except MissingCustomTemplateError:
        console.print("[yellow]Template name and template url are both required.[/yellow]")
        return 0
    except ConfigError as exc:
        parser.error(str(exc))

    target = ProjectTarget.from_name(args.project_directory)
    initializer = initializer or ProjectInitializer(settings)
    result = initializer.run(target, selection)
    if result.state is WorkflowState.ABORTED:
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
