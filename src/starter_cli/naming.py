"""Package name validation following the npm registry naming rules."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator
from urllib.parse import quote

from rich.console import Console
from rich.markup import escape

__all__ = ["NameValidation", "check_app_name", "validate_package_name"]


MAX_NAME_LENGTH = 214

_BLACKLIST = ("node_modules", "favicon.ico")

# Modules shipped with node itself; npm refuses new packages shadowing them.
_CORE_MODULES = frozenset(
    {
        "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
        "constants", "crypto", "dgram", "dns", "domain", "events", "fs", "http",
        "http2", "https", "inspector", "module", "net", "os", "path", "perf_hooks",
        "process", "punycode", "querystring", "readline", "repl", "stream",
        "string_decoder", "sys", "timers", "tls", "trace_events", "tty", "url",
        "util", "v8", "vm", "wasi", "worker_threads", "zlib",
    }
)

_SCOPED_PACKAGE = re.compile(r"^(?:@([^/]+?)/)?([^/]+?)$")
_SPECIAL_CHARACTERS = re.compile(r"[~'!()*]")
# Characters left untouched by JavaScript's encodeURIComponent.
_URL_SAFE = "-_.!~*'()"


def _is_url_friendly(value: str) -> bool:
    try:
        return quote(value, safe=_URL_SAFE) == value
    except UnicodeEncodeError:
        # Undecodable command line bytes arrive as lone surrogates.
        return False


@dataclass(slots=True)
class NameValidation:
    """Outcome of :func:`validate_package_name`.

    ``errors`` make a name unusable for any package while ``warnings`` only
    rule it out for newly published ones.
    """

    name: str
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid_for_new_packages(self) -> bool:
        return not self.errors and not self.warnings

    @property
    def valid_for_old_packages(self) -> bool:
        return not self.errors

    @property
    def problems(self) -> Iterator[str]:
        """Yield every violation, errors first."""

        yield from self.errors
        yield from self.warnings


def validate_package_name(name: object) -> NameValidation:
    """Check ``name`` against the rules a package registry applies."""

    if not isinstance(name, str):
        return NameValidation(name=repr(name), errors=["name must be a string"])

    result = NameValidation(name=name)
    errors = result.errors
    warnings = result.warnings

    if not name:
        errors.append("name length must be greater than zero")
    if name.startswith("."):
        errors.append("name cannot start with a period")
    if name.startswith("_"):
        errors.append("name cannot start with an underscore")
    if name.strip() != name:
        errors.append("name cannot contain leading or trailing spaces")

    lowered = name.lower()
    for blacklisted in _BLACKLIST:
        if lowered == blacklisted:
            errors.append(f"{blacklisted} is a blacklisted name")

    if lowered in _CORE_MODULES:
        warnings.append(f"{lowered} is a core module name")
    if len(name) > MAX_NAME_LENGTH:
        warnings.append(f"name can no longer contain more than {MAX_NAME_LENGTH} characters")
    if lowered != name:
        warnings.append("name can no longer contain capital letters")
    if _SPECIAL_CHARACTERS.search(name.split("/")[-1]):
        warnings.append("name can no longer contain special characters (\"~'!()*\")")

    if not _is_url_friendly(name):
        match = _SCOPED_PACKAGE.match(name)
        scoped_ok = (
            match is not None
            and match.group(1) is not None
            and _is_url_friendly(match.group(1))
            and _is_url_friendly(match.group(2))
        )
        if not scoped_ok:
            errors.append("name can only contain URL-friendly characters")

    return result


def check_app_name(name: str, *, console: Console | None = None) -> None:
    """Validate ``name`` and terminate the process when it cannot be used.

    The violations are reported on standard error before raising
    ``SystemExit(1)``; no project can be created under an invalid name.
    """

    result = validate_package_name(name)
    if result.valid_for_new_packages:
        return

    out = console or Console(stderr=True)
    out.print(
        f"[red]Cannot create a project named [green]\"{escape(name)}\"[/green] "
        "because of npm naming restrictions:[/red]\n"
    )
    for problem in result.problems:
        out.print(f"[red]  * {escape(problem)}[/red]")
    out.print("[red]\nPlease choose a different project name.[/red]")
    raise SystemExit(1)
