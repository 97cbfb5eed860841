"""
cli.py

Responsibility: CLI entrypoint for relnote.

High-level flow (single command):
1) Resolve identifier/category -> `Resolution`
2) Run the guard chain (target folder, legacy artifact, git query, final artifact)
3) Render the category template into the patch folder

This module should orchestrate behavior but keep concerns isolated:
- Settings: `config.py`
- Resolution: `resolver.py`
- Guards: `guards.py`
- git: `git_client.py`
- Rendering: `renderer.py`
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable

from rich.logging import RichHandler

from relnote.config import Settings, load_settings
from relnote.console import Console
from relnote.errors import RelnoteError
from relnote.git_client import GitClient, HistorySource
from relnote.guards import run_guards
from relnote.renderer import RenderResult, render
from relnote.resolver import DERIVABLE, Category, resolve

logger = logging.getLogger(__name__)

PostRunHook = Callable[[int], None]


def usage_text() -> str:
    categories = "\n".join(f"  {c.value:<10} placeholder {c.placeholder}" for c in Category)
    derivable = "/".join(c.value for c in DERIVABLE)
    return (
        "Usage: relnote IDENTIFIER [CATEGORY]\n"
        "\n"
        "Create <IDENTIFIER>/<IDENTIFIER>.md from _Templates/<CATEGORY>.\n"
        "\n"
        "Recognized categories:\n"
        f"{categories}\n"
        "\n"
        f"{derivable} identifiers may omit CATEGORY; it is taken from the text\n"
        "before the first '-' (e.g. HOTFIX-12.11.0.9).\n"
    )


def _configure_logging(settings: Settings) -> None:
    """Attach one RichHandler to the `relnote` logger; the root logger is left alone."""
    pkg_logger = logging.getLogger("relnote")
    pkg_logger.setLevel(logging.DEBUG if settings.debug else logging.WARNING)
    for handler in list(pkg_logger.handlers):
        if isinstance(handler, RichHandler):
            pkg_logger.removeHandler(handler)
    handler = RichHandler(show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False


def scaffold(
    identifier: str,
    category: str | None,
    *,
    settings: Settings,
    git: HistorySource,
    console: Console,
) -> RenderResult:
    """
    Resolve, guard and render one release note.

    Raises a `RelnoteError` subclass on the first failure. Nothing is rolled back.
    """
    resolution = resolve(identifier, category, settings=settings)
    console.info(f"Release note {resolution.identifier} (category {resolution.category.value})")
    console.debug(f"template folder: {resolution.template_folder}")

    run_guards(resolution, settings=settings, git=git, console=console)

    result = render(resolution, console=console)
    console.ok(f"Created {result.artifact}")
    return result


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="relnote",
        description="Scaffold a release note for a patch folder from its category template",
    )
    p.add_argument("identifier", nargs="?", default="", help="Patch identifier, e.g. HOTFIX-12.11.0.9")
    p.add_argument("category", nargs="?", default="", help="Template category (derived from the identifier if omitted)")
    return p


def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    git: HistorySource | None = None,
    console: Console | None = None,
    post_run: PostRunHook | None = None,
) -> int:
    args = _build_parser().parse_args(argv)

    try:
        settings = settings or load_settings()
    except RelnoteError as e:
        console = console or Console()
        console.error(str(e))
        if post_run is None and sys.stdin.isatty():
            post_run = console.wait_for_key
        if post_run is not None:
            post_run(1)
        return 1
    _configure_logging(settings)
    console = console or Console(debug=settings.debug)

    if not args.identifier.strip():
        console.info(usage_text())
        return 0

    if post_run is None and settings.pause and sys.stdin.isatty():
        post_run = console.wait_for_key

    git = git or GitClient()
    try:
        scaffold(args.identifier, args.category, settings=settings, git=git, console=console)
        code = 0
    except RelnoteError as e:
        logger.debug("Run aborted", exc_info=True)
        console.error(str(e))
        code = 1

    if post_run is not None:
        post_run(code)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
