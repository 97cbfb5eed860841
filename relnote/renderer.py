"""
renderer.py

Responsibility: Instantiate a category template folder into a patch folder.

Rules:
- Walk template files in sorted order to ensure deterministic output.
- Copy files exactly as they exist in the template directory, overwriting
  same-named files in the destination and leaving every other file alone.
- Rename the `<placeholder>.md` document to `<identifier>.md`.
- Replace the placeholder in that document as literal text. The placeholder
  contains `.` and `-`, so it is never used as a regular expression.

There is no rollback: a failure part-way leaves whatever was already written.

This module intentionally does NOT know about git, guards, or CLI parsing;
progress goes to an optional `Console`.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from rich.console import Console as RichConsole

from relnote.console import Console
from relnote.errors import FilesystemOperationFailed, TemplateFileMissing
from relnote.resolver import Resolution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderResult:
    copied_files: int
    artifact: Path
    replacements: int


def _template_files(template_dir: Path) -> list[Path]:
    """Template files as paths relative to template_dir, sorted with `/` separators."""
    rel_paths = [p.relative_to(template_dir) for p in template_dir.rglob("*") if p.is_file()]
    return sorted(rel_paths, key=lambda rel: rel.as_posix())


def copy_template_dir(*, template_dir: str | Path, destination_dir: str | Path) -> int:
    """
    Copy every template file over the same relative path in destination_dir.

    Files already in destination_dir that the template does not name are kept.
    A template file whose destination is a directory (or whose parent is a
    regular file) fails the copy. Returns the number of files copied.
    """
    tpl_dir = Path(template_dir).resolve()
    dst_dir = Path(destination_dir).resolve()

    if not tpl_dir.is_dir():
        raise TemplateFileMissing(f"Template directory not found: {tpl_dir}")

    copied = 0
    for rel in _template_files(tpl_dir):
        src_path = tpl_dir / rel
        dst_path = dst_dir / rel
        try:
            dst_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(src_path, dst_path)
            shutil.copystat(src_path, dst_path)
        except OSError as e:
            raise FilesystemOperationFailed(f"Failed copying template file: {rel}") from e
        logger.debug("Copied %s -> %s", src_path, dst_path)
        copied += 1
    return copied


def rename_placeholder_file(*, destination_dir: Path, placeholder: str, identifier: str) -> Path:
    src = destination_dir / f"{placeholder}.md"
    dst = destination_dir / f"{identifier}.md"
    if not src.is_file():
        raise TemplateFileMissing(f"Template document not found after copy: {src}")
    try:
        src.rename(dst)
    except OSError as e:
        raise FilesystemOperationFailed(f"Failed renaming {src.name} to {dst.name}") from e
    return dst


def substitute_placeholder(path: Path, *, placeholder: str, identifier: str) -> int:
    """
    Replace every literal occurrence of `placeholder` in the file at `path`.

    Line endings and all other text are preserved byte-for-byte. Returns the
    number of replacements made.
    """
    try:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        count = text.count(placeholder)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text.replace(placeholder, identifier))
    except (OSError, UnicodeDecodeError) as e:
        raise FilesystemOperationFailed(f"Failed rewriting {path}") from e
    return count


def render(resolution: Resolution, *, console: Console | None = None) -> RenderResult:
    """
    Copy, rename and rewrite in that order. When `console` is given, each of the
    three steps reports a status line before and after it runs.
    """
    console = console or Console(rich_console=RichConsole(quiet=True))

    console.step(f"Copying template {resolution.template_folder.name} into {resolution.target_folder}")
    copied = copy_template_dir(
        template_dir=resolution.template_folder,
        destination_dir=resolution.target_folder,
    )
    console.ok(f"Copied {copied} template file(s)")

    console.step(f"Renaming {resolution.placeholder}.md to {resolution.identifier}.md")
    artifact = rename_placeholder_file(
        destination_dir=resolution.target_folder,
        placeholder=resolution.placeholder,
        identifier=resolution.identifier,
    )
    console.ok(f"Renamed to {artifact.name}")

    console.step(f"Replacing {resolution.placeholder} with {resolution.identifier}")
    replacements = substitute_placeholder(
        artifact,
        placeholder=resolution.placeholder,
        identifier=resolution.identifier,
    )
    console.ok(f"Replaced {replacements} placeholder(s) in {artifact}")
    return RenderResult(copied_files=copied, artifact=artifact, replacements=replacements)
