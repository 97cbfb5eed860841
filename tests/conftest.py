"""
Shared fixtures: a throwaway patch root with `_Templates`, a fake git history
source and a console that records to a string buffer.
"""

from __future__ import annotations

import io
from dataclasses import dataclass, field
from pathlib import Path

import pytest
from rich.console import Console as RichConsole

from relnote.config import Settings
from relnote.console import Console
from relnote.git_client import CommitInfo
from relnote.resolver import Category

BOT = "relnote-bot"


@dataclass
class FakeGit:
    commit: CommitInfo = field(default_factory=lambda: CommitInfo(author="", message="", returncode=0, output=""))
    calls: list[Path] = field(default_factory=list)

    def last_commit(self, path):
        self.calls.append(Path(path))
        return self.commit


def template_body(token: str) -> str:
    return (
        f"# {token} Release Notes\r\n"
        f"Package: {token}\n"
        f"Installer: {token}.zip\n"
        "Unrelated: HOTFIX-xAxBxCx and x.x.x.x stay as written.\n"
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(root=tmp_path, pause=False)


@pytest.fixture
def templates(settings: Settings) -> Path:
    """One template folder per category, each with its placeholder document and an asset."""
    for cat in Category:
        folder = settings.templates_root / cat.value
        (folder / "release").mkdir(parents=True)
        (folder / f"{cat.placeholder}.md").write_bytes(template_body(cat.placeholder).encode("utf-8"))
        (folder / "release" / "checklist.txt").write_text(f"{cat.value} checklist\n", encoding="utf-8")
    return settings.templates_root


@pytest.fixture
def fake_git() -> FakeGit:
    return FakeGit()


@pytest.fixture
def output() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    return Console(rich_console=RichConsole(file=output, width=240, color_system=None))


def make_patch_folder(settings: Settings, identifier: str) -> Path:
    folder = settings.root / identifier
    folder.mkdir(parents=True)
    return folder


def snapshot(root: Path) -> dict[str, bytes]:
    return {str(p.relative_to(root)): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}
