"""
git_client.py

Responsibility: Isolate all direct git interaction.

This module must be the only place that:
- Builds git command lines
- Spawns the git executable
- Interprets git output / exit status

Everything else (guards, rendering, CLI behavior) should use this client.
"""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)

# Author on the first line, full commit message after it.
LOG_FORMAT = "--format=%an%n%B"


@dataclass(frozen=True)
class CommitInfo:
    """The most recent history entry git reports for one path."""

    author: str
    message: str
    returncode: int
    output: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class HistorySource(Protocol):
    def last_commit(self, path: str | Path) -> CommitInfo:
        ...


def _parse_log(stdout: str) -> tuple[str, str]:
    author, _sep, message = stdout.partition("\n")
    return author.strip(), message.strip()


class GitClient:
    def __init__(self, executable: str = "git", cwd: str | Path | None = None) -> None:
        self._executable = executable
        self._cwd = Path(cwd) if cwd is not None else None

    def last_commit(self, path: str | Path) -> CommitInfo:
        """
        Return the most recent commit touching `path`.

        The call blocks until git exits; stdout and stderr are captured, never
        streamed. A failed query is reported through `returncode`, not raised.
        """
        path = Path(path)
        cwd = self._cwd or path.parent
        # git refuses to run in a directory that does not exist.
        while not cwd.exists() and cwd != cwd.parent:
            cwd = cwd.parent

        cmd = [self._executable, "log", "-1", LOG_FORMAT, "--", str(path)]
        logger.debug("Running %s (cwd=%s)", " ".join(cmd), cwd)
        try:
            proc = subprocess.run(cmd, cwd=str(cwd), stdout=subprocess.PIPE, stderr=subprocess.PIPE, text=True)
        except FileNotFoundError as e:
            return CommitInfo(author="", message="", returncode=127, output=f"git executable not found: {e}")

        output = (proc.stdout or "") + (proc.stderr or "")
        logger.debug("git exited %s:\n%s", proc.returncode, output)
        if proc.returncode != 0:
            return CommitInfo(author="", message="", returncode=proc.returncode, output=output)

        author, message = _parse_log(proc.stdout or "")
        return CommitInfo(author=author, message=message, returncode=0, output=output)
