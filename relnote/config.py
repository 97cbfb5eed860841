"""
config.py

Responsibility: Load relnote settings into a deterministic, typed model.

Settings come from, in order:
- the YAML file named by the `RELNOTE_CONFIG` environment variable
- `relnote.yaml` in the current working directory, when present
- built-in defaults

The rest of the package receives a `Settings` instance explicitly; nothing
reads configuration from module globals.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from relnote.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV = "RELNOTE_CONFIG"
CONFIG_FILENAME = "relnote.yaml"


@dataclass(frozen=True)
class AutomationIdentity:
    """Git identity whose commits mark a legacy artifact as machine-generated."""

    author: str = "relnote-bot"
    messages: tuple[str, ...] = ("Automatic commit", "Auto-generated release notes")


@dataclass(frozen=True)
class Settings:
    root: Path = field(default_factory=Path.cwd)
    templates_dir: str = "_Templates"
    debug: bool = False
    pause: bool = True
    automation: AutomationIdentity = field(default_factory=AutomationIdentity)

    @property
    def templates_root(self) -> Path:
        return self.root / self.templates_dir


def _parse_automation(raw: Any) -> AutomationIdentity:
    if raw is None:
        return AutomationIdentity()
    if not isinstance(raw, dict):
        raise ConfigError("`automation` must be an object/mapping when provided.")

    default = AutomationIdentity()
    author = str(raw.get("author") or default.author).strip()

    messages_raw = raw.get("messages")
    if messages_raw is None:
        messages = default.messages
    elif isinstance(messages_raw, str):
        messages = (messages_raw,)
    elif isinstance(messages_raw, list):
        messages = tuple(str(m) for m in messages_raw if str(m).strip())
    else:
        raise ConfigError("`automation.messages` must be a string or a list of strings.")

    if not messages:
        raise ConfigError("`automation.messages` must name at least one commit message phrase.")
    return AutomationIdentity(author=author, messages=messages)


def parse_settings(data: dict[str, Any], *, base_dir: Path) -> Settings:
    """
    Build `Settings` from an already-loaded mapping.

    A relative `root` is resolved against `base_dir` (the config file's folder).
    """
    root_raw = data.get("root")
    root = Path(str(root_raw)) if root_raw else base_dir
    if not root.is_absolute():
        root = base_dir / root

    templates_dir = str(data.get("templates_dir") or "_Templates").strip()

    return Settings(
        root=root.resolve(),
        templates_dir=templates_dir,
        debug=bool(data.get("debug", False)),
        pause=bool(data.get("pause", True)),
        automation=_parse_automation(data.get("automation")),
    )


def _config_path(cwd: Path) -> Path | None:
    env_path = os.environ.get(CONFIG_ENV)
    if env_path:
        path = Path(env_path)
        if not path.exists():
            raise ConfigError(f"Config file does not exist: {path} (from ${CONFIG_ENV})")
        return path
    candidate = cwd / CONFIG_FILENAME
    return candidate if candidate.exists() else None


def load_settings(cwd: str | Path | None = None) -> Settings:
    cwd_path = Path(cwd) if cwd is not None else Path.cwd()
    path = _config_path(cwd_path)
    if path is None:
        logger.debug("No config file found, using defaults rooted at %s", cwd_path)
        return Settings(root=cwd_path.resolve())

    logger.debug("Loading settings from %s", path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"Config file is not valid YAML: {path}") from e
    if not isinstance(data, dict):
        raise ConfigError("Config file must be a mapping/object at the top level.")
    return parse_settings(data, base_dir=path.resolve().parent)
