"""
relnote package

This package implements relnote as a CLI-first utility that scaffolds a patch
release note from a category template.

Key responsibilities are split across modules:
- `resolver.py`: identifier/category -> immutable `Resolution` (no I/O)
- `config.py`: optional YAML settings -> `Settings`
- `guards.py`: ordered precondition checks against the filesystem and git history
- `git_client.py`: isolated git interaction (one `git log` per run)
- `renderer.py`: template copy, rename and literal placeholder substitution
- `console.py`: leveled, colored operator output
- `cli.py`: CLI entrypoint and orchestration (resolve -> guards -> render)
"""

from __future__ import annotations

__all__ = ["__version__"]

__version__ = "0.1.0"
