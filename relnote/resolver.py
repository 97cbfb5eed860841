"""
resolver.py

Responsibility: turn a user-supplied identifier (and optional category) into a
fully resolved, immutable `Resolution`.

This module is pure: it never touches the filesystem. Every path it returns is
computed from `Settings`; whether those paths exist is for `guards.py` to decide.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from relnote.config import Settings
from relnote.errors import UnrecognizedCategory


class Category(str, Enum):
    HOTFIX = "HOTFIX"
    CONFIG = "CONFIG"
    MODULE = "MODULE"
    MSIMODULE = "MSIMODULE"
    U = "U"
    UMC = "UMC"

    @property
    def placeholder(self) -> str:
        return PLACEHOLDERS[self]


PLACEHOLDERS: dict[Category, str] = {
    Category.HOTFIX: "HOTFIX-x.x.x.x",
    Category.CONFIG: "CONFIG-x.x.x.x",
    Category.MODULE: "MODULE-x.x.x.x",
    Category.MSIMODULE: "MSIMODULE-x.x.x.x",
    Category.U: "U-x.x.x.x",
    Category.UMC: "UMC-x.x.x.x",
}

# Categories whose name is always the identifier prefix.
DERIVABLE: tuple[Category, ...] = (Category.HOTFIX, Category.CONFIG, Category.UMC)

SEPARATOR = "-"


@dataclass(frozen=True)
class Resolution:
    """Everything the guard chain and renderer need to know about one run."""

    identifier: str
    category: Category
    placeholder: str
    template_folder: Path
    target_folder: Path
    legacy_artifact: Path
    final_artifact: Path


def derive_category(identifier: str) -> str:
    """
    Return the part of `identifier` before its first separator, or "" when
    there is no separator.
    """
    head, sep, _rest = identifier.partition(SEPARATOR)
    return head if sep else ""


def _lookup(category: str) -> Category:
    try:
        return Category(category)
    except ValueError:
        known = ", ".join(c.value for c in Category)
        shown = category or "<empty>"
        raise UnrecognizedCategory(
            f"Unrecognized category: {shown}. Recognized categories: {known}. "
            "Unusual categories must be given explicitly as the second argument."
        ) from None


def resolve(identifier: str, category: str | None = None, *, settings: Settings) -> Resolution:
    identifier = identifier.strip()
    raw_category = (category or "").strip() or derive_category(identifier)

    identifier = identifier.upper()
    cat = _lookup(raw_category.upper())

    target = settings.root / identifier
    return Resolution(
        identifier=identifier,
        category=cat,
        placeholder=cat.placeholder,
        template_folder=settings.templates_root / cat.value,
        target_folder=target,
        legacy_artifact=target / "release" / f"{identifier}_readme.html",
        final_artifact=target / f"{identifier}.md",
    )
