from pathlib import Path

import pytest

from relnote.config import Settings
from relnote.errors import UnrecognizedCategory
from relnote.resolver import Category, derive_category, resolve


def test_derive_category_takes_prefix_before_first_separator() -> None:
    assert derive_category("HOTFIX-12.11.0.9") == "HOTFIX"
    assert derive_category("UMC-1-2") == "UMC"


def test_derive_category_without_separator_is_empty() -> None:
    assert derive_category("12.11.0.9") == ""


def test_resolve_derives_and_uppercases(settings: Settings) -> None:
    r = resolve("hotfix-12.11.0.9", settings=settings)

    assert r.identifier == "HOTFIX-12.11.0.9"
    assert r.category is Category.HOTFIX
    assert r.placeholder == "HOTFIX-x.x.x.x"


def test_resolve_paths(settings: Settings) -> None:
    root: Path = settings.root
    r = resolve("CONFIG-3.1.0.2", settings=settings)

    assert r.template_folder == root / "_Templates" / "CONFIG"
    assert r.target_folder == root / "CONFIG-3.1.0.2"
    assert r.legacy_artifact == root / "CONFIG-3.1.0.2" / "release" / "CONFIG-3.1.0.2_readme.html"
    assert r.final_artifact == root / "CONFIG-3.1.0.2" / "CONFIG-3.1.0.2.md"


def test_explicit_category_overrides_prefix(settings: Settings) -> None:
    r = resolve("Payroll-7.0.0.1", "msimodule", settings=settings)

    assert r.category is Category.MSIMODULE
    assert r.identifier == "PAYROLL-7.0.0.1"
    assert r.placeholder == "MSIMODULE-x.x.x.x"
    assert r.template_folder.name == "MSIMODULE"


@pytest.mark.parametrize("category", list(Category))
def test_every_category_has_its_own_placeholder(category: Category) -> None:
    assert category.placeholder == f"{category.value}-x.x.x.x"


def test_unknown_prefix_is_rejected_with_recognized_list(settings: Settings) -> None:
    with pytest.raises(UnrecognizedCategory) as exc:
        resolve("PAYROLL-7.0.0.1", settings=settings)

    message = str(exc.value)
    assert "PAYROLL" in message
    assert "HOTFIX, CONFIG, MODULE, MSIMODULE, U, UMC" in message
    assert "explicitly" in message


def test_identifier_without_separator_is_rejected(settings: Settings) -> None:
    with pytest.raises(UnrecognizedCategory):
        resolve("12.11.0.9", settings=settings)


def test_unknown_explicit_category_is_rejected(settings: Settings) -> None:
    with pytest.raises(UnrecognizedCategory):
        resolve("HOTFIX-1.0.0.0", "PATCH", settings=settings)


def test_resolution_is_immutable(settings: Settings) -> None:
    r = resolve("U-1.0.0.0", settings=settings)
    with pytest.raises(AttributeError):
        r.identifier = "U-2.0.0.0"  # type: ignore[misc]
