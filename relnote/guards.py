"""
guards.py

Responsibility: the ordered precondition checks that must all pass before
anything is rendered into a patch folder.

Order:
1) target folder exists
2) legacy artifact is absent, or was last committed by automation (then deleted)
3) the git history query succeeded
4) the final artifact does not exist yet

The first failing guard raises; later guards never run. Exactly one git query
is made per run, between guards 1 and 2.
"""

from __future__ import annotations

import logging

from relnote.config import AutomationIdentity, Settings
from relnote.console import Console
from relnote.errors import (
    FilesystemOperationFailed,
    FinalArtifactAlreadyExists,
    LegacyArtifactHasHumanChanges,
    TargetFolderMissing,
    VersionControlQueryFailed,
)
from relnote.git_client import CommitInfo, HistorySource
from relnote.resolver import Resolution

logger = logging.getLogger(__name__)


def is_automated(commit: CommitInfo, identity: AutomationIdentity) -> bool:
    """
    True when `commit` was authored by the automation identity with one of its
    commit message phrases.
    """
    if commit.author != identity.author:
        return False
    return any(phrase in commit.message for phrase in identity.messages)


def check_target_folder(resolution: Resolution) -> None:
    if not resolution.target_folder.is_dir():
        raise TargetFolderMissing(
            f"Target folder does not exist: {resolution.target_folder}. "
            "Create the patch folder before generating its release note."
        )


def check_legacy_artifact(resolution: Resolution, commit: CommitInfo, identity: AutomationIdentity) -> bool:
    """Return True when a legacy artifact was found and deleted."""
    legacy = resolution.legacy_artifact
    if not legacy.exists():
        return False

    if not is_automated(commit, identity):
        message = (
            f"{legacy} was last changed by {commit.author or 'an unknown author'}; "
            "it has human edits and must be migrated by hand."
        )
        if not commit.ok:
            message += f"\ngit log failed with exit status {commit.returncode}:\n{commit.output.strip()}"
        raise LegacyArtifactHasHumanChanges(message)

    try:
        legacy.unlink()
    except OSError as e:
        raise FilesystemOperationFailed(f"Failed deleting legacy artifact: {legacy}") from e
    return True


def check_history_query(commit: CommitInfo) -> None:
    if not commit.ok:
        raise VersionControlQueryFailed(
            f"git log failed with exit status {commit.returncode}:\n{commit.output.strip()}",
            output=commit.output,
        )


def check_final_artifact(resolution: Resolution) -> None:
    if resolution.final_artifact.exists():
        raise FinalArtifactAlreadyExists(f"Release note already exists: {resolution.final_artifact}")


def run_guards(
    resolution: Resolution,
    *,
    settings: Settings,
    git: HistorySource,
    console: Console,
) -> None:
    console.step(f"Checking target folder {resolution.target_folder}")
    check_target_folder(resolution)
    console.ok("Target folder exists")

    console.step(f"Checking legacy artifact {resolution.legacy_artifact.name}")
    commit = git.last_commit(resolution.legacy_artifact)
    console.debug(f"git: author={commit.author!r} message={commit.message!r} status={commit.returncode}")
    if check_legacy_artifact(resolution, commit, settings.automation):
        logger.info("Deleted automated legacy artifact %s", resolution.legacy_artifact)
        console.ok("Legacy artifact was generated by automation and has been deleted")
    else:
        console.ok("No legacy artifact")

    console.step("Checking version-control query")
    check_history_query(commit)
    console.ok("Version-control query succeeded")

    console.step(f"Checking {resolution.final_artifact.name} does not exist")
    check_final_artifact(resolution)
    console.ok("Release note does not exist yet")
