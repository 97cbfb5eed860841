"""
errors.py

Responsibility: the error taxonomy shared by every relnote module.

Every error is terminal for a run; `cli.py` reports it and exits non-zero.
"""

from __future__ import annotations


class RelnoteError(RuntimeError):
    pass


class ConfigError(RelnoteError):
    pass


class UnrecognizedCategory(RelnoteError):
    pass


class TargetFolderMissing(RelnoteError):
    pass


class LegacyArtifactHasHumanChanges(RelnoteError):
    pass


class VersionControlQueryFailed(RelnoteError):
    def __init__(self, message: str, output: str = "") -> None:
        super().__init__(message)
        self.output = output


class FinalArtifactAlreadyExists(RelnoteError):
    pass


class TemplateFileMissing(RelnoteError):
    pass


class FilesystemOperationFailed(RelnoteError):
    pass
