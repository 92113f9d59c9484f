"""
Error types raised while updating a single repo.

Every error here is caught at the RepoPipeline.run boundary and turned into
a failed PipelineOutcome.
"""

from __future__ import annotations

from pathlib import Path


class SyncError(RuntimeError):
    """Base class for per-repo update failures."""


class NotFoundError(SyncError):
    """A required directory does not exist."""


class RepoNotFoundError(NotFoundError):
    def __init__(self, path: Path) -> None:
        self.path = path
        super().__init__(f"Repository path not found: {path}")


class BuildOutputNotFoundError(NotFoundError):
    def __init__(self, repo: str, candidates: list[Path]) -> None:
        self.repo = repo
        self.candidates = list(candidates)
        checked = ", ".join(f"/{p.name}" for p in candidates)
        super().__init__(f"Could not find build output in {repo} (checked {checked})")


class CommandFailedError(SyncError):
    """Raised when an external command exits with a non-zero status code."""

    def __init__(self, cmd: list[str], returncode: int, cwd: Path) -> None:
        self.cmd = list(cmd)
        self.returncode = returncode
        self.cwd = cwd
        super().__init__(f"Command failed: {' '.join(cmd)} (exit code {returncode}) in {cwd}")


class FilesystemError(SyncError):
    """Raised when deleting or moving a directory fails."""
