"""
Update phases for sitesync.

Individual pipeline operations that RepoPipeline runs in order.
"""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import Callable, Optional

from sitesync.core.utils import format_cmd, log
from sitesync.update.config import RepoPaths
from sitesync.update.errors import (
    BuildOutputNotFoundError,
    CommandFailedError,
    FilesystemError,
)

# Runs a command in a directory with inherited stdio, returning the exit status
CommandRunner = Callable[[list[str], Path], int]


# =============================================================================
# Filesystem Operations
# =============================================================================


def remove_path(path: Path, dry_run: bool = False) -> None:
    """Recursively delete a directory (or unlink a file) if present."""
    if not path.exists() and not path.is_symlink():
        return

    if dry_run:
        log.dry_run(f"Would remove {path}")
        return

    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as e:
        raise FilesystemError(f"Failed to delete {path}: {e}") from e


def clean_target(paths: RepoPaths, dry_run: bool = False) -> None:
    """Delete the previous copy of the build output in the current repo."""
    if paths.target.exists():
        log.info(f"Deleting old build folder: {paths.target}")
        remove_path(paths.target, dry_run)


def locate_build_output(paths: RepoPaths) -> Path:
    """Return the first existing build output directory.

    Checks <repo>/<repo>, <repo>/dist and <repo>/build in that order.
    """
    candidates = paths.output_candidates()
    for candidate in candidates:
        if candidate.is_dir():
            return candidate
    raise BuildOutputNotFoundError(paths.name, candidates)


def relocate_build_output(build_output: Path, paths: RepoPaths, dry_run: bool = False) -> None:
    """Move the build output into the current repo, replacing any stale copy."""
    remove_path(paths.target, dry_run)

    log.info(f"Moving build from {build_output} to {paths.target}...")
    if dry_run:
        log.dry_run(f"Would move {build_output} -> {paths.target}")
        return

    try:
        build_output.rename(paths.target)
    except OSError as e:
        raise FilesystemError(f"Failed to move {build_output} to {paths.target}: {e}") from e


# =============================================================================
# Package Manager Operations
# =============================================================================


def run_step(
    runner: CommandRunner,
    cmd: list[str],
    cwd: Path,
    dry_run: bool = False,
) -> None:
    """Run a required step. Raises CommandFailedError on a non-zero exit."""
    if dry_run:
        log.dry_run(f"Would run: {format_cmd(cmd)} in {cwd}")
        return

    returncode = runner(cmd, cwd)
    if returncode != 0:
        raise CommandFailedError(cmd, returncode, cwd)


def run_optional_step(
    runner: CommandRunner,
    cmd: list[str],
    cwd: Path,
    repo: str,
    dry_run: bool = False,
) -> bool:
    """Run a best-effort step. Returns False (after warning) when it fails."""
    if dry_run:
        log.dry_run(f"Would run: {format_cmd(cmd)} in {cwd}")
        return True

    returncode: Optional[int]
    try:
        returncode = runner(cmd, cwd)
    except OSError as e:
        log.debug(f"{format_cmd(cmd)} could not be started: {e}")
        returncode = None

    if returncode != 0:
        log.warning(f"'{format_cmd(cmd)}' failed or script missing in {repo}. Continuing...")
        return False
    return True
