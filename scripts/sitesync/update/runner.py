"""
Per-repo update pipeline for sitesync.

RepoPipeline.run executes install, format, lint, build, locate and relocate
for one sibling repo and always returns a PipelineOutcome. Nothing raised by a
step crosses that boundary, so one broken repo never stops the batch.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from sitesync.core.timing import Clock, Stopwatch
from sitesync.core.utils import log, run_streaming
from sitesync.update.config import SyncConfig
from sitesync.update.errors import BuildOutputNotFoundError, RepoNotFoundError
from sitesync.update.phases import (
    CommandRunner,
    clean_target,
    locate_build_output,
    relocate_build_output,
    run_optional_step,
    run_step,
)


# =============================================================================
# Outcome
# =============================================================================


@dataclass(frozen=True)
class PipelineOutcome:
    """Result of updating one repo: success, or failure with a message."""

    repo: str
    ok: bool
    message: str = ""
    build_output: Optional[Path] = None
    seconds: float = 0.0

    @classmethod
    def success(
        cls,
        repo: str,
        build_output: Optional[Path] = None,
        seconds: float = 0.0,
    ) -> "PipelineOutcome":
        return cls(repo=repo, ok=True, build_output=build_output, seconds=seconds)

    @classmethod
    def failure(cls, repo: str, message: str, seconds: float = 0.0) -> "PipelineOutcome":
        return cls(repo=repo, ok=False, message=message, seconds=seconds)


# =============================================================================
# Pipeline
# =============================================================================


class RepoPipeline:
    """Builds a sibling repo and imports its output into the current repo."""

    def __init__(
        self,
        config: SyncConfig,
        runner: Optional[CommandRunner] = None,
        clock: Clock = time.monotonic,
    ):
        self.config = config
        self.runner: CommandRunner = runner or run_streaming
        self.clock = clock

    def run(self, name: str) -> PipelineOutcome:
        """Run every step for one repo. Never raises for step failures."""
        stopwatch = Stopwatch(self.clock)
        try:
            build_output = self._run_steps(name)
        except Exception as e:
            log.debug(f"{name}: {type(e).__name__}: {e}")
            return PipelineOutcome.failure(name, str(e), seconds=stopwatch.elapsed())
        return PipelineOutcome.success(name, build_output, seconds=stopwatch.elapsed())

    def _run_steps(self, name: str) -> Optional[Path]:
        config = self.config
        commands = config.commands
        dry_run = config.dry_run
        paths = config.paths_for(name)

        if not paths.source.exists():
            raise RepoNotFoundError(paths.source)

        # 1. Delete old build folder in the current repo
        clean_target(paths, dry_run)

        # 2. Build in the sibling repo
        log.info(f"Installing dependencies in {name}...")
        run_step(self.runner, commands.install, paths.source, dry_run)

        log.info(f"Formatting code in {name}...")
        run_optional_step(self.runner, commands.format, paths.source, name, dry_run)

        log.info(f"Linting code in {name}...")
        run_step(self.runner, commands.lint, paths.source, dry_run)

        log.info(f"Building {name}...")
        run_step(self.runner, commands.build, paths.source, dry_run)

        # 3. Find and move the build folder
        try:
            build_output = locate_build_output(paths)
        except BuildOutputNotFoundError:
            if not dry_run:
                raise
            candidates = ", ".join(str(p) for p in paths.output_candidates())
            log.dry_run(f"Would locate build output among {candidates} and move it to {paths.target}")
            return None

        relocate_build_output(build_output, paths, dry_run)
        return build_output
