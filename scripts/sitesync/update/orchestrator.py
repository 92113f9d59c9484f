"""
Update orchestrator for sitesync.

Asks which sibling repos to update, then rebuilds them one after another.
"""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional

from sitesync.core.timing import Clock, format_duration
from sitesync.core.utils import log
from sitesync.update.config import SyncConfig
from sitesync.update.phases import CommandRunner
from sitesync.update.runner import PipelineOutcome, RepoPipeline
from sitesync.update.selection import (
    ConsolePrompt,
    Prompt,
    ScriptedPrompt,
    present_and_select,
)


# =============================================================================
# Update Orchestrator
# =============================================================================


class UpdateOrchestrator:
    """Runs one interactive batch: select, then update each repo in order."""

    def __init__(
        self,
        config: SyncConfig,
        prompt: Prompt,
        runner: Optional[CommandRunner] = None,
        clock: Clock = time.monotonic,
    ):
        self.config = config
        self.prompt = prompt
        self.pipeline = RepoPipeline(config, runner, clock)
        self.outcomes: list[PipelineOutcome] = []

    def run(self) -> int:
        """Run the batch. Returns 0 even when individual repos fail."""
        with self.prompt:
            selected = present_and_select(self.config.repo_names, self.prompt)

        if not selected:
            log.plain("No valid repositories selected. Exiting.")
            return 0

        log.plain(f"\nSelected: {', '.join(selected)}")
        if self.config.dry_run:
            log.dry_run("No commands will be run and no files will be changed")

        for name in selected:
            self._process(name)

        self._print_summary()
        log.plain("\nAll tasks completed.")
        return 0

    def _process(self, name: str) -> None:
        log.header(f"Processing {name}")

        outcome = self.pipeline.run(name)
        self.outcomes.append(outcome)

        if outcome.ok:
            log.success(f"Successfully updated {name}!")
        else:
            log.error(f"FAILED to process {name}:")
            log.error(outcome.message)

    def _print_summary(self) -> None:
        log.header("Summary")
        for outcome in self.outcomes:
            status = "OK" if outcome.ok else "FAILED"
            log.table_row(outcome.repo, f"{status} ({format_duration(outcome.seconds)})")
        failed = sum(1 for o in self.outcomes if not o.ok)
        total = sum(o.seconds for o in self.outcomes)
        log.info(f"{len(self.outcomes) - failed} succeeded, {failed} failed in {format_duration(total)}")


# =============================================================================
# CLI
# =============================================================================


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        prog="update-sites",
        description="Rebuild sibling front-end repos and import their build output",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    update-sites                     # Pick repos interactively
    update-sites --select 1,3        # Update the 1st and 3rd repo
    update-sites --dry-run           # Show what would be done
        """,
    )

    parser.add_argument(
        "--select",
        metavar="NUMBERS",
        help='Answer the repo prompt non-interactively (e.g. "1,3")',
    )

    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="Current repo root; sibling repos live in its parent "
        "(default: parent of scripts/ in a checkout, else the working directory)",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be done without executing",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose debug output",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    config = SyncConfig(
        current_root=args.root,
        dry_run=args.dry_run,
        verbose=args.verbose,
    )

    if args.no_color:
        log.set_color(False)
    log.set_verbose(config.verbose)

    prompt: Prompt
    if args.select is not None:
        prompt = ScriptedPrompt([args.select])
    else:
        prompt = ConsolePrompt()

    try:
        orchestrator = UpdateOrchestrator(config, prompt)
        return orchestrator.run()
    except KeyboardInterrupt:
        log.warning("Update interrupted")
        return 130


if __name__ == "__main__":
    sys.exit(main())
