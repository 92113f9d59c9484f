"""
Update configuration for sitesync.

Constants, dataclasses, and path resolution.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

# =============================================================================
# Constants
# =============================================================================

# Directory holding the sitesync package: scripts/ in a checkout,
# site-packages once installed
SCRIPT_DIR = Path(__file__).resolve().parent.parent.parent

# Sibling repos whose builds are imported, in menu order
REPO_NAMES = [
    "archived-transcript",
    "dokimotes",
    "live-transcript",
    "dokisnake",
    "simple-text",
]

# Generic build output directory names, checked after the repo-named one
BUILD_OUTPUT_DIRS = ["dist", "build"]


# =============================================================================
# Path Resolution
# =============================================================================


def default_repo_root(script_dir: Optional[Path] = None) -> Path:
    """Find the current repo root when --root is not given.

    Running from a checkout (package under scripts/) the root is the parent
    of scripts/. An installed package has no repo around it, so the working
    directory is used instead.
    """
    if script_dir is None:
        script_dir = SCRIPT_DIR

    if script_dir.name == "scripts" and (script_dir / "sitesync").is_dir():
        return script_dir.parent
    return Path.cwd().resolve()


# =============================================================================
# Data Classes
# =============================================================================


@dataclass(frozen=True)
class PipelineCommands:
    """External commands run inside each sibling repo."""

    install: list[str] = field(default_factory=lambda: ["npm", "install"])
    format: list[str] = field(default_factory=lambda: ["npm", "run", "format"])
    lint: list[str] = field(default_factory=lambda: ["npm", "run", "lint"])
    build: list[str] = field(default_factory=lambda: ["npm", "run", "build"])


@dataclass(frozen=True)
class RepoPaths:
    """Resolved locations for one repo."""

    name: str
    source: Path
    target: Path

    def output_candidates(self) -> list[Path]:
        """Build output locations in lookup order."""
        return [self.source / self.name] + [self.source / d for d in BUILD_OUTPUT_DIRS]


@dataclass
class SyncConfig:
    """Configuration for an update run, built once in main()."""

    repo_names: list[str] = field(default_factory=lambda: list(REPO_NAMES))
    current_root: Optional[Path] = None
    parent_dir: Optional[Path] = None
    commands: PipelineCommands = field(default_factory=PipelineCommands)
    dry_run: bool = False
    verbose: bool = False

    def __post_init__(self) -> None:
        if self.current_root is None:
            self.current_root = default_repo_root()
        self.current_root = Path(self.current_root).resolve()
        if self.parent_dir is None:
            self.parent_dir = self.current_root.parent
        else:
            self.parent_dir = Path(self.parent_dir).resolve()

    def paths_for(self, name: str) -> RepoPaths:
        """Resolve source and target paths for a repo."""
        return RepoPaths(
            name=name,
            source=self.parent_dir / name,
            target=self.current_root / name,
        )
