"""
Shared pytest fixtures for sitesync tests.

Provides a throwaway workspace (a current repo plus sibling repos) and a
fake command runner so no real package manager is ever started.

Test Tier Markers:
  @pytest.mark.evergreen - Tests that always run, never skip (production tests)
  @pytest.mark.dev       - Development/WIP tests, toggle-able
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Generator, Iterable, Optional

import pytest

from sitesync.core.utils import log
from sitesync.update.config import SyncConfig


# =============================================================================
# Test Data Constants
# =============================================================================

BUILD_CMD = "npm run build"

# Repos used by most pipeline and batch tests
TEST_REPOS: list[str] = ["alpha", "beta", "gamma"]


# =============================================================================
# Fake Command Runner
# =============================================================================


class FakeRunner:
    """Stand-in for run_streaming that records calls and returns canned exit codes.

    exit_codes maps either "npm run lint" or ("repo", "npm run lint") to an
    exit status. When the build command succeeds, each directory listed in
    build_outputs[repo] (default ["dist"]) is created inside the repo with an
    index.html, like a real front-end build would.
    """

    def __init__(
        self,
        exit_codes: Optional[dict] = None,
        build_outputs: Optional[dict[str, list[str]]] = None,
        missing: Iterable[str] = (),
    ):
        self.exit_codes = exit_codes or {}
        self.build_outputs = build_outputs or {}
        self.missing = set(missing)
        self.calls: list[tuple[str, Path]] = []

    def __call__(self, cmd: list[str], cwd: Path) -> int:
        key = " ".join(cmd)
        self.calls.append((key, cwd))

        if key in self.missing:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])

        code = self.exit_codes.get((cwd.name, key), self.exit_codes.get(key, 0))
        if code == 0 and key == BUILD_CMD:
            for dirname in self.build_outputs.get(cwd.name, ["dist"]):
                output = cwd / dirname
                output.mkdir(parents=True, exist_ok=True)
                (output / "index.html").write_text(f"{cwd.name} build\n")
        return code

    def commands_for(self, repo: str) -> list[str]:
        """Commands that ran inside the given repo, in order."""
        return [key for key, cwd in self.calls if cwd.name == repo]


# =============================================================================
# Workspace
# =============================================================================


@dataclass
class Workspace:
    """Temporary directory layout: parent/<current repo> next to parent/<siblings>."""

    parent: Path
    root: Path

    def add_repo(self, name: str) -> Path:
        repo = self.parent / name
        repo.mkdir(parents=True, exist_ok=True)
        (repo / "package.json").write_text('{"name": "%s"}\n' % name)
        return repo

    def config(self, repo_names: Optional[list[str]] = None, **kwargs) -> SyncConfig:
        return SyncConfig(
            repo_names=list(repo_names or TEST_REPOS),
            current_root=self.root,
            **kwargs,
        )


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test tiers."""
    config.addinivalue_line(
        "markers",
        "evergreen: tests that always run, never skip (production tests)"
    )
    config.addinivalue_line(
        "markers",
        "dev: development/WIP tests, toggle-able for active development"
    )


@pytest.fixture(autouse=True)
def plain_logger() -> Generator[None, None, None]:
    """Keep the shared logger colorless and quiet, restoring it afterwards."""
    saved = (log._use_color, log.verbose)
    log.set_color(False)
    log.set_verbose(False)
    yield
    log.set_color(saved[0])
    log.set_verbose(saved[1])


@pytest.fixture
def workspace(tmp_path: Path) -> Workspace:
    """Create a current repo dir under a fresh parent directory."""
    root = tmp_path / "sites"
    root.mkdir()
    return Workspace(parent=tmp_path, root=root)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """A FakeRunner where every command succeeds."""
    return FakeRunner()
