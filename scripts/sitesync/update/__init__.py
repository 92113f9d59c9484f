"""
sitesync.update - Sibling repo update pipeline.

Provides repo selection, the per-repo build pipeline and the batch
orchestrator.
"""

from sitesync.update.config import (
    SCRIPT_DIR,
    default_repo_root,
    REPO_NAMES,
    BUILD_OUTPUT_DIRS,
    PipelineCommands,
    RepoPaths,
    SyncConfig,
)
from sitesync.update.errors import (
    SyncError,
    NotFoundError,
    RepoNotFoundError,
    BuildOutputNotFoundError,
    CommandFailedError,
    FilesystemError,
)
from sitesync.update.selection import (
    ConsolePrompt,
    Prompt,
    ScriptedPrompt,
    format_menu,
    parse_selection,
    present_and_select,
)
from sitesync.update.runner import (
    PipelineOutcome,
    RepoPipeline,
)
from sitesync.update.orchestrator import (
    UpdateOrchestrator,
    parse_args,
    main,
)

__all__ = [
    # Constants
    "SCRIPT_DIR",
    "REPO_NAMES",
    "BUILD_OUTPUT_DIRS",
    # Path resolution
    "default_repo_root",
    # Data classes
    "PipelineCommands",
    "RepoPaths",
    "SyncConfig",
    "PipelineOutcome",
    # Errors
    "SyncError",
    "NotFoundError",
    "RepoNotFoundError",
    "BuildOutputNotFoundError",
    "CommandFailedError",
    "FilesystemError",
    # Selection
    "Prompt",
    "ConsolePrompt",
    "ScriptedPrompt",
    "format_menu",
    "parse_selection",
    "present_and_select",
    # Pipeline
    "RepoPipeline",
    # Orchestrator
    "UpdateOrchestrator",
    "parse_args",
    "main",
]
