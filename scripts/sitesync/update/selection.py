"""
Repo selection for sitesync.

Prints the numbered repo menu, reads a single answer through a Prompt and
turns it into the list of repos to update.
"""

from __future__ import annotations

import re
from typing import Iterable, Optional, Protocol

from sitesync.core.utils import log

SELECTION_QUESTION = '\nEnter the numbers of the repos to update (comma separated, e.g., "1,3"): '

_INT_TOKEN = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# Prompts
# =============================================================================


class Prompt(Protocol):
    """Single-shot question/answer channel."""

    def ask(self, question: str) -> str: ...

    def close(self) -> None: ...

    def __enter__(self) -> "Prompt": ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None: ...


class ConsolePrompt:
    """Interactive prompt reading from the terminal."""

    def __init__(self) -> None:
        self.closed = False

    def ask(self, question: str) -> str:
        if self.closed:
            raise RuntimeError("Prompt is closed")
        try:
            return input(question)
        except EOFError:
            # stdin ended without an answer
            print()
            return ""

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "ConsolePrompt":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


class ScriptedPrompt:
    """Prompt that replays pre-scripted answers (--select, tests)."""

    def __init__(self, answers: Iterable[str]) -> None:
        self._answers = list(answers)
        self.questions: list[str] = []
        self.closed = False

    def ask(self, question: str) -> str:
        if self.closed:
            raise RuntimeError("Prompt is closed")
        self.questions.append(question)
        if not self._answers:
            return ""
        answer = self._answers.pop(0)
        log.plain(f"{question.strip()} {answer}")
        return answer

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> "ScriptedPrompt":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


# =============================================================================
# Parsing
# =============================================================================


def _parse_int(token: str) -> Optional[int]:
    token = token.strip()
    if not _INT_TOKEN.fullmatch(token):
        return None
    return int(token, 10)


def parse_selection(answer: str, count: int) -> list[int]:
    """Parse a comma separated answer into zero-based indices.

    Tokens that are not base-10 integers or fall outside 1..count are
    dropped. Input order is kept and duplicates are not removed.

        >>> parse_selection("0,9,abc,2", 5)
        [1]
    """
    indices = []
    for token in answer.split(","):
        number = _parse_int(token)
        if number is None:
            continue
        index = number - 1
        if 0 <= index < count:
            indices.append(index)
    return indices


def format_menu(names: list[str]) -> list[str]:
    return [f"{i}. {name}" for i, name in enumerate(names, start=1)]


def present_and_select(names: list[str], prompt: Prompt) -> list[str]:
    """Print the repo menu and return the names picked by the user (may be empty)."""
    log.plain("Available Repositories to Update:")
    for line in format_menu(names):
        log.plain(line)

    answer = prompt.ask(SELECTION_QUESTION)
    indices = parse_selection(answer, len(names))
    log.debug(f"Parsed selection {answer!r} -> indices {indices}")
    return [names[i] for i in indices]
