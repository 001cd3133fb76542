"""Description of an in-progress git operation such as a rebase or merge."""

from __future__ import annotations

import enum
import os
import re
from dataclasses import dataclass
from pathlib import Path

from starprompt.process import read_file

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")


class RepoState(enum.Enum):
    """The operation a repository is in the middle of."""

    CLEAN = "clean"
    MERGE = "merge"
    REVERT = "revert"
    REVERT_SEQUENCE = "revert_sequence"
    CHERRY_PICK = "cherry_pick"
    CHERRY_PICK_SEQUENCE = "cherry_pick_sequence"
    BISECT = "bisect"
    REBASE = "rebase"
    REBASE_INTERACTIVE = "rebase_interactive"
    REBASE_MERGE = "rebase_merge"
    APPLY_MAILBOX = "apply_mailbox"
    APPLY_MAILBOX_OR_REBASE = "apply_mailbox_or_rebase"


@dataclass(frozen=True)
class StateProgress:
    """How far an operation has come, e.g. step 3 of 10."""

    current: int
    total: int


@dataclass(frozen=True)
class StateDescription:
    """The label of an operation and, when known, its progress.

    ``label`` is the name of the configuration entry used to display it.
    """

    label: str
    progress: StateProgress | None = None


_LABELS = {
    RepoState.MERGE: "merge",
    RepoState.REVERT: "revert",
    RepoState.REVERT_SEQUENCE: "revert",
    RepoState.CHERRY_PICK: "cherry_pick",
    RepoState.CHERRY_PICK_SEQUENCE: "cherry_pick",
    RepoState.BISECT: "bisect",
    RepoState.APPLY_MAILBOX: "am",
    RepoState.APPLY_MAILBOX_OR_REBASE: "am_or_rebase",
}

_REBASE_STATES = frozenset(
    {RepoState.REBASE, RepoState.REBASE_INTERACTIVE, RepoState.REBASE_MERGE}
)


def _read_count(path: Path) -> int | None:
    try:
        text = read_file(path).strip()
    except (OSError, UnicodeDecodeError):
        return None
    if not _UNSIGNED_INT.fullmatch(text):
        return None
    return int(text)


def _progress(dot_git: Path, current_name: str, total_name: str) -> StateProgress | None:
    current = _read_count(dot_git / current_name)
    if current is None:
        return None
    total = _read_count(dot_git / total_name)
    if total is None:
        return None
    return StateProgress(current, total)


def describe_rebase(root: str | os.PathLike[str]) -> StateDescription:
    """Describe a rebase, reading its progress from the ``.git`` directory."""
    dot_git = Path(root) / ".git"
    if (dot_git / "rebase-merge").exists():
        progress = _progress(dot_git, "rebase-merge/msgnum", "rebase-merge/end")
    elif (dot_git / "rebase-apply").exists():
        progress = _progress(dot_git, "rebase-apply/next", "rebase-apply/last")
    else:
        progress = None
    return StateDescription("rebase", progress)


def get_state_description(
    state: RepoState, root: str | os.PathLike[str]
) -> StateDescription | None:
    """Describe the repository state; a clean repository gives ``None``."""
    if state is RepoState.CLEAN:
        return None
    if state in _REBASE_STATES:
        return describe_rebase(root)
    return StateDescription(_LABELS[state])