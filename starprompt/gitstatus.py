"""Summaries of the working tree and index state of a git repository."""

from __future__ import annotations

import enum
from collections.abc import Iterable
from dataclasses import dataclass


class Status(enum.IntFlag):
    """Status bits of a single file, as reported by libgit2."""

    CURRENT = 0
    INDEX_NEW = 1 << 0
    INDEX_MODIFIED = 1 << 1
    INDEX_DELETED = 1 << 2
    INDEX_RENAMED = 1 << 3
    INDEX_TYPECHANGE = 1 << 4
    WT_NEW = 1 << 7
    WT_MODIFIED = 1 << 8
    WT_DELETED = 1 << 9
    WT_TYPECHANGE = 1 << 10
    WT_RENAMED = 1 << 11
    WT_UNREADABLE = 1 << 12
    IGNORED = 1 << 14
    CONFLICTED = 1 << 15


@dataclass(frozen=True)
class RepoStatus:
    """Number of files in each state, plus the number of stashes."""

    conflicted: int = 0
    deleted: int = 0
    renamed: int = 0
    modified: int = 0
    staged: int = 0
    untracked: int = 0
    stashed: int = 0


def is_conflicted(status: Status) -> bool:
    """Whether the file has merge conflicts."""
    return bool(status & Status.CONFLICTED)


def is_deleted(status: Status) -> bool:
    """Whether the file is deleted in the work tree or the index."""
    return bool(status & (Status.WT_DELETED | Status.INDEX_DELETED))


def is_renamed(status: Status) -> bool:
    """Whether the file is renamed in the work tree or the index."""
    return bool(status & (Status.WT_RENAMED | Status.INDEX_RENAMED))


def is_modified(status: Status) -> bool:
    """Whether the file is modified in the work tree."""
    return bool(status & Status.WT_MODIFIED)


def is_staged(status: Status) -> bool:
    """Whether the file has modifications or is new in the index."""
    return bool(status & (Status.INDEX_MODIFIED | Status.INDEX_NEW))


def is_untracked(status: Status) -> bool:
    """Whether the file is new in the work tree."""
    return bool(status & Status.WT_NEW)


def summarize_statuses(statuses: Iterable[Status], stashed: int) -> RepoStatus:
    """Count the files in each state.

    Raises ``ValueError`` when there are no statuses at all.
    """
    statuses = list(statuses)
    if not statuses:
        raise ValueError("Repo has no status")

    def count(predicate) -> int:
        return sum(1 for status in statuses if predicate(status))

    return RepoStatus(
        conflicted=count(is_conflicted),
        deleted=count(is_deleted),
        renamed=count(is_renamed),
        modified=count(is_modified),
        staged=count(is_staged),
        untracked=count(is_untracked),
        stashed=stashed,
    )


def status_segments(
    repo_status: RepoStatus | None,
    ahead: int | None,
    behind: int | None,
    show_sync_count: bool,
) -> list[tuple[str, int | None]]:
    """List the status segments to show, in display order.

    Each entry is a segment name and the count belonging to it. The
    "diverged" segment carries no count; "ahead" and "behind" carry theirs
    only when ``show_sync_count`` is set. A ``None`` status or ahead/behind
    value means it could not be determined and its segments are left out.
    """
    segments: list[tuple[str, int | None]] = []

    def add(name: str, count: int) -> None:
        if count > 0:
            segments.append((name, count))

    if repo_status is not None:
        add("conflicted", repo_status.conflicted)

    if ahead is not None and behind is not None:
        sync_count = (lambda n: n) if show_sync_count else (lambda n: None)
        if ahead > 0 and behind > 0:
            segments.append(("diverged", None))
            if show_sync_count:
                segments.append(("ahead", ahead))
                segments.append(("behind", behind))
        elif ahead > 0:
            segments.append(("ahead", sync_count(ahead)))
        elif behind > 0:
            segments.append(("behind", sync_count(behind)))

    if repo_status is not None:
        add("stashed", repo_status.stashed)
        add("deleted", repo_status.deleted)
        add("renamed", repo_status.renamed)
        add("modified", repo_status.modified)
        add("staged", repo_status.staged)
        add("untracked", repo_status.untracked)

    return segments