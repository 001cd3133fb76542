"""Branch names of git and Mercurial repositories, and commit hashes."""

from __future__ import annotations

import logging
import math
import os
from pathlib import Path

import regex

log = logging.getLogger(__name__)

_GRAPHEME = regex.compile(r"\X")


def get_graphemes(text: str, length: int | float) -> str:
    """Return the first ``length`` grapheme clusters of ``text``."""
    taken = []
    for count, match in enumerate(_GRAPHEME.finditer(text)):
        if count >= length:
            break
        taken.append(match.group())
    return "".join(taken)


def graphemes_len(text: str) -> int:
    """Count the grapheme clusters in ``text``."""
    return sum(1 for _ in _GRAPHEME.finditer(text))


def truncate_branch(
    branch_name: str, truncation_length: int, truncation_symbol: str
) -> str:
    """Shorten a branch name to ``truncation_length`` graphemes.

    The first grapheme of ``truncation_symbol`` is appended only when the
    name was actually shortened. A length that is not positive disables
    truncation.
    """
    if truncation_length <= 0:
        log.warning(
            '"truncation_length" should be a positive value, found %s',
            truncation_length,
        )
        length: int | float = math.inf
    else:
        length = truncation_length

    truncated = get_graphemes(branch_name, length)
    if length < graphemes_len(branch_name):
        return truncated + get_graphemes(truncation_symbol, 1)
    return truncated


def _read_hg_file(current_dir: str | os.PathLike[str], name: str) -> str | None:
    try:
        return (Path(current_dir) / ".hg" / name).read_text(encoding="utf-8").strip()
    except (OSError, UnicodeDecodeError):
        return None


def get_hg_branch_name(current_dir: str | os.PathLike[str]) -> str:
    """Return the Mercurial branch of the repository, "default" if unknown."""
    name = _read_hg_file(current_dir, "branch")
    return "default" if name is None else name


def get_hg_current_bookmark(current_dir: str | os.PathLike[str]) -> str | None:
    """Return the active Mercurial bookmark, if there is one."""
    return _read_hg_file(current_dir, "bookmarks.current")


def id_to_hex_abbrev(data: bytes, length: int) -> str:
    """Hex-encode ``data`` and keep the first ``length`` characters."""
    return data.hex()[:length]