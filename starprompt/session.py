"""Shell session details: environment variables, nix-shell, jobs and user."""

from __future__ import annotations

import os
import re

from starprompt.process import exec_cmd

_SIGNED_INT = re.compile(r"[+-]?[0-9]+")
_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_U32_MAX = 2**32 - 1

_ROOT_UID = 0


def get_env_value(name: str, default: str | None) -> str | None:
    """Return the value of environment variable ``name``, or ``default``.

    A variable that is set but not valid Unicode yields ``None``.
    """
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return None
    return value


def nix_shell_label(
    shell_type: str,
    name: str | None,
    pure_msg: str = "pure",
    impure_msg: str = "impure",
) -> str | None:
    """Describe a nix-shell from the value of ``IN_NIX_SHELL``.

    "1" (as set by lorri) and "impure" mean an impure shell, "pure" a pure
    one; anything else is not a nix-shell and gives ``None``. With a
    ``name`` the message is shown after it in parentheses.
    """
    if shell_type in ("1", "impure"):
        message = impure_msg
    elif shell_type == "pure":
        message = pure_msg
    else:
        return None
    if name is None:
        return message
    return f"{name} ({message})"


def parse_jobs(value: str | None) -> int | None:
    """Parse the number of background jobs reported by the shell.

    A missing value counts as zero jobs; an unparsable one gives ``None``.
    """
    text = "0" if value is None else value.strip()
    if not _SIGNED_INT.fullmatch(text):
        return None
    number = int(text)
    if not _I64_MIN <= number <= _I64_MAX:
        return None
    return number


def should_show_job_count(num_of_jobs: int, threshold: int) -> bool:
    """Whether the number of jobs is shown beside the jobs symbol."""
    return num_of_jobs > threshold


def get_uid() -> int | None:
    """Return the numeric id of the current user as reported by ``id -u``."""
    output = exec_cmd("id", ["-u"])
    if output is None:
        return None
    text = output.stdout.strip()
    if not _UNSIGNED_INT.fullmatch(text):
        return None
    uid = int(text)
    return uid if uid <= _U32_MAX else None


def should_show_username(
    user: str | None,
    logname: str | None,
    ssh_connection: str | None,
    uid: int | None,
    show_always: bool,
) -> bool:
    """Whether the user name belongs in the prompt.

    It is shown when the user differs from the login name, over SSH, for
    root, or when configured to always show.
    """
    return (
        user != logname
        or ssh_connection is not None
        or uid == _ROOT_UID
        or show_always
    )