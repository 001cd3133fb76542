"""Reading files and running external commands."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandOutput:
    """Captured standard output and standard error of a finished command."""

    stdout: str
    stderr: str


def read_file(path: str | os.PathLike[str]) -> str:
    """Return the text contents of a file.

    Raises ``OSError`` if the file cannot be opened or read.
    """
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def exec_cmd(cmd: str, args: Sequence[str]) -> CommandOutput | None:
    """Run a command and return its output if it exits successfully.

    Returns ``None`` when the command cannot be started or exits with a
    non-zero status.
    """
    log.debug("Executing command %r with args %r", cmd, list(args))
    try:
        completed = subprocess.run(
            [cmd, *args],
            capture_output=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return None

    stdout = completed.stdout.decode("utf-8")
    stderr = completed.stderr.decode("utf-8")

    if completed.returncode != 0:
        log.debug("Non-zero exit code %r", completed.returncode)
        log.debug("stdout: %s", stdout)
        log.debug("stderr: %s", stderr)
        return None

    return CommandOutput(stdout=stdout, stderr=stderr)