"""The system host name, optionally shown only over SSH."""

from __future__ import annotations

import os
import socket


def trim_hostname(host: str, trim_at: str) -> str:
    """Cut ``host`` at the first occurrence of ``trim_at``.

    An empty ``trim_at`` or one that does not occur leaves ``host`` whole.
    """
    if not trim_at:
        return host
    index = host.find(trim_at)
    return host if index < 0 else host[:index]


def get_hostname(ssh_only: bool, trim_at: str) -> str | None:
    """Return the trimmed host name.

    With ``ssh_only`` set, ``None`` is returned unless ``SSH_CONNECTION`` is set.
    """
    if ssh_only and os.environ.get("SSH_CONNECTION") is None:
        return None
    return trim_hostname(socket.gethostname(), trim_at)