"""Formatting of memory and swap usage."""

from __future__ import annotations

_BINARY_UNITS = ("KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB")

# Shells in whose prompts "%" is an escape character.
_PERCENT_ESCAPES = {"zsh": "%%"}


def format_kib(n_kib: int) -> str:
    """Format a quantity of KiB in the largest fitting binary unit, e.g. "2GiB"."""
    n_bytes = max(n_kib, 0) * 1024
    unit = "B"
    divisor = 1
    for power, name in enumerate(_BINARY_UNITS, start=1):
        if n_bytes > 1024**power:
            unit = name
            divisor = 1024**power
    return f"{n_bytes / divisor:.0f}{unit}"


def percent_sign(shell: str) -> str:
    """Return the percent sign as it must be written for ``shell``.

    In zsh prompts "%" is an escape character and must be doubled.
    """
    return _PERCENT_ESCAPES.get(shell, "%")


def format_usage(
    used_kib: int, total_kib: int, show_percentage: bool, shell: str
) -> str:
    """Describe usage either as a percentage or as "used/total".

    Raises ``ValueError`` when ``total_kib`` is not positive.
    """
    if total_kib <= 0:
        raise ValueError(f"total must be positive, got {total_kib}")
    if show_percentage:
        percent = used_kib / total_kib * 100.0
        return f"{percent:.0f}{percent_sign(shell)}"
    return f"{format_kib(used_kib)}/{format_kib(total_kib)}"