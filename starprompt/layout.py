"""Layout of the prompt explanation shown to the user."""

from __future__ import annotations

import textwrap
from collections.abc import Iterable

from wcwidth import wcwidth


def count_wide_chars(value: str) -> int:
    """Count the characters that take more than one terminal column."""
    return sum(1 for char in value if wcwidth(char) > 1)


def format_explanation(
    entries: Iterable[tuple[str, str, str]], width: int | None
) -> str:
    """Lay out a breakdown of the prompt, one module per line.

    Each entry is the styled value of a module, its plain value and its
    description. With a terminal ``width`` the descriptions are wrapped to
    fit beside the values; with ``None`` they are left whole.
    """
    infos = [
        (value, len(plain) + count_wide_chars(plain), desc)
        for value, plain, desc in entries
    ]

    max_ansi_module_width = max(
        (len(value) + count_wide_chars(value) for value, _, _ in infos), default=0
    )
    max_module_width = max((value_len for _, value_len, _ in infos), default=0)

    desc_width = None
    if width is not None:
        desc_width = width - min(width, max_ansi_module_width)

    lines = ["", " Here's a breakdown of your prompt:"]
    for value, _, desc in infos:
        pad = max_ansi_module_width - count_wide_chars(value)
        head = f" {value.ljust(pad)}  -  "
        if desc_width is None:
            lines.append(head + desc)
            continue
        wrapped = textwrap.fill(desc, max(desc_width, 1)).split("\n")
        lines.append(head + wrapped[0])
        indent = " " * (max_module_width + 6)
        lines.extend(indent + line.strip() for line in wrapped[1:])

    return "\n".join(lines) + "\n"