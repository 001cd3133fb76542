"""Detection and parsing of the installed Java version."""

from __future__ import annotations

import os
import re

from starprompt.process import exec_cmd

_VERSION = re.compile(r"[0-9.]+")


def _after(text: str, marker: str) -> str | None:
    index = text.find(marker)
    if index < 0:
        return None
    return text[index + len(marker):]


def _version_or_zulu(text: str) -> str | None:
    match = _VERSION.match(text)
    if match:
        return match.group()
    # Zulu builds put a vendor tag first: "(Zulu 8.40...) (1.8.0_222-b10)".
    rest = _after(text, "(")
    if rest is None:
        return None
    match = _VERSION.match(rest)
    return match.group() if match else None


def parse_jre_version(text: str) -> str | None:
    """Parse the Java version from ``java -Xinternalversion`` output.

    Recognised forms include "JRE (1.8.0_222-b10)",
    "JRE (Zulu 8.40.0.25-CA-linux64) (1.8.0_222-b10)" and "VM (1.8.0_222-b10)".
    """
    rest = _after(text, "JRE (")
    if rest is None:
        rest = _after(text, "VM (")
    if rest is None:
        return None
    return _version_or_zulu(rest)


def format_java_version(java_out: str) -> str | None:
    """Return the version found in ``java_out`` prefixed with "v"."""
    version = parse_jre_version(java_out)
    return None if version is None else f"v{version}"


def get_java_version() -> str | None:
    """Run Java and return its combined internal version output."""
    java_home = os.environ.get("JAVA_HOME")
    java_command = f"{java_home}/bin/java" if java_home is not None else "java"
    output = exec_cmd(java_command, ["-Xinternalversion"])
    if output is None:
        return None
    return output.stdout + output.stderr