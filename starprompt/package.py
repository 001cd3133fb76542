"""Detection of the version declared by the project in a directory."""

from __future__ import annotations

import json
import os
import tomllib
from pathlib import Path
from typing import Any

from starprompt.process import read_file


def format_version(version: str) -> str:
    """Strip quotes and whitespace and make sure the version starts with "v"."""
    cleaned = version.replace('"', "").strip()
    return cleaned if cleaned.startswith("v") else f"v{cleaned}"


def _lookup(document: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(document, dict):
            return None
        document = document.get(key)
    return document


def _toml_version(file_contents: str, *keys: str) -> str | None:
    try:
        document = tomllib.loads(file_contents)
    except tomllib.TOMLDecodeError:
        return None
    raw = _lookup(document, *keys)
    return format_version(raw) if isinstance(raw, str) else None


def _json_version(file_contents: str) -> str | None:
    try:
        document = json.loads(file_contents)
    except ValueError:
        return None
    raw = _lookup(document, "version")
    if not isinstance(raw, str) or raw == "null":
        return None
    return format_version(raw)


def extract_cargo_version(file_contents: str) -> str | None:
    """Return the ``package.version`` of a Cargo manifest."""
    return _toml_version(file_contents, "package", "version")


def extract_package_version(file_contents: str) -> str | None:
    """Return the ``version`` of a ``package.json`` document."""
    return _json_version(file_contents)


def extract_poetry_version(file_contents: str) -> str | None:
    """Return the ``tool.poetry.version`` of a ``pyproject.toml`` document."""
    return _toml_version(file_contents, "tool", "poetry", "version")


def extract_composer_version(file_contents: str) -> str | None:
    """Return the ``version`` of a ``composer.json`` document."""
    return _json_version(file_contents)


_MANIFESTS = (
    ("Cargo.toml", extract_cargo_version),
    ("package.json", extract_package_version),
    ("pyproject.toml", extract_poetry_version),
    ("composer.json", extract_composer_version),
)


def get_package_version(base_dir: str | os.PathLike[str]) -> str | None:
    """Return the version from the first readable manifest in ``base_dir``.

    Manifests are tried in a fixed order; the first one that can be read
    decides the result, even if it declares no version.
    """
    for file_name, extract in _MANIFESTS:
        try:
            contents = read_file(Path(base_dir) / file_name)
        except (OSError, UnicodeDecodeError):
            continue
        return extract(contents)
    return None