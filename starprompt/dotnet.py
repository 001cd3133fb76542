"""Detection of the .NET SDK version relevant to a directory.

The version is estimated from ``global.json`` pinning where possible, which
is usually faster than asking the ``dotnet`` command line.
"""

from __future__ import annotations

import enum
import json
import logging
import os
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

from starprompt.process import read_file

log = logging.getLogger(__name__)

GLOBAL_JSON_FILE = "global.json"
PROJECT_JSON_FILE = "project.json"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


class FileType(enum.Enum):
    """Kinds of files that mark a directory as a .NET project."""

    PROJECT_JSON = "project_json"
    PROJECT_FILE = "project_file"
    GLOBAL_JSON = "global_json"
    SOLUTION_FILE = "solution_file"


@dataclass(frozen=True)
class DotNetFile:
    """A .NET related file found in a directory."""

    path: Path
    file_type: FileType


def get_pinned_sdk_version(json_text: str) -> str | None:
    """Return the SDK version pinned by a ``global.json`` document, as "vX.Y.Z"."""
    try:
        document = json.loads(json_text)
    except ValueError:
        return None
    if not isinstance(document, dict):
        return None
    sdk = document.get("sdk")
    if not isinstance(sdk, dict):
        return None
    version = sdk.get("version")
    if not isinstance(version, str):
        return None
    return f"v{version}"


def get_pinned_sdk_version_from_file(path: str | os.PathLike[str]) -> str | None:
    """Read a ``global.json`` file and return its pinned SDK version."""
    try:
        json_text = read_file(path)
    except (OSError, UnicodeDecodeError):
        return None
    log.debug("Checking if .NET SDK version is pinned in: %s", path)
    return get_pinned_sdk_version(json_text)


def get_dotnet_file_type(path: str | os.PathLike[str]) -> FileType | None:
    """Classify a path as a .NET file, or return ``None``."""
    pure = Path(path)
    file_name = pure.name.translate(_ASCII_LOWER)
    if file_name == GLOBAL_JSON_FILE:
        return FileType.GLOBAL_JSON
    if file_name == PROJECT_JSON_FILE:
        return FileType.PROJECT_JSON

    extension = pure.suffix.removeprefix(".").translate(_ASCII_LOWER)
    if extension == "sln":
        return FileType.SOLUTION_FILE
    if extension in ("csproj", "fsproj", "xproj"):
        return FileType.PROJECT_FILE
    return None


def get_local_dotnet_files(
    paths: Iterable[str | os.PathLike[str]],
) -> list[DotNetFile]:
    """Select the .NET files among ``paths``, keeping their order."""
    files = []
    for path in paths:
        file_type = get_dotnet_file_type(path)
        if file_type is not None:
            files.append(DotNetFile(Path(path), file_type))
    return files


def check_directory_for_global_json(path: str | os.PathLike[str]) -> str | None:
    """Return the SDK version pinned by a ``global.json`` in ``path``, if any."""
    global_json_path = Path(path) / GLOBAL_JSON_FILE
    log.debug("Checking if global.json exists at: %s", global_json_path)
    if not global_json_path.exists():
        return None
    return get_pinned_sdk_version_from_file(global_json_path)


def try_find_nearby_global_json(
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Look for a pinned version in the parent directory or the repository root.

    The parent is skipped when the current directory is the repository root.
    """
    current = Path(current_dir)
    root = Path(repo_root) if repo_root is not None else None

    parent: Path | None = None
    if root != current and current.parent != current:
        parent = current.parent

    check_dirs: list[Path] = []
    for candidate in (parent, root):
        if candidate is None:
            continue
        if check_dirs and check_dirs[-1] == candidate:
            continue
        check_dirs.append(candidate)

    for directory in check_dirs:
        if directory == current:
            continue
        version = check_directory_for_global_json(directory)
        if version is not None:
            return version
    return None


def estimate_dotnet_version(
    files: Sequence[DotNetFile],
    current_dir: str | os.PathLike[str],
    repo_root: str | os.PathLike[str] | None,
) -> str | None:
    """Estimate the SDK version from the .NET files in the current directory."""

    def first_of(file_type: FileType) -> DotNetFile | None:
        return next((f for f in files if f.file_type == file_type), None)

    relevant = (
        first_of(FileType.GLOBAL_JSON)
        or first_of(FileType.SOLUTION_FILE)
        or next(iter(files), None)
    )
    if relevant is None:
        return None

    if relevant.file_type == FileType.GLOBAL_JSON:
        pinned = get_pinned_sdk_version_from_file(relevant.path)
        return pinned if pinned is not None else get_latest_sdk_from_cli()
    if relevant.file_type == FileType.SOLUTION_FILE:
        # A global.json is assumed not to exist above a solution file.
        return get_latest_sdk_from_cli()
    nearby = try_find_nearby_global_json(current_dir, repo_root)
    return nearby if nearby is not None else get_latest_sdk_from_cli()


def get_version_from_cli() -> str | None:
    """Run ``dotnet --version`` and return the version as "vX.Y.Z"."""
    try:
        completed = subprocess.run(
            ["dotnet", "--version"],
            capture_output=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --version`. %s", error)
        return None
    try:
        version = completed.stdout.decode("utf-8").strip()
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def _latest_sdk_from_listing(text: str) -> str | None:
    """Take the version from the last non-empty line of ``--list-sdks`` output."""
    lines = [line.strip() for line in text.splitlines() if line.strip()]
    if not lines:
        return None
    latest_sdk = lines[-1]
    bracket = latest_sdk.find("[")
    if bracket < 1:
        return None
    take_until = bracket - 1
    if take_until <= 1:
        return None
    return f"v{latest_sdk[:take_until]}"


def get_latest_sdk_from_cli() -> str | None:
    """Return the newest installed SDK from ``dotnet --list-sdks``.

    Older command lines lack ``--list-sdks``; on a failing exit status the
    version from ``dotnet --version`` is used instead.
    """
    try:
        completed = subprocess.run(
            ["dotnet", "--list-sdks"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError as error:
        log.warning("Failed to execute `dotnet --list-sdks`. %s", error)
        return None

    if completed.returncode != 0:
        log.warning(
            "Received a non-success exit code from `dotnet --list-sdks`. "
            "Falling back to `dotnet --version`."
        )
        return get_version_from_cli()

    try:
        text = completed.stdout.decode("utf-8")
    except UnicodeDecodeError:
        return None

    version = _latest_sdk_from_listing(text)
    if version is None:
        log.warning("Unable to parse the output from `dotnet --list-sdks`.")
    return version