"""Version detection for language toolchains and Terraform workspaces."""

from __future__ import annotations

import os
import subprocess
from pathlib import Path, PurePath

from starprompt.process import exec_cmd, read_file

_PHP_VERSION_SCRIPT = (
    "echo PHP_MAJOR_VERSION.'.'.PHP_MINOR_VERSION.'.'.PHP_RELEASE_VERSION;"
)


def _strip_repeated_prefix(text: str, prefix: str) -> str:
    while prefix and text.startswith(prefix):
        text = text[len(prefix):]
    return text


def format_go_version(go_stdout: str) -> str | None:
    """Extract the version from ``go version`` output, e.g. "v1.13.3"."""
    # Output looks like: "go version go1.13.3 linux/amd64"
    _, separator, rest = go_stdout.partition("go version go")
    if not separator:
        return None
    words = rest.split()
    if not words:
        return None
    return f"v{words[0]}"


def get_go_version() -> str | None:
    """Run ``go version`` and return the formatted version."""
    output = exec_cmd("go", ["version"])
    if output is None:
        return None
    return format_go_version(output.stdout)


def format_php_version(php_version: str) -> str:
    """Prefix a PHP version string with "v"."""
    return f"v{php_version}"


def get_php_version() -> str | None:
    """Ask PHP for its version and return the raw output.

    Returns ``None`` only when PHP cannot be started.
    """
    try:
        completed = subprocess.run(
            ["php", "-r", _PHP_VERSION_SCRIPT],
            capture_output=True,
            stdin=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return None
    return completed.stdout.decode("utf-8")


def format_ruby_version(ruby_version: str) -> str | None:
    """Extract the first five characters of the version from ``ruby -v``."""
    # Output looks like: "ruby 2.6.0p0 (2018-12-25 revision 66547) [x86_64-linux]"
    words = ruby_version.split()
    if len(words) < 2:
        return None
    raw = words[1].encode("utf-8")
    if len(raw) < 5:
        return None
    try:
        version = raw[:5].decode("utf-8")
    except UnicodeDecodeError:
        return None
    return f"v{version}"


def get_ruby_version() -> str | None:
    """Run ``ruby -v`` and return the formatted version."""
    output = exec_cmd("ruby", ["-v"])
    if output is None:
        return None
    return format_ruby_version(output.stdout)


def format_python_version(python_stdout: str) -> str:
    """Turn "Python 3.7.2" into "v3.7.2"."""
    return f"v{_strip_repeated_prefix(python_stdout, 'Python ').strip()}"


def get_python_version() -> str | None:
    """Run ``python --version`` and return its raw output.

    Older interpreters print the version on standard error, which is used
    when standard output is empty.
    """
    output = exec_cmd("python", ["--version"])
    if output is None:
        return None
    return output.stdout if output.stdout else output.stderr


def get_python_virtual_env() -> str | None:
    """Return the name of the active virtual environment, if any."""
    venv = os.environ.get("VIRTUAL_ENV")
    if venv is None:
        return None
    name = PurePath(venv).name
    if name in ("", ".."):
        return None
    return name


def get_node_version() -> str | None:
    """Run ``node --version`` and return the trimmed version."""
    output = exec_cmd("node", ["--version"])
    if output is None:
        return None
    return output.stdout.strip()


def format_terraform_version(version: str) -> str | None:
    """Take the version from the first line of ``terraform version`` output.

    The result carries a trailing space.
    """
    if not version:
        return None
    first_line = version.split("\n", 1)[0].removesuffix("\r")
    return _strip_repeated_prefix(first_line, "Terraform ").strip() + " "


def get_terraform_version() -> str | None:
    """Run ``terraform version`` and return the formatted version."""
    output = exec_cmd("terraform", ["version"])
    if output is None:
        return None
    return format_terraform_version(output.stdout)


def get_terraform_workspace(cwd: str | os.PathLike[str]) -> str | None:
    """Determine the selected Terraform workspace for ``cwd``.

    ``TF_WORKSPACE`` overrides everything; otherwise the ``environment`` file
    in the data directory (``TF_DATA_DIR`` or ``.terraform``) is read, and a
    missing file means the "default" workspace.
    """
    override = os.environ.get("TF_WORKSPACE")
    if override is not None:
        return override

    data_dir_env = os.environ.get("TF_DATA_DIR")
    data_dir = Path(data_dir_env) if data_dir_env is not None else Path(cwd) / ".terraform"
    try:
        return read_file(data_dir / "environment")
    except FileNotFoundError:
        return "default"
    except (OSError, UnicodeDecodeError):
        return None