"""Discovery of the current Kubernetes context and namespace."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from starprompt.process import read_file


def get_kube_context(contents: str) -> tuple[str, str] | None:
    """Return the current context and its namespace from a kubeconfig document.

    The namespace is "" when the context does not set one. Returns ``None``
    when the document is unreadable or names no current context.
    """
    try:
        documents = list(yaml.safe_load_all(contents))
    except yaml.YAMLError:
        return None
    if not documents:
        return None
    conf = documents[0]
    if not isinstance(conf, dict):
        return None

    current_ctx = conf.get("current-context")
    if not isinstance(current_ctx, str) or not current_ctx:
        return None

    namespace = ""
    contexts = conf.get("contexts")
    if isinstance(contexts, list):
        for entry in contexts:
            if not isinstance(entry, dict) or not isinstance(entry.get("name"), str):
                continue
            if entry["name"] != current_ctx:
                continue
            details = entry.get("context")
            if isinstance(details, dict) and isinstance(details.get("namespace"), str):
                namespace = details["namespace"]
            break

    return current_ctx, namespace


def parse_kubectl_file(filename: str | os.PathLike[str]) -> tuple[str, str] | None:
    """Read a kubeconfig file and return its current context and namespace."""
    try:
        contents = read_file(filename)
    except (OSError, UnicodeDecodeError):
        return None
    return get_kube_context(contents)


def find_kube_context() -> tuple[str, str] | None:
    """Find the active context from ``KUBECONFIG`` or ``~/.kube/config``.

    With ``KUBECONFIG`` set, the first of its paths holding a current
    context wins.
    """
    paths = os.environ.get("KUBECONFIG")
    if paths is not None:
        for filename in paths.split(os.pathsep):
            result = parse_kubectl_file(filename)
            if result is not None:
                return result
        return None

    try:
        home = Path.home()
    except RuntimeError:
        return None
    return parse_kubectl_file(home / ".kube" / "config")