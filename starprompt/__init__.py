"""Helpers for an informative shell prompt: tool and project versions, repository state, time, session details and layout."""

__version__ = "0.33.0"