"""Custom exception hierarchy for tailor.

All tailor-specific exceptions derive from TailorError. Each exception
carries an optional ``context`` dict with structured metadata
(project root, resource URI, file path, etc.) that the CLI error
handler can render.

Exception hierarchy::

    TailorError
    ├── ProjectNotFoundError
    ├── AnalysisError
    ├── InvalidAnalysisDataError
    ├── ArtifactWriteError
    ├── UnknownResourceError
    ├── UnknownPromptError
    └── ConfigError
"""
from __future__ import annotations

from typing import Optional


class TailorError(Exception):
    """Base class for all tailor exceptions.

    Args:
        message: Human-readable error description.
        context: Optional dict of structured metadata.
    """

    exit_code: int = 1

    def __init__(self, message: str, context: Optional[dict] = None):
        self.context = context or {}
        super().__init__(message)


# ── Project Errors ─────────────────────────────────────────────────

class ProjectNotFoundError(TailorError):
    """Raised when the project root is missing or not a directory."""

    def __init__(self, project_root: str):
        super().__init__(
            f"Not a directory: {project_root}",
            context={"project": project_root},
        )


class AnalysisError(TailorError):
    """Raised when a tailor operation cannot produce its result."""

    def __init__(self, message: str, project_root: str = "", operation: str = ""):
        super().__init__(
            message,
            context={"project": project_root, "operation": operation},
        )


class InvalidAnalysisDataError(TailorError):
    """Raised when a precomputed analysis report cannot be parsed."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid analysis data: {reason}",
            context={"reason": reason},
        )


class ArtifactWriteError(TailorError):
    """Raised when a generated artifact cannot be written to disk."""

    def __init__(self, message: str, file_path: str = "", operation: str = ""):
        super().__init__(
            message,
            context={"file": file_path, "operation": operation},
        )


# ── Lookup Errors ──────────────────────────────────────────────────

class UnknownResourceError(TailorError):
    """Raised when a resource URI is not served by tailor."""

    def __init__(self, uri: str, available: Optional[list[str]] = None):
        available_str = f". Available: {', '.join(available)}" if available else ""
        super().__init__(
            f"Unknown resource URI: {uri}{available_str}",
            context={"uri": uri},
        )


class UnknownPromptError(TailorError):
    """Raised when a prompt name is not registered."""

    def __init__(self, prompt_name: str):
        super().__init__(
            f"Unknown prompt: {prompt_name}",
            context={"prompt": prompt_name},
        )


class ConfigError(TailorError):
    """Raised when configuration is invalid or missing."""
    pass
