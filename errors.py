#!/usr/bin/env python3
"""Exception classes for gitlab-mirror-migrate."""

from __future__ import annotations


class MigrationError(Exception):
    """Base exception for migration errors."""


class FetchError(MigrationError):
    """Raised when listing projects or repositories fails. Aborts the run."""


class PromptError(MigrationError):
    """Raised when the confirmation prompt cannot be read. Aborts the run."""


class CreateError(MigrationError):
    """Raised when a destination repository cannot be created or updated."""


class FilesystemError(MigrationError):
    """Raised when the local clone directory cannot be prepared."""


class ProcessError(MigrationError):
    """Raised when a git subprocess exits with a non-zero status."""

    def __init__(self, message: str, returncode: int = -1, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr
