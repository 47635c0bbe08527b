"""Exception types raised while scaffolding a Bruno project."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence

__all__ = [
    "ExternalInitError",
    "MaterializeError",
    "ProjectDirectoryError",
    "ScaffoldError",
]


class ScaffoldError(RuntimeError):
    """Base class for failures that abort ``bruno init``."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ProjectDirectoryError(ScaffoldError):
    """Raised when the project root directory cannot be created."""

    def __init__(self, path: Path, reason: str = "") -> None:
        message = f"failed to create project directory: {path}"
        super().__init__(f"{message} ({reason})" if reason else message)
        self.path = path


class ExternalInitError(ScaffoldError):
    """Raised when the external init command cannot start or exits non-zero.

    ``returncode`` is ``None`` when the process never started, for example
    because the executable is not on ``PATH``.
    """

    def __init__(
        self,
        command: Sequence[str],
        *,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        self.command = tuple(command)
        self.returncode = returncode
        self.stderr = stderr
        display = " ".join(self.command)
        if returncode is None:
            message = f"failed to run '{display}'"
        else:
            message = f"'{display}' exited with status {returncode}"
        detail = stderr.strip()
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class MaterializeError(ScaffoldError):
    """Raised when a template or the manifest cannot be written."""

    def __init__(self, path: Path, reason: str = "") -> None:
        message = f"failed to write {path}"
        super().__init__(f"{message} ({reason})" if reason else message)
        self.path = path
