"""Run ``cargo init`` for a freshly created project directory."""

from __future__ import annotations

import logging
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from .errors import ExternalInitError

__all__ = ["CommandResult", "run_command", "run_external_init"]


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CommandResult:
    """Exit status and captured output of a finished process."""

    args: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def run_command(args: Sequence[str], cwd: str | Path) -> CommandResult:
    """Run ``args`` in ``cwd`` and wait for it to finish.

    Output is captured rather than streamed and undecodable bytes become
    U+FFFD. There is no timeout. A process
    that cannot be started raises :class:`ExternalInitError`; a non-zero exit
    status is reported through the returned :class:`CommandResult`.
    """

    LOGGER.debug("running %s in %s", " ".join(args), cwd)
    try:
        completed = subprocess.run(
            list(args),
            cwd=cwd,
            capture_output=True,
            check=False,
            text=True,
            errors="replace",
        )
    except OSError as exc:
        raise ExternalInitError(args, stderr=str(exc)) from exc

    return CommandResult(
        args=tuple(args),
        returncode=completed.returncode,
        stdout=completed.stdout,
        stderr=completed.stderr,
    )


def run_external_init(
    root_dir: str | Path,
    project_name: str,
    *,
    executable: str = "cargo",
) -> CommandResult:
    """Initialize a Cargo package named ``project_name`` inside ``root_dir``."""

    result = run_command([executable, "init", "--name", project_name], cwd=root_dir)
    if not result.ok:
        raise ExternalInitError(result.args, returncode=result.returncode, stderr=result.stderr)
    if result.stderr.strip():
        # cargo reports progress on stderr even when it succeeds
        LOGGER.debug("%s: %s", result.args[0], result.stderr.strip())
    return result
