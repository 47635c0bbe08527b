"""Project scaffolding helpers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from .cargo import run_external_init
from .config import ProjectConfig
from .errors import MaterializeError, ProjectDirectoryError
from .manifest import MANIFEST_NAME, build_manifest
from .templates import Template, catalog

__all__ = ["ProjectScaffolder", "create_project_dir", "materialize", "write_manifest"]


LOGGER = logging.getLogger(__name__)

Step = tuple[str, Callable[[], object]]


def create_project_dir(root_dir: Path) -> Path:
    """Create ``root_dir`` and its parents; an existing directory is fine."""

    try:
        root_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ProjectDirectoryError(root_dir, exc.strerror or str(exc)) from exc
    return root_dir


def _write(destination: Path, content: str) -> None:
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise MaterializeError(destination, exc.strerror or str(exc)) from exc
    LOGGER.debug("wrote %s", destination)


def materialize(root_dir: str | Path, templates: Iterable[Template]) -> list[Path]:
    """Write every template below ``root_dir``, replacing existing files.

    Stops at the first failure; files written before it are left in place.
    """

    root_path = Path(root_dir)
    written: list[Path] = []
    for template in templates:
        destination = root_path / template.path
        _write(destination, template.content)
        written.append(destination)
    return written


def write_manifest(root_dir: str | Path, project_name: str) -> Path:
    destination = Path(root_dir) / MANIFEST_NAME
    _write(destination, build_manifest(project_name))
    return destination


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a Bruno project described by ``config``."""

    config: ProjectConfig

    def steps(self) -> list[Step]:
        """Return the ordered pipeline of fallible steps for this project."""

        config = self.config
        root = config.project_dir
        return [
            ("create project directory", lambda: create_project_dir(root)),
            (
                f"run '{config.cargo} init'",
                lambda: run_external_init(root, config.name, executable=config.cargo),
            ),
            (
                "write project templates",
                lambda: materialize(root, catalog(with_modules=config.with_modules)),
            ),
            (f"write {MANIFEST_NAME}", lambda: write_manifest(root, config.name)),
        ]

    def create(self) -> Path:
        """Run every step in order and return the project directory.

        The first failing step propagates its exception; later steps do not
        run and nothing is rolled back.
        """

        for description, step in self.steps():
            LOGGER.debug("%s: %s", self.config.name, description)
            step()
        return self.config.project_dir
