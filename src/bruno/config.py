"""Configuration for a single ``bruno init`` run."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(slots=True)
class ProjectConfig:
    """Everything the scaffolder needs to create one project.

    Attributes
    ----------
    name:
        The project name exactly as the user typed it. It becomes the
        directory name, the crate name, and the ``--name`` passed to
        ``cargo init``. No validation is applied.
    directory:
        The parent directory in which the project directory is created.
    cargo:
        The executable invoked for ``init --name <name>``.
    with_modules:
        When ``True`` the models/controllers/views/utils layout is written
        alongside the default templates.
    """

    name: str
    directory: Path = field(default_factory=Path.cwd)
    cargo: str = "cargo"
    with_modules: bool = False

    @classmethod
    def from_name(
        cls,
        name: str,
        *,
        directory: str | Path | None = None,
        cargo: str = "cargo",
        with_modules: bool = False,
    ) -> "ProjectConfig":
        """Build a :class:`ProjectConfig` for ``name``.

        Parameters
        ----------
        name:
            The project name, used verbatim.
        directory:
            Parent directory for the project. Defaults to the current working
            directory.
        cargo:
            Name or path of the external init executable.
        with_modules:
            Also emit the optional module layout.
        """

        parent = Path(directory) if directory is not None else Path.cwd()
        return cls(name=name, directory=parent, cargo=cargo, with_modules=with_modules)

    @property
    def project_dir(self) -> Path:
        return self.directory / self.name
