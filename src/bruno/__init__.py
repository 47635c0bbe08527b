"""Scaffold new Bruno projects.

``bruno init <name>`` creates a directory, delegates package creation to
``cargo init`` and then writes a fixed set of template files plus a
``Cargo.toml`` declaring the default dependencies. The pieces are usable
programmatically as well as from the command line.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .config import ProjectConfig
from .errors import ExternalInitError, MaterializeError, ProjectDirectoryError, ScaffoldError
from .manifest import DEPENDENCIES, build_manifest
from .scaffold import ProjectScaffolder, materialize
from .templates import CATALOG, MODULES_CATALOG, Template

__all__ = [
    "CATALOG",
    "DEPENDENCIES",
    "ExternalInitError",
    "MODULES_CATALOG",
    "MaterializeError",
    "ProjectConfig",
    "ProjectDirectoryError",
    "ProjectScaffolder",
    "ScaffoldError",
    "Template",
    "build_manifest",
    "materialize",
]
