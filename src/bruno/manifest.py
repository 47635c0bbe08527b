"""Generate the ``Cargo.toml`` written into new projects."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEPENDENCIES", "MANIFEST_NAME", "Dependency", "build_manifest"]


MANIFEST_NAME = "Cargo.toml"


@dataclass(frozen=True, slots=True)
class Dependency:
    """A crate requirement in the ``[dependencies]`` table."""

    name: str
    version: str
    features: tuple[str, ...] = ()

    def to_toml(self) -> str:
        if not self.features:
            return f'{self.name} = "{self.version}"'
        features = ", ".join(f'"{feature}"' for feature in self.features)
        return f'{self.name} = {{ version = "{self.version}", features = [{features}] }}'


DEPENDENCIES: tuple[Dependency, ...] = (
    Dependency("serde", "1.0", ("derive",)),
    Dependency("serde_json", "1.0"),
    Dependency("tokio", "1.32", ("full",)),
    Dependency("anyhow", "1.0"),
    Dependency("thiserror", "1.0"),
)

MANIFEST_TEMPLATE = """\
[package]
name = "{name}"
version = "0.1.0"
edition = "2021"

[dependencies]
{dependencies}
"""


def build_manifest(project_name: str) -> str:
    """Return the manifest text for ``project_name``.

    The name is inserted verbatim; callers are responsible for passing a
    valid crate name.
    """

    dependencies = "\n".join(dependency.to_toml() for dependency in DEPENDENCIES)
    return MANIFEST_TEMPLATE.format(name=project_name, dependencies=dependencies)
