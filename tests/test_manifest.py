from __future__ import annotations

import tomllib

import pytest

from bruno.manifest import DEPENDENCIES, MANIFEST_NAME, Dependency, build_manifest


def test_manifest_name_is_cargo_toml():
    assert MANIFEST_NAME == "Cargo.toml"


@pytest.mark.parametrize("name", ["demo", "my-contract", "counter_v2"])
def test_manifest_contains_project_name_once(name: str):
    manifest = build_manifest(name)
    assert manifest.count(name) == 1
    assert f'name = "{name}"' in manifest


def test_manifest_parses_as_toml():
    data = tomllib.loads(build_manifest("demo"))
    assert data["package"] == {"name": "demo", "version": "0.1.0", "edition": "2021"}
    assert data["dependencies"] == {
        "serde": {"version": "1.0", "features": ["derive"]},
        "serde_json": "1.0",
        "tokio": {"version": "1.32", "features": ["full"]},
        "anyhow": "1.0",
        "thiserror": "1.0",
    }


def test_dependencies_do_not_depend_on_project_name():
    first = build_manifest("alpha").split("[dependencies]", 1)[1]
    second = build_manifest("beta").split("[dependencies]", 1)[1]
    assert first == second
    for dependency in DEPENDENCIES:
        assert dependency.to_toml() in first


def test_dependency_to_toml():
    assert Dependency("anyhow", "1.0").to_toml() == 'anyhow = "1.0"'
    assert (
        Dependency("tokio", "1.32", ("full", "macros")).to_toml()
        == 'tokio = { version = "1.32", features = ["full", "macros"] }'
    )


def test_manifest_inserts_name_verbatim():
    manifest = build_manifest("odd{name}")
    assert manifest.startswith('[package]\nname = "odd{name}"\n')
