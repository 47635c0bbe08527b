from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from bruno import templates
from bruno.templates import CATALOG, MODULES_CATALOG, Template, catalog


def test_catalog_paths_are_in_write_order():
    assert [template.path for template in CATALOG] == [
        "src/lib.rs",
        "src/main.rs",
        ".env.example",
        "README.md",
        ".gitignore",
        "bruno.json",
    ]


def test_catalog_content_matches_template_functions():
    expected = {
        "src/lib.rs": templates.lib_rs(),
        "src/main.rs": templates.main_rs(),
        ".env.example": templates.env_example(),
        "README.md": templates.readme_md(),
        ".gitignore": templates.gitignore(),
        "bruno.json": templates.bruno_json(),
    }
    assert {template.path: template.content for template in CATALOG} == expected


def test_template_functions_are_deterministic():
    assert templates.lib_rs() is templates.lib_rs()
    assert templates.readme_md() == templates.readme_md()


def test_templates_are_frozen():
    with pytest.raises(ValidationError):
        CATALOG[0].content = "changed"


def test_template_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        Template(path="a", content="b", mode=0o644)


def test_bruno_json_is_a_project_description():
    data = json.loads(templates.bruno_json())
    assert data == {
        "name": "bruno-project",
        "version": "0.1.0",
        "description": "A project created with Bruno CLI",
    }


def test_env_example_lists_stylus_settings():
    keys = [line.split("=", 1)[0] for line in templates.env_example().splitlines() if line]
    assert keys == ["RPC_URL", "STYLUS_CONTRACT_ADDRESS", "PRIV_KEY_PATH"]


def test_gitignore_covers_build_output_and_secrets():
    assert templates.gitignore().splitlines() == ["/target", ".env"]


def test_catalog_without_modules_is_the_default_set():
    assert catalog() is CATALOG


def test_catalog_with_modules_appends_module_layout():
    combined = catalog(with_modules=True)
    assert [template.path for template in combined[: len(CATALOG)]] == [
        template.path for template in CATALOG
    ]
    assert combined[1:len(CATALOG)] == CATALOG[1:]
    assert combined[len(CATALOG) :] == MODULES_CATALOG
    assert {template.path.split("/")[1] for template in MODULES_CATALOG} == {
        "models",
        "utils",
        "controllers",
        "views",
    }


def test_catalog_paths_are_unique():
    paths = [template.path for template in catalog(with_modules=True)]
    assert len(paths) == len(set(paths))


def test_catalog_with_modules_declares_modules_in_crate_root():
    crate_root = next(t for t in catalog(with_modules=True) if t.path == "src/lib.rs")
    assert crate_root.content == templates.lib_rs_with_modules()
    assert crate_root.content.startswith(templates.lib_rs())
    for module in ("models", "utils", "controllers", "views"):
        assert f"pub mod {module};" in crate_root.content
        assert any(t.path == f"src/{module}/mod.rs" for t in MODULES_CATALOG)


def test_default_crate_root_declares_no_layout_modules():
    assert "pub mod models;" not in catalog()[0].content


def test_app_controller_logs_user_before_moving_it():
    app = next(t for t in MODULES_CATALOG if t.path == "src/controllers/app.rs").content
    assert app.index('info(&format!("Added user') < app.index("self.users.push(user);")
