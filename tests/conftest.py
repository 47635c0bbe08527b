from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


FAKE_CARGO = """#!/bin/sh
# Stands in for `cargo init --name NAME`.
echo "$@" >> "$(dirname "$0")/calls.log"
mkdir -p src
printf '[package]\\nname = "%s"\\n' "$3" > Cargo.toml
printf 'fn main() {}\\n' > src/main.rs
echo "    Creating binary (application) package" >&2
"""

FAILING_CARGO = """#!/bin/sh
echo "error: \\`cargo init\\` cannot be run on existing Cargo packages" >&2
exit 101
"""

GARBLED_CARGO = """#!/bin/sh
printf 'error: invalid byte \\377 in path\\n' >&2
exit 101
"""


def _write_executable(path: Path, script: str) -> str:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(script, encoding="utf-8")
    path.chmod(0o755)
    return str(path)


@pytest.fixture()
def fake_cargo(tmp_path: Path) -> str:
    """Path to a script that behaves like a successful ``cargo init``."""

    return _write_executable(tmp_path / "bin" / "cargo", FAKE_CARGO)


@pytest.fixture()
def failing_cargo(tmp_path: Path) -> str:
    """Path to a script that exits 101 with a message on stderr."""

    return _write_executable(tmp_path / "bin" / "cargo-broken", FAILING_CARGO)


@pytest.fixture()
def missing_cargo() -> str:
    return "bruno-test-cargo-does-not-exist"


@pytest.fixture()
def garbled_cargo(tmp_path: Path) -> str:
    """Path to a failing script whose stderr is not valid UTF-8."""

    return _write_executable(tmp_path / "bin" / "cargo-garbled", GARBLED_CARGO)
