"""Static file contents written into every new Bruno project.

Each template is exposed through a function returning its literal text and
collected into :data:`CATALOG`, an ordered tuple of :class:`Template` pairs
built once at import time. :data:`MODULES_CATALOG` holds the optional
models/controllers/views/utils layout emitted with ``--with-modules``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "CATALOG",
    "MODULES_CATALOG",
    "Template",
    "bruno_json",
    "catalog",
    "env_example",
    "gitignore",
    "lib_rs",
    "lib_rs_with_modules",
    "main_rs",
    "readme_md",
]


class Template(BaseModel):
    """A file blueprint: where it goes and what it contains."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="POSIX path relative to the project root.")
    content: str = Field(..., description="Literal file contents.")


_LIB_RS = r'''//!
//! Stylus Hello World
//!
//! The following contract implements the Counter example from Foundry.
//!
//! ```solidity
//! contract Counter {
//!     uint256 public number;
//!     function setNumber(uint256 newNumber) public {
//!         number = newNumber;
//!     }
//!     function increment() public {
//!         number++;
//!     }
//! }
//! ```
//!
//! The program is ABI-equivalent with Solidity, which means you can call it from both Solidity and Rust.
//! To do this, run `cargo stylus export-abi`.
//!
//! Note: this code is a template-only and has not been audited.
//!
// Allow `cargo stylus export-abi` to generate a main function.
#![cfg_attr(not(any(test, feature = "export-abi")), no_main)]
extern crate alloc;

/// Import items from the SDK. The prelude contains common traits and macros.
use stylus_sdk::{alloy_primitives::U256, prelude::*};

// Define some persistent storage using the Solidity ABI.
// `Counter` will be the entrypoint.
sol_storage! {
    #[entrypoint]
    pub struct Counter {
        uint256 number;
    }
}

/// Declare that `Counter` is a contract with the following external methods.
#[public]
impl Counter {
    /// Gets the number from storage.
    pub fn number(&self) -> U256 {
        self.number.get()
    }

    /// Sets a number in storage to a user-specified value.
    pub fn set_number(&mut self, new_number: U256) {
        self.number.set(new_number);
    }

    /// Multiplies the number in storage by a user-specified value.
    pub fn mul_number(&mut self, new_number: U256) {
        self.number.set(new_number * self.number.get());
    }

    /// Adds a user-specified value to the number in storage.
    pub fn add_number(&mut self, new_number: U256) {
        self.number.set(new_number + self.number.get());
    }

    /// Increments `number` and updates its value in storage.
    pub fn increment(&mut self) {
        let number = self.number.get();
        self.set_number(number + U256::from(1));
    }

    /// Adds the wei value from msg_value to the number in storage.
    #[payable]
    pub fn add_from_msg_value(&mut self) {
        let number = self.number.get();
        self.set_number(number + self.vm().msg_value());
    }
}

#[cfg(test)]
mod test {
    use super::*;

    #[test]
    fn test_counter() {
        use stylus_sdk::testing::*;
        let vm = TestVM::default();
        let mut contract = Counter::from(&vm);

        assert_eq!(U256::ZERO, contract.number());

        contract.increment();
        assert_eq!(U256::from(1), contract.number());

        contract.add_number(U256::from(3));
        assert_eq!(U256::from(4), contract.number());

        contract.mul_number(U256::from(2));
        assert_eq!(U256::from(8), contract.number());

        contract.set_number(U256::from(100));
        assert_eq!(U256::from(100), contract.number());

        // Override the msg value for future contract method invocations.
        vm.set_value(U256::from(2));

        contract.add_from_msg_value();
        assert_eq!(U256::from(102), contract.number());
    }
}
'''

_MAIN_RS = """#![cfg_attr(not(any(test, feature = "export-abi")), no_main)]
#[cfg(not(any(test, feature = "export-abi")))]
#[no_mangle]
pub extern "C" fn main() {}

#[cfg(feature = "export-abi")]
fn main() {
    stylus_hello_world::print_abi("MIT-OR-APACHE-2.0", "pragma solidity ^0.8.23;");
}
"""

_ENV_EXAMPLE = """RPC_URL=
STYLUS_CONTRACT_ADDRESS=
PRIV_KEY_PATH=
"""

_README_MD = """# Bruno Project

A project created with Bruno CLI.

## Getting Started

```
cargo build
cargo run
```
"""

_GITIGNORE = """/target
.env
"""

_BRUNO_JSON = """{
    "name": "bruno-project",
    "version": "0.1.0",
    "description": "A project created with Bruno CLI"
}
"""


def lib_rs() -> str:
    """Library entry point: a Stylus counter contract."""

    return _LIB_RS


def main_rs() -> str:
    """Binary entry point used by ``cargo stylus export-abi``."""

    return _MAIN_RS


def env_example() -> str:
    return _ENV_EXAMPLE


def readme_md() -> str:
    return _README_MD


def gitignore() -> str:
    return _GITIGNORE


def bruno_json() -> str:
    """Project metadata read by Bruno tooling."""

    return _BRUNO_JSON


CATALOG: tuple[Template, ...] = (
    Template(path="src/lib.rs", content=lib_rs()),
    Template(path="src/main.rs", content=main_rs()),
    Template(path=".env.example", content=env_example()),
    Template(path="README.md", content=readme_md()),
    Template(path=".gitignore", content=gitignore()),
    Template(path="bruno.json", content=bruno_json()),
)


# Optional layout: one directory module per concern.

_MODELS_MOD_RS = """pub mod user;

// Re-export commonly used items
pub use user::User;
"""

_MODELS_USER_RS = """use serde::{Deserialize, Serialize};

#[derive(Debug, Serialize, Deserialize)]
pub struct User {
    pub id: u32,
    pub username: String,
    pub email: String,
}

impl User {
    pub fn new(id: u32, username: String, email: String) -> Self {
        Self { id, username, email }
    }

    pub fn display(&self) -> String {
        format!("User(id={}, username={}, email={})", self.id, self.username, self.email)
    }
}
"""

_UTILS_MOD_RS = """pub mod config;
pub mod logger;

// Re-export commonly used items
pub use config::Config;
pub use logger::{info, error, success};
"""

_UTILS_CONFIG_RS = """use serde::{Deserialize, Serialize};
use std::fs;
use std::path::Path;
use anyhow::Result;

#[derive(Debug, Serialize, Deserialize)]
pub struct Config {
    pub name: String,
    pub version: String,
    pub description: String,
}

impl Config {
    pub fn load(path: impl AsRef<Path>) -> Result<Self> {
        let content = fs::read_to_string(path)?;
        let config: Config = serde_json::from_str(&content)?;
        Ok(config)
    }

    pub fn get_full_name(&self) -> String {
        format!("{} v{}", self.name, self.version)
    }
}
"""

_UTILS_LOGGER_RS = """pub fn info(message: &str) {
    println!("[INFO] {}", message);
}

pub fn error(message: &str) {
    eprintln!("[ERROR] {}", message);
}

pub fn success(message: &str) {
    println!("[SUCCESS] {}", message);
}
"""

_CONTROLLERS_MOD_RS = """pub mod app;

// Re-export commonly used items
pub use app::App;
"""

_CONTROLLERS_APP_RS = """use crate::models::User;
use crate::utils::{Config, info};

pub struct App {
    pub config: Config,
    pub users: Vec<User>,
}

impl App {
    pub fn new(config: Config) -> Self {
        info("Initializing application");
        Self {
            config,
            users: Vec::new(),
        }
    }

    pub fn add_user(&mut self, user: User) {
        info(&format!("Added user: {}", user.display()));
        self.users.push(user);
    }

    pub fn run(&self) {
        println!("Running {} with {} users", self.config.get_full_name(), self.users.len());
        for user in &self.users {
            println!("- {}", user.display());
        }
    }
}
"""

_VIEWS_MOD_RS = """pub mod ui;

// Re-export commonly used items
pub use ui::{show_welcome_message, show_menu};
"""

_VIEWS_UI_RS = """pub fn show_welcome_message(app_name: &str) {
    println!("=============================================");
    println!("  Welcome to {}!", app_name);
    println!("  Created with Bruno CLI");
    println!("=============================================");
}

pub fn show_menu() -> u32 {
    println!("\\nMenu:");
    println!("1. Add a user");
    println!("2. List users");
    println!("3. Exit");

    // In a real app, you'd get user input here
    println!("Select an option (simulated: 1)");
    1 // Simulated selection
}
"""

MODULES_CATALOG: tuple[Template, ...] = (
    Template(path="src/models/mod.rs", content=_MODELS_MOD_RS),
    Template(path="src/models/user.rs", content=_MODELS_USER_RS),
    Template(path="src/utils/mod.rs", content=_UTILS_MOD_RS),
    Template(path="src/utils/config.rs", content=_UTILS_CONFIG_RS),
    Template(path="src/utils/logger.rs", content=_UTILS_LOGGER_RS),
    Template(path="src/controllers/mod.rs", content=_CONTROLLERS_MOD_RS),
    Template(path="src/controllers/app.rs", content=_CONTROLLERS_APP_RS),
    Template(path="src/views/mod.rs", content=_VIEWS_MOD_RS),
    Template(path="src/views/ui.rs", content=_VIEWS_UI_RS),
)


_MODULE_DECLARATIONS = """
pub mod models;
pub mod utils;
pub mod controllers;
pub mod views;
"""


def lib_rs_with_modules() -> str:
    """Library entry point that also compiles the module layout."""

    return _LIB_RS + _MODULE_DECLARATIONS


def catalog(*, with_modules: bool = False) -> tuple[Template, ...]:
    """Return the templates to write for a run, in write order.

    With ``with_modules`` the crate root is swapped for one declaring the
    ``models``, ``utils``, ``controllers`` and ``views`` modules.
    """

    if not with_modules:
        return CATALOG
    base = tuple(
        Template(path=template.path, content=lib_rs_with_modules())
        if template.path == "src/lib.rs"
        else template
        for template in CATALOG
    )
    return base + MODULES_CATALOG
