"""Global configuration constants for the project.

Defines the template origin, Node.js version thresholds, validation rules and
logging defaults used across the setup flow.
"""

from __future__ import annotations

from pathlib import Path

# Project directories
PROJECT_ROOT: Path = Path(__file__).resolve().parents[1]
PACKAGE_DIR: Path = PROJECT_ROOT / "starterkit"

# CLI identity
CLI_NAME: str = "create-expressjs-starterkit"
LOG_PREFIX: str = "expressjs-cli"

# Template repositories
ORIGIN_GIT_REPO: str = "https://github.com/masb0ymas"
ORIGIN_ENV_VAR: str = "STARTERKIT_ORIGIN"
CLONE_DEPTH: int = 1
VCS_METADATA_DIRNAME: str = ".git"

# Runtime requirements for the generated project
NODE_EXECUTABLE: str = "node"
MIN_NODE_VERSION: int = 20
RECOMMENDED_NODE_VERSION: int = 22

# Prompt validation
PROJECT_NAME_PATTERN: str = r"^[A-Za-z0-9_.-]+$"
INTERACTIVE_MAX_INVALID_ATTEMPTS: int = 5

# Exit codes
EXIT_OK: int = 0
EXIT_FAILURE: int = 1

# Logging
DEFAULT_LOG_LEVEL: str = "WARNING"
LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# UI defaults
LANG: str = "en"
