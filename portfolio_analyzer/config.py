"""
Configuration management for GitHub Portfolio Analyzer.

Settings are resolved from (highest priority first):
1. Values set explicitly via the set_* functions (CLI options)
2. Environment variables (a .env file is honoured)
3. .portfolio-analyzer.toml (local config)
4. pyproject.toml ([tool.portfolio-analyzer] table)
5. Built-in defaults
"""

import os
import tomllib
from pathlib import Path
from typing import Any

# Config files are looked up relative to the working directory
PROJECT_ROOT = Path.cwd()

DEFAULT_API_BASE_URL = "https://api.github.com"
# Default request timeout in seconds
DEFAULT_TIMEOUT = 10.0

# Global configuration for SSL verification
# Default: True (verify SSL certificates)
# Can be set to False by CLI --insecure flag
VERIFY_SSL = True

# Explicit overrides (None means "not set")
_API_BASE_URL: str | None = None
_TIMEOUT: float | None = None


def load_config_file(config_path: Path) -> dict:
    """Load a TOML configuration file."""
    if not config_path.exists():
        return {}
    try:
        with open(config_path, "rb") as f:
            return tomllib.load(f)
    except Exception as e:
        raise ValueError(f"Failed to load config from {config_path}: {e}") from e


def get_file_config() -> dict[str, Any]:
    """
    Load the [tool.portfolio-analyzer] table from configuration files.

    Priority:
    1. .portfolio-analyzer.toml (local config, highest priority)
    2. pyproject.toml (project-level config, fallback)

    Returns:
        The settings table, or an empty dict when neither file defines one.
    """
    local_config_path = PROJECT_ROOT / ".portfolio-analyzer.toml"
    if local_config_path.exists():
        config = load_config_file(local_config_path)
        settings = config.get("tool", {}).get("portfolio-analyzer", {})
        if settings:
            return settings

    pyproject_path = PROJECT_ROOT / "pyproject.toml"
    if pyproject_path.exists():
        config = load_config_file(pyproject_path)
        return config.get("tool", {}).get("portfolio-analyzer", {})

    return {}


def set_verify_ssl(verify: bool) -> None:
    """
    Set the SSL verification setting globally.

    Args:
        verify: Whether to verify SSL certificates.
    """
    global VERIFY_SSL
    VERIFY_SSL = verify


def get_verify_ssl() -> bool:
    """Get the current SSL verification setting."""
    return VERIFY_SSL


def get_github_token() -> str | None:
    """
    Get the GitHub token used for authenticated requests.

    Reads the GITHUB_TOKEN environment variable (a .env file is honoured).

    Returns:
        The token, or None for unauthenticated access (lower rate limits).
    """
    return os.getenv("GITHUB_TOKEN") or None


def set_api_base_url(url: str | None) -> None:
    """Set the REST API base URL explicitly (None clears the override)."""
    global _API_BASE_URL
    _API_BASE_URL = url


def get_api_base_url() -> str:
    """
    Get the GitHub REST API base URL, without a trailing slash.

    Priority:
    1. Explicitly set value via set_api_base_url()
    2. PORTFOLIO_ANALYZER_API_URL environment variable
    3. api_url in the config files
    4. Default: https://api.github.com
    """
    if _API_BASE_URL:
        return _API_BASE_URL.rstrip("/")

    env_url = os.getenv("PORTFOLIO_ANALYZER_API_URL")
    if env_url:
        return env_url.rstrip("/")

    file_url = get_file_config().get("api_url")
    if file_url:
        return str(file_url).rstrip("/")

    return DEFAULT_API_BASE_URL


def set_timeout(seconds: float | None) -> None:
    """Set the HTTP request timeout explicitly (None clears the override)."""
    global _TIMEOUT
    _TIMEOUT = seconds


def get_timeout() -> float:
    """
    Get the HTTP request timeout in seconds.

    Priority:
    1. Explicitly set value via set_timeout()
    2. PORTFOLIO_ANALYZER_TIMEOUT environment variable
    3. timeout in the config files
    4. Default: 10 seconds
    """
    if _TIMEOUT is not None:
        return _TIMEOUT

    env_timeout = os.getenv("PORTFOLIO_ANALYZER_TIMEOUT")
    if env_timeout:
        try:
            return float(env_timeout)
        except ValueError:
            pass

    file_timeout = get_file_config().get("timeout")
    if file_timeout is not None:
        return float(file_timeout)

    return DEFAULT_TIMEOUT
