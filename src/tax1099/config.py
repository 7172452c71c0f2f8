"""
Configuration module for the Tax1099 API client.

Loads settings from environment variables with sensible defaults for the
staging environment. Never logs or exposes sensitive values like passwords
or session tokens.
"""

import os
from enum import Enum
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional


# Server-side session tokens live 60 minutes; refresh 5 minutes early
DEFAULT_TOKEN_LEASE_SECONDS = 55 * 60
DEFAULT_TIMEOUT_SECONDS = 90.0


class Environment(str, Enum):
    """Tax1099 deployment the client talks to."""
    STAGING = "staging"
    PRODUCTION = "production"

    @classmethod
    def parse(cls, value: str) -> "Environment":
        """Parse a case-insensitive environment name."""
        try:
            return cls(value.strip().lower())
        except ValueError:
            raise ValueError(
                f"Invalid TAX1099_ENVIRONMENT: {value}. Must be 'staging' or 'production'."
            )


@dataclass(frozen=True)
class Tax1099Config:
    """Immutable configuration for Tax1099 API integration."""

    # Account credentials
    username: str
    password: str = field(repr=False)
    app_key: str = field(repr=False)

    environment: Environment = Environment.STAGING

    # Overall per-request timeout
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    # Client-side token validity window, shorter than the server's
    token_lease_seconds: int = DEFAULT_TOKEN_LEASE_SECONDS

    def __post_init__(self):
        """Validate configuration on creation."""
        if not self.username:
            raise ValueError("TAX1099_USERNAME environment variable is required")
        if not self.password:
            raise ValueError("TAX1099_PASSWORD environment variable is required")
        if not self.app_key:
            raise ValueError("TAX1099_APP_KEY environment variable is required")
        if not isinstance(self.environment, Environment):
            object.__setattr__(self, "environment", Environment.parse(str(self.environment)))
        if self.timeout_seconds <= 0:
            raise ValueError("timeout_seconds must be positive")
        if self.token_lease_seconds <= 0:
            raise ValueError("token_lease_seconds must be positive")

    @property
    def is_production(self) -> bool:
        return self.environment is Environment.PRODUCTION


def load_config() -> Tax1099Config:
    """
    Load Tax1099 configuration from environment variables.

    Required environment variables:
        TAX1099_USERNAME: Account login (email)
        TAX1099_PASSWORD: Account password
        TAX1099_APP_KEY: Application key issued by Tax1099

    Optional environment variables:
        TAX1099_ENVIRONMENT: "staging" or "production" (default: staging)
        TAX1099_TIMEOUT: Per-request timeout in seconds (default: 90)
        TAX1099_TOKEN_LEASE_SECONDS: Token refresh window (default: 3300)

    Returns:
        Tax1099Config: Validated configuration object

    Raises:
        ValueError: If required environment variables are missing or malformed
    """
    environment = Environment.parse(os.environ.get("TAX1099_ENVIRONMENT", "staging"))

    try:
        timeout = float(os.environ.get("TAX1099_TIMEOUT", DEFAULT_TIMEOUT_SECONDS))
        lease = int(os.environ.get("TAX1099_TOKEN_LEASE_SECONDS", DEFAULT_TOKEN_LEASE_SECONDS))
    except ValueError as e:
        raise ValueError(f"Invalid numeric Tax1099 setting: {e}")

    return Tax1099Config(
        username=os.environ.get("TAX1099_USERNAME", ""),
        password=os.environ.get("TAX1099_PASSWORD", ""),
        app_key=os.environ.get("TAX1099_APP_KEY", ""),
        environment=environment,
        timeout_seconds=timeout,
        token_lease_seconds=lease,
    )


def load_config_from_dotenv(dotenv_path: Optional[Path] = None) -> Tax1099Config:
    """
    Load configuration after reading from .env file.

    Args:
        dotenv_path: Path to .env file. Defaults to ./.env

    Returns:
        Tax1099Config: Validated configuration object
    """
    from dotenv import load_dotenv

    if dotenv_path is None:
        dotenv_path = Path.cwd() / ".env"

    load_dotenv(dotenv_path)
    return load_config()
