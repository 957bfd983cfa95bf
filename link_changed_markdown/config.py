"""Configuration loading from YAML and environment.

Inside GitHub Actions everything needed comes from the environment:
GITHUB_TOKEN and GITHUB_EVENT_PATH. API URLs are taken from the event payload.
Tokens may also be read from a file named by GITHUB_TOKEN_FILE (Docker
secrets). For local debugging DEBUG_CREDENTIALS_PATH may point at a JSON file
``{"github": {"user": ..., "pass": ...}}`` used as HTTP basic auth instead of
a token.
"""

import json
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from link_changed_markdown.exceptions import ConfigError
from link_changed_markdown.models import fetch_key


def _read_secret(env_key: str, file_env_key: str) -> str | None:
    """Read secret from env var or from file path in env (e.g. Docker
    secrets)."""
    value = os.environ.get(env_key)
    if value:
        return value.strip()
    file_path = os.environ.get(file_env_key)
    if file_path:
        return Path(file_path).read_text().strip()
    return None


class Credentials(BaseModel):
    """Either a bearer token or a basic-auth pair."""

    token: str | None = None
    user: str | None = None
    password: str | None = None

    @property
    def basic_auth(self) -> tuple[str, str] | None:
        if self.user is not None and self.password is not None:
            return (self.user, self.password)
        return None


class GitHubConfig(BaseSettings):
    """GitHub API and Actions event settings."""

    model_config = SettingsConfigDict(env_prefix="GITHUB_", extra="ignore")

    token: str | None = Field(default=None, description="Token; use env or secret file")
    event_path: str | None = Field(default=None, description="Path to the webhook event JSON")
    timeout: float = Field(default=30, gt=0, description="Per-request timeout in seconds")


class LoggingConfig(BaseSettings):
    """Logging settings."""

    model_config = SettingsConfigDict(env_prefix="LOGGING_", extra="ignore")

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format",
    )


class AppConfig(BaseSettings):
    """Root application config from YAML + env."""

    model_config = SettingsConfigDict(extra="ignore")

    github: GitHubConfig = Field(default_factory=GitHubConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def github_token_resolved(self) -> str | None:
        """Resolve GitHub token from config, env or Docker secret file."""
        t = self.github.token
        if t and not t.startswith("${"):
            return t
        return _read_secret("GITHUB_TOKEN", "GITHUB_TOKEN_FILE")

    def credentials(self) -> Credentials:
        """Basic auth from DEBUG_CREDENTIALS_PATH if set, else the token."""
        debug_path = os.environ.get("DEBUG_CREDENTIALS_PATH")
        if debug_path:
            source = f"credentials file {debug_path}"
            try:
                creds = json.loads(Path(debug_path).read_text())
            except (OSError, ValueError) as e:
                raise ConfigError(f"Cannot read {source}: {e}") from e
            return Credentials(
                user=fetch_key(creds, "github", "user", source=source),
                password=fetch_key(creds, "github", "pass", source=source),
            )

        token = self.github_token_resolved
        if not token:
            raise ConfigError("No GitHub credentials: set GITHUB_TOKEN or GITHUB_TOKEN_FILE")
        return Credentials(token=token)

    def event_path_resolved(self, override: Path | None = None) -> Path:
        """Event file from CLI override, config, or GITHUB_EVENT_PATH."""
        if override is not None:
            return override
        p = self.github.event_path
        if p and not p.startswith("${"):
            return Path(p)
        env_path = os.environ.get("GITHUB_EVENT_PATH")
        if env_path:
            return Path(env_path)
        raise ConfigError("No event payload: set GITHUB_EVENT_PATH or pass --event")


def _substitute_env(value: Any) -> Any:
    """Replace ${VAR} and $VAR in strings with os.environ."""
    if isinstance(value, str):
        if value.startswith("${") and value.endswith("}"):
            key = value[2:-1].strip()
            return os.environ.get(key, value)
        if value.startswith("$") and not value.startswith("${"):
            key = value[1:].strip()
            return os.environ.get(key, value)
        return value
    if isinstance(value, dict):
        return {k: _substitute_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_substitute_env(v) for v in value]
    return value


def load_config(config_path: Path | None = None) -> AppConfig:
    """Load config from an optional YAML file and the environment.

    A missing file is not an error: defaults plus environment are used.
    """
    path = config_path or Path("config.yaml")
    if not path.is_file():
        return AppConfig()

    raw = yaml.safe_load(path.read_text()) or {}
    raw = _substitute_env(raw)

    github = GitHubConfig(**(raw.get("github") or {}))
    logging = LoggingConfig(**(raw.get("logging") or {}))
    return AppConfig(github=github, logging=logging)
