"""Configuration for docsrel."""

from pathlib import Path
from dataclasses import dataclass
import os

import yaml

from docsrel.core.errors import ConfigError


GITHUB_API_BASE = "https://api.github.com"
DEFAULT_TIMEOUT = 30.0


@dataclass
class DocsrelConfig:
    """Configuration for the release service."""

    org: str
    token: str | None = None
    api_url: str = GITHUB_API_BASE
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def default(cls) -> "DocsrelConfig":
        """Create config from environment variables."""
        return cls(
            org=os.environ.get("DOCSREL_ORG", ""),
            token=os.environ.get("GITHUB_TOKEN") or None,
            api_url=os.environ.get("DOCSREL_API_URL", GITHUB_API_BASE),
        )

    @classmethod
    def load(cls, path: Path) -> "DocsrelConfig":
        """Load config from a YAML file.

        Keys missing from the file fall back to the environment.
        """
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}")

        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid config file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Invalid config file {path}: expected a mapping")

        env = cls.default()
        try:
            timeout = float(data.get("timeout", env.timeout))
        except (TypeError, ValueError) as e:
            raise ConfigError(f"Invalid timeout in {path}: {data['timeout']!r}") from e

        return cls(
            org=_string(data, "org", path) or env.org,
            token=_string(data, "token", path) or env.token,
            api_url=_string(data, "api_url", path) or env.api_url,
            timeout=timeout,
        )

    def validate(self) -> None:
        """Ensure the config can be used to query releases."""
        if not self.org:
            raise ConfigError("No organization configured (set DOCSREL_ORG or --org)")
        if self.timeout <= 0:
            raise ConfigError(f"Timeout must be positive, got {self.timeout}")
        if not self.api_url.startswith(("http://", "https://")):
            raise ConfigError(f"API URL must be http(s), got {self.api_url!r}")


def _string(data: dict, key: str, path: Path) -> str | None:
    """Read an optional scalar config value as a string."""
    value = data.get(key)
    if value is None:
        return None
    if isinstance(value, (dict, list, bool)):
        raise ConfigError(f"Invalid {key} in {path}: expected a string, got {value!r}")
    return str(value).strip() or None
