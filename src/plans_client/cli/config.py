"""Client configuration.

Resolution order for the service URL:
    1. --url command option
    2. OB_URL environment variable
    3. service_url in ~/.config/plans-client/config.toml
    4. DEFAULT_SERVICE_URL

Example config.toml:
    service_url = "https://plans.example.com/v1"
    timeout = 10
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

DEFAULT_SERVICE_URL = "http://localhost:9080/v1"
DEFAULT_TIMEOUT_SECONDS = 30.0
SERVICE_URL_ENV_VAR = "OB_URL"


@dataclass(frozen=True)
class ClientConfig:
    """In-memory representation of the resolved client configuration."""

    service_url: str
    timeout_seconds: float

    def with_service_url(self, url: str | None) -> "ClientConfig":
        """Return a copy using url when given, otherwise self."""
        if url is None:
            return self
        return replace(self, service_url=url)


def default_config_path() -> Path:
    return Path.home() / ".config" / "plans-client" / "config.toml"


def load_client_config(*, config_path: Path, environ: Mapping[str, str]) -> ClientConfig:
    """Load configuration from the TOML file and environment.

    Args:
        config_path: Path to config.toml; a missing file means defaults
        environ: Environment variables (os.environ in production)

    Returns:
        ClientConfig with environment overriding the file

    Raises:
        ValueError: If the file is not valid TOML or timeout is not a number
    """
    data: dict[str, object] = {}
    if config_path.exists():
        try:
            data = tomllib.loads(config_path.read_text(encoding="utf-8"))
        except tomllib.TOMLDecodeError as e:
            msg = f"invalid configuration file {config_path}: {e}"
            raise ValueError(msg) from e

    service_url = str(data.get("service_url", DEFAULT_SERVICE_URL))
    env_url = environ.get(SERVICE_URL_ENV_VAR)
    if env_url:
        service_url = env_url

    timeout = data.get("timeout", DEFAULT_TIMEOUT_SECONDS)
    if isinstance(timeout, bool) or not isinstance(timeout, int | float):
        msg = f"invalid configuration file {config_path}: timeout must be a number"
        raise ValueError(msg)

    return ClientConfig(service_url=service_url, timeout_seconds=float(timeout))
