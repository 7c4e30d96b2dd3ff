"""Configuration helpers for the Mazzura client."""

from dataclasses import dataclass
from pathlib import Path
import math
import os
from typing import Optional

DEFAULT_BACKEND_URL = "http://localhost:8000"
BACKEND_URL_KEYS = ("mazzura_backend_url", "vite_backend_url", "backend_url")


@dataclass
class ClientConfig:
    """Configuration values for the client.

    Only the backend base URL matters for day to day use. The request timeout
    is unset by default so every call is a single attempt that waits for the
    backend to answer.
    """

    backend_url: str = DEFAULT_BACKEND_URL
    request_timeout: Optional[float] = None
    log_level: str = "INFO"
    environment: str | None = None

    def __post_init__(self) -> None:
        self.backend_url = (self.backend_url or DEFAULT_BACKEND_URL).rstrip("/")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged underneath environment variables.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("MAZZURA_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        backend_url = None
        for key in BACKEND_URL_KEYS:
            backend_url = get_value(key)
            if backend_url:
                break

        return cls(
            backend_url=str(backend_url or DEFAULT_BACKEND_URL),
            request_timeout=cls._parse_timeout(get_value("mazzura_request_timeout")),
            log_level=str(get_value("log_level", "INFO") or "INFO"),
            environment=env_name,
        )

    @staticmethod
    def _parse_timeout(raw: Optional[str]) -> Optional[float]:
        if raw is None or not str(raw).strip():
            return None
        try:
            value = float(raw)
        except ValueError:
            return None
        if math.isnan(value) or value <= 0:
            return None
        return value

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a minimal flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
