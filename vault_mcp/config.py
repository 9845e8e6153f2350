import os
from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlparse

from dotenv import load_dotenv

from .exceptions import ConfigurationError

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_REQUEST_TIMEOUT = 30.0

# Load .env from project root (directory containing vault_mcp/), so env is found regardless of cwd.
# MCP clients usually start the server from their own working directory.
_project_root = Path(__file__).resolve().parent.parent
_env_file = _project_root / ".env"


def load_env_files() -> None:
    """Load .env from the project root, falling back to the current directory"""
    load_dotenv(_env_file)
    if not _env_file.exists():
        load_dotenv()


def _parse_timeout(raw: str) -> float:
    try:
        return float(raw)
    except ValueError:
        return -1.0


@dataclass(frozen=True)
class Config:
    """Application configuration"""

    # Vault REST API
    api_base_url: str = DEFAULT_API_URL
    api_key: str | None = None
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT

    # Server
    debug: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Config":
        """
        Build configuration from environment variables

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            Config instance (not yet validated)
        """
        env = os.environ if environ is None else environ

        return cls(
            api_base_url=(env.get("OBSIDIAN_API_URL") or DEFAULT_API_URL).strip(),
            api_key=env.get("OBSIDIAN_API_KEY") or None,
            request_timeout=_parse_timeout(env.get("OBSIDIAN_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT))),
            debug=env.get("DEBUG", "false").lower() == "true",
        )

    def validate(self) -> list[str]:
        """
        Validate configuration

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        parsed = urlparse(self.api_base_url)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            errors.append(f"OBSIDIAN_API_URL must be an absolute http(s) URL, got '{self.api_base_url}'")

        if self.request_timeout <= 0:
            errors.append("OBSIDIAN_REQUEST_TIMEOUT must be a positive number of seconds")

        return errors


def load_config(environ: dict[str, str] | None = None) -> Config:
    """
    Read and validate configuration once at startup

    Raises:
        ConfigurationError: If any setting is invalid
    """
    if environ is None:
        load_env_files()

    config = Config.from_env(environ)
    errors = config.validate()
    if errors:
        raise ConfigurationError(errors)
    return config
