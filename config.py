"""Configuration management for Budget Tracker.

Reads configuration from ~/.config/budget-tracker.toml and creates default config if needed.
"""

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional
import tomllib
import tomli_w


DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    db_data_dir: Path
    db_filename: str
    log_level: str
    log_dir: Path
    llm_enabled: bool = False
    llm_provider: Optional[str] = None
    llm_openai_api_key: str = ""
    llm_openai_model: Optional[str] = None
    llm_timeout: float = 30.0
    server_host: str = "127.0.0.1"
    server_port: int = 8080
    cors_origins: List[str] = field(
        default_factory=lambda: list(DEFAULT_CORS_ORIGINS)
    )

    @property
    def db_path(self) -> Path:
        """Get the full database path (data_dir/filename)."""
        return self.db_data_dir / self.db_filename

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "budget-tracker"
        return cls(
            base_dir=base_dir,
            db_data_dir=base_dir / "db",
            db_filename="budget.db",
            log_level="INFO",
            log_dir=base_dir / "logs",
            llm_enabled=False,
            llm_provider="openai",
            llm_openai_api_key="",
            llm_openai_model="gpt-4o-mini",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "budget-tracker.toml"


def get_migrations_dir() -> Path:
    """Get the path to the migrations directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "db" / "migrations"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    An empty OpenAI API key is filled from the OPENAI_API_KEY environment
    variable, so the key never has to be written to the config file.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        config.llm_openai_api_key = os.environ.get("OPENAI_API_KEY", "")
        return config

    # Load existing config
    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "budget-tracker"))

    db_config = data.get("database", {})
    db_data_dir = Path(db_config.get("data_dir", base_dir / "db"))
    db_filename = db_config.get("filename", "budget.db")

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    llm_config = data.get("llm", {})
    llm_enabled = llm_config.get("enabled", False)
    llm_provider = llm_config.get("provider") or None
    llm_openai_api_key = llm_config.get("openai_api_key") or os.environ.get(
        "OPENAI_API_KEY", ""
    )
    llm_openai_model = llm_config.get("openai_model") or None
    llm_timeout = float(llm_config.get("timeout", 30.0))

    server_config = data.get("server", {})
    server_host = server_config.get("host", "127.0.0.1")
    server_port = int(server_config.get("port", 8080))
    cors_origins = list(server_config.get("cors_origins", DEFAULT_CORS_ORIGINS))

    return Config(
        base_dir=base_dir,
        db_data_dir=db_data_dir,
        db_filename=db_filename,
        log_level=log_level,
        log_dir=log_dir,
        llm_enabled=llm_enabled,
        llm_provider=llm_provider,
        llm_openai_api_key=llm_openai_api_key,
        llm_openai_model=llm_openai_model,
        llm_timeout=llm_timeout,
        server_host=server_host,
        server_port=server_port,
        cors_origins=cors_origins,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()

    # Ensure config directory exists
    config_path.parent.mkdir(parents=True, exist_ok=True)

    # Convert config to TOML structure
    data = {
        "base_dir": str(config.base_dir),
        "database": {
            "data_dir": str(config.db_data_dir),
            "filename": config.db_filename,
        },
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "llm": {
            "enabled": config.llm_enabled,
            "provider": config.llm_provider or "",
            "openai_api_key": config.llm_openai_api_key,
            "openai_model": config.llm_openai_model or "",
            "timeout": config.llm_timeout,
        },
        "server": {
            "host": config.server_host,
            "port": config.server_port,
            "cors_origins": list(config.cors_origins),
        },
    }

    # Write TOML file
    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
