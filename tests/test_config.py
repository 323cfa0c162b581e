import tomllib

import pytest

import config as config_module
from config import Config, load_config


@pytest.fixture
def config_path(tmp_path, monkeypatch):
    """Point the config file at a temporary location."""
    path = tmp_path / ".config" / "budget-tracker.toml"
    monkeypatch.setattr(config_module, "get_config_path", lambda: path)
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    return path


class TestLoadConfig:
    """Tests for load_config."""

    def test_creates_default_file(self, config_path):
        config = load_config()

        assert config_path.exists()
        assert config.db_filename == "budget.db"
        assert config.llm_enabled is False
        assert config.cors_origins == ["http://localhost:3000"]

        with open(config_path, "rb") as f:
            data = tomllib.load(f)
        assert data["server"]["port"] == 8080
        assert data["llm"]["provider"] == "openai"

    def test_reads_existing_file(self, config_path, tmp_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text(
            f"""
base_dir = "{tmp_path / 'bt'}"

[database]
filename = "custom.db"

[llm]
enabled = true
provider = "openai"
openai_api_key = "sk-file"
openai_model = "gpt-4o"
timeout = 5

[server]
port = 9000
cors_origins = ["http://localhost:5173"]
"""
        )

        config = load_config()

        assert config.db_path == tmp_path / "bt" / "db" / "custom.db"
        assert config.log_dir == tmp_path / "bt" / "logs"
        assert config.llm_enabled is True
        assert config.llm_openai_api_key == "sk-file"
        assert config.llm_openai_model == "gpt-4o"
        assert config.llm_timeout == 5.0
        assert config.server_host == "127.0.0.1"
        assert config.server_port == 9000
        assert config.cors_origins == ["http://localhost:5173"]

    def test_empty_provider_means_none(self, config_path):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('[llm]\nprovider = ""\nopenai_model = ""\n')

        config = load_config()

        assert config.llm_provider is None
        assert config.llm_openai_model is None

    def test_api_key_from_environment(self, config_path, monkeypatch):
        config_path.parent.mkdir(parents=True)
        config_path.write_text('[llm]\nenabled = true\nopenai_api_key = ""\n')
        monkeypatch.setenv("OPENAI_API_KEY", "sk-env")

        assert load_config().llm_openai_api_key == "sk-env"

    def test_default_round_trips_through_file(self, config_path):
        written = load_config()

        assert load_config() == written


def test_db_path_joins_dir_and_filename(tmp_path):
    config = Config(
        base_dir=tmp_path,
        db_data_dir=tmp_path / "db",
        db_filename="x.db",
        log_level="INFO",
        log_dir=tmp_path / "logs",
    )

    assert config.db_path == tmp_path / "db" / "x.db"
