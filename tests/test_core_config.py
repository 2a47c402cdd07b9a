"""
Tests for configuration loading.
"""

import tomllib
from pathlib import Path

from song_browser.core.config import (
    MATERIALS_ANCHOR_DIR,
    CatalogConfig,
    Config,
    MaterialsConfig,
    create_default_config,
    get_config_dir,
    get_data_dir,
    load_config,
    parse_config,
)


class TestDefaults:
    """Test default configuration values."""

    def test_web_defaults(self):
        config = Config()
        assert config.web.port == 3001
        assert "http://localhost:3000" in config.web.allowed_origins

    def test_materials_defaults(self):
        config = Config()
        assert config.materials.anchor_dir == MATERIALS_ANCHOR_DIR
        assert config.materials.url_prefix == "/materials"
        assert config.materials.root_dir.endswith(MATERIALS_ANCHOR_DIR)

    def test_default_data_path_lives_in_data_dir(self):
        assert CatalogConfig().resolved_data_path() == (
            get_data_dir() / "songs_app_export_merged.json"
        )

    def test_xdg_directories(self, tmp_path):
        assert get_config_dir() == tmp_path / "config" / "song-browser"
        assert get_data_dir() == tmp_path / "data" / "song-browser"

    def test_default_file_parses_to_defaults(self):
        """Test the generated config file round-trips to the default values."""
        config = parse_config(tomllib.loads(create_default_config()))
        assert config.web == Config().web
        assert config.materials.anchor_dir == MATERIALS_ANCHOR_DIR
        assert config.materials.base_url == "http://localhost:3001"
        assert config.logging.level == "INFO"


class TestParseConfig:
    """Test building Config from TOML data."""

    def test_empty_document(self):
        assert parse_config({}) == Config()

    def test_sections_override_defaults(self):
        config = parse_config(
            {
                "catalog": {"data_path": "/data/songs.json"},
                "materials": {"root_dir": "/srv/pdfs", "base_url": "https://uke.example.com/"},
                "web": {"port": 8080},
                "logging": {"level": "debug"},
            }
        )
        assert config.catalog.resolved_data_path() == Path("/data/songs.json")
        assert config.materials.root_dir == "/srv/pdfs"
        assert config.materials.base_url == "https://uke.example.com"
        assert config.materials.url_prefix == "/materials"
        assert config.web.port == 8080
        assert config.web.host == "127.0.0.1"
        assert config.logging.level == "DEBUG"

    def test_invalid_materials_section_falls_back(self):
        config = parse_config({"materials": {"url_prefix": "materials"}})
        assert config.materials == MaterialsConfig()

    def test_home_is_expanded(self):
        config = parse_config({"materials": {"root_dir": "~/pdfs"}})
        assert config.materials.root_dir == str(Path.home() / "pdfs")


class TestLoadConfig:
    """Test loading configuration from disk and the environment."""

    def test_creates_default_file(self):
        config = load_config()

        assert (get_config_dir() / "config.toml").exists()
        assert config.web.port == 3001

    def test_reads_existing_file(self):
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text('[web]\nport = 4000\n', encoding="utf-8")

        assert load_config().web.port == 4000

    def test_malformed_file_uses_defaults(self):
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True)
        (config_dir / "config.toml").write_text("[web\nport = ", encoding="utf-8")

        assert load_config() == Config()

    def test_environment_overrides(self, monkeypatch):
        monkeypatch.setenv("SONG_BROWSER_DATA", "/tmp/export.json")
        monkeypatch.setenv("SONG_BROWSER_MATERIALS_ROOT", "/srv/pdfs")
        monkeypatch.setenv("SONG_BROWSER_MATERIALS_URL", "https://uke.example.com/")
        monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example.com, https://b.example.com")

        config = load_config()

        assert config.catalog.data_path == "/tmp/export.json"
        assert config.materials.root_dir == "/srv/pdfs"
        assert config.materials.base_url == "https://uke.example.com"
        assert config.web.allowed_origins == ["https://a.example.com", "https://b.example.com"]

    def test_dotenv_file_is_loaded(self, monkeypatch):
        # Register the variable with monkeypatch so the value load_dotenv sets is undone
        monkeypatch.setenv("SONG_BROWSER_MATERIALS_ROOT", "placeholder")
        monkeypatch.delenv("SONG_BROWSER_MATERIALS_ROOT")
        config_dir = get_config_dir()
        config_dir.mkdir(parents=True)
        (config_dir / ".env").write_text("SONG_BROWSER_MATERIALS_ROOT=/from/dotenv\n", encoding="utf-8")

        config = load_config()

        assert config.materials.root_dir == "/from/dotenv"
