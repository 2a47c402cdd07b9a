"""
Configuration management for the School of Uke song browser
"""

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from loguru import logger

MATERIALS_ANCHOR_DIR = "Song Sheets PDF ONLY - School of Uke"


@dataclass
class CatalogConfig:
    """Configuration for the song collection."""

    data_path: Optional[str] = None  # Default: <data dir>/songs_app_export_merged.json

    def resolved_data_path(self) -> Path:
        if self.data_path:
            return Path(self.data_path).expanduser()
        return get_data_dir() / "songs_app_export_merged.json"


@dataclass
class MaterialsConfig:
    """Configuration for the learning-materials file tree and its server."""

    root_dir: str = field(
        default_factory=lambda: str(Path.home() / "School of Uke" / MATERIALS_ANCHOR_DIR)
    )
    anchor_dir: str = MATERIALS_ANCHOR_DIR  # Directory name stored paths are rooted under
    base_url: str = "http://localhost:3001"
    url_prefix: str = "/materials"

    def validate(self) -> None:
        """Validate materials configuration values.

        Raises:
            ValueError: If configuration values are invalid
        """
        if not self.url_prefix.startswith("/"):
            raise ValueError(
                f"Invalid url_prefix: {self.url_prefix!r}. Must start with '/'"
            )
        if not self.anchor_dir.strip():
            raise ValueError("anchor_dir must not be empty")


@dataclass
class WebConfig:
    """Configuration for the HTTP service."""

    host: str = "127.0.0.1"
    port: int = 3001
    allowed_origins: List[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:5173"]
    )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL
    log_file: Optional[str] = (
        None  # Custom log file path (default: ~/.local/share/song-browser/song-browser.log)
    )
    console_output: bool = False  # Also output to stderr (for debugging)


@dataclass
class Config:
    """Main configuration object."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    materials: MaterialsConfig = field(default_factory=MaterialsConfig)
    web: WebConfig = field(default_factory=WebConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_config_dir() -> Path:
    """Get the configuration directory path."""
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return Path(config_home) / "song-browser"
    return Path.home() / ".config" / "song-browser"


def _find_project_config() -> Optional[Path]:
    """Find config.toml in project root by looking for pyproject.toml.

    Returns:
        Path to config.toml in project root, or None if not found
    """
    current = Path(__file__).resolve().parent
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            config_path = parent / "config.toml"
            if config_path.exists():
                return config_path
            # Found project root but no config.toml there
            return None
    return None


def get_config_path() -> Path:
    """Get the main configuration file path.

    Checks for config.toml in the following order:
    1. Project root (detected via pyproject.toml) - for development
    2. Current working directory
    3. XDG_CONFIG_HOME/song-browser (or ~/.config/song-browser)
    """
    project_config = _find_project_config()
    if project_config:
        return project_config

    local_config = Path.cwd() / "config.toml"
    if local_config.exists():
        return local_config

    return get_config_dir() / "config.toml"


def get_data_dir() -> Path:
    """Get the data directory path."""
    data_home = os.environ.get("XDG_DATA_HOME")
    if data_home:
        return Path(data_home) / "song-browser"
    return Path.home() / ".local" / "share" / "song-browser"


def create_default_config() -> str:
    """Create a default configuration TOML content."""
    return """
# School of Uke Song Browser Configuration

[catalog]
# JSON export of the song collection (default: ~/.local/share/song-browser/songs_app_export_merged.json)
# data_path = "~/songs_app_export_merged.json"

[materials]
# Directory holding the song sheet and TAB PDFs
root_dir = "~/School of Uke/Song Sheets PDF ONLY - School of Uke"

# Directory name that stored material paths are rooted under
anchor_dir = "Song Sheets PDF ONLY - School of Uke"

# Where the materials server is reachable
base_url = "http://localhost:3001"
url_prefix = "/materials"

[web]
host = "127.0.0.1"
port = 3001
allowed_origins = ["http://localhost:3000", "http://localhost:5173"]

[logging]
# Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
level = "INFO"

# Custom log file path (default: ~/.local/share/song-browser/song-browser.log)
# log_file = "/path/to/song-browser.log"

# Also output logs to stderr (useful for debugging)
console_output = false
""".strip()


def _apply_env_overrides(config: Config) -> Config:
    """Environment variables win over TOML values."""
    data_path = os.environ.get("SONG_BROWSER_DATA")
    materials_root = os.environ.get("SONG_BROWSER_MATERIALS_ROOT")
    materials_url = os.environ.get("SONG_BROWSER_MATERIALS_URL")
    allowed_origins = os.environ.get("ALLOWED_ORIGINS", "")

    if data_path:
        config.catalog.data_path = str(Path(data_path).expanduser())
    if materials_root:
        config.materials.root_dir = str(Path(materials_root).expanduser())
    if materials_url:
        config.materials.base_url = materials_url.rstrip("/")
    if allowed_origins:
        config.web.allowed_origins = [
            origin.strip() for origin in allowed_origins.split(",") if origin.strip()
        ]
    return config


def parse_config(toml_data: dict) -> Config:
    """Build a Config from parsed TOML, falling back to defaults per key."""
    config = Config()

    if "catalog" in toml_data:
        catalog_data = toml_data["catalog"]
        data_path = catalog_data.get("data_path")
        config.catalog = CatalogConfig(
            data_path=str(Path(data_path).expanduser()) if data_path else None
        )

    if "materials" in toml_data:
        materials_data = toml_data["materials"]
        config.materials = MaterialsConfig(
            root_dir=str(
                Path(
                    materials_data.get("root_dir", config.materials.root_dir)
                ).expanduser()
            ),
            anchor_dir=materials_data.get("anchor_dir", config.materials.anchor_dir),
            base_url=materials_data.get("base_url", config.materials.base_url).rstrip(
                "/"
            ),
            url_prefix=materials_data.get("url_prefix", config.materials.url_prefix),
        )
        try:
            config.materials.validate()
        except ValueError as e:
            logger.warning(f"Invalid materials configuration: {e}. Using defaults.")
            config.materials = MaterialsConfig()

    if "web" in toml_data:
        web_data = toml_data["web"]
        config.web = WebConfig(
            host=web_data.get("host", config.web.host),
            port=web_data.get("port", config.web.port),
            allowed_origins=web_data.get("allowed_origins", config.web.allowed_origins),
        )

    if "logging" in toml_data:
        logging_data = toml_data["logging"]
        log_file = logging_data.get("log_file")
        if log_file:
            log_file = str(Path(log_file).expanduser())
        config.logging = LoggingConfig(
            level=logging_data.get("level", config.logging.level).upper(),
            log_file=log_file,
            console_output=logging_data.get(
                "console_output", config.logging.console_output
            ),
        )

    return config


def load_config() -> Config:
    """Load configuration from file or create default.

    Environment variables override TOML values:
    - SONG_BROWSER_DATA
    - SONG_BROWSER_MATERIALS_ROOT
    - SONG_BROWSER_MATERIALS_URL
    - ALLOWED_ORIGINS
    """
    from dotenv import load_dotenv

    env_path = get_config_dir() / ".env"
    if env_path.exists():
        load_dotenv(env_path)

    config_path = get_config_path()

    if not config_path.exists():
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(config_path, "w", encoding="utf-8") as f:
                f.write(create_default_config())
            logger.info(f"Created default configuration at: {config_path}")
        except OSError as e:
            logger.warning(f"Could not write default configuration to {config_path}: {e}")
        return _apply_env_overrides(Config())

    try:
        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)
        config = parse_config(toml_data)
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning(f"Error loading configuration from {config_path}: {e}")
        logger.warning("Using default configuration.")
        config = Config()

    return _apply_env_overrides(config)


def ensure_directories() -> None:
    """Ensure all necessary directories exist."""
    get_config_dir().mkdir(parents=True, exist_ok=True)
    get_data_dir().mkdir(parents=True, exist_ok=True)
