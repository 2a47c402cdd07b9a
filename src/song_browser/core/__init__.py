"""Core infrastructure layer - no business logic dependencies.

This module provides foundation-level services:
- Configuration management (TOML)
- Logging (Loguru)
- Console management (Rich)
- Path containment checks for served files
"""

# Configuration
from .config import (
    Config,
    CatalogConfig,
    MaterialsConfig,
    WebConfig,
    LoggingConfig,
    load_config,
    parse_config,
    get_config_dir,
    get_config_path,
    get_data_dir,
    create_default_config,
    ensure_directories,
)

# Console
from .console import get_console, safe_print

__all__ = [
    # Config
    "Config",
    "CatalogConfig",
    "MaterialsConfig",
    "WebConfig",
    "LoggingConfig",
    "load_config",
    "parse_config",
    "get_config_dir",
    "get_config_path",
    "get_data_dir",
    "create_default_config",
    "ensure_directories",
    # Console
    "get_console",
    "safe_print",
]
