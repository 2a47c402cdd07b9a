"""
Path security validation utilities for the materials server.

Provides pure functions to validate requested material paths stay within the
configured materials root, preventing directory traversal and symlink escapes.
"""

from pathlib import Path
from typing import Optional

from song_browser.core.config import MaterialsConfig


def is_path_within_root(file_path: Path, root_dir: str) -> bool:
    """Pure function - validates path is within the materials root.

    Uses Path.resolve() to handle symlinks and relative paths, then checks if the
    resolved path is a child of the configured root directory.

    Args:
        file_path: The file path to validate
        root_dir: Allowed root path as a string

    Returns:
        True if path is within root boundaries, False otherwise
    """
    try:
        resolved_path = file_path.resolve()
        root = Path(root_dir).resolve()
        resolved_path.relative_to(root)
        return True
    except ValueError:
        # relative_to raises ValueError if path is not a subpath
        return False
    except (OSError, RuntimeError):
        # Path.resolve() can raise OSError for invalid paths or RuntimeError for recursion
        return False


def validate_material_path(file_path: Path, config: MaterialsConfig) -> Optional[Path]:
    """Pure function - returns validated path or None.

    Combines existence check with root boundary validation to ensure
    the path is a file inside the materials directory.

    Args:
        file_path: The file path to validate
        config: Materials configuration containing the root directory

    Returns:
        The validated Path object if valid, None otherwise
    """
    if not file_path.is_file():
        return None

    if not is_path_within_root(file_path, config.root_dir):
        return None

    return file_path
