from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import FileResponse
from loguru import logger
import mimetypes
from pathlib import Path

from ..deps import get_config
from song_browser.core.config import Config
from song_browser.core.path_security import is_path_within_root, validate_material_path

router = APIRouter()

MATERIAL_MIME_TYPES: dict[str, str] = {
    ".pdf": "application/pdf",
}


def get_mime_type(file_path: Path) -> str:
    """Pure function - deterministic MIME type detection."""
    mime = MATERIAL_MIME_TYPES.get(file_path.suffix.lower())
    if mime:
        return mime
    guessed, _ = mimetypes.guess_type(str(file_path))
    return guessed or "application/octet-stream"


@router.get("/{relative_path:path}")
async def serve_material(relative_path: str, config: Config = Depends(get_config)):
    """Serve a file from the materials directory."""
    file_path = Path(config.materials.root_dir) / relative_path

    # SECURITY: Validate path within materials root
    if not is_path_within_root(file_path, config.materials.root_dir):
        logger.warning(f"Blocked access outside materials root: {relative_path}")
        raise HTTPException(403, "Access denied")

    validated = validate_material_path(file_path, config.materials)
    if not validated:
        logger.info(f"Material not found: {relative_path}")
        raise HTTPException(404, "Material not found")

    logger.info(f"Serving material: {validated.name}")
    return FileResponse(validated, media_type=get_mime_type(validated))
