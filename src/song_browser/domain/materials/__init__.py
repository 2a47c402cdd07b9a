"""Materials domain - resolving stored song sheet / TAB paths."""

from .resolver import (
    MELODY_TAB,
    SONG_SHEET,
    MaterialLink,
    encode_relative_path,
    material_display_name,
    material_url,
    resolve_material,
    song_materials,
)

__all__ = [
    "MELODY_TAB",
    "SONG_SHEET",
    "MaterialLink",
    "encode_relative_path",
    "material_display_name",
    "material_url",
    "resolve_material",
    "song_materials",
]
