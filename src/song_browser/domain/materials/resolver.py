"""
Learning-material path resolution.

Stored material paths are absolute paths on the machine that exported the
collection, somewhere below the materials directory (MaterialsConfig.anchor_dir).
The resolver turns them into a URL on the materials server and a short label
such as "Melody TAB in Key Em - Chorus".
"""

import re
from typing import Any, NamedTuple, Optional
from urllib.parse import quote

from song_browser.core.config import MaterialsConfig

SONG_SHEET = "song_sheet"
MELODY_TAB = "melody_tab"

# Characters encodeURIComponent leaves alone
_UNRESERVED = "-_.!~*'()"

PDF_SUFFIX_PATTERN = re.compile(r"\.pdf$", re.IGNORECASE)
TAB_PATTERN = re.compile(r"TAB", re.IGNORECASE)
KEY_PATTERN = re.compile(r"Key ([A-G][#b]?m?)", re.IGNORECASE)
SECTION_PATTERN = re.compile(r"(Verse|Chorus|Bridge|Solo|Intro|Outro)", re.IGNORECASE)


class MaterialLink(NamedTuple):
    """A song sheet or TAB with its label and servable URL (None = unavailable)."""

    kind: str
    label: str
    url: Optional[str]

    @property
    def available(self) -> bool:
        return self.url is not None


def encode_relative_path(relative_path: str) -> str:
    """Percent-encode each path segment independently and re-join with "/"."""
    return "/".join(quote(segment, safe=_UNRESERVED) for segment in relative_path.split("/"))


def material_url(file_path: Any, config: MaterialsConfig) -> Optional[str]:
    """Resolve a stored absolute path to a URL on the materials server.

    Returns None when the path is absent or does not contain the anchor
    directory; callers render the material as unavailable in that case.
    """
    if not isinstance(file_path, str) or not file_path:
        return None

    anchor = f"{config.anchor_dir}/"
    index = file_path.find(anchor)
    if index == -1:
        return None

    relative_path = file_path[index + len(anchor):]
    if not relative_path:
        return None

    try:
        encoded = encode_relative_path(relative_path)
    except UnicodeEncodeError:
        # Lone surrogates from JSON \udXXX escapes have no UTF-8 form
        return None

    base = config.base_url.rstrip("/")
    prefix = config.url_prefix.rstrip("/")
    return f"{base}{prefix}/{encoded}"


def material_display_name(file_path: Any) -> Optional[str]:
    """Build a human-readable label from the material's filename.

    Example:
        ".../Bar Key Em TAB.pdf" -> "Melody TAB in Key Em"
        ".../Bar Key C Chorus.pdf" -> "Song Sheet in Key C - Chorus"
    """
    if not isinstance(file_path, str) or not file_path:
        return None

    filename = file_path.split("/")[-1]
    name = PDF_SUFFIX_PATTERN.sub("", filename)

    label = "Melody TAB" if TAB_PATTERN.search(name) else "Song Sheet"

    key_match = KEY_PATTERN.search(name)
    if key_match:
        label += f" in Key {key_match.group(1)}"

    section_match = SECTION_PATTERN.search(name)
    if section_match:
        label += f" - {section_match.group(1)}"

    return label


def resolve_material(
    file_path: Any, kind: str, config: MaterialsConfig
) -> Optional[MaterialLink]:
    """Resolve a stored path to a MaterialLink, or None when there is no path."""
    label = material_display_name(file_path)
    if label is None:
        return None
    return MaterialLink(kind=kind, label=label, url=material_url(file_path, config))


def song_materials(song: Any, config: MaterialsConfig) -> list[MaterialLink]:
    """Resolve a song's song sheet and melody TAB, skipping absent paths."""
    links = [
        resolve_material(song.get("songSheetPath"), SONG_SHEET, config),
        resolve_material(song.get("melodyTabPath"), MELODY_TAB, config),
    ]
    return [link for link in links if link is not None]
