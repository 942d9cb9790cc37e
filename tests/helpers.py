"""Builders for theme directories, cursor containers and image payloads."""

import io
import zipfile
from pathlib import Path

from PIL import Image as PILImage

DEFAULT_META = """\
hotspot_x = 0.0
hotspot_y = 0.0
define_size = 24, default_24.png
"""


def png_bytes(width: int, height: int, color=(255, 0, 0, 255), mode: str = "RGBA") -> bytes:
    """Encode a solid-color PNG."""
    image = PILImage.new(mode, (width, height), color)
    buffer = io.BytesIO()
    image.save(buffer, format="PNG")
    return buffer.getvalue()


def svg_bytes(width: int = 32, height: int = 32, fill: str = "#00ff00") -> bytes:
    """Build an SVG document filled with one rectangle."""
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{width}" height="{height}">'
        f'<rect x="0" y="0" width="{width}" height="{height}" fill="{fill}"/>'
        f"</svg>"
    ).encode()


def write_container(path: Path, meta: str | None, entries: dict[str, bytes] | None = None) -> Path:
    """Write a .hlc container with a meta.hl entry and image entries."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with zipfile.ZipFile(path, "w") as archive:
        if meta is not None:
            archive.writestr("meta.hl", meta)
        for name, data in (entries or {}).items():
            archive.writestr(name, data)
    return path


def write_theme(
    root: Path,
    dir_name: str,
    manifest: str,
    cursors: dict[str, tuple[str, dict[str, bytes]]] | None = None,
    cursors_directory: str = "hyprcursors",
) -> Path:
    """Create a theme directory with a manifest.hl and cursor containers.

    Args:
        root: Search root to create the theme in
        dir_name: Name of the theme directory
        manifest: Text of manifest.hl
        cursors: Mapping of container stem to (meta text, image entries)
        cursors_directory: Directory to write the containers to

    Returns:
        Path to the theme directory
    """
    theme_dir = root / dir_name
    theme_dir.mkdir(parents=True)
    (theme_dir / "manifest.hl").write_text(manifest)

    if cursors is not None:
        cursors_dir = theme_dir / cursors_directory
        cursors_dir.mkdir()
        for stem, (meta, entries) in cursors.items():
            write_container(cursors_dir / f"{stem}.hlc", meta, entries)

    return theme_dir
