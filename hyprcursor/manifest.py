"""Theme manifest data model and loading.

This module provides the Manifest dataclass and functions for parsing and
loading the manifest.hl file found at the top of every theme directory.
"""

from dataclasses import dataclass
from pathlib import Path

from hyprcursor.errors import ManifestError, UnsupportedFormatError
from hyprcursor.hyprlang import iter_assignments

MANIFEST_FILENAME = "manifest.hl"
TOML_MANIFEST_FILENAME = "manifest.toml"

_FIELDS = ("name", "description", "version", "author", "cursors_directory")


@dataclass(frozen=True)
class Manifest:
    """Theme-level metadata read from manifest.hl.

    Attributes:
        name: Theme name (falls back to the theme directory's name)
        description: Human-readable description (optional)
        version: Theme version (optional)
        author: Theme author (optional)
        cursors_directory: Directory holding the .hlc containers, relative
                           to the theme directory (optional here, required
                           when the theme is resolved)
    """

    name: str
    description: str | None = None
    version: str | None = None
    author: str | None = None
    cursors_directory: str | None = None


def parse_manifest(text: str, theme_dir: Path) -> Manifest:
    """Parse manifest.hl content.

    Unknown identifiers are ignored and the last occurrence of a known one
    wins.

    Args:
        text: Full text of the manifest file
        theme_dir: Theme directory, used for the name fallback

    Returns:
        Parsed Manifest

    Raises:
        ManifestError: If there is no name line and theme_dir has no base name
    """
    values: dict[str, str] = {}
    for identifier, value in iter_assignments(text):
        if identifier in _FIELDS:
            values[identifier] = value

    if "name" not in values:
        if not theme_dir.name:
            raise ManifestError(f"no name set and {theme_dir} has no base name to fall back to")
        values["name"] = theme_dir.name

    return Manifest(**values)


def load_manifest(theme_dir: Path) -> Manifest:
    """Load the manifest of a theme directory.

    Args:
        theme_dir: Path to the theme directory

    Returns:
        Loaded Manifest

    Raises:
        FileNotFoundError: If the directory holds no manifest at all
        UnsupportedFormatError: If only manifest.toml is present
        ManifestError: If the manifest can't be parsed
        UnicodeDecodeError: If manifest.hl isn't valid UTF-8
    """
    manifest_path = theme_dir / MANIFEST_FILENAME
    if manifest_path.is_file():
        return parse_manifest(manifest_path.read_text(encoding="utf-8"), theme_dir)

    if (theme_dir / TOML_MANIFEST_FILENAME).is_file():
        raise UnsupportedFormatError(theme_dir / TOML_MANIFEST_FILENAME)

    raise FileNotFoundError(f"{MANIFEST_FILENAME} not found in {theme_dir}")
