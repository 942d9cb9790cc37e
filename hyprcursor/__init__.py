"""Cursor theme loading for the hyprcursor format.

This package resolves hyprcursor themes on disk, loads their cursors from
`.hlc` containers and renders cursor frames at a requested pixel size.

    theme = CursorTheme.load("rose-pine-hyprcursor")
    cursor = theme.load_cursor("default")
    frames = cursor.render_frames(24)
"""

from hyprcursor.archive import load_cursor_archive, load_cursors
from hyprcursor.config import SearchPathSettings, default_search_roots
from hyprcursor.cursor import Cursor, Frame, render_frames
from hyprcursor.discovery import ThemeLocation, discover_themes, find_theme, is_valid_theme
from hyprcursor.errors import (
    ArchiveError,
    ConfigurationError,
    CursorsDirectoryMissingError,
    CursorsDirectoryNotSetError,
    CursorThemeError,
    ImageDecodeError,
    InvalidMetaError,
    ManifestError,
    MetaError,
    MetaNotFoundError,
    RenderError,
    ThemeNotFoundError,
    UnsupportedFormatError,
    VectorDocumentError,
)
from hyprcursor.hyprlang import parse_line
from hyprcursor.images import Image, Pixels, RasterData, VectorDocument
from hyprcursor.manifest import Manifest, load_manifest, parse_manifest
from hyprcursor.meta import Kind, Meta, ResizeAlgorithm, Size, parse_meta, parse_size
from hyprcursor.theme import CursorTheme

__all__ = [
    # Theme
    "CursorTheme",
    # Discovery
    "ThemeLocation",
    "find_theme",
    "discover_themes",
    "is_valid_theme",
    # Configuration
    "SearchPathSettings",
    "default_search_roots",
    # Parsing
    "parse_line",
    "Manifest",
    "parse_manifest",
    "load_manifest",
    "Meta",
    "Size",
    "Kind",
    "ResizeAlgorithm",
    "parse_meta",
    "parse_size",
    # Cursors
    "Cursor",
    "Frame",
    "render_frames",
    "load_cursor_archive",
    "load_cursors",
    # Images
    "Image",
    "Pixels",
    "RasterData",
    "VectorDocument",
    # Errors
    "CursorThemeError",
    "ConfigurationError",
    "ThemeNotFoundError",
    "CursorsDirectoryNotSetError",
    "CursorsDirectoryMissingError",
    "UnsupportedFormatError",
    "ManifestError",
    "MetaError",
    "ArchiveError",
    "MetaNotFoundError",
    "InvalidMetaError",
    "RenderError",
    "VectorDocumentError",
    "ImageDecodeError",
]
