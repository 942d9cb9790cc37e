"""Theme discovery and resolution.

This module provides functions to find a cursor theme by name across the
icon search roots and to list every theme installed in them.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from hyprcursor.errors import (
    CursorsDirectoryMissingError,
    CursorsDirectoryNotSetError,
    ManifestError,
    ThemeNotFoundError,
    UnsupportedFormatError,
)
from hyprcursor.manifest import Manifest, load_manifest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeLocation:
    """A resolved theme on disk.

    Attributes:
        manifest: Parsed theme manifest
        path: Absolute path to the theme directory
        cursors_directory: cursors_directory value from the manifest
        cursors_path: Absolute path to the directory holding .hlc files
    """

    manifest: Manifest
    path: Path
    cursors_directory: str
    cursors_path: Path

    def __post_init__(self):
        """Validate paths are absolute."""
        if not self.path.is_absolute():
            raise ValueError(f"Theme path must be absolute: {self.path}")
        if not self.cursors_path.is_absolute():
            raise ValueError(f"Cursors path must be absolute: {self.cursors_path}")


def _iter_candidates(search_roots: Iterable[Path]) -> Iterator[Path]:
    """Yield candidate theme directories, root by root, sorted within a root."""
    for root in search_roots:
        try:
            if not root.is_dir():
                continue
            entries = sorted(root.iterdir())
        except OSError as e:
            logger.debug(f"Skipping unreadable search root {root}: {e}")
            continue

        for entry in entries:
            try:
                is_dir = entry.is_dir()
            except OSError as e:
                logger.debug(f"Skipping unreadable candidate {entry}: {e}")
                continue
            if is_dir:
                yield entry


def _read_manifest(theme_dir: Path, requested: str | None = None) -> Manifest | None:
    """Load a candidate's manifest, or None if it should be skipped.

    A toml-only candidate is skipped unless its directory is named after the
    requested theme, in which case the format error is raised.
    """
    try:
        return load_manifest(theme_dir)
    except UnsupportedFormatError as e:
        if requested is not None and theme_dir.name == requested:
            raise
        logger.warning(f"Skipping theme with unsupported manifest: {e.path}")
    except (OSError, UnicodeDecodeError, ManifestError) as e:
        logger.debug(f"Skipping {theme_dir}: {e}")
    return None


def _locate(manifest: Manifest, theme_dir: Path) -> ThemeLocation:
    """Check the cursors directory of a matched theme."""
    if manifest.cursors_directory is None:
        raise CursorsDirectoryNotSetError(theme_dir)

    theme_path = theme_dir.resolve()
    cursors_path = theme_path / manifest.cursors_directory
    if not cursors_path.is_dir():
        raise CursorsDirectoryMissingError(manifest.cursors_directory, cursors_path)

    return ThemeLocation(
        manifest=manifest,
        path=theme_path,
        cursors_directory=manifest.cursors_directory,
        cursors_path=cursors_path,
    )


def find_theme(name: str, search_roots: Iterable[Path]) -> ThemeLocation:
    """Resolve a theme by name.

    Roots are scanned in order and the subdirectories of each root in sorted
    order. The first manifest whose name matches wins; candidates whose
    manifest can't be read or parsed are skipped.

    Args:
        name: Theme name as declared in its manifest
        search_roots: Ordered icon roots to scan

    Returns:
        ThemeLocation of the first matching theme

    Raises:
        ThemeNotFoundError: If no root holds a matching theme
        CursorsDirectoryNotSetError: If the match has no cursors_directory
        CursorsDirectoryMissingError: If the cursors directory doesn't exist
        UnsupportedFormatError: If the theme directory named after the
                                requested theme only has manifest.toml
    """
    for theme_dir in _iter_candidates(search_roots):
        manifest = _read_manifest(theme_dir, requested=name)
        if manifest is None or manifest.name != name:
            continue

        logger.debug(f"Found theme {name!r} in {theme_dir}")
        return _locate(manifest, theme_dir)

    raise ThemeNotFoundError(name)


def is_valid_theme(theme_dir: Path) -> bool:
    """Check if directory contains a resolvable theme.

    A valid theme has a readable manifest.hl with a cursors_directory that
    exists below the theme directory.

    Args:
        theme_dir: Path to potential theme directory

    Returns:
        True if theme_dir contains a valid theme, False otherwise
    """
    if not theme_dir.is_dir():
        return False

    manifest = _read_manifest(theme_dir)
    if manifest is None:
        return False

    try:
        _locate(manifest, theme_dir)
    except (CursorsDirectoryNotSetError, CursorsDirectoryMissingError):
        return False
    return True


def discover_themes(search_roots: Iterable[Path]) -> list[ThemeLocation]:
    """Discover all valid themes in the search roots.

    Only the first directory declaring a given name is considered, the same
    one find_theme would pick. If that directory is invalid, the name is
    left out.

    Args:
        search_roots: Ordered icon roots to scan

    Returns:
        List of ThemeLocation objects in search order
        (empty list if no root contains a valid theme)
    """
    themes = []
    seen: set[str] = set()

    for theme_dir in _iter_candidates(search_roots):
        manifest = _read_manifest(theme_dir)
        if manifest is None or manifest.name in seen:
            continue
        seen.add(manifest.name)

        try:
            themes.append(_locate(manifest, theme_dir))
        except (CursorsDirectoryNotSetError, CursorsDirectoryMissingError) as e:
            logger.debug(f"Skipping {theme_dir}: {e}")

    return themes
