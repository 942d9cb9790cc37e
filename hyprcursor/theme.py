"""Cursor theme loading and cursor lookup.

This module provides the CursorTheme class, the entry point for resolving a
theme by name and looking up its cursors.
"""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from hyprcursor.archive import load_cursors
from hyprcursor.config import default_search_roots
from hyprcursor.cursor import Cursor
from hyprcursor.discovery import ThemeLocation, find_theme

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CursorTheme:
    """A fully loaded cursor theme.

    A theme is immutable once loaded and can be shared between threads.

    Attributes:
        name: Theme name
        description: Theme description (optional)
        version: Theme version (optional)
        author: Theme author (optional)
        cursors_directory: cursors_directory value from the manifest
        path: Absolute path to the theme directory
        cursors_path: Absolute path to the cursors directory
        cursors: Loaded cursors, sorted by container file name
    """

    name: str
    description: str | None
    version: str | None
    author: str | None
    cursors_directory: str
    path: Path
    cursors_path: Path
    cursors: tuple[Cursor, ...]

    @classmethod
    def load(cls, name: str, search_roots: Iterable[Path] | None = None) -> "CursorTheme":
        """Resolve a theme by name and load all of its cursors.

        Args:
            name: Theme name as declared in its manifest
            search_roots: Ordered icon roots to scan.
                          Defaults to the XDG search path if not specified.

        Returns:
            Loaded CursorTheme

        Raises:
            ThemeNotFoundError: If no root holds a matching theme
            CursorThemeError: If the theme or any of its cursors is invalid
            OSError: If a directory or container can't be read
        """
        if search_roots is None:
            search_roots = default_search_roots()

        location = find_theme(name, search_roots)
        return cls.from_location(location)

    @classmethod
    def from_location(cls, location: ThemeLocation) -> "CursorTheme":
        """Load the cursors of an already resolved theme.

        Args:
            location: Result of find_theme or discover_themes

        Returns:
            Loaded CursorTheme
        """
        cursors = load_cursors(location.cursors_path)
        manifest = location.manifest
        logger.info(f"Loaded theme {manifest.name!r} from {location.path} ({len(cursors)} cursors)")

        return cls(
            name=manifest.name,
            description=manifest.description,
            version=manifest.version,
            author=manifest.author,
            cursors_directory=location.cursors_directory,
            path=location.path,
            cursors_path=location.cursors_path,
            cursors=tuple(cursors),
        )

    def load_cursor(self, name: str) -> Cursor | None:
        """Get cursor by name or alias.

        Args:
            name: Cursor name or one of its define_override aliases

        Returns:
            First cursor whose overrides contain name, None otherwise
        """
        for cursor in self.cursors:
            if name in cursor.overrides:
                return cursor
        return None

    def cursor_names(self) -> list[str]:
        """List the primary names of all cursors, in load order."""
        return [cursor.name for cursor in self.cursors]

    def __iter__(self) -> Iterator[Cursor]:
        return iter(self.cursors)

    def __len__(self) -> int:
        return len(self.cursors)
