"""Exceptions raised while resolving, loading and rendering cursor themes.

Every exception derives from CursorThemeError. Filesystem errors are not
wrapped: they propagate as the OSError raised by the failing call.
"""

from pathlib import Path


class CursorThemeError(Exception):
    """Base class for all hyprcursor errors."""


class ConfigurationError(CursorThemeError):
    """Raised when the search path configuration cannot be built."""


# Resolution


class ThemeNotFoundError(CursorThemeError, LookupError):
    """Raised when no search root holds a theme with the requested name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"couldn't find theme {name!r}")


class CursorsDirectoryNotSetError(CursorThemeError):
    """Raised when a matched theme's manifest has no cursors_directory."""

    def __init__(self, theme_dir: Path):
        self.theme_dir = theme_dir
        super().__init__(f"cursors_directory is not set in {theme_dir}")


class CursorsDirectoryMissingError(CursorThemeError):
    """Raised when a theme's cursors_directory does not exist on disk."""

    def __init__(self, cursors_directory: str, path: Path):
        self.cursors_directory = cursors_directory
        self.path = path
        super().__init__(f"cursors directory {cursors_directory!r} doesn't exist: {path}")


class UnsupportedFormatError(CursorThemeError):
    """Raised for the toml dialect of manifests and cursor metadata."""

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"toml manifests and metadata are not supported: {path}")


# Parsing


class ManifestError(CursorThemeError, ValueError):
    """Raised when a theme manifest cannot be turned into a Manifest."""


class MetaError(CursorThemeError, ValueError):
    """Raised when cursor metadata (meta.hl) is invalid."""


class NoSizeDefinedError(MetaError):
    def __init__(self):
        super().__init__("no size defined")


class InvalidResizeAlgorithmError(MetaError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid resize algorithm {value!r}")


class MissingHotspotXError(MetaError):
    def __init__(self):
        super().__init__("hotspot_x not set")


class MissingHotspotYError(MetaError):
    def __init__(self):
        super().__init__("hotspot_y not set")


class InvalidHotspotXError(MetaError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"hotspot_x is invalid: {value!r}")


class InvalidHotspotYError(MetaError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"hotspot_y is invalid: {value!r}")


class EmptyDefinitionError(MetaError):
    def __init__(self):
        super().__init__("size definition empty")


class InvalidSizeError(MetaError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid size {value!r}")


class FileMissingError(MetaError):
    def __init__(self):
        super().__init__("file not set in size definition")


class MissingExtensionError(MetaError):
    def __init__(self, file: str):
        self.file = file
        super().__init__(f"no extension specified for file {file!r}")


class InvalidExtensionError(MetaError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(f"unknown extension {extension!r}, expected svg or png")


class InvalidDelayError(MetaError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"invalid delay {value!r}")


class DelayIsZeroError(MetaError):
    def __init__(self):
        super().__init__("delay has to be > 0")


class MoreThanOneFormatError(MetaError):
    def __init__(self):
        super().__init__("both png and svg defined")


# Archives


class ArchiveError(CursorThemeError):
    """Raised when a cursor container or one of its entries can't be read.

    Attributes:
        path: Path to the cursor container (.hlc)
        entry: Name of the entry being read, if any
    """

    def __init__(self, path: Path, entry: str | None = None, reason: str = ""):
        self.path = path
        self.entry = entry
        message = f"error unzipping {path}"
        if entry is not None:
            message += f" (entry {entry!r})"
        if reason:
            message += f": {reason}"
        super().__init__(message)


class MetaNotFoundError(ArchiveError):
    """Raised when a container holds neither meta.hl nor meta.toml."""

    def __init__(self, path: Path):
        super().__init__(path, reason="couldn't find meta file")


class InvalidMetaError(ArchiveError):
    """Raised when the meta.hl of a container fails to parse.

    The underlying MetaError is available as __cause__.
    """

    def __init__(self, path: Path, error: MetaError):
        self.error = error
        super().__init__(path, entry="meta.hl", reason=str(error))


# Rendering


class RenderError(CursorThemeError):
    """Raised when an image payload can't be turned into pixels."""

    def __init__(self, file: str, reason: str):
        self.file = file
        super().__init__(f"{file}: {reason}")


class VectorDocumentError(RenderError):
    """Raised for malformed SVG documents."""


class ImageDecodeError(RenderError):
    """Raised for raster payloads that can't be decoded."""
