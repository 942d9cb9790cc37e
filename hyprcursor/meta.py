"""Cursor metadata (meta.hl) data model and parsing.

Every cursor container carries a meta.hl describing its hotspot, resize
hint, the alias names it can be looked up under, and one `define_size` line
per stored image:

    resize_algorithm = bilinear
    hotspot_x = 0.0
    hotspot_y = 0.0
    define_override = arrow
    define_size = 32, left_ptr_32.png
    define_size = 32, left_ptr_32_2.png, 100

All sizes of one cursor must use the same image kind (png or svg).
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath

from hyprcursor.errors import (
    DelayIsZeroError,
    EmptyDefinitionError,
    FileMissingError,
    InvalidDelayError,
    InvalidExtensionError,
    InvalidHotspotXError,
    InvalidHotspotYError,
    InvalidResizeAlgorithmError,
    InvalidSizeError,
    MissingExtensionError,
    MissingHotspotXError,
    MissingHotspotYError,
    MoreThanOneFormatError,
    NoSizeDefinedError,
)
from hyprcursor.hyprlang import iter_assignments

_UINT_RE = re.compile(r"^\+?[0-9]+$")
_FLOAT_RE = re.compile(
    r"^[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)$",
    re.IGNORECASE,
)
_UINT_MAX = 2**32 - 1


class Kind(Enum):
    """Image kind of a size entry, derived from its file extension."""

    PNG = "png"
    SVG = "svg"


class ResizeAlgorithm(Enum):
    """Resize hint for raster cursors."""

    NONE = "none"
    BILINEAR = "bilinear"
    NEAREST = "nearest"

    @classmethod
    def from_token(cls, token: str) -> "ResizeAlgorithm":
        """Look up an algorithm by its meta.hl token.

        Raises:
            InvalidResizeAlgorithmError: If token isn't none, bilinear or nearest
        """
        try:
            return cls(token)
        except ValueError:
            raise InvalidResizeAlgorithmError(token) from None


@dataclass(frozen=True)
class Size:
    """One `define_size` entry.

    Attributes:
        size: Nominal pixel size of the image
        file: Entry name of the image inside the container
        delay: Animation delay in milliseconds (None for static images)
        kind: Image kind derived from the file extension
    """

    size: int
    file: str
    delay: int | None
    kind: Kind


@dataclass(frozen=True)
class Meta:
    """Parsed meta.hl of one cursor.

    Attributes:
        name: Cursor name, taken from the container's file name
        resize_algorithm: Resize hint
        hotspot_x: Horizontal hotspot position
        hotspot_y: Vertical hotspot position
        overrides: Names the cursor answers to; the first one is always name
        sizes: Size entries in declaration order, never empty
    """

    name: str
    resize_algorithm: ResizeAlgorithm
    hotspot_x: float
    hotspot_y: float
    overrides: tuple[str, ...]
    sizes: tuple[Size, ...]

    @property
    def kind(self) -> Kind:
        """Image kind shared by all sizes."""
        return self.sizes[0].kind


def _parse_uint(value: str) -> int | None:
    if not _UINT_RE.match(value):
        return None
    number = int(value)
    if number > _UINT_MAX:
        return None
    return number


def _kind_for(file: str) -> Kind:
    suffix = PurePosixPath(file).suffix
    if not suffix:
        raise MissingExtensionError(file)

    extension = suffix[1:]
    if extension == "png":
        return Kind.PNG
    if extension == "svg":
        return Kind.SVG
    raise InvalidExtensionError(extension)


def parse_size(value: str) -> Size:
    """Parse the value of a `define_size` directive.

    The value is `size, file[, delay]`. Extra fields after the delay are
    ignored.

    Args:
        value: Directive value, e.g. "32, left_ptr.png, 50"

    Returns:
        Parsed Size

    Raises:
        EmptyDefinitionError: If value is empty
        InvalidSizeError: If the size isn't an unsigned integer
        FileMissingError: If no file is given
        MissingExtensionError: If the file has no extension
        InvalidExtensionError: If the extension is neither png nor svg
        InvalidDelayError: If the delay isn't an unsigned integer
        DelayIsZeroError: If the delay is 0

    Examples:
        >>> parse_size("0, foo.png, 5")
        Size(size=0, file='foo.png', delay=5, kind=<Kind.PNG: 'png'>)
    """
    if not value.strip():
        raise EmptyDefinitionError()

    parts = [part.strip() for part in value.split(",")]

    size = _parse_uint(parts[0])
    if size is None:
        raise InvalidSizeError(parts[0])

    if len(parts) < 2:
        raise FileMissingError()
    file = parts[1]
    kind = _kind_for(file)

    delay = None
    if len(parts) > 2:
        delay = _parse_uint(parts[2])
        if delay is None:
            raise InvalidDelayError(parts[2])
        if delay == 0:
            raise DelayIsZeroError()

    return Size(size=size, file=file, delay=delay, kind=kind)


def _parse_hotspot(value: str, error: type) -> float:
    if not _FLOAT_RE.match(value):
        raise error(value)
    return float(value)


def parse_meta(text: str, name: str) -> Meta:
    """Parse meta.hl content.

    Args:
        text: Full text of the meta.hl entry
        name: Cursor name derived from the container file name

    Returns:
        Parsed Meta

    Raises:
        MetaError: Subclass describing the first problem found
    """
    resize_algorithm = None
    hotspot_x = None
    hotspot_y = None
    overrides = [name]
    sizes: list[Size] = []

    for identifier, value in iter_assignments(text):
        if identifier == "resize_algorithm":
            resize_algorithm = ResizeAlgorithm.from_token(value)
        elif identifier == "hotspot_x":
            hotspot_x = _parse_hotspot(value, InvalidHotspotXError)
        elif identifier == "hotspot_y":
            hotspot_y = _parse_hotspot(value, InvalidHotspotYError)
        elif identifier == "define_override":
            overrides.append(value)
        elif identifier == "define_size":
            size = parse_size(value)
            if sizes and sizes[0].kind != size.kind:
                raise MoreThanOneFormatError()
            sizes.append(size)

    if not sizes:
        raise NoSizeDefinedError()
    if hotspot_x is None:
        raise MissingHotspotXError()
    if hotspot_y is None:
        raise MissingHotspotYError()

    return Meta(
        name=name,
        resize_algorithm=resize_algorithm or ResizeAlgorithm.NONE,
        hotspot_x=hotspot_x,
        hotspot_y=hotspot_y,
        overrides=tuple(overrides),
        sizes=tuple(sizes),
    )
