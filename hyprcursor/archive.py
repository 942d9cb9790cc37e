"""Cursor container loading.

Each cursor of a theme is stored as a `.hlc` file: a zip archive holding a
meta.hl entry and one image entry per `define_size` line.
"""

import logging
import zipfile
import zlib
from pathlib import Path

from hyprcursor.cursor import Cursor
from hyprcursor.errors import (
    ArchiveError,
    InvalidMetaError,
    MetaError,
    MetaNotFoundError,
    UnsupportedFormatError,
)
from hyprcursor.images import Image, RasterData, VectorDocument
from hyprcursor.meta import Kind, Meta, Size, parse_meta

logger = logging.getLogger(__name__)

CURSOR_SUFFIX = ".hlc"
META_FILENAME = "meta.hl"
TOML_META_FILENAME = "meta.toml"


def is_cursor_container(path: Path) -> bool:
    """Check if path is a cursor container (.hlc file)."""
    return path.suffix == CURSOR_SUFFIX and path.is_file()


def _read_entry(archive: zipfile.ZipFile, container: Path, entry: str) -> bytes:
    """Read one entry of an open container.

    Raises:
        ArchiveError: If the entry is missing or can't be decompressed
    """
    try:
        with archive.open(entry) as f:
            return f.read()
    except KeyError:
        raise ArchiveError(container, entry, "no such entry") from None
    except (
        zipfile.BadZipFile,
        zipfile.LargeZipFile,
        NotImplementedError,
        RuntimeError,
        EOFError,
        zlib.error,
    ) as e:
        raise ArchiveError(container, entry, str(e)) from e


def _read_meta(archive: zipfile.ZipFile, container: Path) -> Meta:
    """Find, read and parse the metadata entry of an open container."""
    names = set(archive.namelist())
    if META_FILENAME not in names:
        if TOML_META_FILENAME in names:
            raise UnsupportedFormatError(container / TOML_META_FILENAME)
        raise MetaNotFoundError(container)

    raw = _read_entry(archive, container, META_FILENAME)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ArchiveError(container, META_FILENAME, f"not valid utf-8: {e}") from e

    try:
        return parse_meta(text, container.stem)
    except MetaError as e:
        raise InvalidMetaError(container, e) from e


def _load_image(archive: zipfile.ZipFile, container: Path, size: Size) -> Image:
    buffer = _read_entry(archive, container, size.file)

    if size.kind is Kind.SVG:
        data = VectorDocument.from_bytes(buffer, size.file)
    elif size.kind is Kind.PNG:
        data = RasterData(size.file, buffer)
    else:
        raise AssertionError(f"unhandled image kind {size.kind!r}")

    return Image(data=data, size=size.size, delay=size.delay)


def load_cursor_archive(container: Path) -> Cursor:
    """Load a cursor from its container.

    Args:
        container: Path to the .hlc file

    Returns:
        Cursor with one image per size entry

    Raises:
        ArchiveError: If the container isn't a zip or an entry can't be read
        MetaNotFoundError: If the container has no meta.hl or meta.toml
        UnsupportedFormatError: If the container only has meta.toml
        InvalidMetaError: If meta.hl fails to parse
        VectorDocumentError: If an svg entry is malformed
        OSError: If the container can't be opened
    """
    try:
        archive = zipfile.ZipFile(container)
    except zipfile.BadZipFile as e:
        raise ArchiveError(container, reason=str(e)) from e

    with archive:
        meta = _read_meta(archive, container)
        images = tuple(_load_image(archive, container, size) for size in meta.sizes)

    return Cursor(meta=meta, images=images)


def load_cursors(cursors_path: Path) -> list[Cursor]:
    """Load every cursor container in a directory.

    Files without the .hlc suffix are skipped. A single broken container
    fails the whole load.

    Args:
        cursors_path: Directory holding the .hlc files

    Returns:
        Cursors sorted by container file name
    """
    cursors = []
    for path in sorted(cursors_path.iterdir()):
        if not is_cursor_container(path):
            continue

        cursor = load_cursor_archive(path)
        logger.debug(f"Loaded cursor {cursor.name!r} from {path} ({len(cursor.images)} images)")
        cursors.append(cursor)

    return cursors
