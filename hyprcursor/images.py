"""Image payloads stored in cursor containers.

An image holds either the undecoded bytes of a PNG (RasterData) or a parsed
SVG document (VectorDocument). Both variants render to RGBA pixels:
raster data is decoded at its stored dimensions, vector documents are
rasterized at whatever square size is asked for.
"""

import io
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field
from typing import ClassVar

from PIL import Image as PILImage
from PIL import UnidentifiedImageError

from hyprcursor.errors import ImageDecodeError, VectorDocumentError
from hyprcursor.meta import Kind

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

# Size used for documents that declare neither width/height nor a viewBox
DEFAULT_DOCUMENT_SIZE = 100.0

# Absolute CSS units in px
_UNITS = {
    "": 1.0,
    "px": 1.0,
    "pt": 4 / 3,
    "pc": 16.0,
    "mm": 96 / 25.4,
    "cm": 96 / 2.54,
    "in": 96.0,
}
_NUMBER = r"[+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?"
_LENGTH_RE = re.compile(rf"^\s*({_NUMBER})\s*([a-z]*)\s*$")

ET.register_namespace("", SVG_NS)
ET.register_namespace("xlink", XLINK_NS)


@dataclass(frozen=True)
class Pixels:
    """An RGBA pixel buffer.

    Attributes:
        width: Width in pixels
        height: Height in pixels
        data: Row-major RGBA bytes, width * height * 4 long
    """

    width: int
    height: int
    data: bytes


def _to_rgba(image: PILImage.Image) -> Pixels:
    if image.mode != "RGBA":
        image = image.convert("RGBA")
    return Pixels(width=image.width, height=image.height, data=image.tobytes())


@dataclass(frozen=True)
class RasterData:
    """Undecoded PNG bytes read from a container."""

    kind: ClassVar[Kind] = Kind.PNG

    file: str
    data: bytes = field(repr=False)

    def render(self, size: int) -> Pixels:
        """Decode the PNG into RGBA pixels.

        The size is ignored: raster images are returned at their stored
        dimensions.

        Raises:
            ImageDecodeError: If the bytes aren't a decodable image
        """
        try:
            with PILImage.open(io.BytesIO(self.data)) as image:
                image.load()
                return _to_rgba(image)
        except (
            UnidentifiedImageError,
            PILImage.DecompressionBombError,
            OSError,
            ValueError,
        ) as e:
            raise ImageDecodeError(self.file, f"can't decode image: {e}") from e


def _parse_length(value: str | None) -> float | None:
    """Convert an SVG length attribute to px, or None if it has no absolute size."""
    if value is None:
        return None
    match = _LENGTH_RE.match(value)
    if not match or match.group(2) not in _UNITS:
        return None
    length = float(match.group(1)) * _UNITS[match.group(2)]
    return length if length > 0 else None


def _parse_view_box(value: str | None) -> tuple[float, float] | None:
    if value is None:
        return None
    parts = value.replace(",", " ").split()
    if len(parts) != 4:
        return None
    try:
        width, height = float(parts[2]), float(parts[3])
    except ValueError:
        return None
    if width <= 0 or height <= 0:
        return None
    return width, height


@dataclass(frozen=True)
class VectorDocument:
    """A parsed SVG document.

    Attributes:
        file: Entry name the document was read from
        width: Intrinsic width in px
        height: Intrinsic height in px
    """

    kind: ClassVar[Kind] = Kind.SVG

    file: str
    width: float
    height: float
    root: ET.Element = field(repr=False, compare=False)

    @classmethod
    def from_bytes(cls, data: bytes, file: str) -> "VectorDocument":
        """Parse an SVG document.

        The intrinsic size comes from the width/height attributes of the
        root element, then from its viewBox, then defaults to 100x100.

        Args:
            data: Raw document bytes
            file: Entry name, used in error messages

        Returns:
            Parsed VectorDocument

        Raises:
            VectorDocumentError: If data isn't an SVG document
        """
        try:
            root = ET.fromstring(data)
        except ET.ParseError as e:
            raise VectorDocumentError(file, f"malformed svg: {e}") from e

        if root.tag not in (f"{{{SVG_NS}}}svg", "svg"):
            raise VectorDocumentError(file, f"root element is {root.tag!r}, expected svg")

        view_box = _parse_view_box(root.get("viewBox"))
        width = _parse_length(root.get("width"))
        height = _parse_length(root.get("height"))
        if width is None:
            width = view_box[0] if view_box else DEFAULT_DOCUMENT_SIZE
        if height is None:
            height = view_box[1] if view_box else DEFAULT_DOCUMENT_SIZE

        return cls(file=file, width=width, height=height, root=root)

    def render(self, size: int) -> Pixels:
        """Rasterize the document into a size x size RGBA buffer.

        The document is scaled independently along each axis so that its
        intrinsic width and height both map onto size pixels.

        Raises:
            VectorDocumentError: If the document can't be rasterized
        """
        import cairosvg

        root = ET.Element(self.root.tag, dict(self.root.attrib))
        root.text = self.root.text
        root.extend(list(self.root))
        if root.get("viewBox") is None:
            root.set("viewBox", f"0 0 {self.width:g} {self.height:g}")
        root.set("width", str(size))
        root.set("height", str(size))
        root.set("preserveAspectRatio", "none")

        try:
            png = cairosvg.svg2png(bytestring=ET.tostring(root))
        except Exception as e:
            raise VectorDocumentError(self.file, f"can't render svg: {e}") from e

        with PILImage.open(io.BytesIO(png)) as image:
            pixels = _to_rgba(image)

        if (pixels.width, pixels.height) != (size, size):
            raise VectorDocumentError(
                self.file, f"rendered {pixels.width}x{pixels.height}, expected {size}x{size}"
            )
        return pixels


@dataclass(frozen=True)
class Image:
    """One stored image of a cursor.

    Attributes:
        data: Raster bytes or a parsed vector document
        size: Nominal size from the size entry
        delay: Animation delay in milliseconds, None for static images
    """

    data: RasterData | VectorDocument
    size: int
    delay: int | None = None

    @property
    def kind(self) -> Kind:
        return self.data.kind

    @property
    def file(self) -> str:
        return self.data.file

    def render(self, size: int) -> Pixels:
        return self.data.render(size)
