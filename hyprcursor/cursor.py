"""Cursors and frame rendering."""

from dataclasses import dataclass, field

from hyprcursor.images import Image
from hyprcursor.meta import Kind, Meta, ResizeAlgorithm


@dataclass(frozen=True)
class Frame:
    """One rendered frame of a cursor.

    Attributes:
        size: Requested pixel size the frame was rendered for
        delay: Animation delay in milliseconds, None for static frames
        pixels: RGBA bytes, width * height * 4 long
        width: Width of the pixel buffer
        height: Height of the pixel buffer

    Vector frames are always size x size. Raster frames keep the stored
    dimensions of their image, which may differ from size.
    """

    size: int
    delay: int | None
    pixels: bytes = field(repr=False)
    width: int
    height: int

    @classmethod
    def render(cls, image: Image, size: int) -> "Frame":
        pixels = image.render(size)
        return cls(
            size=size,
            delay=image.delay,
            pixels=pixels.data,
            width=pixels.width,
            height=pixels.height,
        )


@dataclass(frozen=True)
class Cursor:
    """A loaded cursor: its metadata and one image per size entry.

    Attributes:
        meta: Parsed meta.hl
        images: Images in the order of meta.sizes
    """

    meta: Meta
    images: tuple[Image, ...]

    def __post_init__(self):
        """Validate the images match the size entries."""
        if len(self.images) != len(self.meta.sizes):
            raise ValueError(
                f"Cursor {self.meta.name!r} has {len(self.images)} images "
                f"for {len(self.meta.sizes)} sizes"
            )
        if any(image.kind != self.meta.kind for image in self.images):
            raise ValueError(f"Cursor {self.meta.name!r} mixes png and svg images")

    @property
    def name(self) -> str:
        return self.meta.name

    @property
    def overrides(self) -> tuple[str, ...]:
        return self.meta.overrides

    @property
    def hotspot(self) -> tuple[float, float]:
        return self.meta.hotspot_x, self.meta.hotspot_y

    @property
    def resize_algorithm(self) -> ResizeAlgorithm:
        return self.meta.resize_algorithm

    @property
    def kind(self) -> Kind:
        return self.meta.kind

    def render_frames(self, size: int) -> list[Frame]:
        """Render the frames of this cursor for a pixel size.

        See render_frames.
        """
        return render_frames(self, size)


def nearest_size(images: tuple[Image, ...], size: int) -> int:
    """Get the stored size closest to size.

    Ties go to the image declared first.

    Examples:
        >>> from hyprcursor.images import RasterData
        >>> images = tuple(Image(RasterData("a.png", b""), s) for s in (16, 24, 32))
        >>> nearest_size(images, 20)
        16
    """
    return min(images, key=lambda image: abs(image.size - size)).size


def render_frames(cursor: Cursor, size: int) -> list[Frame]:
    """Render the frames of a cursor for a pixel size.

    SVG cursors render every image at size x size, one frame per image: each
    size entry of a vector cursor is an animation frame.

    PNG cursors pick the stored size nearest to size and decode every image
    of that size, at its stored dimensions. Nothing is resized.

    Frames are recomputed on every call.

    Args:
        cursor: Cursor to render
        size: Requested pixel size

    Returns:
        Frames in declaration order

    Raises:
        ValueError: If size isn't a positive integer
        RenderError: If an image can't be decoded or rasterized
    """
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ValueError(f"size must be a positive integer, got {size!r}")

    if cursor.kind is Kind.SVG:
        return [Frame.render(image, size) for image in cursor.images]

    if cursor.kind is Kind.PNG:
        nearest = nearest_size(cursor.images, size)
        return [Frame.render(image, size) for image in cursor.images if image.size == nearest]

    raise AssertionError(f"unhandled image kind {cursor.kind!r}")
