"""Pure image resize computation logic (bytes in, JPEG bytes out)."""

from io import BytesIO

from PIL import Image

JPEG_QUALITY = 80


def scaled_size(size: tuple[int, int], width: int) -> tuple[int, int]:
    """Return ``(width, height)`` preserving the aspect ratio of ``size``."""
    src_width, src_height = size
    height = max(1, round(src_height * width / src_width))
    return width, height


def resize_to_jpeg(content: bytes, width: int) -> bytes:
    """
    Resize an encoded image to ``width`` pixels wide and re-encode it as JPEG.

    The height follows the source aspect ratio. Narrower sources are
    enlarged. Every input format, PNG included, comes out as JPEG.

    Args:
        content: Encoded source image
        width: Target width in pixels

    Returns:
        JPEG-encoded bytes

    Raises:
        PIL.UnidentifiedImageError: If ``content`` is not a readable image
        OSError: If Pillow fails to decode or encode the image
    """
    with Image.open(BytesIO(content)) as img:
        resized = img.resize(scaled_size(img.size, width), Image.Resampling.LANCZOS)

    # JPEG has no alpha channel or palette
    if resized.mode != "RGB":
        resized = resized.convert("RGB")

    out = BytesIO()
    resized.save(
        out,
        format="JPEG",
        quality=JPEG_QUALITY,
        optimize=True,
        progressive=True,
    )
    return out.getvalue()
