"""Custom image loader: maps a source image and width to the URL to render."""

import os
import re
from collections.abc import Mapping
from urllib.parse import quote

from ..common.schemas import ImageLoaderProps, ImageRequest

ENV_VAR = "CL_IMAGE_ENV"
DEVELOPMENT = "development"
OPTIMIZED_PREFIX = "/optimized"

# Characters encodeURIComponent leaves alone, on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"
_ENCODED_SLASH = re.compile("%2F", re.IGNORECASE)


def is_development(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the environment marks a development build."""
    env = os.environ if environ is None else environ
    return env.get(ENV_VAR) == DEVELOPMENT


def split_extension(src: str) -> tuple[str, str]:
    """Encode ``src`` and split it into path and extension at the first ``.``.

    Assumes exactly one ``.`` in the path. With more, everything after the
    second ``.`` is dropped; with none, the extension is empty.
    """
    encoded = _ENCODED_SLASH.sub("/", quote(src, safe=_URI_COMPONENT_SAFE))
    parts = encoded.split(".")
    path = parts[0]
    extension = parts[1] if len(parts) > 1 else ""
    return path, extension


def resolve_image_path(src: str, width: int, is_development: bool) -> str:
    """
    Resolve the path clients should use to fetch ``src`` at ``width``.

    Args:
        src: Source image path, e.g. ``/images/cat.jpg``
        width: Requested width in pixels
        is_development: Development builds serve the original file

    Returns:
        ``/optimized{path}_w{width}.{ext}`` for raster images in production,
        the encoded source path otherwise.
    """
    path, extension = split_extension(src)

    if is_development:
        return f"{path}.{extension}"

    # svg is never raster-resized
    if extension == "svg":
        return f"{path}.{extension}"

    return f"{OPTIMIZED_PREFIX}{path}_w{width}.{extension}"


def resolve(request: ImageRequest) -> str:
    """Resolve an ImageRequest."""
    return resolve_image_path(request.src, request.width, request.is_development)


def image_loader(props: ImageLoaderProps) -> str:
    """Loader entry point for the host framework.

    ``quality`` is accepted but unused: optimized variants are pre-encoded.
    """
    request = ImageRequest(
        src=props["src"],
        width=props["width"],
        is_development=is_development(),
    )
    return resolve(request)
