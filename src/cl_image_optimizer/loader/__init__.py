"""Image loader."""

from .image_loader import (
    ENV_VAR,
    image_loader,
    is_development,
    resolve,
    resolve_image_path,
    split_extension,
)

__all__ = [
    "ENV_VAR",
    "image_loader",
    "is_development",
    "resolve",
    "resolve_image_path",
    "split_extension",
]
