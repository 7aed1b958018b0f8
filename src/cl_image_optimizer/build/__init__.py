"""Build step: configuration and copy-rule execution."""

from .config import (
    DEFAULT_DEVICE_SIZES,
    DEFAULT_IMAGE_SIZES,
    ImagesConfig,
    build_copy_rules,
    run_build,
)
from .copy_step import apply_copy_rules, expand_braces, render_destination

__all__ = [
    "DEFAULT_DEVICE_SIZES",
    "DEFAULT_IMAGE_SIZES",
    "ImagesConfig",
    "apply_copy_rules",
    "build_copy_rules",
    "expand_braces",
    "render_destination",
    "run_build",
]
