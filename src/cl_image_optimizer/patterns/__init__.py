"""Copy-rule generation."""

from .generate_patterns import (
    DEFAULT_PUBLIC_FOLDER,
    IGNORE_GLOB,
    OPTIMIZED_DIR,
    generate_patterns,
)

__all__ = [
    "DEFAULT_PUBLIC_FOLDER",
    "IGNORE_GLOB",
    "OPTIMIZED_DIR",
    "generate_patterns",
]
