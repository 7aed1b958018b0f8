"""Build configuration: breakpoint widths and the public folder."""

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Literal

from loguru import logger
from pydantic import BaseModel, Field, field_validator

from ..common.schemas import CopyRule
from ..loader.image_loader import is_development
from ..patterns.generate_patterns import DEFAULT_PUBLIC_FOLDER, generate_patterns
from ..utils.profiling import timed
from .copy_step import apply_copy_rules

PUBLIC_FOLDER_ENV_VAR = "CL_IMAGE_PUBLIC_FOLDER"

# Default responsive breakpoints of the host framework
DEFAULT_DEVICE_SIZES = [640, 750, 828, 1080, 1200, 1920, 2048, 3840]
DEFAULT_IMAGE_SIZES = [16, 32, 48, 64, 96, 128, 256, 384]


class ImagesConfig(BaseModel):
    """Image section of the site configuration.

    Attributes:
        loader: Always "custom"; the host framework calls image_loader()
        device_sizes: Widths for full-width images
        image_sizes: Widths for smaller, fixed-size images
        public_folder: Folder holding the source images
    """

    loader: Literal["custom"] = "custom"
    device_sizes: list[int] = Field(default_factory=lambda: list(DEFAULT_DEVICE_SIZES))
    image_sizes: list[int] = Field(default_factory=lambda: list(DEFAULT_IMAGE_SIZES))
    public_folder: Path = DEFAULT_PUBLIC_FOLDER

    @field_validator("device_sizes", "image_sizes")
    @classmethod
    def validate_positive(cls, v: list[int]) -> list[int]:
        """Ensure all widths are positive."""
        if any(width <= 0 for width in v):
            raise ValueError("Widths must be positive integers")
        return v

    @property
    def all_widths(self) -> list[int]:
        return [*self.device_sizes, *self.image_sizes]

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ImagesConfig":
        env = os.environ if environ is None else environ
        public_folder = env.get(PUBLIC_FOLDER_ENV_VAR)
        if public_folder:
            return cls(public_folder=Path(public_folder))
        return cls()


def build_copy_rules(config: ImagesConfig, dev: bool) -> list[CopyRule]:
    """Copy rules for a build. Development builds get none: the dev server resizes on the fly."""
    if dev:
        return []
    return generate_patterns(config.all_widths, config.public_folder)


@timed("image build")
def run_build(config: ImagesConfig | None = None, dev: bool | None = None) -> list[Path]:
    """
    Pre-resize the public images for a production build.

    Args:
        config: Image configuration (default: read from environment)
        dev: Development build flag (default: read from environment)

    Returns:
        Written files

    Raises:
        CopyRuleError: If an image cannot be processed
    """
    if config is None:
        config = ImagesConfig.from_env()
    if dev is None:
        dev = is_development()

    rules = build_copy_rules(config, dev)
    if not rules:
        logger.info("Development build, skipping image optimization")
        return []

    written = apply_copy_rules(rules)
    logger.info(
        f"Optimized images in {config.public_folder}: "
        f"{len(written)} file(s) for {len(rules)} width(s)"
    )
    return written
