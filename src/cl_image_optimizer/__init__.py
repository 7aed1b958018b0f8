"""cl_image_optimizer - custom image loader and build-time image resizing."""

from .build import DEFAULT_DEVICE_SIZES, DEFAULT_IMAGE_SIZES, ImagesConfig, apply_copy_rules, run_build
from .common import CopyRule, CopyRuleError, ImageLoaderProps, ImageOptimizerError, ImageRequest
from .loader import image_loader, is_development, resolve, resolve_image_path
from .patterns import generate_patterns

__version__ = "0.1.0"

__all__ = [
    "CopyRule",
    "CopyRuleError",
    "DEFAULT_DEVICE_SIZES",
    "DEFAULT_IMAGE_SIZES",
    "ImageLoaderProps",
    "ImageOptimizerError",
    "ImageRequest",
    "ImagesConfig",
    "__version__",
    "apply_copy_rules",
    "generate_patterns",
    "image_loader",
    "is_development",
    "resolve",
    "resolve_image_path",
    "run_build",
]
