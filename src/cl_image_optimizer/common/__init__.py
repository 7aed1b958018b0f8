"""Common module - schemas and errors."""

from .errors import CopyRuleError, ImageOptimizerError
from .schemas import CopyRule, ImageLoaderProps, ImageRequest, Transform

__all__ = [
    "CopyRule",
    "CopyRuleError",
    "ImageLoaderProps",
    "ImageOptimizerError",
    "ImageRequest",
    "Transform",
]
