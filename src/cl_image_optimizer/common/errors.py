from typing import override


class ImageOptimizerError(Exception):
    """
    Base class for errors raised by cl_image_optimizer.

    The loader and the pattern generator never raise; only the build step
    reports failures, and it does so with a subclass of this error.
    """

    def __init__(self, message: str = "Image optimization failed."):
        self.message: str = message
        super().__init__(self.message)

    @override
    def __str__(self):
        return self.message


class CopyRuleError(ImageOptimizerError):
    """Raised when a copy rule cannot be applied to a source file."""

    def __init__(self, source: str, width: int, reason: str):
        self.source: str = source
        self.width: int = width
        super().__init__(f"Failed to process {source} at width {width}: {reason}")
