"""Pydantic schemas for loader requests and copy rules."""

from collections.abc import Callable
from pathlib import Path
from typing import ClassVar, NotRequired, TypedDict

from pydantic import BaseModel, ConfigDict, Field

# ─────────────────────────────────────────────────────────────
# Loader input
# ─────────────────────────────────────────────────────────────


class ImageLoaderProps(TypedDict):
    """Argument handed to a custom image loader by the host framework."""

    src: str
    width: int
    quality: NotRequired[int | None]


class ImageRequest(BaseModel):
    """A single request to resolve the URL of a sized image.

    Built fresh for every call; has no identity beyond its fields.
    """

    src: str = Field(..., description="Source path of the image, e.g. /images/cat.jpg")
    width: int = Field(..., description="Requested width in pixels")
    is_development: bool = Field(default=False, description="Development build flag")

    model_config: ClassVar[ConfigDict] = {"frozen": True}


# ─────────────────────────────────────────────────────────────
# Copy rules
# ─────────────────────────────────────────────────────────────

Transform = Callable[[bytes], bytes]


class CopyRule(BaseModel):
    """Declarative copy-and-transform instruction for one breakpoint width.

    Attributes:
        context: Folder that ``[path]`` tokens are computed relative to
        from_glob: Absolute, forward-slash glob selecting source files
        to: Destination template with ``[path]``, ``[name]`` and ``[ext]`` tokens
        ignore: Globs excluding files from ``from_glob``
        width: Breakpoint width the rule was generated for
        transform: Callback turning source bytes into destination bytes
    """

    context: Path
    from_glob: str
    to: str
    ignore: list[str] = Field(default_factory=list)
    width: int
    transform: Transform

    model_config: ClassVar[ConfigDict] = {
        "frozen": True,
        "arbitrary_types_allowed": True,
    }
