"""Test configuration and fixtures for cl_image_optimizer.

This module provides:
- Synthetic image fixtures generated with Pillow
- A throwaway public folder laid out like a site's static assets
- Environment isolation for the development flag
"""

from pathlib import Path

import pytest

from cl_image_optimizer.build.config import PUBLIC_FOLDER_ENV_VAR
from cl_image_optimizer.loader.image_loader import ENV_VAR
from tests.utils.image_factory import make_image

# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Make sure the build environment never leaks into tests."""
    monkeypatch.delenv(ENV_VAR, raising=False)
    monkeypatch.delenv(PUBLIC_FOLDER_ENV_VAR, raising=False)


# ============================================================================
# Images
# ============================================================================


@pytest.fixture
def jpeg_bytes() -> bytes:
    """800x600 JPEG."""
    return make_image(800, 600)


@pytest.fixture
def png_bytes() -> bytes:
    """400x200 PNG with an alpha channel."""
    return make_image(400, 200, mode="RGBA", format="PNG")


@pytest.fixture
def public_folder(tmp_path: Path, jpeg_bytes: bytes, png_bytes: bytes) -> Path:
    """Public folder with images at the root, in a subfolder, and a non-image.

    Layout:
        public/hero.jpg
        public/images/cat.jpg
        public/images/icons/logo.png
        public/images/logo.svg
        public/robots.txt
    """
    public = tmp_path / "public"
    (public / "images" / "icons").mkdir(parents=True)

    _ = (public / "hero.jpg").write_bytes(jpeg_bytes)
    _ = (public / "images" / "cat.jpg").write_bytes(jpeg_bytes)
    _ = (public / "images" / "icons" / "logo.png").write_bytes(png_bytes)
    _ = (public / "images" / "logo.svg").write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="10" height="10"/>'
    )
    _ = (public / "robots.txt").write_text("User-agent: *\n")

    return public.resolve()
