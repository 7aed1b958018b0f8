"""Copy rules that pre-resize public images into the optimized tree."""

from collections.abc import Iterable
from functools import partial
from pathlib import Path

from ..common.schemas import CopyRule
from .algo.image_resize import resize_to_jpeg

DEFAULT_PUBLIC_FOLDER = Path("public")
OPTIMIZED_DIR = "optimized"
SOURCE_EXTENSIONS = ("jpg", "png")
IGNORE_GLOB = f"**/{OPTIMIZED_DIR}/**"


def generate_patterns(
    widths: Iterable[int],
    public_folder: str | Path = DEFAULT_PUBLIC_FOLDER,
) -> list[CopyRule]:
    """
    Build one copy rule per width.

    Every rule picks up the .jpg and .png files under ``public_folder``,
    resizes them to its width and writes them to
    ``<public_folder>/optimized/[path][name]_w<width>[ext]``. Files already
    under ``optimized/`` are ignored so repeated builds do not feed on their
    own output.

    Order follows ``widths``; duplicates yield duplicate rules.
    """
    public_folder = Path(public_folder).resolve()
    from_glob = f"{public_folder}/**/*.{{{','.join(SOURCE_EXTENSIONS)}}}".replace("\\", "/")

    return [
        CopyRule(
            context=public_folder,
            from_glob=from_glob,
            to=str(public_folder / OPTIMIZED_DIR / f"[path][name]_w{width}[ext]"),
            ignore=[IGNORE_GLOB],
            width=width,
            transform=partial(resize_to_jpeg, width=width),
        )
        for width in widths
    ]
