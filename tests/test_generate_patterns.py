"""Unit tests for copy-rule generation."""

from io import BytesIO
from pathlib import Path

from PIL import Image

from cl_image_optimizer.common.schemas import CopyRule
from cl_image_optimizer.patterns.generate_patterns import (
    IGNORE_GLOB,
    generate_patterns,
)


def test_generate_patterns_two_widths(tmp_path: Path):
    rules = generate_patterns([16, 32], tmp_path)

    assert len(rules) == 2
    assert "_w16" in rules[0].to
    assert "_w32" in rules[1].to
    assert all(rule.ignore == ["**/optimized/**"] for rule in rules)


def test_generate_patterns_keeps_order_and_duplicates(tmp_path: Path):
    widths = [640, 16, 3840, 16]

    rules = generate_patterns(widths, tmp_path)

    assert [rule.width for rule in rules] == widths
    for rule, width in zip(rules, widths):
        assert f"_w{width}[ext]" in rule.to


def test_generate_patterns_empty():
    assert generate_patterns([]) == []


def test_generate_patterns_rule_layout(tmp_path: Path):
    public = tmp_path / "public"

    (rule,) = generate_patterns([640], public)

    assert isinstance(rule, CopyRule)
    assert rule.context == public.resolve()
    assert rule.from_glob == f"{public.resolve().as_posix()}/**/*.{{jpg,png}}"
    assert rule.to == str(public.resolve() / "optimized" / "[path][name]_w640[ext]")
    assert rule.ignore == [IGNORE_GLOB]


def test_generate_patterns_default_public_folder():
    (rule,) = generate_patterns([16])

    assert rule.context == Path("public").resolve()


def test_generate_patterns_transform_bound_to_width(tmp_path: Path, jpeg_bytes: bytes):
    small, large = generate_patterns([16, 400], tmp_path)

    with Image.open(BytesIO(small.transform(jpeg_bytes))) as img:
        assert img.width == 16
    with Image.open(BytesIO(large.transform(jpeg_bytes))) as img:
        assert img.width == 400
        assert img.format == "JPEG"
