"""Image resize algorithms."""

from .image_resize import resize_to_jpeg, scaled_size

__all__ = ["resize_to_jpeg", "scaled_size"]
