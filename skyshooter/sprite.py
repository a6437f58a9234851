"""Image loading and the basic drawable sprite."""

from __future__ import annotations

from pathlib import Path

import pygame


class ImageLoadError(Exception):
    """Raised when an image file cannot be loaded."""


class Assets:
    """Loads images relative to a base directory and caches them."""

    def __init__(self, base_dir: str | Path = ".") -> None:
        self.base_dir = Path(base_dir)
        self._cache: dict[str, pygame.Surface] = {}

    def image(self, path: str | Path) -> pygame.Surface:
        """Return the image at ``path`` (relative to the base directory)."""
        key = str(path)
        cached = self._cache.get(key)
        if cached is not None:
            return cached
        full_path = self.base_dir / path
        try:
            surface = pygame.image.load(str(full_path))
        except (pygame.error, OSError) as exc:
            raise ImageLoadError(f"Unable to load image: {full_path}: {exc}") from exc
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            surface = surface.convert_alpha()
        self._cache[key] = surface
        return surface


class Sprite:
    """A loaded image with its size, drawn at the top-left corner."""

    def __init__(self) -> None:
        self.image: pygame.Surface | None = None
        self.width = 0
        self.height = 0

    def load(self, assets: Assets, path: str | Path) -> None:
        """Load the image at ``path``; raises ImageLoadError on failure."""
        image = assets.image(path)
        self.image = image
        self.width, self.height = image.get_size()

    def render(self, surface: pygame.Surface, clip: pygame.Rect | None = None) -> None:
        """Draw the image (or the ``clip`` part of it) at (0, 0)."""
        if self.image is None:
            return
        if clip is None:
            surface.blit(self.image, (0, 0))
        else:
            surface.blit(self.image, (0, 0), pygame.Rect(clip))

    def free(self) -> None:
        """Drop the image and reset the size."""
        if self.image is not None:
            self.image = None
            self.width = 0
            self.height = 0