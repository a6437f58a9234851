"""Bullets fired by players and enemies."""

from __future__ import annotations

import pygame


class Bullet:
    """A moving projectile with a sub-pixel position and a damage value."""

    def __init__(
        self,
        image: pygame.Surface | None = None,
        size: tuple[int, int] = (10, 10),
        damage: int = 1,
        velocity: tuple[float, float] = (0.0, 0.0),
    ) -> None:
        width, height = size
        self.rect = pygame.Rect(0, 0, width, height)
        self.damage = damage
        self.velocity = (float(velocity[0]), float(velocity[1]))
        self._pos_x = 0.0
        self._pos_y = 0.0
        self.image = (
            pygame.transform.scale(image, (width, height)) if image is not None else None
        )

    def place(self, x: int, y: int) -> None:
        """Put the bullet at ``(x, y)``."""
        self._pos_x = float(x)
        self._pos_y = float(y)
        self.rect.x = x
        self.rect.y = y

    def update(self) -> None:
        """Advance the bullet by one frame of its velocity."""
        vx, vy = self.velocity
        self._pos_x += vx
        self._pos_y += vy
        # Truncate toward zero, as pixel coordinates are taken from the real position.
        self.rect.x = int(self._pos_x)
        self.rect.y = int(self._pos_y)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the bullet's image stretched to its rectangle."""
        if self.image is not None:
            surface.blit(self.image, self.rect)