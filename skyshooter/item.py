"""Power-up items that fall from defeated enemies."""

from __future__ import annotations

import enum

import pygame

from .settings import HEIGHT


class BulletType(enum.IntEnum):
    """Kinds of bullet a player can fire."""

    NORMAL = 0
    FIRE = 1
    FAST = 2


class Item:
    """A falling pickup that changes the collector's bullet type."""

    SIZE = (30, 30)
    FALL_SPEED = 0.5

    def __init__(
        self,
        image: pygame.Surface | None = None,
        bullet_type: BulletType = BulletType.NORMAL,
    ) -> None:
        self.rect = pygame.Rect((0, 0), self.SIZE)
        self.bullet_type = BulletType(bullet_type)
        self.active = True
        self.velocity_y = self.FALL_SPEED
        self._pos_y = 0.0
        self.image = (
            pygame.transform.scale(image, self.SIZE) if image is not None else None
        )

    def place(self, x: int, y: int) -> None:
        """Put the item at ``(x, y)``."""
        self.rect.x = x
        self._pos_y = float(y)
        self.rect.y = y

    def update(self) -> None:
        """Let the item fall; it vanishes once below the screen."""
        if not self.active:
            return
        self._pos_y += self.velocity_y
        self.rect.y = int(self._pos_y)
        if self.rect.y > HEIGHT:
            self.active = False

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the item if it is still active."""
        if self.active and self.image is not None:
            surface.blit(self.image, self.rect)

    def deactivate(self) -> None:
        """Remove the item from play."""
        self.active = False