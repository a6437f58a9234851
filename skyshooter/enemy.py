"""Enemies: falling grunts, shooting drones and the boss."""

from __future__ import annotations

import logging
import math

import pygame

from .projectile import Bullet
from .settings import HEIGHT, WIDTH
from .sprite import Assets, ImageLoadError

log = logging.getLogger(__name__)


class Enemy:
    """A basic enemy that falls straight down the screen."""

    SIZE = (50, 50)
    HEALTH = 3
    FALL_SPEED = 3.0

    def __init__(self, image: pygame.Surface | None = None) -> None:
        self.rect = pygame.Rect((0, 0), self.SIZE)
        self.health = self.HEALTH
        self.velocity_y = self.FALL_SPEED
        self._pos_y = 0.0
        self.image = (
            pygame.transform.scale(image, self.SIZE) if image is not None else None
        )

    @property
    def alive(self) -> bool:
        """True while the enemy has health left."""
        return self.health > 0

    def place(self, x: int, y: int) -> None:
        """Put the enemy at ``(x, y)``."""
        self.rect.x = x
        self._pos_y = float(y)
        self.rect.y = y

    def update(self) -> bool:
        """Move one frame; return False once the enemy has left the screen."""
        self._pos_y += self.velocity_y
        self.rect.y = int(self._pos_y)
        return self.rect.y <= HEIGHT

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the enemy's image stretched to its rectangle."""
        if self.image is not None:
            surface.blit(self.image, self.rect)

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` health, never dropping below zero."""
        self.health = max(self.health - damage, 0)
        log.debug("Enemy health: %d", self.health)


class _ShootingEnemy(Enemy):
    """Shared state and behaviour of enemies that patrol sideways and shoot."""

    HORIZONTAL_SPEED = 0.5
    SHOT_DELAY = 0
    OUTLINE_COLOR = (255, 255, 255, 128)

    def _init_shooter(self) -> None:
        self.velocity_y = 0.0
        self.velocity_x = self.HORIZONTAL_SPEED
        self._pos_x = 0.0
        self.last_shot_time = 0
        self.bullets: list[Bullet] = []

    def _place_at(self, x: int, y: int) -> None:
        self._pos_x = float(x)
        self.rect.x = x
        self._pos_y = float(y)
        self.rect.y = y

    def _patrol(self) -> bool:
        self._pos_x += self.velocity_x
        self.rect.x = int(self._pos_x)
        if self.rect.x <= 0 or self.rect.x >= WIDTH - self.rect.w:
            self.velocity_x = -self.velocity_x
        for bullet in self.bullets:
            bullet.update()
        return True

    def _draw_with_bullets(self, surface: pygame.Surface) -> None:
        Enemy.draw(self, surface)
        for bullet in self.bullets:
            pygame.draw.rect(surface, self.OUTLINE_COLOR, bullet.rect, 1)
            bullet.draw(surface)

    def _ready(self, now: int) -> bool:
        return now - self.last_shot_time >= self.SHOT_DELAY


class AdvancedEnemy(_ShootingEnemy):
    """An enemy that patrols sideways and fires single shots downwards."""

    HEALTH = 5
    SHOT_DELAY = 3500
    OUTLINE_COLOR = (255, 0, 255, 128)
    BULLET_IMAGE = "dan/4.png"
    BULLET_SIZE = (30, 30)
    BULLET_DAMAGE = 1
    BULLET_VELOCITY = (0.0, 0.5)

    def __init__(self, image: pygame.Surface | None = None) -> None:
        super().__init__(image)
        self._init_shooter()

    def place(self, x: int, y: int) -> None:
        """Put the enemy at ``(x, y)``."""
        self._place_at(x, y)

    def update(self) -> bool:
        """Patrol sideways, bouncing off the screen edges, and move bullets."""
        return self._patrol()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the enemy and its bullets, each bullet with a purple outline."""
        self._draw_with_bullets(surface)

    def shoot(self, now: int, assets: Assets) -> list[Bullet]:
        """Fire a bullet downwards if the cooldown has passed; return new bullets."""
        if not self._ready(now):
            return []
        try:
            image = assets.image(self.BULLET_IMAGE)
        except ImageLoadError as exc:
            log.warning("Failed to load enemy bullet image: %s", exc)
            return []
        width, _ = self.BULLET_SIZE
        bullet = Bullet(image, self.BULLET_SIZE, self.BULLET_DAMAGE, self.BULLET_VELOCITY)
        bullet.place(self.rect.x + self.rect.w // 2 - width // 2, self.rect.y + self.rect.h)
        self.bullets.append(bullet)
        self.last_shot_time = now
        log.debug("AdvancedEnemy fired a bullet")
        return [bullet]


class Boss(_ShootingEnemy):
    """A large enemy that fires a fan of bullets in five directions."""

    SIZE = (100, 100)
    HEALTH = 40
    SHOT_DELAY = 3000
    OUTLINE_COLOR = (255, 0, 0, 128)
    BULLET_IMAGE = "dan/1.png"
    BULLET_SIZE = (20, 20)
    BULLET_DAMAGE = 2
    BULLET_SPEED = 0.5
    ANGLES = (0.0, math.pi / 4, math.pi / 2, 3 * math.pi / 4, math.pi)

    def __init__(self, image: pygame.Surface | None = None) -> None:
        super().__init__(image)
        self._init_shooter()

    def place(self, x: int, y: int) -> None:
        """Put the boss at ``(x, y)``."""
        self._place_at(x, y)

    def update(self) -> bool:
        """Patrol sideways, bouncing off the screen edges, and move bullets."""
        return self._patrol()

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the boss and its bullets, each bullet with a red outline."""
        self._draw_with_bullets(surface)

    def shoot(self, now: int, assets: Assets) -> list[Bullet]:
        """Fire a fan of bullets if the cooldown has passed; return new bullets."""
        if not self._ready(now):
            return []
        fired: list[Bullet] = []
        width, _ = self.BULLET_SIZE
        origin = (self.rect.x + self.rect.w // 2 - width // 2, self.rect.y + self.rect.h // 2)
        for angle in self.ANGLES:
            try:
                image = assets.image(self.BULLET_IMAGE)
            except ImageLoadError:
                continue
            velocity = (self.BULLET_SPEED * math.cos(angle), self.BULLET_SPEED * math.sin(angle))
            bullet = Bullet(image, self.BULLET_SIZE, self.BULLET_DAMAGE, velocity)
            bullet.place(*origin)
            fired.append(bullet)
        self.bullets.extend(fired)
        self.last_shot_time = now
        log.debug("Boss fired bullets in multiple directions")
        return fired