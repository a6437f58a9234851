"""The player-controlled ship: movement, shooting and pickups."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

import pygame

from .item import BulletType, Item
from .projectile import Bullet
from .settings import HEIGHT, WIDTH
from .sprite import Assets, ImageLoadError

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Controls:
    """Key bindings for one player."""

    left: int
    right: int
    up: int
    down: int
    fire: tuple[int, ...]


PLAYER_CONTROLS: dict[int, Controls] = {
    1: Controls(
        left=pygame.K_LEFT,
        right=pygame.K_RIGHT,
        up=pygame.K_UP,
        down=pygame.K_DOWN,
        fire=(pygame.K_1, pygame.K_KP1),
    ),
    2: Controls(
        left=pygame.K_a,
        right=pygame.K_d,
        up=pygame.K_w,
        down=pygame.K_s,
        fire=(pygame.K_SPACE,),
    ),
}


@dataclass(frozen=True)
class _Weapon:
    image: str
    delay: int
    speed: int


BULLET_SPEED = 3

_WEAPONS: dict[BulletType, _Weapon] = {
    BulletType.NORMAL: _Weapon("dan/1.png", 300, BULLET_SPEED),
    BulletType.FIRE: _Weapon("dan/2.png", 500, BULLET_SPEED),
    BulletType.FAST: _Weapon("dan/3.png", 200, BULLET_SPEED * 2),
}


class Avatar:
    """A player's ship, moved with the keyboard and firing upwards."""

    SIZE = (150, 150)
    HEALTH = 5
    MOVE_SPEED = 2
    BULLET_SIZE = (50, 50)
    BULLET_DAMAGE = 3

    def __init__(self, player_id: int = 1, image: pygame.Surface | None = None) -> None:
        self.player_id = player_id
        self.controls = PLAYER_CONTROLS.get(player_id)
        self.rect = pygame.Rect((0, 0), self.SIZE)
        self.velocity_x = 0.0
        self.velocity_y = 0.0
        self.bullet_type = BulletType.NORMAL
        self.last_shot_time = 0
        self.health = self.HEALTH
        self.bullets: list[Bullet] = []
        self.image = (
            pygame.transform.scale(image, self.SIZE) if image is not None else None
        )

    @property
    def alive(self) -> bool:
        """True while the player has health left."""
        return self.health > 0

    def place(self, x: int, y: int) -> None:
        """Put the ship at ``(x, y)``."""
        self.rect.x = x
        self.rect.y = y

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the ship's image stretched to its rectangle."""
        if self.image is not None:
            surface.blit(self.image, self.rect)

    def handle_event(
        self, event: pygame.event.Event, now: int, assets: Assets
    ) -> Bullet | None:
        """React to a key press or release; return a bullet if one was fired."""
        controls = self.controls
        if controls is None or event.type not in (pygame.KEYDOWN, pygame.KEYUP):
            return None
        key = event.key
        if event.type == pygame.KEYDOWN:
            if key == controls.left:
                self.velocity_x = -self.MOVE_SPEED
            elif key == controls.right:
                self.velocity_x = self.MOVE_SPEED
            elif key == controls.up:
                self.velocity_y = -self.MOVE_SPEED
            elif key == controls.down:
                self.velocity_y = self.MOVE_SPEED
            elif key in controls.fire:
                return self.fire(now, assets)
        else:
            if key in (controls.left, controls.right):
                self.velocity_x = 0.0
            elif key in (controls.up, controls.down):
                self.velocity_y = 0.0
        return None

    def fire(self, now: int, assets: Assets) -> Bullet | None:
        """Fire a bullet upwards if the weapon's cooldown has passed."""
        weapon = _WEAPONS[self.bullet_type]
        if now - self.last_shot_time < weapon.delay:
            return None
        try:
            image = assets.image(weapon.image)
        except ImageLoadError as exc:
            log.warning("Failed to load bullet image: %s", exc)
            return None
        width, height = self.BULLET_SIZE
        bullet = Bullet(image, self.BULLET_SIZE, self.BULLET_DAMAGE, (0.0, -weapon.speed))
        bullet.place(self.rect.x + self.rect.w // 2 - width // 2, self.rect.y - height)
        self.bullets.append(bullet)
        self.last_shot_time = now
        log.debug("Player %d bullet fired, type %s", self.player_id, self.bullet_type.name)
        return bullet

    def update_position(self) -> None:
        """Move by the current velocity, staying inside the screen."""
        self.rect.x = int(self.rect.x + self.velocity_x)
        self.rect.y = int(self.rect.y + self.velocity_y)
        self.rect.x = max(0, min(self.rect.x, WIDTH - self.rect.w))
        self.rect.y = max(0, min(self.rect.y, HEIGHT - self.rect.h))

    def update_bullets(self) -> None:
        """Move bullets and drop those that have left the top of the screen."""
        for bullet in self.bullets:
            bullet.update()
        self.bullets = [b for b in self.bullets if b.rect.y + b.rect.h >= 0]

    def collect_items(self, items: Iterable[Item]) -> None:
        """Pick up every active item the ship touches."""
        for item in items:
            if item.active and self.rect.colliderect(item.rect):
                self.bullet_type = item.bullet_type
                item.deactivate()

    def take_damage(self, damage: int) -> None:
        """Lose ``damage`` health, never dropping below zero."""
        self.health = max(self.health - damage, 0)
        log.info("Player %d health: %d", self.player_id, self.health)