"""The game world: players, enemies, items, collisions and scoring."""

from __future__ import annotations

import enum
import logging
import random
from typing import Iterable

import pygame

from .avatar import Avatar
from .enemy import AdvancedEnemy, Boss, Enemy
from .item import BulletType, Item
from .projectile import Bullet
from .settings import HEIGHT, WIDTH
from .sprite import Assets, ImageLoadError

log = logging.getLogger(__name__)


class Outcome(enum.Enum):
    """State of a round of play."""

    RUNNING = "running"
    WON = "won"
    LOST = "lost"
    QUIT = "quit"


class World:
    """Everything that lives in one round of the game, advanced frame by frame."""

    MAX_SHOOTING_ENEMIES = 5
    MAX_MOVING_ENEMIES = 5
    SPAWN_DELAY = 2000
    ONLY_BASIC_PERIOD = 10000
    BOSS_SCORE = 3000
    BOSS_WARNING_DURATION = 3000
    DROP_CHANCE = 30
    SPAWN_MARGIN = 150
    BASIC_SPAWN_Y = -150
    ADVANCED_SPAWN_Y = 0
    CONTACT_DAMAGE_TO_ENEMY = 5
    CONTACT_DAMAGE_TO_PLAYER = 1
    BASIC_REWARD = 100
    ADVANCED_REWARD = 200

    PLAYER_IMAGES = {1: "nhanvat/left.png", 2: "nhanvat/right.png"}
    PLAYER_STARTS = {1: (500, 500), 2: (700, 500)}
    BASIC_IMAGE = "quaivat/1.png"
    ADVANCED_IMAGE = "quaivat/2.png"
    BOSS_IMAGE = "quaivat/boss.png"
    FIRE_ITEM_IMAGE = "items/1.jpg"
    FAST_ITEM_IMAGE = "items/2.jpg"

    PLAYER_BULLET_OUTLINES = {1: (255, 165, 0, 255), 2: (0, 255, 0, 255)}
    ENEMY_OUTLINE = (255, 0, 0, 255)

    def __init__(
        self,
        num_players: int = 1,
        assets: Assets | None = None,
        rng: random.Random | None = None,
    ) -> None:
        if num_players not in (1, 2):
            raise ValueError(f"num_players must be 1 or 2, not {num_players}")
        self.num_players = num_players
        self.assets = assets if assets is not None else Assets()
        self.rng = rng if rng is not None else random.Random()
        self.players: list[Avatar] = []
        for player_id in range(1, num_players + 1):
            image = self.assets.image(self.PLAYER_IMAGES[player_id])
            avatar = Avatar(player_id, image)
            avatar.place(*self.PLAYER_STARTS[player_id])
            self.players.append(avatar)
        self.items: list[Item] = []
        self.enemies: list[Enemy] = []
        self.score = 0
        self.boss_spawned = False
        self.boss_warning_start: int | None = None
        self.start_time: int | None = None
        self.last_spawn_time = 0
        self.outcome = Outcome.RUNNING

    # -- input -----------------------------------------------------------

    def handle_event(self, event: pygame.event.Event, now: int) -> None:
        """Pass an input event to the players; a quit event ends the round."""
        if event.type == pygame.QUIT:
            self.outcome = Outcome.QUIT
        for player in self.players:
            player.handle_event(event, now, self.assets)

    # -- simulation ------------------------------------------------------

    def step(self, now: int) -> Outcome:
        """Advance the world by one frame at time ``now`` (ms); return the outcome."""
        if any(not player.alive for player in self.players):
            log.info("Game over: a player died")
            self.outcome = Outcome.LOST
            return self.outcome

        self._begin(now)
        shooting, moving = self._count_enemies()

        if (
            not self.boss_spawned
            and self.score >= self.BOSS_SCORE
            and shooting < self.MAX_SHOOTING_ENEMIES
        ):
            self.spawn_boss(now)

        if now - self.last_spawn_time >= self.SPAWN_DELAY:
            self._spawn_enemies(now, shooting, moving)

        for player in self.players:
            player.update_position()
            player.update_bullets()
            player.collect_items(self.items)

        for item in self.items:
            item.update()
        self.items = [item for item in self.items if item.active]

        self._update_enemies(now)
        for player in self.players:
            self._resolve_player_bullets(player)
        self._resolve_contacts()
        self._resolve_enemy_bullets()
        return self.outcome

    def spawn_enemies(self, now: int) -> list[Enemy]:
        """Spawn one to three enemies within the enemy caps; return those spawned."""
        self._begin(now)
        shooting, moving = self._count_enemies()
        return self._spawn_enemies(now, shooting, moving)

    def spawn_boss(self, now: int) -> Boss | None:
        """Bring the boss in at the top centre and start the warning."""
        image = self._load(self.BOSS_IMAGE)
        if image is None:
            return None
        boss = Boss(image)
        boss.place(WIDTH // 2 - 50, 50)
        self.enemies.append(boss)
        self.boss_spawned = True
        self.boss_warning_start = now
        log.info("Boss spawned")
        return boss

    # -- drawing ---------------------------------------------------------

    def draw(self, surface: pygame.Surface) -> None:
        """Draw items, bullets, enemies and players onto ``surface``."""
        for item in self.items:
            item.draw(surface)
        for player in self.players:
            color = self.PLAYER_BULLET_OUTLINES[player.player_id]
            for bullet in player.bullets:
                pygame.draw.rect(surface, color, bullet.rect, 1)
                bullet.draw(surface)
        for enemy in self.enemies:
            pygame.draw.rect(surface, self.ENEMY_OUTLINE, enemy.rect, 1)
            enemy.draw(surface)
        for player in self.players:
            player.draw(surface)

    # -- internals -------------------------------------------------------

    def _begin(self, now: int) -> None:
        if self.start_time is None:
            self.start_time = now

    def _count_enemies(self) -> tuple[int, int]:
        shooting = sum(isinstance(e, (AdvancedEnemy, Boss)) for e in self.enemies)
        return shooting, len(self.enemies) - shooting

    def _load(self, path: str) -> pygame.Surface | None:
        try:
            return self.assets.image(path)
        except ImageLoadError as exc:
            log.warning("Failed to load image: %s", exc)
            return None

    def _spawn_enemies(self, now: int, shooting: int, moving: int) -> list[Enemy]:
        assert self.start_time is not None
        only_basic = now - self.start_time < self.ONLY_BASIC_PERIOD
        spawned: list[Enemy] = []
        for _ in range(self.rng.randrange(3) + 1):
            if only_basic or self.rng.randrange(2) == 0:
                if moving < self.MAX_MOVING_ENEMIES:
                    enemy = self._make_enemy(Enemy, self.BASIC_IMAGE, self.BASIC_SPAWN_Y)
                    if enemy is not None:
                        spawned.append(enemy)
                        moving += 1
            elif shooting < self.MAX_SHOOTING_ENEMIES:
                enemy = self._make_enemy(
                    AdvancedEnemy, self.ADVANCED_IMAGE, self.ADVANCED_SPAWN_Y
                )
                if enemy is not None:
                    spawned.append(enemy)
                    shooting += 1
        self.last_spawn_time = now
        return spawned

    def _make_enemy(self, cls: type[Enemy], path: str, y: int) -> Enemy | None:
        image = self._load(path)
        if image is None:
            return None
        x = self.rng.randrange(WIDTH - self.SPAWN_MARGIN)
        enemy = cls(image)
        enemy.place(x, y)
        self.enemies.append(enemy)
        log.debug("Spawned %s", cls.__name__)
        return enemy

    def _update_enemies(self, now: int) -> None:
        for enemy in list(self.enemies):
            if not enemy.update():
                self.enemies.remove(enemy)
                continue
            if isinstance(enemy, (AdvancedEnemy, Boss)):
                enemy.shoot(now, self.assets)
            for other in self.enemies:
                if other is enemy or not enemy.rect.colliderect(other.rect):
                    continue
                if isinstance(enemy, AdvancedEnemy) and isinstance(other, AdvancedEnemy):
                    enemy.velocity_x = -enemy.velocity_x
                    other.velocity_x = -other.velocity_x

    def _reward(self, enemy: Enemy) -> None:
        if isinstance(enemy, Boss):
            log.info("Boss defeated")
            self.outcome = Outcome.WON
        elif isinstance(enemy, AdvancedEnemy):
            self.score += self.ADVANCED_REWARD
        else:
            self.score += self.BASIC_REWARD

    def _drop_item(self, enemy: Enemy, rect: pygame.Rect) -> None:
        if not isinstance(enemy, AdvancedEnemy):
            if self.rng.randrange(100) >= self.DROP_CHANCE:
                return
            path, bullet_type = self.FIRE_ITEM_IMAGE, BulletType.FIRE
        else:
            if self.rng.randrange(100) >= self.DROP_CHANCE:
                return
            path, bullet_type = self.FAST_ITEM_IMAGE, BulletType.FAST
        image = self._load(path)
        if image is None:
            return
        item = Item(image, bullet_type)
        item.place(rect.x, rect.y)
        self.items.append(item)

    def _resolve_player_bullets(self, player: Avatar) -> None:
        remaining: list[Bullet] = []
        for bullet in player.bullets:
            target = next(
                (e for e in self.enemies if e.alive and bullet.rect.colliderect(e.rect)),
                None,
            )
            if target is None:
                remaining.append(bullet)
                continue
            log.debug("Player %d bullet hit enemy, damage %d", player.player_id, bullet.damage)
            rect = target.rect.copy()
            target.take_damage(bullet.damage)
            if not target.alive:
                self._reward(target)
                self._drop_item(target, rect)
                self.enemies.remove(target)
        player.bullets = remaining

    def _resolve_contacts(self) -> None:
        for enemy in list(self.enemies):
            if not enemy.alive:
                continue
            for player in self.players:
                if player.rect.colliderect(enemy.rect):
                    enemy.take_damage(self.CONTACT_DAMAGE_TO_ENEMY)
                    player.take_damage(self.CONTACT_DAMAGE_TO_PLAYER)
            if not enemy.alive:
                self._reward(enemy)
                self.enemies.remove(enemy)

    def _resolve_enemy_bullets(self) -> None:
        for enemy in self.enemies:
            if isinstance(enemy, AdvancedEnemy):
                enemy.bullets = list(self._surviving_bullets(enemy.bullets, boss=False))
            elif isinstance(enemy, Boss):
                enemy.bullets = list(self._surviving_bullets(enemy.bullets, boss=True))

    def _surviving_bullets(self, bullets: Iterable[Bullet], boss: bool) -> Iterable[Bullet]:
        for bullet in bullets:
            rect = bullet.rect
            victim = next((p for p in self.players if rect.colliderect(p.rect)), None)
            if victim is not None:
                victim.take_damage(bullet.damage)
                continue
            if rect.y > HEIGHT:
                continue
            if boss and (rect.y < 0 or rect.x < 0 or rect.x > WIDTH):
                continue
            yield bullet