import random

import pygame
import pytest

from skyshooter.avatar import Avatar
from skyshooter.enemy import AdvancedEnemy, Boss, Enemy
from skyshooter.item import BulletType, Item
from skyshooter.projectile import Bullet
from skyshooter.sprite import Assets, ImageLoadError
from skyshooter.world import Outcome, World

IMAGE_PATHS = [
    "nhanvat/left.png",
    "nhanvat/right.png",
    "quaivat/1.png",
    "quaivat/2.png",
    "quaivat/boss.png",
    "items/1.jpg",
    "items/2.jpg",
    "dan/1.png",
    "dan/2.png",
    "dan/3.png",
    "dan/4.png",
]


class ScriptedRng:
    """Returns preset values from randrange, in order."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        return self.values.pop(0) % n


@pytest.fixture
def assets(tmp_path):
    surface = pygame.Surface((8, 8))
    surface.fill((10, 20, 30))
    for rel in IMAGE_PATHS:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        pygame.image.save(surface, str(path))
    return Assets(tmp_path)


def make_world(assets, values=(), players=1):
    return World(players, assets, ScriptedRng(values))


def test_players_start_positions(assets):
    world = make_world(assets, players=2)
    assert [p.rect.topleft for p in world.players] == [(500, 500), (700, 500)]
    assert [p.player_id for p in world.players] == [1, 2]


def test_missing_player_image_raises(tmp_path):
    with pytest.raises(ImageLoadError):
        World(1, Assets(tmp_path), random.Random(0))


def test_invalid_player_count(assets):
    with pytest.raises(ValueError):
        World(3, assets, random.Random(0))


def test_early_spawn_only_basic_enemies(assets):
    world = make_world(assets, [2, 10, 20, 30])
    spawned = world.spawn_enemies(0)
    assert all(type(e) is Enemy for e in spawned)
    assert [e.rect.x for e in spawned] == [10, 20, 30]
    assert all(e.rect.y == World.BASIC_SPAWN_Y for e in spawned)
    assert world.last_spawn_time == 0


def test_late_spawn_can_give_advanced_enemy(assets):
    world = make_world(assets, [0, 1, 40])
    world.start_time = 0
    spawned = world.spawn_enemies(20000)
    assert len(spawned) == 1
    assert isinstance(spawned[0], AdvancedEnemy)
    assert spawned[0].rect.topleft == (40, World.ADVANCED_SPAWN_Y)


def test_basic_enemy_cap(assets):
    world = World(1, assets, random.Random(1))
    for now in range(5):
        world.spawn_enemies(now)
    assert len(world.enemies) == World.MAX_MOVING_ENEMIES


def test_boss_spawns_at_score(assets):
    world = make_world(assets)
    world.score = World.BOSS_SCORE
    world.step(1000)
    bosses = [e for e in world.enemies if isinstance(e, Boss)]
    assert len(bosses) == 1
    assert bosses[0].rect.y == 50
    assert world.boss_spawned
    assert world.boss_warning_start == 1000


def _shoot_at(world, enemy, damage):
    enemy.place(100, 100)
    world.enemies.append(enemy)
    bullet = Bullet(None, (60, 60), damage, (0.0, 0.0))
    bullet.place(100, 100)
    world.players[0].bullets.append(bullet)


def test_bullet_kills_basic_enemy(assets):
    world = make_world(assets, [99])
    _shoot_at(world, Enemy(), Enemy.HEALTH)
    assert world.step(1000) is Outcome.RUNNING
    assert world.score == World.BASIC_REWARD
    assert world.enemies == []
    assert world.players[0].bullets == []
    assert world.items == []


def test_basic_kill_can_drop_fire_item(assets):
    world = make_world(assets, [0])
    _shoot_at(world, Enemy(), Enemy.HEALTH)
    world.step(1000)
    assert len(world.items) == 1
    assert world.items[0].bullet_type is BulletType.FIRE


def test_advanced_kill_scores_and_drops_fast_item(assets):
    world = make_world(assets, [0])
    _shoot_at(world, AdvancedEnemy(), AdvancedEnemy.HEALTH)
    world.step(1000)
    assert world.score == World.ADVANCED_REWARD
    assert [i.bullet_type for i in world.items] == [BulletType.FAST]


def test_wounding_keeps_enemy(assets):
    world = make_world(assets)
    _shoot_at(world, AdvancedEnemy(), 1)
    world.step(1000)
    assert len(world.enemies) == 1
    assert world.enemies[0].health == AdvancedEnemy.HEALTH - 1
    assert world.players[0].bullets == []


def test_boss_kill_wins(assets):
    world = make_world(assets, [99])
    _shoot_at(world, Boss(), Boss.HEALTH)
    assert world.step(1000) is Outcome.WON
    assert world.enemies == []


def test_dead_player_loses(assets):
    world = make_world(assets)
    world.players[0].health = 0
    assert world.step(1000) is Outcome.LOST


def test_quit_event(assets):
    world = make_world(assets)
    world.handle_event(pygame.event.Event(pygame.QUIT), 0)
    assert world.outcome is Outcome.QUIT


def test_fire_key_adds_bullet(assets):
    world = make_world(assets)
    world.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_1), 1000)
    assert len(world.players[0].bullets) == 1


def test_contact_damages_both(assets):
    world = make_world(assets)
    enemy = Enemy()
    enemy.place(500, 500)
    world.enemies.append(enemy)
    world.step(1000)
    assert world.players[0].health == Avatar.HEALTH - World.CONTACT_DAMAGE_TO_PLAYER
    assert world.enemies == []
    assert world.score == World.BASIC_REWARD


def test_enemy_bullet_hits_player(assets):
    world = make_world(assets)
    enemy = AdvancedEnemy()
    enemy.place(0, 0)
    bullet = Bullet(None, (20, 20), 1, (0.0, 0.0))
    bullet.place(520, 520)
    enemy.bullets.append(bullet)
    world.enemies.append(enemy)
    world.step(1000)
    assert world.players[0].health == Avatar.HEALTH - 1
    assert enemy.bullets == []


def test_boss_bullet_off_screen_removed(assets):
    world = make_world(assets)
    boss = Boss()
    boss.place(100, 100)
    bullet = Bullet(None, (20, 20), 2, (0.0, 0.0))
    bullet.place(-50, 300)
    boss.bullets.append(bullet)
    world.enemies.append(boss)
    world.step(1000)
    assert boss.bullets == []


def test_inactive_items_removed(assets):
    world = make_world(assets)
    item = Item()
    item.deactivate()
    world.items.append(item)
    world.step(1000)
    assert world.items == []


def test_draw_outlines_enemy(assets):
    world = make_world(assets)
    enemy = Enemy()
    enemy.place(20, 20)
    world.enemies.append(enemy)
    surface = pygame.Surface((900, 900))
    world.draw(surface)
    assert tuple(surface.get_at((20, 20))) == World.ENEMY_OUTLINE