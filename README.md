# skyshooter

A vertical scrolling arcade shooter for one or two players on the same
keyboard. Enemies fall from the top of the screen, gunships patrol sideways
and fire back, and once the score reaches 3000 a boss arrives and fires fans
of bullets. Destroy the boss to win; if any player's health drops to zero,
the round is lost.

## Installing

```
pip install .
```

This installs `pygame` as the only dependency.

## Running

```
skyshooter
```

The game loads its images, font and sounds from an asset directory. This is
the current directory by default; give another one with `--assets`:

```
skyshooter --assets path/to/assets
```

If the window, font, sounds or background cannot be set up, the command
prints the reason and exits with status 1.

The asset directory holds:

- `anh/anh.jpg`: the scrolling background
- `nhanvat/left.png`, `nhanvat/right.png`: player 1 and player 2
- `quaivat/1.png`, `quaivat/2.png`, `quaivat/boss.png`: enemies and the boss
- `dan/1.png` to `dan/4.png`: bullets
- `items/1.jpg`, `items/2.jpg`: weapon pick-ups
- `VN3D.TTF`: the font used for the menu, score and health
- `sounds/vaogame.mp3` (menu music), `sounds/ingame.mp3` (game music),
  `sounds/lose.mp3`, `sounds/win.mp3`

## Playing

Choose **1 Player** or **2 Players** in the menu with the left mouse button.
Closing the window from the menu quits the game; closing it during a round
returns to the menu.

| Action     | Player 1             | Player 2 |
|------------|----------------------|----------|
| Move       | Arrow keys           | W A S D  |
| Fire       | `1` or keypad `1`    | Space    |

- Each player starts with 5 health.
- A regular enemy is worth 100 points and an advanced enemy 200.
- An enemy shot down may drop a pick-up: a regular enemy a fire-bullet
  pick-up, an advanced enemy a fast-bullet pick-up. Fly over one to collect
  it; the new bullet type stays until you collect another.
- Normal bullets fire every 300 ms, fire bullets every 500 ms, and fast
  bullets every 200 ms at twice the speed.
- Ramming an enemy costs it 5 health and you 1.

## Using the pieces

The game logic does not need a window. `skyshooter.world.World` holds the
state of one round: pass it `pygame` events with `handle_event(event, now)`,
advance it with `step(now)` (time in milliseconds), and read the `Outcome`
it returns (`RUNNING`, `WON`, `LOST` or `QUIT`). `World.draw(surface)` draws
the items, bullets, enemies and players onto any surface. Images come from a
`skyshooter.sprite.Assets`, which loads and caches them relative to a base
directory and raises `ImageLoadError` when one cannot be loaded.

The individual actors live in `skyshooter.avatar` (`Avatar`),
`skyshooter.enemy` (`Enemy`, `AdvancedEnemy`, `Boss`), `skyshooter.item`
(`Item`, `BulletType`) and `skyshooter.projectile` (`Bullet`).
`skyshooter.app.App` wraps a `World` with the window, menu, music and the
score display.

## Running the tests

```
pip install .[test]
pytest
```