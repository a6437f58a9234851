"""Game window, main menu and the frame loop that drives a round."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

import pygame

from .settings import HEIGHT, SCREEN_SIZE, WIDTH
from .sprite import Assets, ImageLoadError, Sprite
from .world import Outcome, World

log = logging.getLogger(__name__)

WINDOW_TITLE = "GAME"
FONT_FILE = "VN3D.TTF"
FONT_SIZE = 24
BACKGROUND_IMAGE = "anh/anh.jpg"
MENU_MUSIC = "sounds/vaogame.mp3"
GAME_MUSIC = "sounds/ingame.mp3"
LOSE_SOUND = "sounds/lose.mp3"
WIN_SOUND = "sounds/win.mp3"

FPS = 60
BACKGROUND_SPEED = 2
END_SCREEN_DELAY = 2000

WHITE = (255, 255, 255, 255)
BLACK = (0, 0, 0, 255)
YELLOW = (255, 255, 0, 255)
RED = (255, 0, 0, 255)


class ScrollingBackground:
    """A background image that scrolls downwards and wraps around."""

    def __init__(self, image: pygame.Surface, speed: int = BACKGROUND_SPEED) -> None:
        self.height = image.get_height()
        self.image = pygame.transform.scale(image, (WIDTH, self.height))
        self.speed = speed
        self.offset = 0

    def update(self) -> None:
        """Scroll one frame, starting over once a full image height has passed."""
        self.offset += self.speed
        if self.offset >= self.height:
            self.offset = 0

    def draw(self, surface: pygame.Surface) -> None:
        """Draw two stacked copies so the scroll looks seamless."""
        surface.blit(self.image, (0, self.offset - self.height))
        surface.blit(self.image, (0, self.offset))


@dataclass(frozen=True)
class MenuButton:
    """A clickable menu entry that selects a number of players."""

    label: str
    rect: pygame.Rect
    choice: int

    def contains(self, pos: tuple[int, int]) -> bool:
        """True if ``pos`` lies inside the button, edges included."""
        x, y = pos
        r = self.rect
        return r.x <= x <= r.x + r.w and r.y <= y <= r.y + r.h


MENU_BUTTONS: tuple[MenuButton, ...] = (
    MenuButton("1 Player", pygame.Rect(WIDTH // 2 - 100, HEIGHT // 2 - 75, 200, 50), 1),
    MenuButton("2 Players", pygame.Rect(WIDTH // 2 - 100, HEIGHT // 2 + 25, 200, 50), 2),
)


class App:
    """Owns the window, font and sounds, and runs the menu and rounds of play."""

    def __init__(self, asset_dir: str | Path = ".") -> None:
        self.base_dir = Path(asset_dir)
        self.assets = Assets(self.base_dir)
        self.screen: pygame.Surface | None = None
        self.font: pygame.font.Font | None = None
        self.lose_sound: pygame.mixer.Sound | None = None
        self.win_sound: pygame.mixer.Sound | None = None
        self.clock = pygame.time.Clock()
        try:
            self._start()
        except (pygame.error, OSError, ImageLoadError) as exc:
            self.close()
            raise RuntimeError(f"Failed to initialize: {exc}") from exc

    def _start(self) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode(SCREEN_SIZE)
        pygame.display.set_caption(WINDOW_TITLE)
        self.screen.fill(WHITE)
        self.font = pygame.font.Font(str(self.base_dir / FONT_FILE), FONT_SIZE)
        pygame.mixer.init(44100, -16, 2, 2048)
        for path in (MENU_MUSIC, GAME_MUSIC):
            full_path = self.base_dir / path
            if not full_path.is_file():
                raise FileNotFoundError(f"Failed to load sound file: {full_path}")
        self.lose_sound = pygame.mixer.Sound(str(self.base_dir / LOSE_SOUND))
        self.win_sound = pygame.mixer.Sound(str(self.base_dir / WIN_SOUND))
        background = Sprite()
        try:
            background.load(self.assets, BACKGROUND_IMAGE)
        except ImageLoadError as exc:
            raise ImageLoadError(f"Failed to load background: {exc}") from exc
        self._background_image = background.image

    # -- helpers ---------------------------------------------------------

    def _text(self, text: str, color: tuple[int, int, int, int]) -> pygame.Surface:
        assert self.font is not None
        return self.font.render(text, False, color)

    def _play_music(self, path: str) -> None:
        if not pygame.mixer.music.get_busy():
            pygame.mixer.music.load(str(self.base_dir / path))
            pygame.mixer.music.play(-1)

    # -- menu ------------------------------------------------------------

    def menu(self) -> int:
        """Show the main menu; return 1 or 2 players, or 0 to quit."""
        assert self.screen is not None
        self._play_music(MENU_MUSIC)
        hovered: set[int] = set()
        choice: int | None = None
        while choice is None:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    choice = 0
                elif event.type == pygame.MOUSEMOTION:
                    hovered = {b.choice for b in MENU_BUTTONS if b.contains(event.pos)}
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    clicked = next(
                        (b.choice for b in MENU_BUTTONS if b.contains(event.pos)), None
                    )
                    if clicked is not None:
                        choice = clicked
            self.screen.fill(BLACK)
            for button in MENU_BUTTONS:
                color = YELLOW if button.choice in hovered else WHITE
                label = pygame.transform.scale(
                    self._text(button.label, color), button.rect.size
                )
                self.screen.blit(label, button.rect)
            pygame.display.flip()
            self.clock.tick(FPS)
        pygame.mixer.music.stop()
        return choice

    # -- play ------------------------------------------------------------

    def play(self, num_players: int) -> Outcome:
        """Run one round with ``num_players`` players until it ends."""
        try:
            world = World(num_players, self.assets, random.Random())
        except ImageLoadError as exc:
            log.error("Failed to load player image: %s", exc)
            return Outcome.QUIT
        background = ScrollingBackground(self._background_image, BACKGROUND_SPEED)
        self._play_music(GAME_MUSIC)

        outcome = Outcome.RUNNING
        while outcome is Outcome.RUNNING:
            now = pygame.time.get_ticks()
            for event in pygame.event.get():
                world.handle_event(event, now)
            outcome = world.step(now)
            if outcome is Outcome.LOST:
                self._end_screen("YOU LOSE", RED, background, self.lose_sound)
                break
            if outcome is Outcome.WON:
                self._end_screen("YOU WIN", YELLOW, background, self.win_sound)
                break
            if outcome is Outcome.QUIT:
                break
            background.update()
            self._draw_frame(world, background, now)
            self.clock.tick(FPS)

        pygame.mixer.music.stop()
        return outcome

    def _draw_frame(self, world: World, background: ScrollingBackground, now: int) -> None:
        screen = self.screen
        assert screen is not None
        screen.fill(WHITE)
        background.draw(screen)
        world.draw(screen)

        score = self._text(f"Score: {world.score}", WHITE)
        screen.blit(score, (10, 10))
        score_height = score.get_height()
        for player, gap in zip(world.players, (5, 30)):
            label = self._text(f"P{player.player_id} Health: {player.health}", WHITE)
            screen.blit(label, (10, 10 + score_height + gap))

        start = world.boss_warning_start
        if start is not None and now - start < World.BOSS_WARNING_DURATION:
            warning = self._text("Boss Incoming!", RED)
            screen.blit(warning, (WIDTH // 2 - warning.get_width() // 2, HEIGHT // 4))

        pygame.display.flip()

    def _end_screen(
        self,
        text: str,
        color: tuple[int, int, int, int],
        background: ScrollingBackground,
        sound: pygame.mixer.Sound | None,
    ) -> None:
        screen = self.screen
        assert screen is not None
        label = self._text(text, color)
        screen.fill(WHITE)
        background.draw(screen)
        screen.blit(
            label,
            (WIDTH // 2 - label.get_width() // 2, HEIGHT // 2 - label.get_height() // 2),
        )
        pygame.display.flip()
        pygame.mixer.music.stop()
        if sound is not None:
            sound.play()
        pygame.time.delay(END_SCREEN_DELAY)

    # -- shutdown --------------------------------------------------------

    def close(self) -> None:
        """Release sounds, font and window, and shut pygame down."""
        if pygame.mixer.get_init():
            pygame.mixer.music.stop()
        self.lose_sound = None
        self.win_sound = None
        self.font = None
        self.screen = None
        pygame.mixer.quit()
        pygame.font.quit()
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Start the game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="skyshooter", description="Vertical space shooter.")
    parser.add_argument(
        "--assets", default=".", help="directory holding images, sounds and the font"
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        app = App(args.assets)
    except RuntimeError as exc:
        print(exc, file=sys.stderr)
        return 1

    try:
        while (choice := app.menu()) != 0:
            app.play(choice)
    finally:
        app.close()
    return 0