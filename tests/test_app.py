import pygame
import pytest

from skyshooter.app import MENU_BUTTONS, App, MenuButton, ScrollingBackground, main
from skyshooter.settings import HEIGHT, SCREEN_SIZE, WIDTH

RED = (255, 0, 0)
BLUE = (0, 0, 255)


@pytest.fixture(autouse=True)
def headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    yield
    pygame.quit()


def _solid(size, color):
    surface = pygame.Surface(size)
    surface.fill(color)
    return surface


def test_background_height_matches_image():
    image = _solid((10, 50), RED)
    background = ScrollingBackground(image, 2)
    assert background.height == image.get_height()
    assert background.image.get_size() == (WIDTH, image.get_height())
    assert background.offset == 0


def test_background_update_advances_by_speed():
    background = ScrollingBackground(_solid((10, 50), RED), 2)
    background.update()
    assert background.offset == background.speed
    background.update()
    assert background.offset == 2 * background.speed


def test_background_wraps_after_full_height():
    background = ScrollingBackground(_solid((10, 50), RED), 5)
    steps = background.height // background.speed
    for _ in range(steps - 1):
        background.update()
    assert background.offset == background.height - background.speed
    background.update()
    assert background.offset == 0


def test_background_offset_stays_in_range():
    background = ScrollingBackground(_solid((10, 50), RED), 3)
    for _ in range(200):
        background.update()
        assert 0 <= background.offset < background.height


def test_background_draw_covers_expected_band():
    background = ScrollingBackground(_solid((10, 50), RED), 2)
    background.update()
    target = _solid(SCREEN_SIZE, BLUE)
    background.draw(target)
    bottom = background.offset + background.height
    assert tuple(target.get_at((0, 0)))[:3] == RED
    assert tuple(target.get_at((WIDTH - 1, bottom - 1)))[:3] == RED
    assert tuple(target.get_at((0, bottom)))[:3] == BLUE


def test_menu_button_contains_is_inclusive():
    button = MenuButton("x", pygame.Rect(10, 20, 30, 40), 1)
    assert button.contains((10, 20))
    assert button.contains((40, 60))
    assert button.contains((25, 35))


def test_menu_button_rejects_outside_points():
    button = MenuButton("x", pygame.Rect(10, 20, 30, 40), 1)
    assert not button.contains((9, 20))
    assert not button.contains((41, 60))
    assert not button.contains((10, 61))


def test_menu_buttons_layout():
    first, second = MENU_BUTTONS
    assert (first.label, first.choice) == ("1 Player", 1)
    assert (second.label, second.choice) == ("2 Players", 2)
    assert not first.rect.colliderect(second.rect)
    screen = pygame.Rect(0, 0, WIDTH, HEIGHT)
    for original in (first, second):
        button = MenuButton(original.label, original.rect.copy(), original.choice)
        assert button.rect.centerx == WIDTH // 2
        assert screen.contains(button.rect)
        assert button.contains(button.rect.topleft)
        assert button.contains(button.rect.bottomright)


def test_menu_button_centres_select_their_choice():
    first = MenuButton(MENU_BUTTONS[0].label, MENU_BUTTONS[0].rect.copy(), MENU_BUTTONS[0].choice)
    second = MenuButton(MENU_BUTTONS[1].label, MENU_BUTTONS[1].rect.copy(), MENU_BUTTONS[1].choice)
    assert first.contains(first.rect.center) is True
    assert second.contains(first.rect.center) is False
    assert second.contains(second.rect.center) is True
    assert first.contains(second.rect.center) is False


def test_app_without_assets_fails_to_start(tmp_path):
    with pytest.raises(RuntimeError):
        App(tmp_path)


def test_main_without_assets_returns_error(tmp_path):
    assert main(["--assets", str(tmp_path)]) == 1