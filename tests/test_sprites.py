import pygame

import config
from utils.sprites import FallbackShape, Sprite, load_appearance, load_sprite


def test_missing_file_returns_none_with_warning(tmp_path, capsys):
    assert load_sprite(str(tmp_path / "missing.bmp"), (40, 40)) is None
    assert "⚠️" in capsys.readouterr().out


def test_loaded_sprite_is_scaled(display, blue_bmp):
    sprite = load_sprite(blue_bmp, (40, 40))
    assert isinstance(sprite, Sprite)
    assert sprite.size == (40, 40)
    assert not sprite.is_released


def test_sprite_blits_into_rect(blue_bmp):
    sprite = load_sprite(blue_bmp, (40, 40))
    surface = pygame.Surface((100, 100))
    surface.fill(config.BLACK)
    sprite.draw(surface, pygame.Rect(10, 10, 40, 40))

    assert tuple(surface.get_at((10, 10)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((49, 49)))[:3] == (0, 0, 255)
    assert tuple(surface.get_at((50, 50)))[:3] == config.BLACK


def test_released_sprite_draws_nothing(blue_bmp):
    sprite = load_sprite(blue_bmp, (40, 40))
    sprite.release()
    surface = pygame.Surface((100, 100))
    surface.fill(config.BLACK)
    sprite.draw(surface, pygame.Rect(10, 10, 40, 40))

    assert sprite.is_released
    assert tuple(surface.get_at((20, 20)))[:3] == config.BLACK


def test_load_appearance_falls_back(tmp_path):
    appearance = load_appearance(str(tmp_path / "missing.bmp"), (40, 40), config.RED, (10, 10))
    assert isinstance(appearance, FallbackShape)
    assert appearance.color == config.RED
    assert appearance.size == (10, 10)


def test_load_appearance_fallback_size_defaults_to_sprite_size(tmp_path):
    appearance = load_appearance(str(tmp_path / "missing.bmp"), (40, 40), config.GREEN)
    assert appearance.size == (40, 40)


def test_load_appearance_prefers_sprite(blue_bmp):
    assert isinstance(load_appearance(blue_bmp, (40, 40), config.GREEN), Sprite)


def test_fallback_draw_swallows_backend_errors(monkeypatch):
    def broken_rect(*args, **kwargs):
        raise pygame.error("out of video memory")

    monkeypatch.setattr(pygame.draw, "rect", broken_rect)
    shape = FallbackShape(config.GREEN, (40, 40))
    shape.draw(pygame.Surface((10, 10)), pygame.Rect(0, 0, 40, 40))
