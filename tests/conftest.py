# tests/conftest.py - Shared fixtures
import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pygame
import pytest

import config
from engine.simulation import Simulation


class FixedBrain:
    """Stand-in brain that always answers with the same outputs"""

    def __init__(self, outputs):
        self.outputs = np.array(outputs, dtype=float)
        self.calls = []

    def feed_forward(self, inputs):
        self.calls.append(np.array(inputs, dtype=float))
        return self.outputs.copy()


@pytest.fixture(autouse=True)
def debug_off(monkeypatch):
    monkeypatch.setattr(config, "DEBUG_MODE", False)


@pytest.fixture(autouse=True)
def plain_window(monkeypatch):
    monkeypatch.setattr(config, "VSYNC", False)


@pytest.fixture
def rng():
    return np.random.default_rng(2024)


@pytest.fixture
def display():
    pygame.init()
    screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
    yield screen
    pygame.quit()


@pytest.fixture
def missing_sprites(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "UNIT_SPRITE_PATH", str(tmp_path / "no_unit.bmp"))
    monkeypatch.setattr(config, "TARGET_SPRITE_PATH", str(tmp_path / "no_target.bmp"))
    return tmp_path


@pytest.fixture
def blue_bmp(tmp_path):
    surface = pygame.Surface((8, 8))
    surface.fill((0, 0, 255))
    path = tmp_path / "blue.bmp"
    pygame.image.save(surface, str(path))
    return str(path)


@pytest.fixture
def simulation(missing_sprites):
    sim = Simulation(seed=1234)
    sim.initialize()
    yield sim
    sim.shutdown()
