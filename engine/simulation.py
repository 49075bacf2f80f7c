# engine/simulation.py - Game loop and session lifetime
"""
Neural Net Wars Simulation Controller
Owns the window, the units and the target; runs events, update and render each frame
"""

import os
import pygame
import numpy as np
from typing import List, Optional
import config
from agents.unit import Unit
from utils.sprites import load_appearance


class StartupError(Exception):
    """Raised when the window or renderer cannot be created"""


class Simulation:
    """Main simulation controller class"""

    def __init__(self, rng: Optional[np.random.Generator] = None, seed: Optional[int] = None):
        """Initialize the simulation (no backend resources yet)

        Args:
            rng: Random source for unit placement and brains
            seed: Seed used when rng is not given (falls back to config.RANDOM_SEED)
        """
        self.state = "uninitialized"
        self.rng = rng
        self.seed = seed if seed is not None else config.RANDOM_SEED

        self.screen: Optional[pygame.Surface] = None
        self.clock = pygame.time.Clock()

        self.units: List[Unit] = []
        self.target = tuple(config.TARGET_START)
        self.target_appearance = None

        self.frame_count = 0
        self.backend_started = False
        self.released = False

    @property
    def running(self) -> bool:
        return self.state == "running"

    def __enter__(self):
        self.initialize()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False

    # Startup
    def initialize(self):
        """Create window and renderer, load sprites and spawn units

        Raises:
            StartupError: video, window or renderer setup failed
        """
        if self.state != "uninitialized":
            return

        print("🎮 Initializing Neural Net Wars...")
        self._start_backend()
        self.backend_started = True

        try:
            self.target_appearance = load_appearance(
                config.TARGET_SPRITE_PATH,
                (config.TARGET_SPRITE_SIZE, config.TARGET_SPRITE_SIZE),
                config.RED,
                (config.TARGET_MARKER_SIZE, config.TARGET_MARKER_SIZE)
            )

            if self.rng is None:
                self.rng = np.random.default_rng(self.seed)

            self._create_initial_units()
        except BaseException:
            print("❌ Startup failed, releasing resources")
            self.shutdown()
            raise

        self.state = "running"
        print(f"✅ Simulation initialized with {len(self.units)} units!")

    def _start_backend(self):
        """Bring up pygame video, the window and its display surface"""
        pygame.init()
        if not pygame.display.get_init():
            message = f"Failed to initialize video: {pygame.get_error()}"
            pygame.quit()
            raise StartupError(message)

        os.environ.setdefault("SDL_VIDEO_CENTERED", "1")
        pygame.display.set_caption(config.WINDOW_TITLE)

        size = (config.SCREEN_WIDTH, config.SCREEN_HEIGHT)
        try:
            self._open_window(size)
        except pygame.error as e:
            pygame.quit()
            raise StartupError(f"Failed to create window: {e}") from e

        self.screen = pygame.display.get_surface()
        if self.screen is None:
            pygame.quit()
            raise StartupError(f"Failed to create renderer: {pygame.get_error()}")

    def _open_window(self, size):
        """Open the display, with vsync when the driver supports it"""
        if config.VSYNC:
            try:
                return pygame.display.set_mode(size, pygame.SCALED, vsync=1)
            except pygame.error as e:
                print(f"⚠️ vsync unavailable ({e}), using a plain window")
        return pygame.display.set_mode(size)

    def _create_initial_units(self):
        """Create initial units at random positions"""
        for _ in range(config.INITIAL_UNITS):
            self.add_unit([
                int(self.rng.integers(0, config.SCREEN_WIDTH)),
                int(self.rng.integers(0, config.SCREEN_HEIGHT))
            ])

        if self.units:
            brain = self.units[0].brain
            print(f"🧠 Unit brains: {brain.topology}, {brain.parameter_count()} parameters each")

    def add_unit(self, position) -> Unit:
        """Add a new unit with its own brain and sprite"""
        appearance = load_appearance(
            config.UNIT_SPRITE_PATH,
            (config.UNIT_SIZE, config.UNIT_SIZE),
            config.GREEN
        )
        unit = Unit(position, appearance=appearance, rng=self.rng)
        self.units.append(unit)
        return unit

    # Frame phases
    def handle_events(self, events=None):
        """Process input events

        Args:
            events: Events to handle; drains the pygame queue if omitted
        """
        if events is None:
            events = pygame.event.get()

        for event in events:
            if event.type == pygame.QUIT:
                self.state = "stopped"

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.target = (event.pos[0], event.pos[1])

            elif event.type == pygame.KEYDOWN and event.key == pygame.K_d:
                config.DEBUG_MODE = not config.DEBUG_MODE
                status = "enabled" if config.DEBUG_MODE else "disabled"
                print(f"🐛 Debug mode {status}")

    def update(self):
        """Update every unit toward the current target"""
        target = self.target
        for unit in self.units:
            unit.update(target)

    def render(self):
        """Render the simulation"""
        self.screen.fill(config.BLACK)

        # Target first so units draw over it
        target_rect = pygame.Rect((0, 0), self.target_appearance.size)
        target_rect.center = self.target
        self.target_appearance.draw(self.screen, target_rect)

        for unit in self.units:
            unit.draw(self.screen)

        if config.DEBUG_MODE:
            self._render_debug_info()

        pygame.display.flip()

    def _render_debug_info(self):
        """Draw unit speeds and FPS"""
        font_small = pygame.font.Font(None, 16)

        for unit in self.units:
            text = font_small.render(f"{unit.speed:+.2f}", True, config.WHITE)
            self.screen.blit(text, (unit.rect.x, unit.rect.bottom + 2))

        fps_text = font_small.render(f"FPS: {int(self.clock.get_fps())}", True, config.WHITE)
        self.screen.blit(fps_text, (10, 10))

    def step(self, events=None):
        """Run one frame: events, update, render"""
        self.handle_events(events)
        if not self.running:
            return

        self.update()
        self.render()
        self.frame_count += 1

    def run(self):
        """Main simulation loop"""
        if self.state == "uninitialized":
            self.initialize()

        print("🚀 Starting simulation... click to move the target")

        while self.running:
            self.step()
            self.clock.tick()
            pygame.time.delay(config.FRAME_DELAY_MS)

        print("✅ Simulation ended")

    # Teardown
    def shutdown(self):
        """Release sprites, renderer, window and pygame, in that order"""
        if self.released or not self.backend_started:
            return

        for unit in self.units:
            unit.release()

        if self.target_appearance is not None:
            self.target_appearance.release()

        self.screen = None
        if pygame.display.get_init():
            pygame.display.quit()
        pygame.quit()

        self.state = "stopped"
        self.released = True
        print("👋 Resources released")
