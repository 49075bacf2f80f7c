# agents/unit.py - Neural-steered unit
"""
Neural Net Wars Unit
Sprite unit whose speed and heading come from its own untrained network
"""

import math
import pygame
import numpy as np
from typing import Optional, Tuple
import config
from ai.neural_network import NeuralNetwork
from utils.sprites import Appearance, FallbackShape


class Unit:
    """A unit that steers toward the shared target using its brain"""

    def __init__(self, position, brain=None, appearance: Optional[Appearance] = None,
                 rng: Optional[np.random.Generator] = None):
        """Initialize unit

        Args:
            position: [x, y] starting position (top-left of the box)
            brain: Network with feed_forward(); built from config.UNIT_TOPOLOGY if omitted
            appearance: Sprite or FallbackShape; green placeholder if omitted
            rng: Random source for a freshly built brain
        """
        # Position and movement
        self.position = np.array(position, dtype=float)
        self.speed = config.UNIT_START_SPEED
        self.direction = 0.0

        # Bounding box for rendering and clamping
        self.rect = pygame.Rect(int(self.position[0]), int(self.position[1]),
                                config.UNIT_SIZE, config.UNIT_SIZE)

        # Brain
        self.brain = brain if brain is not None else NeuralNetwork(config.UNIT_TOPOLOGY, rng)

        # Rendering
        if appearance is None:
            appearance = FallbackShape(config.GREEN, self.rect.size)
        self.appearance = appearance

    @property
    def x(self) -> float:
        return float(self.position[0])

    @property
    def y(self) -> float:
        return float(self.position[1])

    def perceive(self, target: Tuple[float, float]) -> np.ndarray:
        """Build the brain input vector for the given target

        Returns:
            [distance, angle, speed, 0] scaled to roughly [-1, 1]
        """
        dx = target[0] - self.position[0]
        dy = target[1] - self.position[1]
        distance = math.hypot(dx, dy)
        angle = math.atan2(dy, dx)

        return np.array([
            distance / config.DISTANCE_SCALE,
            angle / math.pi,
            self.speed / config.SPEED_SCALE,
            0.0  # Reserved input
        ])

    def update(self, target: Tuple[float, float]) -> None:
        """Advance one frame toward (or wherever the brain says from) target"""
        outputs = self.brain.feed_forward(self.perceive(target))

        # Negative speed moves against the heading
        self.speed = float(outputs[0]) * config.SPEED_SCALE
        self.direction = float(outputs[1]) * math.pi

        self.position[0] += math.cos(self.direction) * self.speed
        self.position[1] += math.sin(self.direction) * self.speed

        self._clamp_to_bounds()

        self.rect.x = int(self.position[0])
        self.rect.y = int(self.position[1])

    def _clamp_to_bounds(self):
        """Keep the whole box inside the playfield"""
        self.position[0] = min(max(self.position[0], 0.0), config.SCREEN_WIDTH - self.rect.width)
        self.position[1] = min(max(self.position[1], 0.0), config.SCREEN_HEIGHT - self.rect.height)

    def draw(self, screen: pygame.Surface) -> None:
        """Draw the unit sprite, or its placeholder"""
        self.appearance.draw(screen, self.rect)

    def release(self) -> None:
        """Release the unit's renderable handle"""
        self.appearance.release()
