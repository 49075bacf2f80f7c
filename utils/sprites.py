# utils/sprites.py - Sprite loading and drawn fallbacks
"""
Neural Net Wars Sprite System
Renderable appearances: a loaded image, or a solid shape when loading fails
"""

import pygame
from typing import Optional, Tuple, Union


class Sprite:
    """Loaded image scaled to a fixed display size"""

    def __init__(self, surface: pygame.Surface, path: str = ""):
        """Initialize sprite

        Args:
            surface: Decoded image, already scaled
            path: File the image came from (for messages)
        """
        self.surface: Optional[pygame.Surface] = surface
        self.path = path

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size() if self.surface is not None else (0, 0)

    @property
    def is_released(self) -> bool:
        return self.surface is None

    def draw(self, screen: pygame.Surface, rect: pygame.Rect) -> None:
        """Blit the image into rect"""
        if self.surface is None:
            return
        if self.surface.get_size() != rect.size:
            screen.blit(pygame.transform.scale(self.surface, rect.size), rect)
        else:
            screen.blit(self.surface, rect)

    def release(self) -> None:
        """Drop the image surface"""
        self.surface = None


class FallbackShape:
    """Solid rectangle drawn in place of a missing sprite"""

    def __init__(self, color: Tuple[int, int, int], size: Tuple[int, int]):
        self.color = color
        self.size = tuple(size)
        self.is_released = False

    def draw(self, screen: pygame.Surface, rect: pygame.Rect) -> None:
        """Fill rect with the fallback color"""
        try:
            pygame.draw.rect(screen, self.color, rect)
        except pygame.error:
            # Placeholder drawing never takes the frame down
            pass

    def release(self) -> None:
        self.is_released = True


Appearance = Union[Sprite, FallbackShape]


def load_sprite(path: str, size: Tuple[int, int]) -> Optional[Sprite]:
    """Load an image file and scale it to size

    Args:
        path: Image file path (BMP, PNG, ...)
        size: (width, height) display size

    Returns:
        Sprite, or None if the file is missing or cannot be decoded
    """
    try:
        surface = pygame.image.load(path)
    except (pygame.error, OSError) as e:
        print(f"⚠️ Failed to load sprite {path}: {e}")
        return None

    # convert() needs a display mode
    if pygame.display.get_init() and pygame.display.get_surface() is not None:
        surface = surface.convert()

    if surface.get_size() != tuple(size):
        surface = pygame.transform.scale(surface, size)

    print(f"✅ Loaded sprite: {path}")
    return Sprite(surface, path)


def load_appearance(path: str, size: Tuple[int, int],
                    fallback_color: Tuple[int, int, int],
                    fallback_size: Optional[Tuple[int, int]] = None) -> Appearance:
    """Load a sprite, or build a solid fallback shape if loading fails

    Args:
        path: Image file path
        size: Sprite display size
        fallback_color: Color of the placeholder shape
        fallback_size: Placeholder size (defaults to size)
    """
    sprite = load_sprite(path, size)
    if sprite is not None:
        return sprite

    print(f"   ↪ Using {fallback_color} placeholder instead")
    return FallbackShape(fallback_color, fallback_size or size)
