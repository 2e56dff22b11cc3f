"""Rectangles and textured sprites with origin, scale and texture rect."""

from __future__ import annotations

from dataclasses import dataclass

import pygame

_WHITE = (255, 255, 255, 255)


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0

    @property
    def right(self) -> float:
        return self.left + self.width

    @property
    def bottom(self) -> float:
        return self.top + self.height

    def _x_span(self) -> tuple[float, float]:
        return min(self.left, self.right), max(self.left, self.right)

    def _y_span(self) -> tuple[float, float]:
        return min(self.top, self.bottom), max(self.top, self.bottom)

    def intersects(self, other: Rect) -> bool:
        """Whether the two rectangles overlap with a non-empty area."""
        ax0, ax1 = self._x_span()
        ay0, ay1 = self._y_span()
        bx0, bx1 = other._x_span()
        by0, by1 = other._y_span()
        return max(ax0, bx0) < min(ax1, bx1) and max(ay0, by0) < min(ay1, by1)

    def contains(self, x: float, y: float) -> bool:
        """Whether the point lies inside; right and bottom edges are excluded."""
        x0, x1 = self._x_span()
        y0, y1 = self._y_span()
        return x0 <= x < x1 and y0 <= y < y1


class Sprite:
    """A drawable view on a texture.

    The texture is any object with ``get_size()``; drawing needs a pygame
    surface. Texture rects reaching past the texture wrap around it.
    """

    def __init__(self, texture=None, position: tuple[float, float] = (0.0, 0.0)):
        self.texture = None
        self.texture_rect = Rect(0, 0, 0, 0)
        self.position = (float(position[0]), float(position[1]))
        self.origin = (0.0, 0.0)
        self.scale = (1.0, 1.0)
        self.color = _WHITE
        if texture is not None:
            self.set_texture(texture, True)

    def set_texture(self, texture, reset_rect: bool) -> None:
        """Use a new texture, resetting the rect to its full size if asked
        (or if the sprite had neither texture nor rect yet)."""
        if reset_rect or (self.texture is None and self.texture_rect == Rect(0, 0, 0, 0)):
            width, height = texture.get_size()
            self.texture_rect = Rect(0, 0, width, height)
        self.texture = texture

    def global_bounds(self) -> Rect:
        """Bounding rectangle in world coordinates."""
        width = abs(self.texture_rect.width)
        height = abs(self.texture_rect.height)
        ox, oy = self.origin
        sx, sy = self.scale
        px, py = self.position
        xs = ((0.0 - ox) * sx + px, (width - ox) * sx + px)
        ys = ((0.0 - oy) * sy + py, (height - oy) * sy + py)
        return Rect(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))

    def move(self, dx: float, dy: float) -> None:
        x, y = self.position
        self.position = (x + dx, y + dy)

    def _region(self) -> pygame.Surface:
        rect = self.texture_rect
        width, height = int(abs(rect.width)), int(abs(rect.height))
        tex_w, tex_h = self.texture.get_size()
        region = pygame.Surface((width, height), pygame.SRCALPHA)
        start_x = int(rect.left) % tex_w
        start_y = int(rect.top) % tex_h
        for ty in range(-start_y, height, tex_h):
            for tx in range(-start_x, width, tex_w):
                region.blit(self.texture, (tx, ty))
        return region

    def draw(self, surface: pygame.Surface) -> None:
        """Render the sprite onto a pygame surface."""
        rect = self.texture_rect
        if self.texture is None or int(rect.width) == 0 or int(rect.height) == 0:
            return
        region = self._region()
        sx, sy = self.scale
        size = (round(abs(region.get_width() * sx)), round(abs(region.get_height() * sy)))
        if size[0] == 0 or size[1] == 0:
            return
        image = pygame.transform.scale(region, size)
        flip_x = (sx < 0) != (rect.width < 0)
        flip_y = (sy < 0) != (rect.height < 0)
        if flip_x or flip_y:
            image = pygame.transform.flip(image, flip_x, flip_y)
        if tuple(self.color) != _WHITE:
            image.fill(self.color, special_flags=pygame.BLEND_RGBA_MULT)
        bounds = self.global_bounds()
        surface.blit(image, (round(bounds.left), round(bounds.top)))