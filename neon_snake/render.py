import pygame

from .config import (
    BG_BOTTOM,
    BG_TOP,
    BODY_END,
    BODY_START,
    DIM,
    FOOD_COLOR,
    GRID_LINE,
    HEAD_COLOR,
    SEGMENT_RADIUS,
    TILE_SIZE,
    WHITE,
)


def lerp_color(start, end, t):
    """Blend two RGB colors, t=0 gives start and t=1 gives end."""
    return tuple(int(a + (b - a) * t) for a, b in zip(start, end))


def get_ui_font(size):
    """Load a preferred UI font, then fall back safely to pygame default."""
    preferred = ["Bahnschrift", "Segoe UI", "DejaVu Sans", "Arial"]
    for name in preferred:
        path = pygame.font.match_font(name)
        if path:
            return pygame.font.Font(path, size)
    return pygame.font.Font(None, size)


def make_glow(color, radius, strength=90):
    """Soft radial halo: concentric circles fading out towards the edge."""
    glow = pygame.Surface((radius * 2, radius * 2), pygame.SRCALPHA)
    for r in range(radius, 0, -1):
        alpha = int(strength * (1.0 - r / radius) ** 2)
        pygame.draw.circle(glow, (*color, alpha), (radius, radius), r)
    return glow


def make_gradient_tile(size, start, end, radius):
    """Rounded square filled with a diagonal start->end gradient."""
    tile = pygame.Surface((size, size), pygame.SRCALPHA)
    span = max(1, 2 * (size - 1))
    for k in range(2 * size - 1):
        color = lerp_color(start, end, k / span)
        pygame.draw.line(tile, color, (k, 0), (0, k))

    mask = pygame.Surface((size, size), pygame.SRCALPHA)
    pygame.draw.rect(mask, (255, 255, 255, 255), mask.get_rect(), border_radius=radius)
    tile.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
    return tile


def draw_background(surface, tile_size):
    """Draw a gradient background and subtle grid lines."""
    width, height = surface.get_size()
    for y in range(height):
        pygame.draw.line(surface, lerp_color(BG_TOP, BG_BOTTOM, y / height), (0, y), (width, y))

    for x in range(0, width, tile_size):
        pygame.draw.line(surface, GRID_LINE, (x, 0), (x, height), 1)
    for y in range(0, height, tile_size):
        pygame.draw.line(surface, GRID_LINE, (0, y), (width, y), 1)


class Renderer:
    """Projects a snake and its food onto a board surface, one frame per call."""

    def __init__(self, surface, tile_size=TILE_SIZE):
        self.surface = surface
        self.tile_size = tile_size
        self.background = pygame.Surface(surface.get_size())
        draw_background(self.background, tile_size)

        inner = tile_size - 2
        self.body_tile = make_gradient_tile(inner, BODY_START, BODY_END, SEGMENT_RADIUS)
        self.head_glow = make_glow(HEAD_COLOR, tile_size)
        self.body_glow = make_glow(BODY_START, tile_size * 2 // 3, strength=40)
        self.food_glow = make_glow(FOOD_COLOR, tile_size)

    def cell_rect(self, cell, padding=1):
        """Return the pixel rectangle of a grid cell, shrunk by padding."""
        x, y = cell
        return pygame.Rect(
            x * self.tile_size + padding,
            y * self.tile_size + padding,
            self.tile_size - padding * 2,
            self.tile_size - padding * 2,
        )

    def _blit_centered(self, image, center):
        self.surface.blit(image, image.get_rect(center=center))

    def clear(self):
        """Repaint the empty board."""
        self.surface.blit(self.background, (0, 0))

    def draw(self, snake, food):
        self.clear()

        # Tail first so the head ends up on top of any overlap.
        for index in range(len(snake.body) - 1, -1, -1):
            rect = self.cell_rect(snake.body[index])
            if index == 0:
                self._blit_centered(self.head_glow, rect.center)
                pygame.draw.rect(self.surface, HEAD_COLOR, rect, border_radius=SEGMENT_RADIUS)
            else:
                self._blit_centered(self.body_glow, rect.center)
                self.surface.blit(self.body_tile, rect.topleft)

        if food is not None:
            rect = self.cell_rect(food, padding=0)
            self._blit_centered(self.food_glow, rect.center)
            pygame.draw.circle(self.surface, FOOD_COLOR, rect.center, self.tile_size // 2 - 2)


def _panel(surface, rect, alpha):
    panel = pygame.Surface(rect.size, pygame.SRCALPHA)
    panel.fill((0, 0, 0, alpha))
    surface.blit(panel, rect.topleft)


def draw_hud(surface, font, rect, score, high_score, speed_name, muted):
    """Draw the score bar: score on the left, speed in the middle, best on the right."""
    pygame.draw.rect(surface, BG_TOP, rect)
    pygame.draw.line(surface, GRID_LINE, rect.bottomleft, (rect.right, rect.bottom - 1), 2)

    left = font.render(f"Score: {score}", True, WHITE)
    middle = font.render(speed_name.capitalize() + ("  (muted)" if muted else ""), True, DIM)
    right = font.render(f"Best: {high_score}", True, WHITE)

    surface.blit(left, left.get_rect(midleft=(rect.left + 16, rect.centery)))
    surface.blit(middle, middle.get_rect(center=rect.center))
    surface.blit(right, right.get_rect(midright=(rect.right - 16, rect.centery)))


def draw_overlay(surface, title_font, text_font, title, lines, alpha=170):
    """Draw a centered panel with a title and a few lines of text."""
    title_surface = title_font.render(title, True, WHITE)
    line_surfaces = [text_font.render(line, True, WHITE) for line in lines]
    widths = [title_surface.get_width()] + [s.get_width() for s in line_surfaces]
    line_h = text_font.get_height() + 6
    content_h = title_surface.get_height() + 14 + len(line_surfaces) * line_h

    panel_rect = pygame.Rect(0, 0, max(widths) + 56, content_h + 36)
    panel_rect.center = surface.get_rect().center
    _panel(surface, panel_rect, alpha)

    y = panel_rect.top + 18
    surface.blit(title_surface, title_surface.get_rect(centerx=panel_rect.centerx, y=y))
    y += title_surface.get_height() + 14
    for line_surface in line_surfaces:
        surface.blit(line_surface, line_surface.get_rect(centerx=panel_rect.centerx, y=y))
        y += line_h