"""Grid rendering functionality for the forest fire simulation.

This module provides the GridRenderer class which draws the cell grid,
the flame and smoke particles on top of it, and a wind indicator.
"""

import math
import random
from typing import Optional

import pygame

from forest_fire import CellState, TickResult, WindField
from forest_fire.particles import ParticleSnapshot
from .colors import (
    BURNING_COLOR,
    BURNT_COLOR,
    TREE_COLOR,
    WHITE,
)


class GridRenderer:
    """Renders the forest grid and particles onto a Pygame surface.

    Attributes:
        cell_size: Size of each cell in pixels.
        burn_time: Full burn countdown, used to scale the flicker.
    """

    def __init__(self, cell_size: int, burn_time: int, rng: Optional[random.Random] = None) -> None:
        """Initialize the grid renderer.

        Args:
            cell_size: Size of each cell in pixels.
            burn_time: Ticks a tree burns for.
            rng: Random source for flicker (kept apart from the simulation's).
        """
        self.cell_size = cell_size
        self.burn_time = burn_time
        self.random = rng or random.Random()

    def get_cell_color(self, state: int, burn_remaining: int) -> Optional[tuple[int, int, int]]:
        """Get the RGB color for a cell, or None for empty ground.

        Args:
            state: CellState value of the cell.
            burn_remaining: Burn countdown of the cell.
        """
        rnd = self.random
        if state == CellState.Tree.value:
            r, g, b = TREE_COLOR
            return (r, g + rnd.randint(-10, 10), b)

        elif state == CellState.Burning.value:
            intensity = max(0.0, min(1.0, burn_remaining / self.burn_time))
            r, g, b = BURNING_COLOR
            r = r + rnd.uniform(-20, 50) * intensity
            g = g + rnd.uniform(-50, 50) * intensity
            return (_clamp(r), _clamp(g), b)

        elif state == CellState.Burnt.value:
            r, g, b = BURNT_COLOR
            return tuple(_clamp(c + rnd.randint(-5, 5)) for c in (r, g, b))

        return None

    def draw_base(self, screen: pygame.Surface, result: TickResult, offset_x: int = 0, offset_y: int = 0):
        """Layer 1: grid cells."""
        height, width = result.states.shape
        size = self.cell_size

        for y in range(height):
            for x in range(width):
                color = self.get_cell_color(int(result.states[y, x]), int(result.burn_remaining[y, x]))
                if color is None:
                    continue
                pygame.draw.rect(
                    screen,
                    color,
                    (offset_x + x * size, offset_y + y * size, size, size)
                )

    def draw_effects(self, screen: pygame.Surface, particles: tuple[ParticleSnapshot, ...], offset_x: int = 0, offset_y: int = 0):
        """Layer 2: flame and smoke particles, faded by remaining life."""
        overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
        for p in particles:
            r, g, b, _ = p.color
            alpha = int(p.alpha * 255)
            if alpha <= 0:
                continue
            center = (
                int(offset_x + p.x * self.cell_size),
                int(offset_y + p.y * self.cell_size),
            )
            radius = max(1, int(p.size / 2))
            pygame.draw.circle(overlay, (r, g, b, alpha), center, radius)
        screen.blit(overlay, (0, 0))

    def draw_wind_indicator(self, screen: pygame.Surface, wind: WindField, font: pygame.font.Font):
        """Layer 3: arrow pointing where the wind blows, ticks for strength."""
        arrow_length = 30
        arrow_x = screen.get_width() - 50
        arrow_y = 50

        ux, uy = wind.unit_vector
        tip = (arrow_x + ux * arrow_length, arrow_y + uy * arrow_length)
        pygame.draw.line(screen, WHITE, (arrow_x, arrow_y), tip, 2)

        # Arrow head
        angle = math.atan2(uy, ux)
        for side in (-1, 1):
            a = angle + side * math.radians(150)
            pygame.draw.line(screen, WHITE, tip, (tip[0] + 10 * math.cos(a), tip[1] + 10 * math.sin(a)), 2)

        # Strength ticks along the shaft
        for i in range(int(round(wind.strength))):
            bx = arrow_x + ux * i * 3
            by = arrow_y + uy * i * 3
            pygame.draw.line(screen, WHITE, (bx, by), (bx - uy * 4, by + ux * 4), 1)

        label = font.render("Wind", True, WHITE)
        screen.blit(label, label.get_rect(midright=(arrow_x - 15, arrow_y + 5)))


def _clamp(value: float) -> int:
    return max(0, min(255, int(value)))
