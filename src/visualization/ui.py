"""UI components for the forest fire visualization.

This module contains the interactive controls of the viewer: buttons for
the two simulation triggers, sliders for wind direction and strength, and
an info panel with the tick counter and cell counts.
"""

from typing import TYPE_CHECKING, Optional

import pygame

from .colors import (
    BUTTON_COLOR,
    SLIDER_BAR_COLOR,
    SLIDER_BORDER_COLOR,
    WHITE,
)

if TYPE_CHECKING:
    from forest_fire import TickResult
    from forest_fire.metrics import StateCounts


class Button:
    """Clickable rectangular button with a centered label."""

    def __init__(self, x: int, y: int, width: int, height: int, label: str) -> None:
        self.rect = pygame.Rect(x, y, width, height)
        self.label = label

    def draw(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        pygame.draw.rect(screen, BUTTON_COLOR, self.rect, border_radius=6)
        pygame.draw.rect(screen, WHITE, self.rect, 2, border_radius=6)
        lbl = font.render(self.label, True, WHITE)
        screen.blit(lbl, lbl.get_rect(center=self.rect.center))

    def is_clicked(self, pos: tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)


class Slider:
    """Interactive horizontal slider for a bounded integer value.

    Attributes:
        x: X coordinate of the slider's left edge.
        y: Y coordinate of the slider's top edge.
        width: Width of the slider bar in pixels.
        height: Height of the slider bar in pixels.
        min_val: Minimum value.
        max_val: Maximum value.
        step: Values snap to multiples of this step.
        value: Current value.
        label: Text drawn to the right of the bar.
    """

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        min_val: int,
        max_val: int,
        value: int,
        step: int = 1,
        label: str = "",
    ) -> None:
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.min_val = min_val
        self.max_val = max_val
        self.step = step
        self.value = value
        self.label = label
        self.dragging = False

    def draw(self, screen: pygame.Surface, font: pygame.font.Font, unit: str = "") -> None:
        """Draw the bar, the handle and the current value."""
        bar_rect = pygame.Rect(self.x, self.y, self.width, self.height)
        pygame.draw.rect(screen, SLIDER_BAR_COLOR, bar_rect, border_radius=6)
        pygame.draw.rect(screen, SLIDER_BORDER_COLOR, bar_rect, 2, border_radius=6)

        ratio = (self.value - self.min_val) / (self.max_val - self.min_val)
        handle_x = self.x + int(ratio * self.width)
        handle_y = self.y + self.height // 2
        pygame.draw.circle(screen, (255, 80, 0), (handle_x, handle_y), self.height // 2 + 3)

        text = font.render(f"{self.label}: {self.value}{unit}", True, WHITE)
        screen.blit(text, (self.x + self.width + 15, self.y - 2))

    def handle_click(self, mouse_x: int, mouse_y: int) -> Optional[int]:
        """Value under the mouse, or None when the click misses the slider."""

        grab_margin = 10
        if not (self.x - grab_margin <= mouse_x <= self.x + self.width + grab_margin):
            return None
        if not (self.y - grab_margin <= mouse_y <= self.y + self.height + grab_margin):
            return None

        ratio = (mouse_x - self.x) / self.width
        raw = self.min_val + ratio * (self.max_val - self.min_val)
        snapped = self.min_val + round((raw - self.min_val) / self.step) * self.step
        return max(self.min_val, min(self.max_val, int(snapped)))

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Update the value from mouse events. Returns True if it changed."""
        new_val = None
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            new_val = self.handle_click(*event.pos)
            self.dragging = new_val is not None
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = False
        elif event.type == pygame.MOUSEMOTION and self.dragging:
            new_val = self.handle_click(*event.pos)

        if new_val is None or new_val == self.value:
            return False
        self.value = new_val
        return True


class InfoPanel:
    """Displays the tick counter, pause status and cell counts."""

    def __init__(self) -> None:
        self.font = pygame.font.Font(None, 24)

    def draw(
        self,
        screen: pygame.Surface,
        result: "TickResult",
        counts: "StateCounts",
        paused: bool,
        x: int,
        y: int,
    ) -> None:
        status = "PAUSED" if paused else "RUNNING"
        lines = [
            f"Tick: {result.step}  {status}",
            f"Trees: {counts.tree}  Burning: {counts.burning}  Ash: {counts.burnt}",
            f"Particles: {len(result.particles)}",
            "SPACE = Pause  R = Reset  F = Fire  ESC = Quit",
        ]
        for i, line in enumerate(lines):
            text = self.font.render(line, True, WHITE)
            screen.blit(text, (x, y + i * 20))
