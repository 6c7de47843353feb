#!/usr/bin/env python3
"""Pygame viewer for the forest fire simulation.

Draws the forest, flame and smoke particles and a wind indicator. Wind is
controlled with two sliders; buttons start a fire or reseed the forest.

Usage:
    python scripts/pygame_run.py
"""

import logging
import sys
from pathlib import Path

import pygame

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from forest_fire import Simulation, SimulationConfig
from forest_fire.config import DEFAULT_WIND_DIRECTION, DEFAULT_WIND_STRENGTH

from visualization import (
    BACKGROUND,
    DEFAULT_FPS,
    MAX_WIND_DIRECTION,
    MAX_WIND_STRENGTH,
    MIN_WIND_DIRECTION,
    MIN_WIND_STRENGTH,
    PANEL_HEIGHT,
    WIND_DIRECTION_STEP,
    Button,
    GridRenderer,
    InfoPanel,
    Slider,
)

logger = logging.getLogger(__name__)


class SimulationRunner:
    """Main loop: reads the controls, ticks the simulation, draws the result.

    Attributes:
        simulation: The forest fire simulation.
        screen: Pygame display surface.
        clock: Pygame clock for FPS control.
        renderer: Grid and particle renderer.
        paused: Whether ticking is suspended.
    """

    def __init__(self, config: SimulationConfig, seed=None) -> None:
        self.simulation = Simulation(config, seed=seed)
        self.cell_size = config.cell_size

        grid_width = config.width * config.cell_size
        grid_height = config.height * config.cell_size

        pygame.init()
        self.screen = pygame.display.set_mode((grid_width, grid_height + PANEL_HEIGHT))
        pygame.display.set_caption("Forest Fire")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, 22)

        self.renderer = GridRenderer(config.cell_size, config.burn_time)
        self.info_panel = InfoPanel()

        self.ignite_button = Button(10, 10, 90, 24, "Start Fire")
        self.reset_button = Button(110, 10, 110, 24, "Reset Forest")
        self.direction_slider = Slider(
            x=10, y=44, width=150, height=12,
            min_val=MIN_WIND_DIRECTION, max_val=MAX_WIND_DIRECTION,
            value=int(DEFAULT_WIND_DIRECTION), step=WIND_DIRECTION_STEP,
            label="Wind Direction",
        )
        self.strength_slider = Slider(
            x=10, y=70, width=150, height=12,
            min_val=MIN_WIND_STRENGTH, max_val=MAX_WIND_STRENGTH,
            value=int(DEFAULT_WIND_STRENGTH), label="Wind Strength",
        )

        self.paused = False
        self.grid_height = grid_height
        self.result = self.simulation.snapshot()

    def _handle_keyboard_events(self, event: pygame.event.Event) -> bool:
        """Handle keyboard input. Returns False if the viewer should quit."""
        if event.key == pygame.K_ESCAPE:
            return False

        elif event.key == pygame.K_SPACE:
            self.paused = not self.paused

        elif event.key == pygame.K_r:
            self.simulation.reset()

        elif event.key == pygame.K_f:
            self.simulation.ignite_random()

        return True

    def _handle_mouse_events(self, event: pygame.event.Event) -> None:
        self.direction_slider.handle_event(event)
        self.strength_slider.handle_event(event)

        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.ignite_button.is_clicked(event.pos):
                self.simulation.ignite_random()
            elif self.reset_button.is_clicked(event.pos):
                self.simulation.reset()

    def _update_simulation(self) -> None:
        if self.paused:
            self.result = self.simulation.snapshot()
            return
        self.result = self.simulation.tick(
            self.direction_slider.value,
            self.strength_slider.value,
        )

    def _render(self) -> None:
        self.screen.fill(BACKGROUND)

        # LAYER 1: Base grid
        self.renderer.draw_base(self.screen, self.result)

        # LAYER 2: Flames and smoke
        self.renderer.draw_effects(self.screen, self.result.particles)

        # LAYER 3: Controls
        self.ignite_button.draw(self.screen, self.font)
        self.reset_button.draw(self.screen, self.font)
        self.direction_slider.draw(self.screen, self.font, unit="°")
        self.strength_slider.draw(self.screen, self.font)
        self.renderer.draw_wind_indicator(self.screen, self.simulation.wind, self.font)

        self.info_panel.draw(
            self.screen,
            self.result,
            self.simulation.model.count_states(),
            self.paused,
            x=10,
            y=self.grid_height + 10,
        )

        pygame.display.flip()

    def run(self) -> None:
        """Run the main loop until the user quits."""
        running = True

        while running:
            # Triggers are applied between ticks
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN:
                    if not self._handle_keyboard_events(event):
                        running = False
                else:
                    self._handle_mouse_events(event)

            self._update_simulation()
            self._render()
            self.clock.tick(DEFAULT_FPS)

        pygame.quit()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(levelname)s - %(message)s'
    )
    SimulationRunner(SimulationConfig()).run()


if __name__ == "__main__":
    main()
