"""
Tile Wave - Viewer Application

Main application class that animates a solver run in a pygame window.
"""

import logging
from typing import List, Optional, Tuple

import pygame
from pygame import Rect

from .core.constants import *
from .core.pygame_rendering import TileSurfaces
from tilewave.core.solver import Solver, SolverState
from .ui.widgets import Button
from .controllers.viewer_state import ViewerState
from .controllers.event_handler import EventHandler
from .rendering.grid_renderer import GridRenderer

logger = logging.getLogger(__name__)


class ViewerApplication:
    """Main viewer application."""

    def __init__(
        self,
        solver: Solver,
        cell_size: int,
        fps: int = FPS,
        steps_per_frame: int = STEPS_PER_FRAME,
        title: str = "Tile Wave",
    ):
        pygame.init()

        self.solver = solver
        self.cell_size = cell_size
        self.fps = fps

        canvas_size = solver.dim * cell_size
        self.screen_width = max(canvas_size, MIN_WINDOW_WIDTH)
        self.screen_height = TOOLBAR_HEIGHT + canvas_size + STATUS_HEIGHT
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        pygame.display.set_caption(title)

        self.font = pygame.font.SysFont("monospace", 14)

        self.surfaces = TileSurfaces(solver.catalog)

        # Create application state
        self.state = ViewerState(steps_per_frame)
        self.last_state = solver.state

        # Create UI elements
        self.buttons: List[Button] = []
        self._create_ui()

        self.event_handler = EventHandler(
            self.state,
            self.buttons,
            on_regenerate=self._on_regenerate,
        )

        self.running = True
        self.clock = pygame.time.Clock()

    def _create_ui(self):
        """Create toolbar buttons."""
        self.buttons = []
        x = 10

        btn_regenerate = Button(Rect(x, 5, 100, 30), "Regenerate", self._on_regenerate)
        self.buttons.append(btn_regenerate)
        x += 110

        btn_pause = Button(
            Rect(x, 5, 70, 30),
            lambda: "Resume" if self.state.paused else "Pause",
            self.state.toggle_pause,
            is_active=lambda: self.state.paused,
        )
        self.buttons.append(btn_pause)
        x += 80

        btn_step = Button(
            Rect(x, 5, 50, 30), "Step", self.state.request_step,
            is_enabled=lambda: self.state.paused,
        )
        self.buttons.append(btn_step)
        x += 60

        btn_grid = Button(
            Rect(x, 5, 50, 30), "Grid", self.state.toggle_grid,
            is_active=lambda: self.state.show_grid,
        )
        self.buttons.append(btn_grid)
        x += 60

        btn_slower = Button(
            Rect(x, 5, 30, 30), "-", self.state.slower,
            is_enabled=lambda: self.state.steps_per_frame > 1,
        )
        self.buttons.append(btn_slower)
        x += 35

        btn_faster = Button(
            Rect(x, 5, 30, 30), "+", self.state.faster,
            is_enabled=lambda: self.state.steps_per_frame < MAX_STEPS_PER_FRAME,
        )
        self.buttons.append(btn_faster)

    def _on_regenerate(self):
        """Throw away the current grid and solve again."""
        self.solver.regenerate()
        self.last_state = self.solver.state

    def _get_canvas_rect(self) -> Rect:
        """Get the canvas drawing area."""
        canvas_size = self.solver.dim * self.cell_size
        return Rect(CANVAS_OFFSET_X, CANVAS_OFFSET_Y, canvas_size, canvas_size)

    def _screen_to_cell(self, screen_pos: Tuple[int, int]) -> Optional[Tuple[int, int]]:
        """Convert screen position to (col, row) cell coordinates."""
        canvas_rect = self._get_canvas_rect()
        if not canvas_rect.collidepoint(screen_pos):
            return None
        col = (screen_pos[0] - canvas_rect.x) // self.cell_size
        row = (screen_pos[1] - canvas_rect.y) // self.cell_size
        return col, row

    def tick(self):
        """Run this frame's share of solver steps."""
        for _ in range(self.state.steps_this_frame()):
            if self.solver.grid.is_converged():
                self.last_state = SolverState.CONVERGED
                break
            self.last_state = self.solver.step()

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.event_handler.handle_events(events)
            self.tick()
            self._render()
            self.clock.tick(self.fps)

        pygame.quit()

    def _render(self):
        """Render the viewer."""
        self.screen.fill(COLOR_BG)
        self._render_toolbar()
        self._render_canvas()
        self._render_status()
        pygame.display.flip()

    def _render_toolbar(self):
        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        for button in self.buttons:
            button.render(self.screen, self.font)

    def _render_canvas(self):
        GridRenderer.render(
            self.screen,
            self._get_canvas_rect(),
            self.solver.snapshot(),
            self.surfaces,
            self.cell_size,
            self.state.show_grid,
        )

    def status_text(self, mouse_pos: Optional[Tuple[int, int]] = None) -> str:
        """Build the status bar line."""
        snapshot = self.solver.snapshot()
        state = "Paused" if self.state.paused else self.last_state.value.title()
        status_parts = [
            state,
            f"Steps: {self.solver.step_count}",
            f"Restarts: {self.solver.restart_count}",
            f"Collapsed: {snapshot.collapsed_count}/{snapshot.dim * snapshot.dim}",
            f"Speed: {self.state.steps_per_frame}x",
        ]

        cell_pos = self._screen_to_cell(mouse_pos) if mouse_pos is not None else None
        if cell_pos:
            col, row = cell_pos
            cell = snapshot.cell_at(col, row)
            if cell.collapsed:
                status_parts.append(f"({col}, {row}): {self.solver.catalog[cell.tile_id].name}")
            else:
                status_parts.append(f"({col}, {row}): {cell.candidate_count} options")

        return "  |  ".join(status_parts)

    def _render_status(self):
        status_rect = Rect(0, self.screen_height - STATUS_HEIGHT, self.screen_width, STATUS_HEIGHT)
        pygame.draw.rect(self.screen, COLOR_STATUS, status_rect)
        text_surf = self.font.render(self.status_text(pygame.mouse.get_pos()), True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, self.screen_height - STATUS_HEIGHT + 8))
