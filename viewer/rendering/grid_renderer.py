"""
Tile Wave - Grid Renderer

Draws a solver snapshot onto the canvas: tile artwork for collapsed cells,
shaded placeholders for undetermined ones, and an optional grid overlay.
"""

import pygame
from pygame import Surface, Rect

from tilewave.core.grid import GridSnapshot
from viewer.core.constants import COLOR_GRID
from viewer.core.pygame_rendering import TileSurfaces


class GridRenderer:
    """Renders grid snapshots on the canvas."""

    @staticmethod
    def render(
        screen: Surface,
        canvas_rect: Rect,
        snapshot: GridSnapshot,
        surfaces: TileSurfaces,
        cell_size: int,
        show_grid: bool,
    ):
        """
        Render a snapshot.

        Args:
            screen: Pygame surface to draw on
            canvas_rect: Canvas area rectangle
            snapshot: Read-only grid state from the solver
            surfaces: Tile surface cache
            cell_size: Size of each cell in pixels
            show_grid: Whether to draw the grid overlay
        """
        for row in range(snapshot.dim):
            for col in range(snapshot.dim):
                cell = snapshot.cell_at(col, row)
                x = canvas_rect.x + col * cell_size
                y = canvas_rect.y + row * cell_size
                if cell.collapsed:
                    screen.blit(surfaces.tile(cell.tile_id, cell_size), (x, y))
                else:
                    screen.blit(surfaces.placeholder(cell.candidate_count, cell_size), (x, y))

        if show_grid:
            GridRenderer.render_overlay(screen, canvas_rect, snapshot.dim, cell_size)

    @staticmethod
    def render_overlay(screen: Surface, canvas_rect: Rect, dim: int, cell_size: int):
        """Render grid lines over the canvas."""
        extent = dim * cell_size
        for i in range(dim + 1):
            x = canvas_rect.x + i * cell_size
            y = canvas_rect.y + i * cell_size
            pygame.draw.line(screen, COLOR_GRID, (x, canvas_rect.y), (x, canvas_rect.y + extent))
            pygame.draw.line(screen, COLOR_GRID, (canvas_rect.x, y), (canvas_rect.x + extent, y))
