"""
Tile Wave - Viewer State

Manages playback and view settings for the viewer.
"""

from viewer.core.constants import MAX_STEPS_PER_FRAME, STEPS_PER_FRAME


class ViewerState:
    """Manages viewer application state."""

    def __init__(self, steps_per_frame: int = STEPS_PER_FRAME):
        # Playback
        self.paused: bool = False
        self.pending_steps: int = 0
        self.steps_per_frame: int = max(1, min(steps_per_frame, MAX_STEPS_PER_FRAME))

        # View settings
        self.show_grid: bool = True

    def toggle_pause(self):
        """Toggle automatic stepping."""
        self.paused = not self.paused

    def toggle_grid(self):
        """Toggle grid visibility."""
        self.show_grid = not self.show_grid

    def request_step(self):
        """Queue a single step; only meaningful while paused."""
        self.pending_steps += 1

    def faster(self):
        self.steps_per_frame = min(self.steps_per_frame * 2, MAX_STEPS_PER_FRAME)

    def slower(self):
        self.steps_per_frame = max(self.steps_per_frame // 2, 1)

    def steps_this_frame(self) -> int:
        """
        Number of solver steps to run this frame.

        Consumes queued single steps when paused.
        """
        if not self.paused:
            return self.steps_per_frame
        steps = self.pending_steps
        self.pending_steps = 0
        return steps
