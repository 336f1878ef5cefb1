"""Unit tests for viewer playback state."""

from viewer.controllers.viewer_state import ViewerState
from viewer.core.constants import MAX_STEPS_PER_FRAME


class TestViewerState:
    def test_defaults(self):
        state = ViewerState()
        assert not state.paused
        assert state.show_grid
        assert state.steps_this_frame() == 1

    def test_steps_per_frame_clamped(self):
        assert ViewerState(0).steps_per_frame == 1
        assert ViewerState(10_000).steps_per_frame == MAX_STEPS_PER_FRAME

    def test_paused_runs_only_requested_steps(self):
        state = ViewerState(4)
        state.toggle_pause()
        assert state.steps_this_frame() == 0
        state.request_step()
        state.request_step()
        assert state.steps_this_frame() == 2
        assert state.steps_this_frame() == 0

    def test_speed_controls(self):
        state = ViewerState(2)
        state.faster()
        assert state.steps_per_frame == 4
        state.slower()
        state.slower()
        state.slower()
        assert state.steps_per_frame == 1

    def test_faster_is_capped(self):
        state = ViewerState(MAX_STEPS_PER_FRAME)
        state.faster()
        assert state.steps_per_frame == MAX_STEPS_PER_FRAME

    def test_toggle_grid(self):
        state = ViewerState()
        state.toggle_grid()
        assert not state.show_grid
