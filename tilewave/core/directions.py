"""
Tile Wave - Direction Constants

Edge order used throughout is up, right, down, left (clockwise from north).
"""

UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3
DIRECTIONS = (UP, RIGHT, DOWN, LEFT)

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

DIRECTION_NAMES = {UP: "up", RIGHT: "right", DOWN: "down", LEFT: "left"}

# Offsets as (delta_col, delta_row); rows grow downward
DIRECTION_DELTAS = {
    UP: (0, -1),
    RIGHT: (1, 0),
    DOWN: (0, 1),
    LEFT: (-1, 0),
}


def opposite(direction: int) -> int:
    """Get the opposite direction."""
    if direction not in OPPOSITE:
        raise ValueError(f"Invalid direction: {direction}")
    return OPPOSITE[direction]


def direction_name(direction: int) -> str:
    return DIRECTION_NAMES[direction]
