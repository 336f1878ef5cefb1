"""
Tile Wave - Error Types

Exceptions raised for configuration problems detected before solving starts.
Contradictions during solving are never raised; the solver restarts instead.
"""


class TilewaveError(Exception):
    """Base class for all tile wave errors."""

    pass


class TileDefinitionError(TilewaveError):
    """Raised when a tile definition or tileset file is malformed."""

    def __init__(self, message: str, tile_name: str | None = None):
        self.tile_name = tile_name
        if tile_name is not None:
            message = f"Tile '{tile_name}': {message}"
        super().__init__(message)


class SolverConfigError(TilewaveError):
    """Raised when the solver is configured with an unusable dimension, catalog or seed."""

    pass
