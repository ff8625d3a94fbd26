"""
Knight path constants: board geometry, move offsets, and record encoding.

Everything numeric or format-related that more than one module depends on is
defined here, so the search, the store, and the web layer agree on a single
convention.
"""

# ---------------------------------------------------------------------------
# Board geometry
# ---------------------------------------------------------------------------

BOARD_SIZE: int = 8

# ---------------------------------------------------------------------------
# Knight offsets
# ---------------------------------------------------------------------------
# (dx, dy) with dx along files (A->H) and dy along ranks (1->8).
# The order is significant: BFS expands neighbors in exactly this order, so
# it decides which of several equally short paths is returned.

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (1, 2),
    (-1, 2),
    (-2, 1),
    (-2, -1),
    (-1, -2),
    (1, -2),
    (2, -1),
)

# ---------------------------------------------------------------------------
# Record encoding
# ---------------------------------------------------------------------------
# Paths are persisted as square labels joined by this delimiter ("A1:B3").

PATH_DELIMITER: str = ":"

DEFAULT_DATA_FILE: str = "knight_paths.json"
