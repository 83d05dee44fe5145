"""Game constants shared across modules.

Stone signs, the off-board sentinel and the lettering used by the human
coordinate notation.
"""

# Cell signs
EMPTY = 0
BLACK = 1
WHITE = -1

# Capture tally order (index 0 = black, 1 = white)
PLAYERS = (BLACK, WHITE)

# Off-board / pass vertex
PASS_VERTEX = (-1, -1)

# Column letters for human notation ('I' is skipped)
ALPHA = "ABCDEFGHJKLMNOPQRSTUVWXYZ"

# SGF defaults
DEFAULT_BOARD_SIZE = 19
SGF_PASS = "tt"
SGF_COLORS = {"B": BLACK, "W": WHITE}
