from __future__ import annotations

from typing import NamedTuple

import numpy as np

from goban.board_logic import (
    get_chain,
    get_distance,
    get_liberties,
    get_neighbors,
    get_related_chains,
    has_liberties,
    is_inbounds,
    is_valid,
)
from goban.constants import BLACK, EMPTY, PASS_VERTEX, PLAYERS, WHITE
from goban.errors import KoError, OverwriteError, ShapeError, SuicideError
from goban.formatters import VertexFormatter
from goban.move_analysis import MoveAnalysis
from goban.move_options import MoveOptions


class KoInfo(NamedTuple):
    """The point a player may not retake on the next move.

    ``sign`` is 0 when no ko is active.
    """
    sign: int = EMPTY
    vertex: tuple[int, int] = PASS_VERTEX


class GoBoard:
    # The board is a 2D array of signs indexed [y, x]:
    #    0 = empty
    #    1 = black
    #   -1 = white
    #
    # Vertices are (x, y) tuples with (0, 0) at the top-left corner, so on a
    # 9x9 board (0, 0) is labelled A9 and (8, 8) is labelled J1.
    #
    # A board is a value: make_move, set and clear return a new GoBoard and
    # never modify the receiver. Keep every returned snapshot for undo/replay.

    # Capture tally indices (one counter per player)
    BLACK_CAPTURES = 0
    WHITE_CAPTURES = 1

    def __init__(self, sign_map=None, clone=None):
        """Initialize a Go board.

        Args:
            sign_map: Nested rows of signs (or a 2D array). Every row must have
                the same length. Defaults to an empty 0x0 board.
            clone: GoBoard instance to copy state from (sign_map is ignored)

        Raises:
            ShapeError: If the rows of sign_map have different lengths
        """
        if clone is not None:
            self.sign_map = np.copy(clone.sign_map)
            self.captures = np.copy(clone.captures)
            self._ko_info = clone._ko_info
        else:
            self.sign_map = self._to_sign_map(sign_map)
            self.captures = np.zeros(len(PLAYERS), dtype=np.int64)
            self._ko_info = KoInfo()

        self.height, self.width = self.sign_map.shape

    @staticmethod
    def _to_sign_map(sign_map) -> np.ndarray:
        if sign_map is None:
            return np.zeros((0, 0), dtype=np.int8)

        if isinstance(sign_map, np.ndarray):
            if sign_map.ndim != 2:
                raise ShapeError(f"Sign map must be 2-dimensional, got shape {sign_map.shape}")
            return np.sign(sign_map).astype(np.int8)

        rows = [list(row) for row in sign_map]
        if not rows:
            return np.zeros((0, 0), dtype=np.int8)

        width = len(rows[0])
        for y, row in enumerate(rows):
            if len(row) != width:
                raise ShapeError(
                    f"Sign map is not well-formed: row {y} has {len(row)} cells, expected {width}"
                )
        return np.sign(np.array(rows, dtype=np.float64).reshape(len(rows), width)).astype(np.int8)

    @classmethod
    def from_dimensions(cls, width: int, height: int | None = None) -> GoBoard:
        """Create an empty board; height defaults to width."""
        if height is None:
            height = width
        if width < 0 or height < 0:
            raise ShapeError(f"Board dimensions must be non-negative, got {width}x{height}")
        return cls(np.zeros((height, width), dtype=np.int8))

    def __repr__(self):
        return (
            f"GoBoard({self.width}x{self.height}, "
            f"captures={self.get_captures(BLACK)}/{self.get_captures(WHITE)})"
        )

    def clone(self) -> GoBoard:
        return GoBoard(clone=self)

    # =========================  QUERIES  =========================

    @property
    def ko_info(self) -> KoInfo:
        return self._ko_info

    def has(self, vertex) -> bool:
        return is_inbounds(tuple(vertex), self.sign_map)

    def get(self, vertex) -> int | None:
        """Return the sign at vertex, or None when it is off-board."""
        if not self.has(vertex):
            return None
        x, y = vertex
        return int(self.sign_map[y, x])

    def neighbors(self, vertex) -> list:
        return get_neighbors(tuple(vertex), self.sign_map)

    def chain(self, vertex) -> set:
        return get_chain(self.sign_map, tuple(vertex))

    def liberties(self, vertex) -> set:
        return get_liberties(self.sign_map, tuple(vertex))

    def has_liberties(self, vertex) -> bool:
        return has_liberties(self.sign_map, tuple(vertex))

    def related_chains(self, vertex) -> set:
        return get_related_chains(self.sign_map, tuple(vertex))

    def is_valid(self) -> bool:
        """Check that no chain on the board is left without liberties."""
        return is_valid(self.sign_map)

    def is_empty(self) -> bool:
        return not self.sign_map.any()

    def is_square(self) -> bool:
        return self.width == self.height

    @staticmethod
    def distance(vertex1, vertex2) -> int:
        return get_distance(tuple(vertex1), tuple(vertex2))

    def get_captures(self, sign: int) -> int:
        """Return the number of stones captured by the given player (0 for other signs)."""
        if sign not in PLAYERS:
            return 0
        return int(self.captures[PLAYERS.index(sign)])

    def diff(self, other: GoBoard) -> list | None:
        """Return the vertices whose sign differs from other, or None if sizes differ."""
        if other.width != self.width or other.height != self.height:
            return None
        ys, xs = np.nonzero(self.sign_map != other.sign_map)
        return sorted((int(x), int(y)) for y, x in zip(ys, xs))

    # =========================  REPLACEMENT  =========================

    def _set(self, vertex, sign) -> None:
        # In-place write, only ever used on a freshly cloned board
        x, y = vertex
        self.sign_map[y, x] = sign

    def _add_captures(self, sign: int, count: int) -> None:
        self.captures[PLAYERS.index(sign)] += count

    def set(self, vertex, sign: int) -> GoBoard:
        """Return a copy of this board with the point at vertex set to sign."""
        result = self.clone()
        if self.has(vertex):
            result._set(vertex, int(np.sign(sign)))
        return result

    def clear(self) -> GoBoard:
        """Return a copy of this board with every point empty."""
        result = self.clone()
        result.sign_map[:] = EMPTY
        return result

    # =========================  MOVES  =========================

    def make_move(self, sign: int, vertex, options: MoveOptions | None = None) -> GoBoard:
        """Play a stone and return the resulting board.

        Captured opposing chains are removed and credited to the mover. A move
        that captures nothing and leaves its own chain without liberties
        removes that chain and credits the opponent, unless prevented.

        Args:
            sign: 1 (black) or -1 (white); any positive/negative number is
                normalized, 0 is a no-op
            vertex: (x, y) target point; off-board is a no-op
            options: MoveOptions restrictions (default: none)

        Returns:
            GoBoard: New board; this board is not modified

        Raises:
            OverwriteError: Occupied point with prevent_overwrite
            KoError: Retaking the active ko with prevent_ko
            SuicideError: Suicide with prevent_suicide
        """
        if options is None:
            options = MoveOptions()

        move = self.clone()
        if sign == EMPTY or not self.has(vertex):
            return move

        vertex = tuple(vertex)
        sign = BLACK if sign > 0 else WHITE
        opposite = -sign

        if options.prevent_overwrite and self.get(vertex) != EMPTY:
            raise OverwriteError(f"Overwrite prevented: {vertex} is occupied")

        if options.prevent_ko and self._ko_info == KoInfo(sign, vertex):
            raise KoError(f"Ko prevented: {vertex} may not be retaken yet")

        move._set(vertex, sign)

        # Remove captured stones
        neighbors = move.neighbors(vertex)
        dead_neighbors = [
            n for n in neighbors
            if move.get(n) == opposite and not move.has_liberties(n)
        ]
        dead_stones = []
        for neighbor in dead_neighbors:
            if move.get(neighbor) == EMPTY:
                continue
            for stone in move.chain(neighbor):
                move._set(stone, EMPTY)
                dead_stones.append(stone)
        move._add_captures(sign, len(dead_stones))

        # Detect future ko
        liberties = move.liberties(vertex)
        has_ko = (
            len(dead_stones) == 1
            and liberties == {dead_stones[0]}
            and all(move.get(n) != sign for n in neighbors)
        )
        move._ko_info = KoInfo(opposite, dead_stones[0]) if has_ko else KoInfo()

        # Detect suicide
        if not dead_stones and not liberties:
            if options.prevent_suicide:
                raise SuicideError(f"Suicide prevented: {vertex} has no liberties")

            own_chain = move.chain(vertex)
            for stone in own_chain:
                move._set(stone, EMPTY)
            move._add_captures(opposite, len(own_chain))

        return move

    def analyze_move(self, sign: int, vertex) -> MoveAnalysis:
        """Describe what make_move would do, without changing this board."""
        if sign == EMPTY or not self.has(vertex):
            return MoveAnalysis(is_pass=True)

        vertex = tuple(vertex)
        sign = BLACK if sign > 0 else WHITE
        overwrite = self.get(vertex) != EMPTY
        ko = self._ko_info == KoInfo(sign, vertex)

        probe = self.clone()
        probe._set(vertex, sign)
        capturing = any(
            probe.get(n) == -sign and not probe.has_liberties(n)
            for n in probe.neighbors(vertex)
        )
        suicide = not capturing and not probe.has_liberties(vertex)

        return MoveAnalysis(
            overwrite=overwrite,
            capturing=capturing,
            suicide=suicide,
            ko=ko,
        )

    # =========================  HANDICAP  =========================

    def handicap_placement(self, count: int, tygem: bool = False) -> list:
        """Return the conventional handicap points for count stones.

        Corners come first (tygem=True uses the Tygem corner order), then edge
        midpoints and the centre on boards with odd dimensions. Boards whose
        smaller side is 6 or less get no handicap points.
        """
        if min(self.width, self.height) <= 6 or count < 2:
            return []

        near_x, near_y = (3 if d >= 13 else 2 for d in (self.width, self.height))
        far_x, far_y = self.width - near_x - 1, self.height - near_y - 1
        middle_x, middle_y = (self.width - 1) // 2, (self.height - 1) // 2

        if not tygem:
            result = [(near_x, far_y), (far_x, near_y), (far_x, far_y), (near_x, near_y)]
        else:
            result = [(near_x, far_y), (far_x, near_y), (near_x, near_y), (far_x, far_y)]

        # 7x7 boards only get the corner points
        odd_width = self.width % 2 != 0 and self.width != 7
        odd_height = self.height % 2 != 0 and self.height != 7

        if odd_width and odd_height:
            if count == 5:
                result.append((middle_x, middle_y))
            result.extend([(near_x, middle_y), (far_x, middle_y)])

            if count == 7:
                result.append((middle_x, middle_y))
            result.extend([(middle_x, near_y), (middle_x, far_y), (middle_x, middle_y)])
        elif odd_width:
            result.extend([(middle_x, near_y), (middle_x, far_y)])
        elif odd_height:
            result.extend([(near_x, middle_y), (far_x, middle_y)])

        return result[:count]

    # =========================  NOTATION  =========================

    def stringify_vertex(self, vertex) -> str:
        """Return the human label ("D4") of vertex, or "" when off-board."""
        return VertexFormatter.vertex_to_label(tuple(vertex), self.width, self.height)

    def parse_vertex(self, label: str) -> tuple[int, int]:
        """Return the vertex named by a human label, or PASS_VERTEX when invalid."""
        return VertexFormatter.label_to_vertex(label, self.width, self.height)
