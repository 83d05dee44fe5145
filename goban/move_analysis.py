"""Move analysis value object.

Describes what a move would do on a board without playing it, so callers can
preview legality before committing through ``GoBoard.make_move``.
"""

from __future__ import annotations

from dataclasses import dataclass

from goban.move_options import MoveOptions


@dataclass(frozen=True)
class MoveAnalysis:
    """Result of ``GoBoard.analyze_move``.

    Attributes:
        is_pass: The sign was 0 or the vertex is off-board (move is a no-op)
        overwrite: The target point is already occupied
        capturing: The move removes at least one opposing chain
        suicide: The move captures nothing and leaves its own chain without liberties
        ko: The move retakes the active ko
    """

    is_pass: bool = False
    overwrite: bool = False
    capturing: bool = False
    suicide: bool = False
    ko: bool = False

    def is_legal(self, options: MoveOptions | None = None) -> bool:
        """Check whether make_move would accept this move under the given options.

        Passes are always accepted (they leave the board unchanged).
        """
        if options is None:
            options = MoveOptions()
        if self.is_pass:
            return True
        if options.prevent_overwrite and self.overwrite:
            return False
        if options.prevent_ko and self.ko:
            return False
        if options.prevent_suicide and self.suicide:
            return False
        return True
