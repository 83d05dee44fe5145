"""Board reconstruction from a parsed game record.

Applies the moves of a GameRecord one at a time and keeps every resulting
snapshot, so callers can step through a game without replaying it again.
"""

from __future__ import annotations

import logging

from goban.constants import BLACK, WHITE
from goban.errors import GoError
from goban.formatters import sgf_to_vertex
from goban.game_record import GameRecord
from goban.go_board import GoBoard
from goban.move_options import MoveOptions, parse_move_options
from goban.utils.player_utils import format_player_name

logger = logging.getLogger(__name__)


def initial_board(record: GameRecord) -> GoBoard:
    """Return the empty board for record with its setup stones placed."""
    size = record.game_info.board_size
    board = GoBoard.from_dimensions(size, size)
    for sign, stones in ((BLACK, record.setup_black), (WHITE, record.setup_white)):
        for vertex in stones:
            board = board.set(vertex, sign)
    return board

def replay_record(record: GameRecord, options: MoveOptions | str | None = None) -> list[GoBoard]:
    """Replay the main line of record.

    Args:
        record: Parsed game record
        options: Rules applied to every move, as MoveOptions or a rule string
            such as "strict" or "ko,overwrite" (default: MoveOptions.replay())

    Returns:
        List of snapshots: index 0 is the starting position, index i the
        board after move i. A pass repeats the previous snapshot. If a move
        is rejected the list ends at the last legal position.
    """
    if options is None:
        options = MoveOptions.replay()
    elif isinstance(options, str):
        options = parse_move_options(options)

    info = record.game_info
    names = {BLACK: info.player_black, WHITE: info.player_white}
    snapshots = [initial_board(record)]

    for move in record.moves:
        board = snapshots[-1]
        try:
            if move.is_pass:
                board = board.clone()
            else:
                vertex = sgf_to_vertex(move.position, info.board_size)
                board = board.make_move(move.sign, vertex, options)
        except GoError as e:
            logger.warning(
                "Stopping replay at move %d (%s at %r): %s",
                move.move_number, format_player_name(move.sign, names[move.sign]), move.position, e,
            )
            break
        snapshots.append(board)

    return snapshots
