"""Game record writers for goban.

Provides pluggable writer classes that serialise a GameRecord to an output
stream in various formats (SGF, plain move list).
"""

import sys
from abc import ABC, abstractmethod
from typing import TextIO

from sgfmill import sgf

from goban.formatters import VertexFormatter, sgf_to_vertex
from goban.game_record import GameRecord
from goban.utils.player_utils import format_player_name


class GameWriter(ABC):
    """Abstract base class for game record writers.

    A GameWriter combines a format with an output stream. Subclasses implement
    the format-specific serialisation.
    """

    def __init__(self, output: TextIO):
        """Initialize the writer.

        Args:
            output: Output stream to write to (file, stdout, StringIO, etc.)
        """
        self.output = output

    @abstractmethod
    def write_record(self, record: GameRecord) -> None:
        """Write a complete game record.

        Args:
            record: GameRecord to serialise
        """
        pass

    def flush(self) -> None:
        """Flush the output stream."""
        self.output.flush()

    def close(self) -> None:
        """Close the output stream (but never close stdout/stderr)."""
        if self.output in (sys.stdout, sys.stderr):
            return
        if hasattr(self.output, "close"):
            self.output.close()


class SGFWriter(GameWriter):
    """Writes a game record as SGF (FF[4]) through sgfmill.

    Only the main line is written. sgfmill supports board sizes 1-26.
    """

    # GameInfo field -> SGF root property
    _ROOT_PROPERTIES = {
        "player_black": "PB",
        "player_white": "PW",
        "result": "RE",
        "date": "DT",
        "event": "EV",
        "round": "RO",
        "game_name": "GN",
        "rules": "RU",
        "komi": "KM",
        "handicap": "HA",
    }

    _COLOURS = {"B": "b", "W": "w"}

    def build_game(self, record: GameRecord) -> sgf.Sgf_game:
        """Build the sgfmill game tree for record.

        Raises:
            ValueError: If the board size is outside sgfmill's supported range
            OutOfRangeError: If a move lies outside the board
        """
        size = record.game_info.board_size
        game = sgf.Sgf_game(size=size)
        root = game.get_root()

        for field_name, identifier in self._ROOT_PROPERTIES.items():
            value = getattr(record.game_info, field_name)
            if value is not None:
                root.set(identifier, value)

        if record.setup_black or record.setup_white:
            root.set_setup_stones(
                {self._to_point(v, size) for v in record.setup_black},
                {self._to_point(v, size) for v in record.setup_white},
            )

        for move in record.moves:
            point = None if move.is_pass else self._to_point(sgf_to_vertex(move.position, size), size)
            node = game.extend_main_sequence()
            node.set_move(self._COLOURS[move.color], point)

        return game

    def write_record(self, record: GameRecord) -> None:
        """Write record as a single SGF game tree."""
        game = self.build_game(record)
        self.output.write(game.serialise().decode("utf-8"))
        self.flush()

    @staticmethod
    def _to_point(vertex: tuple[int, int], size: int) -> tuple[int, int]:
        # sgfmill points are (row, col) with row 0 at the bottom edge
        x, y = vertex
        return size - 1 - y, x


class MoveListWriter(GameWriter):
    """Writes a game record as a readable move list.

    File format:
        # Black: Alice             # Header comments
        # White: Bob
        # Size: 9
        #
        1. Black E5                # One move per line, human coordinates
        2. White pass

    Columns past Z have no letter and are written as "column-row" numbers.
    """

    def write_record(self, record: GameRecord) -> None:
        info = record.game_info
        size = info.board_size

        if info.player_black:
            self.output.write(f"# Black: {info.player_black}\n")
        if info.player_white:
            self.output.write(f"# White: {info.player_white}\n")
        self.output.write(f"# Size: {size}\n")
        if info.komi is not None:
            self.output.write(f"# Komi: {info.komi}\n")
        if info.result:
            self.output.write(f"# Result: {info.result}\n")
        self.output.write("#\n")

        for move in record.moves:
            if move.is_pass:
                label = "pass"
            else:
                x, y = sgf_to_vertex(move.position, size)
                label = VertexFormatter.vertex_to_label((x, y), size, size) or f"{x + 1}-{size - y}"
            player = format_player_name(move.sign)
            self.output.write(f"{move.move_number}. {player} {label}\n")

        self.flush()
