"""Parser for SGF (Smart Game Format) Go records.

Reads the main line of an SGF game tree into a GameRecord: root metadata,
setup stones and the ordered B/W moves. Variations are skipped.

Grammar:
    GameTree   = "(" { Node | GameTree } ")"
    Node       = ";" { Property }
    Property   = PropIdent PropValue { PropValue }
    PropValue  = "[" text "]"     ("\\" escapes the next character)
"""

from __future__ import annotations

import logging
import re

from goban.constants import DEFAULT_BOARD_SIZE
from goban.errors import SGFSyntaxError
from goban.formatters.sgf_coordinates import expand_point_list
from goban.game_record import GameInfo, GameRecord, SGFMove

logger = logging.getLogger(__name__)

# Root properties copied verbatim into GameInfo
_TEXT_PROPERTIES = {
    "PB": "player_black",
    "PW": "player_white",
    "RE": "result",
    "DT": "date",
    "EV": "event",
    "RO": "round",
    "GN": "game_name",
    "RU": "rules",
}

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class SGFParser:
    """Single-pass SGF reader.

    One scan index is shared by the tree, node and property routines; the
    text is never re-read. Each call to parse() starts a fresh scan.
    """

    def __init__(self):
        self._text = ""
        self._pos = 0

    # Public API -----------------------------------------------------------------

    def parse(self, sgf_content: str) -> GameRecord:
        """Parse SGF text and return its main-line GameRecord."""
        return extract_game(self.parse_nodes(sgf_content))

    def parse_nodes(self, sgf_content: str) -> list[dict[str, list[str]]]:
        """Parse SGF text into the flat list of main-line nodes.

        Each node maps a property identifier to its list of values.

        Raises:
            SGFSyntaxError: If the text does not start with "(" or a value or
                the game tree is left unterminated
        """
        self._text = sgf_content.strip()
        self._pos = 0
        return self._parse_game_tree()

    # Internal helpers -----------------------------------------------------------

    def _peek(self) -> str:
        return self._text[self._pos] if self._pos < len(self._text) else ""

    def _skip_whitespace(self) -> None:
        while self._pos < len(self._text) and self._text[self._pos].isspace():
            self._pos += 1

    def _parse_game_tree(self) -> list[dict[str, list[str]]]:
        self._skip_whitespace()
        if self._peek() != "(":
            raise SGFSyntaxError("SGF must start with '('")
        self._pos += 1

        nodes = []
        while True:
            self._skip_whitespace()
            char = self._peek()
            if not char:
                raise SGFSyntaxError("Game tree is missing its closing ')'")
            if char == ")":
                self._pos += 1
                break
            if char == ";":
                nodes.append(self._parse_node())
            elif char == "(":
                self._skip_variation()
            else:
                # Stray character between nodes
                self._pos += 1

        return nodes

    def _parse_node(self) -> dict[str, list[str]]:
        self._pos += 1  # skip ';'
        self._skip_whitespace()

        node: dict[str, list[str]] = {}
        while self._peek() not in ("", ";", "(", ")"):
            prop = self._parse_property()
            if prop is not None:
                key, values = prop
                node.setdefault(key, []).extend(values)
            self._skip_whitespace()

        return node

    def _parse_property(self) -> tuple[str, list[str]] | None:
        self._skip_whitespace()

        # FF[3] identifiers may carry lowercase letters ("AddBlack" == "AB")
        start = self._pos
        key_chars = []
        while self._pos < len(self._text) and self._text[self._pos].isalpha():
            if self._text[self._pos].isupper():
                key_chars.append(self._text[self._pos])
            self._pos += 1

        if self._pos == start:
            logger.debug("Skipping unexpected character %r at offset %d", self._peek(), start)
            self._pos += 1
            return None

        key = "".join(key_chars)
        self._skip_whitespace()

        values = []
        while self._peek() == "[":
            values.append(self._parse_value())
            self._skip_whitespace()

        if not values:
            raise SGFSyntaxError(f"Property {self._text[start:self._pos].strip()} has no value")
        if not key:
            return None
        return key, values

    def _parse_value(self) -> str:
        start = self._pos
        self._pos += 1  # skip '['

        chars = []
        while self._pos < len(self._text):
            char = self._text[self._pos]
            if char == "]":
                self._pos += 1
                return "".join(chars)
            if char == "\\":
                self._pos += 1
                if self._pos < len(self._text):
                    chars.append(self._text[self._pos])
            else:
                chars.append(char)
            self._pos += 1

        raise SGFSyntaxError(f"Property value starting at offset {start} is missing its closing ']'")

    def _skip_variation(self) -> None:
        """Skip a nested game tree, counting parenthesis depth outside values."""
        start = self._pos
        depth = 0
        while self._pos < len(self._text):
            char = self._text[self._pos]
            if char == "[":
                self._parse_value()
                continue
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    self._pos += 1
                    logger.debug("Skipped variation at offset %d", start)
                    return
            self._pos += 1

        raise SGFSyntaxError(f"Variation starting at offset {start} is missing its closing ')'")


def _parse_int(value: str, key: str) -> int | None:
    match = _LEADING_INT.match(value)
    if match is None:
        logger.warning("Ignoring non-numeric %s value: %r", key, value)
        return None
    return int(match.group(1))


def _parse_float(value: str, key: str) -> float | None:
    try:
        return float(value.strip())
    except ValueError:
        logger.warning("Ignoring non-numeric %s value: %r", key, value)
        return None


def extract_game(nodes: list[dict[str, list[str]]]) -> GameRecord:
    """Project a flat list of parsed nodes into a GameRecord.

    Metadata properties may appear in any node; later values win. Setup
    stones (AB/AW) are read from the nodes before the first move. Unknown
    properties are ignored.
    """
    info: dict = {"board_size": DEFAULT_BOARD_SIZE}
    moves: list[SGFMove] = []
    setup: dict[str, list[str]] = {"AB": [], "AW": []}
    move_number = 0

    for node in nodes:
        if node.get("SZ"):
            size = _parse_int(node["SZ"][0], "SZ")
            if size is not None:
                info["board_size"] = size
        for key, field_name in _TEXT_PROPERTIES.items():
            if node.get(key):
                info[field_name] = node[key][0]
        if node.get("KM"):
            info["komi"] = _parse_float(node["KM"][0], "KM")
        if node.get("HA"):
            info["handicap"] = _parse_int(node["HA"][0], "HA")

        for key in ("AB", "AW"):
            if key not in node:
                continue
            if moves:
                logger.debug("Ignoring %s setup after move %d", key, move_number)
            else:
                setup[key].extend(node[key])

        for color in ("B", "W"):
            if node.get(color):
                move_number += 1
                moves.append(SGFMove(color=color, position=node[color][0], move_number=move_number))

    game_info = GameInfo(**info)
    size = game_info.board_size
    return GameRecord(
        game_info=game_info,
        moves=tuple(moves),
        setup_black=tuple(v for value in setup["AB"] for v in expand_point_list(value, size)),
        setup_white=tuple(v for value in setup["AW"] for v in expand_point_list(value, size)),
    )


def parse(sgf_content: str) -> GameRecord:
    """Parse SGF text into a GameRecord (main line only)."""
    return SGFParser().parse(sgf_content)
