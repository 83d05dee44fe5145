"""SGF point notation.

An SGF point is two lowercase letters: column then row, both counted from
"a" at the top-left corner. An empty value (or "tt") is a pass.
"""

from goban.constants import PASS_VERTEX, SGF_PASS
from goban.errors import OutOfRangeError, SGFSyntaxError


def sgf_to_vertex(sgf_coord: str, board_size: int) -> tuple[int, int]:
    """Convert an SGF point such as "pd" to an (x, y) vertex.

    Args:
        sgf_coord: Two-letter SGF point, "" or "tt" for a pass
        board_size: Size of the (square) board the point belongs to

    Returns:
        tuple: (x, y) vertex, or PASS_VERTEX for a pass

    Raises:
        SGFSyntaxError: If the token is not two characters long
        OutOfRangeError: If either axis falls outside the board
    """
    if not sgf_coord or sgf_coord == SGF_PASS:
        return PASS_VERTEX

    if len(sgf_coord) != 2:
        raise SGFSyntaxError(f"Invalid SGF coordinate: {sgf_coord!r}")

    x = ord(sgf_coord[0]) - ord("a")
    y = ord(sgf_coord[1]) - ord("a")

    if not (0 <= x < board_size and 0 <= y < board_size):
        raise OutOfRangeError(
            f"SGF coordinate out of bounds: {sgf_coord!r} (board size {board_size})"
        )
    return x, y


def vertex_to_sgf(vertex: tuple[int, int], board_size: int) -> str:
    """Convert an (x, y) vertex to an SGF point; PASS_VERTEX becomes ""."""
    if tuple(vertex) == PASS_VERTEX:
        return ""

    x, y = vertex
    if not (0 <= x < board_size and 0 <= y < board_size):
        raise OutOfRangeError(f"Vertex out of bounds: {tuple(vertex)} (board size {board_size})")
    return chr(ord("a") + x) + chr(ord("a") + y)


def expand_point_list(value: str, board_size: int) -> list[tuple[int, int]]:
    """Expand an SGF point or compressed rectangle ("aa:cc") into vertices.

    Used for setup properties such as AB/AW, where one value may name a whole
    rectangle of points.
    """
    if ":" not in value:
        vertex = sgf_to_vertex(value, board_size)
        return [] if vertex == PASS_VERTEX else [vertex]

    first, last = value.split(":", 1)
    corner1 = sgf_to_vertex(first, board_size)
    corner2 = sgf_to_vertex(last, board_size)
    if PASS_VERTEX in (corner1, corner2):
        raise SGFSyntaxError(f"Invalid SGF point rectangle: {value!r}")

    x1, y1 = corner1
    x2, y2 = corner2
    return [
        (x, y)
        for y in range(min(y1, y2), max(y1, y2) + 1)
        for x in range(min(x1, x2), max(x1, x2) + 1)
    ]
