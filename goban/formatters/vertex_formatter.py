"""Human Go coordinate notation.

Converts between board vertices and labels such as "D4" or "Q16": a column
letter (A-Z without I) followed by the row number counted from the bottom edge.
"""

from goban.constants import ALPHA, PASS_VERTEX


class VertexFormatter:
    """Converts vertices to/from human coordinate labels."""

    # Letter-to-index mapping (A=0, ..., H=7, J=8, skipping I)
    _LETTER_TO_INDEX = {letter: index for index, letter in enumerate(ALPHA)}

    # Index-to-letter mapping
    _INDEX_TO_LETTER = {v: k for k, v in _LETTER_TO_INDEX.items()}

    @staticmethod
    def vertex_to_label(vertex: tuple[int, int], width: int, height: int) -> str:
        """Convert a vertex to its label on a width x height board.

        Args:
            vertex: (x, y) with (0, 0) at the top-left corner
            width: Board width
            height: Board height

        Returns:
            str: Label like "D4", or "" when the vertex is off-board or its
                column has no letter
        """
        x, y = vertex
        if not (0 <= x < width and 0 <= y < height):
            return ""
        letter = VertexFormatter._INDEX_TO_LETTER.get(x)
        if letter is None:
            return ""
        return f"{letter}{height - y}"

    @staticmethod
    def label_to_vertex(label: str, width: int, height: int) -> tuple[int, int]:
        """Parse a label into a vertex.

        Invalid labels never raise: anything that does not name an on-board
        point maps to PASS_VERTEX.

        Args:
            label: Label like "d4" or "Q16" (case-insensitive)
            width: Board width
            height: Board height

        Returns:
            tuple: (x, y) vertex or PASS_VERTEX
        """
        label = label.strip()
        if len(label) < 2:
            return PASS_VERTEX

        x = VertexFormatter._LETTER_TO_INDEX.get(label[0].upper())
        row = label[1:]
        if x is None or not row.isdecimal():
            return PASS_VERTEX

        y = height - int(row)
        if not (0 <= x < width and 0 <= y < height):
            return PASS_VERTEX
        return x, y
