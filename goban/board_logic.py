"""Stateless board logic for Go.

All functions are pure: they read a sign map and never modify it.
The sign map is a 2D numpy array indexed ``[y, x]`` holding 0 (empty),
1 (black) or -1 (white). Vertices are ``(x, y)`` tuples.

Usage:
    chain = get_chain(sign_map, (3, 3))
    alive = has_liberties(sign_map, (3, 3))
"""

from collections import deque
from typing import Iterable, Set, Tuple

import numpy as np

from goban.constants import EMPTY

Vertex = Tuple[int, int]


# ============================================================================
# PURE HELPER FUNCTIONS
# ============================================================================

def is_inbounds(vertex: Vertex, sign_map: np.ndarray) -> bool:
    """Check if vertex is within board bounds."""
    x, y = vertex
    height, width = sign_map.shape
    return 0 <= x < width and 0 <= y < height


def get_neighbors(vertex: Vertex, sign_map: np.ndarray) -> list:
    """Get the on-board orthogonal neighbors of vertex (left, right, up, down)."""
    if not is_inbounds(vertex, sign_map):
        return []
    x, y = vertex
    candidates = [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
    return [v for v in candidates if is_inbounds(v, sign_map)]


def sign_at(sign_map: np.ndarray, vertex: Vertex) -> int:
    """Return the sign stored at an in-bounds vertex."""
    x, y = vertex
    return int(sign_map[y, x])


def get_connected_component(
    sign_map: np.ndarray, vertex: Vertex, signs: Iterable[int]
) -> Set[Vertex]:
    """Flood fill from vertex through cells whose sign is in ``signs``.

    The start vertex is always part of the result. Iterative, never recursive.
    """
    if not is_inbounds(vertex, sign_map):
        return set()

    signs = frozenset(signs)
    component = {vertex}
    queue = deque([vertex])

    while queue:
        current = queue.pop()
        for neighbor in get_neighbors(current, sign_map):
            if neighbor in component or sign_at(sign_map, neighbor) not in signs:
                continue
            component.add(neighbor)
            queue.append(neighbor)

    return component


def get_chain(sign_map: np.ndarray, vertex: Vertex) -> Set[Vertex]:
    """Return the maximal same-sign region containing vertex."""
    if not is_inbounds(vertex, sign_map):
        return set()
    return get_connected_component(sign_map, vertex, (sign_at(sign_map, vertex),))


def get_liberties(sign_map: np.ndarray, vertex: Vertex) -> Set[Vertex]:
    """Return the empty points adjacent to the chain at vertex."""
    if not is_inbounds(vertex, sign_map) or sign_at(sign_map, vertex) == EMPTY:
        return set()

    liberties = set()
    for stone in get_chain(sign_map, vertex):
        for neighbor in get_neighbors(stone, sign_map):
            if sign_at(sign_map, neighbor) == EMPTY:
                liberties.add(neighbor)
    return liberties


def has_liberties(sign_map: np.ndarray, vertex: Vertex) -> bool:
    """Check whether the chain at vertex has at least one liberty.

    Stops at the first liberty found instead of collecting the whole chain.
    """
    if not is_inbounds(vertex, sign_map):
        return False
    sign = sign_at(sign_map, vertex)
    if sign == EMPTY:
        return False

    visited = {vertex}
    stack = [vertex]

    while stack:
        current = stack.pop()
        for neighbor in get_neighbors(current, sign_map):
            neighbor_sign = sign_at(sign_map, neighbor)
            if neighbor_sign == EMPTY:
                return True
            if neighbor_sign == sign and neighbor not in visited:
                visited.add(neighbor)
                stack.append(neighbor)

    return False


def get_related_chains(sign_map: np.ndarray, vertex: Vertex) -> Set[Vertex]:
    """Return the stones of vertex's colour reachable through own stones and empty points."""
    if not is_inbounds(vertex, sign_map):
        return set()
    sign = sign_at(sign_map, vertex)
    if sign == EMPTY:
        return set()

    area = get_connected_component(sign_map, vertex, (sign, EMPTY))
    return {v for v in area if sign_at(sign_map, v) == sign}


def is_valid(sign_map: np.ndarray) -> bool:
    """Check that every chain on the board has at least one liberty."""
    checked = set()
    height, width = sign_map.shape

    for x in range(width):
        for y in range(height):
            vertex = (x, y)
            if sign_map[y, x] == EMPTY or vertex in checked:
                continue
            if not has_liberties(sign_map, vertex):
                return False
            checked.update(get_chain(sign_map, vertex))

    return True


def get_distance(vertex1: Vertex, vertex2: Vertex) -> int:
    """Manhattan distance between two vertices."""
    x1, y1 = vertex1
    x2, y2 = vertex2
    return abs(x2 - x1) + abs(y2 - y1)
