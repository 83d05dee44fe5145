"""Coordinate formatters for goban."""

from .vertex_formatter import VertexFormatter
from .sgf_coordinates import sgf_to_vertex, vertex_to_sgf, expand_point_list

__all__ = ["VertexFormatter", "sgf_to_vertex", "vertex_to_sgf", "expand_point_list"]
