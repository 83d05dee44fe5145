"""Game record loaders for goban."""

from .sgf_parser import SGFParser, extract_game, parse
from goban.formatters.sgf_coordinates import sgf_to_vertex, vertex_to_sgf

__all__ = ["SGFParser", "extract_game", "parse", "sgf_to_vertex", "vertex_to_sgf"]
