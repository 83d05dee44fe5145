"""Utilities for working with player information."""

from goban.constants import BLACK, WHITE

_COLOR_NAMES = {BLACK: "Black", WHITE: "White"}


def format_player_name(sign: int, player_name: str | None = None) -> str:
    """Format a player display name with optional custom name.

    Args:
        sign: Player sign (1 = Black, -1 = White)
        player_name: Optional custom player name

    Returns:
        Formatted string like "Black" or "Black (Alice)"

    Examples:
        >>> format_player_name(1)
        'Black'
        >>> format_player_name(-1, "Bob")
        'White (Bob)'
    """
    if sign not in _COLOR_NAMES:
        raise ValueError(f"Invalid player sign: {sign}")
    base = _COLOR_NAMES[sign]
    if player_name:
        return f"{base} ({player_name})"
    return base
