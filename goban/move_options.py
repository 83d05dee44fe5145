"""Move rule configuration for the rules engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MoveOptions:
    """Restrictions applied by ``GoBoard.make_move``.

    Attributes:
        prevent_suicide: Raise ``SuicideError`` instead of removing the mover's chain
        prevent_overwrite: Raise ``OverwriteError`` when the point is occupied
        prevent_ko: Raise ``KoError`` when retaking the active ko
    """

    prevent_suicide: bool = False
    prevent_overwrite: bool = False
    prevent_ko: bool = False

    @classmethod
    def permissive(cls) -> MoveOptions:
        """Allow everything (self-capture and unrestricted repetition)."""
        return cls()

    @classmethod
    def strict(cls) -> MoveOptions:
        """Forbid suicide, overwriting and immediate ko recapture."""
        return cls(prevent_suicide=True, prevent_overwrite=True, prevent_ko=True)

    @classmethod
    def replay(cls) -> MoveOptions:
        """Options used when replaying recorded games (suicide stays legal)."""
        return cls(prevent_overwrite=True, prevent_ko=True)


_PRESETS = {
    "permissive": MoveOptions.permissive,
    "strict": MoveOptions.strict,
    "replay": MoveOptions.replay,
}

_FLAG_NAMES = {
    "suicide": "prevent_suicide",
    "overwrite": "prevent_overwrite",
    "ko": "prevent_ko",
}


def parse_move_options(spec: str) -> MoveOptions:
    """Parse a rule specification string into MoveOptions.

    Format:
        PRESET or FLAG[,FLAG,...]

    Examples:
        "strict" -> all restrictions
        "permissive" or "" -> no restrictions
        "ko,overwrite" -> same as the replay preset

    Supported flags: suicide, overwrite, ko (a "prevent_" prefix is accepted).
    """
    spec = spec.strip().lower()
    if not spec:
        return MoveOptions.permissive()
    if spec in _PRESETS:
        return _PRESETS[spec]()

    flags = {}
    for name in spec.split(","):
        name = name.strip()
        if not name:
            continue
        if name.startswith("prevent_"):
            name = name[len("prevent_"):]
        if name not in _FLAG_NAMES:
            raise ValueError(
                f"Unknown rule flag: {name}. Must be one of {', '.join(_FLAG_NAMES)}"
            )
        flags[_FLAG_NAMES[name]] = True
    return MoveOptions(**flags)
