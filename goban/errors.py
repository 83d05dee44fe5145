"""Exceptions raised by the rules engine and the SGF parser.

Every error is a ``ValueError``.
"""


class GoError(ValueError):
    """Base class for invalid board or record input."""


class ShapeError(GoError):
    """Board rows do not all have the same length."""


class OverwriteError(GoError):
    """A stone was played on an occupied point with overwrite prevention on."""


class KoError(GoError):
    """A stone retakes the current ko with ko prevention on."""


class SuicideError(GoError):
    """A stone captures nothing and leaves its own chain without liberties."""


class SGFSyntaxError(GoError):
    """The SGF text is missing a structural delimiter or has a bad token."""


class OutOfRangeError(GoError):
    """An SGF coordinate lies outside the declared board size."""
