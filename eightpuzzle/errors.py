class PuzzleError(Exception):
    """Base class for eight-puzzle errors."""


class MalformedBoardError(PuzzleError, ValueError):
    """Board is not a 3x3 permutation of 0..8."""


class InvalidMoveError(PuzzleError):
    """Moving the blank would leave the grid."""


class UnsolvableBoardError(PuzzleError):
    """Board has odd inversion parity and cannot reach the goal."""


class SearchExhausted(PuzzleError):
    """Search ended without reaching the goal."""

    def __init__(self, termination: str, expanded: int):
        super().__init__(f"search ended without a solution ({termination}, {expanded} nodes visited)")
        self.termination = termination
        self.expanded = expanded
