from typing import Sequence

# Goal places value v at (v // 3, v % 3), so the blank sits top-left.
SIDE = 3


def manhattan(cells: Sequence[int]) -> int:
    """Sum of Manhattan distances to goal positions (blank ignored).

    `cells` is the row-major flattening of a 3x3 grid.
    """
    dist = 0
    for idx, tile in enumerate(cells):
        if tile == 0:
            continue
        r, c = divmod(idx, SIDE)
        gr, gc = divmod(tile, SIDE)
        dist += abs(r - gr) + abs(c - gc)
    return dist
