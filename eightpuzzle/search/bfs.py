from collections import deque
from time import perf_counter
from typing import Any, Dict, Optional

from eightpuzzle.domains.board import Board, as_board

def bfs(start, timeout_sec: float | None = None) -> Dict[str, Any]:
    """Brute-force breadth-first search; its g is the true optimum."""
    start = as_board(start)
    t0 = perf_counter()
    q = deque([start])
    parent: Dict[Board, Optional[Board]] = {start: None}
    expanded = generated = duplicates = 0
    peak = 1

    def result(path, termination):
        return {"path": path, "g": len(path)-1 if path else None,
                "expanded": expanded, "generated": generated, "duplicates": duplicates,
                "peak_open": peak, "peak_closed": expanded,
                "time": perf_counter()-t0, "algorithm": "BFS", "termination": termination}

    while q:
        if timeout_sec is not None and (perf_counter() - t0) > timeout_sec:
            return result(None, "timeout")
        peak = max(peak, len(q))
        s = q.popleft()
        if s.is_goal():
            # reconstruct
            path = []
            while s is not None:
                path.append(s); s = parent[s]
            path.reverse()
            return result(path, "ok")
        expanded += 1
        for _, s2 in s.successors():
            generated += 1
            if s2 in parent:
                duplicates += 1
                continue
            parent[s2] = s; q.append(s2)
    return result(None, "exhausted")
