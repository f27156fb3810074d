# distance.py
# Levenshtein edit distance for "did you mean" suggestions.
# Two rolling rows instead of a full matrix; optional cutoff for early exit
# when only near matches matter.

from typing import Optional


def levenshtein(a: str, b: str, max_dist: Optional[int] = None) -> int:
    """
    Minimum number of single-character insertions, deletions or
    substitutions turning `a` into `b` (all cost 1).
    With max_dist set, returns max_dist + 1 as soon as the distance is known
    to exceed it.
    """
    if a == b:
        return 0

    # keep the rows as short as possible
    if len(a) < len(b):
        a, b = b, a

    la, lb = len(a), len(b)
    if lb == 0:
        return la if max_dist is None or la <= max_dist else max_dist + 1

    if max_dist is not None and la - lb > max_dist:
        return max_dist + 1

    prev = list(range(lb + 1))
    curr = [0] * (lb + 1)

    for i in range(1, la + 1):
        ca = a[i - 1]
        curr[0] = i
        row_min = i

        for j in range(1, lb + 1):
            ins = curr[j - 1] + 1
            delete = prev[j] + 1
            replace = prev[j - 1] + (0 if ca == b[j - 1] else 1)
            val = ins if ins < delete else delete
            if replace < val:
                val = replace
            curr[j] = val
            if val < row_min:
                row_min = val

        if max_dist is not None and row_min > max_dist:
            return max_dist + 1
        prev, curr = curr, prev

    return prev[lb]
