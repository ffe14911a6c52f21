from __future__ import annotations

import sys
from typing import List

UNSET = -1
# Returned for positions past either string; large but safe to add 1 to.
UNREACHABLE = sys.maxsize // 2


def new_distance_table(a: str, b: str) -> List[List[int]]:
    """
    One cell per absolute position pair (i, j), all starting as UNSET.
    Positions equal to len(a) or len(b) are boundaries and never stored.
    """
    return [[UNSET] * len(b) for _ in range(len(a))]


def _cell(table: List[List[int]], a: str, b: str, i: int, j: int) -> int:
    la, lb = len(a), len(b)
    if i == la:
        return lb - j  # insert the rest of b
    if j == lb:
        return la - i  # delete the rest of a
    if i > la or j > lb:
        return UNREACHABLE
    value = table[i][j]
    if value == UNSET:
        raise AssertionError(f"cell ({i}, {j}) read before it was filled")
    return value


def _fill(table: List[List[int]], a: str, b: str, i: int, j: int) -> int:
    if i == len(a) - 1 and j == len(b) - 1:
        return 0 if a[i] == b[j] else 1

    if a[i] == b[j]:
        return _cell(table, a, b, i + 1, j + 1)

    insert = _cell(table, a, b, i, j + 1)
    delete = _cell(table, a, b, i + 1, j)
    substitute = _cell(table, a, b, i + 1, j + 1)
    return 1 + min(insert, delete, substitute)


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance (ins=1, del=1, sub=1).
    The table is filled from the last positions back to (0, 0), so every
    neighbour a cell depends on is already known when it is computed.
    """
    if a == "":
        return len(b)
    if b == "":
        return len(a)

    table = new_distance_table(a, b)
    for i in range(len(a) - 1, -1, -1):
        for j in range(len(b) - 1, -1, -1):
            table[i][j] = _fill(table, a, b, i, j)

    return table[0][0]
