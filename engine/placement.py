"""
Placement legality for Deadblock.

A footprint is placeable when every cell lands on the board and on an empty
cell. Every placement path (move enumeration, puzzle generation, interactive
play) goes through is_placement_legal.
"""

from typing import Iterable, Optional

from .board import Board
from .pieces import Offset


def is_placement_legal(board: Board, anchor_row: int, anchor_col: int,
                       footprint: Iterable[Offset]) -> bool:
    """
    Check whether a footprint can be placed with its origin at (anchor_row, anchor_col).

    Short-circuits on the first out-of-bounds or occupied cell.
    """
    size = board.size
    cells = board.cells
    for dx, dy in footprint:
        r = anchor_row + dy
        c = anchor_col + dx
        if r < 0 or r >= size or c < 0 or c >= size:
            return False
        if cells[r, c] != '':
            return False
    return True


def is_within_bounds(board: Board, anchor_row: int, anchor_col: int,
                     footprint: Iterable[Offset]) -> bool:
    """Check only the bounds part of the placement rule."""
    return all(board.is_valid_position(anchor_row + dy, anchor_col + dx)
               for dx, dy in footprint)


def has_overlap(board: Board, anchor_row: int, anchor_col: int,
                footprint: Iterable[Offset]) -> bool:
    """Check whether any in-bounds footprint cell is already occupied."""
    for dx, dy in footprint:
        r, c = anchor_row + dy, anchor_col + dx
        if board.is_valid_position(r, c) and not board.is_empty(r, c):
            return True
    return False


def explain_illegal_placement(board: Board, anchor_row: int, anchor_col: int,
                              footprint: Iterable[Offset]) -> Optional[str]:
    """
    Describe why a placement is illegal.

    Returns:
        None when the placement is legal, otherwise a short reason naming the
        first offending cell
    """
    for dx, dy in footprint:
        r, c = anchor_row + dy, anchor_col + dx
        if not board.is_valid_position(r, c):
            return f"cell ({r}, {c}) is off the board"
        if not board.is_empty(r, c):
            return f"cell ({r}, {c}) is occupied by {board.get_cell(r, c)}"
    return None
