"""Exercises on rectangular grids."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

SECRET_MODULUS = 10000009
_MAX_MARKS = 400

_STEPS = {"U": (-1, 0), "D": (1, 0), "L": (0, -1), "R": (0, 1)}


def project_sum(
    grid: Sequence[Sequence[int]], moves: Iterable[tuple[int, int, str]]
) -> tuple[int, int]:
    """Apply each move (row, col, direction) once from its own start cell.
    Returns the sum of the cells landed on and the number of moves that left
    the grid. An unknown direction stays on the start cell."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    total = 0
    bugs = 0
    for row, col, direction in moves:
        d_row, d_col = _STEPS.get(direction, (0, 0))
        row, col = row + d_row, col + d_col
        if 0 <= row < rows and 0 <= col < cols:
            total += grid[row][col]
        else:
            bugs += 1
    return total, bugs


def count_secret_paths(maze: Sequence[str], limit: int) -> int:
    """Count right/down paths from the top-left to the bottom-right cell that
    avoid '#' and pass through at most `limit` 'X' cells, modulo 10000009.
    The start cell always counts as one path with no marks."""
    if not maze or not maze[0]:
        raise ValueError("the maze must not be empty")
    width = len(maze[0])
    if any(len(line) != width for line in maze):
        raise ValueError("every maze row must have the same width")

    zero = [0] * (_MAX_MARKS + 1)
    above = [zero] * width
    for i, line in enumerate(maze):
        current: list[list[int]] = []
        for j, cell in enumerate(line):
            if i == 0 and j == 0:
                counts = [1] + [0] * _MAX_MARKS
            elif cell == "#":
                counts = zero
            else:
                up = above[j]
                left = current[j - 1] if j else zero
                merged = [(a + b) % SECRET_MODULUS for a, b in zip(up[:_MAX_MARKS], left)]
                counts = [0, *merged] if cell == "X" else [*merged, 0]
            current.append(counts)
        above = current

    final = above[-1]
    return sum(final[: min(_MAX_MARKS, limit) + 1]) % SECRET_MODULUS if limit >= 0 else 0


def dream_tode(
    grid: Sequence[Sequence[int]],
    bombs: Sequence[tuple[int, int]],
    radius: int,
    queries: Iterable[tuple[int, int]],
) -> list[int]:
    """For each queried cell, its value minus the number of bombs within
    Manhattan distance `radius`, never below zero."""
    results = []
    for row, col in queries:
        if not (0 <= row < len(grid) and 0 <= col < len(grid[row])):
            raise IndexError(f"cell ({row}, {col}) outside the grid")
        hits = sum(1 for b_row, b_col in bombs if abs(row - b_row) + abs(col - b_col) <= radius)
        results.append(max(grid[row][col] - hits, 0))
    return results