"""Text patterns drawn with ASCII characters, one string per row."""

from __future__ import annotations

_BANNER_ROWS: tuple[tuple[tuple[int, str], ...], ...] = (
    ((25, "."),),
    ((2, "."), (3, "#"), (2, "."), (5, "#"), (2, "."), (3, "#"), (3, "."), (4, "#"), (1, ".")),
    (
        (1, "."), (1, "#"), (3, "."), (1, "#"), (3, "."), (1, "#"), (3, "."),
        (1, "#"), (3, "."), (1, "#"), (1, "."), (1, "#"), (5, "."),
    ),
    (
        (1, "."), (1, "#"), (3, "."), (1, "#"), (3, "."), (1, "#"), (3, "."),
        (1, "#"), (3, "."), (1, "#"), (1, "."), (1, "#"), (1, "."), (3, "#"), (1, "."),
    ),
    (
        (1, "."), (1, "#"), (3, "."), (1, "#"), (3, "."), (1, "#"), (3, "."),
        (1, "#"), (3, "."), (1, "#"), (1, "."), (1, "#"), (3, "."), (1, "#"), (1, "."),
    ),
    ((2, "."), (3, "#"), (4, "."), (1, "#"), (4, "."), (3, "#"), (3, "."), (3, "#"), (2, ".")),
    ((25, "."),),
)


def square(n: int) -> list[str]:
    """An n by n block of stars."""
    return ["*" * n for _ in range(n)]


def left_triangle(n: int) -> list[str]:
    """Rows of 1 to n stars, aligned left."""
    return ["*" * width for width in range(1, n + 1)]


def inverted_triangle(n: int) -> list[str]:
    """Rows of n down to 1 stars, padded on the left with dashes."""
    return ["-" * i + "*" * (n - i) for i in range(n)]


def right_triangle(n: int) -> list[str]:
    """Rows of 1 to n stars, padded on the left with dashes."""
    return ["-" * (n - i) + "*" * i for i in range(1, n + 1)]


def alternating_right_triangle(n: int) -> list[str]:
    """A right-aligned triangle whose marks alternate between '*' and '^'."""
    rows = []
    for i in range(1, n + 1):
        rows.append(
            "".join(
                "-" if j > i else ("^" if (n - i - j) % 2 else "*")
                for j in range(n, 0, -1)
            )
        )
    return rows


def striped_triangle(n: int) -> list[str]:
    """A left triangle whose columns alternate between '*' and '-'."""
    return [
        "".join("*" if j % 2 else "-" for j in range(1, i + 1))
        for i in range(1, n + 1)
    ]


def _ring(n: int, i: int, j: int) -> int:
    return min(i, n - i - 1, j, n - j - 1)


def concentric_squares(n: int) -> list[str]:
    """Nested square rings alternating between '*' and '-'."""
    return [
        "".join("-" if _ring(n, i, j) % 2 else "*" for j in range(n))
        for i in range(n)
    ]


def _spiral_cell(n: int, i: int, j: int) -> str:
    ring = _ring(n, i, j)
    if i <= n - i and j <= n - j and j - i == 1:
        if j != n - j:
            return "*" if ring % 2 else "-"
        return "-"
    return "-" if ring % 2 else "*"


def spiral_squares(n: int) -> list[str]:
    """Concentric rings with a gap cut along the diagonal, forming a spiral."""
    return ["".join(_spiral_cell(n, i, j) for j in range(n)) for i in range(n)]


def ruler(n: int) -> list[str]:
    """Ruler marks: row i holds one star more than the number of trailing zero bits of i."""
    return [f"{i}: " + "*" * (i & -i).bit_length() for i in range(1, n + 1)]


def banner(n: int) -> list[str]:
    """A dotted banner with a hash-drawn word, every cell scaled n times."""
    rows = []
    for segments in _BANNER_ROWS:
        line = "".join(char * (count * n) for count, char in segments)
        rows.extend([line] * n)
    return rows


def christmas_tree(n: int) -> list[str]:
    """A tree with a star on top and n - 1 extra layers of branches."""
    lines = [
        " " * (n + 4) + "|",
        " " * (n + 2) + "__*__",
        " " * (n + 3) + "/|\\",
    ]
    for i in range(4):
        lines.append(" " * (n + 2 - i) + "/*" + " *" * (i + 1) + "\\")
    for i in range(n - 1):
        for j in range(3):
            lines.append(" " * (n - i - j) + "/*" + " *" * (i + 3 + j) + "\\")
    lines.append(" " * (n + 3) + "|||")
    lines.append("_" * (n + 3) + "|||" + "_" * (n + 3))
    return lines