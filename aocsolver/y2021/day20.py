"""Trench map: image enhancement by a 512-entry lookup."""

from __future__ import annotations

_ALGORITHM_SIZE = 512
_COLUMN_PADDING = 56
_ROW_PADDING = 100

Image = list[list[int]]


def parse_input(text: str) -> tuple[str, Image]:
    """The enhancement algorithm and the image as rows of 0/1."""
    algorithm: str | None = None
    image: Image = []
    for line in text.splitlines():
        line = line.strip()
        if not line:
            continue
        if algorithm is None:
            algorithm = line
            continue
        image.append([int(char == "#") for char in line])
    if algorithm is None:
        raise ValueError("no enhancement algorithm")
    if len(algorithm) != _ALGORITHM_SIZE:
        raise ValueError(
            f"enhancement algorithm has {len(algorithm)} entries, expected {_ALGORITHM_SIZE}"
        )
    return algorithm, image


def enhance(algorithm: str, image: Image, iteration: int) -> Image:
    """Apply one step; cells outside the image count as ``iteration % 2``."""
    border = iteration % 2
    height = len(image)
    width = len(image[0]) if image else 0

    def cell(row: int, column: int) -> int:
        if 0 <= row < height and 0 <= column < width:
            return image[row][column]
        return border

    def pixel(row: int, column: int) -> int:
        index = 0
        for d_row in (-1, 0, 1):
            for d_column in (-1, 0, 1):
                index = (index << 1) | cell(row + d_row, column + d_column)
        return int(algorithm[index] == "#")

    return [[pixel(row, column) for column in range(width)] for row in range(height)]


def render_image(image: Image) -> str:
    """Draw the image with '#' for lit and '.' for dark pixels."""
    return "".join("".join("#" if value else "." for value in row) + "\n" for row in image)


def part1(text: str, steps: int = 50) -> int:
    """Lit pixels after enhancing a padded image ``steps`` times."""
    algorithm, image = parse_input(text)
    side = [0] * _COLUMN_PADDING
    rows = [side + row + side for row in image]
    width = len(rows[0]) if rows else 2 * _COLUMN_PADDING
    blank = [[0] * width for _ in range(_ROW_PADDING)]
    padded = [list(row) for row in blank] + rows + [list(row) for row in blank]
    for iteration in range(steps):
        padded = enhance(algorithm, padded, iteration)
    return sum(map(sum, padded))