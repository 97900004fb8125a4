"""Sprite-sheet helpers: texture lists, grid cells and tiled rows."""

from __future__ import annotations

TEXTURE_NAMES = (
    "Texture/mario_cloud.png",
    "Texture/mario_bush2.png",
    "Texture/mario_bush1.png",
    "Texture/mario_tile1.png",
    "Texture/mario_all.png",
    "",
)


def grid_cell(width, height, columns, rows, column, row):
    """Pixel rectangle (left, top, right, bottom) of one cell of a sheet.

    The sheet is split evenly into ``columns`` x ``rows`` cells; edges
    are truncated to whole pixels and ``right``/``bottom`` are exclusive.
    """
    if columns <= 0 or rows <= 0:
        raise ValueError("a sheet needs at least one column and one row")
    cell_w = width / columns
    cell_h = height / rows
    return (
        int(cell_w * column),
        int(cell_h * row),
        int(cell_w * (column + 1)),
        int(cell_h * (row + 1)),
    )


def usable_texture_names(names):
    """Leading names long enough to be a file name (more than four characters).

    The list ends at the first missing or too-short entry.
    """
    usable = []
    for name in names:
        if not name or len(name) <= 4:
            break
        usable.append(name)
    return usable


def tile_positions(tile_width, count, y):
    """Positions of ``count`` tiles laid side by side from x = 0 at height ``y``."""
    if count < 0:
        raise ValueError("count must not be negative")
    return [(float(index * tile_width), float(y)) for index in range(count)]