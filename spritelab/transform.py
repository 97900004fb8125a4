"""4x4 sprite transforms in row-vector form: scale, spin and place."""

from __future__ import annotations

import math
from dataclasses import dataclass

# The picture region drawn by the transform demo and where the spinning copy sits.
TILE_SIZE = 256
SPIN_CENTRE = (550.0, 300.0)
SPIN_SCALE = (0.8, 1.2)
SPIN_PIVOT = (-128.0, -128.0)


def _rows(values):
    return tuple(tuple(float(v) for v in row) for row in values)


@dataclass(frozen=True)
class Matrix4:
    """A 4x4 matrix applied to row vectors: ``point @ first @ second``.

    ``a @ b`` applies ``a`` first and ``b`` after it; the translation
    lives in the bottom row.
    """

    rows: tuple = ((1.0, 0.0, 0.0, 0.0),
                   (0.0, 1.0, 0.0, 0.0),
                   (0.0, 0.0, 1.0, 0.0),
                   (0.0, 0.0, 0.0, 1.0))

    def __post_init__(self):
        rows = _rows(self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Matrix4 needs four rows of four values")
        object.__setattr__(self, "rows", rows)

    @classmethod
    def identity(cls):
        """The matrix that changes nothing."""
        return cls()

    @classmethod
    def scaling(cls, sx, sy, sz=1.0):
        """Scale along each axis."""
        return cls(((sx, 0, 0, 0), (0, sy, 0, 0), (0, 0, sz, 0), (0, 0, 0, 1)))

    @classmethod
    def rotation_z(cls, angle):
        """Rotate by ``angle`` radians about the z axis."""
        c, s = math.cos(angle), math.sin(angle)
        return cls(((c, s, 0, 0), (-s, c, 0, 0), (0, 0, 1, 0), (0, 0, 0, 1)))

    @classmethod
    def translation(cls, tx, ty, tz=0.0):
        """Move by (tx, ty, tz)."""
        return cls(((1, 0, 0, 0), (0, 1, 0, 0), (0, 0, 1, 0), (tx, ty, tz, 1)))

    def __matmul__(self, other):
        if not isinstance(other, Matrix4):
            return NotImplemented
        columns = list(zip(*other.rows))
        return Matrix4(tuple(
            tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
            for row in self.rows
        ))

    def transform_point(self, x, y):
        """Where the screen point (x, y) ends up under this matrix."""
        (m00, m01, _, _), (m10, m11, _, _), _, (m30, m31, _, _) = self.rows
        return (x * m00 + y * m10 + m30, x * m01 + y * m11 + m31)


def mirrored_quadrants(width=TILE_SIZE, height=TILE_SIZE):
    """Four half-size copies of a ``width`` x ``height`` picture.

    They are placed plain, mirrored left-right, mirrored top-bottom and
    mirrored both ways, all filling the same square beside the original.
    """
    placements = (
        (0.5, 0.5, 1.0, 1.0),
        (-0.5, 0.5, 2.0, 1.0),
        (0.5, -0.5, 1.0, 2.0),
        (-0.5, -0.5, 2.0, 2.0),
    )
    result = []
    for sx, sy, fx, fy in placements:
        rows = [list(row) for row in Matrix4.identity().rows]
        rows[0][0] = sx
        rows[1][1] = sy
        rows[3][0] = width * fx
        rows[3][1] = height * fy
        result.append(Matrix4(rows))
    return result


def spinning_transform(angle):
    """Transform of the stretched copy spinning about its centre at ``angle``."""
    pivot = Matrix4.translation(*SPIN_PIVOT)
    scale = Matrix4.scaling(*SPIN_SCALE, 1.0)
    spin = Matrix4.rotation_z(angle)
    place = Matrix4.translation(*SPIN_CENTRE)
    return pivot @ (scale @ spin) @ place