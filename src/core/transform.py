# core/transform.py
"""
Affine transforms between object space and world space.

A Transform owns three blocks computed once at construction:

* ``matrix``: the 4x4 forward (object -> world) matrix,
* ``inverse``: its 4x4 inverse (world -> object),
* ``inverse_transpose``: the transpose of the linear 3x3 block of ``inverse``,
  used to carry surface normals back to world space.

Factories and ``compose`` keep these consistent by construction, so an
intersection test never inverts anything.
"""
import math

import numpy as np

from core.errors import DomainError
from core.vector import Vector3


def _frozen(block) -> np.ndarray:
    arr = np.array(block, dtype=np.float64)
    arr.setflags(write=False)
    return arr


def _rows(block: np.ndarray, width: int) -> tuple:
    # Plain float rows; numpy scalar arithmetic is too slow for the per-ray path.
    return tuple(tuple(float(v) for v in row[:width]) for row in block[:3])


class Transform:
    __slots__ = ("matrix", "inverse", "inverse_transpose", "_m", "_inv", "_inv_t")

    def __init__(self, matrix=None, inverse=None, inverse_transpose=None):
        """
        Builds a transform from explicit blocks. With no arguments this is the
        identity. The inverse is required whenever a forward matrix is given;
        the inverse-transpose is derived from the inverse when omitted.
        """
        if matrix is None and inverse is None:
            matrix = np.identity(4)
            inverse = np.identity(4)
        elif matrix is None or inverse is None:
            raise ValueError("Transform needs both the forward matrix and its inverse")

        self.matrix = _frozen(matrix)
        self.inverse = _frozen(inverse)
        if self.matrix.shape != (4, 4) or self.inverse.shape != (4, 4):
            raise ValueError("Transform matrices must be 4x4")

        if inverse_transpose is None:
            inverse_transpose = self.inverse[:3, :3].T
        self.inverse_transpose = _frozen(inverse_transpose)

        self._m = _rows(self.matrix, 4)
        self._inv = _rows(self.inverse, 4)
        self._inv_t = _rows(self.inverse_transpose, 3)

    # ------------------------------------------------------------------
    # Application
    # ------------------------------------------------------------------
    def point(self, p: Vector3) -> Vector3:
        """Maps a position from object space to world space (w = 1)."""
        r0, r1, r2 = self._m
        return Vector3(
            r0[0] * p.x + r0[1] * p.y + r0[2] * p.z + r0[3],
            r1[0] * p.x + r1[1] * p.y + r1[2] * p.z + r1[3],
            r2[0] * p.x + r2[1] * p.y + r2[2] * p.z + r2[3],
        )

    def vector(self, v: Vector3) -> Vector3:
        """Maps a direction from object space to world space (w = 0)."""
        r0, r1, r2 = self._m
        return Vector3(
            r0[0] * v.x + r0[1] * v.y + r0[2] * v.z,
            r1[0] * v.x + r1[1] * v.y + r1[2] * v.z,
            r2[0] * v.x + r2[1] * v.y + r2[2] * v.z,
        )

    def inverse_point(self, p: Vector3) -> Vector3:
        """Maps a position from world space to object space."""
        r0, r1, r2 = self._inv
        return Vector3(
            r0[0] * p.x + r0[1] * p.y + r0[2] * p.z + r0[3],
            r1[0] * p.x + r1[1] * p.y + r1[2] * p.z + r1[3],
            r2[0] * p.x + r2[1] * p.y + r2[2] * p.z + r2[3],
        )

    def inverse_vector(self, v: Vector3) -> Vector3:
        """Maps a direction from world space to object space. Not renormalized."""
        r0, r1, r2 = self._inv
        return Vector3(
            r0[0] * v.x + r0[1] * v.y + r0[2] * v.z,
            r1[0] * v.x + r1[1] * v.y + r1[2] * v.z,
            r2[0] * v.x + r2[1] * v.y + r2[2] * v.z,
        )

    def normal(self, n: Vector3) -> Vector3:
        """
        Maps an object-space normal to a unit world-space normal through the
        inverse-transpose, which stays perpendicular to the surface under
        non-uniform scale and shear.
        """
        r0, r1, r2 = self._inv_t
        return Vector3(
            r0[0] * n.x + r0[1] * n.y + r0[2] * n.z,
            r1[0] * n.x + r1[1] * n.y + r1[2] * n.z,
            r2[0] * n.x + r2[1] * n.y + r2[2] * n.z,
        ).normalize()

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------
    @staticmethod
    def identity() -> "Transform":
        return Transform()

    @staticmethod
    def translate(x: float, y: float, z: float) -> "Transform":
        m = np.identity(4)
        inv = np.identity(4)
        m[:3, 3] = (x, y, z)
        inv[:3, 3] = (-x, -y, -z)
        # Translation leaves the linear block, and so the normals, untouched.
        return Transform(m, inv, np.identity(3))

    @staticmethod
    def scale(sx: float, sy: float, sz: float) -> "Transform":
        for factor in (sx, sy, sz):
            if factor == 0 or not math.isfinite(factor):
                raise DomainError(f"Scale factors must be finite and non-zero, got ({sx}, {sy}, {sz})")
        m = np.diag((sx, sy, sz, 1.0))
        inv = np.diag((1.0 / sx, 1.0 / sy, 1.0 / sz, 1.0))
        return Transform(m, inv, np.diag((1.0 / sx, 1.0 / sy, 1.0 / sz)))

    @staticmethod
    def _rotation(linear: np.ndarray) -> "Transform":
        m = np.identity(4)
        m[:3, :3] = linear
        inv = np.identity(4)
        inv[:3, :3] = linear.T
        # For an orthonormal block the inverse-transpose is the block itself.
        return Transform(m, inv, linear)

    @staticmethod
    def rotate_x(radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        return Transform._rotation(np.array([
            [1.0, 0.0, 0.0],
            [0.0, c, -s],
            [0.0, s, c],
        ]))

    @staticmethod
    def rotate_y(radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        return Transform._rotation(np.array([
            [c, 0.0, s],
            [0.0, 1.0, 0.0],
            [-s, 0.0, c],
        ]))

    @staticmethod
    def rotate_z(radians: float) -> "Transform":
        c, s = math.cos(radians), math.sin(radians)
        return Transform._rotation(np.array([
            [c, -s, 0.0],
            [s, c, 0.0],
            [0.0, 0.0, 1.0],
        ]))

    @staticmethod
    def compose(first: "Transform", second: "Transform") -> "Transform":
        """
        Returns the transform that applies ``first`` and then ``second``.
        Forward matrices multiply as second @ first, inverses in the reverse
        order, and the inverse-transpose is taken from the composed inverse.
        """
        return Transform(
            second.matrix @ first.matrix,
            first.inverse @ second.inverse,
        )

    def then(self, other: "Transform") -> "Transform":
        """Shorthand for ``Transform.compose(self, other)``."""
        return Transform.compose(self, other)

    def __repr__(self) -> str:
        return f"Transform(matrix={self.matrix.tolist()})"
