from __future__ import annotations

import math

Vector3 = tuple[float, float, float]
Row4 = tuple[float, float, float, float]
Matrix4 = tuple[Row4, Row4, Row4, Row4]

# Row-major, acting on column vectors: mat_mul(a, b) applies b first.


def identity4() -> Matrix4:
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_x(theta: float) -> Matrix4:
    c, s = math.cos(theta), math.sin(theta)
    return (
        (1.0, 0.0, 0.0, 0.0),
        (0.0, c, -s, 0.0),
        (0.0, s, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_y(theta: float) -> Matrix4:
    c, s = math.cos(theta), math.sin(theta)
    return (
        (c, 0.0, s, 0.0),
        (0.0, 1.0, 0.0, 0.0),
        (-s, 0.0, c, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


def rotation_z(theta: float) -> Matrix4:
    c, s = math.cos(theta), math.sin(theta)
    return (
        (c, -s, 0.0, 0.0),
        (s, c, 0.0, 0.0),
        (0.0, 0.0, 1.0, 0.0),
        (0.0, 0.0, 0.0, 1.0),
    )


_ROTATIONS = (rotation_x, rotation_y, rotation_z)


def rotation_about(axis: int, theta: float) -> Matrix4:
    if axis not in (0, 1, 2):
        raise ValueError(f"axis must be 0, 1 or 2, got {axis!r}")
    return _ROTATIONS[axis](theta)


def translation(x: float, y: float, z: float) -> Matrix4:
    return (
        (1.0, 0.0, 0.0, x),
        (0.0, 1.0, 0.0, y),
        (0.0, 0.0, 1.0, z),
        (0.0, 0.0, 0.0, 1.0),
    )


def mat_mul(a: Matrix4, b: Matrix4) -> Matrix4:
    out = []
    for r in range(4):
        row = []
        for c in range(4):
            s = 0.0
            for k in range(4):
                s += a[r][k] * b[k][c]
            row.append(s)
        out.append(tuple(row))
    return (out[0], out[1], out[2], out[3])  # type: ignore[return-value]


def invert_rigid(m: Matrix4) -> Matrix4:
    """Inverse of a rotation + translation transform.

    The rotation block is orthonormal, so its inverse is its transpose; the
    translation is rotated back and negated.
    """
    r = [[m[j][i] for j in range(3)] for i in range(3)]
    t = [m[0][3], m[1][3], m[2][3]]
    rows = []
    for i in range(3):
        ti = -(r[i][0] * t[0] + r[i][1] * t[1] + r[i][2] * t[2])
        rows.append((r[i][0], r[i][1], r[i][2], ti))
    return (rows[0], rows[1], rows[2], (0.0, 0.0, 0.0, 1.0))


def transform_point(m: Matrix4, p: Vector3) -> Vector3:
    x, y, z = p
    return (
        m[0][0] * x + m[0][1] * y + m[0][2] * z + m[0][3],
        m[1][0] * x + m[1][1] * y + m[1][2] * z + m[1][3],
        m[2][0] * x + m[2][1] * y + m[2][2] * z + m[2][3],
    )


def position_of(m: Matrix4) -> Vector3:
    return (m[0][3], m[1][3], m[2][3])


def rotation_of(m: Matrix4) -> tuple[Vector3, Vector3, Vector3]:
    return (
        (m[0][0], m[0][1], m[0][2]),
        (m[1][0], m[1][1], m[1][2]),
        (m[2][0], m[2][1], m[2][2]),
    )


def allclose(a: Matrix4, b: Matrix4, tol: float = 1e-9) -> bool:
    return all(abs(a[r][c] - b[r][c]) <= tol for r in range(4) for c in range(4))
