"""Euler angle and quaternion conversion.

Quaternions are stored as ``[x, y, z, w]`` rows, the layout used by the
interchange format's rotation channel. Euler orders are intrinsic: ``"XYZ"``
rotates about X, then the new Y, then the new Z, which equals the Hamilton
product ``qx * qy * qz``.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from keyforge.core.config.models import EulerOrder

_AXIS_INDEX = {"X": 0, "Y": 1, "Z": 2}

# Beyond this |m13| the XYZ decomposition is in gimbal lock.
_GIMBAL_THRESHOLD = 0.9999999


def quaternion_multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Row-wise Hamilton product of two ``(n, 4)`` ``[x, y, z, w]`` arrays."""
    ax, ay, az, aw = a[:, 0], a[:, 1], a[:, 2], a[:, 3]
    bx, by, bz, bw = b[:, 0], b[:, 1], b[:, 2], b[:, 3]
    return np.column_stack(
        (
            aw * bx + ax * bw + ay * bz - az * by,
            aw * by - ax * bz + ay * bw + az * bx,
            aw * bz + ax * by - ay * bx + az * bw,
            aw * bw - ax * bx - ay * by - az * bz,
        )
    )


def _axis_rotation(axis: str, angles: np.ndarray) -> np.ndarray:
    half = angles / 2.0
    q = np.zeros((angles.shape[0], 4))
    q[:, _AXIS_INDEX[axis]] = np.sin(half)
    q[:, 3] = np.cos(half)
    return q


def euler_to_quaternion(
    x: Sequence[float] | np.ndarray,
    y: Sequence[float] | np.ndarray,
    z: Sequence[float] | np.ndarray,
    order: EulerOrder | str = EulerOrder.XYZ,
) -> np.ndarray:
    """Convert per-sample Euler angles (radians) into unit quaternions.

    Args:
        x: Rotation about X for each sample
        y: Rotation about Y for each sample
        z: Rotation about Z for each sample
        order: Intrinsic rotation order

    Returns:
        Array of shape ``(n, 4)`` with ``[x, y, z, w]`` rows

    Example:
        >>> euler_to_quaternion([0.0], [np.pi], [0.0]).round(6).tolist()
        [[0.0, 1.0, 0.0, 0.0]]
    """
    angles = {
        "X": np.asarray(x, dtype=np.float64),
        "Y": np.asarray(y, dtype=np.float64),
        "Z": np.asarray(z, dtype=np.float64),
    }
    if not angles["X"].shape == angles["Y"].shape == angles["Z"].shape:
        raise ValueError("Euler angle arrays must have the same length")

    first, second, third = EulerOrder(order).value
    q = quaternion_multiply(
        _axis_rotation(first, angles[first]), _axis_rotation(second, angles[second])
    )
    return quaternion_multiply(q, _axis_rotation(third, angles[third]))


def quaternion_to_euler_xyz(quaternions: np.ndarray) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Recover intrinsic XYZ Euler angles from ``[x, y, z, w]`` rows.

    The Y angle lies in ``[-π/2, π/2]``. In gimbal lock the Z angle is set
    to 0 and the X angle absorbs the remaining rotation.
    """
    q = np.asarray(quaternions, dtype=np.float64)
    x, y, z, w = q[:, 0], q[:, 1], q[:, 2], q[:, 3]

    m11 = 1 - 2 * (y * y + z * z)
    m12 = 2 * (x * y - w * z)
    m13 = 2 * (x * z + w * y)
    m22 = 1 - 2 * (x * x + z * z)
    m23 = 2 * (y * z - w * x)
    m32 = 2 * (y * z + w * x)
    m33 = 1 - 2 * (x * x + y * y)

    locked = np.abs(m13) >= _GIMBAL_THRESHOLD
    angle_y = np.arcsin(np.clip(m13, -1.0, 1.0))
    angle_x = np.where(locked, np.arctan2(m32, m22), np.arctan2(-m23, m33))
    angle_z = np.where(locked, 0.0, np.arctan2(-m12, m11))
    return angle_x, angle_y, angle_z


def enforce_sign_continuity(quaternions: np.ndarray) -> np.ndarray:
    """Flip samples so consecutive quaternions lie in the same hemisphere.

    ``q`` and ``-q`` encode the same rotation; interpolating between
    opposite-sign neighbours would take the long way round.
    """
    out = np.array(quaternions, dtype=np.float64, copy=True)
    for i in range(1, out.shape[0]):
        if np.dot(out[i], out[i - 1]) < 0.0:
            out[i] = -out[i]
    return out
