# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""3D vector algebra on numpy arrays

Vectors are ``np.ndarray`` of shape (3,) and dtype float64. Nothing in this
module knows about geodesy: functions only combine, normalise and rotate
Cartesian vectors.
"""

import logging
from typing import Sequence

import numpy as np

from .constants import EPSILON

logger = logging.getLogger(__name__)

ZERO = np.zeros(3)
UNIT_X = np.array([1.0, 0.0, 0.0])
UNIT_Y = np.array([0.0, 1.0, 0.0])
UNIT_Z = np.array([0.0, 0.0, 1.0])
NEG_UNIT_Y = -UNIT_Y
NEG_UNIT_Z = -UNIT_Z
for _v in (ZERO, UNIT_X, UNIT_Y, UNIT_Z, NEG_UNIT_Y, NEG_UNIT_Z):
    _v.flags.writeable = False


def vec3(x: float, y: float, z: float) -> np.ndarray:
    """Create a 3D vector"""
    return np.array([x, y, z], dtype=np.float64)


def norm(v: np.ndarray) -> float:
    """Euclidean norm"""
    return float(np.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2]))


def dot(a: np.ndarray, b: np.ndarray) -> float:
    """Dot product of two 3D vectors"""
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Cross product of two 3D vectors"""
    return np.array([
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0]
    ], dtype=np.float64)


def unit(v: np.ndarray) -> np.ndarray:
    """Normalise a vector

    Parameters
    ----------
    v : np.ndarray
        Vector to normalise

    Returns
    -------
    np.ndarray
        Unit vector with the direction of ``v``, or the zero vector if ``v``
        has zero length
    """
    n = norm(v)
    if n == 0.0:
        return np.zeros(3)
    return np.asarray(v, dtype=np.float64) / n


def cross_prod_unit(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Unit vector of the cross product ``a x b`` (zero if parallel)"""
    return unit(cross(a, b))


def stable_cross_prod(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Numerically stable cross product of two unit vectors

    Computes ``(b + a) x (b - a)`` which equals ``2 (a x b)`` but stays
    perpendicular to both inputs as they approach each other or their
    antipodes.

    Parameters
    ----------
    a : np.ndarray
        First unit vector
    b : np.ndarray
        Second unit vector

    Returns
    -------
    np.ndarray
        Vector perpendicular to ``a`` and ``b``
    """
    return cross(b + a, b - a)


def stable_cross_prod_unit(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Unit vector of :func:`stable_cross_prod` (zero if undefined)"""
    return unit(stable_cross_prod(a, b))


def orthogonal(v: np.ndarray) -> np.ndarray:
    """Unit vector orthogonal to ``v``

    ``v`` is crossed with the axis least aligned with its largest component:
    Z when x is largest, X when y is largest, Y otherwise.
    """
    ax, ay, az = abs(v[0]), abs(v[1]), abs(v[2])
    if ax > ay:
        axis = UNIT_Z if ax > az else UNIT_Y
    elif ay > az:
        axis = UNIT_X
    else:
        axis = UNIT_Y
    return cross_prod_unit(v, axis)


def orthogonal_to(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Unit vector orthogonal to both ``a`` and ``b``

    Uses the stable cross product, falling back to an arbitrary vector
    orthogonal to ``a`` when ``a`` and ``b`` are equal or antipodal.
    """
    o = stable_cross_prod_unit(a, b)
    if not o.any():
        logger.trace(f"orthogonal_to: parallel inputs {a} and {b}, using orthogonal({a})")
        return orthogonal(a)
    return o


def mean(vs: Sequence[np.ndarray]) -> np.ndarray:
    """Unit vector of the sum of the given vectors (zero if they cancel)"""
    if len(vs) == 0:
        return np.zeros(3)
    return unit(np.sum(np.asarray(vs, dtype=np.float64), axis=0))


def rotate(v: np.ndarray, axis: np.ndarray, angle: float) -> np.ndarray:
    """Rotate a vector about an axis (Rodrigues' formula)

    Parameters
    ----------
    v : np.ndarray
        Vector to rotate
    axis : np.ndarray
        Rotation axis (normalised internally)
    angle : float
        Right-handed rotation angle (rad)

    Returns
    -------
    np.ndarray
        Rotated vector
    """
    k = unit(axis)
    c = np.cos(angle)
    s = np.sin(angle)
    return v * c + cross(k, v) * s + k * dot(k, v) * (1.0 - c)


def eq_zero(f: float) -> bool:
    """True if ``f`` is zero within :data:`EPSILON`"""
    return abs(f) <= EPSILON


def eq(left: float, right: float) -> bool:
    """True if both values are equal within :data:`EPSILON`"""
    return abs(right - left) <= EPSILON


def lte(left: float, right: float) -> bool:
    """``left <= right`` within :data:`EPSILON`"""
    return left <= right or eq(left, right)


def gte(left: float, right: float) -> bool:
    """``left >= right`` within :data:`EPSILON`"""
    return left >= right or eq(left, right)


def vec3_eq(a: np.ndarray, b: np.ndarray) -> bool:
    """Component-wise :func:`eq`"""
    return eq(a[0], b[0]) and eq(a[1], b[1]) and eq(a[2], b[2])
