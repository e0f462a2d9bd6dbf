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

"""Angle and side primitives on unit vectors shared by the spherical modules"""

from typing import Optional

import numpy as np

from ..core.vector import UNIT_Y, cross, dot, eq_zero, norm, orthogonal_to, unit


def angle_radians_between(v1: np.ndarray, v2: np.ndarray,
                          vn: Optional[np.ndarray] = None) -> float:
    """
    Angle between two vectors

    Parameters
    ----------
    v1, v2 : np.ndarray
        Vectors
    vn : np.ndarray, optional
        Reference normal; if given, the angle is signed positive when
        ``v1 x v2`` points along ``vn`` and lies in (-pi, pi]

    Returns
    -------
    float
        Angle (rad), in [0, pi] when unsigned
    """
    p1xp2 = cross(v1, v2)
    sin_o = norm(p1xp2)
    if vn is not None and dot(p1xp2, vn) < 0.0:
        sin_o = -sin_o
    return float(np.arctan2(sin_o, dot(v1, v2)))


def easting(v: np.ndarray) -> np.ndarray:
    """Unit vector towards east at ``v``, +Y at the poles"""
    if abs(v[2]) == 1.0:
        return UNIT_Y
    return unit(np.array([-v[1], v[0], 0.0]))


def side_exact(v0: np.ndarray, v1: np.ndarray, v2: np.ndarray) -> float:
    """Dot product of ``v0`` with the normal of the great circle (v1, v2)"""
    return dot(v0, orthogonal_to(v1, v2))


def side(v0: np.ndarray, v1: np.ndarray, v2: np.ndarray) -> int:
    """
    Side of ``v0`` relative to the great circle from ``v1`` to ``v2``

    Returns
    -------
    int
        +1 if left, -1 if right, 0 if on the great circle (within EPSILON)
    """
    s = side_exact(v0, v1, v2)
    if eq_zero(s):
        return 0
    return 1 if s > 0.0 else -1
