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

"""Direction Cosine Matrix (DCM) of local frames from an n-vector

Matrices rotate local frame coordinates to Earth-fixed (E) coordinates:
``v_E = R_EF @ v_F``. Their transpose rotates the other way.
"""

import numpy as np

from ..attitude.euler import xyz2r, zyx2r
from ..core.constants import D2R
from ..core.vector import UNIT_Y, UNIT_Z, cross, unit
from .positions import LatLong, NVector

# Axes of the Earth-fixed frame expressed in the frame used by xyz2r
_R_EE = np.array([
    [0.0, 0.0, -1.0],
    [0.0, 1.0, 0.0],
    [1.0, 0.0, 0.0]
], dtype=np.float64)


def _as_vec3(n_e) -> np.ndarray:
    if isinstance(n_e, NVector):
        return n_e.as_vec3()
    return np.asarray(n_e, dtype=np.float64)


def _east(n_e: np.ndarray) -> np.ndarray:
    """East axis, the y axis of the Earth-fixed frame at the poles"""
    e = cross(UNIT_Z, n_e)
    if not e.any():
        return UNIT_Y.copy()
    return unit(e)


def n_e2_r_en(n_e) -> np.ndarray:
    """
    North-East-Down to Earth-fixed direction cosine matrix

    Parameters:
    -----------
    n_e : NVector or np.ndarray
        Horizontal position of the frame origin

    Returns:
    --------
    R_EN : np.ndarray
        NED->E direction cosine matrix (3x3), columns are the north, east
        and down axes
    """
    v = _as_vec3(n_e)
    rd = -v
    re = _east(v)
    rn = cross(re, rd)
    return np.column_stack((rn, re, rd))


def n_e2_r_enu(n_e) -> np.ndarray:
    """
    East-North-Up to Earth-fixed direction cosine matrix

    Parameters:
    -----------
    n_e : NVector or np.ndarray
        Horizontal position of the frame origin

    Returns:
    --------
    R_EU : np.ndarray
        ENU->E direction cosine matrix (3x3), columns are the east, north
        and up axes
    """
    v = _as_vec3(n_e)
    ru = v.copy()
    re = _east(v)
    rn = cross(ru, re)
    return np.column_stack((re, rn, ru))


def n_e_and_wa2_r_el(n_e, wander_azimuth: float) -> np.ndarray:
    """
    Local level (wander azimuth) to Earth-fixed direction cosine matrix

    Parameters:
    -----------
    n_e : NVector or np.ndarray
        Horizontal position of the frame origin
    wander_azimuth : float
        Angle between the x axis of the frame and north (deg)

    Returns:
    --------
    R_EL : np.ndarray
        L->E direction cosine matrix (3x3)
    """
    ll = LatLong.from_nvector(NVector(_as_vec3(n_e)))
    r = xyz2r(ll.longitude * D2R, -ll.latitude * D2R, wander_azimuth * D2R)
    return _R_EE @ r


def n_e_and_ypr2_r_eb(n_e, yaw: float, pitch: float, roll: float) -> np.ndarray:
    """
    Body to Earth-fixed direction cosine matrix

    The body attitude is given relative to north-east-down by a z-y-x
    rotation sequence.

    Parameters:
    -----------
    n_e : NVector or np.ndarray
        Horizontal position of the body
    yaw, pitch, roll : float
        Rotations about z, the new y and the newest x (deg)

    Returns:
    --------
    R_EB : np.ndarray
        B->E direction cosine matrix (3x3)
    """
    r_nb = zyx2r(yaw * D2R, pitch * D2R, roll * D2R)
    return n_e2_r_en(n_e) @ r_nb
