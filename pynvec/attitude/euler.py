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

"""
Rotation matrices from Euler angles and back.

Two sequences are supported, both following the n-vector conventions:

- 'zyx': rotate about z, then the new y, then the new x. With z = yaw,
  y = pitch and x = roll this is the usual body attitude.
- 'xyz': rotate about x, then the new y, then the new z. Used for the
  wander-azimuth (local level) frame.

All angles are in radians.

References:
    K. Gade (2010): A Non-singular Horizontal Position Representation,
    The Journal of Navigation, Volume 63, Issue 03, pp 395-417
"""

import numpy as np
from numba import njit


@njit(cache=True, fastmath=True)
def zyx2r(z, y, x):
    """
    Rotation matrix from 'zyx' angles.

    Parameters
    ----------
    z : float
        Rotation about z (yaw) in radians
    y : float
        Rotation about the new y (pitch) in radians
    x : float
        Rotation about the newest x (roll) in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Rotation matrix (direction cosine matrix) from the rotated frame
        to the original one
    """
    cx = np.cos(x)
    sx = np.sin(x)
    cy = np.cos(y)
    sy = np.sin(y)
    cz = np.cos(z)
    sz = np.sin(z)
    R = np.array([[cz*cy, -sz*cx + cz*sy*sx, sz*sx + cz*sy*cx],
                  [sz*cy, cz*cx + sz*sy*sx, -cz*sx + sz*sy*cx],
                  [-sy, cy*sx, cy*cx]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def xyz2r(x, y, z):
    """
    Rotation matrix from 'xyz' angles.

    Parameters
    ----------
    x : float
        Rotation about x in radians
    y : float
        Rotation about the new y in radians
    z : float
        Rotation about the newest z in radians

    Returns
    -------
    R : ndarray, shape (3, 3)
        Rotation matrix
    """
    cx = np.cos(x)
    sx = np.sin(x)
    cy = np.cos(y)
    sy = np.sin(y)
    cz = np.cos(z)
    sz = np.sin(z)
    R = np.array([[cy*cz, -cy*sz, sy],
                  [sy*sx*cz + cx*sz, -sy*sx*sz + cx*cz, -cy*sx],
                  [-sy*cx*cz + sx*sz, sy*cx*sz + sx*cz, cy*cx]],
                 dtype=np.double)
    return R


@njit(cache=True, fastmath=True)
def r2xyz(R):
    """
    Angles about new axes in the 'xyz' order from a rotation matrix.

    The y angle is computed from as many matrix elements as possible to
    average out numerical errors, and lies in [-pi/2, pi/2].

    Parameters
    ----------
    R : ndarray, shape (3, 3)
        Rotation matrix

    Returns
    -------
    xyz : ndarray, shape (3,)
        Angles [x, y, z] in radians
    """
    v00 = R[0, 0]
    v01 = R[0, 1]
    v12 = R[1, 2]
    v22 = R[2, 2]
    z = -np.arctan2(v01, v00)
    x = -np.arctan2(v12, v22)
    sy = R[0, 2]
    cy = np.sqrt((v00*v00 + v01*v01 + v12*v12 + v22*v22) / 2.0)
    y = np.arctan2(sy, cy)
    return np.array([x, y, z], dtype=np.double)


@njit(cache=True, fastmath=True)
def r2zyx(R):
    """
    Angles about new axes in the 'zyx' order from a rotation matrix.

    Parameters
    ----------
    R : ndarray, shape (3, 3)
        Rotation matrix

    Returns
    -------
    zyx : ndarray, shape (3,)
        Angles [z, y, x] (yaw, pitch, roll) in radians
    """
    xyz = r2xyz(R.T.copy())
    return np.array([-xyz[2], -xyz[1], -xyz[0]], dtype=np.double)
