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
Angle wrapping in degrees.

Longitudes are reported in one of two conventions, (-180, 180] or [0, 360),
and compass angles (bearings, azimuths) always in [0, 360).
"""

from numba import njit


@njit(cache=True)
def wrapTo360(angle):
    """
    Wrap an angle to [0, 360).

    Parameters
    ----------
    angle : float
        Angle in degrees

    Returns
    -------
    float
        Equivalent angle in [0, 360) degrees
    """
    a = angle % 360.0
    if a >= 360.0:
        a = 0.0
    return a


@njit(cache=True)
def wrapTo180(angle):
    """
    Wrap an angle to (-180, 180].

    Parameters
    ----------
    angle : float
        Angle in degrees

    Returns
    -------
    float
        Equivalent angle in (-180, 180] degrees
    """
    a = wrapTo360(angle)
    if a > 180.0:
        a -= 360.0
    return a


@njit(cache=True)
def wrapLatitude(latitude):
    """
    Clamp a latitude to [-90, 90].

    Parameters
    ----------
    latitude : float
        Latitude in degrees

    Returns
    -------
    float
        Latitude limited to [-90, 90] degrees
    """
    return min(90.0, max(-90.0, latitude))
