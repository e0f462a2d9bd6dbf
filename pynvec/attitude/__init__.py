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
Attitude module for rotation matrices and angle wrapping.

This module provides functions for converting between Euler angles and
rotation matrices, and for normalising angles:
- 'zyx' angles (yaw-pitch-roll) to and from rotation matrices
- 'xyz' angles to and from rotation matrices
- Longitude and compass angle wrapping

All rotations assume right-hand coordinate frames. Functions are compiled
with Numba.

References:
    K. Gade (2010): A Non-singular Horizontal Position Representation,
    The Journal of Navigation, Volume 63, Issue 03, pp 395-417
"""

from .euler import r2xyz, r2zyx, xyz2r, zyx2r
from .wrap import wrapLatitude, wrapTo180, wrapTo360

__all__ = [
    'zyx2r', 'xyz2r', 'r2zyx', 'r2xyz',
    'wrapTo180', 'wrapTo360', 'wrapLatitude'
]
