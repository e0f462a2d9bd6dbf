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

"""Great circles defined by their unit normal"""

import logging

import numpy as np

from ..core.constants import D2R
from ..core.exceptions import CoincidentOrAntipodalPoints
from ..core.vector import cross, norm, orthogonal, orthogonal_to, stable_cross_prod_unit
from ..coordinate.positions import NVector
from .base import easting

logger = logging.getLogger(__name__)


class GreatCircle:
    """
    Great circle, the intersection of the sphere with a plane through its centre

    The circle is oriented: walking along it, the normal points to the left.

    Parameters
    ----------
    normal : np.ndarray
        Unit normal of the circle plane
    """

    __slots__ = ('_normal',)

    def __init__(self, normal: np.ndarray):
        n = np.array(normal, dtype=np.float64)
        n.flags.writeable = False
        self._normal = n

    @classmethod
    def from_points(cls, p1: NVector, p2: NVector) -> 'GreatCircle':
        """
        Great circle passing by ``p1`` then ``p2``

        Raises
        ------
        CoincidentOrAntipodalPoints
            If the positions are equal or antipodal
        """
        if p1 == p2 or p1.is_antipode_of(p2):
            logger.debug(f"GreatCircle.from_points: degenerate pair {p1}, {p2}")
            raise CoincidentOrAntipodalPoints("no unique great circle through equal or antipodal positions")
        return cls(orthogonal_to(p1.as_vec3(), p2.as_vec3()))

    @classmethod
    def from_heading(cls, p: NVector, bearing: float) -> 'GreatCircle':
        """
        Great circle passing by ``p`` heading on ``bearing``

        Parameters
        ----------
        p : NVector
            Position on the circle
        bearing : float
            Compass angle (deg)
        """
        v = p.as_vec3()
        e = easting(v)
        n = cross(v, e)
        b = bearing * D2R
        normal = n * (np.sin(b) / norm(n)) - e * (np.cos(b) / norm(e))
        return cls(normal)

    @property
    def normal(self) -> np.ndarray:
        return self._normal

    def projection(self, p: NVector) -> NVector:
        """
        Projection of ``p`` on the great circle

        If ``p`` is a pole of the circle every point is equally close and an
        arbitrary point of the circle is returned.
        """
        n2 = stable_cross_prod_unit(p.as_vec3(), self._normal)
        if not n2.any():
            return NVector(orthogonal(p.as_vec3()))
        return NVector(orthogonal_to(self._normal, n2))

    def __eq__(self, other):
        if not isinstance(other, GreatCircle):
            return NotImplemented
        return bool(np.array_equal(self._normal, other._normal))

    def __hash__(self):
        return hash(tuple(self._normal))

    def __repr__(self):
        return f"GreatCircle(normal={self._normal.tolist()!r})"
