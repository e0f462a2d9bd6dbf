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

"""Oriented minor arcs of great circle"""

from typing import Optional

import numpy as np

from ..core.constants import R2D
from ..core.vector import (
    cross_prod_unit,
    dot,
    eq_zero,
    gte,
    lte,
    orthogonal_to,
    stable_cross_prod_unit,
)
from ..coordinate.positions import NVector
from .base import angle_radians_between


class MinorArc:
    """
    Shortest great-circle path from ``start`` to ``end``

    Parameters
    ----------
    start : NVector
        First position
    end : NVector
        Second position, distinct from ``start``

    Notes
    -----
    The normal is ``orthogonal_to(start, end)``: positions with a positive
    dot product with it are left of the arc.
    """

    __slots__ = ('_start', '_end', '_normal')

    def __init__(self, start: NVector, end: NVector, normal: Optional[np.ndarray] = None):
        self._start = start
        self._end = end
        if normal is None:
            normal = orthogonal_to(start.as_vec3(), end.as_vec3())
        normal = np.asarray(normal, dtype=np.float64)
        normal.flags.writeable = False
        self._normal = normal

    @property
    def start(self) -> NVector:
        return self._start

    @property
    def end(self) -> NVector:
        return self._end

    @property
    def normal(self) -> np.ndarray:
        return self._normal

    def intersection(self, other: 'MinorArc') -> Optional[NVector]:
        """
        Intersection with another minor arc

        A position shared by both arcs, including a shared end point, is an
        intersection.

        Returns
        -------
        NVector or None
            None if the arcs do not intersect, or lie on the same great circle
        """
        i = stable_cross_prod_unit(self._normal, other._normal)
        if not i.any():
            return None
        potential = i if dot(self._start.as_vec3(), i) > 0.0 else -i
        if self.contains_vec3(potential) and other.contains_vec3(potential):
            return NVector(potential)
        return None

    def projection(self, p: NVector) -> Optional[NVector]:
        """
        Projection of ``p`` on this arc

        Returns
        -------
        NVector or None
            Closest position on the great circle if it lies within the arc,
            the start of the arc if ``p`` is a pole of the circle, None
            otherwise
        """
        n2 = stable_cross_prod_unit(p.as_vec3(), self._normal)
        if not n2.any():
            return self._start
        proj = orthogonal_to(self._normal, n2)
        if self.contains_vec3(proj):
            return NVector(proj)
        return None

    def contains_point(self, p: NVector) -> bool:
        """True if ``p`` is on the arc, end points included"""
        v = p.as_vec3()
        return eq_zero(dot(v, self._normal)) and self.contains_vec3(v)

    def contains_vec3(self, v: np.ndarray) -> bool:
        """True if ``v`` is between the planes through the end points and the normal"""
        n = self._normal
        return (gte(dot(v, cross_prod_unit(n, self._start.as_vec3())), 0.0)
                and lte(dot(v, cross_prod_unit(n, self._end.as_vec3())), 0.0))

    def side_of(self, p: NVector) -> int:
        """+1 if ``p`` is left of the arc, -1 if right, 0 if on its great circle"""
        s = dot(p.as_vec3(), self._normal)
        if eq_zero(s):
            return 0
        return -1 if s < 0.0 else 1

    def turn(self, other: 'MinorArc') -> float:
        """Signed turn (deg) from this arc to ``other``, positive to the left"""
        return self.turn_radians(other) * R2D

    def turn_radians(self, other: 'MinorArc') -> float:
        return angle_radians_between(self._normal, other._normal, self._end.as_vec3())

    def opposite(self) -> 'MinorArc':
        """Same arc travelled from end to start"""
        return MinorArc(self._end, self._start, -self._normal)

    def length(self, radius: float) -> float:
        """Length (m) on a sphere of the given radius"""
        return angle_radians_between(self._start.as_vec3(), self._end.as_vec3()) * radius

    def distance_to(self, p: NVector, radius: float) -> float:
        """
        Shortest surface distance (m) from ``p`` to any position of the arc

        The projection on the great circle is used when it falls within the
        arc, the nearest end point otherwise.
        """
        proj = self.projection(p)
        v = p.as_vec3()
        if proj is not None:
            return angle_radians_between(v, proj.as_vec3()) * radius
        d1 = angle_radians_between(v, self._start.as_vec3())
        d2 = angle_radians_between(v, self._end.as_vec3())
        return min(d1, d2) * radius

    def __eq__(self, other):
        if not isinstance(other, MinorArc):
            return NotImplemented
        return (self._start == other._start and self._end == other._end
                and bool(np.array_equal(self._normal, other._normal)))

    def __hash__(self):
        return hash((self._start, self._end))

    def __repr__(self):
        return f"MinorArc(start={self._start!r}, end={self._end!r})"
