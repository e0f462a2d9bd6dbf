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

"""Spherical caps: the positions within an angular radius of a centre"""

import logging

import numpy as np

from ..core.exceptions import CollinearPoints
from ..core.vector import UNIT_Z, orthogonal, orthogonal_to, rotate, unit
from ..coordinate.positions import NVector
from .chord_length import ChordLength
from .sphere import Sphere

logger = logging.getLogger(__name__)


class Cap:
    """
    Cap of the unit sphere

    Parameters
    ----------
    centre : NVector
        Centre of the cap
    radius : ChordLength
        Radius as the chord between the centre and the boundary

    Attributes
    ----------
    EMPTY : Cap
        Cap containing no position
    FULL : Cap
        Cap containing every position
    """

    __slots__ = ('_centre', '_radius')

    EMPTY: 'Cap'
    FULL: 'Cap'

    def __init__(self, centre: NVector, radius: ChordLength):
        self._centre = centre
        self._radius = radius

    @classmethod
    def from_centre_and_radius(cls, centre: NVector, radius: float) -> 'Cap':
        """Cap of angular ``radius`` (deg) around ``centre``"""
        return cls(centre, ChordLength.from_angle(radius))

    @classmethod
    def from_centre_and_boundary_point(cls, centre: NVector, boundary_point: NVector) -> 'Cap':
        return cls(centre, ChordLength.new(centre, boundary_point))

    @classmethod
    def from_triangle(cls, a: NVector, b: NVector, c: NVector) -> 'Cap':
        """
        Smallest cap whose boundary passes through the three positions

        Raises
        ------
        CollinearPoints
            If the positions lie on a common great circle
        """
        s = Sphere.side(a, b, c)
        if s == 0:
            logger.debug(f"Cap.from_triangle: collinear {a}, {b}, {c}")
            raise CollinearPoints("cannot build a cap from collinear positions")
        clockwise = s < 0
        v1 = a.as_vec3()
        v2 = c.as_vec3() if clockwise else b.as_vec3()
        v3 = b.as_vec3() if clockwise else c.as_vec3()
        centre = NVector(orthogonal_to(v2 - v1, v3 - v1))
        radius = max(ChordLength.new(a, centre), ChordLength.new(b, centre),
                     ChordLength.new(c, centre))
        return cls(centre, radius)

    @property
    def centre(self) -> NVector:
        return self._centre

    @property
    def chord_radius(self) -> ChordLength:
        return self._radius

    @property
    def radius(self) -> float:
        """Angular radius (deg); negative for the empty cap"""
        return self._radius.to_angle()

    def radius_radians(self) -> float:
        return self._radius.to_angle_radians()

    def is_empty(self) -> bool:
        return self._radius == ChordLength.NEGATIVE

    def is_full(self) -> bool:
        return self._radius == ChordLength.MAX

    def complement(self) -> 'Cap':
        """Cap of the positions not in this cap (boundary shared)"""
        if self.is_empty():
            return Cap.FULL
        if self.is_full():
            return Cap.EMPTY
        return Cap(self._centre.antipode(),
                   ChordLength(ChordLength.MAX_LENGTH2 - self._radius.length2))

    def contains_point(self, p: NVector) -> bool:
        """True if ``p`` is in the cap, boundary included"""
        return ChordLength.new(self._centre, p) <= self._radius

    def interior_contains_point(self, p: NVector) -> bool:
        """True if ``p`` is strictly inside the cap"""
        return ChordLength.new(self._centre, p) < self._radius

    def contains_cap(self, other: 'Cap') -> bool:
        if self.is_full() or other.is_empty():
            return True
        return (self._radius.length2
                >= ChordLength.new(self._centre, other._centre).length2 + other._radius.length2)

    def union(self, other: 'Cap') -> 'Cap':
        """Smallest cap containing both caps"""
        if self._radius < other._radius:
            return other.union(self)
        if self.is_full() or other.is_empty():
            return self
        self_radius = self.radius_radians()
        other_radius = other.radius_radians()
        distance = Sphere.angle_radians(self._centre, other._centre)
        if self_radius >= distance + other_radius:
            return self
        union_radius = 0.5 * (distance + self_radius + other_radius)
        ang = 0.5 * (distance - self_radius + other_radius)
        centre = Sphere.position_on_great_circle(self._centre, other._centre, ang)
        return Cap(centre, ChordLength.from_angle_radians(union_radius))

    def boundary(self, nb_vertices: int) -> list[NVector]:
        """
        Positions evenly spaced on the boundary, clockwise seen from outside

        Parameters
        ----------
        nb_vertices : int
            Number of positions, at least 3 are returned

        Returns
        -------
        list of NVector
            Boundary positions, empty for the empty and full caps
        """
        if self.is_empty() or self.is_full():
            return []
        c = self._centre.as_vec3()
        r = self.radius_radians()
        first = unit(c * np.cos(r) + orthogonal(c) * np.sin(r))
        n = max(nb_vertices, 3)
        inc = 2.0 * np.pi / n
        return [NVector(rotate(first, c, -i * inc)) for i in range(n)]

    def __eq__(self, other):
        if not isinstance(other, Cap):
            return NotImplemented
        return self._centre == other._centre and self._radius == other._radius

    def __hash__(self):
        return hash((self._centre, self._radius))

    def __repr__(self):
        return f"Cap(centre={self._centre!r}, radius={self._radius!r})"


Cap.EMPTY = Cap(NVector(UNIT_Z), ChordLength.NEGATIVE)
Cap.FULL = Cap(NVector(UNIT_Z), ChordLength.MAX)
