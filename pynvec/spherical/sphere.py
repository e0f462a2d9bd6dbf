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

"""Spherical surface and great-circle navigation

Angle-only computations are static methods; anything returning a length
uses the radius of the sphere instance. Bearings are compass angles in
degrees: 0 = north, 90 = east, 180 = south, 270 = west.

Examples
--------
>>> from pynvec.coordinate.positions import NVector
>>> from pynvec.spherical.sphere import Sphere
>>> p1 = NVector.from_lat_long_degrees(50.066389, -5.714722)
>>> p2 = NVector.from_lat_long_degrees(58.643889, -3.07)
>>> round(Sphere.EARTH.distance(p1, p2), 3)
968853.666
"""

import logging
from typing import Optional, Sequence

import numpy as np

from ..attitude.wrap import wrapTo360
from ..core.constants import D2R, EPSILON, R2D, R_EARTH, R_MOON
from ..core.exceptions import CoincidentOrAntipodalPoints
from ..core.vector import (
    NEG_UNIT_Y,
    cross,
    cross_prod_unit,
    norm,
    orthogonal_to,
    stable_cross_prod,
    unit,
)
from ..coordinate.positions import GeocentricPosition, GeodeticPosition, NVector
from ..coordinate.surface import Surface
from .base import angle_radians_between, easting, side, side_exact

logger = logging.getLogger(__name__)


class Sphere(Surface):
    """
    Sphere of a given radius

    Parameters
    ----------
    radius : float
        Radius (m), must be positive

    Attributes
    ----------
    EARTH : Sphere
        Conventional mean Earth radius, 6371000.8 m
    MOON : Sphere
        Mean lunar radius, 1737400 m
    """

    EARTH: 'Sphere'
    MOON: 'Sphere'

    def __init__(self, radius: float):
        if not np.isfinite(radius) or radius <= 0.0:
            raise ValueError(f"Invalid sphere radius: {radius}")
        self._radius = float(radius)

    @property
    def radius(self) -> float:
        return self._radius

    @property
    def mean_radius(self) -> float:
        return self._radius

    @property
    def equatorial_radius(self) -> float:
        return self._radius

    def radius_at(self, latitude: float) -> tuple[float, float]:
        return self._radius, self._radius

    def geodetic_to_geocentric(self, position: GeodeticPosition) -> GeocentricPosition:
        v = (self._radius + position.height) * position.nvector.as_vec3()
        return GeocentricPosition.from_vec3(v)

    def geocentric_to_geodetic(self, position: GeocentricPosition) -> GeodeticPosition:
        v = position.as_vec3()
        return GeodeticPosition(NVector(v), norm(v) - self._radius)

    def __eq__(self, other):
        if not isinstance(other, Sphere):
            return NotImplemented
        return self._radius == other._radius

    def __hash__(self):
        return hash(self._radius)

    def __repr__(self):
        return f"Sphere(radius={self._radius!r})"

    # Angle-only computations

    @staticmethod
    def angle_radians(p1: NVector, p2: NVector) -> float:
        """Angle between two positions (rad), the distance on the unit sphere"""
        return angle_radians_between(p1.as_vec3(), p2.as_vec3())

    @staticmethod
    def angle(p1: NVector, p2: NVector) -> float:
        """Angle between two positions (deg)"""
        return angle_radians_between(p1.as_vec3(), p2.as_vec3()) * R2D

    @staticmethod
    def is_great_circle(p1: NVector, p2: NVector) -> bool:
        """True if a unique great circle passes through both positions"""
        return p1 != p2 and not p1.is_antipode_of(p2)

    @staticmethod
    def initial_bearing(p1: NVector, p2: NVector) -> float:
        """
        Bearing from ``p1`` towards ``p2`` (compass angle in degrees)

        Raises
        ------
        CoincidentOrAntipodalPoints
            If the positions are equal or antipodal
        """
        if not Sphere.is_great_circle(p1, p2):
            logger.debug(f"initial_bearing: no great circle through {p1} and {p2}")
            raise CoincidentOrAntipodalPoints("bearing undefined between equal or antipodal positions")
        return float(wrapTo360(_initial_bearing_radians(p1.as_vec3(), p2.as_vec3()) * R2D))

    @staticmethod
    def final_bearing(p1: NVector, p2: NVector) -> float:
        """
        Bearing arriving at ``p2`` from ``p1`` (compass angle in degrees)

        Raises
        ------
        CoincidentOrAntipodalPoints
            If the positions are equal or antipodal
        """
        if not Sphere.is_great_circle(p1, p2):
            logger.debug(f"final_bearing: no great circle through {p1} and {p2}")
            raise CoincidentOrAntipodalPoints("bearing undefined between equal or antipodal positions")
        b = _initial_bearing_radians(p2.as_vec3(), p1.as_vec3()) + np.pi
        return float(wrapTo360(b * R2D))

    @staticmethod
    def interpolated_position(p1: NVector, p2: NVector, f: float,
                              extrapolate: bool = True) -> Optional[NVector]:
        """
        Position at fraction ``f`` of the way from ``p1`` to ``p2``

        Parameters
        ----------
        p1, p2 : NVector
            Start and end positions
        f : float
            Fraction; 0 gives ``p1``, 1 gives ``p2``
        extrapolate : bool
            Accept fractions outside [0, 1]

        Returns
        -------
        NVector or None
            None if the positions are antipodal, or ``f`` is outside [0, 1]
            and ``extrapolate`` is False
        """
        if p1.is_antipode_of(p2):
            return None
        if not extrapolate and not 0.0 <= f <= 1.0:
            return None
        if f == 0.0:
            return p1
        if f == 1.0:
            return p2
        v1 = p1.as_vec3()
        v2 = p2.as_vec3()
        distance = f * angle_radians_between(v1, v2)
        direction = cross_prod_unit(stable_cross_prod(v1, v2), v1)
        return NVector(v1 * np.cos(distance) + direction * np.sin(distance))

    @staticmethod
    def mean_position(positions: Sequence[NVector]) -> Optional[NVector]:
        """
        Geographic mean of positions

        Returns
        -------
        NVector or None
            None if ``positions`` is empty, contains a pair of antipodal
            positions or sums to (nearly) zero
        """
        if len(positions) == 0:
            return None
        if len(positions) == 1:
            return positions[0]
        unique = set(positions)
        if any(p.antipode() in unique for p in positions):
            logger.debug("mean_position: antipodal positions in input")
            return None
        total = np.sum([p.as_vec3() for p in positions], axis=0)
        if norm(total) < EPSILON:
            return None
        return NVector(total)

    @staticmethod
    def triangle_mean_position(p1: NVector, p2: NVector, p3: NVector) -> Optional[NVector]:
        """Mean of the three vertices of a triangle, None if they sum to zero"""
        total = p1.as_vec3() + p2.as_vec3() + p3.as_vec3()
        if not total.any():
            return None
        return NVector(total)

    @staticmethod
    def position_on_great_circle(p1: NVector, p2: NVector, angle_radians: float) -> NVector:
        """Position at ``angle_radians`` from ``p1`` on the great circle towards ``p2``"""
        v1 = p1.as_vec3()
        direction = cross_prod_unit(orthogonal_to(v1, p2.as_vec3()), v1)
        return NVector(v1 * np.cos(angle_radians) + direction * np.sin(angle_radians))

    @staticmethod
    def turn(a: NVector, b: NVector, c: NVector) -> float:
        """
        Signed turn angle (deg) from the great circle (a, b) to (b, c)

        Positive for a left turn, negative for a right turn, 0 if the
        positions are collinear.
        """
        return Sphere.turn_radians(a, b, c) * R2D

    @staticmethod
    def turn_radians(a: NVector, b: NVector, c: NVector) -> float:
        n1 = orthogonal_to(a.as_vec3(), b.as_vec3())
        n2 = orthogonal_to(b.as_vec3(), c.as_vec3())
        return angle_radians_between(n1, n2, b.as_vec3())

    @staticmethod
    def side(p0: NVector, p1: NVector, p2: NVector) -> int:
        """-1 if ``p0`` is right of (p1, p2), +1 if left, 0 if on the great circle"""
        return side(p0.as_vec3(), p1.as_vec3(), p2.as_vec3())

    @staticmethod
    def side_exact(p0: NVector, p1: NVector, p2: NVector) -> float:
        """Signed dot product behind :meth:`side` (negative means right)"""
        return side_exact(p0.as_vec3(), p1.as_vec3(), p2.as_vec3())

    # Length computations

    def distance(self, p1: NVector, p2: NVector) -> float:
        """Surface distance (m)"""
        return angle_radians_between(p1.as_vec3(), p2.as_vec3()) * self._radius

    def destination(self, p: NVector, bearing: float, distance: float) -> NVector:
        """
        Position reached from ``p`` travelling ``distance`` on an initial bearing

        Parameters
        ----------
        p : NVector
            Start position
        bearing : float
            Initial bearing (deg)
        distance : float
            Distance (m), negative travels backwards

        Returns
        -------
        NVector
            Destination
        """
        if distance == 0.0:
            return p
        v = p.as_vec3()
        ed = easting(v)
        nd = cross(v, ed)
        ta = distance / self._radius
        b = bearing * D2R
        direction = nd * np.cos(b) + ed * np.sin(b)
        return NVector(unit(v * np.cos(ta) + direction * np.sin(ta)))

    def cross_track_distance(self, p: NVector, great_circle) -> float:
        """
        Signed distance (m) from ``p`` to a great circle

        Positive if ``p`` is right of the great circle direction, negative
        if left.
        """
        angle = angle_radians_between(great_circle.normal, p.as_vec3())
        return (angle - np.pi / 2.0) * self._radius

    def along_track_distance(self, p: NVector, arc) -> float:
        """
        Signed distance (m) from the start of a minor arc to the projection of
        ``p`` on its great circle

        Negative if the projection is behind the start of the arc.
        """
        n = arc.normal
        projected = cross(cross(n, p.as_vec3()), n)
        angle = angle_radians_between(arc.start.as_vec3(), projected, n)
        return angle * self._radius


def _initial_bearing_radians(v1: np.ndarray, v2: np.ndarray) -> float:
    gc1 = cross(v1, v2)
    if abs(v1[2]) == 1.0:
        gc2 = NEG_UNIT_Y
    else:
        gc2 = np.array([v1[1], -v1[0], 0.0])
    return angle_radians_between(gc1, gc2, v1)


Sphere.EARTH = Sphere(R_EARTH)
Sphere.MOON = Sphere(R_MOON)
