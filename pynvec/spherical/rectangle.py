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

"""Latitude/longitude rectangles

A rectangle is the product of a latitude interval and a longitude interval,
both in degrees. A longitude interval whose low bound is greater than its
high bound wraps across the anti-meridian (it is "inverted").
"""

import math
from dataclasses import dataclass
from functools import reduce
from typing import Iterable, Union

import numpy as np

from ..core.constants import EPSILON, R2D
from ..core.vector import dot, eq_zero, gte, lte
from ..coordinate.positions import LatLong, NVector
from .minor_arc import MinorArc


def _cmp(a: float, b: float) -> int:
    return (a > b) - (a < b)


@dataclass(frozen=True)
class LatitudeInterval:
    """Closed latitude interval [lo, hi] (deg), empty if lo > hi"""
    lo: float
    hi: float

    @classmethod
    def empty(cls) -> 'LatitudeInterval':
        return cls(R2D, 0.0)

    @classmethod
    def full(cls) -> 'LatitudeInterval':
        return cls(-90.0, 90.0)

    @classmethod
    def from_minor_arc(cls, arc: MinorArc, start: LatLong, end: LatLong) -> 'LatitudeInterval':
        """Latitudes covered by the arc, including its northern or southern extremum"""
        n = arc.normal
        m = np.array([n[1], -n[0], 0.0])
        ms = dot(m, arc.start.as_vec3())
        me = dot(m, arc.end.as_vec3())
        lo = min(start.latitude, end.latitude)
        hi = max(start.latitude, end.latitude)
        if ms * me < 0.0 or eq_zero(ms) or eq_zero(me):
            extremum = math.atan2(math.sqrt(n[0] * n[0] + n[1] * n[1]), abs(n[2])) * R2D
            if lte(ms, 0.0) and gte(me, 0.0):
                hi = extremum
            if lte(me, 0.0) and gte(ms, 0.0):
                lo = -extremum
        return cls(lo, hi)

    def is_empty(self) -> bool:
        return self.lo > self.hi

    def is_full(self) -> bool:
        return self.lo == -90.0 and self.hi == 90.0

    def contains_lat(self, latitude: float) -> bool:
        return self.lo <= latitude <= self.hi

    def contains_int(self, other: 'LatitudeInterval') -> bool:
        if other.is_empty():
            return True
        return other.lo >= self.lo and other.hi <= self.hi

    def intersects(self, other: 'LatitudeInterval') -> bool:
        if self.is_empty() or other.is_empty():
            return False
        return other.lo <= self.hi and other.hi >= self.lo

    def union(self, other: 'LatitudeInterval') -> 'LatitudeInterval':
        if self.is_empty():
            return other
        if other.is_empty():
            return self
        return LatitudeInterval(min(self.lo, other.lo), max(self.hi, other.hi))

    def expand(self, margin: float) -> 'LatitudeInterval':
        if self.is_empty():
            return self
        return LatitudeInterval(max(-90.0, self.lo - margin), min(90.0, self.hi + margin))


@dataclass(frozen=True)
class LongitudeInterval:
    """Longitude interval from lo eastwards to hi (deg)"""
    lo: float
    hi: float

    @classmethod
    def empty(cls) -> 'LongitudeInterval':
        return cls(180.0, -180.0)

    @classmethod
    def full(cls) -> 'LongitudeInterval':
        return cls(-180.0, 180.0)

    @classmethod
    def from_minor_arc(cls, start: LatLong, end: LatLong) -> 'LongitudeInterval':
        s = cls.normalised(start.longitude)
        e = cls.normalised(end.longitude)
        if cls.positive_distance(s, e) <= 180.0:
            return cls(s, e)
        return cls(e, s)

    @staticmethod
    def normalised(longitude: float) -> float:
        """Map -180 to 180"""
        return 180.0 if longitude == -180.0 else longitude

    @staticmethod
    def positive_distance(a: float, b: float) -> float:
        """Eastward distance from ``a`` to ``b`` in [0, 360)"""
        d = b - a
        if d >= 0.0:
            return d
        return (b + 180.0) - (a - 180.0)

    def is_empty(self) -> bool:
        return self.lo == 180.0 and self.hi == -180.0

    def is_full(self) -> bool:
        return self.lo == -180.0 and self.hi == 180.0

    def is_inverted(self) -> bool:
        return self.lo > self.hi

    def length(self) -> float:
        """Eastward extent (deg), negative if empty"""
        if self.is_empty():
            return -1.0
        d = self.hi - self.lo
        return d if d >= 0.0 else d + 360.0

    def contains_lng(self, longitude: float) -> bool:
        lng = self.normalised(longitude)
        if self.is_inverted():
            return (lng >= self.lo or lng <= self.hi) and not self.is_empty()
        return self.lo <= lng <= self.hi

    def contains_int(self, other: 'LongitudeInterval') -> bool:
        if self.is_inverted():
            if other.is_inverted():
                return other.lo >= self.lo and other.hi <= self.hi
            return (other.lo >= self.lo or other.hi <= self.hi) and not self.is_empty()
        if other.is_inverted():
            return self.is_full() or other.is_empty()
        return other.lo >= self.lo and other.hi <= self.hi

    def intersects(self, other: 'LongitudeInterval') -> bool:
        if self.is_empty() or other.is_empty():
            return False
        if self.is_inverted():
            return other.is_inverted() or other.lo <= self.hi or other.hi >= self.lo
        if other.is_inverted():
            return other.lo <= self.hi or other.hi >= self.lo
        return other.lo <= self.hi and other.hi >= self.lo

    def union(self, other: 'LongitudeInterval') -> 'LongitudeInterval':
        """Smallest interval containing both intervals"""
        if other.is_empty():
            return self
        if self.contains_lng(other.lo):
            if self.contains_lng(other.hi):
                if self.contains_int(other):
                    return self
                return LongitudeInterval.full()
            return LongitudeInterval(self.lo, other.hi)
        if self.contains_lng(other.hi):
            return LongitudeInterval(other.lo, self.hi)
        if self.is_empty() or other.contains_lng(self.lo):
            return other
        # disjoint: join through the shorter gap
        dlo = self.positive_distance(other.hi, self.lo)
        dhi = self.positive_distance(self.hi, other.lo)
        if dlo < dhi:
            return LongitudeInterval(other.lo, self.hi)
        return LongitudeInterval(self.lo, other.hi)

    def expand(self, margin: float) -> 'LongitudeInterval':
        if self.is_empty():
            return self
        if self.length() + 2.0 * margin + 2.0 * EPSILON >= 360.0:
            return LongitudeInterval.full()
        lo = math.remainder(self.lo - margin, 360.0)
        hi = math.remainder(self.hi + margin, 360.0)
        if lo <= -180.0:
            lo = 180.0
        return LongitudeInterval(lo, hi)


class Rectangle:
    """
    Latitude/longitude rectangle

    Parameters
    ----------
    lat : LatitudeInterval
        Latitude interval (deg)
    lng : LongitudeInterval
        Longitude interval (deg)

    Examples
    --------
    >>> r = Rectangle.from_nesw(10.0, 20.0, -10.0, -20.0)
    >>> r.contains(LatLong(0.0, 0.0))
    True
    """

    __slots__ = ('_lat', '_lng')

    def __init__(self, lat: LatitudeInterval, lng: LongitudeInterval):
        self._lat = lat
        self._lng = lng

    @classmethod
    def empty(cls) -> 'Rectangle':
        return cls(LatitudeInterval.empty(), LongitudeInterval.empty())

    @classmethod
    def full(cls) -> 'Rectangle':
        return cls(LatitudeInterval.full(), LongitudeInterval.full())

    @classmethod
    def from_nesw(cls, north: float, east: float, south: float, west: float) -> 'Rectangle':
        return cls(LatitudeInterval(south, north), LongitudeInterval(west, east))

    @classmethod
    def from_minor_arc(cls, arc: MinorArc) -> 'Rectangle':
        """Smallest rectangle containing every position of the arc"""
        start = LatLong.from_nvector(arc.start)
        end = LatLong.from_nvector(arc.end)
        return cls(LatitudeInterval.from_minor_arc(arc, start, end),
                   LongitudeInterval.from_minor_arc(start, end))

    @classmethod
    def from_union(cls, rectangles: Iterable['Rectangle']) -> 'Rectangle':
        """Smallest rectangle containing all the given rectangles"""
        return reduce(lambda acc, r: acc.union(r), rectangles, cls.empty())

    @property
    def latitude_interval(self) -> LatitudeInterval:
        return self._lat

    @property
    def longitude_interval(self) -> LongitudeInterval:
        return self._lng

    def south_west(self) -> LatLong:
        return LatLong(self._lat.lo, self._lng.lo)

    def north_east(self) -> LatLong:
        return LatLong(self._lat.hi, self._lng.hi)

    def contains_point(self, p: LatLong) -> bool:
        return self._lat.contains_lat(p.latitude) and self._lng.contains_lng(p.longitude)

    def contains(self, p: Union[LatLong, NVector]) -> bool:
        """True if the position (LatLong or NVector) is in the rectangle"""
        if isinstance(p, NVector):
            p = LatLong.from_nvector(p)
        return self.contains_point(p)

    def contains_rectangle(self, other: 'Rectangle') -> bool:
        return self._lat.contains_int(other._lat) and self._lng.contains_int(other._lng)

    def intersects(self, other: 'Rectangle') -> bool:
        return self._lat.intersects(other._lat) and self._lng.intersects(other._lng)

    def union(self, other: 'Rectangle') -> 'Rectangle':
        return Rectangle(self._lat.union(other._lat), self._lng.union(other._lng))

    def expand(self, margin: float) -> 'Rectangle':
        """Rectangle grown by ``margin`` (deg) on every side, latitude clamped to the poles"""
        return Rectangle(self._lat.expand(margin), self._lng.expand(margin))

    def is_full(self) -> bool:
        return self.is_latitude_full() and self.is_longitude_full()

    def is_latitude_full(self) -> bool:
        return self._lat.is_full()

    def is_longitude_full(self) -> bool:
        return self._lng.is_full()

    def is_empty(self) -> bool:
        return self.is_latitude_empty() and self.is_longitude_empty()

    def is_latitude_empty(self) -> bool:
        return self._lat.is_empty()

    def is_longitude_empty(self) -> bool:
        return self._lng.is_empty()

    def expand_to_north_pole(self) -> 'Rectangle':
        """Include the north pole; the longitude interval becomes full"""
        return Rectangle(LatitudeInterval(self._lat.lo, 90.0), LongitudeInterval.full())

    def expand_to_south_pole(self) -> 'Rectangle':
        """Include the south pole; the longitude interval becomes full"""
        return Rectangle(LatitudeInterval(-90.0, self._lat.hi), LongitudeInterval.full())

    def polar_closure(self) -> 'Rectangle':
        """Full longitude interval if the rectangle touches a pole, self otherwise"""
        if self._lat.lo == -90.0 or self._lat.hi == 90.0:
            return Rectangle(self._lat, LongitudeInterval.full())
        return self

    @staticmethod
    def compare_by_latitude(a: 'Rectangle', b: 'Rectangle') -> int:
        """Order by southern then northern latitude (-1, 0, 1)"""
        c = _cmp(a._lat.lo, b._lat.lo)
        if c != 0:
            return c
        return _cmp(a._lat.hi, b._lat.hi)

    @staticmethod
    def compare_by_longitude(a: 'Rectangle', b: 'Rectangle') -> int:
        """Order by western then eastern longitude (-1, 0, 1)"""
        c = _cmp(a._lng.lo, b._lng.lo)
        if c != 0:
            return c
        return _cmp(a._lng.hi, b._lng.hi)

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return self._lat == other._lat and self._lng == other._lng

    def __hash__(self):
        return hash((self._lat, self._lng))

    def __repr__(self):
        return (f"Rectangle(lat=[{self._lat.lo}, {self._lat.hi}], "
                f"lng=[{self._lng.lo}, {self._lng.hi}])")
