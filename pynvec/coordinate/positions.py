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

"""Position representations: n-vector, latitude/longitude, geodetic and geocentric"""

from dataclasses import dataclass
from typing import Any, Optional

import numpy as np

from ..core.constants import D2R, R2D
from ..core.exceptions import InvalidVector
from ..core.vector import NEG_UNIT_Z, UNIT_Z, norm


class NVector:
    """Horizontal position as a unit vector normal to the surface

    The n-vector is frame independent and has no singularity at the poles
    or at the anti-meridian. Components are expressed in the Earth-fixed
    frame with z towards the north pole and x towards (0°N, 0°E).

    NVectors are immutable: the wrapped array is read-only.

    Parameters
    ----------
    vector : array_like
        3D vector; normalised if its norm is not exactly 1

    Raises
    ------
    InvalidVector
        If ``vector`` has zero length, is not finite or is not 3D
    """

    __slots__ = ('_v',)

    def __init__(self, vector):
        v = np.array(vector, dtype=np.float64)
        if v.shape != (3,) or not np.all(np.isfinite(v)):
            raise InvalidVector(f"cannot build an n-vector from {vector!r}")
        n = norm(v)
        if n == 0.0:
            raise InvalidVector("cannot build an n-vector from the zero vector")
        if n != 1.0:
            v = v / n
        v.flags.writeable = False
        self._v = v

    @classmethod
    def _from_unit(cls, v: np.ndarray) -> 'NVector':
        """Wrap a vector already known to be unit length (no copy, no check)"""
        nv = cls.__new__(cls)
        v = np.asarray(v, dtype=np.float64)
        v.flags.writeable = False
        nv._v = v
        return nv

    @classmethod
    def from_lat_long_radians(cls, latitude: float, longitude: float) -> 'NVector':
        """Create from latitude and longitude in radians

        Latitudes of exactly ±pi/2 give the exact polar unit vectors.
        """
        if latitude == np.pi / 2:
            return cls._from_unit(UNIT_Z.copy())
        if latitude == -np.pi / 2:
            return cls._from_unit(NEG_UNIT_Z.copy())
        cl = np.cos(latitude)
        return cls._from_unit(np.array([cl * np.cos(longitude),
                                        cl * np.sin(longitude),
                                        np.sin(latitude)], dtype=np.float64))

    @classmethod
    def from_lat_long_degrees(cls, latitude: float, longitude: float) -> 'NVector':
        """Create from latitude and longitude in degrees"""
        if latitude == 90.0:
            return cls._from_unit(UNIT_Z.copy())
        if latitude == -90.0:
            return cls._from_unit(NEG_UNIT_Z.copy())
        return cls.from_lat_long_radians(latitude * D2R, longitude * D2R)

    @property
    def x(self) -> float:
        return float(self._v[0])

    @property
    def y(self) -> float:
        return float(self._v[1])

    @property
    def z(self) -> float:
        return float(self._v[2])

    def as_vec3(self) -> np.ndarray:
        """Read-only view of the unit vector"""
        return self._v

    def antipode(self) -> 'NVector':
        """Position on the opposite side of the sphere"""
        return NVector._from_unit(-self._v)

    def is_antipode_of(self, other: 'NVector') -> bool:
        """True if ``other`` is exactly the antipode of this position"""
        return not (self._v + other._v).any()

    def to_lat_long(self) -> 'LatLong':
        """Latitude and longitude in degrees, longitude in (-180, 180]"""
        return LatLong.from_nvector(self)

    def __eq__(self, other):
        if not isinstance(other, NVector):
            return NotImplemented
        return bool(np.array_equal(self._v, other._v))

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def __repr__(self):
        return f"NVector({self.x!r}, {self.y!r}, {self.z!r})"


@dataclass(frozen=True)
class LatLong:
    """Geographic coordinates

    Attributes
    ----------
    latitude : float
        Latitude in degrees, [-90, 90]
    longitude : float
        Longitude in degrees
    """
    latitude: float
    longitude: float

    @classmethod
    def from_nvector(cls, nvector: NVector) -> 'LatLong':
        """Latitude/longitude of an n-vector (longitude is 0 at the poles)"""
        x, y, z = nvector.as_vec3()
        lat = np.arctan2(z, np.sqrt(x * x + y * y))
        lon = np.arctan2(y, x)
        return cls(float(lat * R2D), float(lon * R2D))

    def to_nvector(self) -> NVector:
        return NVector.from_lat_long_degrees(self.latitude, self.longitude)

    def rounded(self, decimals: int = 7) -> 'LatLong':
        """Copy rounded to the given number of decimal degrees"""
        return LatLong(round(self.latitude, decimals), round(self.longitude, decimals))


@dataclass(frozen=True)
class GeodeticPosition:
    """Position above (or below) the surface of a model

    Attributes
    ----------
    nvector : NVector
        Horizontal position
    height : float
        Height above the surface along its normal (m)
    model : Model, optional
        Model the position is expressed in; used by local frames to reject
        positions from another model
    """
    nvector: NVector
    height: float = 0.0
    model: Optional[Any] = None

    @classmethod
    def from_lat_long_degrees(cls, latitude: float, longitude: float,
                              height: float = 0.0, model=None) -> 'GeodeticPosition':
        return cls(NVector.from_lat_long_degrees(latitude, longitude), height, model)

    def _model(self, model):
        m = model if model is not None else self.model
        if m is None:
            raise ValueError("No model given and position is not tagged with one")
        return m

    def to_lat_long(self, model=None) -> LatLong:
        """Latitude/longitude, longitude normalised to the model's range if any"""
        m = model if model is not None else self.model
        if m is None:
            return LatLong.from_nvector(self.nvector)
        return m.to_lat_long(self.nvector)

    def to_geocentric(self, model=None) -> 'GeocentricPosition':
        """Convert to geocentric coordinates using the surface of the model"""
        m = self._model(model)
        g = m.surface.geodetic_to_geocentric(self)
        return GeocentricPosition(g.x, g.y, g.z, m)


@dataclass(frozen=True)
class GeocentricPosition:
    """Earth-Centered Earth-Fixed position

    Attributes
    ----------
    x, y, z : float
        Cartesian coordinates (m); z towards the north pole
    model : Model, optional
        Model the position is expressed in
    """
    x: float
    y: float
    z: float
    model: Optional[Any] = None

    @classmethod
    def from_vec3(cls, v: np.ndarray, model=None) -> 'GeocentricPosition':
        return cls(float(v[0]), float(v[1]), float(v[2]), model)

    def as_vec3(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    def to_geodetic(self, model=None) -> GeodeticPosition:
        """Convert to geodetic coordinates using the surface of the model"""
        m = model if model is not None else self.model
        if m is None:
            raise ValueError("No model given and position is not tagged with one")
        g = m.surface.geocentric_to_geodetic(self)
        return GeodeticPosition(g.nvector, g.height, m)
