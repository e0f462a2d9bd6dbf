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

"""Reference surfaces and conversions between geodetic and geocentric positions

Conversions use the n-vector formulation, which is exact in the geodetic to
geocentric direction and closed-form (no iterations) in the other.

References:
    K. Gade (2010): A Non-singular Horizontal Position Representation,
    The Journal of Navigation, Volume 63, Issue 03, pp 395-417
"""

from abc import ABC, abstractmethod

import numpy as np

from ..core.constants import D2R
from .positions import GeocentricPosition, GeodeticPosition, NVector


class Surface(ABC):
    """Body surface able to convert between geodetic and geocentric positions"""

    @abstractmethod
    def geodetic_to_geocentric(self, position: GeodeticPosition) -> GeocentricPosition:
        """Geocentric (ECEF) coordinates of a geodetic position"""

    @abstractmethod
    def geocentric_to_geodetic(self, position: GeocentricPosition) -> GeodeticPosition:
        """Geodetic coordinates of a geocentric (ECEF) position"""

    @abstractmethod
    def radius_at(self, latitude: float) -> tuple[float, float]:
        """Meridian and prime vertical radii of curvature at a latitude (deg)"""

    @property
    @abstractmethod
    def mean_radius(self) -> float:
        """Radius of the sphere approximating the surface (m)"""

    @property
    @abstractmethod
    def equatorial_radius(self) -> float:
        """Equatorial radius (m)"""


class Ellipsoid(Surface):
    """Ellipsoid of revolution

    Parameters
    ----------
    equatorial_radius : float
        Semi-major axis a (m)
    inverse_flattening : float
        1/f, must be greater than 1

    Raises
    ------
    ValueError
        If the radius is not positive or the flattening is outside [0, 1)

    Examples
    --------
    >>> wgs84 = Ellipsoid(6378137.0, 298.257223563)
    >>> wgs84.polar_radius
    6356752.314245179
    """

    def __init__(self, equatorial_radius: float, inverse_flattening: float):
        if not np.isfinite(equatorial_radius) or equatorial_radius <= 0.0:
            raise ValueError(f"Invalid equatorial radius: {equatorial_radius}")
        if np.isnan(inverse_flattening) or inverse_flattening <= 1.0:
            raise ValueError(f"Invalid inverse flattening: {inverse_flattening}")
        a = float(equatorial_radius)
        f = 1.0 / inverse_flattening
        b = a * (1.0 - f)
        e = np.sqrt(1.0 - (b * b) / (a * a))
        self._set(a, b, e, f)

    @classmethod
    def from_all(cls, equatorial_radius: float, polar_radius: float,
                 eccentricity: float, flattening: float) -> 'Ellipsoid':
        """Build from precomputed constants (no consistency check beyond ranges)"""
        if not np.isfinite(equatorial_radius) or equatorial_radius <= 0.0:
            raise ValueError(f"Invalid equatorial radius: {equatorial_radius}")
        if not 0.0 <= flattening < 1.0:
            raise ValueError(f"Invalid flattening: {flattening}")
        ellipsoid = cls.__new__(cls)
        ellipsoid._set(equatorial_radius, polar_radius, eccentricity, flattening)
        return ellipsoid

    def _set(self, a, b, e, f):
        self._a = float(a)
        self._b = float(b)
        self._e = float(e)
        self._f = float(f)

    @property
    def equatorial_radius(self) -> float:
        return self._a

    @property
    def polar_radius(self) -> float:
        return self._b

    @property
    def eccentricity(self) -> float:
        return self._e

    @property
    def flattening(self) -> float:
        return self._f

    @property
    def mean_radius(self) -> float:
        """Mean radius (2a + b) / 3"""
        return (2.0 * self._a + self._b) / 3.0

    @property
    def volumetric_radius(self) -> float:
        """Radius of the sphere with the same volume"""
        return float(np.cbrt(self._a * self._a * self._b))

    def geodetic_to_geocentric(self, position: GeodeticPosition) -> GeocentricPosition:
        """
        Geodetic to geocentric conversion

        Parameters
        ----------
        position : GeodeticPosition
            n-vector and height above the ellipsoid

        Returns
        -------
        GeocentricPosition
            ECEF coordinates (m)
        """
        nx, ny, nz = position.nvector.as_vec3()
        h = position.height
        a = self._a
        b = self._b
        m = (a * a) / (b * b)
        n = b / np.sqrt((nx * nx * m) + (ny * ny * m) + (nz * nz))
        x = n * m * nx + h * nx
        y = n * m * ny + h * ny
        z = n * nz + h * nz
        return GeocentricPosition(float(x), float(y), float(z))

    def geocentric_to_geodetic(self, position: GeocentricPosition) -> GeodeticPosition:
        """
        Geocentric to geodetic conversion (closed form)

        Parameters
        ----------
        position : GeocentricPosition
            ECEF coordinates (m)

        Returns
        -------
        GeodeticPosition
            n-vector and height above the ellipsoid
        """
        x = position.x
        y = position.y
        z = position.z
        a = self._a
        e2 = self._e * self._e
        e4 = e2 * e2
        a2 = a * a
        p = (x * x + y * y) / a2
        q = ((1.0 - e2) / a2) * (z * z)
        r = (p + q - e4) / 6.0
        s = (e4 * p * q) / (4.0 * r * r * r)
        t = np.cbrt(1.0 + s + np.sqrt(s * (2.0 + s)))
        u = r * (1.0 + t + 1.0 / t)
        v = np.sqrt(u * u + q * e4)
        w = e2 * (u + v - q) / (2.0 * v)
        k = np.sqrt(u + v + w * w) - w
        d = k * np.sqrt(x * x + y * y) / (k + e2)
        dz = np.sqrt(d * d + z * z)
        h = ((k + e2 - 1.0) / k) * dz
        fs = 1.0 / dz
        fa = k / (k + e2)
        nvector = NVector([fs * fa * x, fs * fa * y, fs * z])
        return GeodeticPosition(nvector, float(h))

    def prime_vertical_radius(self, latitude: float) -> float:
        """Radius of curvature in the prime vertical N (latitude in degrees)"""
        s = np.sin(latitude * D2R)
        return float(self._a / np.sqrt(1.0 - self._e * self._e * s * s))

    def meridian_radius(self, latitude: float) -> float:
        """Meridional radius of curvature M (latitude in degrees)"""
        e2 = self._e * self._e
        s = np.sin(latitude * D2R)
        return float(self._a * (1.0 - e2) / (1.0 - e2 * s * s) ** 1.5)

    def radius_at(self, latitude: float) -> tuple[float, float]:
        """
        Radii of curvature at given latitude

        Parameters
        ----------
        latitude : float
            Latitude (deg)

        Returns
        -------
        M : float
            Meridional radius of curvature (m)
        N : float
            Prime vertical radius of curvature (m)
        """
        return self.meridian_radius(latitude), self.prime_vertical_radius(latitude)

    def geocentric_radius(self, latitude: float) -> float:
        """Distance from the centre to the surface at a geodetic latitude (deg)"""
        lat = latitude * D2R
        c = np.cos(lat)
        s = np.sin(lat)
        a = self._a
        b = self._b
        f1 = a * a * c
        f2 = b * b * s
        f3 = a * c
        f4 = b * s
        return float(np.sqrt((f1 * f1 + f2 * f2) / (f3 * f3 + f4 * f4)))

    def latitude_radius(self, latitude: float) -> float:
        """Radius of the parallel at a latitude (deg), 0 at the poles"""
        if abs(latitude) == 90.0:
            return 0.0
        return self.prime_vertical_radius(latitude) * float(np.cos(latitude * D2R))

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return NotImplemented
        return (self._a, self._b, self._e, self._f) == (other._a, other._b, other._e, other._f)

    def __hash__(self):
        return hash((self._a, self._b, self._e, self._f))

    def __repr__(self):
        return (f"Ellipsoid(a={self._a!r}, b={self._b!r}, "
                f"e={self._e!r}, f={self._f!r})")
