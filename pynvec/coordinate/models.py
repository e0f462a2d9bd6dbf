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

"""Catalog of coordinate system models

A model binds a surface (ellipsoid or sphere) to the convention used to
report longitudes. Ellipsoidal models of the Earth use (-180, 180], Mars
models use planetocentric east longitudes in [0, 360).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Union

from ..attitude.wrap import wrapTo180, wrapTo360
from ..core.constants import (
    E_AIRY_1830, E_AIRY_MODIFIED, E_BESSEL_1841, E_CLARKE_1866, E_CLARKE_1880_IGN,
    E_GRS80, E_INTL_1924, E_MARS_2000, E_WGS72, E_WGS84,
    FE_AIRY_1830, FE_AIRY_MODIFIED, FE_BESSEL_1841, FE_CLARKE_1866, FE_CLARKE_1880_IGN,
    FE_GRS80, FE_INTL_1924, FE_MARS_2000, FE_WGS72, FE_WGS84,
    R_MOON, RM_MARS_2000, RM_WGS84,
    RE_AIRY_1830, RE_AIRY_MODIFIED, RE_BESSEL_1841, RE_CLARKE_1866, RE_CLARKE_1880_IGN,
    RE_GRS80, RE_INTL_1924, RE_MARS_2000, RE_WGS72, RE_WGS84,
    RP_AIRY_1830, RP_AIRY_MODIFIED, RP_BESSEL_1841, RP_CLARKE_1866, RP_CLARKE_1880_IGN,
    RP_GRS80, RP_INTL_1924, RP_MARS_2000, RP_WGS72, RP_WGS84,
)
from ..core.exceptions import UnknownModel
from ..spherical.sphere import Sphere
from .positions import LatLong, NVector
from .surface import Ellipsoid, Surface

logger = logging.getLogger(__name__)


class LongitudeRange(Enum):
    """Convention for reported longitudes"""
    L180 = 'L180'   # (-180, 180]
    L360 = 'L360'   # [0, 360)

    def normalise(self, longitude: float) -> float:
        """Normalise a longitude (deg) to this range"""
        if self is LongitudeRange.L360:
            return float(wrapTo360(longitude))
        return float(wrapTo180(longitude))


@dataclass(frozen=True)
class Model:
    """
    Coordinate system model

    Attributes
    ----------
    model_id : str
        Unique identifier, e.g. 'WGS84'
    surface : Surface
        Ellipsoid or sphere
    longitude_range : LongitudeRange
        Longitude convention
    """
    model_id: str
    surface: Surface
    longitude_range: LongitudeRange = LongitudeRange.L180

    def to_lat_long(self, nvector: NVector) -> LatLong:
        """Latitude/longitude of an n-vector with the longitude in this model's range"""
        ll = LatLong.from_nvector(nvector)
        return LatLong(ll.latitude, self.longitude_range.normalise(ll.longitude))

    def is_spherical(self) -> bool:
        return isinstance(self.surface, Sphere)


# Surfaces
WGS84_ELLIPSOID = Ellipsoid.from_all(RE_WGS84, RP_WGS84, E_WGS84, FE_WGS84)
GRS80_ELLIPSOID = Ellipsoid.from_all(RE_GRS80, RP_GRS80, E_GRS80, FE_GRS80)
WGS72_ELLIPSOID = Ellipsoid.from_all(RE_WGS72, RP_WGS72, E_WGS72, FE_WGS72)
INTL_1924_ELLIPSOID = Ellipsoid.from_all(RE_INTL_1924, RP_INTL_1924, E_INTL_1924, FE_INTL_1924)
AIRY_1830_ELLIPSOID = Ellipsoid.from_all(RE_AIRY_1830, RP_AIRY_1830, E_AIRY_1830, FE_AIRY_1830)
AIRY_MODIFIED_ELLIPSOID = Ellipsoid.from_all(
    RE_AIRY_MODIFIED, RP_AIRY_MODIFIED, E_AIRY_MODIFIED, FE_AIRY_MODIFIED)
BESSEL_1841_ELLIPSOID = Ellipsoid.from_all(
    RE_BESSEL_1841, RP_BESSEL_1841, E_BESSEL_1841, FE_BESSEL_1841)
CLARKE_1866_ELLIPSOID = Ellipsoid.from_all(
    RE_CLARKE_1866, RP_CLARKE_1866, E_CLARKE_1866, FE_CLARKE_1866)
CLARKE_1880_IGN_ELLIPSOID = Ellipsoid.from_all(
    RE_CLARKE_1880_IGN, RP_CLARKE_1880_IGN, E_CLARKE_1880_IGN, FE_CLARKE_1880_IGN)
MARS_2000_ELLIPSOID = Ellipsoid.from_all(RE_MARS_2000, RP_MARS_2000, E_MARS_2000, FE_MARS_2000)

# Ellipsoidal models
WGS84 = Model('WGS84', WGS84_ELLIPSOID)
GRS80 = Model('GRS80', GRS80_ELLIPSOID)
WGS72 = Model('WGS72', WGS72_ELLIPSOID)
ETRS89 = Model('ETRS89', GRS80_ELLIPSOID)
NAD83 = Model('NAD83', GRS80_ELLIPSOID)
ED50 = Model('ED50', INTL_1924_ELLIPSOID)
IRL_1975 = Model('IRL_1975', AIRY_MODIFIED_ELLIPSOID)
NAD27 = Model('NAD27', CLARKE_1866_ELLIPSOID)
NTF = Model('NTF', CLARKE_1880_IGN_ELLIPSOID)
OSGB36 = Model('OSGB36', AIRY_1830_ELLIPSOID)
POTSDAM = Model('POTSDAM', BESSEL_1841_ELLIPSOID)
TOKYO_JAPAN = Model('TOKYO_JAPAN', BESSEL_1841_ELLIPSOID)
MARS_2000 = Model('MARS_2000', MARS_2000_ELLIPSOID, LongitudeRange.L360)

# Spherical models
S84 = Model('S84', Sphere(RM_WGS84))
SMARS_2000 = Model('SMARS_2000', Sphere(RM_MARS_2000), LongitudeRange.L360)
MOON = Model('MOON', Sphere(R_MOON))

MODELS = {
    m.model_id: m for m in (
        WGS84, GRS80, WGS72, ETRS89, NAD83, ED50, IRL_1975, NAD27, NTF,
        OSGB36, POTSDAM, TOKYO_JAPAN, MARS_2000, S84, SMARS_2000, MOON
    )
}


def get_model(name: Union[str, Model]) -> Model:
    """
    Look a model up by identifier (case-insensitive)

    Parameters
    ----------
    name : str or Model
        Model identifier; a Model is returned unchanged

    Returns
    -------
    Model
        Registered model

    Raises
    ------
    UnknownModel
        If no model is registered under ``name``
    """
    if isinstance(name, Model):
        return name
    model = MODELS.get(name.upper())
    if model is None:
        logger.debug(f"get_model: unknown model {name!r}")
        raise UnknownModel(f"Unknown model: {name!r} (known: {', '.join(MODELS)})")
    return model
