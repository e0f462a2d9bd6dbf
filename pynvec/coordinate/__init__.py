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

"""Positions, surfaces, models and local frames

This module provides:
- Position representations (n-vector, latitude/longitude, geodetic, geocentric)
- Ellipsoidal surfaces with exact geodetic/geocentric conversions
- The catalog of coordinate system models (WGS84, ED50, S84, MARS_2000, ...)
- DCM (Direction Cosine Matrix) of NED, ENU, body and local level frames
- Local frames and position deltas

Spheres and great-circle navigation live in pynvec.spherical.
"""

# Position representations
from .positions import GeocentricPosition, GeodeticPosition, LatLong, NVector

# Surfaces
from .surface import Ellipsoid, Surface

# Models
from .models import (
    ED50,
    ETRS89,
    GRS80,
    IRL_1975,
    MARS_2000,
    MODELS,
    MOON,
    NAD27,
    NAD83,
    NTF,
    OSGB36,
    POTSDAM,
    S84,
    SMARS_2000,
    TOKYO_JAPAN,
    WGS72,
    WGS84,
    LongitudeRange,
    Model,
    get_model,
)

# DCM for local frames
from .dcm import n_e2_r_en, n_e2_r_enu, n_e_and_wa2_r_el, n_e_and_ypr2_r_eb

# Local frames
from .local_frame import (
    LocalFrame,
    LocalPositionVector,
    Orientation,
    delta_b_between,
    delta_between,
    delta_w_between,
    destination_from_delta_b,
    destination_from_delta_n,
    destination_from_delta_w,
)
