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

"""Spherical Geometry Module.

Computations on the surface of a sphere using n-vectors:

- **Sphere**: spherical surface model with great-circle navigation
  (distance, bearings, destination, interpolation, cross/along track)
- **GreatCircle / MinorArc**: oriented circles and arcs, intersections,
  projections and sides
- **Regions**: caps, latitude/longitude rectangles and simple loops
  (containment, bounding, triangulation, area)
- **Kinematics**: closest point of approach and interception of vehicles
  travelling along great circles

Example Usage:
    >>> from pynvec.coordinate.positions import NVector
    >>> from pynvec.spherical import MinorArc
    >>> a1 = MinorArc(NVector.from_lat_long_degrees(0.0, 0.0),
    ...               NVector.from_lat_long_degrees(0.0, 20.0))
    >>> a2 = MinorArc(NVector.from_lat_long_degrees(10.0, 10.0),
    ...               NVector.from_lat_long_degrees(-10.0, 10.0))
    >>> round(a1.intersection(a2).to_lat_long().longitude, 6)
    10.0
"""

from .cap import Cap
from .chord_length import ChordLength
from .great_circle import GreatCircle
from .kinematics import (
    Cpa,
    Intercept,
    Vehicle,
    closest_point_of_approach,
    minimum_speed_for_intercept,
    time_to_intercept,
)
from .loop import Loop, is_loop_clockwise
from .minor_arc import MinorArc
from .rectangle import LatitudeInterval, LongitudeInterval, Rectangle
from .sphere import Sphere

__all__ = [
    'Sphere', 'GreatCircle', 'MinorArc', 'ChordLength', 'Cap',
    'Rectangle', 'LatitudeInterval', 'LongitudeInterval',
    'Loop', 'is_loop_clockwise',
    'Vehicle', 'Cpa', 'Intercept', 'closest_point_of_approach',
    'time_to_intercept', 'minimum_speed_for_intercept'
]
