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

"""Core Geometry Module.

This module provides the foundation shared by every other pynvec module:

- **Constants and Parameters**: numerical tolerance, unit conversion factors,
  reference ellipsoid parameters and sphere radii
- **Exceptions**: the error taxonomy raised on degenerate geometry
- **Vector Algebra**: 3D vector helpers on ``numpy.ndarray`` (unit vectors,
  numerically stable cross products, tolerant comparisons, rotation)

Example Usage:
    >>> from pynvec.core import vector
    >>> import numpy as np
    >>> a = np.array([1.0, 0.0, 0.0])
    >>> b = np.array([0.0, 1.0, 0.0])
    >>> vector.stable_cross_prod_unit(a, b)
    array([0., 0., 1.])
"""

from .constants import *
from .exceptions import (
    CoincidentOrAntipodalPoints,
    CollinearPoints,
    FrameMismatch,
    GeodesyError,
    InvalidVector,
    NoIntercept,
    UnknownModel,
)
