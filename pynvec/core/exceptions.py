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

"""Error types raised by pynvec

All errors derive from ``ValueError`` so callers validating numerical input
with ``except ValueError`` keep working.
"""


class GeodesyError(ValueError):
    """Base class for all geometry errors"""


class InvalidVector(GeodesyError):
    """A unit vector was requested from a zero-length or non-finite vector"""


class CoincidentOrAntipodalPoints(GeodesyError):
    """Two positions are equal or antipodal: no unique great circle exists"""


class FrameMismatch(GeodesyError):
    """A position expressed in another model was given to a local frame"""


class CollinearPoints(GeodesyError):
    """Three positions lie on a common great circle"""


class NoIntercept(GeodesyError):
    """No interception exists under the given speed constraints"""


class UnknownModel(GeodesyError, KeyError):
    """No model is registered under the requested name"""

    def __str__(self):
        return ValueError.__str__(self)
