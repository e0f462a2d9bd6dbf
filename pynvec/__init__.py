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

"""
pynvec - Horizontal Position Computations with N-Vectors

A Python library for geodesy and spherical geometry built on the n-vector
representation: ellipsoidal and spherical surface models, local frames,
great-circle navigation, spherical regions (caps, rectangles, loops) and
vehicle kinematics.
"""

__version__ = "1.0.0"
__author__ = "pynvec Development Team"
__title__ = "pynvec"
__description__ = "Geodesy and spherical geometry with n-vectors"

from .logger import get_logger, setup_logger
from .core import *
from .attitude import *
from .coordinate import *
from .spherical import *
