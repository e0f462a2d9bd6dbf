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

"""Squared chord length between positions of the unit sphere"""

from functools import total_ordering

import numpy as np

from ..core.constants import D2R, R2D
from ..coordinate.positions import NVector


@total_ordering
class ChordLength:
    """
    Squared length of the chord between two positions of the unit sphere

    Comparing chords is cheaper than comparing angles and monotonic with
    them, so caps store their radius as a chord.

    Parameters
    ----------
    length2 : float
        Squared chord length in [-1, 4]; -1 is the "negative" (empty) chord,
        4 the chord between antipodes
    """

    __slots__ = ('_length2',)

    MAX_LENGTH2 = 4.0

    NEGATIVE: 'ChordLength'
    ZERO: 'ChordLength'
    MAX: 'ChordLength'

    def __init__(self, length2: float):
        self._length2 = float(length2)

    @classmethod
    def new(cls, p1: NVector, p2: NVector) -> 'ChordLength':
        """Chord between two positions"""
        d = p1.as_vec3() - p2.as_vec3()
        return cls(min(float(np.dot(d, d)), cls.MAX_LENGTH2))

    @classmethod
    def from_angle_radians(cls, angle: float) -> 'ChordLength':
        """Chord subtending ``angle`` (rad); angles are folded into [0, pi]"""
        a = abs(angle)
        if a == np.pi:
            return cls.MAX
        a = a % np.pi
        length = 2.0 * np.sin(a * 0.5)
        return cls(length * length)

    @classmethod
    def from_angle(cls, angle: float) -> 'ChordLength':
        """Chord subtending ``angle`` (deg)"""
        if abs(angle) == 180.0:
            return cls.MAX
        return cls.from_angle_radians(angle * D2R)

    @property
    def length2(self) -> float:
        return self._length2

    def to_angle_radians(self) -> float:
        """Subtended angle (rad), -1 for the negative chord"""
        if self._length2 < 0.0:
            return -1.0
        return float(2.0 * np.arcsin(np.sqrt(self._length2) * 0.5))

    def to_angle(self) -> float:
        """Subtended angle (deg)"""
        return self.to_angle_radians() * R2D

    def __eq__(self, other):
        if not isinstance(other, ChordLength):
            return NotImplemented
        return self._length2 == other._length2

    def __lt__(self, other):
        if not isinstance(other, ChordLength):
            return NotImplemented
        return self._length2 < other._length2

    def __hash__(self):
        return hash(self._length2)

    def __repr__(self):
        return f"ChordLength({self._length2!r})"


ChordLength.NEGATIVE = ChordLength(-1.0)
ChordLength.ZERO = ChordLength(0.0)
ChordLength.MAX = ChordLength(ChordLength.MAX_LENGTH2)
