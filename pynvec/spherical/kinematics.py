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

"""Kinematics of vehicles travelling along great circles

Vehicles keep a constant speed along the great circle defined by their
position and initial bearing. Closest point of approach and intercept
solutions are found by sampling the time window then refining with
``scipy.optimize``.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Optional

import numpy as np
from scipy.optimize import brentq, minimize_scalar

from ..core.constants import CPA_SAMPLES, INTERCEPT_SAMPLES
from ..core.exceptions import NoIntercept
from ..coordinate.positions import NVector
from .great_circle import GreatCircle
from .sphere import Sphere

logger = logging.getLogger(__name__)

# Time tolerance (s) of the bounded refinements
_XATOL = 1.0e-6


@dataclass(frozen=True)
class Vehicle:
    """
    Vehicle moving at constant speed along a great circle

    Attributes
    ----------
    position : NVector
        Position at time 0
    bearing : float
        Initial bearing (deg)
    speed : float
        Ground speed (m/s), non-negative
    """
    position: NVector
    bearing: float
    speed: float

    def __post_init__(self):
        if not np.isfinite(self.speed) or self.speed < 0.0:
            raise ValueError(f"Invalid vehicle speed: {self.speed}")

    def position_at(self, time: float, sphere: Sphere = Sphere.EARTH) -> NVector:
        """Position after ``time`` seconds"""
        return sphere.destination(self.position, self.bearing, self.speed * time)

    def track(self) -> GreatCircle:
        """Great circle followed by the vehicle"""
        return GreatCircle.from_heading(self.position, self.bearing)


@dataclass(frozen=True)
class Cpa:
    """
    Closest point of approach between two vehicles

    Attributes
    ----------
    time : float
        Time of closest approach (s)
    distance : float
        Separation at that time (m)
    position1 : NVector
        Position of the first vehicle at that time
    position2 : NVector
        Position of the second vehicle at that time
    """
    time: float
    distance: float
    position1: NVector
    position2: NVector


@dataclass(frozen=True)
class Intercept:
    """
    Interception of a target vehicle

    Attributes
    ----------
    time : float
        Time of interception (s)
    speed : float
        Interceptor speed (m/s)
    position : NVector
        Interception position
    bearing : float
        Initial bearing (deg) of the interceptor towards the interception
        position; the target bearing if the interceptor is already there
    """
    time: float
    speed: float
    position: NVector
    bearing: float


def _refine_minimum(f: Callable[[float], float], ts: np.ndarray, values: list) -> tuple[float, float]:
    i = int(np.argmin(values))
    lo = ts[max(i - 1, 0)]
    hi = ts[min(i + 1, len(ts) - 1)]
    best_t = float(ts[i])
    best_f = float(values[i])
    if hi > lo:
        res = minimize_scalar(f, bounds=(lo, hi), method='bounded', options={'xatol': _XATOL})
        if res.fun < best_f:
            best_t = float(res.x)
            best_f = float(res.fun)
    return best_t, best_f


def closest_point_of_approach(vehicle1: Vehicle, vehicle2: Vehicle,
                              sphere: Sphere = Sphere.EARTH,
                              max_time: Optional[float] = None) -> Cpa:
    """
    Time and distance of closest approach between two vehicles

    Parameters
    ----------
    vehicle1, vehicle2 : Vehicle
        Vehicles at time 0
    sphere : Sphere
        Sphere the vehicles travel on
    max_time : float, optional
        End of the search window (s); defaults to the time the faster
        vehicle needs to travel half a great circle

    Returns
    -------
    Cpa
        Closest approach within [0, max_time]
    """
    def separation(t):
        return sphere.distance(vehicle1.position_at(t, sphere), vehicle2.position_at(t, sphere))

    if max_time is None:
        vmax = max(vehicle1.speed, vehicle2.speed)
        if vmax == 0.0:
            return Cpa(0.0, separation(0.0), vehicle1.position, vehicle2.position)
        max_time = np.pi * sphere.radius / vmax
    if max_time <= 0.0:
        return Cpa(0.0, separation(0.0), vehicle1.position, vehicle2.position)

    ts = np.linspace(0.0, max_time, CPA_SAMPLES)
    ds = [separation(t) for t in ts]
    t, d = _refine_minimum(separation, ts, ds)
    logger.debug(f"closest_point_of_approach: t={t:.3f} s, d={d:.3f} m in [0, {max_time:.1f}] s")
    return Cpa(t, d, vehicle1.position_at(t, sphere), vehicle2.position_at(t, sphere))


def time_to_intercept(target: Vehicle, interceptor_position: NVector,
                      interceptor_speed: float,
                      sphere: Sphere = Sphere.EARTH) -> Intercept:
    """
    Earliest interception of a target by an interceptor of given speed

    Finds the smallest time t >= 0 such that the distance from the
    interceptor position to the target position at t equals
    ``interceptor_speed * t``.

    Raises
    ------
    NoIntercept
        If ``interceptor_speed`` is not positive
    """
    if interceptor_speed <= 0.0:
        raise NoIntercept(f"interceptor speed must be positive, got {interceptor_speed}")
    if interceptor_position == target.position:
        return Intercept(0.0, interceptor_speed, target.position, target.bearing)

    def gap(t):
        return sphere.distance(interceptor_position, target.position_at(t, sphere)) - interceptor_speed * t

    # Any position is reachable after travelling half a great circle
    max_time = np.pi * sphere.radius / interceptor_speed
    ts = np.linspace(0.0, max_time, INTERCEPT_SAMPLES)
    previous = gap(ts[0])
    for i in range(1, len(ts)):
        current = gap(ts[i])
        if current == 0.0:
            t = float(ts[i])
            break
        if current < 0.0:
            t = float(brentq(gap, ts[i - 1], ts[i], xtol=_XATOL))
            break
        previous = current
    else:
        logger.debug(f"time_to_intercept: no sign change, last gap {previous:.3f} m")
        raise NoIntercept("no interception within half a great circle")

    position = target.position_at(t, sphere)
    if position == interceptor_position:
        bearing = target.bearing
    else:
        bearing = Sphere.initial_bearing(interceptor_position, position)
    return Intercept(t, interceptor_speed, position, bearing)


def minimum_speed_for_intercept(target: Vehicle, interceptor_position: NVector,
                                sphere: Sphere = Sphere.EARTH) -> Intercept:
    """
    Slowest interceptor able to reach the target, and where it does

    Minimises ``distance(P, target(t)) / t`` over the time the target needs
    to travel half a great circle.

    Raises
    ------
    NoIntercept
        If the target is stationary, or the minimum is reached at the end
        of the window (the target is moving away)
    """
    if interceptor_position == target.position:
        return Intercept(0.0, 0.0, target.position, target.bearing)
    if target.speed == 0.0:
        raise NoIntercept("no minimum intercept speed for a stationary target")

    def required_speed(t):
        return sphere.distance(interceptor_position, target.position_at(t, sphere)) / t

    max_time = np.pi * sphere.radius / target.speed
    ts = np.linspace(max_time / INTERCEPT_SAMPLES, max_time, INTERCEPT_SAMPLES)
    speeds = [required_speed(t) for t in ts]
    t, speed = _refine_minimum(required_speed, ts, speeds)
    if t >= max_time * (1.0 - 1.0e-6):
        logger.debug(f"minimum_speed_for_intercept: minimum at window end ({max_time:.1f} s)")
        raise NoIntercept("target is moving away: no minimum intercept speed")

    position = target.position_at(t, sphere)
    if position == interceptor_position:
        bearing = target.bearing
    else:
        bearing = Sphere.initial_bearing(interceptor_position, position)
    return Intercept(t, speed, position, bearing)
