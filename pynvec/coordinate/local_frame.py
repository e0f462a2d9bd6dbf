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

"""Local tangent frames and position deltas

A local frame is anchored at a geodetic origin on a surface. Positions are
expressed in it as a :class:`LocalPositionVector` (a delta from the origin)
and converted back to geodetic positions.

Frames:

- NED: x north, y east, z down
- ENU: x east, y north, z up
- body: NED rotated by yaw, pitch and roll
- local level: NED rotated about the down axis by a wander azimuth

Examples
--------
>>> from pynvec.coordinate.models import WGS84
>>> from pynvec.coordinate.positions import GeodeticPosition
>>> from pynvec.coordinate.local_frame import LocalFrame
>>> a = GeodeticPosition.from_lat_long_degrees(1.0, 2.0, -3.0, WGS84)
>>> b = GeodeticPosition.from_lat_long_degrees(4.0, 5.0, -6.0, WGS84)
>>> d = LocalFrame.ned(a).geodetic_to_local(b)
>>> round(d.azimuth, 7)
45.1092632
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

import numpy as np

from ..attitude.wrap import wrapTo360
from ..core.constants import R2D
from ..core.exceptions import FrameMismatch
from ..core.vector import norm
from .dcm import n_e2_r_en, n_e2_r_enu, n_e_and_wa2_r_el, n_e_and_ypr2_r_eb
from .models import Model, get_model
from .positions import GeocentricPosition, GeodeticPosition
from .surface import Surface

logger = logging.getLogger(__name__)


class Orientation(Enum):
    """Axis convention of local position vectors"""
    NED = 'NED'
    ENU = 'ENU'
    BODY = 'BODY'                # x forward, y right, z down
    LOCAL_LEVEL = 'LOCAL_LEVEL'  # NED rotated by a wander azimuth


@dataclass(frozen=True)
class LocalPositionVector:
    """
    Delta from the origin of a local frame

    Attributes
    ----------
    x, y, z : float
        Components (m) along the axes given by ``orientation``
    orientation : Orientation
        Axis convention
    model : Model, optional
        Model of the frame the delta was computed in
    """
    x: float
    y: float
    z: float
    orientation: Orientation = Orientation.NED
    model: Optional[Model] = None

    @classmethod
    def from_vec3(cls, v, orientation: Orientation = Orientation.NED,
                  model: Optional[Model] = None) -> 'LocalPositionVector':
        return cls(float(v[0]), float(v[1]), float(v[2]), orientation, model)

    def as_vec3(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @property
    def length(self) -> float:
        """Norm of the delta (m)"""
        return norm(self.as_vec3())

    @property
    def azimuth(self) -> float:
        """Horizontal angle of the delta (deg), [0, 360)

        From north towards east for NED and ENU deltas, from the x axis
        towards the y axis for body and local level deltas.
        """
        if self.orientation is Orientation.ENU:
            e, n = self.x, self.y
        else:
            e, n = self.y, self.x
        return float(wrapTo360(np.arctan2(e, n) * R2D))

    @property
    def elevation(self) -> float:
        """Angle of the delta from the horizontal plane (deg)

        Positive towards the z axis: up in ENU, down in the other frames.
        0 for a zero delta.
        """
        length = self.length
        if length == 0.0:
            return 0.0
        return float(np.arcsin(self.z / length) * R2D)


def _resolve(origin: GeodeticPosition, model) -> tuple[Surface, Optional[Model]]:
    """Surface and model of a frame from an explicit argument or the origin tag"""
    if isinstance(model, str):
        model = get_model(model)
    if model is None:
        model = origin.model
    if model is None:
        raise ValueError("No model or surface given and origin is not tagged with one")
    if isinstance(model, Surface):
        return model, None
    if origin.model is not None and origin.model != model:
        raise FrameMismatch(f"origin is in {origin.model.model_id}, frame is in {model.model_id}")
    return model.surface, model


class LocalFrame:
    """Local tangent frame anchored at a geodetic origin

    Frames are built with the :meth:`ned`, :meth:`enu`, :meth:`body` and
    :meth:`local_level` factories. The surface and origin are captured at
    construction.

    Parameters
    ----------
    origin : GeodeticPosition
        Origin of the frame
    dir_rm : np.ndarray
        Rotation from the frame to Earth-fixed coordinates
    surface : Surface
        Surface used for geodetic/geocentric conversions
    model : Model, optional
        Model of the frame; positions tagged with another model are rejected
    orientation : Orientation
        Axis convention of produced deltas
    """

    def __init__(self, origin: GeodeticPosition, dir_rm: np.ndarray, surface: Surface,
                 model: Optional[Model] = None, orientation: Orientation = Orientation.NED):
        self._origin_position = origin
        self._origin = surface.geodetic_to_geocentric(origin).as_vec3()
        self._dir_rm = np.array(dir_rm, dtype=np.float64)
        self._inv_rm = self._dir_rm.T.copy()
        self._surface = surface
        self._model = model
        self._orientation = orientation

    @classmethod
    def ned(cls, origin: GeodeticPosition,
            model: Union[Model, Surface, str, None] = None) -> 'LocalFrame':
        """North-East-Down frame at ``origin``"""
        surface, m = _resolve(origin, model)
        return cls(origin, n_e2_r_en(origin.nvector), surface, m, Orientation.NED)

    @classmethod
    def enu(cls, origin: GeodeticPosition,
            model: Union[Model, Surface, str, None] = None) -> 'LocalFrame':
        """East-North-Up frame at ``origin``"""
        surface, m = _resolve(origin, model)
        return cls(origin, n_e2_r_enu(origin.nvector), surface, m, Orientation.ENU)

    @classmethod
    def body(cls, yaw: float, pitch: float, roll: float, origin: GeodeticPosition,
             model: Union[Model, Surface, str, None] = None) -> 'LocalFrame':
        """
        Body frame at ``origin``

        Parameters
        ----------
        yaw, pitch, roll : float
            Attitude relative to north-east-down (deg), applied as a z-y-x
            rotation sequence
        origin : GeodeticPosition
            Position of the body
        model : Model, Surface or str, optional
            Defaults to the model of ``origin``
        """
        surface, m = _resolve(origin, model)
        dir_rm = n_e_and_ypr2_r_eb(origin.nvector, yaw, pitch, roll)
        return cls(origin, dir_rm, surface, m, Orientation.BODY)

    @classmethod
    def local_level(cls, wander_azimuth: float, origin: GeodeticPosition,
                    model: Union[Model, Surface, str, None] = None) -> 'LocalFrame':
        """Local level frame at ``origin``, x axis at ``wander_azimuth`` (deg) from north"""
        surface, m = _resolve(origin, model)
        dir_rm = n_e_and_wa2_r_el(origin.nvector, wander_azimuth)
        return cls(origin, dir_rm, surface, m, Orientation.LOCAL_LEVEL)

    @property
    def dir_rm(self) -> np.ndarray:
        """Rotation matrix from the frame to Earth-fixed coordinates"""
        return self._dir_rm.copy()

    @property
    def inv_rm(self) -> np.ndarray:
        """Rotation matrix from Earth-fixed coordinates to the frame"""
        return self._inv_rm.copy()

    @property
    def origin(self) -> np.ndarray:
        """Origin in Earth-fixed coordinates (m)"""
        return self._origin.copy()

    @property
    def origin_position(self) -> GeodeticPosition:
        return self._origin_position

    @property
    def surface(self) -> Surface:
        return self._surface

    @property
    def model(self) -> Optional[Model]:
        return self._model

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    def _check_model(self, model) -> None:
        if model is None or self._model is None:
            return
        if isinstance(model, str):
            model = get_model(model)
        if model != self._model:
            logger.debug(f"LocalFrame: {model.model_id} given to a {self._model.model_id} frame")
            raise FrameMismatch(f"expected {self._model.model_id}, got {model.model_id}")

    def geodetic_to_local(self, position: GeodeticPosition,
                          model: Union[Model, str, None] = None) -> LocalPositionVector:
        """
        Delta from the frame origin to ``position``

        Raises
        ------
        FrameMismatch
            If ``position`` or ``model`` belongs to another model
        """
        self._check_model(position.model)
        self._check_model(model)
        p = self._surface.geodetic_to_geocentric(position).as_vec3()
        d = self._inv_rm @ (p - self._origin)
        return LocalPositionVector.from_vec3(d, self._orientation, self._model)

    def local_to_geodetic(self, delta, model: Union[Model, str, None] = None) -> GeodeticPosition:
        """
        Geodetic position at ``delta`` from the frame origin

        Parameters
        ----------
        delta : LocalPositionVector or array_like
            Delta in this frame (m)

        Raises
        ------
        FrameMismatch
            If ``delta`` has another orientation or belongs to another model
        """
        if isinstance(delta, LocalPositionVector):
            if delta.orientation is not self._orientation:
                raise FrameMismatch(
                    f"{delta.orientation.value} delta given to a {self._orientation.value} frame")
            self._check_model(delta.model)
            d = delta.as_vec3()
        else:
            d = np.asarray(delta, dtype=np.float64)
        self._check_model(model)
        v = self._origin + self._dir_rm @ d
        g = self._surface.geocentric_to_geodetic(GeocentricPosition.from_vec3(v))
        return GeodeticPosition(g.nvector, g.height, self._model)

    def __repr__(self):
        name = self._model.model_id if self._model is not None else repr(self._surface)
        return f"LocalFrame({self._orientation.value}, origin={self._origin.tolist()}, {name})"


def delta_between(p1: GeodeticPosition, p2: GeodeticPosition,
                  model: Union[Model, Surface, str, None] = None,
                  frame: str = "N") -> LocalPositionVector:
    """
    Delta from ``p1`` to ``p2`` in the north-east-down frame at ``p1``

    Parameters
    ----------
    p1, p2 : GeodeticPosition
        From and to positions
    model : Model, Surface or str, optional
        Defaults to the model of ``p1``
    frame : str
        'N' for north-east-down, 'E' for east-north-up

    Returns
    -------
    LocalPositionVector
        Delta (m)
    """
    if frame == "N":
        f = LocalFrame.ned(p1, model)
    elif frame == "E":
        f = LocalFrame.enu(p1, model)
    else:
        raise ValueError(f"Unknown frame: {frame!r}, expected 'N' or 'E'")
    return f.geodetic_to_local(p2)


def delta_w_between(p1: GeodeticPosition, p2: GeodeticPosition, wander_azimuth: float,
                    model: Union[Model, Surface, str, None] = None) -> LocalPositionVector:
    """Delta from ``p1`` to ``p2`` in the local level frame at ``p1``"""
    return LocalFrame.local_level(wander_azimuth, p1, model).geodetic_to_local(p2)


def delta_b_between(p1: GeodeticPosition, p2: GeodeticPosition,
                    yaw: float, pitch: float, roll: float,
                    model: Union[Model, Surface, str, None] = None) -> LocalPositionVector:
    """Delta from ``p1`` to ``p2`` in the body frame at ``p1``"""
    return LocalFrame.body(yaw, pitch, roll, p1, model).geodetic_to_local(p2)


def destination_from_delta_n(p: GeodeticPosition, delta,
                             model: Union[Model, Surface, str, None] = None) -> GeodeticPosition:
    """Position at a north-east-down ``delta`` from ``p``"""
    return LocalFrame.ned(p, model).local_to_geodetic(delta)


def destination_from_delta_w(p: GeodeticPosition, wander_azimuth: float, delta,
                             model: Union[Model, Surface, str, None] = None) -> GeodeticPosition:
    """Position at a local level ``delta`` from ``p``"""
    return LocalFrame.local_level(wander_azimuth, p, model).local_to_geodetic(delta)


def destination_from_delta_b(p: GeodeticPosition, yaw: float, pitch: float, roll: float,
                             delta,
                             model: Union[Model, Surface, str, None] = None) -> GeodeticPosition:
    """
    Position at a body frame ``delta`` from ``p``

    Parameters
    ----------
    p : GeodeticPosition
        Position of the body
    yaw, pitch, roll : float
        Attitude of the body (deg)
    delta : LocalPositionVector or array_like
        Delta in the body frame (m)
    model : Model, Surface or str, optional
        Defaults to the model of ``p``

    Returns
    -------
    GeodeticPosition
        Destination
    """
    return LocalFrame.body(yaw, pitch, roll, p, model).local_to_geodetic(delta)
