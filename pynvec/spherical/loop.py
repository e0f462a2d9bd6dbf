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

"""Simple closed loops of minor arcs (spherical polygons)

A loop is stored clockwise whatever the orientation of the vertices it was
built from. Its interior is the region to the right of every edge.

Point-in-loop tests draw a minor arc from a known inside point to the
tested point and count the edges it crosses. The two inside points are
the centroids of the first ears found by ear clipping.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence

import numpy as np

from ..core.constants import LOOP_BOUND_MARGIN, R2D
from ..core.vector import NEG_UNIT_Z, UNIT_Z, ZERO, dot, eq_zero, vec3_eq
from ..coordinate.positions import NVector
from .base import angle_radians_between, side_exact
from .minor_arc import MinorArc
from .rectangle import Rectangle
from .sphere import Sphere

logger = logging.getLogger(__name__)

_NORTH_POLE = NVector(UNIT_Z)
_SOUTH_POLE = NVector(NEG_UNIT_Z)


class Classification(Enum):
    """Vertex classification in a clockwise loop"""
    CONVEX = 'convex'
    REFLEX = 'reflex'
    BOTH = 'both'


@dataclass
class Vertex:
    position: NVector
    classification: Classification

    def copy(self) -> 'Vertex':
        return Vertex(self.position, self.classification)


Triangle = tuple[NVector, NVector, NVector]


class Loop:
    """
    Single chain of vertices where the first vertex is implicitly connected
    to the last

    Parameters
    ----------
    vertices : sequence of NVector
        Vertices in any orientation; the loop may be explicitly closed
        (first vertex repeated at the end)

    Notes
    -----
    Fewer than 3 distinct vertices, or vertices all on the same great
    circle, give the empty loop.

    Examples
    --------
    >>> from pynvec.coordinate.positions import NVector
    >>> vs = [NVector.from_lat_long_degrees(lat, lon)
    ...       for lat, lon in [(20.0, 20.0), (10.0, 30.0), (40.0, 40.0)]]
    >>> Loop(vs).contains_point(NVector.from_lat_long_degrees(15.0, 30.0))
    True
    """

    EMPTY: 'Loop'

    def __init__(self, vertices: Sequence[NVector] = ()):
        self._vertices: list[Vertex] = []
        self._edges: list[MinorArc] = []
        self._insides: Optional[tuple[NVector, NVector]] = None

        vs = _opened(vertices)
        if len(vs) < 3:
            logger.debug(f"Loop: {len(vs)} vertices, loop is empty")
            return
        edges, clockwise = _to_edges(vs)
        if not clockwise:
            edges = _reverse_edges(edges)
        classified = _clockwise_edges_to_vertices(edges)
        if all(v.classification is Classification.BOTH for v in classified):
            logger.debug("Loop: all vertices are collinear, loop is empty")
            return
        self._vertices = classified
        self._edges = edges
        if len(vs) > 3:
            self._insides = _find_insides(classified)

    @property
    def vertices(self) -> list[NVector]:
        """Vertices in clockwise order"""
        return [v.position for v in self._vertices]

    @property
    def edges(self) -> list[MinorArc]:
        """Edges in clockwise order"""
        return list(self._edges)

    @property
    def num_vertices(self) -> int:
        return len(self._vertices)

    def vertex(self, i: int) -> NVector:
        return self._vertices[i].position

    def is_empty(self) -> bool:
        return len(self._vertices) == 0

    def has_vertex(self, p: NVector) -> bool:
        return any(v.position == p for v in self._vertices)

    def any_edge_contains_point(self, p: NVector) -> bool:
        return any(e.contains_point(p) for e in self._edges)

    def is_convex(self) -> bool:
        """True if all turns go the same way, collinear vertices ignored"""
        n = len(self._vertices)
        if n < 3:
            return False
        if n == 3:
            return True
        cur_side = None
        for i in range(n):
            prev = self._vertices[i - 1].position
            cur = self._vertices[i].position
            nxt = self._vertices[(i + 1) % n].position
            s = Sphere.side(prev, cur, nxt)
            if s == 0:
                continue
            if cur_side is None:
                cur_side = s
            elif cur_side != s:
                return False
        return True

    def is_simple(self) -> bool:
        """True if no edge is degenerate and no two non-adjacent edges intersect"""
        n = len(self._vertices)
        for i in range(n):
            if not Sphere.is_great_circle(self._vertices[i].position,
                                          self._vertices[(i + 1) % n].position):
                return False
        es = self._edges
        if len(es) <= 3:
            return True
        for i in range(len(es) - 1):
            last = len(es) - 1 if i == 0 else len(es)
            for j in range(i + 2, last):
                if es[i].intersection(es[j]) is not None:
                    return False
        return True

    def contains_point(self, p: NVector) -> bool:
        """
        True if ``p`` is strictly inside the loop

        Positions on an edge or at a vertex are not contained.
        """
        if self.has_vertex(p) or self.any_edge_contains_point(p):
            return False
        if self._insides is None:
            if len(self._vertices) == 3:
                return self._triangle_contains_point(p)
            return False

        a, b = self._insides
        if p == a or p == b:
            return True
        inside = b if a.is_antipode_of(p) else a
        ray = MinorArc(inside, p)
        count = 0
        first = ZERO
        prev = ZERO
        last = len(self._edges) - 1
        for i, e in enumerate(self._edges):
            iv = ray.intersection(e)
            if iv is None:
                prev = ZERO
                continue
            v = iv.as_vec3()
            if i == 0:
                count += 1
                first = v
            elif i == last:
                # crossing at the first vertex was already counted by edge 0
                if not (vec3_eq(first, v) or vec3_eq(prev, v)):
                    count += 1
            else:
                if not vec3_eq(prev, v):
                    count += 1
                prev = v
        return count % 2 == 0

    def _triangle_contains_point(self, p: NVector) -> bool:
        if self.has_vertex(p):
            return False
        v = p.as_vec3()
        s1 = -dot(v, self._edges[0].normal)
        s2 = -dot(v, self._edges[1].normal)
        s3 = -dot(v, self._edges[2].normal)
        if eq_zero(s1) and s2 > 0.0 and s3 > 0.0:
            return False
        if eq_zero(s2) and s1 > 0.0 and s3 > 0.0:
            return False
        if eq_zero(s3) and s1 > 0.0 and s2 > 0.0:
            return False
        return s1 > 0.0 and s2 > 0.0 and s3 > 0.0

    def minimum_bounding_rectangle(self) -> Rectangle:
        """Smallest latitude/longitude rectangle containing the loop"""
        mbr = Rectangle.from_union(Rectangle.from_minor_arc(e) for e in self._edges)
        mbr = mbr.expand(LOOP_BOUND_MARGIN)
        mbr = mbr.polar_closure()
        if self.contains_point(_NORTH_POLE):
            mbr = mbr.expand_to_north_pole()
        if mbr.is_longitude_full() and self.contains_point(_SOUTH_POLE):
            mbr = mbr.expand_to_south_pole()
        return mbr

    def triangulate(self) -> list[Triangle]:
        """
        Triangles covering the loop, by ear clipping

        Returns
        -------
        list of tuple
            ``num_vertices - 2`` triangles, or an empty list if the loop is
            empty or no ear could be found
        """
        if self.is_empty():
            return []
        if len(self._vertices) == 3:
            return [tuple(v.position for v in self._vertices)]
        return _ear_clipping(self._vertices)

    def spherical_excess_radians(self) -> float:
        if self.is_empty():
            return 0.0
        ns = [e.normal for e in self._edges]
        n = len(ns)
        turn = 0.0
        for i in range(n):
            # signed about the vertex shared by edges i and i + 1
            shared = self._edges[i].end.as_vec3()
            turn += angle_radians_between(ns[i], ns[(i + 1) % n], shared)
        total = n * np.pi - abs(turn)
        return float(total - (n - 2) * np.pi)

    def spherical_excess(self) -> float:
        """Sum of interior angles minus (n - 2) * 180 (deg)"""
        return self.spherical_excess_radians() * R2D

    def area(self, radius: float) -> float:
        """Surface area (m²) on a sphere of the given radius"""
        return self.spherical_excess_radians() * radius * radius

    def distance_to_boundary(self, p: NVector, radius: float) -> float:
        """Shortest distance (m) from ``p`` to any edge"""
        if self.is_empty():
            raise ValueError("empty loop has no boundary")
        return min(e.distance_to(p, radius) for e in self._edges)

    def __eq__(self, other):
        if not isinstance(other, Loop):
            return NotImplemented
        return self.vertices == other.vertices

    def __hash__(self):
        return hash(tuple(self.vertices))

    def __repr__(self):
        return f"Loop({self.vertices!r})"


def is_loop_clockwise(vertices: Sequence[NVector]) -> bool:
    """
    True if the vertices are in clockwise order

    Parameters
    ----------
    vertices : sequence of NVector
        Open or closed vertex list

    Returns
    -------
    bool
        False for fewer than 3 vertices
    """
    vs = _opened(vertices)
    n = len(vs)
    if n < 3:
        return False
    if n == 3:
        return Sphere.side(vs[0], vs[1], vs[2]) < 0
    turn = 0.0
    for i in range(n):
        turn += Sphere.turn_radians(vs[i - 1], vs[i], vs[(i + 1) % n])
    return turn < 0.0


def _opened(vs: Sequence[NVector]) -> list[NVector]:
    vs = list(vs)
    if len(vs) > 1 and vs[0] == vs[-1]:
        return vs[:-1]
    return vs


def _to_edges(vs: list[NVector]) -> tuple[list[MinorArc], bool]:
    n = len(vs)
    edges = [MinorArc(vs[i], vs[(i + 1) % n]) for i in range(n)]
    turn = 0.0
    for i in range(1, n):
        turn += edges[i - 1].turn_radians(edges[i])
    turn += edges[n - 1].turn_radians(edges[0])
    return edges, turn < 0.0


def _reverse_edges(es: list[MinorArc]) -> list[MinorArc]:
    last = len(es) - 1
    res = [es[i].opposite() for i in range(last - 1, -1, -1)]
    res.append(es[last].opposite())
    return res


def _classify(side: int) -> Classification:
    if side > 0:
        return Classification.REFLEX
    if side < 0:
        return Classification.CONVEX
    return Classification.BOTH


def _clockwise_edges_to_vertices(es: list[MinorArc]) -> list[Vertex]:
    res = []
    for i, cur in enumerate(es):
        prev = es[i - 1]
        res.append(Vertex(cur.start, _classify(cur.side_of(prev.start))))
    return res


def _ear_clipping(vertices: list[Vertex]) -> list[Triangle]:
    remaining = [v.copy() for v in vertices]
    res = []
    while True:
        if len(remaining) == 3:
            res.append((remaining[0].position, remaining[1].position, remaining[2].position))
            break
        ear = _next_ear(remaining)
        if ear is None:
            logger.warning(f"Ear clipping failed with {len(remaining)} vertices left, "
                           f"loop is probably not simple")
            res.clear()
            break
        res.append(ear)
    return res


def _find_insides(vertices: list[Vertex]) -> Optional[tuple[NVector, NVector]]:
    remaining = [v.copy() for v in vertices]
    res = []
    while True:
        if len(remaining) == 3:
            inside = Sphere.triangle_mean_position(
                remaining[0].position, remaining[1].position, remaining[2].position)
            if inside is not None:
                res.append(inside)
            break
        ear = _next_ear(remaining)
        if ear is None:
            break
        inside = Sphere.triangle_mean_position(*ear)
        if inside is not None:
            res.append(inside)
            if len(res) == 2:
                break
    if len(res) == 2:
        return res[0], res[1]
    logger.debug("Loop: could not find two inside points")
    return None


def _next_ear(remaining: list[Vertex]) -> Optional[Triangle]:
    n = len(remaining)
    for i in range(n):
        cur = remaining[i]
        if cur.classification is not Classification.CONVEX:
            continue
        prev = remaining[i - 1].position
        nxt = remaining[(i + 1) % n].position
        if _all_outside(prev, cur.position, nxt, remaining):
            del remaining[i]
            if len(remaining) > 3:
                _re_classify(remaining, i)
            return prev, cur.position, nxt
    return None


def _re_classify(vertices: list[Vertex], ear_index: int):
    n = len(vertices)
    last = n - 1
    if ear_index == 0 or ear_index == n:
        vertices[0].classification = _classify(Sphere.side(
            vertices[last].position, vertices[0].position, vertices[1].position))
        vertices[last].classification = _classify(Sphere.side(
            vertices[last - 1].position, vertices[last].position, vertices[0].position))
    else:
        nxt = vertices[0] if ear_index == last else vertices[ear_index + 1]
        vertices[ear_index].classification = _classify(Sphere.side(
            vertices[ear_index - 1].position, vertices[ear_index].position, nxt.position))
        prev = vertices[last] if ear_index == 1 else vertices[ear_index - 2]
        vertices[ear_index - 1].classification = _classify(Sphere.side(
            prev.position, vertices[ear_index - 1].position, vertices[ear_index].position))


def _all_outside(v1: NVector, v2: NVector, v3: NVector, vertices: list[Vertex]) -> bool:
    for v in vertices:
        if v.classification is not Classification.CONVEX and _inside_or_edge(v.position, v1, v2, v3):
            return False
    return True


def _inside_or_edge(p: NVector, v1: NVector, v2: NVector, v3: NVector) -> bool:
    if p == v1 or p == v2 or p == v3:
        return False
    sign = -1.0 if Sphere.side(v1, v2, v3) < 0 else 1.0
    v = p.as_vec3()
    s1 = side_exact(v, v1.as_vec3(), v2.as_vec3()) * sign
    s2 = side_exact(v, v2.as_vec3(), v3.as_vec3()) * sign
    s3 = side_exact(v, v3.as_vec3(), v1.as_vec3()) * sign

    on_edge = False
    if eq_zero(s1) and s2 > 0.0 and s3 > 0.0:
        on_edge = True
    if eq_zero(s2) and s1 > 0.0 and s3 > 0.0:
        if on_edge:
            return False
        on_edge = True
    if eq_zero(s3) and s1 > 0.0 and s2 > 0.0:
        if on_edge:
            return False
        on_edge = True
    if on_edge:
        return True
    return s1 > 0.0 and s2 > 0.0 and s3 > 0.0


Loop.EMPTY = Loop()
