import unittest
import numpy as np
from pynvec.coordinate.positions import NVector
from pynvec.spherical.great_circle import GreatCircle
from pynvec.spherical.minor_arc import MinorArc
from pynvec.spherical.sphere import Sphere


def ll(lat, lon):
    return NVector.from_lat_long_degrees(lat, lon)


def arc(lat1, lon1, lat2, lon2):
    return MinorArc(ll(lat1, lon1), ll(lat2, lon2))


class TestIntersection(unittest.TestCase):

    def assertIntersection(self, expected, arc1, arc2):
        i = arc1.intersection(arc2)
        self.assertIsNotNone(i)
        np.testing.assert_allclose(i.as_vec3(), expected.as_vec3(), atol=1e-8)
        self.assertEqual(Sphere.side(i, arc1.start, arc1.end), 0)
        self.assertEqual(Sphere.side(i, arc2.start, arc2.end), 0)

    def test_same_arc(self):
        a = arc(54.0, 154.0, -54.0, 154.0)
        self.assertIsNone(a.intersection(a))

    def test_opposite_arc(self):
        self.assertIsNone(arc(54.0, 154.0, -54.0, 154.0).intersection(arc(-54.0, 154.0, 54.0, 154.0)))

    def test_across_equator(self):
        expected = NVector([-0.5408552101001728, 0.26379271166149, 0.7986795646451562])
        self.assertIntersection(expected, arc(54.0, 154.0, -54.0, 154.0), arc(53.0, 153.0, 53.0, 155.0))

    def test_at_end(self):
        self.assertIntersection(ll(0.0, 20.0), arc(0.0, 0.0, 0.0, 20.0), arc(10.0, 20.0, -10.0, 20.0))

    def test_at_start(self):
        self.assertIntersection(ll(0.0, 0.0), arc(0.0, 0.0, 0.0, 20.0), arc(10.0, 0.0, -10.0, 0.0))

    def test_shared_end(self):
        a1 = arc(-27.1789705075, 152.3083728075, -27.0741667000, 152.2163889000)
        a2 = arc(-27.1245578000, 152.1506886000, -27.0741667000, 152.2163889000)
        self.assertIntersection(ll(-27.0741667, 152.2163889), a1, a2)

    def test_nominal(self):
        self.assertIntersection(ll(-35.0163245, 144.0),
                                arc(-36.0, 143.0, -34.0, 145.0), arc(-34.0, 143.0, -36.0, 145.0))

    def test_null_island(self):
        self.assertIntersection(ll(0.0, 0.0), arc(0.0, -1.0, 0.0, 1.0), arc(-1.0, 0.0, 1.0, 0.0))

    def test_pole(self):
        i = arc(45.0, 0.0, 45.0, 180.0).intersection(arc(45.0, 90.0, 45.0, 270.0))
        self.assertIsNotNone(i)
        self.assertAlmostEqual(i.to_lat_long().latitude, 90.0, places=7)

    def test_across_date_line(self):
        i = arc(50.0, 180.0, 90.0, 180.0).intersection(arc(60.0, 160.0, 80.0, -140.0))
        self.assertIsNotNone(i)
        ll_i = i.to_lat_long()
        self.assertAlmostEqual(ll_i.latitude, 74.16345, delta=1e-5)
        self.assertAlmostEqual(abs(ll_i.longitude), 180.0, places=7)

    def test_small_arc(self):
        a1 = arc(-20.8464124400, 123.2066292450, -20.8463888889, 123.2066666667)
        a2 = arc(-20.3716666667, 122.2811111111, -21.5219444444, 124.5511111111)
        self.assertLess(a1.length(Sphere.EARTH.radius), 5.0)
        self.assertIntersection(ll(-20.8464124, 123.2066292), a1, a2)

    def test_no_intersection(self):
        cases = [
            (arc(0.0, 0.0, 45.0, 0.0), arc(0.0, 90.0, 45.0, 90.0)),
            (arc(54.0, 178.8, 54.0, -179.8), arc(-80.0, 179.0, -85.0, 179.0)),
            (arc(-27.7022222, 152.5372222, -27.4319444, 152.4188889),
             arc(-27.3874939, 152.4658169, -27.3518653, 152.5214517)),
            (arc(-27.7022222, 152.5372222, -27.4319444, 152.4188889),
             arc(-27.4754111, 152.7457194, -27.4733058, 152.6958286)),
            (arc(9.0, -83.0, -33.8179213708, 112.4433954286), arc(10.0, 55.0, 10.0, 179.0)),
            (arc(0.0, 0.0, 45.0, 0.0), arc(46.0, 0.0, 48.0, 0.0)),
        ]
        for a1, a2 in cases:
            self.assertIsNone(a1.intersection(a2))


class TestProjection(unittest.TestCase):

    def test_inside(self):
        start = ll(53.3206, -1.7297)
        end = ll(53.1887, 0.1334)
        pt = ll(53.2611, -0.7972)
        p = MinorArc(start, end).projection(pt)
        self.assertIsNotNone(p)
        np.testing.assert_allclose(p.as_vec3(), ll(53.2583533, -0.7977434).as_vec3(), atol=1e-8)
        xtd = Sphere.EARTH.cross_track_distance(pt, GreatCircle.from_points(end, start))
        self.assertAlmostEqual(xtd, Sphere.EARTH.distance(p, pt), delta=1e-3)

    def test_on_end_points(self):
        start = ll(54.0, 15.0)
        end = ll(54.0, 20.0)
        a = MinorArc(start, end)
        np.testing.assert_allclose(a.projection(end).as_vec3(), end.as_vec3(), atol=1e-8)
        np.testing.assert_allclose(a.projection(start).as_vec3(), start.as_vec3(), atol=1e-8)

    def test_outside(self):
        a = arc(54.0, 15.0, 54.0, 20.0)
        self.assertIsNone(a.projection(ll(54.0, 25.0)))
        self.assertIsNone(a.projection(ll(54.0, 10.0)))

    def test_poles(self):
        a = arc(0.0, -10.0, 0.0, 10.0)
        for pole in (ll(90.0, 0.0), ll(-90.0, 0.0)):
            p = a.projection(pole)
            self.assertIsNotNone(p)
            self.assertAlmostEqual(p.to_lat_long().latitude, 0.0, places=12)


class TestMinorArc(unittest.TestCase):

    def test_contains_point(self):
        a = arc(0.0, 0.0, 0.0, 20.0)
        self.assertTrue(a.contains_point(ll(0.0, 10.0)))
        self.assertTrue(a.contains_point(ll(0.0, 0.0)))
        self.assertFalse(a.contains_point(ll(0.0, 30.0)))
        self.assertFalse(a.contains_point(ll(1.0, 10.0)))

    def test_side_of(self):
        a = arc(0.0, 0.0, 0.0, 20.0)
        self.assertEqual(a.side_of(ll(10.0, 10.0)), 1)
        self.assertEqual(a.side_of(ll(-10.0, 10.0)), -1)
        self.assertEqual(a.side_of(ll(0.0, 50.0)), 0)

    def test_turn(self):
        a1 = arc(0.0, 0.0, 45.0, 0.0)
        self.assertAlmostEqual(a1.turn_radians(arc(45.0, 0.0, 60.0, -10.0)), 0.3175226173130951, places=12)
        self.assertAlmostEqual(a1.turn(arc(45.0, 0.0, 60.0, 10.0)), np.degrees(-0.3175226173130951), places=10)

    def test_opposite(self):
        a = arc(0.0, 0.0, 0.0, 20.0)
        o = a.opposite()
        self.assertIs(o.start, a.end)
        self.assertIs(o.end, a.start)
        np.testing.assert_array_equal(o.normal, -a.normal)
        self.assertEqual(o.opposite(), a)

    def test_length(self):
        a = arc(0.0, 0.0, 0.0, 90.0)
        self.assertAlmostEqual(a.length(Sphere.EARTH.radius), Sphere.EARTH.radius * np.pi / 2, places=6)

    def test_distance_to(self):
        r = Sphere.EARTH.radius
        a = arc(0.0, 0.0, 0.0, 20.0)
        self.assertAlmostEqual(a.distance_to(ll(10.0, 10.0), r), np.radians(10.0) * r, places=3)
        self.assertAlmostEqual(a.distance_to(ll(0.0, 30.0), r), np.radians(10.0) * r, places=3)
        self.assertAlmostEqual(a.distance_to(ll(0.0, -5.0), r), np.radians(5.0) * r, places=3)
        self.assertAlmostEqual(a.distance_to(ll(0.0, 10.0), r), 0.0, places=3)


if __name__ == '__main__':
    unittest.main()
