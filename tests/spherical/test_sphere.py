import unittest
import numpy as np
from pynvec.coordinate.models import S84
from pynvec.coordinate.positions import GeocentricPosition, GeodeticPosition, NVector
from pynvec.core.constants import D2R, NM2M
from pynvec.core.exceptions import CoincidentOrAntipodalPoints
from pynvec.spherical.great_circle import GreatCircle
from pynvec.spherical.minor_arc import MinorArc
from pynvec.spherical.sphere import Sphere


def ll(lat, lon):
    return NVector.from_lat_long_degrees(lat, lon)


class TestSphereSurface(unittest.TestCase):

    def test_invalid_radius(self):
        with self.assertRaises(ValueError):
            Sphere(0.0)
        with self.assertRaises(ValueError):
            Sphere(-1.0)
        with self.assertRaises(ValueError):
            Sphere(np.nan)

    def test_radii(self):
        self.assertEqual(Sphere.EARTH.radius, 6371000.8)
        self.assertEqual(Sphere.MOON.radius, 1737400.0)
        self.assertEqual(Sphere.EARTH.radius_at(45.0), (6371000.8, 6371000.8))

    def test_geocentric_round_trip(self):
        p = GeodeticPosition(ll(45.0, 45.0), 1000.0)
        g = Sphere.EARTH.geodetic_to_geocentric(p)
        self.assertAlmostEqual(np.linalg.norm(g.as_vec3()), 6372000.8, places=6)
        r = Sphere.EARTH.geocentric_to_geodetic(g)
        np.testing.assert_allclose(r.nvector.as_vec3(), p.nvector.as_vec3(), atol=1e-15)
        self.assertAlmostEqual(r.height, 1000.0, places=6)
        r = Sphere.EARTH.geocentric_to_geodetic(GeocentricPosition(0.0, 0.0, 6371000.8))
        self.assertAlmostEqual(r.height, 0.0, places=9)

    def test_equality(self):
        self.assertEqual(Sphere(10.0), Sphere(10.0))
        self.assertNotEqual(Sphere(10.0), Sphere(11.0))


class TestDistance(unittest.TestCase):

    def test_distance_near_pole(self):
        self.assertEqual(round(Sphere.EARTH.distance(ll(88.0, 0.0), ll(89.0, -170.0))), 332456)
        self.assertAlmostEqual(S84.surface.distance(ll(88.0, 0.0), ll(89.0, -170.0)), 332456.9, delta=0.01)

    def test_between_poles(self):
        self.assertAlmostEqual(Sphere.EARTH.distance(ll(90.0, 0.0), ll(-90.0, 0.0)), 20015089.309, delta=5e-4)

    def test_distance(self):
        p1 = ll(50.066389, -5.714722)
        p2 = ll(58.643889, -3.07)
        self.assertAlmostEqual(Sphere.EARTH.distance(p1, p2), 968853.666, delta=5e-4)
        self.assertEqual(Sphere.EARTH.distance(p1, p2), Sphere.EARTH.distance(p2, p1))

    def test_across_date_line(self):
        p1 = ll(50.066389, -179.999722)
        p2 = ll(50.066389, 179.999722)
        self.assertAlmostEqual(Sphere.EARTH.distance(p1, p2), 39.685, delta=5e-4)

    def test_zero(self):
        p = ll(50.066389, -5.714722)
        self.assertEqual(Sphere.EARTH.distance(p, p), 0.0)

    def test_transitivity(self):
        d1 = Sphere.EARTH.distance(ll(0.0, 0.0), ll(0.0, 10.0))
        d2 = Sphere.EARTH.distance(ll(0.0, 10.0), ll(0.0, 20.0))
        self.assertAlmostEqual(d1 + d2, Sphere.EARTH.distance(ll(0.0, 0.0), ll(0.0, 20.0)), places=3)

    def test_angle(self):
        self.assertAlmostEqual(Sphere.angle(ll(0.0, 0.0), ll(0.0, 90.0)), 90.0, places=12)
        self.assertAlmostEqual(Sphere.angle_radians(ll(0.0, 0.0), ll(90.0, 0.0)), np.pi / 2, places=15)


class TestBearings(unittest.TestCase):

    def test_initial_bearing(self):
        p1 = ll(50.06638889, -5.71472222)
        p2 = ll(58.64388889, -3.07)
        self.assertAlmostEqual(Sphere.initial_bearing(p1, p2), 9.1198181, places=6)
        self.assertAlmostEqual(Sphere.initial_bearing(p2, p1), 191.2752013, places=6)

    def test_final_bearing(self):
        p1 = ll(50.06638889, -5.71472222)
        p2 = ll(58.64388889, -3.07)
        self.assertAlmostEqual(Sphere.final_bearing(p1, p2), 11.2752013, places=6)
        self.assertAlmostEqual(Sphere.final_bearing(p2, p1), 189.1198181, places=6)

    def test_equator(self):
        self.assertAlmostEqual(Sphere.initial_bearing(ll(0.0, 0.0), ll(0.0, 1.0)), 90.0, places=9)
        self.assertAlmostEqual(Sphere.initial_bearing(ll(0.0, 1.0), ll(0.0, 0.0)), 270.0, places=9)
        self.assertAlmostEqual(Sphere.final_bearing(ll(0.0, 0.0), ll(0.0, 1.0)), 90.0, places=9)
        self.assertAlmostEqual(Sphere.final_bearing(ll(0.0, 1.0), ll(0.0, 0.0)), 270.0, places=9)

    def test_same_longitude(self):
        b = Sphere.initial_bearing(ll(50.0, -5.0), ll(58.0, -5.0))
        self.assertLess(min(b, 360.0 - b), 1e-7)
        self.assertAlmostEqual(Sphere.initial_bearing(ll(58.0, -5.0), ll(50.0, -5.0)), 180.0, places=7)

    def test_from_poles(self):
        self.assertAlmostEqual(Sphere.initial_bearing(ll(90.0, 0.0), ll(50.0, 154.0)), 26.0, places=9)
        self.assertAlmostEqual(Sphere.initial_bearing(ll(-90.0, 0.0), ll(50.0, 154.0)), 154.0, places=9)
        self.assertAlmostEqual(Sphere.initial_bearing(ll(-90.0, 0.0), ll(50.0, 180.0)), 180.0, places=9)

    def test_degenerate(self):
        p = ll(50.0, -18.0)
        with self.assertRaises(CoincidentOrAntipodalPoints):
            Sphere.initial_bearing(p, p)
        with self.assertRaises(CoincidentOrAntipodalPoints):
            Sphere.initial_bearing(p, p.antipode())
        with self.assertRaises(CoincidentOrAntipodalPoints):
            Sphere.final_bearing(p, p)
        with self.assertRaises(CoincidentOrAntipodalPoints):
            Sphere.final_bearing(ll(90.0, 0.0), ll(-90.0, 0.0))


class TestDestination(unittest.TestCase):

    def assertNVectorAlmostEqual(self, expected, actual, atol=1e-8):
        np.testing.assert_allclose(actual.as_vec3(), expected.as_vec3(), atol=atol)

    def test_across_date_line(self):
        d = Sphere.EARTH.destination(ll(0.0, 154.0), 90.0, 5000000.0)
        self.assertNVectorAlmostEqual(ll(0.0, -161.0339254), d)

    def test_travelled_longitude_greater_than_90(self):
        d = Sphere.EARTH.destination(ll(60.2, 11.1), 12.4, 2000.0 * NM2M)
        self.assertNVectorAlmostEqual(ll(82.6380125, 124.1259551), d)

    def test_from_poles(self):
        quarter = Sphere.EARTH.radius * np.pi / 4.0
        self.assertNVectorAlmostEqual(ll(45.0, 0.0), Sphere.EARTH.destination(ll(90.0, 0.0), 180.0, quarter))
        self.assertNVectorAlmostEqual(ll(-45.0, 0.0), Sphere.EARTH.destination(ll(-90.0, 0.0), 0.0, quarter))

    def test_negative_distance(self):
        d = Sphere.EARTH.destination(ll(0.0, 0.0), 90.0, -Sphere.EARTH.radius * 10.0 * D2R)
        self.assertNVectorAlmostEqual(ll(0.0, -10.0), d)

    def test_zero_distance(self):
        p = ll(55.6050, 13.0038)
        self.assertIs(Sphere.EARTH.destination(p, 96.0217, 0.0), p)

    def test_bearing_distance_consistency(self):
        p1 = ll(10.0, 20.0)
        p2 = ll(-5.0, 33.0)
        d = Sphere.EARTH.destination(p1, Sphere.initial_bearing(p1, p2), Sphere.EARTH.distance(p1, p2))
        self.assertNVectorAlmostEqual(p2, d, atol=1e-10)


class TestInterpolation(unittest.TestCase):

    def test_antipodal(self):
        p = ll(90.0, 0.0)
        self.assertIsNone(Sphere.interpolated_position(p, p.antipode(), 0.5))

    def test_bounds(self):
        p1 = ll(90.0, 0.0)
        p2 = ll(0.0, 0.0)
        self.assertIs(Sphere.interpolated_position(p1, p2, 0.0), p1)
        self.assertIs(Sphere.interpolated_position(p1, p2, 1.0), p2)

    def test_extrapolation(self):
        p1 = ll(0.0, 0.0)
        p2 = ll(1.0, 0.0)
        self.assertIsNone(Sphere.interpolated_position(p1, p2, 1.1, extrapolate=False))
        self.assertIsNone(Sphere.interpolated_position(p1, p2, -0.1, extrapolate=False))
        p = Sphere.interpolated_position(p1, p2, 2.0)
        np.testing.assert_allclose(p.as_vec3(), ll(2.0, 0.0).as_vec3(), atol=1e-12)

    def test_half(self):
        p = Sphere.interpolated_position(ll(10.0, 0.0), ll(-10.0, 0.0), 0.5)
        np.testing.assert_allclose(p.as_vec3(), ll(0.0, 0.0).as_vec3(), atol=1e-12)

    def test_on_great_circle(self):
        p0 = ll(54.0, 154.0)
        p1 = ll(55.0, 155.0)
        i = Sphere.interpolated_position(p0, p1, 0.25)
        self.assertEqual(Sphere.side(i, p0, p1), 0)

    def test_transitivity(self):
        p0 = ll(10.0, 0.0)
        p1 = ll(-10.0, 0.0)
        expected = Sphere.interpolated_position(p0, p1, 0.5)
        actual = Sphere.interpolated_position(Sphere.interpolated_position(p0, p1, 0.25), p1, 1.0 / 3.0)
        np.testing.assert_allclose(actual.as_vec3(), expected.as_vec3(), atol=1e-12)

    def test_position_on_great_circle(self):
        p = Sphere.position_on_great_circle(ll(0.0, 0.0), ll(0.0, 90.0), np.pi / 4)
        np.testing.assert_allclose(p.as_vec3(), ll(0.0, 45.0).as_vec3(), atol=1e-12)


class TestMeanPosition(unittest.TestCase):

    def test_antipodal(self):
        p = ll(0.0, 0.0)
        self.assertIsNone(Sphere.mean_position([p, p.antipode()]))

    def test_empty(self):
        self.assertIsNone(Sphere.mean_position([]))

    def test_one(self):
        p = ll(0.0, 0.0)
        self.assertIs(Sphere.mean_position([p]), p)

    def test_mean(self):
        ps = [ll(10.0, 10.0), ll(10.0, -10.0), ll(-10.0, -10.0), ll(-10.0, 10.0)]
        np.testing.assert_allclose(Sphere.mean_position(ps).as_vec3(), [1.0, 0.0, 0.0], atol=1e-12)

    def test_triangle_mean(self):
        m = Sphere.triangle_mean_position(ll(0.0, 0.0), ll(0.0, 90.0), ll(90.0, 0.0))
        np.testing.assert_allclose(m.as_vec3(), np.ones(3) / np.sqrt(3.0), atol=1e-12)


class TestSideAndTurn(unittest.TestCase):

    def test_side_collinear(self):
        self.assertEqual(Sphere.side(ll(0.0, 0.0), ll(45.0, 0.0), ll(90.0, 0.0)), 0)

    def test_side_same_meridian(self):
        v0 = ll(-78.0, 55.0)
        v1 = ll(-85.0, 55.0)
        v2 = ll(10.0, 55.0)
        self.assertEqual(Sphere.side(v0, v1, v2), 0)
        self.assertEqual(Sphere.side(v0, v2, v1), 0)

    def test_side_equal_positions(self):
        v1 = NVector([1.0, 2.0, 3.0])
        self.assertEqual(Sphere.side(NVector([0.0, 1.0, 0.0]), v1, v1), 0)
        self.assertEqual(Sphere.side(NVector([1.0, -3.0, 0.0]), v1, v1), -1)
        self.assertEqual(Sphere.side(NVector([-1.0, 3.0, 0.0]), v1, v1), 1)

    def test_side_resolution(self):
        one_mas = 1.0 / 3600000000.0
        v1 = ll(-85.0, 55.0)
        v2 = ll(10.0, 55.0)
        self.assertEqual(Sphere.side(ll(-78.0, 55.0 + one_mas), v1, v2), -1)
        self.assertEqual(Sphere.side(ll(-78.0, 55.0 - one_mas), v1, v2), 1)

    def test_turn(self):
        a = ll(0.0, 0.0)
        b = ll(45.0, 0.0)
        self.assertEqual(Sphere.turn_radians(a, b, ll(90.0, 0.0)), 0.0)
        self.assertAlmostEqual(Sphere.turn_radians(a, b, ll(60.0, -10.0)), 0.3175226173130951, places=12)
        self.assertAlmostEqual(Sphere.turn_radians(a, b, ll(60.0, 10.0)), -0.3175226173130951, places=12)
        self.assertAlmostEqual(Sphere.turn(a, b, ll(60.0, 10.0)), np.degrees(-0.3175226173130951), places=10)


class TestTrackDistances(unittest.TestCase):

    def setUp(self):
        self.p = ll(53.2611, -0.7972)
        self.gcp1 = ll(53.3206, -1.7297)
        self.gcp2 = ll(53.1887, 0.1334)

    def test_cross_track(self):
        gc = GreatCircle.from_points(ll(0.0, 0.0), ll(10.0, 0.0))
        self.assertAlmostEqual(Sphere.EARTH.cross_track_distance(ll(1.0, 0.1), gc), 11117.8, delta=0.05)

    def test_cross_track_left(self):
        s84 = S84.surface
        gc1 = GreatCircle.from_points(self.gcp1, self.gcp2)
        self.assertAlmostEqual(s84.cross_track_distance(self.p, gc1), -307.549992, delta=1e-5)
        gc2 = GreatCircle.from_heading(self.gcp1, Sphere.initial_bearing(self.gcp1, self.gcp2))
        self.assertAlmostEqual(s84.cross_track_distance(self.p, gc2), -307.549992, delta=1e-5)

    def test_cross_track_right(self):
        gc = GreatCircle.from_points(self.gcp1, self.gcp2)
        self.assertAlmostEqual(S84.surface.cross_track_distance(self.p.antipode(), gc), 307.549992, delta=1e-5)

    def test_cross_track_zero(self):
        gc = GreatCircle.from_points(self.gcp1, self.gcp2)
        for f in range(0, 100, 7):
            p = Sphere.interpolated_position(self.gcp1, self.gcp2, f / 100.0)
            self.assertAlmostEqual(S84.surface.cross_track_distance(p, gc), 0.0, places=6)

    def test_along_track(self):
        s84 = S84.surface
        behind = MinorArc(self.p, self.gcp2)
        self.assertAlmostEqual(s84.along_track_distance(self.gcp1, behind), -62329.309973, delta=1e-5)
        ahead = MinorArc(self.gcp1, self.gcp2)
        self.assertAlmostEqual(s84.along_track_distance(self.p, ahead), 62331.579102, delta=1e-5)

    def test_along_track_start_and_end(self):
        s84 = S84.surface
        arc = MinorArc(self.p, self.gcp2)
        self.assertAlmostEqual(s84.along_track_distance(self.p, arc), 0.0, places=6)
        self.assertAlmostEqual(s84.along_track_distance(self.gcp2, arc), s84.distance(self.p, self.gcp2), places=6)


if __name__ == '__main__':
    unittest.main()
