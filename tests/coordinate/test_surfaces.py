import unittest
import numpy as np
from pynvec.coordinate.models import GRS80_ELLIPSOID, MARS_2000_ELLIPSOID, WGS84_ELLIPSOID
from pynvec.coordinate.positions import GeocentricPosition, GeodeticPosition, NVector
from pynvec.coordinate.surface import Ellipsoid
from pynvec.core.constants import FE_WGS84, RE_WGS84, RM_WGS84, RP_WGS84


class TestEllipsoid(unittest.TestCase):

    def setUp(self):
        self.wgs84 = Ellipsoid(6378137.0, 298.257223563)

    def test_derived_parameters(self):
        self.assertAlmostEqual(self.wgs84.polar_radius, RP_WGS84, places=6)
        self.assertAlmostEqual(self.wgs84.flattening, FE_WGS84, places=15)
        self.assertAlmostEqual(self.wgs84.eccentricity, 0.08181919084262149, places=14)

    def test_mean_radius(self):
        self.assertAlmostEqual(WGS84_ELLIPSOID.mean_radius, RM_WGS84, places=6)
        self.assertAlmostEqual(WGS84_ELLIPSOID.mean_radius, 6371008.771415059, places=6)

    def test_invalid_parameters(self):
        with self.assertRaises(ValueError):
            Ellipsoid(0.0, 298.0)
        with self.assertRaises(ValueError):
            Ellipsoid(-1.0, 298.0)
        with self.assertRaises(ValueError):
            Ellipsoid(6378137.0, 1.0)
        with self.assertRaises(ValueError):
            Ellipsoid(np.inf, 298.0)

    def test_radii_of_curvature(self):
        M, N = WGS84_ELLIPSOID.radius_at(0.0)
        self.assertAlmostEqual(N, RE_WGS84, places=6)
        e2 = WGS84_ELLIPSOID.eccentricity ** 2
        self.assertAlmostEqual(M, RE_WGS84 * (1.0 - e2), places=6)
        # Both radii are equal at the poles
        M, N = WGS84_ELLIPSOID.radius_at(90.0)
        self.assertAlmostEqual(M, N, places=6)

    def test_geocentric_radius(self):
        self.assertAlmostEqual(WGS84_ELLIPSOID.geocentric_radius(0.0), RE_WGS84, places=6)
        self.assertAlmostEqual(WGS84_ELLIPSOID.geocentric_radius(90.0), RP_WGS84, places=6)

    def test_latitude_radius(self):
        self.assertEqual(WGS84_ELLIPSOID.latitude_radius(90.0), 0.0)
        self.assertEqual(WGS84_ELLIPSOID.latitude_radius(-90.0), 0.0)
        self.assertAlmostEqual(WGS84_ELLIPSOID.latitude_radius(0.0), RE_WGS84, places=6)

    def test_geodetic_to_geocentric(self):
        p = GeodeticPosition(NVector.from_lat_long_degrees(1.0, 2.0), 3.0)
        g = WGS84_ELLIPSOID.geodetic_to_geocentric(p)
        np.testing.assert_allclose(g.as_vec3(), [6373290.277, 222560.201, 110568.827], atol=1e-3)

    def test_poles(self):
        g = WGS84_ELLIPSOID.geodetic_to_geocentric(
            GeodeticPosition(NVector.from_lat_long_degrees(90.0, 0.0), 0.0))
        np.testing.assert_allclose(g.as_vec3(), [0.0, 0.0, RP_WGS84], atol=1e-6)
        p = WGS84_ELLIPSOID.geocentric_to_geodetic(GeocentricPosition(0.0, 0.0, -RP_WGS84 - 100.0))
        np.testing.assert_allclose(p.nvector.as_vec3(), [0.0, 0.0, -1.0], atol=1e-12)
        self.assertAlmostEqual(p.height, 100.0, places=6)

    def test_round_trip(self):
        for lat in np.arange(-89.0, 90.0, 11.0):
            for h in (-1000.0, 0.0, 9000.0):
                p = GeodeticPosition(NVector.from_lat_long_degrees(lat, lat * 2.0), h)
                r = WGS84_ELLIPSOID.geocentric_to_geodetic(WGS84_ELLIPSOID.geodetic_to_geocentric(p))
                np.testing.assert_allclose(r.nvector.as_vec3(), p.nvector.as_vec3(), atol=1e-12)
                self.assertAlmostEqual(r.height, h, places=6)

    def test_round_trip_large_heights(self):
        cases = [(WGS84_ELLIPSOID, (-5.0e6, -1.0e6, 1.0e6, 5.0e6, 1.0e7)),
                 (MARS_2000_ELLIPSOID, (-1.0e6, 1.0e6, 5.0e6, 1.0e7))]
        for surface, heights in cases:
            for lat in (-89.5, -45.0, 0.0, 30.0, 60.0, 89.5):
                for h in heights:
                    p = GeodeticPosition(NVector.from_lat_long_degrees(lat, 100.0), h)
                    r = surface.geocentric_to_geodetic(surface.geodetic_to_geocentric(p))
                    np.testing.assert_allclose(r.nvector.as_vec3(), p.nvector.as_vec3(), atol=1e-10)
                    self.assertAlmostEqual(r.height, h, delta=1e-4)

    def test_equality(self):
        self.assertEqual(WGS84_ELLIPSOID, WGS84_ELLIPSOID)
        self.assertNotEqual(WGS84_ELLIPSOID, GRS80_ELLIPSOID)
        self.assertEqual(len({WGS84_ELLIPSOID, GRS80_ELLIPSOID, WGS84_ELLIPSOID}), 2)


if __name__ == '__main__':
    unittest.main()
