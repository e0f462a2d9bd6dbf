import unittest
from pynvec.coordinate.models import (
    ED50, ETRS89, GRS80, MARS_2000, MODELS, MOON, NAD83, S84, SMARS_2000,
    TOKYO_JAPAN, POTSDAM, WGS84, LongitudeRange, get_model
)
from pynvec.coordinate.positions import NVector
from pynvec.coordinate.surface import Ellipsoid
from pynvec.core.constants import R_MOON, RM_MARS_2000, RM_WGS84
from pynvec.core.exceptions import UnknownModel
from pynvec.spherical.sphere import Sphere


class TestLongitudeRange(unittest.TestCase):

    def test_l180(self):
        self.assertEqual(LongitudeRange.L180.normalise(190.0), -170.0)
        self.assertEqual(LongitudeRange.L180.normalise(-180.0), 180.0)
        self.assertEqual(LongitudeRange.L180.normalise(45.0), 45.0)

    def test_l360(self):
        self.assertEqual(LongitudeRange.L360.normalise(-90.0), 270.0)
        self.assertEqual(LongitudeRange.L360.normalise(360.0), 0.0)


class TestModels(unittest.TestCase):

    def test_catalog(self):
        self.assertEqual(len(MODELS), 16)
        for model_id, model in MODELS.items():
            self.assertEqual(model.model_id, model_id)

    def test_shared_surfaces(self):
        self.assertEqual(ETRS89.surface, GRS80.surface)
        self.assertEqual(NAD83.surface, GRS80.surface)
        self.assertEqual(POTSDAM.surface, TOKYO_JAPAN.surface)
        # Same surface, different models
        self.assertNotEqual(ETRS89, NAD83)

    def test_spherical_models(self):
        self.assertEqual(S84.surface, Sphere(RM_WGS84))
        self.assertEqual(SMARS_2000.surface, Sphere(RM_MARS_2000))
        self.assertEqual(MOON.surface, Sphere(R_MOON))
        self.assertTrue(S84.is_spherical())
        self.assertFalse(WGS84.is_spherical())
        self.assertIsInstance(ED50.surface, Ellipsoid)

    def test_longitude_ranges(self):
        self.assertIs(MARS_2000.longitude_range, LongitudeRange.L360)
        self.assertIs(SMARS_2000.longitude_range, LongitudeRange.L360)
        self.assertIs(WGS84.longitude_range, LongitudeRange.L180)

    def test_to_lat_long(self):
        nv = NVector.from_lat_long_degrees(-20.0, -45.0)
        ll = MARS_2000.to_lat_long(nv)
        self.assertAlmostEqual(ll.latitude, -20.0, places=12)
        self.assertAlmostEqual(ll.longitude, 315.0, places=12)
        self.assertAlmostEqual(WGS84.to_lat_long(nv).longitude, -45.0, places=12)

    def test_get_model(self):
        self.assertIs(get_model("WGS84"), WGS84)
        self.assertIs(get_model("wgs84"), WGS84)
        self.assertIs(get_model("Tokyo_Japan"), TOKYO_JAPAN)
        self.assertIs(get_model(S84), S84)

    def test_get_unknown_model(self):
        with self.assertRaises(UnknownModel):
            get_model("ITRF2020")
        with self.assertRaises(KeyError):
            get_model("")


if __name__ == '__main__':
    unittest.main()
