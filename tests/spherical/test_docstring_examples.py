import doctest
import unittest

import pynvec.spherical
from pynvec.spherical import loop, rectangle, sphere


class TestDocstringExamples(unittest.TestCase):

    def test_examples(self):
        for module in (pynvec.spherical, sphere, loop, rectangle):
            result = doctest.testmod(module)
            self.assertEqual(result.failed, 0, module.__name__)
            self.assertGreater(result.attempted, 0, module.__name__)


if __name__ == '__main__':
    unittest.main()
