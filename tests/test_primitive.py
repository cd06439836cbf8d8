import unittest
from gf2prim import gf2x
from gf2prim import primitive


class Primitivity(unittest.TestCase):

    def setUp(self):
        global poly
        poly = gf2x.PolyRing()

    def test_order(self):
        self.assertEqual(primitive.multiplicative_order(poly(7)), 3)      # x^2+x+1
        self.assertEqual(primitive.multiplicative_order(poly(19)), 15)    # x^4+x+1
        self.assertEqual(primitive.multiplicative_order(poly(31)), 5)     # x^4+x^3+x^2+x+1
        self.assertEqual(primitive.multiplicative_order(poly(73)), 9)     # x^6+x^3+1
        self.assertEqual(primitive.multiplicative_order(poly(283)), 51)   # AES polynomial
        self.assertEqual(primitive.multiplicative_order(11), 7)
        self.assertRaises(ValueError, primitive.multiplicative_order, poly(3))
        self.assertRaises(ValueError, primitive.multiplicative_order, poly(0))

    def test_primitive(self):
        self.assertTrue(primitive.is_primitive(poly(7)))
        self.assertTrue(primitive.is_primitive(poly(11)))       # x^3+x+1
        self.assertTrue(primitive.is_primitive(poly(13)))       # x^3+x^2+1
        self.assertTrue(primitive.is_primitive(poly(19)))
        self.assertTrue(primitive.is_primitive(poly(0b11001)))  # x^4+x^3+1
        self.assertTrue(primitive.is_primitive(poly(67)))       # x^6+x+1
        self.assertTrue(primitive.is_primitive(poly(285)))      # x^8+x^4+x^3+x^2+1
        self.assertTrue(primitive.is_primitive(gf2x.PolyRing(8)(7)))
        self.assertTrue(primitive.is_primitive(19))

    def test_not_primitive(self):
        self.assertFalse(primitive.is_primitive(poly(31)))
        self.assertFalse(primitive.is_primitive(poly(73)))
        self.assertFalse(primitive.is_primitive(poly(283)))

    def test_small_degree(self):
        for a in range(4):
            self.assertFalse(primitive.is_primitive(poly(a)))

    def test_reducible(self):
        # Irreducibility is a precondition: these results are what is observed, not asserted truths.
        self.assertIsNone(primitive.multiplicative_order(poly(4)))  # x^2, powers of x end in 0
        self.assertFalse(primitive.is_primitive(poly(4)))
        self.assertFalse(primitive.is_primitive(poly(65)))  # x^6+1
        self.assertFalse(primitive.is_primitive(poly(5)))   # (x+1)^2, x^2 = 1 modulo x^2+1
        self.assertEqual(primitive.multiplicative_order(poly(5)), 2)

    def test_find_primitive(self):
        candidates = [poly(65), poly(73), poly(67), poly(91)]
        self.assertEqual(primitive.find_primitive(candidates), poly(67))
        self.assertIsNone(primitive.find_primitive([poly(31), poly(73)]))
        self.assertIsNone(primitive.find_primitive([]))


if __name__ == "__main__":
    unittest.main()
