import unittest

from texture_generator.hashing import MASK64, hash_unit, stable_hash, to_seed


class TestStableHash(unittest.TestCase):
    def test_origin_hashes_to_zero(self):
        self.assertEqual(stable_hash(0, 0, 0), 0)

    def test_golden_values(self):
        self.assertEqual(stable_hash(1, 0, 0), 2188501812609620840)
        self.assertEqual(stable_hash(0, 1, 0), 1308397965139786110)
        self.assertEqual(stable_hash(-1, -1, 42), 12121785030885633114)
        self.assertEqual(stable_hash(12345, -678, 0xDEADBEEF), 17694890824077279033)

    def test_output_fits_in_64_bits(self):
        for x, y, seed in [(-5, 7, 1), (2 ** 40, -2 ** 40, 3), (0, 0, -1)]:
            h = stable_hash(x, y, seed)
            self.assertGreaterEqual(h, 0)
            self.assertLessEqual(h, MASK64)

    def test_negative_seed_matches_its_unsigned_reinterpretation(self):
        self.assertEqual(stable_hash(3, 4, -1), stable_hash(3, 4, to_seed(-1)))
        self.assertEqual(to_seed(-1), MASK64)

    def test_hash_unit_is_normalized(self):
        for x in range(-4, 4):
            v = hash_unit(x, 2 * x, 9)
            self.assertGreaterEqual(v, 0.0)
            self.assertLessEqual(v, 1.0)


if __name__ == "__main__":
    unittest.main()
