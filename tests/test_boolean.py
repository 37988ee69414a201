import unittest

from texture_generator import options as opt
from texture_generator.boolean import (
    And, Boolean, BooleanMode, BooleanOp, Not, Or, Xor, average_gray_above, pack_rgba, red_above, unpack_rgba,
)
from texture_generator.core import BLACK, BLUE, RED, TRANSPARENT, WHITE, Color, Rect, Uniform


class TestComponentWise(unittest.TestCase):
    def test_and_or_xor(self):
        self.assertEqual(And([Uniform(RED), Uniform(WHITE)]).sample(0, 0), RED)
        self.assertEqual(Or([Uniform(RED), Uniform(BLUE)]).sample(0, 0), Color(255, 0, 255, 255))
        self.assertEqual(Xor([Uniform(WHITE), Uniform(WHITE)]).sample(0, 0), Color(0, 0, 0, 0))

    def test_not_inverts_color_and_keeps_alpha(self):
        self.assertEqual(Not(Uniform(Color(255, 0, 10, 77))).sample(0, 0), Color(0, 255, 245, 77))

    def test_folds_many_inputs(self):
        inputs = [Uniform(Color(0b1100, 0, 0)), Uniform(Color(0b1010, 0, 0)), Uniform(Color(0b0110, 0, 0))]
        self.assertEqual(Xor(inputs).sample(0, 0).r, 0b0000)
        self.assertEqual(Or(inputs).sample(0, 0).r, 0b1110)


class TestBitwise(unittest.TestCase):
    def test_word_packing(self):
        c = Color(0x12, 0x34, 0x56, 0x78)
        self.assertEqual(pack_rgba(c), 0x12345678)
        self.assertEqual(unpack_rgba(0x12345678), c)

    def test_not_flips_every_bit(self):
        node = Not(Uniform(Color(0x12, 0x34, 0x56, 0x78)), BooleanMode.BITWISE)
        self.assertEqual(node.sample(0, 0), Color(0xED, 0xCB, 0xA9, 0x87))

    def test_and(self):
        node = And([Uniform(Color(0xF0, 0xFF, 0x0F, 0xFF)), Uniform(Color(0x3C, 0x00, 0xFF, 0x80))], BooleanMode.BITWISE)
        self.assertEqual(node.sample(0, 0), Color(0x30, 0x00, 0x0F, 0x80))


class TestThreshold(unittest.TestCase):
    def setUp(self):
        self.solid = Uniform(WHITE)
        self.clear = Uniform(TRANSPARENT)

    def test_alpha_predicate_by_default(self):
        mode = BooleanMode.THRESHOLD
        self.assertEqual(And([self.solid, self.clear], mode).sample(0, 0), BLACK)
        self.assertEqual(Or([self.solid, self.clear], mode).sample(0, 0), WHITE)
        self.assertEqual(Xor([self.solid, self.clear], mode).sample(0, 0), WHITE)
        self.assertEqual(Xor([self.solid, self.solid], mode).sample(0, 0), BLACK)
        self.assertEqual(Not(self.clear, mode).sample(0, 0), WHITE)

    def test_custom_colors_and_predicate(self):
        node = Or(
            [Uniform(Color(50, 0, 0)), Uniform(Color(150, 0, 0))],
            BooleanMode.THRESHOLD,
            opt.predicate(red_above(100)),
            opt.true_color(RED),
            opt.false_color(BLUE),
        )
        self.assertEqual(node.sample(0, 0), RED)
        node = And([Uniform(Color(50, 50, 50))], BooleanMode.THRESHOLD, opt.predicate(average_gray_above(100)),
                   opt.false_color(BLUE))
        self.assertEqual(node.sample(0, 0), BLUE)


class TestFuzzy(unittest.TestCase):
    def setUp(self):
        self.low = Uniform(Color(0, 0, 0, 51))
        self.high = Uniform(Color(0, 0, 0, 204))

    def test_min_max(self):
        self.assertEqual(Or([self.low, self.high], BooleanMode.FUZZY).sample(0, 0), Color(204, 204, 204, 255))
        self.assertEqual(And([self.low, self.high], BooleanMode.FUZZY).sample(0, 0), Color(51, 51, 51, 255))

    def test_not(self):
        self.assertEqual(Not(self.low, BooleanMode.FUZZY).sample(0, 0), Color(204, 204, 204, 255))


class TestDegenerate(unittest.TestCase):
    def test_no_inputs(self):
        self.assertEqual(And([]).sample(0, 0), TRANSPARENT)
        self.assertEqual(And([None, None]).sample(0, 0), TRANSPARENT)
        self.assertEqual(Boolean(BooleanOp.OR, None, BooleanMode.THRESHOLD, opt.false_color(RED)).sample(0, 0), RED)

    def test_bounds_follow_first_input(self):
        node = Or([None, Uniform(RED, opt.bounds(Rect(0, 0, 5, 6)))])
        self.assertEqual(node.bounds(), Rect(0, 0, 5, 6))


if __name__ == "__main__":
    unittest.main()
