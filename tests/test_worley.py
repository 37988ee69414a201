import unittest

from texture_generator import options as opt
from texture_generator.worley import Metric, WorleyNoise, WorleyOutput


def worley(output=WorleyOutput.F1, metric=Metric.EUCLIDEAN):
    return WorleyNoise(
        opt.seed(1),
        opt.frequency(0.05),
        opt.worley_jitter(1.0),
        opt.worley_metric(metric),
        opt.worley_output(output),
    )


class TestWorleyNoise(unittest.TestCase):
    def test_golden_values_at_origin(self):
        self.assertEqual(worley(WorleyOutput.F1).sample(0, 0).gray8(), 17)
        self.assertEqual(worley(WorleyOutput.F2).sample(0, 0).gray8(), 129)
        self.assertEqual(worley(WorleyOutput.CELL_ID).sample(0, 0).gray8(), 229)

    def test_golden_values_off_origin(self):
        self.assertEqual(worley(WorleyOutput.F1).sample(33, -12).gray8(), 88)
        self.assertEqual(worley(WorleyOutput.F2).sample(33, -12).gray8(), 168)
        self.assertEqual(worley(WorleyOutput.CELL_ID).sample(33, -12).gray8(), 168)
        self.assertEqual(worley(WorleyOutput.F2_MINUS_F1).sample(33, -12).gray8(), 80)

    def test_f1_never_exceeds_f2(self):
        for metric in Metric:
            node = worley(metric=metric)
            for y in range(-40, 40, 7):
                for x in range(-40, 40, 7):
                    f1, f2, _ = node.distances(x, y)
                    self.assertLessEqual(f1, f2)

    def test_values_are_normalized(self):
        for output in WorleyOutput:
            node = worley(output)
            for y in range(0, 60, 9):
                for x in range(0, 60, 9):
                    v = node.value(x, y)
                    self.assertGreaterEqual(v, 0.0)
                    self.assertLessEqual(v, 1.0)

    def test_zero_jitter_puts_seeds_on_lattice_corners(self):
        node = WorleyNoise(opt.frequency(0.1), opt.worley_jitter(0.0))
        f1, _, _ = node.distances(0, 0)
        self.assertEqual(f1, 0.0)

    def test_options_accept_enum_values(self):
        node = WorleyNoise(opt.worley_metric("manhattan"), opt.worley_output("f2"))
        self.assertIs(node.metric, Metric.MANHATTAN)
        self.assertIs(node.output, WorleyOutput.F2)


if __name__ == "__main__":
    unittest.main()
