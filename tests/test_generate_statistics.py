import unittest
from unittest import mock

from persistent_heap.algorithms.Algorithm import Algorithm
from persistent_heap.algorithms.algorithms import algorithms
from persistent_heap.generate_statistics import InvalidAlgorithmError, _work, get_avg_operation_cnt, push_costs, to_displayable_int


def by_name(name):
    return next(algorithm for algorithm in algorithms if algorithm.name == name)


class OperationCountTests(unittest.TestCase):
    def test_insertion_sort(self):
        best, worst, avg = get_avg_operation_cnt(by_name("insertion sort"), 3)
        self.assertEqual((best, worst), (2, 3))
        self.assertAlmostEqual(avg, 16 / 6)

    def test_heap_push(self):
        self.assertEqual(get_avg_operation_cnt(by_name("heap push"), 3), (3, 3, 3.0))
        self.assertEqual(get_avg_operation_cnt(by_name("array heap push"), 3), (2, 2, 2.0))

    def test_sampled(self):
        with mock.patch("persistent_heap.generate_statistics.MAX_SAMPLE_TIME_MS", 20):
            best, worst, avg = get_avg_operation_cnt(by_name("insertion sort"), 12)
        self.assertGreaterEqual(best, 11)
        self.assertLessEqual(worst, 12 * 11 // 2)
        self.assertTrue(best <= avg <= worst)

    def test_invalid_algorithm(self):
        noop = Algorithm("noop", lambda arr: None, 9)
        self.assertRaises(InvalidAlgorithmError, get_avg_operation_cnt, noop, 3)

    def test_work_row(self):
        idx = [algorithm.name for algorithm in algorithms].index("insertion sort")
        fields = _work((idx, 3)).split(",")
        self.assertEqual(len(fields), 9)
        self.assertEqual(fields[:4], ["insertion sort", "3", "6", "1"])

    def test_to_displayable_int(self):
        self.assertEqual(to_displayable_int(720), "720")
        self.assertEqual(to_displayable_int(10**12), "1.00e+12")


class PushCostTests(unittest.TestCase):
    def test_push_costs(self):
        df = push_costs([5, 3, 8])
        self.assertEqual(df["size"].tolist(), [1, 2, 3])
        self.assertEqual(df["height"].tolist(), [1, 2, 2])
        self.assertEqual(df["rebuilt"].tolist(), [1, 2, 2])
        self.assertEqual(df["shared"].tolist(), [0, 0, 1])
        self.assertEqual(df["comparisons"].tolist(), [0, 1, 2])

    def test_rebuilt_nodes_stay_logarithmic(self):
        df = push_costs(range(200))
        self.assertTrue((df["rebuilt"] == df["height"]).all())
        self.assertEqual(df["shared"].iloc[-1], 200 - df["height"].iloc[-1])

    def test_empty(self):
        df = push_costs([])
        self.assertEqual(len(df), 0)
        self.assertEqual(list(df.columns), ["size", "height", "rebuilt", "shared", "comparisons"])
