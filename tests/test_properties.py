import copy
import math
import unittest

import numpy as np

from dss import METHODS, MethodId, compute_all_results, compute_results
from models import Alternative, Criterion, CriterionType, Dataset


def random_dataset(seed: int, n_criteria: int = 4, n_alternatives: int = 6) -> Dataset:
    rng = np.random.default_rng(seed)
    criteria = [
        Criterion(
            id=f"c{idx}",
            name=f"Criterion {idx}",
            weight=float(rng.uniform(0.1, 5.0)),
            type=CriterionType.COST if idx % 2 else CriterionType.BENEFIT,
        )
        for idx in range(n_criteria)
    ]
    alternatives = [
        Alternative(
            id=f"a{idx}",
            name=f"Alternative {idx}",
            values={criterion.id: float(rng.uniform(1.0, 100.0)) for criterion in criteria},
        )
        for idx in range(n_alternatives)
    ]
    return Dataset(criteria=criteria, alternatives=alternatives)


class TestEngineProperties(unittest.TestCase):
    def setUp(self) -> None:
        self.datasets = [Dataset.default()] + [random_dataset(seed) for seed in range(5)]

    def test_one_result_per_alternative_with_rank_bijection(self) -> None:
        for dataset in self.datasets:
            for method_id, results in compute_all_results(dataset.criteria, dataset.alternatives).items():
                with self.subTest(method=method_id):
                    self.assertEqual(len(results), len(dataset.alternatives))
                    self.assertEqual(sorted(result.rank for result in results), list(range(1, len(results) + 1)))
                    self.assertEqual(
                        {result.alternative_id for result in results},
                        {alternative.id for alternative in dataset.alternatives},
                    )

    def test_rank_order_follows_score(self) -> None:
        for dataset in self.datasets:
            for method_id, results in compute_all_results(dataset.criteria, dataset.alternatives).items():
                by_rank = sorted(results, key=lambda result: result.rank)
                for better, worse in zip(by_rank, by_rank[1:]):
                    with self.subTest(method=method_id):
                        self.assertGreaterEqual(better.score, worse.score)

    def test_wp_scores_sum_to_one(self) -> None:
        for dataset in self.datasets:
            results = compute_results(MethodId.WP, dataset.criteria, dataset.alternatives)
            self.assertAlmostEqual(sum(result.score for result in results), 1.0, places=9)

    def test_topsis_scores_within_unit_interval(self) -> None:
        for dataset in self.datasets:
            for result in compute_results(MethodId.TOPSIS, dataset.criteria, dataset.alternatives):
                self.assertGreaterEqual(result.score, 0.0)
                self.assertLessEqual(result.score, 1.0)

    def test_inputs_are_not_mutated(self) -> None:
        dataset = random_dataset(42)
        snapshot = copy.deepcopy(dataset)
        compute_all_results(dataset.criteria, dataset.alternatives)
        self.assertEqual(dataset, snapshot)

    def test_single_criterion_single_alternative(self) -> None:
        criteria = [Criterion(id="c1", name="Quality", weight=0.5)]
        alternatives = [Alternative(id="a1", name="Only", values={"c1": 10})]
        expected = {
            "saw": 0.5,
            "topsis": 0.0,
            "moora": 0.5,
            "smart": 0.0,
            "ahp": 1.0,
            "wp": 1.0,
        }

        all_results = compute_all_results(criteria, alternatives)
        for method_id, results in all_results.items():
            with self.subTest(method=method_id):
                self.assertEqual(len(results), 1)
                self.assertEqual(results[0].rank, 1)
                self.assertAlmostEqual(results[0].score, expected[method_id], places=12)

    def test_identical_alternatives_get_adjacent_ranks(self) -> None:
        dataset = Dataset.default()
        twin = Alternative(id="a1-copy", name="Option A copy", values=dict(dataset.alternatives[0].values))
        alternatives = [dataset.alternatives[0], twin]

        for method_id in METHODS:
            results = compute_results(method_id, dataset.criteria, alternatives)
            with self.subTest(method=method_id.value):
                self.assertEqual(results[0].score, results[1].score)
                self.assertEqual([result.rank for result in results], [1, 2])
                self.assertEqual([result.alternative_id for result in results], ["a1", "a1-copy"])

    def test_scores_are_finite_on_positive_data(self) -> None:
        for dataset in self.datasets:
            for results in compute_all_results(dataset.criteria, dataset.alternatives).values():
                self.assertTrue(all(math.isfinite(result.score) for result in results))


if __name__ == "__main__":
    unittest.main()
