import unittest

from dss.methods.saw import SAWMethod
from models import Alternative, Criterion, CriterionType, Dataset


class TestSAWMethod(unittest.TestCase):
    def test_default_dataset_golden_scores(self) -> None:
        dataset = Dataset.default()
        results = SAWMethod().calculate(dataset.criteria, dataset.alternatives)

        self.assertEqual([result.alternative_id for result in results], ["a2", "a1", "a3"])
        self.assertEqual([result.rank for result in results], [1, 2, 3])
        self.assertAlmostEqual(results[0].score, 61.0 / 75.0, places=9)
        self.assertAlmostEqual(results[1].score, 23.0 / 30.0, places=9)
        self.assertAlmostEqual(results[2].score, 0.4 + 7.6 / 21.0, places=9)

    def test_normalized_values_use_column_extremes(self) -> None:
        dataset = Dataset.default()
        results = SAWMethod().calculate(dataset.criteria, dataset.alternatives)
        option_c = next(result for result in results if result.alternative_id == "a3")

        self.assertAlmostEqual(option_c.normalized_values["c1"], 1.0, places=9)
        self.assertAlmostEqual(option_c.normalized_values["c2"], 7.0 / 9.0, places=9)
        self.assertAlmostEqual(option_c.normalized_values["c3"], 3.0 / 7.0, places=9)

    def test_cost_column_without_positive_values_scores_zero(self) -> None:
        criteria = [Criterion(id="c1", name="Penalty", weight=1.0, type=CriterionType.COST)]
        alternatives = [
            Alternative(id="a1", name="A", values={"c1": 0}),
            Alternative(id="a2", name="B", values={"c1": -4}),
        ]

        results = SAWMethod().calculate(criteria, alternatives)
        self.assertEqual([result.score for result in results], [0.0, 0.0])
        self.assertEqual([result.alternative_id for result in results], ["a1", "a2"])

    def test_missing_value_reads_as_zero(self) -> None:
        criteria = [Criterion(id="c1", name="Quality", weight=2.0)]
        alternatives = [
            Alternative(id="a1", name="A", values={"c1": 5}),
            Alternative(id="a2", name="B", values={}),
        ]

        results = SAWMethod().calculate(criteria, alternatives)
        self.assertEqual(results[0].alternative_id, "a1")
        self.assertAlmostEqual(results[0].score, 2.0)
        self.assertAlmostEqual(results[1].score, 0.0)

    def test_negative_weight_contributes_nothing(self) -> None:
        criteria = [
            Criterion(id="c1", name="Quality", weight=1.0),
            Criterion(id="c2", name="Noise", weight=-3.0),
        ]
        alternatives = [
            Alternative(id="a1", name="A", values={"c1": 4, "c2": 10}),
            Alternative(id="a2", name="B", values={"c1": 8, "c2": 1}),
        ]

        results = SAWMethod().calculate(criteria, alternatives)
        self.assertAlmostEqual(results[0].score, 1.0)
        self.assertAlmostEqual(results[1].score, 0.5)


if __name__ == "__main__":
    unittest.main()
