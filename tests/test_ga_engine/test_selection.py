"""
Tests for selection: cumulative fitness table, unique index sampling,
weighted sampling without replacement, and fittest-individual lookup.
"""

import unittest
import numpy as np

from ga_engine.data_models import EvaluatedIndividual
from ga_engine.errors import EmptyPopulation, InvalidSampleSize
from ga_engine.random_source import NumpyRandomSource, SequenceRandomSource
from ga_engine.selection import (
    relative_cumulative_fitness,
    random_unique_indices,
    weighted_sample_without_replacement,
    fittest_individual,
)


def make_population(fitness_values):
    """Build evaluated individuals {'value': i + 1} with the given fitness."""
    return [
        EvaluatedIndividual(value={'value': i + 1}, fitness=fitness)
        for i, fitness in enumerate(fitness_values)
    ]


class TestRelativeCumulativeFitness(unittest.TestCase):
    """Test the cumulative fitness table."""

    def assertTableAlmostEqual(self, table, expected, places=4):
        self.assertEqual(len(table), len(expected))
        for value, expected_value in zip(table, expected):
            self.assertAlmostEqual(value, expected_value, places=places)

    def test_length_matches_population(self):
        """Table has one entry per individual (no leading zero)."""
        population = make_population([1, 2, 3, 4, 5])
        table = relative_cumulative_fitness(population, True)
        self.assertEqual(len(table), len(population))

    def test_ascending_values(self):
        """Higher fitness gets a larger slice when ascending."""
        population = make_population([1, 2, 3, 4])
        table = relative_cumulative_fitness(population, True)
        self.assertTableAlmostEqual(table, [0.1, 0.3, 0.6, 1.0])

    def test_descending_values(self):
        """Lower fitness gets a larger slice when descending."""
        population = make_population([1, 2, 3, 4])
        table = relative_cumulative_fitness(population, False)
        self.assertTableAlmostEqual(table, [0.48, 0.72, 0.88, 1.0])

    def test_negative_values_are_shifted(self):
        """Negative values shift by abs(min); the resulting zero adds 1 to all."""
        population = make_population([1, -2, 3])
        table = relative_cumulative_fitness(population, True)
        # [1, -2, 3] -> [3, 0, 5] -> [4, 1, 6] -> / 11
        self.assertTableAlmostEqual(table, [4 / 11, 5 / 11, 1.0])

    def test_zero_values_add_one(self):
        """A zero anywhere adds 1 to every value."""
        population = make_population([0, 1, 3])
        table = relative_cumulative_fitness(population, True)
        # [0, 1, 3] -> [1, 2, 4] -> / 7
        self.assertTableAlmostEqual(table, [1 / 7, 3 / 7, 1.0])

    def test_all_zero_gives_uniform_steps(self):
        """All-zero fitness gives equal probabilities."""
        population = make_population([0, 0, 0])
        table = relative_cumulative_fitness(population, True)
        self.assertTableAlmostEqual(table, [1 / 3, 2 / 3, 1.0])

    def test_all_equal_gives_uniform_steps(self):
        """Equal fitness gives equal probabilities in both directions."""
        population = make_population([5, 5, 5, 5])
        for ascending in (True, False):
            table = relative_cumulative_fitness(population, ascending)
            self.assertTableAlmostEqual(table, [0.25, 0.5, 0.75, 1.0])

    def test_zero_fitness_descending(self):
        """Zero fitness is a valid minimum when descending (no division by zero)."""
        population = make_population([0, 1])
        table = relative_cumulative_fitness(population, False)
        # [0, 1] -> [1, 2] -> [1, 0.5] -> / 1.5
        self.assertTableAlmostEqual(table, [2 / 3, 1.0])

    def test_non_decreasing_and_ends_at_one(self):
        """Random populations always give a monotonic table ending at 1."""
        rng = np.random.default_rng(123)
        for _ in range(50):
            size = int(rng.integers(1, 30))
            values = rng.normal(0, 10, size=size).round(2).tolist()
            population = make_population(values)
            for ascending in (True, False):
                table = relative_cumulative_fitness(population, ascending)
                self.assertEqual(len(table), size)
                self.assertTrue(all(b >= a for a, b in zip(table, table[1:])))
                self.assertAlmostEqual(table[-1], 1.0, places=9)

    def test_population_not_modified(self):
        """Adjustments are applied to a copy of the fitness values."""
        population = make_population([-1, 0, 2])
        relative_cumulative_fitness(population, False)
        self.assertEqual([ind.fitness for ind in population], [-1, 0, 2])

    def test_empty_population_raises(self):
        """Empty population raises EmptyPopulation."""
        with self.assertRaises(EmptyPopulation):
            relative_cumulative_fitness([], True)


class TestRandomUniqueIndices(unittest.TestCase):
    """Test unique index sampling from a cumulative table."""

    def setUp(self):
        self.weights = [0, 0.1, 0.3, 0.6, 1]

    def test_draws_map_to_first_greater_index(self):
        """Each draw maps to the first index whose value exceeds it."""
        source = SequenceRandomSource([0.05, 0.1, 0.38, 0.95])
        indices = random_unique_indices(self.weights, 4, source)
        self.assertEqual(indices, [1, 2, 3, 4])

    def test_duplicates_are_redrawn(self):
        """A repeated index is rejected and drawn again."""
        source = SequenceRandomSource([0.1, 0.1, 0.38, 0.95])
        indices = random_unique_indices(self.weights, 3, source)
        self.assertEqual(indices, [2, 3, 4])
        self.assertEqual(source.draws, 4)

    def test_returns_n_indices_in_range(self):
        """Indices are unique integers within the table."""
        source = NumpyRandomSource.from_seed(0)
        indices = random_unique_indices(self.weights, 3, source)
        self.assertEqual(len(indices), 3)
        self.assertEqual(len(set(indices)), 3)
        for index in indices:
            self.assertIsInstance(index, int)
            self.assertGreaterEqual(index, 0)
            self.assertLess(index, len(self.weights))

    def test_zero_returns_empty_without_drawing(self):
        source = SequenceRandomSource([0.5])
        self.assertEqual(random_unique_indices(self.weights, 0, source), [])
        self.assertEqual(source.draws, 0)

    def test_negative_n_raises(self):
        with self.assertRaises(InvalidSampleSize):
            random_unique_indices(self.weights, -1, SequenceRandomSource([0.5]))

    def test_n_larger_than_table_raises(self):
        with self.assertRaises(InvalidSampleSize):
            random_unique_indices(self.weights, 6, SequenceRandomSource([0.5]))

    def test_n_larger_than_selectable_raises(self):
        """Index 0 has zero probability here, so 5 unique indices are impossible."""
        with self.assertRaises(InvalidSampleSize):
            random_unique_indices(self.weights, 5, SequenceRandomSource([0.5]))

    def test_draw_beyond_table_end_maps_to_last_index(self):
        """Floating-point shortfall below 1.0 never produces an invalid index."""
        table = [0.5, 0.9999999]
        source = SequenceRandomSource([0.99999995])
        self.assertEqual(random_unique_indices(table, 1, source), [1])


class TestWeightedSampleWithoutReplacement(unittest.TestCase):
    """Test fitness-weighted sampling of unique individuals."""

    def setUp(self):
        # Cumulative table: [0.1, 0.3, 0.6, 1.0] ascending, [0.48, 0.72, 0.88, 1.0] descending
        self.population = make_population([1, 2, 3, 4])

    def test_sample_ascending(self):
        """Fixed draws select the expected individuals when ascending."""
        source = SequenceRandomSource([0.01, 0.05, 0.38])
        sample = weighted_sample_without_replacement(self.population, 2, True, source)
        self.assertEqual(len(sample), 2)
        self.assertIs(sample[0], self.population[0])
        self.assertIs(sample[1], self.population[2])

    def test_sample_descending(self):
        """Fixed draws select the expected individuals when descending."""
        source = SequenceRandomSource([0.01, 0.5, 0.92])
        sample = weighted_sample_without_replacement(self.population, 3, False, source)
        self.assertEqual(
            sample,
            [self.population[0], self.population[1], self.population[3]]
        )

    def test_returns_n_items(self):
        population = make_population([1, 2])
        sample = weighted_sample_without_replacement(
            population, 1, True, NumpyRandomSource.from_seed(1)
        )
        self.assertEqual(len(sample), 1)

    def test_full_population_sample(self):
        """Sampling the whole population returns every individual once."""
        sample = weighted_sample_without_replacement(
            self.population, 4, True, NumpyRandomSource.from_seed(2)
        )
        self.assertEqual(len(sample), 4)
        self.assertEqual({id(ind) for ind in sample}, {id(ind) for ind in self.population})

    def test_never_returns_duplicates(self):
        """Samples never contain the same position twice."""
        rng = np.random.default_rng(7)
        source = NumpyRandomSource(rng)
        population = make_population(rng.integers(-5, 20, size=20).tolist())
        for _ in range(25):
            sample = weighted_sample_without_replacement(population, 15, True, source)
            self.assertEqual(len(sample), 15)
            self.assertEqual(len({id(ind) for ind in sample}), 15)

    def test_n_greater_than_population_raises(self):
        population = make_population([1, 2])
        with self.assertRaises(InvalidSampleSize):
            weighted_sample_without_replacement(
                population, 3, True, SequenceRandomSource([0.5])
            )

    def test_negative_n_raises(self):
        with self.assertRaises(InvalidSampleSize) as ctx:
            weighted_sample_without_replacement(
                self.population, -1, True, SequenceRandomSource([0.5])
            )
        self.assertIn("between 0 and the population size (4)", str(ctx.exception))


class TestFittestIndividual(unittest.TestCase):
    """Test fittest-individual lookup."""

    def setUp(self):
        self.population = make_population([3, 1, 5, 2, 4])

    def test_ascending_returns_maximum(self):
        fittest = fittest_individual(self.population, True)
        self.assertEqual(fittest.fitness, 5)
        self.assertIs(fittest, self.population[2])

    def test_descending_returns_minimum(self):
        fittest = fittest_individual(self.population, False)
        self.assertEqual(fittest.fitness, 1)
        self.assertIs(fittest, self.population[1])

    def test_ties_return_first_occurrence(self):
        """Ties are broken by population order in both directions."""
        population = [
            EvaluatedIndividual(value='a', fitness=2),
            EvaluatedIndividual(value='b', fitness=7),
            EvaluatedIndividual(value='c', fitness=7),
            EvaluatedIndividual(value='d', fitness=2),
        ]
        self.assertEqual(fittest_individual(population, True).value, 'b')
        self.assertEqual(fittest_individual(population, False).value, 'a')

    def test_negative_fitness(self):
        population = make_population([-3, -1, -7])
        self.assertEqual(fittest_individual(population, True).fitness, -1)
        self.assertEqual(fittest_individual(population, False).fitness, -7)

    def test_empty_population_raises(self):
        with self.assertRaises(EmptyPopulation):
            fittest_individual([], True)


if __name__ == '__main__':
    unittest.main()
