"""
Selection operators for the GA engine.

Implements the cumulative fitness table, roulette-wheel sampling of
unique individuals, and fittest-individual lookup.
"""

from typing import List, Sequence

import numpy as np

from .data_models import EvaluatedIndividual
from .errors import EmptyPopulation, InvalidSampleSize
from .random_source import RandomSource


def relative_cumulative_fitness(
    population: Sequence[EvaluatedIndividual],
    ascending: bool = True
) -> List[float]:
    """
    Build the cumulative selection-probability table of a population.

    Steps, in order:
        1. Extract the fitness values
        2. If any value is negative, add abs(min) to every value
        3. If any value is exactly zero, add 1 to every value
        4. If descending, replace every value v with 1 / v
        5. Normalize by the sum
        6. Take the cumulative sum

    Step 3 changes the ratios between non-zero values.

    Args:
        population: Evaluated individuals
        ascending: True when higher fitness should be sampled more often

    Returns:
        Non-decreasing list of cumulative probabilities, one per
        individual, ending at (approximately) 1.0

    Raises:
        EmptyPopulation: If population is empty

    Example:
        fitness [1, 2, 3, 4], ascending  -> [0.1, 0.3, 0.6, 1.0]
        fitness [1, 2, 3, 4], descending -> [0.48, 0.72, 0.88, 1.0]
    """
    if len(population) == 0:
        raise EmptyPopulation("Cannot build a fitness table for an empty population")

    fitness = np.array([individual.fitness for individual in population], dtype=float)

    if np.any(fitness < 0):
        fitness = fitness + abs(fitness.min())

    if np.any(fitness == 0):
        fitness = fitness + 1

    if not ascending:
        fitness = 1.0 / fitness

    relative_fitness = fitness / fitness.sum()
    return np.cumsum(relative_fitness).tolist()


def random_unique_indices(
    table: Sequence[float],
    n: int,
    random_source: RandomSource
) -> List[int]:
    """
    Draw n distinct indices from a cumulative probability table.

    Each draw u maps to the first index i with table[i] > u. Indices that
    were already accepted are redrawn. A draw at or above the final
    cumulative value (floating-point shortfall below 1.0) maps to the last
    index that carries probability.

    Args:
        table: Non-decreasing cumulative probabilities
        n: Number of indices to return
        random_source: Source of uniform draws in [0, 1)

    Returns:
        List of n unique indices, in the order they were accepted

    Raises:
        InvalidSampleSize: If n is negative, exceeds len(table), or exceeds
            the number of indices with non-zero probability
    """
    if n < 0 or n > len(table):
        raise InvalidSampleSize(
            f"n must be between 0 and the population size ({len(table)}), got: {n}"
        )
    if n == 0:
        return []

    cumulative = np.asarray(table, dtype=float)
    steps = np.diff(cumulative, prepend=0.0)
    selectable = np.flatnonzero(steps > 0)

    if n > len(selectable):
        raise InvalidSampleSize(
            f"Cannot draw {n} unique indices: only {len(selectable)} have non-zero probability"
        )

    last_index = int(selectable[-1])
    indices: List[int] = []
    chosen = set()

    while len(indices) < n:
        draw = random_source.random()
        index = min(int(np.searchsorted(cumulative, draw, side='right')), last_index)
        if index not in chosen:
            chosen.add(index)
            indices.append(index)

    return indices


def weighted_sample_without_replacement(
    population: Sequence[EvaluatedIndividual],
    n: int,
    ascending: bool,
    random_source: RandomSource
) -> List[EvaluatedIndividual]:
    """
    Sample n distinct individuals, weighted by fitness.

    Uses rejection sampling, so expected draws grow as n approaches the
    population size.

    Args:
        population: Evaluated individuals
        n: Number of individuals to sample
        ascending: True when higher fitness should be sampled more often
        random_source: Source of uniform draws in [0, 1)

    Returns:
        List of n individuals from distinct positions, in draw order

    Raises:
        InvalidSampleSize: If n is negative or greater than the population size
    """
    if n < 0 or n > len(population):
        raise InvalidSampleSize(
            f"n must be between 0 and the population size ({len(population)}), got: {n}"
        )
    if n == 0:
        return []

    table = relative_cumulative_fitness(population, ascending)
    indices = random_unique_indices(table, n, random_source)
    return [population[index] for index in indices]


def fittest_individual(
    population: Sequence[EvaluatedIndividual],
    ascending: bool = True
) -> EvaluatedIndividual:
    """
    Return the fittest individual of a population.

    Ties go to the first occurrence in population order.

    Args:
        population: Evaluated individuals
        ascending: True to pick the maximum fitness, False for the minimum

    Returns:
        The fittest EvaluatedIndividual

    Raises:
        EmptyPopulation: If population is empty
    """
    if len(population) == 0:
        raise EmptyPopulation("Cannot select the fittest individual of an empty population")

    fitness = np.array([individual.fitness for individual in population], dtype=float)
    index = int(np.argmax(fitness)) if ascending else int(np.argmin(fitness))
    return population[index]
