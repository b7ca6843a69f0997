"""
Mutation for the GA engine.

How a single individual is perturbed, and how the rate is applied per
gene or per character, belongs to the model's mutation function.
"""

from typing import Any, Callable, List, Sequence


def mutate(
    population: Sequence[Any],
    mutation_function: Callable[[Any, float], Any],
    mutation_rate: float
) -> List[Any]:
    """
    Apply the mutation function to every individual, in order.

    The rate is passed through unchecked; GAConfig validates it.

    Args:
        population: Raw individuals (typically fresh offspring)
        mutation_function: mutation_function(individual, mutation_rate) -> individual
        mutation_rate: Probability handed to the mutation function

    Returns:
        List of mutated individuals, same length as population
    """
    return [mutation_function(individual, mutation_rate) for individual in population]
