"""
Population creation and fitness evaluation.
"""

from typing import Any, Callable, List, Optional, Sequence

from .data_models import EvaluatedIndividual
from .errors import InvalidPopulationSize


def initial_population(
    population_size: int,
    creation_function: Callable[[int], Sequence[Any]]
) -> List[Any]:
    """
    Create generation 0 using the model's creation function.

    Args:
        population_size: Number of individuals requested
        creation_function: Callable returning population_size individuals

    Returns:
        List of raw individuals

    Raises:
        InvalidPopulationSize: If the creation function returns a different count
    """
    population = list(creation_function(population_size))
    if len(population) != population_size:
        raise InvalidPopulationSize(
            f"creation function returned {len(population)} individuals, "
            f"expected {population_size}"
        )
    return population


def evaluate_fitness(
    population: Sequence[Any],
    fitness_function: Callable[..., float],
    target_value: Optional[Any] = None
) -> List[EvaluatedIndividual]:
    """
    Pair each individual with its fitness.

    The fitness function is called exactly once per individual, in
    population order. The input sequence is not modified and any exception
    raised by the fitness function propagates unchanged.

    Args:
        population: Raw individuals
        fitness_function: fitness_function(individual[, target_value]) -> number
        target_value: Reference value passed as second argument when given

    Returns:
        List of EvaluatedIndividual in population order
    """
    if target_value is None:
        return [
            EvaluatedIndividual(value=individual, fitness=fitness_function(individual))
            for individual in population
        ]
    return [
        EvaluatedIndividual(
            value=individual,
            fitness=fitness_function(individual, target_value)
        )
        for individual in population
    ]
