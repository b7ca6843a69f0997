"""
Crossover for the GA engine.

Produces the next generation's raw offspring from a mating pool by
repeatedly sampling fitness-weighted parent pairs.
"""

from typing import Any, Callable, List, Sequence

from .data_models import EvaluatedIndividual
from .errors import InsufficientPopulation
from .random_source import RandomSource
from .selection import relative_cumulative_fitness, random_unique_indices


def crossover(
    mating_pool: Sequence[EvaluatedIndividual],
    n: int,
    crossover_function: Callable[[Any, Any], Any],
    ascending: bool,
    random_source: RandomSource
) -> List[Any]:
    """
    Create n children by crossing over fitness-weighted parent pairs.

    The pool's fitness table is built once and reused for every pair. Each
    pair consists of two distinct pool members; the crossover function
    receives their raw values, not the evaluated wrappers.

    Args:
        mating_pool: Evaluated individuals eligible to reproduce
        n: Number of children to create
        crossover_function: crossover_function(parent_a, parent_b) -> child
        ascending: True when higher fitness should be sampled more often
        random_source: Source of uniform draws in [0, 1)

    Returns:
        List of n raw (unevaluated) children

    Raises:
        InsufficientPopulation: If the mating pool has fewer than 2 members

    Example:
        pool fitness [1, 2, 3, 4], draws [0.0, 0.2, 0.5, 0.95], n=2
        -> children from parents (pool[0], pool[1]) and (pool[2], pool[3])
    """
    if len(mating_pool) < 2:
        raise InsufficientPopulation(
            f"Crossover needs at least 2 parents, mating pool has {len(mating_pool)}"
        )

    table = relative_cumulative_fitness(mating_pool, ascending)

    children = []
    for _ in range(n):
        # One child per pair; a pair is redrawn for every child.
        index_a, index_b = random_unique_indices(table, 2, random_source)
        children.append(
            crossover_function(mating_pool[index_a].value, mating_pool[index_b].value)
        )

    return children
