"""
Model interface for the GA engine.

A model supplies everything problem-specific: how individuals are created,
scored, combined, perturbed, and when the search is done. The engine only
relies on the GeneticModel protocol; BaseModel is a convenience base for
models that want the default stop behaviour.
"""

from typing import Any, List, Protocol, runtime_checkable


@runtime_checkable
class GeneticModel(Protocol):
    """Operations the engine requires from a model."""

    def creation_function(self, population_size: int) -> List[Any]:
        ...

    def fitness_function(self, individual: Any) -> float:
        ...

    def crossover_function(self, parent_a: Any, parent_b: Any) -> Any:
        ...

    def mutation_function(self, individual: Any, mutation_rate: float) -> Any:
        ...

    def stop_function(self, fitness_value: float) -> bool:
        ...


class BaseModel:
    """
    Base class for models.

    All methods except stop_function must be implemented by subclasses.

    Attributes:
        ascending: Preferred fitness direction (True = higher is better)
    """

    ascending = True

    def stop_function(self, fitness_value: float) -> bool:
        """
        Decide whether to stop the run.

        Called with the fitness of the current generation's fittest
        individual. The default never stops early.
        """
        return False

    def creation_function(self, population_size: int) -> List[Any]:
        """
        Return the initial population.

        Should be varied, usually random, and exactly population_size long.
        """
        raise NotImplementedError("Method 'creation_function()' must be implemented.")

    def fitness_function(self, individual: Any) -> float:
        """Return the fitness of an individual."""
        raise NotImplementedError("Method 'fitness_function()' must be implemented.")

    def crossover_function(self, parent_a: Any, parent_b: Any) -> Any:
        """
        Return a new individual combining two parents.

        Crossing over is how information passes from one generation to the
        next.
        """
        raise NotImplementedError("Method 'crossover_function()' must be implemented.")

    def mutation_function(self, individual: Any, mutation_rate: float) -> Any:
        """
        Return a mutated copy of an individual.

        Mutations add variety and keep the search out of local optima.
        mutation_rate is a probability in [0, 1].
        """
        raise NotImplementedError("Method 'mutation_function()' must be implemented.")
