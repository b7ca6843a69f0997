"""
Data models for the GA engine.

Core data structures representing evaluated individuals, generation
snapshots, and the result of a complete run.
"""

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class EvaluatedIndividual:
    """
    A raw individual paired with its computed fitness.

    Only evaluate_fitness() creates these, so anything reaching selection
    or sampling is guaranteed to carry a fitness value.

    Attributes:
        value: The caller-defined individual (opaque to the engine)
        fitness: Numeric fitness score returned by the model
    """
    value: Any
    fitness: float


@dataclass
class GenerationRecord:
    """
    Snapshot of one generation's evaluated population.

    Attributes:
        generation: Zero-based generation number
        population: Evaluated individuals in population order
    """
    generation: int
    population: tuple[EvaluatedIndividual, ...]

    def __post_init__(self):
        """Freeze the population so the record cannot drift after logging."""
        if not isinstance(self.population, tuple):
            self.population = tuple(self.population)

    def __len__(self) -> int:
        """Number of individuals in this generation."""
        return len(self.population)

    def fitness_values(self) -> list[float]:
        """Fitness values in population order."""
        return [individual.fitness for individual in self.population]

    def best_fitness(self, ascending: bool = True) -> float:
        """Highest fitness when ascending, lowest otherwise."""
        values = self.fitness_values()
        return max(values) if ascending else min(values)

    def worst_fitness(self, ascending: bool = True) -> float:
        """Lowest fitness when ascending, highest otherwise."""
        values = self.fitness_values()
        return min(values) if ascending else max(values)

    def mean_fitness(self) -> float:
        values = self.fitness_values()
        return sum(values) / len(values)

    def to_dict(self, ascending: bool = True) -> dict[str, Any]:
        """
        Summarize this generation for CSV export.

        Args:
            ascending: Whether higher fitness is better

        Returns:
            Dictionary with string-serializable values
        """
        values = self.fitness_values()
        best = max(values) if ascending else min(values)
        fittest = self.population[values.index(best)]
        return {
            "generation": self.generation,
            "population_size": len(self.population),
            "best_fitness": best,
            "mean_fitness": self.mean_fitness(),
            "worst_fitness": self.worst_fitness(ascending),
            "fittest": repr(fittest.value),
        }


@dataclass
class RunResult:
    """
    Outcome of a genetic algorithm run.

    Attributes:
        history: One GenerationRecord per evaluated generation
        fittest: Fittest individual of the final generation
        stopped_early: True when the model's stop predicate ended the run
    """
    history: list[GenerationRecord] = field(default_factory=list)
    fittest: Optional[EvaluatedIndividual] = None
    stopped_early: bool = False

    @property
    def generations_run(self) -> int:
        """Number of generations that were evaluated."""
        return len(self.history)
