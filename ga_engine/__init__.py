"""
Generational Genetic Algorithm Engine

This package evolves a population of candidate solutions through
fitness-weighted selection, crossover, and mutation. It knows nothing about
the problem being solved: a model supplies creation, fitness, crossover,
mutation, and stop functions.

Key Features:
- Roulette-wheel sampling without replacement
- Maximization or minimization (ascending / descending fitness)
- Handles negative and zero fitness values
- Injectable random source for deterministic runs
- YAML-driven command-line runs with CSV/YAML/PNG outputs

Modules:
- data_models: Core data structures (EvaluatedIndividual, GenerationRecord, RunResult)
- config: GAConfig and YAML configuration loading
- errors: Exception types
- random_source: RandomSource protocol and implementations
- evaluation: Initial population and fitness evaluation
- selection: Cumulative fitness table, weighted sampling, fittest lookup
- crossover: Offspring generation from a mating pool
- mutation: Mutation application
- model: GeneticModel protocol and BaseModel
- models: Example sentence and word models
- orchestration: Evolution loop and configured runs
- reporting: Console progress and summaries
- io_utils: History CSV, fittest YAML, output folders
- visualization_utils: Fitness-history plots
- cli: Run configuration loading, validation, and dispatch
"""

__version__ = "0.1.0"

from .config import GAConfig, load_ga_config
from .data_models import EvaluatedIndividual, GenerationRecord, RunResult
from .errors import (
    GeneticAlgorithmError,
    InvalidSampleSize,
    InsufficientPopulation,
    EmptyPopulation,
    InvalidPopulationSize,
    InvalidTargetSpec,
    ConfigValidationError,
)
from .model import BaseModel, GeneticModel
from .orchestration import genetic_algorithm
from .random_source import NumpyRandomSource, RandomSource, SequenceRandomSource

__all__ = [
    "GAConfig",
    "load_ga_config",
    "EvaluatedIndividual",
    "GenerationRecord",
    "RunResult",
    "GeneticAlgorithmError",
    "InvalidSampleSize",
    "InsufficientPopulation",
    "EmptyPopulation",
    "InvalidPopulationSize",
    "InvalidTargetSpec",
    "ConfigValidationError",
    "BaseModel",
    "GeneticModel",
    "genetic_algorithm",
    "NumpyRandomSource",
    "RandomSource",
    "SequenceRandomSource",
]
