"""
Exception types for the GA engine.

Every failure the engine raises on its own is a GeneticAlgorithmError.
Exceptions raised by model callbacks are never wrapped.
"""


class GeneticAlgorithmError(Exception):
    """Base class for all GA engine errors."""
    pass


class InvalidSampleSize(GeneticAlgorithmError, ValueError):
    """Raised when a sample is negative or larger than the population."""
    pass


class InsufficientPopulation(GeneticAlgorithmError, ValueError):
    """Raised when crossover is attempted with fewer than two parents."""
    pass


class EmptyPopulation(GeneticAlgorithmError, ValueError):
    """Raised when selection runs on a population with no individuals."""
    pass


class InvalidPopulationSize(GeneticAlgorithmError, ValueError):
    """Raised when a creation function returns the wrong number of individuals."""
    pass


class InvalidTargetSpec(GeneticAlgorithmError, ValueError):
    """Raised by models when their target/reference value is malformed."""
    pass


class ConfigValidationError(GeneticAlgorithmError, ValueError):
    """Raised when GA or run configuration is invalid."""
    pass
