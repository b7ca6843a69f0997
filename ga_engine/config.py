"""
GA configuration.

Loads YAML configuration files and converts them into an immutable
GAConfig that is validated once, at construction.
"""

import math
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigValidationError


DEFAULT_GA_CONFIG_PATH = Path(__file__).parent / "ga_config.yaml"


@dataclass(frozen=True)
class GAConfig:
    """
    Run parameters for genetic_algorithm().

    Attributes:
        population_size: Number of individuals in generation 0
        generations: Maximum number of generations to evaluate
        mutation_rate: Probability handed to the model's mutation function
        survival_rate: Fraction of the population sampled into the mating pool
        reproduction_rate: Children produced per configured individual
        ascending: True when higher fitness is better
        random_seed: Seed for the default random source (None for entropy)
    """
    population_size: int = 100
    generations: int = 100
    mutation_rate: float = 0.01
    survival_rate: float = 0.2
    reproduction_rate: float = 1.0
    ascending: bool = True
    random_seed: Optional[int] = None

    def __post_init__(self):
        """Validate all parameters."""
        if not _is_int(self.population_size) or self.population_size <= 0:
            raise ConfigValidationError(
                f"'population_size' must be a positive integer, got: {self.population_size}"
            )
        if not _is_int(self.generations) or self.generations <= 0:
            raise ConfigValidationError(
                f"'generations' must be a positive integer, got: {self.generations}"
            )
        if not _is_number(self.mutation_rate) or not 0.0 <= self.mutation_rate <= 1.0:
            raise ConfigValidationError(
                f"'mutation_rate' must be between 0 and 1, got: {self.mutation_rate}"
            )
        if not _is_number(self.survival_rate) or not 0.0 < self.survival_rate <= 1.0:
            raise ConfigValidationError(
                f"'survival_rate' must be in (0, 1], got: {self.survival_rate}"
            )
        if not _is_number(self.reproduction_rate) or self.reproduction_rate <= 0:
            raise ConfigValidationError(
                f"'reproduction_rate' must be positive, got: {self.reproduction_rate}"
            )
        if not isinstance(self.ascending, bool):
            raise ConfigValidationError(
                f"'ascending' must be true or false, got: {self.ascending}"
            )
        if self.random_seed is not None and (not _is_int(self.random_seed) or self.random_seed < 0):
            raise ConfigValidationError(
                f"'random_seed' must be a non-negative integer, got: {self.random_seed}"
            )

        # Rates only interact once a generation reproduces.
        if self.generations > 1:
            self._validate_reproduction_sizes()

    def _validate_reproduction_sizes(self):
        """
        Check that every generation after the first can be sampled and bred.

        The mating pool needs at least 2 members, each generation after the
        first holds offspring_count individuals, and the next mating pool is
        drawn from those without replacement.
        """
        if self.survivor_count < 2:
            raise ConfigValidationError(
                f"survival_rate {self.survival_rate} leaves {self.survivor_count} "
                f"survivor(s) from {self.population_size}; crossover needs at least 2"
            )
        if self.offspring_count < 2:
            raise ConfigValidationError(
                f"reproduction_rate {self.reproduction_rate} leaves {self.offspring_count} "
                f"offspring from {self.population_size}; at least 2 are needed"
            )
        if self.offspring_count < self.survivor_count:
            raise ConfigValidationError(
                f"reproduction_rate {self.reproduction_rate} gives {self.offspring_count} "
                f"offspring, fewer than the {self.survivor_count} survivors sampled "
                f"from each generation"
            )

    @property
    def survivor_count(self) -> int:
        """Size of the mating pool drawn each generation."""
        return math.floor(self.population_size * self.survival_rate)

    @property
    def offspring_count(self) -> int:
        """Number of children produced by crossover each generation."""
        return math.floor(self.population_size * self.reproduction_rate)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "GAConfig":
        """
        Build a GAConfig from a plain dictionary (e.g. parsed YAML).

        Missing keys take their defaults.

        Raises:
            ConfigValidationError: On unknown keys or invalid values
        """
        data = data or {}
        if not isinstance(data, dict):
            raise ConfigValidationError("GA configuration must be a dictionary")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(
                f"Unknown GA configuration field(s): {', '.join(unknown)}"
            )
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def replace(self, **overrides) -> "GAConfig":
        """Return a copy with some fields overridden (validated again)."""
        data = self.to_dict()
        data.update(overrides)
        return self.from_dict(data)


def read_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a YAML configuration file into a dictionary.

    Args:
        config_path: Path to configuration YAML file

    Returns:
        Parsed configuration dictionary

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If YAML is malformed or the file is empty
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if data is None:
        raise ConfigValidationError(f"Configuration file is empty: {config_path}")

    return data


def load_ga_config(config_path: Union[str, Path] = DEFAULT_GA_CONFIG_PATH) -> GAConfig:
    """
    Load a validated GAConfig from a YAML file.

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If YAML is malformed, empty, or invalid
    """
    return GAConfig.from_dict(read_yaml_config(config_path))


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)
