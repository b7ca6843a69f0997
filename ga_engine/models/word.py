"""
Find-the-word model.

Evolves fixed-length lowercase words toward a target word. Fitness is the
number of positions that already hold the right letter, so higher is
better and the maximum equals the word length.
"""

import string
from typing import Any, Dict, List, Optional

import numpy as np

from ..errors import InvalidTargetSpec
from ..model import BaseModel


WORD_CHARACTERS = string.ascii_lowercase


def correct_characters(word: str, target: str) -> int:
    """Count positions where word and target hold the same character."""
    return sum(1 for a, b in zip(word, target) if a == b)


class WordModel(BaseModel):
    """
    Model that evolves individuals of the form {"word": str}.

    Args:
        target_word: Lowercase word to evolve toward
        rng: Random number generator for creation, crossover, and mutation

    Raises:
        InvalidTargetSpec: If the target is not a non-empty lowercase word
    """

    ascending = True

    def __init__(self, target_word: str, rng: Optional[np.random.Generator] = None):
        if not isinstance(target_word, str):
            raise InvalidTargetSpec("target word must be a string")
        if not target_word:
            raise InvalidTargetSpec("target word must be non-empty")
        if any(character not in WORD_CHARACTERS for character in target_word):
            raise InvalidTargetSpec("target word must only contain lowercase letters a-z")

        self.target_word = target_word
        self.rng = rng if rng is not None else np.random.default_rng()

    @property
    def max_fitness(self) -> int:
        return len(self.target_word)

    def stop_function(self, fitness_value: float) -> bool:
        return fitness_value == self.max_fitness

    def creation_function(self, population_size: int) -> List[Dict[str, Any]]:
        return [
            {"word": self.random_word(len(self.target_word))}
            for _ in range(population_size)
        ]

    def fitness_function(self, individual: Dict[str, Any]) -> int:
        return correct_characters(individual["word"], self.target_word)

    def crossover_function(
        self,
        parent_1: Dict[str, Any],
        parent_2: Dict[str, Any]
    ) -> Dict[str, Any]:
        """Single-point crossover at a shared random split."""
        split = int(self.rng.integers(0, len(self.target_word) + 1))
        return {"word": parent_1["word"][:split] + parent_2["word"][split:]}

    def mutation_function(
        self,
        individual: Dict[str, Any],
        mutation_rate: float
    ) -> Dict[str, Any]:
        letters = [
            self.random_character() if self.rng.random() < mutation_rate else letter
            for letter in individual["word"]
        ]
        return {"word": "".join(letters)}

    def random_character(self) -> str:
        return WORD_CHARACTERS[int(self.rng.integers(len(WORD_CHARACTERS)))]

    def random_word(self, length: int) -> str:
        return "".join(self.random_character() for _ in range(length))
