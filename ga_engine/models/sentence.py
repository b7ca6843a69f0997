"""
Sentence model.

Evolves random strings toward a target sentence. Not particularly useful,
but a simple, complete example of a model. Fitness is the normalized
Levenshtein distance to the target, so lower is better.
"""

from typing import Any, Dict, List, Optional

import numpy as np

from ..errors import InvalidTargetSpec
from ..model import BaseModel


SENTENCE_CHARACTERS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ .,!?\"'"


def levenshtein_distance(string_1: str, string_2: str) -> float:
    """
    Normalized Levenshtein distance between two strings.

    The edit distance (insertions, deletions, substitutions) is divided by
    the length of the longer string: 0 means identical, and 1 is returned
    when exactly one string is empty.

    Args:
        string_1: First string
        string_2: Second string

    Returns:
        Distance in [0, 1]
    """
    if len(string_1) == 0 and len(string_2) == 0:
        return 0.0
    if len(string_1) == 0 or len(string_2) == 0:
        return 1.0

    rows, cols = len(string_1) + 1, len(string_2) + 1
    matrix = np.zeros((rows, cols), dtype=int)
    matrix[:, 0] = np.arange(rows)
    matrix[0, :] = np.arange(cols)

    for row in range(1, rows):
        for col in range(1, cols):
            if string_1[row - 1] == string_2[col - 1]:
                matrix[row, col] = matrix[row - 1, col - 1]
            else:
                matrix[row, col] = 1 + min(
                    matrix[row - 1, col - 1],  # substitution
                    matrix[row, col - 1],      # insertion
                    matrix[row - 1, col]       # deletion
                )

    return float(matrix[-1, -1]) / max(len(string_1), len(string_2))


class SentenceModel(BaseModel):
    """
    Model that evolves individuals of the form {"sentence": str}.

    Args:
        target_sentence: Sentence to evolve toward
        rng: Random number generator for creation, crossover, and mutation

    Raises:
        InvalidTargetSpec: If the target sentence is not a valid string
    """

    ascending = False

    def __init__(self, target_sentence: str, rng: Optional[np.random.Generator] = None):
        self.characters = SENTENCE_CHARACTERS
        self.validate_target_sentence(target_sentence)
        self.target_sentence = target_sentence
        self.rng = rng if rng is not None else np.random.default_rng()

    def stop_function(self, fitness_value: float) -> bool:
        """Stop on a perfect match (distance 0)."""
        return fitness_value == 0

    def creation_function(self, population_size: int) -> List[Dict[str, Any]]:
        """
        Create random sentences of variable length.

        Lengths are drawn from [floor(0.5 * L), floor(2 * L)) where L is the
        target length.
        """
        min_length = int(len(self.target_sentence) * 0.5)
        max_length = int(len(self.target_sentence) * 2)
        population = []
        for _ in range(population_size):
            length = int(self.rng.integers(min_length, max_length))
            sentence = "".join(self.random_character() for _ in range(length))
            population.append({"sentence": sentence})
        return population

    def fitness_function(self, individual: Dict[str, Any]) -> float:
        return levenshtein_distance(individual["sentence"], self.target_sentence)

    def crossover_function(
        self,
        parent_1: Dict[str, Any],
        parent_2: Dict[str, Any]
    ) -> Dict[str, Any]:
        """
        Join a prefix of parent 1 with a suffix of parent 2.

        Each parent gets its own random split point, e.g. "hello" split at 4
        and "elephant" split at 6 give "hell" + "nt" -> "hellnt".
        """
        sentence_1 = parent_1["sentence"]
        sentence_2 = parent_2["sentence"]
        split_1 = int(self.rng.random() * len(sentence_1))
        split_2 = int(self.rng.random() * len(sentence_2))
        return {"sentence": sentence_1[:split_1] + sentence_2[split_2:]}

    def mutation_function(
        self,
        individual: Dict[str, Any],
        mutation_rate: float
    ) -> Dict[str, Any]:
        """
        Replace each character with a random one with probability mutation_rate.

        The chance that a sentence of length L changes at all is
        1 - (1 - mutation_rate) ** L.
        """
        characters = [
            self.random_character() if self.rng.random() < mutation_rate else character
            for character in individual["sentence"]
        ]
        return {"sentence": "".join(characters)}

    def validate_target_sentence(self, target_sentence: Any) -> None:
        """
        Raise InvalidTargetSpec unless target_sentence is a usable sentence.

        Raises:
            InvalidTargetSpec: If not a string, empty, or containing
                characters outside the model's alphabet
        """
        if not isinstance(target_sentence, str):
            raise InvalidTargetSpec("target sentence must be a string")
        if len(target_sentence) == 0:
            raise InvalidTargetSpec("target sentence must be non-empty")
        if any(character not in self.characters for character in target_sentence):
            raise InvalidTargetSpec(
                f"target sentence must only contain the characters: {self.characters}"
            )

    def random_character(self) -> str:
        return self.characters[int(self.rng.integers(len(self.characters)))]
