"""
Example models for the GA engine.

- sentence: evolve a sentence toward a target (normalized Levenshtein, minimize)
- word: evolve a fixed-length word toward a target (matching letters, maximize)
"""

from typing import Optional

import numpy as np

from ..errors import ConfigValidationError
from .sentence import SentenceModel, levenshtein_distance
from .word import WordModel, correct_characters


MODEL_NAMES = ['sentence', 'word']


def create_model(name: str, target: str, rng: Optional[np.random.Generator] = None):
    """
    Create an example model by name.

    Args:
        name: 'sentence' or 'word'
        target: Target sentence or word
        rng: Random number generator handed to the model

    Returns:
        Model instance

    Raises:
        ConfigValidationError: If the model name is unknown
        InvalidTargetSpec: If the target is malformed for that model
    """
    if name == 'sentence':
        return SentenceModel(target, rng)
    elif name == 'word':
        return WordModel(target, rng)
    raise ConfigValidationError(
        f"Unknown model: '{name}'. Must be one of: {', '.join(MODEL_NAMES)}"
    )


__all__ = [
    "MODEL_NAMES",
    "SentenceModel",
    "WordModel",
    "create_model",
    "correct_characters",
    "levenshtein_distance",
]
