#!/usr/bin/env python3
"""
Find-the-Word Example

Demonstrates programmatic use of the GA engine: building a GAConfig,
running genetic_algorithm() with a model and a progress printer, and
inspecting the returned history.
"""

import sys
from pathlib import Path

import numpy as np

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))

from ga_engine import GAConfig, NumpyRandomSource, genetic_algorithm
from ga_engine.models import SentenceModel, WordModel
from ga_engine.reporting import make_progress_printer, print_run_summary


def find_the_word(target="genetic", seed=0):
    """Evolve lowercase words toward target (maximize matching letters)."""
    print("Find the Word Demo")
    print("=" * 50)

    rng = np.random.default_rng(seed)
    model = WordModel(target, rng)
    config = GAConfig(
        population_size=100,
        generations=200,
        mutation_rate=0.05,
        survival_rate=0.2,
        ascending=model.ascending,
        random_seed=seed
    )

    result = genetic_algorithm(
        model,
        logging_function=make_progress_printer(every=10, ascending=config.ascending),
        config=config,
        random_source=NumpyRandomSource(rng)
    )
    print_run_summary(result, config.ascending)
    return result


def find_the_sentence(target="Hello, world!", seed=0):
    """Evolve sentences toward target (minimize normalized edit distance)."""
    print("\nFind the Sentence Demo")
    print("=" * 50)

    rng = np.random.default_rng(seed)
    model = SentenceModel(target, rng)
    config = GAConfig(
        population_size=200,
        generations=300,
        mutation_rate=0.02,
        ascending=model.ascending
    )

    result = genetic_algorithm(
        model,
        logging_function=make_progress_printer(every=25, ascending=config.ascending),
        config=config,
        random_source=NumpyRandomSource(rng)
    )
    print_run_summary(result, config.ascending)

    print("\nBest fitness per generation (every 25th):")
    print("-" * 30)
    for record in result.history[::25]:
        print(f"  {record.generation:4}: {record.best_fitness(config.ascending):.4f}")

    return result


if __name__ == "__main__":
    find_the_word()
    find_the_sentence()

    print("\nDemo completed!")
