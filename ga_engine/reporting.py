"""
Console reporting for GA runs.

Provides the progress-printing logging collaborator handed to
genetic_algorithm() and the end-of-run summary block.
"""

from typing import Callable, List

from .data_models import GenerationRecord, RunResult


def format_generation(record: GenerationRecord, ascending: bool = True) -> str:
    """
    Format a one-line summary of a generation.

    Args:
        record: Generation to summarize
        ascending: Whether higher fitness is better

    Returns:
        Line such as "Generation 3: best=0.1250 mean=0.4100 fittest={'word': 'cat'}"
    """
    summary = record.to_dict(ascending)
    return (
        f"Generation {summary['generation']}: "
        f"best={summary['best_fitness']:.4f} "
        f"mean={summary['mean_fitness']:.4f} "
        f"fittest={summary['fittest']}"
    )


def make_progress_printer(
    every: int = 1,
    ascending: bool = True
) -> Callable[[List[GenerationRecord]], None]:
    """
    Create a logging function that prints progress every N generations.

    The first generation is always printed.

    Args:
        every: Print interval in generations
        ascending: Whether higher fitness is better

    Returns:
        logging_function(history) suitable for genetic_algorithm()
    """
    if every < 1:
        raise ValueError(f"'every' must be at least 1, got: {every}")

    def print_progress(history: List[GenerationRecord]) -> None:
        record = history[-1]
        if record.generation % every == 0:
            print(f"  {format_generation(record, ascending)}")

    return print_progress


def print_run_summary(result: RunResult, ascending: bool = True) -> None:
    """Print the summary block for a finished run."""
    print()
    print("=" * 70)
    print("SUMMARY")
    print("=" * 70)
    print(f"Generations run: {result.generations_run}")
    if result.stopped_early:
        print("Stopped early: stop condition reached")
    else:
        print("Stopped at generation cap")
    if result.history:
        first = result.history[0].best_fitness(ascending)
        last = result.history[-1].best_fitness(ascending)
        print(f"Best fitness: {first:.4f} -> {last:.4f}")
    print(f"Fittest fitness: {result.fittest.fitness}")
    print(f"Fittest individual: {result.fittest.value!r}")
