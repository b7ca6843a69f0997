"""
Visualization utilities for the GA engine.

Plots how fitness evolves across the generations of a run.
"""

from pathlib import Path
from typing import List, Tuple, Union

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from .data_models import GenerationRecord


def plot_fitness_history(
    history: List[GenerationRecord],
    output_path: Union[str, Path],
    ascending: bool = True,
    figsize: Tuple[int, int] = (10, 6)
) -> Path:
    """
    Plot best, mean, and worst fitness per generation and save as PNG.

    Args:
        history: Generation records of a run
        output_path: Path to save PNG file
        ascending: Whether higher fitness is better
        figsize: Figure size (width, height) in inches

    Returns:
        Path to saved PNG file

    Raises:
        ValueError: If history is empty
    """
    if not history:
        raise ValueError("Cannot plot an empty history")

    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    generations = [record.generation for record in history]
    best = [record.best_fitness(ascending) for record in history]
    mean = [record.mean_fitness() for record in history]
    worst = [record.worst_fitness(ascending) for record in history]

    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(generations, best, color="green", linewidth=2, label="Best")
    ax.plot(generations, mean, color="blue", linestyle="--", label="Mean")
    ax.plot(generations, worst, color="red", alpha=0.5, label="Worst")
    ax.fill_between(generations, best, worst, color="gray", alpha=0.1)

    direction = "higher is better" if ascending else "lower is better"
    ax.set_title(f"Fitness by Generation ({direction})")
    ax.set_xlabel("Generation")
    ax.set_ylabel("Fitness")
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    fig.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close(fig)

    return output_path
