"""
I/O utilities for the GA engine.

Handles output folder management, per-generation history export, and
fittest-individual serialization.
"""

import csv
from datetime import datetime
from pathlib import Path
from typing import Union

import yaml

from .data_models import GenerationRecord, RunResult


HISTORY_FIELDNAMES = [
    'generation', 'population_size', 'best_fitness',
    'mean_fitness', 'worst_fitness', 'fittest'
]


def create_output_dir(root: Union[str, Path], overwrite: bool = False) -> Path:
    """
    Create the output directory for a run.

    Args:
        root: Output directory
        overwrite: If True, reuse an existing directory

    Returns:
        Path to the output directory

    Raises:
        FileExistsError: If the directory exists and overwrite=False
    """
    root = Path(root)

    if root.exists() and not overwrite:
        raise FileExistsError(
            f"Output directory already exists: {root}\n"
            f"Set 'output.overwrite: true' in config to overwrite"
        )

    root.mkdir(parents=True, exist_ok=overwrite)
    return root


def save_history_csv(
    history: list[GenerationRecord],
    output_path: Union[str, Path],
    ascending: bool = True,
    overwrite: bool = False
) -> Path:
    """
    Save one summary row per generation to a CSV file.

    CSV format:
        generation,population_size,best_fitness,mean_fitness,worst_fitness,fittest
        0,100,0.8125,0.9410,1.0,{'sentence': 'Hxllo'}
        ...

    Args:
        history: Generation records of a run
        output_path: Path for output CSV
        ascending: Whether higher fitness is better
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved CSV file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"History file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=HISTORY_FIELDNAMES)
        writer.writeheader()

        for record in history:
            writer.writerow(record.to_dict(ascending))

    return output_path


def save_fittest_yaml(
    result: RunResult,
    output_path: Union[str, Path],
    overwrite: bool = False
) -> Path:
    """
    Save the fittest individual of a run to a YAML file.

    Args:
        result: Finished run
        output_path: Path for output YAML
        overwrite: If True, overwrite existing file

    Returns:
        Path to saved YAML file

    Raises:
        FileExistsError: If file exists and overwrite=False
    """
    output_path = Path(output_path)

    if output_path.exists() and not overwrite:
        raise FileExistsError(f"Output file already exists: {output_path}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    fitness = result.fittest.fitness
    data = {
        'fitness': fitness.item() if hasattr(fitness, 'item') else fitness,
        'generations_run': result.generations_run,
        'stopped_early': result.stopped_early,
        'value': result.fittest.value,
        'saved_at': datetime.now().isoformat(),
    }

    with open(output_path, 'w') as f:
        yaml.safe_dump(data, f, sort_keys=False)

    return output_path
