"""
Orchestration module for the GA engine.

Implements the generational evolution loop and the configured run used by
the command-line interface.
"""

from typing import Any, Callable, Dict, List, Optional
import numpy as np

from .config import DEFAULT_GA_CONFIG_PATH, GAConfig, read_yaml_config
from .crossover import crossover
from .data_models import GenerationRecord, RunResult
from .evaluation import evaluate_fitness, initial_population
from .io_utils import create_output_dir, save_fittest_yaml, save_history_csv
from .model import GeneticModel
from .models import create_model
from .mutation import mutate
from .random_source import NumpyRandomSource, RandomSource
from .reporting import make_progress_printer, print_run_summary
from .selection import fittest_individual, weighted_sample_without_replacement


def _no_logging(history: List[GenerationRecord]) -> None:
    pass


def _never_stop(fitness_value: float) -> bool:
    return False


def genetic_algorithm(
    model: GeneticModel,
    logging_function: Optional[Callable[[List[GenerationRecord]], None]] = None,
    config: Optional[GAConfig] = None,
    random_source: Optional[RandomSource] = None,
    target_value: Optional[Any] = None
) -> RunResult:
    """
    Evolve a population until the model's stop condition or the generation cap.

    Each iteration evaluates the current population, records it in the
    history, and checks the stop condition; if the run continues, a mating
    pool is sampled by fitness, crossed over into the next generation's
    children, and the children are mutated.

    Args:
        model: Object providing creation/fitness/crossover/mutation/stop functions
        logging_function: Called with the full history after every evaluation
        config: Run parameters (GAConfig defaults if omitted)
        random_source: Source of uniform draws for sampling; defaults to a
            NumpyRandomSource seeded from config.random_seed
        target_value: Optional reference value passed to the fitness function

    Returns:
        RunResult with the history and the final generation's fittest individual

    Raises:
        InvalidPopulationSize: If the model creates the wrong number of individuals
        InsufficientPopulation: If a mating pool ends up with fewer than 2
            members (GAConfig rejects rates that would cause this)
        Any exception raised by the model's functions, unchanged
    """
    config = config or GAConfig()
    if random_source is None:
        random_source = NumpyRandomSource.from_seed(config.random_seed)
    logging_function = logging_function or _no_logging
    stop_function = getattr(model, 'stop_function', None) or _never_stop
    ascending = config.ascending

    history: List[GenerationRecord] = []
    population = initial_population(config.population_size, model.creation_function)
    generation = 0

    while True:
        # Evaluate and record
        evaluated = evaluate_fitness(population, model.fitness_function, target_value)
        history.append(GenerationRecord(generation=generation, population=evaluated))
        logging_function(history)

        # Check stop condition
        fittest = fittest_individual(evaluated, ascending)
        stopped_early = bool(stop_function(fittest.fitness))
        generation += 1
        if stopped_early or generation >= config.generations:
            break

        # Select, reproduce, mutate
        mating_pool = weighted_sample_without_replacement(
            evaluated, config.survivor_count, ascending, random_source
        )
        children = crossover(
            mating_pool, config.offspring_count, model.crossover_function,
            ascending, random_source
        )
        population = mutate(children, model.mutation_function, config.mutation_rate)

    return RunResult(history=history, fittest=fittest, stopped_early=stopped_early)


def build_ga_config(run_config: Dict, model: Any, seed: int) -> GAConfig:
    """
    Assemble the GAConfig for a configured run.

    Precedence, lowest to highest: the GA config file, the run config's
    'ga' overrides, and the resolved random seed. When neither source sets
    'ascending', the model's preferred direction is used.

    Args:
        run_config: Run configuration dict from YAML
        model: Model instance (may define 'ascending')
        seed: Resolved random seed

    Returns:
        Validated GAConfig
    """
    ga_config_path = run_config.get('ga_config', DEFAULT_GA_CONFIG_PATH)
    ga_settings = dict(read_yaml_config(ga_config_path))
    ga_settings.update(run_config.get('ga') or {})
    ga_settings.setdefault('ascending', getattr(model, 'ascending', True))
    ga_settings['random_seed'] = seed
    return GAConfig.from_dict(ga_settings)


def run_evolution(run_config: Dict) -> RunResult:
    """
    Run a model end to end from a run configuration.

    Args:
        run_config: Run configuration dict from YAML

    Algorithm:
        1. Resolve the random seed (run config, then GA config, then random)
        2. Create the model from run_config['model']
        3. Build the GAConfig (file + overrides + model direction)
        4. Create output directory: run_config['output']['root']
        5. Run genetic_algorithm() with a progress printer
        6. Save history.csv and fittest.yaml (and fitness.png if requested)
        7. Print summary report

    Returns:
        RunResult of the run
    """
    print("=" * 70)
    print("GENETIC ALGORITHM")
    print("=" * 70)

    ga_config_path = run_config.get('ga_config', DEFAULT_GA_CONFIG_PATH)
    print(f"Loading GA config from: {ga_config_path}")
    file_seed = read_yaml_config(ga_config_path).get('random_seed')

    # Setup RNG
    seed = run_config.get('random_seed', file_seed)
    if seed is None:
        seed = int(np.random.randint(0, 2**31))
    print(f"Random seed: {seed}")
    rng = np.random.default_rng(seed)

    # Create model
    model_config = run_config['model']
    model = create_model(model_config['name'], model_config['target'], rng)
    print(f"Model: {model_config['name']} (target: {model_config['target']!r})")

    config = build_ga_config(run_config, model, seed)
    print(
        f"Population: {config.population_size}, generations: {config.generations}, "
        f"mutation rate: {config.mutation_rate}, "
        f"direction: {'ascending' if config.ascending else 'descending'}"
    )

    # Create output directory
    output_config = run_config['output']
    overwrite = output_config.get('overwrite', False)
    output_root = create_output_dir(output_config['root'], overwrite=overwrite)
    print(f"Output directory: {output_root}\n")

    # Evolve
    logging_function = make_progress_printer(
        every=run_config.get('report_every', 10), ascending=config.ascending
    )
    result = genetic_algorithm(
        model,
        logging_function=logging_function,
        config=config,
        random_source=NumpyRandomSource(rng)
    )

    # Save outputs
    history_path = save_history_csv(
        result.history, output_root / 'history.csv', config.ascending, overwrite=overwrite
    )
    fittest_path = save_fittest_yaml(result, output_root / 'fittest.yaml', overwrite=overwrite)
    plot_path = None
    if output_config.get('plot', False):
        from .visualization_utils import plot_fitness_history
        plot_path = plot_fitness_history(
            result.history, output_root / 'fitness.png', config.ascending
        )

    print_run_summary(result, config.ascending)
    print(f"History: {history_path}")
    print(f"Fittest: {fittest_path}")
    if plot_path is not None:
        print(f"Plot: {plot_path}")

    return result
