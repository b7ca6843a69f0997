"""
CLI module for the GA engine.

Handles run configuration loading, validation, and dispatching.
"""

from typing import Any, Dict, Optional
from pathlib import Path

from .config import read_yaml_config
from .errors import ConfigValidationError
from .models import MODEL_NAMES


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config = read_yaml_config(config_path)

    if not isinstance(config, dict):
        raise ConfigValidationError("Run configuration must be a dictionary")

    return config


def validate_run_config(config: Dict[str, Any]) -> None:
    """
    Validate run configuration structure.

    Args:
        config: Run configuration dictionary

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    # Check required fields
    for field in ['model', 'output']:
        if field not in config:
            raise ConfigValidationError(f"Missing required field: '{field}'")

    _validate_model_config(config['model'])

    # Validate output section
    if not isinstance(config['output'], dict):
        raise ConfigValidationError("'output' must be a dictionary")

    if 'root' not in config['output']:
        raise ConfigValidationError("Missing required field: 'output.root'")

    # Validate optional sections
    if 'ga' in config and config['ga'] is not None and not isinstance(config['ga'], dict):
        raise ConfigValidationError("'ga' must be a dictionary")

    if 'ga_config' in config:
        ga_config_path = Path(config['ga_config'])
        if not ga_config_path.exists():
            raise ConfigValidationError(f"GA config file not found: {ga_config_path}")

    if 'random_seed' in config:
        seed = config['random_seed']
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ConfigValidationError(
                f"'random_seed' must be a non-negative integer, got: {seed}"
            )

    if 'report_every' in config:
        every = config['report_every']
        if not isinstance(every, int) or isinstance(every, bool) or every <= 0:
            raise ConfigValidationError(
                f"'report_every' must be a positive integer, got: {every}"
            )


def _validate_model_config(model_config: Any) -> None:
    """
    Validate the model section.

    Args:
        model_config: Value of the 'model' field

    Raises:
        ConfigValidationError: If the model section is invalid
    """
    if not isinstance(model_config, dict):
        raise ConfigValidationError("'model' must be a dictionary")

    if 'name' not in model_config:
        raise ConfigValidationError("Missing required field: 'model.name'")

    name = model_config['name']
    if name not in MODEL_NAMES:
        raise ConfigValidationError(
            f"Invalid model: '{name}'. Must be one of: {', '.join(MODEL_NAMES)}"
        )

    if 'target' not in model_config:
        raise ConfigValidationError("Missing required field: 'model.target'")


def apply_overrides(config: Dict[str, Any], overrides: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """
    Apply command-line overrides to a loaded run configuration.

    Recognized keys: 'random_seed', 'report_every', 'target' (model target),
    'overwrite' and 'plot' (output flags). None values are ignored.

    Returns:
        New configuration dictionary; the input is not modified
    """
    config = dict(config)
    for key, value in (overrides or {}).items():
        if value is None:
            continue
        if key in ('random_seed', 'report_every'):
            config[key] = value
        elif key == 'target':
            config['model'] = {**(config.get('model') or {}), 'target': value}
        elif key in ('overwrite', 'plot'):
            config['output'] = {**(config.get('output') or {}), key: value}
        else:
            raise ConfigValidationError(f"Unknown override: '{key}'")
    return config


def run_from_config(config_path: str, overrides: Optional[Dict[str, Any]] = None):
    """
    Load run configuration and execute the run.

    This is the main entry point called by ga_cli.py.

    Args:
        config_path: Path to run configuration YAML file
        overrides: Optional command-line overrides (see apply_overrides)

    Returns:
        RunResult of the run

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
        InvalidTargetSpec: If the model target is malformed
    """
    print(f"Loading configuration from: {config_path}")
    config = apply_overrides(load_run_config(config_path), overrides)

    print("Validating configuration...")
    validate_run_config(config)

    print(f"Model: {config['model']['name']}\n")

    from .orchestration import run_evolution
    result = run_evolution(config)

    print("\nRun completed successfully!")
    return result
